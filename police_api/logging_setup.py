"""
Opt-in log output for the client's own loggers.

Everything the package logs goes through loggers under ``police_api``; the
dispatcher attaches ``endpoint``, ``status`` and ``duration_ms`` to each
request record. ``configure_logging`` hangs handlers on that one logger and
leaves the root logger, and any handlers the application installed there,
alone.
"""
import json, logging, sys, time
from logging.handlers import RotatingFileHandler

from concurrent_log_handler import ConcurrentRotatingFileHandler

from .config import load_settings

PACKAGE_LOGGER = "police_api"
_OWNED = "_police_api_owned"

# Fields the dispatcher passes via extra=...
REQUEST_FIELDS = ("endpoint", "params", "status", "duration_ms")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with request fields when the record has them."""
    converter = time.gmtime

    def __init__(self, *, static_fields=None):
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%SZ"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in REQUEST_FIELDS:
            if hasattr(record, name):
                line[name] = getattr(record, name)
        line.update(self.static_fields)
        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)-8.8s] [%(name)s] %(message)s")


def _level(val: str | int | None) -> int:
    if isinstance(val, int):
        return val
    name = (val or load_settings().log_level).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(
    level: str | int | None = None,
    *,
    stream=None,
    json_lines: bool = True,
    filename: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    use_concurrent_file_handler: bool = True,
    static_fields: dict | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Route ``police_api`` records to a stream (stderr by default) and,
    optionally, a rotating file. Level comes from ``level`` or LOG_LEVEL.
    Calling it again replaces the handlers it added earlier; handlers put on
    the logger by anyone else are kept.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(h)
        h.close()

    lvl = _level(level)
    formatter = JsonFormatter(static_fields=static_fields) if json_lines else TextFormatter()

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stderr)]
    if filename:
        # multi-process safe rotation unless the caller opts out
        handler_cls = ConcurrentRotatingFileHandler if use_concurrent_file_handler else RotatingFileHandler
        handlers.append(handler_cls(filename, maxBytes=max_bytes, backupCount=backup_count))

    for h in handlers:
        setattr(h, _OWNED, True)
        h.setLevel(lvl)
        h.setFormatter(formatter)
        logger.addHandler(h)

    logger.setLevel(lvl)
    logger.propagate = propagate
    return logger
