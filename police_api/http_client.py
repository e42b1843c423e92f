from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Mapping, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, HttpError, NotFoundError, TransportError
from .metrics import observe_call

logger = logging.getLogger(__name__)

_HEADERS = {"Accept": "application/json"}
_BODY_SNIPPET = 500


@dataclass(frozen=True)
class Endpoint:
    """One call: relative path (already substituted), query params, expected shape."""
    path: str
    shape: Any
    params: Mapping[str, Optional[str]] = field(default_factory=dict)
    name: str = ""

    def query(self) -> dict:
        # None means "not set": the parameter is left out entirely
        return {k: v for k, v in self.params.items() if v is not None}


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def build_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def dispatch(session, base_url: str, endpoint: Endpoint, *, timeout: float | None = None):
    """
    Single GET against the API, no retries.
    Returns the body validated as endpoint.shape, or raises one of
    TransportError / NotFoundError / HttpError / DecodeError.
    """
    url = build_url(base_url, endpoint.path)
    params = endpoint.query()
    label = endpoint.name or endpoint.path
    kwargs = {"params": params, "headers": _HEADERS}
    if timeout is not None:
        kwargs["timeout"] = timeout

    start = time.time()
    try:
        resp = session.get(url, **kwargs)
    except requests.RequestException as e:
        observe_call(label, "exception", time.time() - start)
        raise TransportError(endpoint.path, e) from e
    duration = time.time() - start
    observe_call(label, str(resp.status_code), duration)
    logger.debug(
        "GET %s -> %s", url, resp.status_code,
        extra={"endpoint": label, "params": params, "status": resp.status_code,
               "duration_ms": round(duration * 1000, 1)},
    )

    status = resp.status_code
    if status == 404:
        raise NotFoundError(endpoint.path)
    if not 200 <= status < 300:
        raise HttpError(status, resp.text or None, endpoint.path)

    try:
        payload = resp.json()
    except ValueError as e:
        raise DecodeError(endpoint.path, resp.text[:_BODY_SNIPPET], e) from e
    try:
        return _adapter(endpoint.shape).validate_python(payload)
    except ValidationError as e:
        raise DecodeError(endpoint.path, resp.text[:_BODY_SNIPPET], e) from e
