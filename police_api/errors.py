"""Error taxonomy for Police API calls."""

from __future__ import annotations


class PoliceApiError(Exception):
    """Base class for every failure raised by the client."""

    error_code = "POLICE_API_ERROR"


class InvalidInputError(PoliceApiError):
    """A caller-supplied value failed a local check; nothing was sent."""

    error_code = "INVALID_INPUT"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class TransportError(PoliceApiError):
    """The request could not be sent or no response came back."""

    error_code = "TRANSPORT_ERROR"

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(f"Request to {path} failed: {cause}")
        self.path = path
        self.cause = cause


class NotFoundError(PoliceApiError):
    """The API answered 404 for the requested resource."""

    error_code = "NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"Not found: {path}")
        self.path = path


class HttpError(PoliceApiError):
    """Any other non-2xx response."""

    error_code = "HTTP_ERROR"

    def __init__(self, status: int, body: str | None = None, path: str | None = None) -> None:
        message = f"HTTP {status} from {path or 'API'}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)
        self.status = status
        self.body = body
        self.path = path


class DecodeError(PoliceApiError):
    """A 2xx body that is not valid JSON or does not fit the expected shape."""

    error_code = "DECODE_ERROR"

    def __init__(self, path: str, body: str, cause: BaseException) -> None:
        super().__init__(f"Could not decode response from {path}: {cause}")
        self.path = path
        self.body = body
        self.cause = cause
