"""
Central error mapping.

Single source of truth for turning an internal error into the
(HTTP status, public label) pair the client sees. Labels are symbolic
names only; messages and identifiers stay in the server log.
"""

from enum import Enum

from app.domain.tickets.errors import (
    AuthFailCtxNotInRequestExtError,
    AuthFailNoAuthTokenCookieError,
    AuthFailTokenWrongFormatError,
    LoginFailError,
    TicketDeleteFailIdNotFoundError,
)

HTTP_401 = 401
HTTP_404 = 404
HTTP_422 = 422
HTTP_429 = 429
HTTP_500 = 500


class ClientError(str, Enum):
    """Public error labels returned in the ``error.type`` field."""

    LOGIN_FAIL = "LoginFail"
    NO_AUTH_TOKEN_COOKIE = "AuthFailNoAuthTokenCookie"
    TOKEN_WRONG_FORMAT = "AuthFailTokenWrongFormat"
    CTX_NOT_IN_REQUEST = "AuthFailCtxNotInRequestExt"
    TICKET_NOT_FOUND = "TicketDeleteFailIdNotFound"
    INVALID_PARAMS = "InvalidParams"
    RATE_LIMITED = "RateLimitExceeded"
    SERVICE_ERROR = "ServiceError"


class InvalidParamsError(Exception):
    """Raised when a request body, path or query fails validation."""

    def __init__(self, errors: list) -> None:
        super().__init__("Invalid request parameters")
        self.errors = errors

    @property
    def error_data(self) -> dict:
        return {"fields": [".".join(str(loc) for loc in e["loc"]) for e in self.errors]}


class RateLimitedError(Exception):
    """Raised when a client exceeds the rate limit of a route."""

    def __init__(self, limit: str) -> None:
        super().__init__(f"Rate limit exceeded: {limit}")
        self.limit = limit

    @property
    def error_data(self) -> dict:
        return {"limit": self.limit}


_ERROR_MAP: dict[type, tuple[int, ClientError]] = {
    LoginFailError: (HTTP_401, ClientError.LOGIN_FAIL),
    AuthFailNoAuthTokenCookieError: (HTTP_401, ClientError.NO_AUTH_TOKEN_COOKIE),
    AuthFailTokenWrongFormatError: (HTTP_401, ClientError.TOKEN_WRONG_FORMAT),
    AuthFailCtxNotInRequestExtError: (HTTP_401, ClientError.CTX_NOT_IN_REQUEST),
    TicketDeleteFailIdNotFoundError: (HTTP_404, ClientError.TICKET_NOT_FOUND),
    InvalidParamsError: (HTTP_422, ClientError.INVALID_PARAMS),
    RateLimitedError: (HTTP_429, ClientError.RATE_LIMITED),
}


def client_status_and_error(error: BaseException) -> tuple[int, ClientError]:
    """Map an internal error to its HTTP status and public label.

    The most specific registered class in the error's MRO wins.
    Anything unregistered is a 500 ``ServiceError``.

    Args:
        error: The error attached to the response.

    Returns:
        A ``(status_code, client_error)`` pair.
    """
    for cls in type(error).__mro__:
        if cls in _ERROR_MAP:
            return _ERROR_MAP[cls]
    return HTTP_500, ClientError.SERVICE_ERROR


def error_data(error: BaseException) -> dict:
    """Return the structured log details an error exposes, if any."""
    return dict(getattr(error, "error_data", None) or {})
