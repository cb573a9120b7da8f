"""
Request context resolution middleware.

Runs once per request, before routing. Reads the auth token cookie and
stores a CtxResolution on the request. Resolution never rejects a
request: public routes keep working without a cookie, and protected
routes enforce the outcome in the authorization gate.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.domain.tickets.entities import CtxResolution, RequestContext
from app.domain.tickets.errors import (
    AuthFailNoAuthTokenCookieError,
    AuthFailTokenWrongFormatError,
    AuthError,
)
from app.domain.tickets.token import parse_token
from app.shared.errors.handlers import attach_error

logger = logging.getLogger(__name__)

CTX_RESOLUTION_STATE_KEY = "ctx_resolution"


def resolve_ctx(token: Optional[str]) -> CtxResolution:
    """Turn a raw cookie value into a CtxResolution.

    Args:
        token: The auth token cookie value, or None when absent.

    Returns:
        ``Resolved(ctx)`` for a well-formed token, ``Failed(error)`` otherwise.
    """
    if token is None:
        return CtxResolution.failed(AuthFailNoAuthTokenCookieError())
    try:
        auth_token = parse_token(token)
    except AuthError as exc:
        return CtxResolution.failed(exc)
    return CtxResolution.resolved(RequestContext(user_id=auth_token.user_id))


def get_ctx_resolution(request: Request) -> Optional[CtxResolution]:
    """Return the resolution attached to the request, or None if unresolved."""
    return getattr(request.state, CTX_RESOLUTION_STATE_KEY, None)


class CtxResolverMiddleware(BaseHTTPMiddleware):
    """Middleware that resolves the request context from the auth cookie.

    A malformed token cookie is removed on the way out so the client
    does not keep sending it. An unexpected error from the inner app is
    attached to the request, like any handled error, so the removal
    still reaches the client.
    """

    def __init__(self, app: ASGIApp, cookie_name: str) -> None:
        super().__init__(app)
        self._cookie_name = cookie_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Resolve the context, run the request, then clean up bad cookies."""
        resolution = resolve_ctx(request.cookies.get(self._cookie_name))
        setattr(request.state, CTX_RESOLUTION_STATE_KEY, resolution)
        logger.debug(
            "Context resolution for %s: %s",
            request.url.path,
            "resolved" if resolution.is_resolved else type(resolution.error).__name__,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = attach_error(request, exc)

        if isinstance(resolution.error, AuthFailTokenWrongFormatError):
            response.delete_cookie(self._cookie_name, path="/")
        return response
