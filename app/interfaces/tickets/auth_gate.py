"""
Authorization gate for protected routes.

The gate runs after routing has matched and before request body parsing,
validation or any handler code. It fails closed: anything short of a
resolved context rejects the request.
"""

from typing import Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute

from app.domain.tickets.entities import RequestContext
from app.domain.tickets.errors import AuthFailCtxNotInRequestExtError
from app.shared.security.ctx_resolver import get_ctx_resolution


def require_ctx(request: Request) -> RequestContext:
    """Return the resolved RequestContext or raise the carried auth error.

    Also usable as a FastAPI dependency to receive the context in a handler.

    Raises:
        AuthFailCtxNotInRequestExtError: If context resolution never ran.
        AuthError: The failure recorded by context resolution.
    """
    resolution = get_ctx_resolution(request)
    if resolution is None:
        raise AuthFailCtxNotInRequestExtError()
    if resolution.ctx is None:
        raise resolution.error or AuthFailCtxNotInRequestExtError()
    return resolution.ctx


class ProtectedRoute(APIRoute):
    """Route class that applies the gate before FastAPI reads the body.

    Dependencies run only after the JSON body has been decoded, so a
    malformed body would otherwise surface as a validation error ahead
    of the missing identity.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[None, None, Response]]:
        route_handler = super().get_route_handler()

        async def gated_route_handler(request: Request) -> Response:
            require_ctx(request)
            return await route_handler(request)

        return gated_route_handler
