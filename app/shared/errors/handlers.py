"""
Centralized error handlers for FastAPI.

Handlers do not render error bodies themselves. They attach the error
to the request and return an empty placeholder response; the response
mapper middleware turns the attached error into the client envelope.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.responses import Response

from app.domain.tickets.errors import AuthError, TicketsError
from app.shared.errors.mapping import HTTP_500, InvalidParamsError, RateLimitedError

logger = logging.getLogger(__name__)

SERVICE_ERROR_STATE_KEY = "service_error"


def attach_error(request: Request, error: BaseException) -> Response:
    """Record an error on the request for the response mapper.

    Args:
        request: The request being handled.
        error: The internal error to surface.

    Returns:
        A placeholder response that the response mapper will replace.
    """
    setattr(request.state, SERVICE_ERROR_STATE_KEY, error)
    return Response(status_code=HTTP_500)


def get_attached_error(request: Request) -> Optional[BaseException]:
    """Return the error attached to the request, if any."""
    return getattr(request.state, SERVICE_ERROR_STATE_KEY, None)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError) -> Response:
        """Handle identity failures raised by the authorization gate."""
        logger.info("Auth failure on %s: %s", request.url.path, type(exc).__name__)
        return attach_error(request, exc)

    @app.exception_handler(TicketsError)
    async def handle_tickets_error(request: Request, exc: TicketsError) -> Response:
        """Handle every other tickets domain error."""
        logger.warning("Tickets domain error: %s", exc.message)
        return attach_error(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle Pydantic validation errors on request input."""
        logger.warning("Validation error on %s", request.url.path)
        return attach_error(request, InvalidParamsError(list(exc.errors())))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limited(request: Request, exc: RateLimitExceeded) -> Response:
        """Handle requests rejected by the rate limiter."""
        logger.warning("Rate limit exceeded on %s", request.url.path)
        return attach_error(request, RateLimitedError(str(exc.detail)))
