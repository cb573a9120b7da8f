"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (public login/health, protected tickets)
- Error handlers (errors are attached to the request, not rendered)
- Middleware (response mapper, context resolution)
- Rate limiting and logging configuration

No business logic belongs here.

Middleware order, outermost first:
    ResponseMapperMiddleware -> CtxResolverMiddleware -> routing
so every response, including auth failures, leaves through the mapper.
"""

from typing import Optional

from fastapi import FastAPI

from app.core.config import settings
from app.domain.tickets.ports import CredentialChecker, RequestLogSink, TicketStore
from app.infrastructure.tickets.credential_checker import StaticCredentialChecker
from app.infrastructure.tickets.request_log_sink import LoggingRequestLogSink
from app.infrastructure.tickets.ticket_store import InMemoryTicketStore
from app.interfaces.health import router as health_router
from app.interfaces.tickets.login_router import router as login_router
from app.interfaces.tickets.router import router as tickets_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.errors.response_mapper import ResponseMapperMiddleware
from app.shared.logging import configure_logging
from app.shared.security.ctx_resolver import CtxResolverMiddleware
from app.shared.security.rate_limiting import limiter


def create_app(
    ticket_store: Optional[TicketStore] = None,
    credential_checker: Optional[CredentialChecker] = None,
    request_log_sink: Optional[RequestLogSink] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Each call builds
    a fresh in-memory store unless one is supplied.

    Args:
        ticket_store: Store adapter to use. Defaults to a new in-memory store.
        credential_checker: Login check. Defaults to the configured static pair.
        request_log_sink: Request log destination. Defaults to logging.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, request_log_level=settings.request_log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.ticket_store = ticket_store or InMemoryTicketStore()
    app.state.credential_checker = credential_checker or StaticCredentialChecker(
        username=settings.login_username,
        password=settings.login_password,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Middleware (last added runs first) ---
    app.add_middleware(CtxResolverMiddleware, cookie_name=settings.auth_token_cookie)
    app.add_middleware(
        ResponseMapperMiddleware,
        log_sink=request_log_sink or LoggingRequestLogSink(),
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(login_router, prefix="/api")
    app.include_router(tickets_router, prefix="/api")

    return app


app = create_app()
