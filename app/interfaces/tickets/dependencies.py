"""
Dependency injection for the tickets bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. Long-lived
adapters are created once by the application factory and kept on
``app.state``; use cases are cheap and built per request.
"""

from fastapi import Request

from app.application.tickets.create_ticket import CreateTicketUseCase
from app.application.tickets.delete_ticket import DeleteTicketUseCase
from app.application.tickets.list_tickets import ListTicketsUseCase
from app.application.tickets.login import LoginUseCase
from app.core.config import settings
from app.domain.tickets.ports import CredentialChecker, TicketStore


def get_ticket_store(request: Request) -> TicketStore:
    """Return the process-wide ticket store."""
    return request.app.state.ticket_store


def get_credential_checker(request: Request) -> CredentialChecker:
    """Return the configured credential checker."""
    return request.app.state.credential_checker


def get_login_use_case(request: Request) -> LoginUseCase:
    """Build LoginUseCase with its infrastructure dependencies."""
    return LoginUseCase(
        credential_checker=get_credential_checker(request),
        user_id=settings.auth_user_id,
        token_secret=settings.auth_token_secret,
        token_ttl_seconds=settings.auth_token_ttl_seconds,
    )


def get_create_ticket_use_case(request: Request) -> CreateTicketUseCase:
    """Build CreateTicketUseCase with its infrastructure dependencies."""
    return CreateTicketUseCase(ticket_store=get_ticket_store(request))


def get_list_tickets_use_case(request: Request) -> ListTicketsUseCase:
    """Build ListTicketsUseCase with its infrastructure dependencies."""
    return ListTicketsUseCase(ticket_store=get_ticket_store(request))


def get_delete_ticket_use_case(request: Request) -> DeleteTicketUseCase:
    """Build DeleteTicketUseCase with its infrastructure dependencies."""
    return DeleteTicketUseCase(ticket_store=get_ticket_store(request))
