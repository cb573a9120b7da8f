"""
FastAPI router for the tickets bounded context.

All routes are protected by the authorization gate, which runs before
the request body is read, and delegate to use cases. No business logic
here. Errors are raised, never rendered: the response mapper produces
the client envelope.
"""

from fastapi import APIRouter, Depends, Path

from app.application.tickets.create_ticket import CreateTicketUseCase
from app.application.tickets.delete_ticket import DeleteTicketUseCase
from app.application.tickets.dtos import (
    CreateTicketCommand,
    DeleteTicketCommand,
    TicketResult,
)
from app.application.tickets.list_tickets import ListTicketsUseCase
from app.domain.tickets.entities import RequestContext
from app.interfaces.tickets.auth_gate import ProtectedRoute, require_ctx
from app.interfaces.tickets.dependencies import (
    get_create_ticket_use_case,
    get_delete_ticket_use_case,
    get_list_tickets_use_case,
)
from app.interfaces.tickets.schemas import (
    ErrorEnvelope,
    TicketForCreateRequest,
    TicketResponse,
)

router = APIRouter(
    prefix="/tickets",
    tags=["tickets"],
    route_class=ProtectedRoute,
    dependencies=[Depends(require_ctx)],
    responses={401: {"model": ErrorEnvelope}},
)


def _to_response(result: TicketResult) -> TicketResponse:
    return TicketResponse(id=result.id, owner_id=result.owner_id, title=result.title)


@router.post(
    "",
    response_model=TicketResponse,
    responses={422: {"model": ErrorEnvelope}},
    summary="Create a ticket",
    description="Create a ticket owned by the authenticated user.",
)
def create_ticket(
    payload: TicketForCreateRequest,
    ctx: RequestContext = Depends(require_ctx),
    use_case: CreateTicketUseCase = Depends(get_create_ticket_use_case),
) -> TicketResponse:
    """Create a ticket for the caller."""
    result = use_case.execute(ctx, CreateTicketCommand(title=payload.title))
    return _to_response(result)


@router.get(
    "",
    response_model=list[TicketResponse],
    summary="List tickets",
    description="List all tickets that have not been deleted, in id order.",
)
def list_tickets(
    ctx: RequestContext = Depends(require_ctx),
    use_case: ListTicketsUseCase = Depends(get_list_tickets_use_case),
) -> list[TicketResponse]:
    """List live tickets."""
    return [_to_response(r) for r in use_case.execute(ctx)]


@router.delete(
    "/{ticket_id}",
    response_model=TicketResponse,
    responses={404: {"model": ErrorEnvelope}, 422: {"model": ErrorEnvelope}},
    summary="Delete a ticket",
    description="Delete a ticket by id and return it.",
)
def delete_ticket(
    ticket_id: int = Path(..., ge=0, description="Ticket id"),
    ctx: RequestContext = Depends(require_ctx),
    use_case: DeleteTicketUseCase = Depends(get_delete_ticket_use_case),
) -> TicketResponse:
    """Delete a ticket and return the removed value."""
    result = use_case.execute(ctx, DeleteTicketCommand(ticket_id=ticket_id))
    return _to_response(result)
