"""
Use case: Create a ticket owned by the caller.

Input: RequestContext, CreateTicketCommand (title)
Output: TicketResult
Side effects: Appends one ticket to the store.
Failure cases: None.
"""

import logging

from app.application.tickets.dtos import CreateTicketCommand, TicketResult
from app.domain.tickets.entities import RequestContext, TicketForCreate
from app.domain.tickets.ports import TicketStore

logger = logging.getLogger(__name__)


class CreateTicketUseCase:
    """Orchestrates ticket creation."""

    def __init__(self, ticket_store: TicketStore) -> None:
        self._ticket_store = ticket_store

    def execute(self, ctx: RequestContext, command: CreateTicketCommand) -> TicketResult:
        """Run the create ticket use case.

        Args:
            ctx: Resolved identity of the caller.
            command: Fields of the new ticket.

        Returns:
            The stored ticket.
        """
        ticket = self._ticket_store.create(ctx, TicketForCreate(title=command.title))
        logger.info("Ticket created: id=%d, owner_id=%d", ticket.id, ticket.owner_id)
        return TicketResult(id=ticket.id, owner_id=ticket.owner_id, title=ticket.title)
