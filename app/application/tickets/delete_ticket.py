"""
Use case: Delete a ticket by id.

Input: RequestContext, DeleteTicketCommand (ticket_id)
Output: TicketResult (the removed ticket)
Side effects: Tombstones one slot in the store.
Failure cases: TicketDeleteFailIdNotFoundError.
"""

import logging

from app.application.tickets.dtos import DeleteTicketCommand, TicketResult
from app.domain.tickets.entities import RequestContext
from app.domain.tickets.ports import TicketStore

logger = logging.getLogger(__name__)


class DeleteTicketUseCase:
    """Orchestrates ticket deletion."""

    def __init__(self, ticket_store: TicketStore) -> None:
        self._ticket_store = ticket_store

    def execute(self, ctx: RequestContext, command: DeleteTicketCommand) -> TicketResult:
        """Run the delete ticket use case.

        Args:
            ctx: Resolved identity of the caller.
            command: Id of the ticket to remove.

        Returns:
            The removed ticket.

        Raises:
            TicketDeleteFailIdNotFoundError: If the id is unknown or already deleted.
        """
        ticket = self._ticket_store.delete(ctx, command.ticket_id)
        logger.info("Ticket deleted: id=%d, by user_id=%d", ticket.id, ctx.user_id)
        return TicketResult(id=ticket.id, owner_id=ticket.owner_id, title=ticket.title)
