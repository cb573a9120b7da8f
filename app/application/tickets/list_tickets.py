"""
Use case: List live tickets.

Input: RequestContext
Output: list[TicketResult]
Side effects: None (read-only query).
Failure cases: None.
"""

from app.application.tickets.dtos import TicketResult
from app.domain.tickets.entities import RequestContext
from app.domain.tickets.ports import TicketStore


class ListTicketsUseCase:
    """Returns every ticket that has not been deleted, in id order."""

    def __init__(self, ticket_store: TicketStore) -> None:
        self._ticket_store = ticket_store

    def execute(self, ctx: RequestContext) -> list[TicketResult]:
        return [
            TicketResult(id=t.id, owner_id=t.owner_id, title=t.title)
            for t in self._ticket_store.list(ctx)
        ]
