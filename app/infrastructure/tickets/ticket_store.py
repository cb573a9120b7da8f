"""
Adapter: In-memory ticket store.

Implements the TicketStore port.
Tickets live for the lifetime of the process only.
"""

import threading
from typing import Optional

from app.domain.tickets.entities import RequestContext, Ticket, TicketForCreate
from app.domain.tickets.errors import TicketDeleteFailIdNotFoundError
from app.domain.tickets.ports import TicketStore


class InMemoryTicketStore(TicketStore):
    """Lock-protected list of ticket slots indexed by ticket id.

    A deleted ticket leaves a ``None`` tombstone in its slot so that ids
    stay stable and are never reissued. Every operation, reads included,
    holds the same mutex for its whole critical section.
    """

    def __init__(self) -> None:
        self._slots: list[Optional[Ticket]] = []
        self._lock = threading.Lock()

    def create(self, ctx: RequestContext, ticket_fc: TicketForCreate) -> Ticket:
        """Append a ticket owned by the caller.

        Args:
            ctx: Resolved identity of the caller.
            ticket_fc: Fields of the new ticket.

        Returns:
            The stored ticket, with ``id`` equal to the previous slot count.
        """
        with self._lock:
            ticket = Ticket(id=len(self._slots), owner_id=ctx.user_id, title=ticket_fc.title)
            self._slots.append(ticket)
        return ticket

    def list(self, ctx: RequestContext) -> list[Ticket]:
        """Return live tickets in id order."""
        with self._lock:
            return [t for t in self._slots if t is not None]

    def delete(self, ctx: RequestContext, ticket_id: int) -> Ticket:
        """Tombstone a ticket and return it.

        Args:
            ctx: Resolved identity of the caller.
            ticket_id: Id of the ticket to remove.

        Returns:
            The removed ticket.

        Raises:
            TicketDeleteFailIdNotFoundError: If the id is out of range
                or already tombstoned.
        """
        with self._lock:
            ticket = self._slots[ticket_id] if 0 <= ticket_id < len(self._slots) else None
            if ticket is None:
                raise TicketDeleteFailIdNotFoundError(ticket_id)
            self._slots[ticket_id] = None
        return ticket
