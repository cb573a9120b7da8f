"""
Port interfaces (ABCs) for the tickets bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.tickets.entities import (
    RequestContext,
    RequestLogLine,
    Ticket,
    TicketForCreate,
)


class TicketStore(ABC):
    """Port for the ticket collection.

    Every operation receives the caller's RequestContext. Ownership is
    recorded on create but not checked on list or delete.
    """

    @abstractmethod
    def create(self, ctx: RequestContext, ticket_fc: TicketForCreate) -> Ticket:
        """Store a new ticket and return it. Never fails."""
        raise NotImplementedError

    @abstractmethod
    def list(self, ctx: RequestContext) -> list[Ticket]:
        """Return all live tickets in id order. Never fails."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, ctx: RequestContext, ticket_id: int) -> Ticket:
        """Remove a ticket and return it.

        Raises:
            TicketDeleteFailIdNotFoundError: If the id was never issued
                or the ticket is already deleted.
        """
        raise NotImplementedError


class CredentialChecker(ABC):
    """Port for the external login credential check."""

    @abstractmethod
    def check(self, username: str, pwd: str) -> bool:
        """Return True if the credentials are accepted."""
        raise NotImplementedError


class RequestLogSink(ABC):
    """Port for the structured per-request log."""

    @abstractmethod
    def write(self, line: RequestLogLine) -> None:
        """Persist or forward one request log line."""
        raise NotImplementedError
