"""
Domain entities for the tickets bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.tickets.errors import AuthError


@dataclass(frozen=True)
class Ticket:
    """A ticket owned by the store once created.

    Attributes:
        id: Position of the ticket in the store. Never reused.
        owner_id: User id of the creator.
        title: Free-form ticket title.
    """

    id: int
    owner_id: int
    title: str


@dataclass(frozen=True)
class TicketForCreate:
    """Fields a client supplies when creating a ticket."""

    title: str


@dataclass(frozen=True)
class RequestContext:
    """Authenticated identity attached to a single request."""

    user_id: int


@dataclass(frozen=True)
class CtxResolution:
    """Outcome of resolving the request context from the auth cookie.

    Exactly one of ``ctx`` and ``error`` is set. Resolution never fails the
    request by itself; the authorization gate decides what to do with a
    failed resolution.
    """

    ctx: Optional[RequestContext] = None
    error: Optional[AuthError] = None

    @classmethod
    def resolved(cls, ctx: RequestContext) -> "CtxResolution":
        return cls(ctx=ctx)

    @classmethod
    def failed(cls, error: AuthError) -> "CtxResolution":
        return cls(error=error)

    @property
    def is_resolved(self) -> bool:
        return self.ctx is not None


@dataclass(frozen=True)
class RequestLogLine:
    """One server-side record per handled request.

    Attributes:
        uuid: Correlation id also returned to the client on errors.
        timestamp: ISO-8601 UTC time the response was mapped.
        req_method: HTTP method.
        req_path: Request path.
        user_id: Resolved user id, if the context was resolved.
        client_error_type: Public label sent to the client, if any.
        error_type: Internal error class name, if any.
        error_data: Internal error details, if any.
    """

    uuid: str
    timestamp: str
    req_method: str
    req_path: str
    user_id: Optional[int] = None
    client_error_type: Optional[str] = None
    error_type: Optional[str] = None
    error_data: Optional[dict] = None
