"""
Data Transfer Objects for the tickets application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for a login attempt.

    Attributes:
        username: Submitted username.
        pwd: Submitted password.
    """

    username: str
    pwd: str


@dataclass(frozen=True)
class LoginResult:
    """Output DTO for a successful login.

    Attributes:
        token: Auth token to place in the session cookie.
        max_age: Cookie lifetime in seconds.
    """

    token: str
    max_age: int


@dataclass(frozen=True)
class CreateTicketCommand:
    """Input DTO for creating a ticket."""

    title: str


@dataclass(frozen=True)
class DeleteTicketCommand:
    """Input DTO for deleting a ticket."""

    ticket_id: int


@dataclass(frozen=True)
class TicketResult:
    """Output DTO for a single ticket.

    Attributes:
        id: Ticket id.
        owner_id: User id of the creator.
        title: Ticket title.
    """

    id: int
    owner_id: int
    title: str
