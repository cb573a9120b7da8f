"""
Domain-specific errors for the tickets bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses by the shared error mapping.
No framework imports allowed.
"""


class TicketsError(Exception):
    """Base error for all tickets domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    @property
    def error_data(self) -> dict:
        """Structured details for the server-side request log."""
        return {}


class LoginFailError(TicketsError):
    """Raised when the credential check rejects a login attempt."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Login failed for user: {username}")
        self.username = username


class AuthError(TicketsError):
    """Base error for failures to establish the request identity."""


class AuthFailNoAuthTokenCookieError(AuthError):
    """Raised when the request carries no auth token cookie."""

    def __init__(self) -> None:
        super().__init__("No auth token cookie")


class AuthFailTokenWrongFormatError(AuthError):
    """Raised when the auth token does not match the expected layout."""

    def __init__(self) -> None:
        super().__init__("Auth token has the wrong format")


class AuthFailCtxNotInRequestExtError(AuthError):
    """Raised when no context resolution is attached to the request."""

    def __init__(self) -> None:
        super().__init__("Request context was never resolved")


class TicketDeleteFailIdNotFoundError(TicketsError):
    """Raised when deleting a ticket id that is unknown or already deleted."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(f"Ticket not found: {ticket_id}")
        self.id = ticket_id

    @property
    def error_data(self) -> dict:
        return {"id": self.id}
