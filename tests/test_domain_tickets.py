"""
Tests for the tickets domain layer.

Tests entities, the auth token format and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.tickets.entities import CtxResolution, RequestContext, Ticket
from app.domain.tickets.errors import (
    AuthFailNoAuthTokenCookieError,
    AuthFailTokenWrongFormatError,
    AuthError,
    LoginFailError,
    TicketDeleteFailIdNotFoundError,
    TicketsError,
)
from app.domain.tickets.token import AuthToken, mint_token, parse_token


class TestTicketEntity:
    """Tests for the Ticket entity."""

    def test_ticket_is_immutable(self) -> None:
        """Ticket fields cannot be reassigned."""
        ticket = Ticket(id=0, owner_id=1, title="First")
        with pytest.raises(AttributeError):
            ticket.title = "Changed"  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        """Tickets with the same fields compare equal."""
        assert Ticket(id=3, owner_id=1, title="a") == Ticket(id=3, owner_id=1, title="a")


class TestCtxResolution:
    """Tests for the two-stage context resolution result."""

    def test_resolved(self) -> None:
        """A resolved result carries the context and no error."""
        resolution = CtxResolution.resolved(RequestContext(user_id=7))
        assert resolution.is_resolved
        assert resolution.ctx == RequestContext(user_id=7)
        assert resolution.error is None

    def test_failed(self) -> None:
        """A failed result carries the error and no context."""
        error = AuthFailNoAuthTokenCookieError()
        resolution = CtxResolution.failed(error)
        assert not resolution.is_resolved
        assert resolution.ctx is None
        assert resolution.error is error


class TestParseToken:
    """Tests for the user-<id>.<exp>.<sign> token layout."""

    def test_well_formed_token(self) -> None:
        """A well-formed token parses into its three parts."""
        token = parse_token("user-1.exp.sign")
        assert token == AuthToken(user_id=1, expiration="exp", signature="sign")

    def test_multi_digit_user_id(self) -> None:
        """User ids with several digits are parsed whole."""
        assert parse_token("user-42.1700000000.abcdef").user_id == 42

    def test_dots_in_expiration_go_to_expiration(self) -> None:
        """Extra dots stay in the expiration and the last part is the signature."""
        token = parse_token("user-1.a.b.c")
        assert token.expiration == "a.b"
        assert token.signature == "c"

    @pytest.mark.parametrize(
        "raw",
        ["", "user-1", "user-1.exp", "user-x.exp.sign", "admin-1.exp.sign", "user-.exp.sign"],
    )
    def test_malformed_tokens_rejected(self, raw) -> None:
        """Values without the token layout raise AuthFailTokenWrongFormatError."""
        with pytest.raises(AuthFailTokenWrongFormatError):
            parse_token(raw)

    def test_str_round_trips_through_parser(self) -> None:
        """A token rendered with str parses back to itself."""
        token = AuthToken(user_id=5, expiration="99", signature="abc")
        assert str(token) == "user-5.99.abc"
        assert parse_token(str(token)) == token


class TestMintToken:
    """Tests for minting session tokens."""

    def test_minted_token_is_parseable(self) -> None:
        """Minted tokens use the layout the parser accepts."""
        token = mint_token(user_id=1, expiration=1_700_000_000, secret="s3cret")
        parsed = parse_token(str(token))
        assert parsed.user_id == 1
        assert parsed.expiration == "1700000000"

    def test_signature_depends_on_secret(self) -> None:
        """Different secrets give different signatures."""
        a = mint_token(user_id=1, expiration=10, secret="one")
        b = mint_token(user_id=1, expiration=10, secret="two")
        assert a.signature != b.signature

    def test_signature_is_deterministic(self) -> None:
        """The same inputs mint the same token."""
        assert mint_token(1, 10, "k") == mint_token(1, 10, "k")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_auth_errors_share_base(self) -> None:
        """Context failures share AuthError and login failure does not."""
        assert issubclass(AuthFailNoAuthTokenCookieError, AuthError)
        assert issubclass(AuthFailTokenWrongFormatError, AuthError)
        assert not issubclass(LoginFailError, AuthError)

    def test_not_found_echoes_id(self) -> None:
        """The not-found error keeps the id in its data and message."""
        error = TicketDeleteFailIdNotFoundError(12)
        assert error.id == 12
        assert error.error_data == {"id": 12}
        assert "12" in error.message

    def test_default_error_data_is_empty(self) -> None:
        """Errors without details carry empty error_data."""
        assert TicketsError("boom").error_data == {}
        assert LoginFailError("bob").error_data == {}
