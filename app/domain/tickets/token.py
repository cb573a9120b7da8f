"""
Auth token format.

Tokens have the layout ``user-<user_id>.<expiration>.<signature>``.
Parsing checks the layout only; expiration and signature are carried
as opaque strings.
"""

import hashlib
import hmac
import re
from dataclasses import dataclass

from app.domain.tickets.errors import AuthFailTokenWrongFormatError

TOKEN_PATTERN = re.compile(r"^user-(\d+)\.(.+)\.(.+)$")


@dataclass(frozen=True)
class AuthToken:
    """Decoded parts of an auth token."""

    user_id: int
    expiration: str
    signature: str

    def __str__(self) -> str:
        return f"user-{self.user_id}.{self.expiration}.{self.signature}"


def parse_token(token: str) -> AuthToken:
    """Split a raw cookie value into its parts.

    Args:
        token: Raw auth token string.

    Returns:
        The decoded AuthToken.

    Raises:
        AuthFailTokenWrongFormatError: If the token does not match the layout.
    """
    match = TOKEN_PATTERN.match(token)
    if match is None:
        raise AuthFailTokenWrongFormatError()

    user_id, expiration, signature = match.groups()
    return AuthToken(user_id=int(user_id), expiration=expiration, signature=signature)


def mint_token(user_id: int, expiration: int, secret: str) -> AuthToken:
    """Build a signed token for a user.

    Args:
        user_id: Id of the authenticated user.
        expiration: Unix timestamp after which the token should be rejected.
        secret: HMAC key.

    Returns:
        A new AuthToken.
    """
    # TODO: verify signature and expiration during context resolution
    payload = f"user-{user_id}.{expiration}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return AuthToken(user_id=user_id, expiration=str(expiration), signature=signature)
