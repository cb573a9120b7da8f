"""
Adapter: Static credential check.

Implements the CredentialChecker port against a single configured
username/password pair.
"""

import hmac

from app.domain.tickets.ports import CredentialChecker


class StaticCredentialChecker(CredentialChecker):
    """Accepts exactly one username/password pair."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    def check(self, username: str, pwd: str) -> bool:
        """Return True if both values match the configured pair."""
        username_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        pwd_ok = hmac.compare_digest(pwd.encode("utf-8"), self._password.encode("utf-8"))
        return username_ok and pwd_ok
