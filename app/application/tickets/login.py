"""
Use case: Log a user in and mint a session token.

Input: LoginCommand (username, pwd)
Output: LoginResult
Side effects: None (the interface layer sets the cookie).
Failure cases: LoginFailError.
"""

import logging
import time
from typing import Callable

from app.application.tickets.dtos import LoginCommand, LoginResult
from app.domain.tickets.errors import LoginFailError
from app.domain.tickets.ports import CredentialChecker
from app.domain.tickets.token import mint_token

logger = logging.getLogger(__name__)


class LoginUseCase:
    """Orchestrates the login flow.

    Delegates the credential check to the CredentialChecker port and,
    on success, mints the token bound to the configured user id.
    """

    def __init__(
        self,
        credential_checker: CredentialChecker,
        user_id: int,
        token_secret: str,
        token_ttl_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._credential_checker = credential_checker
        self._user_id = user_id
        self._token_secret = token_secret
        self._token_ttl_seconds = token_ttl_seconds
        self._clock = clock

    def execute(self, command: LoginCommand) -> LoginResult:
        """Run the login use case.

        Args:
            command: Submitted credentials.

        Returns:
            The token to hand back to the client.

        Raises:
            LoginFailError: If the credential check rejects the login.
        """
        if not self._credential_checker.check(command.username, command.pwd):
            raise LoginFailError(command.username)

        expiration = int(self._clock()) + self._token_ttl_seconds
        token = mint_token(self._user_id, expiration, self._token_secret)
        logger.info("Login succeeded: user_id=%d", self._user_id)
        return LoginResult(token=str(token), max_age=self._token_ttl_seconds)
