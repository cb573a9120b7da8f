"""
FastAPI router for login.

Public route: it does not depend on the authorization gate. On success
the session cookie is set on the response; on failure LoginFailError is
raised and rendered by the response mapper.
"""

from fastapi import APIRouter, Depends, Request, Response

from app.application.tickets.dtos import LoginCommand
from app.application.tickets.login import LoginUseCase
from app.core.config import settings
from app.interfaces.tickets.dependencies import get_login_use_case
from app.interfaces.tickets.schemas import (
    ErrorEnvelope,
    LoginRequest,
    LoginResponse,
    LoginStatus,
)
from app.shared.security.rate_limiting import LOGIN_RATE_LIMIT, limiter

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorEnvelope}, 429: {"model": ErrorEnvelope}},
    summary="Log in",
    description="Check credentials and set the session cookie.",
)
@limiter.limit(LOGIN_RATE_LIMIT)
def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    """Log the user in and set the auth token cookie."""
    result = use_case.execute(LoginCommand(username=payload.username, pwd=payload.pwd))
    response.set_cookie(
        settings.auth_token_cookie,
        result.token,
        max_age=result.max_age,
        path="/",
        httponly=True,
    )
    return LoginResponse(result=LoginStatus(success=True))
