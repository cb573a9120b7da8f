"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        request_log_level: Level of the per-request log lines.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        auth_token_cookie: Name of the session cookie carrying the auth token.
        auth_token_ttl_seconds: Lifetime encoded into freshly minted tokens.
        auth_token_secret: Key used to sign minted tokens.
        auth_user_id: User id bound to the session after a successful login.
        login_username: Username accepted by the static credential check.
        login_password: Password accepted by the static credential check.
        rate_limit_login: Rate limit applied to the login endpoint.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TicketDesk"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    request_log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    # Session / auth
    auth_token_cookie: str = "auth-token"
    auth_token_ttl_seconds: int = 3600
    auth_token_secret: str = "change-me"
    auth_user_id: int = 1

    # Login stub credentials
    login_username: str = "admin"
    login_password: str = "admin"

    rate_limit_login: str = "20/minute"


settings = Settings()
