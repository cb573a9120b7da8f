"""
Response mapper middleware.

The single exit funnel of the application. Every request passes through
it exactly once, whether it succeeded, failed inside a handler, or failed
during context resolution or authorization. It:

- assigns a per-request correlation id,
- replaces any response carrying an attached error with the JSON envelope
  ``{"error": {"type": <label>, "req_uuid": <uuid>}}``,
- emits one request log line.

Logging must not change program behavior: a failing log sink is logged
and ignored.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.domain.tickets.entities import RequestLogLine
from app.domain.tickets.ports import RequestLogSink
from app.shared.errors.handlers import attach_error, get_attached_error
from app.shared.errors.mapping import ClientError, client_status_and_error, error_data
from app.shared.security.ctx_resolver import get_ctx_resolution
from app.shared.security.headers import apply_secure_headers

logger = logging.getLogger(__name__)

# Headers describing the replaced body; everything else (cookies) is kept.
_BODY_HEADERS = frozenset({"content-length", "content-type"})


def build_error_envelope(client_error: ClientError, req_uuid: UUID) -> dict:
    """Build the client-facing error body."""
    return {"error": {"type": client_error.value, "req_uuid": str(req_uuid)}}


class ResponseMapperMiddleware(BaseHTTPMiddleware):
    """Converts attached errors into client envelopes and logs every request."""

    def __init__(self, app: ASGIApp, log_sink: RequestLogSink) -> None:
        super().__init__(app)
        self._log_sink = log_sink

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the request and map its outcome."""
        req_uuid = uuid4()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled error on %s %s (req_uuid=%s)",
                request.method,
                request.url.path,
                req_uuid,
            )
            response = attach_error(request, exc)

        service_error = get_attached_error(request)
        client_error: Optional[ClientError] = None
        if service_error is not None:
            status_code, client_error = client_status_and_error(service_error)
            response = await self._replace_with_envelope(
                response, status_code, build_error_envelope(client_error, req_uuid)
            )

        self._log_request(request, req_uuid, service_error, client_error)
        return apply_secure_headers(response)

    @staticmethod
    async def _replace_with_envelope(
        response: Response, status_code: int, envelope: dict
    ) -> Response:
        """Swap the body and status of a response, keeping its other headers."""
        body_iterator = getattr(response, "body_iterator", None)
        if body_iterator is not None:
            async for _ in body_iterator:
                pass

        mapped = JSONResponse(status_code=status_code, content=envelope)
        for key, value in response.headers.items():
            if key.lower() not in _BODY_HEADERS:
                mapped.headers.append(key, value)
        return mapped

    def _log_request(
        self,
        request: Request,
        req_uuid: UUID,
        service_error: Optional[BaseException],
        client_error: Optional[ClientError],
    ) -> None:
        """Emit one log line for the request. Never raises."""
        resolution = get_ctx_resolution(request)
        user_id = resolution.ctx.user_id if resolution and resolution.ctx else None
        req_path = request.url.path
        if request.url.query:
            req_path = f"{req_path}?{request.url.query}"

        line = RequestLogLine(
            uuid=str(req_uuid),
            timestamp=datetime.now(timezone.utc).isoformat(),
            req_method=request.method,
            req_path=req_path,
            user_id=user_id,
            client_error_type=client_error.value if client_error else None,
            error_type=type(service_error).__name__ if service_error else None,
            error_data=(error_data(service_error) or None) if service_error else None,
        )
        try:
            self._log_sink.write(line)
        except Exception:
            logger.warning("Request log sink failed (req_uuid=%s)", req_uuid, exc_info=True)
