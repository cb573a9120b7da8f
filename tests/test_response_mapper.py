"""
Tests for the response mapper middleware.

Covers the error envelope, correlation ids, request logging and the
guarantee that logging failures never break a request.
"""

from fastapi.testclient import TestClient

from app.core.config import settings
from app.domain.tickets.entities import RequestContext, RequestLogLine
from app.domain.tickets.ports import RequestLogSink
from app.infrastructure.tickets.ticket_store import InMemoryTicketStore
from app.main import create_app
from app.shared.security.headers import SECURE_HEADERS
from tests.conftest import RecordingLogSink


class _BrokenStore(InMemoryTicketStore):
    def list(self, ctx: RequestContext):
        raise RuntimeError("connection string postgres://secret@db")


class _FailingSink(RequestLogSink):
    def write(self, line: RequestLogLine) -> None:
        raise OSError("disk full")


class TestErrorEnvelope:
    """Attached errors become a single JSON envelope."""

    def test_envelope_has_type_and_uuid_only(self, client) -> None:
        """The error body holds only the client label and the request uuid."""
        body = client.get("/api/tickets").json()

        assert set(body) == {"error"}
        assert set(body["error"]) == {"type", "req_uuid"}
        assert body["error"]["req_uuid"]

    def test_uuid_is_unique_per_request(self, client) -> None:
        """Two failing requests get different correlation ids."""
        first = client.get("/api/tickets").json()["error"]["req_uuid"]
        second = client.get("/api/tickets").json()["error"]["req_uuid"]
        assert first != second

    def test_unexpected_exception_is_generic_500(self, log_sink) -> None:
        """An unexpected exception becomes 500 ServiceError without leaking details."""
        client = TestClient(create_app(ticket_store=_BrokenStore(), request_log_sink=log_sink))
        client.cookies.set(settings.auth_token_cookie, "user-1.exp.sign")

        response = client.get("/api/tickets")

        assert response.status_code == 500
        assert response.json()["error"]["type"] == "ServiceError"
        assert "secret" not in response.text
        assert log_sink.lines[-1].error_type == "RuntimeError"

    def test_success_passes_through_unchanged(self, logged_in_client) -> None:
        """Successful responses keep their status and body."""
        response = logged_in_client.get("/api/tickets")
        assert response.status_code == 200
        assert response.json() == []


class TestRequestLog:
    """One log line per request, correlated with the envelope."""

    def test_one_line_per_request(self, client, log_sink) -> None:
        """Each request writes exactly one log line."""
        client.get("/api/health")
        client.get("/api/tickets")
        assert len(log_sink.lines) == 2

    def test_error_line_matches_envelope(self, client, log_sink) -> None:
        """The log line carries the envelope uuid and the error details."""
        body = client.get("/api/tickets").json()

        line = log_sink.lines[-1]
        assert line.uuid == body["error"]["req_uuid"]
        assert line.req_method == "GET"
        assert line.req_path == "/api/tickets"
        assert line.user_id is None
        assert line.client_error_type == "AuthFailNoAuthTokenCookie"
        assert line.error_type == "AuthFailNoAuthTokenCookieError"

    def test_not_found_line_carries_id(self, logged_in_client, log_sink) -> None:
        """A missing ticket id lands in the log line error_data."""
        logged_in_client.delete("/api/tickets/9")

        line = log_sink.lines[-1]
        assert line.error_data == {"id": 9}
        assert line.user_id == 1

    def test_success_line_has_no_error(self, logged_in_client, log_sink) -> None:
        """A successful request logs its path and user with no error fields."""
        logged_in_client.get("/api/tickets?verbose=1")

        line = log_sink.lines[-1]
        assert line.req_path == "/api/tickets?verbose=1"
        assert line.user_id == 1
        assert line.client_error_type is None
        assert line.error_type is None
        assert line.error_data is None

    def test_failing_sink_does_not_break_requests(self) -> None:
        """A sink that raises never changes the response."""
        client = TestClient(create_app(request_log_sink=_FailingSink()))

        assert client.get("/api/health").status_code == 200
        assert client.get("/api/tickets").status_code == 401


class TestSecureHeaders:
    """Secure headers are applied on every exit path."""

    def test_on_success(self, client) -> None:
        """Successful responses carry the secure headers."""
        response = client.get("/api/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_on_mapped_error(self, client) -> None:
        """Error envelopes carry the secure headers."""
        response = client.get("/api/tickets")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value


def test_recording_sink_is_isolated_per_app() -> None:
    """Each application writes only to its own sink."""
    first, second = RecordingLogSink(), RecordingLogSink()
    TestClient(create_app(request_log_sink=first)).get("/api/health")
    assert len(first.lines) == 1
    assert second.lines == []
