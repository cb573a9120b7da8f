"""
Shared fixtures for the tickets test suite.

Every test gets a fresh application (and therefore a fresh in-memory
store) and a recording request log sink.
"""

import pytest
from fastapi.testclient import TestClient

from app.domain.tickets.entities import RequestLogLine
from app.domain.tickets.ports import RequestLogSink
from app.main import create_app
from app.shared.security.rate_limiting import limiter

LOGIN_PAYLOAD = {"username": "admin", "pwd": "admin"}


class RecordingLogSink(RequestLogSink):
    """Keeps every request log line in memory."""

    def __init__(self) -> None:
        self.lines: list[RequestLogLine] = []

    def write(self, line: RequestLogLine) -> None:
        self.lines.append(line)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()


@pytest.fixture
def client(log_sink: RecordingLogSink) -> TestClient:
    return TestClient(create_app(request_log_sink=log_sink))


@pytest.fixture
def logged_in_client(client: TestClient) -> TestClient:
    response = client.post("/api/login", json=LOGIN_PAYLOAD)
    assert response.status_code == 200
    return client
