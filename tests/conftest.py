"""
Pytest configuration and fixtures
"""
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request
from starlette.responses import Response

from multisession.main import app


class RecordingTransport:
    """Cookie transport that keeps everything in memory"""

    def __init__(self, cookie_value: Optional[str] = None):
        self.cookie_value = cookie_value
        self.writes: List[str] = []

    def read_cookie_values(self, request: Request) -> List[str]:
        return [self.cookie_value] if self.cookie_value is not None else []

    def write_cookie_value(self, request: Request, response: Response, value: str) -> None:
        self.writes.append(value)


def build_request(path: str, cookie: Optional[str] = None) -> Request:
    headers = []
    if cookie is not None:
        headers.append((b"cookie", cookie.encode("latin-1")))
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": headers,
        }
    )


@pytest.fixture
def client():
    """FastAPI test client with an empty cookie jar"""
    return TestClient(app)


@pytest.fixture
def make_request():
    """Factory for bare Starlette requests"""
    return build_request


@pytest.fixture
def recording_transport():
    """Factory for in-memory cookie transports"""
    return RecordingTransport
