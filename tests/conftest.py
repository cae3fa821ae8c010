"""Pytest configuration and fixtures."""

import base64
from unittest.mock import AsyncMock

import pytest


class RecordingExecutor:
    """Executor stub that records requests instead of sending them."""

    def __init__(self, response=None):
        self.response = {} if response is None else response
        self.calls = []
        self.closed = False

    async def execute(self, request):
        self.calls.append(request)
        return self.response

    async def close(self):
        self.closed = True


def create_async_response(status=200, text="", charset="utf-8"):
    """Create a mock aiohttp response usable as an async context manager."""
    body = text.encode("utf-8") if isinstance(text, str) else text
    resp = AsyncMock()
    resp.status = status
    resp.charset = charset
    resp.read = AsyncMock(return_value=body)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret, base64 encoded as issued by the exchange."""
    return base64.b64encode(b"test_api_secret_789012").decode()


@pytest.fixture
def recording_executor():
    return RecordingExecutor()


@pytest.fixture
def sample_envelope():
    """Sample public endpoint envelope."""
    return {
        "Success": True,
        "Message": None,
        "Error": None,
        "Data": [
            {"Id": 1, "Name": "Bitcoin", "Symbol": "BTC", "Status": "OK"},
            {"Id": 2, "Name": "Litecoin", "Symbol": "LTC", "Status": "OK"},
        ],
    }
