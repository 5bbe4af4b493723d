import pytest
from fastapi import Request


def _make_request(method: str, path: str) -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "raw_path": path.encode(),
            "root_path": "",
            "scheme": "http",
            "query_string": b"",
            "headers": [],
            "server": ("testserver", 80),
        }
    )


@pytest.fixture
def make_request():
    """Factory for bare ASGI requests without a body."""
    return _make_request
