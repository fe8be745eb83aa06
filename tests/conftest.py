"""
Shared fixtures for getmetobs tests.

``fake_get`` replaces ``requests.get`` inside ``smhi_metobs`` so no test
touches the network.
"""

from unittest.mock import patch

import pytest


class FakeResponse:
    """Minimal stand-in for a streamed ``requests.Response``."""

    def __init__(self, body=b"", status_code=200, reason="OK", chunk_error=None):
        self.body = body
        self.status_code = status_code
        self.reason = reason
        self.chunk_error = chunk_error
        self.closed = False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]
        if self.chunk_error is not None:
            raise self.chunk_error

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def fake_get():
    """Patch requests.get; tests set ``return_value`` or ``side_effect``."""
    with patch("smhi_metobs.requests.get") as mock_get:
        mock_get.return_value = FakeResponse(b"Datum;Tid (UTC);Lufttemperatur\n")
        yield mock_get
