"""Pytest configuration and fixtures."""
import sys
import tempfile
from pathlib import Path

import pytest

# Make the src layout importable without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autoupdate.updater import TransportError, generate_sample


class FakeTransport:
    """In-memory transport that returns canned manifest text"""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def fetch(self, uri, headers=None):
        self.calls.append((uri, headers))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_text():
    """Sample manifest JSON text."""
    return generate_sample()


@pytest.fixture
def make_transport():
    """Factory for in-memory transports."""
    return FakeTransport


@pytest.fixture
def fake_transport(sample_text):
    """Transport serving the sample manifest."""
    return FakeTransport(sample_text)


@pytest.fixture
def failing_transport():
    """Transport that always fails like an unreachable server."""
    return FakeTransport(error=TransportError("Connection refused", uri="http://localhost/"))
