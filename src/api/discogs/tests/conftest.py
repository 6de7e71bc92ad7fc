"""
Shared fixtures and utilities for Discogs service tests.

HTTP is stubbed by patching aiohttp.ClientSession; payloads come from the JSON
files in fixtures/, shaped after the examples in the Discogs API docs.
"""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from api.discogs.auth import Credentials, OAuthAuth, OAuthClient
from api.discogs.config import DiscogsOptions

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# A tracer provider can only be installed once per process
_SPAN_EXPORTER = InMemorySpanExporter()


def pytest_configure(config):
    """Install a tracer provider that records spans in memory."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(_SPAN_EXPORTER))
    trace.set_tracer_provider(provider)


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file.

    Args:
        filename: Name of the fixture file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path) as f:
        return json.load(f)


@pytest.fixture
def fixture_data():
    """Expose load_fixture to tests."""
    return load_fixture


@pytest.fixture
def mock_user_agent():
    return "DiscogsClientTests/0.1 +https://example.com"


@pytest.fixture
def mock_discogs_token():
    return "test_discogs_token_12345"


@pytest.fixture
def options(mock_user_agent, mock_discogs_token):
    """Resolved options as the client would hand them to its services."""
    return DiscogsOptions(user_agent=mock_user_agent, token=mock_discogs_token).resolve()


@pytest.fixture
def oauth():
    return OAuthAuth(
        client=OAuthClient(
            consumer_key="test_consumer_key", consumer_secret="test_consumer_secret"
        ),
        credentials=Credentials(token="test_oauth_token", secret="test_oauth_secret"),
    )


@pytest.fixture
def spans():
    """Finished spans recorded during the test."""
    _SPAN_EXPORTER.clear()
    yield _SPAN_EXPORTER
    _SPAN_EXPORTER.clear()


@pytest.fixture
def mock_http():
    """Patch aiohttp.ClientSession and return a function that sets the response.

    Usage:
        session = mock_http(data={"id": 1})
        ...
        url = session.get.call_args.args[0]
    """
    with patch("aiohttp.ClientSession") as mock_session_class:

        def respond(data=None, status=200, reason="OK", json_error=None, get_error=None):
            mock_response = AsyncMock()
            mock_response.status = status
            mock_response.reason = reason
            if json_error is not None:
                mock_response.json = AsyncMock(side_effect=json_error)
            else:
                mock_response.json = AsyncMock(return_value=data)

            mock_session = MagicMock()
            if get_error is not None:
                mock_session.get.side_effect = get_error
            else:
                mock_session.get.return_value.__aenter__.return_value = mock_response
                mock_session.get.return_value.__aexit__.return_value = False

            mock_session_class.return_value.__aenter__.return_value = mock_session
            mock_session_class.return_value.__aexit__.return_value = False
            mock_session.response = mock_response
            mock_session.session_class = mock_session_class
            return mock_session

        yield respond
