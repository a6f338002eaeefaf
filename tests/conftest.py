"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shortlink.store.memory import InMemoryShortLinkStore
from shortlink.service import ShortLinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger):
    """Create a fresh in-memory store."""
    return InMemoryShortLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=8)


@pytest.fixture
def service(store, short_code_generator, logger) -> ShortLinkService:
    """Create service instance."""
    return ShortLinkService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config():
    """Configuration pinned for tests."""
    return Config(base_url="http://testserver", path_prefix="/urls")


@pytest.fixture
def app(store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
