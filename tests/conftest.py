"""Pytest configuration and fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Iterable

from httpx import ASGITransport, AsyncClient

from config import Config
from shortlinks.service import URLShortenerService
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.store.memory import InMemoryURLStore
from shortlinks.common.logging_config import setup_logging
from web_app import create_app


class FakeClock:
    """Controllable clock for expiry tests."""
    
    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class SequenceGenerator:
    """Generator stub that hands out codes in order."""
    
    def __init__(self, codes: Iterable[str]):
        self.codes = list(codes)
        self.calls = 0
    
    def generate(self) -> str:
        code = self.codes[self.calls]
        self.calls += 1
        return code


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def store(short_code_generator, clock, logger) -> InMemoryURLStore:
    """Create in-memory store driven by the fake clock."""
    return InMemoryURLStore(
        short_code_generator=short_code_generator,
        clock=clock,
        logger=logger,
    )


@pytest.fixture
def service(store, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(store=store, logger=logger)


@pytest.fixture
def config():
    return Config(base_url="http://testserver")


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as serialized by the API."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
