from typing import AsyncGenerator

import pytest
import pytest_asyncio

from restpoint import Host


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("RESTPOINT_URL", raising=False)
    monkeypatch.delenv("RESTPOINT_TIMEOUT", raising=False)
    monkeypatch.delenv("RESTPOINT_DEBUG", raising=False)
    monkeypatch.delenv("RESTPOINT_CA_BUNDLE", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://test.restpoint.dev/v1"


@pytest_asyncio.fixture
async def host(base_url: str) -> AsyncGenerator[Host, None]:
    async with Host(base_url) as h:
        yield h
