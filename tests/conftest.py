"""Shared test fixtures for the ringroll test suite.

No test reaches random.org. ``block_real_network`` swaps the process-wide
networked provider for one whose remote side always answers 503, so online
mode exercises the fallback path by default. Tests that need a specific
remote behaviour build their own provider with ``mock_remote``.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ringroll.config import settings
from ringroll.entropy import FallbackEntropyProvider, LocalEntropyProvider, RemoteEntropyProvider
from ringroll.main import app

Handler = Callable[[httpx.Request], httpx.Response]


class ScriptedProvider:
    """Entropy provider that hands out pre-set batches and records requests."""

    def __init__(self, *batches: list[float]) -> None:
        self.batches = list(batches)
        self.requests: list[int] = []

    async def draws(self, quantity: int) -> list[float]:
        self.requests.append(quantity)
        return self.batches.pop(0)


def make_remote(handler: Handler) -> RemoteEntropyProvider:
    return RemoteEntropyProvider(
        settings.random_org_url,
        settings.random_org_max_value,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture(autouse=True)
def block_real_network(monkeypatch):
    """Replace the networked provider with one whose remote always fails."""

    def _unavailable(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    monkeypatch.setattr(
        "ringroll.entropy._networked_provider",
        FallbackEntropyProvider(make_remote(_unavailable), LocalEntropyProvider()),
    )


@pytest.fixture
def mock_remote() -> Callable[[Handler], RemoteEntropyProvider]:
    """Factory for remote providers backed by an httpx.MockTransport handler."""
    return make_remote


@pytest.fixture
def scripted_local(monkeypatch) -> Callable[..., ScriptedProvider]:
    """Install a ScriptedProvider as the local provider and return it."""

    def _install(*batches: list[float]) -> ScriptedProvider:
        provider = ScriptedProvider(*batches)
        monkeypatch.setattr("ringroll.entropy._local_provider", provider)
        return provider

    return _install


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
