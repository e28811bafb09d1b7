"""Random draw acquisition for dice rolls.

Every provider returns uniform floats in [0, 1) through a single coroutine,
``draws(quantity)``. The networked mode asks random.org for one batch of
integers and falls back to the in-process generator when that batch cannot be
used for any reason. The fallback is silent: callers get a same-shaped list
either way.
"""

from __future__ import annotations

import logging
import math
import random
import re
from typing import Protocol

import httpx

from ringroll.config import settings
from ringroll.dice import DiceError

logger = logging.getLogger(__name__)

# Largest float below 1.0. A remote integer at the top of the range would
# otherwise normalize to exactly 1.0.
_MAX_DRAW = math.nextafter(1.0, 0.0)
_INTEGER_RE = re.compile(r"\d+", re.ASCII)


class EntropyError(Exception):
    """Raised when a remote entropy response cannot be turned into draws."""


class EntropyProvider(Protocol):
    """Interface for random draw sources."""

    async def draws(self, quantity: int) -> list[float]:
        """Return ``quantity`` uniform draws in [0, 1), in source order."""
        ...


class LocalEntropyProvider:
    """Pseudo-random draws from :mod:`random`. Never fails.

    Args:
        rng: Generator to draw from. Defaults to a fresh, OS-seeded instance.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def draws(self, quantity: int) -> list[float]:
        return [self._rng.random() for _ in range(quantity)]


class RemoteEntropyProvider:
    """random.org integer generator, one HTTP round trip per batch.

    Args:
        url_template: Endpoint with ``{quantity}`` and ``{max_value}`` fields.
        max_value: Top of the inclusive integer range; divisor for normalization.
        timeout: Seconds before the request is abandoned, or None to wait.
        transport: Optional httpx transport, used to substitute the network.
    """

    def __init__(
        self,
        url_template: str,
        max_value: int,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url_template = url_template
        self._max_value = max_value
        self._timeout = timeout
        self._transport = transport

    def url(self, quantity: int) -> str:
        return self._url_template.format(quantity=quantity, max_value=self._max_value)

    async def draws(self, quantity: int) -> list[float]:
        """Fetch ``quantity`` integers and normalize them into draws.

        Raises:
            httpx.HTTPError: On transport failure or a non-success status.
            EntropyError: If the body is not exactly ``quantity`` integers in range.
        """
        url = self.url(quantity)
        logger.debug("Requesting %d integers from %s", quantity, url)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.get(url)
        response.raise_for_status()
        return self.parse(response.text, quantity)

    def parse(self, body: str, quantity: int) -> list[float]:
        """Turn a newline-separated integer body into normalized draws.

        Raises:
            EntropyError: On a count mismatch, a non-integer line, or an
                integer outside ``[0, max_value]``.
        """
        lines = body.strip().splitlines()
        if len(lines) != quantity:
            raise EntropyError(f"Expected {quantity} integers, got {len(lines)}")
        result = []
        for line in lines:
            if not _INTEGER_RE.fullmatch(line.strip()):
                raise EntropyError(f"Not an integer: {line!r}")
            value = int(line)
            if not 0 <= value <= self._max_value:
                raise EntropyError(f"Integer out of range [0, {self._max_value}]: {value}")
            result.append(min(value / self._max_value, _MAX_DRAW))
        return result


class FallbackEntropyProvider:
    """Try ``primary``; on any failure, draw the whole batch from ``fallback``."""

    def __init__(self, primary: EntropyProvider, fallback: EntropyProvider) -> None:
        self._primary = primary
        self._fallback = fallback

    async def draws(self, quantity: int) -> list[float]:
        try:
            return await self._primary.draws(quantity)
        except Exception:
            return await self._fallback.draws(quantity)


_local_provider = LocalEntropyProvider()
_networked_provider = FallbackEntropyProvider(
    RemoteEntropyProvider(
        settings.random_org_url,
        settings.random_org_max_value,
        timeout=settings.random_org_timeout_seconds,
    ),
    _local_provider,
)


def get_entropy_provider(networked: bool) -> EntropyProvider:
    """Return the process-wide provider for the requested mode."""
    return _networked_provider if networked else _local_provider


async def get_draws(quantity: int, networked: bool = False) -> list[float]:
    """Return ``quantity`` draws in [0, 1).

    An empty batch never touches the network.

    Args:
        quantity: Number of draws, zero or more.
        networked: Ask random.org first instead of using the local generator.

    Raises:
        DiceError: If quantity is negative.
    """
    if quantity < 0:
        raise DiceError(f"Quantity must be non-negative: {quantity}")
    if quantity == 0:
        return []
    return await get_entropy_provider(networked).draws(quantity)
