"""Core protocol and interface definitions.

Defines the Fetcher protocol: the outbound lookup used by the refresh
coordinator to populate the cache (the OpenWeather client or any fake).
"""

from __future__ import annotations

from typing import Protocol, TypeVar

V_co = TypeVar("V_co", covariant=True)


class Fetcher(Protocol[V_co]):
    """Contract for any remote lookup keyed by string.

    Implementations raise a `core.errors.FetchError` subclass on failure and
    own their timeouts.
    """
    async def fetch(self, key: str) -> V_co:
        ...
