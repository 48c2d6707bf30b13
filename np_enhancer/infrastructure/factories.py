"""Composition root wiring connectors, cache and use case together."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from np_enhancer.application.services.reconciliation import ReconciliationEngine
from np_enhancer.application.use_cases.get_current_track import GetCurrentTrackUseCase
from np_enhancer.config import settings
from np_enhancer.domain.entities import Track
from np_enhancer.infrastructure.cache import FetchCache
from np_enhancer.infrastructure.connectors import (
    CachingFetcher,
    ListenBrainzConnector,
    MusicBrainzConnector,
)


def build_current_track_use_case(
    cache: FetchCache, client: httpx.AsyncClient
) -> GetCurrentTrackUseCase:
    """Wire a use case around an explicit cache handle and HTTP client."""
    fetcher = CachingFetcher(cache=cache, client=client)
    musicbrainz = MusicBrainzConnector(fetcher=fetcher)
    return GetCurrentTrackUseCase(
        listen_source=ListenBrainzConnector(fetcher=fetcher),
        search_client=musicbrainz,
        engine=ReconciliationEngine(search_client=musicbrainz, cache=cache),
    )


@asynccontextmanager
async def current_track_use_case(
    cache: FetchCache, client: httpx.AsyncClient | None = None
) -> AsyncIterator[GetCurrentTrackUseCase]:
    """Yield a wired use case, closing the HTTP client only if created here."""
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=settings.api.request_timeout)
    try:
        yield build_current_track_use_case(cache, client)
    finally:
        if owns_client:
            await client.aclose()


async def get_current_track(
    user: str, cache: FetchCache, client: httpx.AsyncClient | None = None
) -> Track:
    """Resolve ``user``'s current listen to a Track.

    Raises:
        ListenSourceError: Only for unrecoverable listen-state failures
    """
    async with current_track_use_case(cache, client) as use_case:
        return await use_case.execute(user)
