"""Service connectors for ListenBrainz and MusicBrainz."""

from np_enhancer.infrastructure.connectors.http import CachingFetcher, FetchResponse
from np_enhancer.infrastructure.connectors.listenbrainz import ListenBrainzConnector
from np_enhancer.infrastructure.connectors.musicbrainz import (
    MusicBrainzConnector,
    build_direct_query,
    build_search_query,
)

__all__ = [
    "CachingFetcher",
    "FetchResponse",
    "ListenBrainzConnector",
    "MusicBrainzConnector",
    "build_direct_query",
    "build_search_query",
]
