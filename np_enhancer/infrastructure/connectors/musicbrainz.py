"""MusicBrainz metadata search connector.

This module builds structured Lucene-style recording queries from a noisy
listen triple and returns the ranked candidate list exactly as MusicBrainz
ordered it. Ranking policy lives in the reconciliation engine, not here.

Key components:
- build_search_query: (artist, track, release[, ISRC]) → boolean query string
- build_direct_query: trusted recording MBID → ``rid:`` query
- MusicBrainzConnector: issues queries through the caching fetcher

Lookups are read-through cached by their literal URL. Any non-ok response or
transport error surfaces as ``SearchFailure`` and is never cached.
"""

from attrs import define, field
import httpx

from np_enhancer.config import get_logger, settings
from np_enhancer.domain.entities import CandidateRecording, ListenMetadata
from np_enhancer.domain.exceptions import SearchFailure
from np_enhancer.domain.matching import clean_release_name, strip_featuring
from np_enhancer.infrastructure.connectors.http import CachingFetcher

# Get contextual logger with service binding
logger = get_logger(__name__).bind(service="musicbrainz")


def build_search_query(listen: ListenMetadata) -> str:
    """Build the recording search query for a listen.

    With an ISRC the query matches either the ISRC or the full
    (recording, artist, release) triple; without one only the triple.
    """
    triple = (
        f'recording:"{strip_featuring(listen.track_name)}" '
        f'AND artist:"{listen.artist_name}" '
        f'AND release:"{clean_release_name(listen.release_name)}"'
    )
    if listen.isrc:
        return f"isrc:{listen.isrc} OR ({triple})"
    return triple


def build_direct_query(recording_mbid: str, release_name: str) -> str:
    """Query for a recording whose MBID is already known."""
    return f"rid:{recording_mbid} AND release:({release_name})"


@define(slots=True)
class MusicBrainzConnector:
    """Recording search against the MusicBrainz web service.

    Attributes:
        fetcher: Caching HTTP fetcher shared with other connectors
        base_url: Web service root, e.g. ``https://musicbrainz.org/ws/2``
    """

    fetcher: CachingFetcher
    base_url: str = field(factory=lambda: settings.api.musicbrainz_base_url)

    def recording_search_url(self, query: str) -> str:
        url = httpx.URL(
            f"{self.base_url.rstrip('/')}/recording",
            params={"fmt": "json", "query": query},
        )
        return str(url)

    async def search_recordings(self, listen: ListenMetadata) -> list[CandidateRecording]:
        """Search candidate recordings for a noisy listen.

        Raises:
            SearchFailure: On transport errors, non-ok status or malformed JSON
        """
        logger.debug("Searching recordings", track=listen.track_name)
        return await self._search(build_search_query(listen))

    async def lookup_recording(
        self, recording_mbid: str, release_name: str
    ) -> list[CandidateRecording]:
        """Fetch a recording by MBID, scoped to a release name.

        Raises:
            SearchFailure: On transport errors, non-ok status or malformed JSON
        """
        logger.debug("Direct recording lookup", recording_mbid=recording_mbid)
        return await self._search(build_direct_query(recording_mbid, release_name))

    async def _search(self, query: str) -> list[CandidateRecording]:
        url = self.recording_search_url(query)

        try:
            response = await self.fetcher.fetch(url)
        except httpx.HTTPError as e:
            logger.error("MusicBrainz request failed", url=url, error=str(e))
            raise SearchFailure(f"MusicBrainz request failed: {e}", url=url) from e

        if not response.ok:
            logger.error(
                "Failed to fetch metadata lookup", url=url, status=response.status
            )
            raise SearchFailure(
                f"MusicBrainz returned {response.status}",
                status_code=response.status,
                url=url,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise SearchFailure("MusicBrainz returned malformed JSON", url=url) from e

        recordings = [
            CandidateRecording.from_musicbrainz(recording)
            for recording in payload.get("recordings") or []
        ]
        logger.debug(
            f"MusicBrainz returned {len(recordings)} candidates",
            from_cache=response.from_cache,
        )
        return recordings
