"""Reconciliation of noisy listens against the metadata database.

Given an (artist, track, release[, ISRC]) triple, the engine selects the
best candidate recording, then the best release under it, and accepts the
match only when either the release title or the ISRC corroborates it.

``resolve`` never raises for metadata problems. Search failures, empty
results, missing releases and rejected matches all return the unmatched
fallback Track, which is never cached. Accepted matches are cached under a
content hash of the raw listen metadata, so repeated lookups return the
identical serialized result without touching the database.
"""

import json

from attrs import define, field

from np_enhancer.config import get_logger, settings
from np_enhancer.domain.entities import ListenMetadata, Track
from np_enhancer.domain.exceptions import SearchFailure
from np_enhancer.domain.matching import (
    clean_release_name,
    passes_acceptance_gate,
    recording_rules,
    release_rules,
    select_first,
    track_from_candidates,
)
from np_enhancer.domain.protocols import MetadataSearchProtocol
from np_enhancer.infrastructure.cache import (
    CachedResponse,
    FetchCache,
    reconciliation_cache_key,
)

logger = get_logger(__name__)


@define(slots=True)
class ReconciliationEngine:
    """Resolve raw listen metadata to a canonical Track.

    Attributes:
        search_client: Metadata database search port
        cache: Response cache handle shared with the HTTP fetcher
        cache_key_base_url: Namespace for synthetic reconciliation cache keys
    """

    search_client: MetadataSearchProtocol
    cache: FetchCache
    cache_key_base_url: str = field(factory=lambda: settings.cache.key_base_url)

    def cache_key(self, listen: ListenMetadata) -> str:
        return reconciliation_cache_key(listen.raw, self.cache_key_base_url)

    async def resolve(self, listen: ListenMetadata) -> Track:
        """Resolve a listen, returning an unmatched Track when unsure."""
        cache_key = self.cache_key(listen)

        with logger.contextualize(
            operation="reconcile",
            track_name=listen.track_name,
            artist_name=listen.artist_name,
        ):
            logger.debug("Looking up track")

            cached = await self.cache.get(cache_key)
            if cached is not None:
                logger.debug("Found reconciliation result in cache")
                return Track.from_dict(cached.json())

            fallback = Track.unmatched(listen.track_name, listen.artist_name)

            try:
                recordings = await self.search_client.search_recordings(listen)
            except SearchFailure as e:
                logger.error(f"Metadata lookup failed, returning unmatched: {e}")
                return fallback

            track = self._match(listen, recordings)
            if track is None:
                return fallback

            await self.cache.put(
                cache_key,
                CachedResponse(
                    status=200,
                    body=json.dumps(track.to_dict(), ensure_ascii=False),
                    headers={"Content-Type": "application/json"},
                ),
            )
            logger.info("Matched track", recording_mbid=track.mbid)
            return track

    def _match(self, listen: ListenMetadata, recordings) -> Track | None:
        """Apply recording selection, release selection and the acceptance gate."""
        recording_choice = select_first(recordings, recording_rules(listen.isrc))
        if recording_choice is None:
            logger.info("No candidate recordings found")
            return None
        recording = recording_choice.candidate

        release_choice = select_first(recording.releases, release_rules(recording))
        if release_choice is None:
            logger.info("Candidate recording has no releases", recording_mbid=recording.id)
            return None
        release = release_choice.candidate

        logger.debug(
            "Selected candidates",
            recording_rule=recording_choice.rule,
            release_rule=release_choice.rule,
        )

        cleaned_release_name = clean_release_name(listen.release_name)
        if not passes_acceptance_gate(
            recording, release, cleaned_release_name, listen.isrc
        ):
            logger.warning(
                "No valid media found for the current track",
                release_title=release.title,
                expected_release=cleaned_release_name,
            )
            return None

        return track_from_candidates(recording, release)
