"""Current-track use case: what is this user listening to right now.

Two tiers of trust:
- Identifiers the tracking service already resolved are trusted outright,
  with no acceptance gate, to avoid redundant metadata lookups
- Listens without identifiers are re-derived from scratch by the
  reconciliation engine, whose gate refuses to fabricate confidence

Listen-state failures are fatal and propagate as ``ListenSourceError``.
Every metadata failure degrades to an unmatched Track.
"""

from attrs import define

from np_enhancer.application.services.reconciliation import ReconciliationEngine
from np_enhancer.config import get_logger
from np_enhancer.domain.entities import ListenMetadata, Track
from np_enhancer.domain.exceptions import NoListensError, SearchFailure
from np_enhancer.domain.matching import (
    direct_release_rules,
    select_first,
    track_from_candidates,
    track_from_mapping,
)
from np_enhancer.domain.protocols import ListenSourceProtocol, MetadataSearchProtocol

logger = get_logger(__name__)


@define(slots=True)
class GetCurrentTrackUseCase:
    """Resolve a user's now-playing or most recent listen to a Track.

    Attributes:
        listen_source: Tracking service port (now playing, recent listens)
        search_client: Metadata database port used for direct MBID lookups
        engine: Reconciliation engine for listens without identifiers
    """

    listen_source: ListenSourceProtocol
    search_client: MetadataSearchProtocol
    engine: ReconciliationEngine

    async def execute(self, user: str) -> Track:
        """Return the canonical Track for the user's current listen.

        Raises:
            ListenSourceError: Tracking service unreachable or non-ok
            NoListensError: Nothing playing and no listen history
        """
        with logger.contextualize(operation="get_current_track", user=user):
            playing_now = await self.listen_source.get_playing_now(user)
            if playing_now:
                return await self._resolve_playing_now(playing_now[0].track_metadata)

            recent = await self.listen_source.get_recent_listens(user)
            if not recent:
                raise NoListensError(f"No listens found for user {user}")
            return await self._resolve_recent(recent[0].track_metadata)

    async def _resolve_playing_now(self, listen: ListenMetadata) -> Track:
        if not listen.recording_mbid:
            return await self.engine.resolve(listen)

        track = await self._direct_lookup(listen)
        if track is None:
            logger.info("Direct lookup unusable, falling back to reconciliation")
            return await self.engine.resolve(listen)
        return track

    async def _direct_lookup(self, listen: ListenMetadata) -> Track | None:
        """Build a Track for a listen whose recording MBID is already known."""
        try:
            recordings = await self.search_client.lookup_recording(
                listen.recording_mbid, listen.release_name
            )
        except SearchFailure as e:
            logger.warning(f"Direct recording lookup failed: {e}")
            return None

        if not recordings:
            return None
        recording = recordings[0]

        release_choice = select_first(
            recording.releases, direct_release_rules(listen.release_name)
        )
        if release_choice is None:
            return None

        logger.debug(
            "Using pre-resolved recording",
            recording_mbid=recording.id,
            release_rule=release_choice.rule,
        )
        return track_from_candidates(recording, release_choice.candidate)

    async def _resolve_recent(self, listen: ListenMetadata) -> Track:
        if listen.mbid_mapping is not None and listen.mbid_mapping.recording_mbid:
            logger.debug("ListenBrainz data is rich, trusting its mapping")
            return track_from_mapping(listen)
        return await self.engine.resolve(listen)
