"""Ports the application layer depends on.

Infrastructure connectors satisfy these structurally; tests substitute
AsyncMock objects.
"""

from typing import Protocol, runtime_checkable

from np_enhancer.domain.entities import CandidateRecording, ListenMetadata, RawListen


@runtime_checkable
class MetadataSearchProtocol(Protocol):
    """Structured recording search against the metadata database."""

    async def search_recordings(
        self, listen: ListenMetadata
    ) -> list[CandidateRecording]:
        """Return ranked candidates; raise SearchFailure when unavailable."""
        ...

    async def lookup_recording(
        self, recording_mbid: str, release_name: str
    ) -> list[CandidateRecording]:
        """Return the recording for a known MBID; raise SearchFailure when unavailable."""
        ...


@runtime_checkable
class ListenSourceProtocol(Protocol):
    """Live listen state from the tracking service."""

    async def get_playing_now(self, user: str) -> list[RawListen]:
        """Return active listens; raise ListenSourceError on failure."""
        ...

    async def get_recent_listens(
        self, user: str, count: int | None = None
    ) -> list[RawListen]:
        """Return recent listens, newest first; raise ListenSourceError on failure."""
        ...
