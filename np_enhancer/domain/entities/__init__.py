"""Domain entities for listens, metadata candidates and canonical tracks."""

from .listen import ListenMetadata, MappedArtist, MbidMapping, RawListen
from .recording import (
    DIGITAL_MEDIA,
    ArtistCredit,
    CandidateRecording,
    CandidateRelease,
)
from .track import DEFAULT_JOIN_PHRASE, Track, TrackArtist, TrackRelease

__all__ = [
    "DEFAULT_JOIN_PHRASE",
    "DIGITAL_MEDIA",
    "ArtistCredit",
    "CandidateRecording",
    "CandidateRelease",
    "ListenMetadata",
    "MappedArtist",
    "MbidMapping",
    "RawListen",
    "Track",
    "TrackArtist",
    "TrackRelease",
]
