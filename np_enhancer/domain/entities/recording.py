"""Candidate entities returned by the metadata database search."""

from typing import Any

from attrs import define, field

DIGITAL_MEDIA = "Digital Media"


@define(frozen=True, slots=True)
class ArtistCredit:
    """An (artist id, credited name, join phrase) entry in performance order."""

    artist_id: str
    name: str
    join_phrase: str = ""

    @classmethod
    def from_musicbrainz(cls, data: dict[str, Any]) -> "ArtistCredit":
        artist = data.get("artist") or {}
        return cls(
            artist_id=artist.get("id") or "",
            name=data.get("name") or artist.get("name") or "",
            join_phrase=data.get("joinphrase") or "",
        )


def _credits(data: dict[str, Any]) -> list[ArtistCredit]:
    return [ArtistCredit.from_musicbrainz(c) for c in data.get("artist-credit") or []]


@define(frozen=True, slots=True)
class CandidateRelease:
    """A release a candidate recording appears on."""

    id: str
    title: str
    media_formats: tuple[str | None, ...] = field(factory=tuple, converter=tuple)
    artist_credit: tuple[ArtistCredit, ...] = field(factory=tuple, converter=tuple)

    @property
    def first_media_format(self) -> str | None:
        return self.media_formats[0] if self.media_formats else None

    @property
    def is_digital(self) -> bool:
        return self.first_media_format == DIGITAL_MEDIA

    @property
    def artist_ids(self) -> set[str]:
        return {credit.artist_id for credit in self.artist_credit}

    @classmethod
    def from_musicbrainz(cls, data: dict[str, Any]) -> "CandidateRelease":
        return cls(
            id=data.get("id") or "",
            title=data.get("title") or "",
            media_formats=[medium.get("format") for medium in data.get("media") or []],
            artist_credit=_credits(data),
        )


@define(frozen=True, slots=True)
class CandidateRecording:
    """A ranked recording search result from the metadata database."""

    id: str
    title: str
    artist_credit: tuple[ArtistCredit, ...] = field(factory=tuple, converter=tuple)
    releases: tuple[CandidateRelease, ...] = field(factory=tuple, converter=tuple)
    isrcs: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @property
    def primary_artist_id(self) -> str | None:
        """Identifier of the first credited artist, if any credit exists."""
        return self.artist_credit[0].artist_id if self.artist_credit else None

    def has_isrc(self, isrc: str | None) -> bool:
        return isrc is not None and isrc in self.isrcs

    @classmethod
    def from_musicbrainz(cls, data: dict[str, Any]) -> "CandidateRecording":
        """Create a CandidateRecording from a MusicBrainz search JSON object."""
        return cls(
            id=data.get("id") or "",
            title=data.get("title") or "",
            artist_credit=_credits(data),
            releases=[
                CandidateRelease.from_musicbrainz(r) for r in data.get("releases") or []
            ],
            isrcs=data.get("isrcs") or [],
        )
