"""Listen entities as reported by the listen-tracking service.

These mirror the ListenBrainz ``track_metadata`` payload. The original JSON
object is kept on ``ListenMetadata.raw`` because the reconciliation cache key
is a hash of exactly what the service sent.
"""

from typing import Any

from attrs import define, field


@define(frozen=True, slots=True)
class MappedArtist:
    """Artist entry from the service's own MBID mapping."""

    artist_credit_name: str
    artist_mbid: str = ""
    join_phrase: str = ""


@define(frozen=True, slots=True)
class MbidMapping:
    """Identifiers the tracking service already resolved for a listen."""

    recording_mbid: str = ""
    release_mbid: str = ""
    artists: tuple[MappedArtist, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def from_listenbrainz(cls, data: dict[str, Any]) -> "MbidMapping":
        return cls(
            recording_mbid=data.get("recording_mbid") or "",
            release_mbid=data.get("release_mbid") or "",
            artists=[
                MappedArtist(
                    artist_credit_name=artist.get("artist_credit_name") or "",
                    artist_mbid=artist.get("artist_mbid") or "",
                    join_phrase=artist.get("join_phrase") or "",
                )
                for artist in data.get("artists") or []
            ],
        )


@define(frozen=True, slots=True)
class ListenMetadata:
    """Loosely structured (artist, track, release) triple plus identifiers.

    Attributes:
        artist_name: Artist name as scrobbled
        track_name: Track name as scrobbled
        release_name: Release name as scrobbled (may be empty)
        isrc: Industry identifier from ``additional_info`` if present
        recording_mbid: Recording MBID embedded by the submitting client
        mbid_mapping: Mapping computed by the tracking service, if any
        raw: The untouched ``track_metadata`` JSON object
    """

    artist_name: str
    track_name: str
    release_name: str = ""
    isrc: str | None = None
    recording_mbid: str | None = None
    mbid_mapping: MbidMapping | None = None
    raw: dict[str, Any] = field(eq=False, repr=False)

    @raw.default
    def _raw_from_fields(self) -> dict[str, Any]:
        """Rebuild a ``track_metadata`` object when none was supplied."""
        additional_info: dict[str, Any] = {}
        if self.isrc:
            additional_info["isrc"] = self.isrc
        if self.recording_mbid:
            additional_info["recording_mbid"] = self.recording_mbid
        raw: dict[str, Any] = {
            "artist_name": self.artist_name,
            "track_name": self.track_name,
            "release_name": self.release_name,
            "additional_info": additional_info,
        }
        if self.mbid_mapping is not None:
            raw["mbid_mapping"] = {
                "recording_mbid": self.mbid_mapping.recording_mbid,
                "release_mbid": self.mbid_mapping.release_mbid,
                "artists": [
                    {
                        "artist_credit_name": artist.artist_credit_name,
                        "artist_mbid": artist.artist_mbid,
                        "join_phrase": artist.join_phrase,
                    }
                    for artist in self.mbid_mapping.artists
                ],
            }
        return raw

    @classmethod
    def from_listenbrainz(cls, data: dict[str, Any]) -> "ListenMetadata":
        """Create ListenMetadata from a ListenBrainz ``track_metadata`` object."""
        additional_info = data.get("additional_info") or {}
        mapping = data.get("mbid_mapping")
        return cls(
            artist_name=data.get("artist_name") or "",
            track_name=data.get("track_name") or "",
            release_name=data.get("release_name") or "",
            isrc=additional_info.get("isrc") or None,
            recording_mbid=additional_info.get("recording_mbid") or None,
            mbid_mapping=MbidMapping.from_listenbrainz(mapping) if mapping else None,
            raw=data,
        )


@define(frozen=True, slots=True)
class RawListen:
    """A single listen, either playing now or from history."""

    track_metadata: ListenMetadata
    listened_at: int | None = None
    playing_now: bool = False

    @classmethod
    def from_listenbrainz(cls, data: dict[str, Any]) -> "RawListen":
        return cls(
            track_metadata=ListenMetadata.from_listenbrainz(
                data.get("track_metadata") or {}
            ),
            listened_at=data.get("listened_at"),
            playing_now=bool(data.get("playing_now", False)),
        )
