"""Canonical track entities returned to callers.

Pure value objects with zero infrastructure dependencies. A ``Track`` is
either fully identified (``matched=True``) or an honest unmatched echo of
the raw listen with every identifier left empty.
"""

from typing import Any

from attrs import define, field, validators

DEFAULT_JOIN_PHRASE = " · "


@define(frozen=True, slots=True)
class TrackArtist:
    """One artist credit on a canonical track."""

    name: str = field(validator=validators.instance_of(str))
    mbid: str = field(default="", validator=validators.instance_of(str))
    join_phrase: str = field(default="", validator=validators.instance_of(str))

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "mbid": self.mbid, "join_phrase": self.join_phrase}


@define(frozen=True, slots=True)
class TrackRelease:
    """Release a canonical track was matched on."""

    name: str = field(default="", validator=validators.instance_of(str))
    mbid: str = field(default="", validator=validators.instance_of(str))

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "mbid": self.mbid}


@define(frozen=True, slots=True)
class Track:
    """Immutable canonical track record.

    Built once per resolution request. Serialized snapshots (``to_dict``)
    are what the response cache stores, so later changes to a Track never
    leak into cached copies.
    """

    name: str = field(validator=validators.instance_of(str))
    mbid: str = field(validator=validators.instance_of(str))
    matched: bool = field(validator=validators.instance_of(bool))
    release: TrackRelease = field(
        factory=TrackRelease,
        validator=validators.instance_of(TrackRelease),
    )
    artists: tuple[TrackArtist, ...] = field(
        factory=tuple,
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(TrackArtist),
        ),
    )

    @classmethod
    def unmatched(cls, track_name: str, artist_name: str) -> "Track":
        """Create the give-up shape: raw names verbatim, no identifiers."""
        return cls(
            name=track_name,
            mbid="",
            matched=False,
            release=TrackRelease(),
            artists=[TrackArtist(name=artist_name)],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the public JSON shape."""
        return {
            "release": self.release.to_dict(),
            "artists": [artist.to_dict() for artist in self.artists],
            "name": self.name,
            "mbid": self.mbid,
            "matched": self.matched,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Track":
        """Rebuild a Track from its serialized JSON shape."""
        release = data.get("release") or {}
        return cls(
            name=data["name"],
            mbid=data.get("mbid", ""),
            matched=bool(data.get("matched", False)),
            release=TrackRelease(
                name=release.get("name", ""),
                mbid=release.get("mbid", ""),
            ),
            artists=[
                TrackArtist(
                    name=artist["name"],
                    mbid=artist.get("mbid", ""),
                    join_phrase=artist.get("join_phrase", ""),
                )
                for artist in data.get("artists", [])
            ],
        )
