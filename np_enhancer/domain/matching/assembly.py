"""Construction of matched canonical tracks."""

from np_enhancer.domain.entities import (
    DEFAULT_JOIN_PHRASE,
    CandidateRecording,
    CandidateRelease,
    ListenMetadata,
    Track,
    TrackArtist,
    TrackRelease,
)


def track_from_candidates(
    recording: CandidateRecording, release: CandidateRelease
) -> Track:
    """Build a matched Track from a selected recording and release."""
    return Track(
        name=recording.title,
        mbid=recording.id,
        matched=True,
        release=TrackRelease(name=release.title, mbid=release.id),
        artists=[
            TrackArtist(
                name=credit.name,
                mbid=credit.artist_id,
                join_phrase=credit.join_phrase or DEFAULT_JOIN_PHRASE,
            )
            for credit in recording.artist_credit
        ],
    )


def track_from_mapping(listen: ListenMetadata) -> Track:
    """Build a matched Track from the tracking service's own MBID mapping.

    Raises:
        ValueError: If the listen carries no mapped recording MBID
    """
    mapping = listen.mbid_mapping
    if mapping is None or not mapping.recording_mbid:
        raise ValueError("Listen has no mapped recording MBID")

    return Track(
        name=listen.track_name,
        mbid=mapping.recording_mbid,
        matched=True,
        release=TrackRelease(name=listen.release_name, mbid=mapping.release_mbid),
        artists=[
            TrackArtist(
                name=artist.artist_credit_name,
                mbid=artist.artist_mbid,
                join_phrase=artist.join_phrase or DEFAULT_JOIN_PHRASE,
            )
            for artist in mapping.artists
        ],
    )
