import pytest

from np_enhancer.config import settings
from np_enhancer.domain.entities import CandidateRecording, ListenMetadata
from np_enhancer.infrastructure.cache import InMemoryFetchCache
from tests.fixtures.payloads import (
    OTHER_ARTIST_ID,
    lb_track_metadata,
    mb_recording,
    mb_release,
)


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch):
    """Keep log files written during tests out of the working tree."""
    monkeypatch.setattr(settings.logging, "log_file", tmp_path / "np_enhancer.log")


@pytest.fixture
def cache():
    """Fresh in-memory response cache."""
    return InMemoryFetchCache()


@pytest.fixture
def listen():
    """Listen without ISRC or embedded identifiers."""
    return ListenMetadata.from_listenbrainz(
        lb_track_metadata(
            artist_name="Primary Artist",
            track_name="Song (feat. Someone)",
            release_name="Album Name - Deluxe",
        )
    )


@pytest.fixture
def isrc_listen():
    """Listen carrying an ISRC."""
    return ListenMetadata.from_listenbrainz(
        lb_track_metadata(
            artist_name="Primary Artist",
            track_name="Song",
            release_name="Some Regional Title",
            isrc="USRC17607839",
        )
    )


@pytest.fixture
def matching_recording():
    """Recording whose releases exercise every release-selection rule."""
    return CandidateRecording.from_musicbrainz(
        mb_recording(
            "rec-1",
            "Song",
            releases=[
                mb_release("rel-cd", "Album Name", media_format="CD"),
                mb_release(
                    "rel-other-digital",
                    "Album Name",
                    artist_ids=(OTHER_ARTIST_ID,),
                ),
                mb_release("rel-digital", "Album Name"),
            ],
            isrcs=["USRC17607839"],
        )
    )
