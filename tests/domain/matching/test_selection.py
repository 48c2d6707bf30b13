"""Tests for candidate selection rule tables and the acceptance gate."""

from np_enhancer.domain.entities import CandidateRecording, CandidateRelease
from np_enhancer.domain.matching import (
    direct_release_rules,
    passes_acceptance_gate,
    recording_rules,
    release_rules,
    select_first,
)
from tests.fixtures.payloads import OTHER_ARTIST_ID, mb_recording, mb_release


def _recording(recording_id, isrcs=None, releases=None):
    return CandidateRecording.from_musicbrainz(
        mb_recording(recording_id, "Song", releases=releases or [], isrcs=isrcs)
    )


def _release(release_id, title="Album", media_format="Digital Media", artist_ids=None):
    kwargs = {"artist_ids": artist_ids} if artist_ids is not None else {}
    return CandidateRelease.from_musicbrainz(
        mb_release(release_id, title, media_format=media_format, **kwargs)
    )


class TestSelectFirst:
    """Test cases for generic rule evaluation."""

    def test_empty_candidates_returns_none(self):
        assert select_first([], recording_rules(None)) is None

    def test_rule_priority_beats_candidate_order(self):
        rules = [("even", lambda n: n % 2 == 0), ("any", lambda n: True)]
        selection = select_first([1, 3, 4, 6], rules)
        assert selection.candidate == 4
        assert selection.rule == "even"
        assert selection.index == 2

    def test_falls_through_to_later_rule(self):
        rules = [("even", lambda n: n % 2 == 0), ("any", lambda n: True)]
        selection = select_first([1, 3], rules)
        assert selection.candidate == 1
        assert selection.rule == "any"


class TestRecordingRules:
    """Test cases for recording selection."""

    def test_isrc_match_wins_regardless_of_rank(self):
        candidates = [
            _recording("rec-top"),
            _recording("rec-middle", isrcs=["OTHER0000001"]),
            _recording("rec-isrc", isrcs=["USRC17607839"]),
        ]
        selection = select_first(candidates, recording_rules("USRC17607839"))
        assert selection.candidate.id == "rec-isrc"
        assert selection.rule == "isrc"

    def test_without_isrc_takes_database_ranking(self):
        candidates = [_recording("rec-top"), _recording("rec-2", isrcs=["X"])]
        selection = select_first(candidates, recording_rules(None))
        assert selection.candidate.id == "rec-top"
        assert selection.rule == "first"

    def test_unmatched_isrc_falls_back_to_first(self):
        candidates = [_recording("rec-top"), _recording("rec-2")]
        selection = select_first(candidates, recording_rules("USRC17607839"))
        assert selection.candidate.id == "rec-top"


class TestReleaseRules:
    """Test cases for reconciliation release selection."""

    def test_prefers_primary_artist_digital_release(self, matching_recording):
        selection = select_first(
            matching_recording.releases, release_rules(matching_recording)
        )
        assert selection.candidate.id == "rel-digital"
        assert selection.rule == "primary_artist_digital"

    def test_falls_back_to_first_release(self):
        recording = _recording(
            "rec-1",
            releases=[
                mb_release("rel-cd", "Album", media_format="CD"),
                mb_release("rel-vinyl", "Album", media_format='12" Vinyl'),
            ],
        )
        selection = select_first(recording.releases, release_rules(recording))
        assert selection.candidate.id == "rel-cd"
        assert selection.rule == "first"

    def test_release_without_media_is_not_digital(self):
        recording = _recording(
            "rec-1",
            releases=[
                mb_release("rel-none", "Album", media_format=None),
                mb_release("rel-digital", "Album"),
            ],
        )
        selection = select_first(recording.releases, release_rules(recording))
        assert selection.candidate.id == "rel-digital"

    def test_no_releases_selects_nothing(self):
        recording = _recording("rec-1")
        assert select_first(recording.releases, release_rules(recording)) is None


class TestDirectReleaseRules:
    """Strict three-tier preference for the trusted direct path."""

    def test_exact_title_and_digital_is_top_tier(self):
        releases = [
            _release("rel-first", title="Other", media_format="CD"),
            _release("rel-digital", title="Other"),
            _release("rel-exact", title="Greatest Hits"),
        ]
        selection = select_first(releases, direct_release_rules("Greatest Hits"))
        assert selection.candidate.id == "rel-exact"
        assert selection.rule == "title_digital"

    def test_digital_any_title_is_second_tier(self):
        releases = [
            _release("rel-first", title="Greatest Hits", media_format="CD"),
            _release("rel-digital", title="Other"),
        ]
        selection = select_first(releases, direct_release_rules("Greatest Hits"))
        assert selection.candidate.id == "rel-digital"
        assert selection.rule == "digital"

    def test_first_release_is_last_resort(self):
        releases = [
            _release("rel-first", title="Other", media_format="CD"),
            _release("rel-second", title="Greatest Hits", media_format="Cassette"),
        ]
        selection = select_first(releases, direct_release_rules("Greatest Hits"))
        assert selection.candidate.id == "rel-first"
        assert selection.rule == "first"

    def test_title_match_is_case_sensitive(self):
        releases = [
            _release("rel-lower", title="greatest hits"),
            _release("rel-exact", title="Greatest Hits"),
        ]
        selection = select_first(releases, direct_release_rules("Greatest Hits"))
        assert selection.candidate.id == "rel-exact"


class TestAcceptanceGate:
    """Test cases for the title-or-ISRC acceptance gate."""

    def test_title_match_is_case_insensitive(self):
        recording = _recording("rec-1")
        release = _release("rel-1", title="demo tape")
        assert passes_acceptance_gate(recording, release, "Demo Tape", None)

    def test_title_mismatch_without_isrc_is_rejected(self):
        recording = _recording("rec-1", isrcs=["USRC17607839"])
        release = _release("rel-1", title="Different")
        assert not passes_acceptance_gate(recording, release, "Demo Tape", None)

    def test_isrc_corroborates_title_mismatch(self):
        recording = _recording("rec-1", isrcs=["USRC17607839"])
        release = _release("rel-1", title="Regional Variant")
        assert passes_acceptance_gate(recording, release, "Album", "USRC17607839")

    def test_title_and_isrc_mismatch_is_rejected(self):
        recording = _recording("rec-1", isrcs=["OTHER0000001"])
        release = _release("rel-1", title="Regional Variant", artist_ids=(OTHER_ARTIST_ID,))
        assert not passes_acceptance_gate(recording, release, "Album", "USRC17607839")
