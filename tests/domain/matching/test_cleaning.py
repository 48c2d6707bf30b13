"""Tests for query-side name cleaning."""

import pytest

from np_enhancer.domain.matching import clean_release_name, strip_featuring


class TestStripFeaturing:
    """Test cases for (feat. ...) removal."""

    def test_strips_featuring_suffix(self):
        assert strip_featuring("Song (feat. Someone)") == "Song"

    def test_case_insensitive(self):
        assert strip_featuring("Song (FEAT. Someone Else)") == "Song"

    def test_leaves_plain_title_untouched(self):
        assert strip_featuring("Paranoid Android") == "Paranoid Android"

    def test_only_first_group_removed(self):
        result = strip_featuring("Song (feat. A) (feat. B)")
        assert result == "Song (feat. B)"


class TestCleanReleaseName:
    """Test cases for release name cleaning."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Album Name - Deluxe", "Album Name"),
            ("Album Name - EP", "Album Name"),
            ("Song - Single", "Song"),
            ("Demo Tape", "Demo Tape"),
            ("Album (feat. Someone)", "Album"),
            ("", ""),
        ],
    )
    def test_clean_release_name(self, raw, expected):
        assert clean_release_name(raw) == expected

    def test_suffix_then_featuring(self):
        result = clean_release_name("Song (feat. Someone) - Single")
        assert result == "Song"
