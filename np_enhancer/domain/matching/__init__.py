"""Name cleaning, candidate selection tables and track assembly."""

from .assembly import track_from_candidates, track_from_mapping
from .cleaning import clean_release_name, strip_featuring
from .selection import (
    Selection,
    SelectionRule,
    direct_release_rules,
    passes_acceptance_gate,
    recording_rules,
    release_rules,
    select_first,
)

__all__ = [
    "Selection",
    "SelectionRule",
    "clean_release_name",
    "direct_release_rules",
    "passes_acceptance_gate",
    "recording_rules",
    "release_rules",
    "select_first",
    "strip_featuring",
    "track_from_candidates",
    "track_from_mapping",
]
