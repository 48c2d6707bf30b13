"""Candidate selection as explicit, ordered rule tables.

Each table is a list of ``(rule name, predicate)`` pairs evaluated in
priority order. The first rule with any matching candidate wins, and within
a rule the candidate with the lowest index wins. The rule name travels with
the selection so callers can log why a candidate was chosen.
"""

from collections.abc import Callable, Sequence

from attrs import define

from np_enhancer.domain.entities import CandidateRecording, CandidateRelease

type SelectionRule[T] = tuple[str, Callable[[T], bool]]


@define(frozen=True, slots=True)
class Selection[T]:
    """Chosen candidate plus the rule that selected it."""

    candidate: T
    rule: str
    index: int


def _always(_candidate) -> bool:
    return True


def select_first[T](
    candidates: Sequence[T], rules: Sequence[SelectionRule[T]]
) -> Selection[T] | None:
    """Apply rules in priority order and return the first hit, if any."""
    for rule_name, predicate in rules:
        for index, candidate in enumerate(candidates):
            if predicate(candidate):
                return Selection(candidate=candidate, rule=rule_name, index=index)
    return None


# =============================================================================
# RULE TABLES
# =============================================================================


def recording_rules(isrc: str | None) -> list[SelectionRule[CandidateRecording]]:
    """ISRC corroboration first, then the database's own top-ranked result."""
    rules: list[SelectionRule[CandidateRecording]] = []
    if isrc:
        rules.append(("isrc", lambda recording: recording.has_isrc(isrc)))
    rules.append(("first", _always))
    return rules


def release_rules(
    recording: CandidateRecording,
) -> list[SelectionRule[CandidateRelease]]:
    """Rules for picking a release during reconciliation.

    Prefers a Digital Media release credited to the recording's primary
    artist, else the first release listed.
    """
    primary_artist_id = recording.primary_artist_id

    def primary_artist_digital(release: CandidateRelease) -> bool:
        return (
            primary_artist_id is not None
            and primary_artist_id in release.artist_ids
            and release.is_digital
        )

    return [
        ("primary_artist_digital", primary_artist_digital),
        ("first", _always),
    ]


def direct_release_rules(release_name: str) -> list[SelectionRule[CandidateRelease]]:
    """Rules for the trusted direct-lookup path.

    (exact title AND Digital Media) > (Digital Media) > (first release).
    """
    return [
        (
            "title_digital",
            lambda release: release.title == release_name and release.is_digital,
        ),
        ("digital", lambda release: release.is_digital),
        ("first", _always),
    ]


# =============================================================================
# ACCEPTANCE GATE
# =============================================================================


def passes_acceptance_gate(
    recording: CandidateRecording,
    release: CandidateRelease,
    cleaned_release_name: str,
    isrc: str | None,
) -> bool:
    """Accept when the release title lines up or the ISRC corroborates it.

    Title comparison is case-insensitive against the cleaned release name.
    Without an ISRC on the listen the ISRC sub-check always fails, so the
    gate reduces to title matching alone.
    """
    title_matches = release.title.lower() == cleaned_release_name.lower()
    return title_matches or recording.has_isrc(isrc)
