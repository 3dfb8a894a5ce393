"""Search — depth-first enumeration of string assignments.

State carried down the recursion (one level per string):
    covered     – pitch classes sounded so far
    lo / hi     – lowest / highest fretted (non-open) fret so far
    fingers     – barre-aware finger count so far
    previous    – fret chosen on the previous string (for barre runs)
    sounded     – number of sounded strings so far

Pruning:
    - span:     fretted span exceeds ``max_span``
    - fingers:  finger count exceeds ``max_fingers``
    - coverage: the remaining strings cannot supply a missing pitch class,
                or there are fewer remaining strings than missing pitch classes
    - sounded:  the remaining strings cannot reach ``min_sounded``

Candidates are explored in candidate-map order (muted first, then frets
ascending), so enumeration order is fully deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from itertools import islice

from .voicing import Assignment, Candidate, ErgonomicBreakdown, StringNote, Voicing

logger = logging.getLogger(__name__)


def _suffix_supply(candidate_map: Sequence[Sequence[Candidate]]) -> list[frozenset[int]]:
    """``supply[i]`` = pitch classes available on strings ``i`` and above."""
    supply: list[frozenset[int]] = [frozenset()] * (len(candidate_map) + 1)
    for s in range(len(candidate_map) - 1, -1, -1):
        here = {c.pitch_class for c in candidate_map[s] if not c.is_muted}
        supply[s] = supply[s + 1] | here
    return supply


def iter_assignments(
    candidate_map: Sequence[Sequence[Candidate]],
    pitch_classes: frozenset[int],
    max_span: int | None = None,
    max_fingers: int | None = None,
    min_sounded: int | None = None,
) -> Iterator[Assignment]:
    """Lazily yield every valid assignment in enumeration order.

    A valid assignment picks one candidate per string, sounds every pitch
    class in *pitch_classes*, and respects the span / finger / sounded
    limits.

    Args:
        candidate_map: Output of :func:`build_candidate_map`.
        pitch_classes: Required pitch classes (normalised to 0–11).
        max_span: Maximum fretted span, or ``None``.
        max_fingers: Maximum barre-aware finger count, or ``None``.
        min_sounded: Minimum sounded strings, or ``None``.

    Yields:
        Tuples of :class:`Candidate`, one per string.
    """
    string_count = len(candidate_map)
    if string_count == 0 or not pitch_classes or len(pitch_classes) > string_count:
        return

    supply = _suffix_supply(candidate_map)
    if not pitch_classes <= supply[0]:
        return

    required_sounded = min_sounded or 0
    current: list[Candidate] = []

    def dfs(
        s: int,
        covered: frozenset[int],
        lo: int | None,
        hi: int | None,
        fingers: int,
        previous: int | None,
        sounded: int,
    ) -> Iterator[Assignment]:
        if s == string_count:
            if covered >= pitch_classes and sounded >= required_sounded:
                yield tuple(current)
            return

        for candidate in candidate_map[s]:
            fret = candidate.fret
            next_lo, next_hi, next_fingers = lo, hi, fingers
            next_covered = covered
            next_sounded = sounded

            if fret is not None:
                next_sounded += 1
                next_covered = covered | {candidate.pitch_class}
                if fret > 0:
                    next_lo = fret if lo is None else min(lo, fret)
                    next_hi = fret if hi is None else max(hi, fret)
                    if max_span is not None and next_hi - next_lo > max_span:
                        continue
                    if fret != previous:
                        next_fingers += 1
                        if max_fingers is not None and next_fingers > max_fingers:
                            continue

            missing = pitch_classes - next_covered
            if not missing <= supply[s + 1]:
                continue
            # Each remaining string sounds at most one missing pitch class.
            if len(missing) > string_count - s - 1:
                continue
            if next_sounded + (string_count - s - 1) < required_sounded:
                continue

            current.append(candidate)
            yield from dfs(s + 1, next_covered, next_lo, next_hi, next_fingers, fret, next_sounded)
            current.pop()

    yield from dfs(0, frozenset(), None, None, 0, None, 0)


def search_assignments(
    candidate_map: Sequence[Sequence[Candidate]],
    pitch_classes: frozenset[int],
    max_span: int | None = None,
    max_fingers: int | None = None,
    min_sounded: int | None = None,
    limit: int | None = None,
) -> list[Assignment]:
    """Collect valid assignments, stopping once *limit* have been found.

    Args:
        limit: Generation cap; ``None`` enumerates exhaustively.

    Returns:
        Assignments in enumeration order (possibly empty).
    """
    found = list(
        islice(
            iter_assignments(candidate_map, pitch_classes, max_span, max_fingers, min_sounded),
            limit,
        )
    )
    if limit is not None and len(found) >= limit:
        logger.debug("Search stopped at generation cap of %d assignments", limit)
    else:
        logger.debug("Search exhausted with %d valid assignments", len(found))
    return found


def assignment_to_voicing(
    assignment: Sequence[Candidate],
    breakdown: ErgonomicBreakdown | None = None,
) -> Voicing:
    """Drop muted strings and freeze the result into a :class:`Voicing`."""
    notes = tuple(
        StringNote(string=s, fret=c.fret, pitch=c.pitch)
        for s, c in enumerate(assignment)
        if not c.is_muted
    )
    return Voicing(string_notes=notes, breakdown=breakdown)
