"""Candidate Map — per-string playable options for a set of pitch classes.

For every string the list starts with the muted option, followed by each
fret (ascending) whose pitch belongs to the target pitch-class set.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .voicing import MUTED, Candidate


def normalize_pitch_classes(pitch_classes: Iterable[int]) -> frozenset[int]:
    """Reduce pitch classes (or absolute pitches) to a set of 0–11 values."""
    return frozenset(pc % 12 for pc in pitch_classes)


def build_candidate_map(
    pitch_classes: Iterable[int],
    tuning: Sequence[int],
    fret_count: int,
    allow_open: bool = True,
) -> list[list[Candidate]]:
    """List the candidates for every string of *tuning*.

    Args:
        pitch_classes: Target pitch classes.
        tuning: Open-string pitches, lowest string first.
        fret_count: Highest fret considered (inclusive).
        allow_open: If ``False``, fret 0 is never a candidate.

    Returns:
        One list per string. Each list is non-empty: element 0 is always
        :data:`MUTED`. An empty target set yields muted-only lists.
    """
    targets = normalize_pitch_classes(pitch_classes)
    start_fret = 0 if allow_open else 1

    candidate_map: list[list[Candidate]] = []
    for open_pitch in tuning:
        options: list[Candidate] = [MUTED]
        for fret in range(start_fret, fret_count + 1):
            pitch = open_pitch + fret
            if pitch % 12 in targets:
                options.append(Candidate(fret=fret, pitch=pitch))
        candidate_map.append(options)

    return candidate_map
