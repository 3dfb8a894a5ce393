"""Voice Leading — how far the hand's voices move between two voicings.

Distances are measured per string in pitch space (semitones), so they stay
meaningful across differing open tunings. A string sounded in only one of
the two voicings has no distance and is excluded from the total unless an
``unmatched_penalty`` is requested.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations
from typing import Literal

from .voicing import VoiceLeadingResult, Voicing

Direction = Literal["up", "down", "same"]

# Pitch-class interval → parallel-motion label.
_PARALLEL_INTERVALS: dict[int, str] = {7: "fifth", 0: "octave"}


@dataclass(frozen=True)
class ParallelMotion:
    """Two adjacent strings moving in parallel fifths or octaves."""

    type: str
    strings: tuple[int, int]


def _pitches(voicing: Voicing) -> dict[int, int]:
    return {sn.string: sn.pitch for sn in voicing.string_notes}


def compute_voice_leading(
    a: Voicing,
    b: Voicing,
    string_count: int,
    unmatched_penalty: float = 0.0,
) -> VoiceLeadingResult:
    """Per-string and total semitone movement from *a* to *b*.

    Args:
        a: First voicing.
        b: Second voicing.
        string_count: Strings on the instrument.
        unmatched_penalty: Added once per string sounded in exactly one
            voicing. ``0`` leaves such strings out of the total.

    Returns:
        A :class:`VoiceLeadingResult`. Symmetric in *a* and *b*.
    """
    a_pitch = _pitches(a)
    b_pitch = _pitches(b)

    per_string: list[int | None] = []
    total = 0.0
    common = 0
    for s in range(string_count):
        pa = a_pitch.get(s)
        pb = b_pitch.get(s)
        if pa is not None and pb is not None:
            dist = abs(pa - pb)
            per_string.append(dist)
            total += dist
            common += 1
        else:
            per_string.append(None)
            if (pa is None) != (pb is None):
                total += unmatched_penalty

    return VoiceLeadingResult(
        per_string=tuple(per_string),
        total_distance=total,
        common_strings=common,
    )


def find_smoothest_transition(
    origin: Voicing,
    candidates: Sequence[Voicing],
    string_count: int,
    unmatched_penalty: float = 0.0,
) -> Voicing | None:
    """Candidate closest to *origin*; the first one wins ties.

    Returns ``None`` when *candidates* is empty.
    """
    if not candidates:
        return None
    return min(
        candidates,
        key=lambda c: compute_voice_leading(origin, c, string_count, unmatched_penalty).total_distance,
    )


def sort_by_voice_leading(
    origin: Voicing,
    candidates: Sequence[Voicing],
    string_count: int,
    unmatched_penalty: float = 0.0,
) -> list[Voicing]:
    """New list of *candidates*, smoothest first (stable)."""
    return sorted(
        candidates,
        key=lambda c: compute_voice_leading(origin, c, string_count, unmatched_penalty).total_distance,
    )


def voice_directions(a: Voicing, b: Voicing, string_count: int) -> list[Direction | None]:
    """Motion of each string from *a* to *b*; ``None`` if silent in either."""
    a_pitch = _pitches(a)
    b_pitch = _pitches(b)

    directions: list[Direction | None] = []
    for s in range(string_count):
        pa = a_pitch.get(s)
        pb = b_pitch.get(s)
        if pa is None or pb is None:
            directions.append(None)
        elif pb > pa:
            directions.append("up")
        elif pb < pa:
            directions.append("down")
        else:
            directions.append("same")
    return directions


def contrary_motion_ratio(a: Voicing, b: Voicing, string_count: int) -> float:
    """Share of moving-voice pairs that move in opposite directions.

    Returns 0.0 when fewer than two voices move.
    """
    moving = [d for d in voice_directions(a, b, string_count) if d in ("up", "down")]
    if len(moving) < 2:
        return 0.0
    pairs = list(combinations(moving, 2))
    contrary = sum(1 for x, y in pairs if x != y)
    return contrary / len(pairs)


def detect_parallels(a: Voicing, b: Voicing, string_count: int) -> list[ParallelMotion]:
    """Adjacent string pairs moving in parallel fifths or octaves.

    Both strings must sound in both voicings, both must move in the same
    direction, and their pitch-class interval must be a fifth (or an
    octave/unison) before and after.
    """
    a_pitch = _pitches(a)
    b_pitch = _pitches(b)
    directions = voice_directions(a, b, string_count)

    found: list[ParallelMotion] = []
    for s in range(string_count - 1):
        lower, upper = directions[s], directions[s + 1]
        if lower is None or upper is None or lower == "same" or lower != upper:
            continue
        before = (a_pitch[s + 1] - a_pitch[s]) % 12
        after = (b_pitch[s + 1] - b_pitch[s]) % 12
        if before == after and before in _PARALLEL_INTERVALS:
            found.append(ParallelMotion(type=_PARALLEL_INTERVALS[before], strings=(s, s + 1)))
    return found
