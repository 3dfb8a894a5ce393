"""Progression — greedy voice-leading selection across a chord sequence.

Each chord arrives as a family of ranked voicings per inversion. The first
chord keeps its default selection; every later chord commits, left to
right, the (inversion, voicing) closest to the voicing already committed
for the chord before it. Earlier choices are never revisited, so the
result is locally smooth rather than globally optimal.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .generator import generate_voicings
from .voice_leading import compute_voice_leading
from .voicing import Voicing, VoicingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressionChord:
    """One chord of a progression.

    Attributes:
        voicings: Ranked voicings keyed by inversion number.
        string_count: Strings on the instrument the chord is played on.
        inversion: Default inversion (kept for the first chord).
        sequence_index: Default voicing index (kept for the first chord).
    """

    voicings: Mapping[int, Sequence[Voicing]]
    string_count: int
    inversion: int = 0
    sequence_index: int = 0


@dataclass(frozen=True)
class ProgressionSelection:
    """The committed choice for one chord.

    ``distance`` is the movement from the previous committed voicing, or
    ``None`` for the chord that anchors the progression.
    """

    inversion: int
    sequence_index: int
    distance: float | None = None


def invert_pitch_classes(pitch_classes: Sequence[int], inversion: int) -> list[int]:
    """Rotate an ordered pitch-class list so element *inversion* is the bass.

    Inversions wrap around the chord size.

    Example:
        ``invert_pitch_classes([0, 4, 7], 1)`` → ``[4, 7, 0]``
    """
    if not pitch_classes:
        return []
    n = inversion % len(pitch_classes)
    return list(pitch_classes[n:]) + list(pitch_classes[:n])


def build_voicing_family(
    pitch_classes: Sequence[int],
    tuning: Sequence[int | str],
    fret_count: int,
    config: VoicingConfig | None = None,
    inversions: Iterable[int] | None = None,
) -> dict[int, list[Voicing]]:
    """Generate ranked voicings for each inversion of a chord.

    Args:
        pitch_classes: Chord tones in root-position order (root first).
        tuning: Open-string pitches or note names.
        fret_count: Highest fret considered.
        config: Options passed to :func:`generate_voicings`.
        inversions: Inversion numbers to build; defaults to all of them.

    Returns:
        ``{inversion: voicings}``; families may be empty.
    """
    ordered = list(dict.fromkeys(pc % 12 for pc in pitch_classes))
    if inversions is None:
        inversions = range(len(ordered))

    family: dict[int, list[Voicing]] = {}
    for n in inversions:
        rotated = invert_pitch_classes(ordered, n)
        if not rotated:
            family[n] = []
            continue
        family[n] = generate_voicings(rotated, rotated[0], tuning, fret_count, config)
    return family


def _anchor(chord: ProgressionChord, families: dict[int, Sequence[Voicing]]) -> ProgressionSelection:
    inversion = chord.inversion if chord.inversion in families else min(families)
    index = chord.sequence_index
    if not 0 <= index < len(families[inversion]):
        index = 0
    return ProgressionSelection(inversion=inversion, sequence_index=index)


def optimize_progression(
    chords: Sequence[ProgressionChord],
    unmatched_penalty: float = 0.0,
) -> list[ProgressionSelection | None]:
    """Choose one (inversion, voicing) per chord for smooth voice leading.

    Args:
        chords: The progression, in playing order.
        unmatched_penalty: Passed to :func:`compute_voice_leading`.

    Returns:
        One selection per chord, ``None`` for chords without any voicing.
        Such chords are skipped: the next chord is compared with the last
        committed voicing.
    """
    selections: list[ProgressionSelection | None] = []
    previous: Voicing | None = None

    for i, chord in enumerate(chords):
        families = {inv: fam for inv, fam in chord.voicings.items() if fam}
        if not families:
            logger.debug("Chord %d has no voicings; skipped", i)
            selections.append(None)
            continue

        if previous is None:
            selection = _anchor(chord, families)
        else:
            # Default inversion first so it wins ties.
            order = sorted(families, key=lambda inv: (inv != chord.inversion, inv))
            best_distance = math.inf
            best: tuple[int, int] = (order[0], 0)
            for inv in order:
                for idx, voicing in enumerate(families[inv]):
                    dist = compute_voice_leading(
                        previous, voicing, chord.string_count, unmatched_penalty
                    ).total_distance
                    if dist < best_distance:
                        best_distance = dist
                        best = (inv, idx)
            selection = ProgressionSelection(
                inversion=best[0], sequence_index=best[1], distance=best_distance
            )
            logger.debug(
                "Chord %d: inversion %d, voicing %d (distance %.1f)",
                i, selection.inversion, selection.sequence_index, best_distance,
            )

        selections.append(selection)
        previous = families[selection.inversion][selection.sequence_index]

    return selections
