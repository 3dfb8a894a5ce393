"""Voicing data model — immutable value types shared by every engine stage.

Types:
    Candidate            – one option for a single string (muted or fretted)
    StringNote           – a sounded (string, fret, pitch) triple
    Voicing              – a finished, playable chord shape (a "sequence")
    Barre                – one finger pressing a run of strings at one fret
    ErgonomicBreakdown   – per-component playability cost
    VoiceLeadingResult   – movement between two voicings
    VoicingConfig        – search / ranking options with documented defaults

String index 0 is always the lowest-pitched string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pretty_midi

if TYPE_CHECKING:
    from .cost_model import ErgonomicWeights


@dataclass(frozen=True)
class Candidate:
    """A per-string option: ``fret``/``pitch`` are ``None`` when muted."""

    fret: int | None = None
    pitch: int | None = None

    @property
    def is_muted(self) -> bool:
        return self.fret is None

    @property
    def pitch_class(self) -> int | None:
        if self.pitch is None:
            return None
        return self.pitch % 12


MUTED = Candidate()

# One candidate per string, index-aligned with the tuning.
Assignment = tuple[Candidate, ...]


@dataclass(frozen=True)
class StringNote:
    """A sounded note: which string, which fret, and the absolute pitch."""

    string: int
    fret: int
    pitch: int

    @property
    def pitch_class(self) -> int:
        return self.pitch % 12

    @property
    def name(self) -> str:
        """Scientific pitch name, e.g. ``"C3"``."""
        return pretty_midi.note_number_to_name(self.pitch)


@dataclass(frozen=True)
class ErgonomicBreakdown:
    """Cost components for one assignment. Lower ``total_cost`` is easier.

    ``fret_span`` and ``finger_count`` are raw measurements (frets and
    fingers); the remaining components are normalised scores. The total
    is the weighted sum computed by :class:`ErgonomicCostModel`.
    """

    fret_span: int
    finger_count: int
    stretch_evenness: float
    string_contiguity: float
    open_string_bonus: float
    bass_correctness: float
    position_weight: float
    total_cost: float


@dataclass(frozen=True)
class Voicing:
    """A playable chord shape: the sounded strings, lowest string first.

    Muted strings are simply absent from ``string_notes``.
    """

    string_notes: tuple[StringNote, ...]
    breakdown: ErgonomicBreakdown | None = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.string_notes)

    @property
    def cost(self) -> float:
        if self.breakdown is None:
            return 0.0
        return self.breakdown.total_cost

    @property
    def min_fret(self) -> int:
        return min((sn.fret for sn in self.string_notes), default=0)

    @property
    def max_fret(self) -> int:
        return max((sn.fret for sn in self.string_notes), default=0)

    @property
    def fret_span(self) -> int:
        return self.max_fret - self.min_fret

    @property
    def fretted_span(self) -> int:
        """Span among fretted (non-open) notes only; 0 below two such notes."""
        frets = [sn.fret for sn in self.string_notes if sn.fret > 0]
        if len(frets) < 2:
            return 0
        return max(frets) - min(frets)

    @property
    def pitch_classes(self) -> frozenset[int]:
        return frozenset(sn.pitch_class for sn in self.string_notes)

    def by_string(self) -> dict[int, StringNote]:
        return {sn.string: sn for sn in self.string_notes}

    def fret_pattern(self, string_count: int) -> tuple[int | None, ...]:
        """Fret per string with ``None`` for muted, e.g. ``(None, 3, 2, 0, 1, 0)``."""
        frets = {sn.string: sn.fret for sn in self.string_notes}
        return tuple(frets.get(s) for s in range(string_count))


@dataclass(frozen=True)
class Barre:
    """A run of at least two adjacent strings fretted at the same fret."""

    fret: int
    from_string: int
    to_string: int

    @property
    def strings(self) -> range:
        return range(self.from_string, self.to_string + 1)


@dataclass(frozen=True)
class VoiceLeadingResult:
    """Movement between two voicings.

    ``per_string[s]`` is the semitone distance on string ``s``, or ``None``
    when the string is silent in at least one voicing.
    """

    per_string: tuple[int | None, ...]
    total_distance: float
    common_strings: int


@dataclass(frozen=True)
class VoicingConfig:
    """Options for :func:`generate_voicings`.

    Attributes:
        max_fingers: Upper bound on fingers (barre-aware); ``None`` = unbounded.
        max_span: Upper bound on the fretted span; ``None`` = unbounded.
        max_results: Number of ranked voicings returned; ``None`` = all.
        allow_open: Whether open strings (fret 0) are candidates.
        min_sounded: Minimum number of sounded strings; ``None`` = no minimum.
        prune_subsets: Drop voicings whose sounded strings are a strict
            subset of a better-ranked voicing.
        search_limit: Stop the search after this many valid assignments;
            ``None`` enumerates exhaustively.
        weights: Cost weights; ``None`` uses the built-in defaults.
    """

    max_fingers: int | None = None
    max_span: int | None = None
    max_results: int | None = 15
    allow_open: bool = True
    min_sounded: int | None = None
    prune_subsets: bool = False
    search_limit: int | None = 2000
    weights: ErgonomicWeights | None = None
