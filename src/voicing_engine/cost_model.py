"""Cost Model — ergonomic scoring of fretted chord assignments.

Weights live in an :class:`ErgonomicWeights` instance. The built-in
defaults mirror ``configs/voicing_costs.yaml``; :func:`load_weights` reads
a (re)calibrated copy of that file. Only the relative orderings the cost
produces are meaningful, not the absolute numbers.

Components:
    fret_span         – fretted span (max − min fretted fret)
    finger_count      – fingers needed, one per barre
    stretch_evenness  – dispersion of fret gaps between finger positions
    string_contiguity – muted strings inside the sounded range
    open_string_bonus – reward (negative) for open strings
    bass_correctness  – lowest sounded note is not the intended bass
    position_weight   – preference for lower-neck positions
    total_cost        – weighted aggregate
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from .voicing import Barre, Candidate, ErgonomicBreakdown

# A fret per string, ``None`` for a muted string.
FretPattern = Sequence[int | None]


@dataclass(frozen=True)
class ErgonomicWeights:
    """Weights and normalisers for :class:`ErgonomicCostModel`."""

    fret_span_weight: float = 1.0
    finger_count_weight: float = 1.5
    stretch_evenness_weight: float = 0.5
    string_contiguity_weight: float = 1.2
    open_string_bonus_weight: float = 0.4
    bass_correctness_weight: float = 1.0
    position_weight: float = 0.2
    span_normalizer: float = 5.0
    comfortable_fingers: int = 4
    over_finger_score: float = 2.0
    stretch_normalizer: float = 4.0
    position_normalizer: float = 12.0


def _default_config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "configs" / "voicing_costs.yaml"


def load_weights(config_path: str | Path | None = None) -> ErgonomicWeights:
    """Read cost weights from a YAML file.

    Args:
        config_path: Path to the YAML file. Defaults to
            ``configs/voicing_costs.yaml`` relative to the project root.

    Returns:
        The parsed :class:`ErgonomicWeights`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a required key is missing.
    """
    config_path = _default_config_path() if config_path is None else Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Cost config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as fh:
        cfg: dict[str, Any] = yaml.safe_load(fh) or {}

    values: dict[str, Any] = {}
    for f in fields(ErgonomicWeights):
        if f.name not in cfg:
            raise ValueError(
                f"Missing required key '{f.name}' in cost config: {config_path}"
            )
        cast = int if f.name == "comfortable_fingers" else float
        values[f.name] = cast(cfg[f.name])

    return ErgonomicWeights(**values)


# ── Shape analysis ────────────────────────────────────────────


def detect_barres(frets: FretPattern) -> list[Barre]:
    """Find maximal runs of >= 2 adjacent strings at the same non-zero fret.

    Args:
        frets: Fret per string, lowest string first (``None`` = muted).

    Returns:
        Barres ordered by their lowest string.
    """
    barres: list[Barre] = []
    run_start = 0
    for s in range(1, len(frets) + 1):
        if s < len(frets) and frets[s] is not None and frets[s] > 0 and frets[s] == frets[run_start]:
            continue
        fret = frets[run_start]
        if s - run_start >= 2 and fret is not None and fret > 0:
            barres.append(Barre(fret=fret, from_string=run_start, to_string=s - 1))
        run_start = s
    return barres


def count_fingers(frets: FretPattern) -> int:
    """Fingers needed: one per barre plus one per other fretted string.

    Open and muted strings need no finger.
    """
    fingers = 0
    previous: int | None = None
    for fret in frets:
        if fret is not None and fret > 0 and fret != previous:
            fingers += 1
        previous = fret
    return fingers


def _finger_positions(frets: FretPattern) -> list[int]:
    """Fret of each finger, lowest string first; a barre is one position."""
    positions: list[int] = []
    previous: int | None = None
    for fret in frets:
        if fret is not None and fret > 0 and fret != previous:
            positions.append(fret)
        previous = fret
    return positions


class ErgonomicCostModel:
    """Rule-based playability cost for complete string assignments.

    Args:
        weights: Cost weights; defaults to :class:`ErgonomicWeights`.
    """

    def __init__(self, weights: ErgonomicWeights | None = None) -> None:
        self.weights = weights if weights is not None else ErgonomicWeights()

    @classmethod
    def from_config(cls, config_path: str | Path | None = None) -> "ErgonomicCostModel":
        """Build a model from a YAML weights file (see :func:`load_weights`)."""
        return cls(load_weights(config_path))

    # ── Individual cost components ────────────────────────────

    def fret_span(self, frets: FretPattern) -> int:
        fretted = [f for f in frets if f is not None and f > 0]
        if len(fretted) < 2:
            return 0
        return max(fretted) - min(fretted)

    def finger_count_score(self, finger_count: int) -> float:
        """Normalised finger cost; beyond a comfortable hand it saturates high."""
        if finger_count > self.weights.comfortable_fingers:
            return self.weights.over_finger_score
        return finger_count / self.weights.comfortable_fingers

    def stretch_evenness(self, frets: FretPattern) -> float:
        """Variance of fret gaps between successive finger positions, in [0, 1]."""
        positions = _finger_positions(frets)
        if len(positions) < 2:
            return 0.0
        gaps = np.abs(np.diff(np.asarray(positions, dtype=float)))
        return float(min(np.var(gaps) / self.weights.stretch_normalizer, 1.0))

    def string_contiguity(self, frets: FretPattern) -> float:
        """Fraction of inner strings that are muted within the sounded range."""
        sounded = [s for s, f in enumerate(frets) if f is not None]
        if len(sounded) < 2:
            return 0.0
        width = sounded[-1] - sounded[0] + 1
        if width <= 2:
            return 0.0
        return (width - len(sounded)) / (width - 2)

    def open_string_bonus(self, frets: FretPattern) -> float:
        """Negative score: share of sounded strings that ring open."""
        sounded = [f for f in frets if f is not None]
        if not sounded:
            return 0.0
        return -(sum(1 for f in sounded if f == 0) / len(sounded))

    def bass_correctness(self, assignment: Sequence[Candidate], bass_pitch_class: int) -> float:
        """0 when the lowest sounded note has the bass pitch class, else 1."""
        for candidate in assignment:
            if candidate.is_muted:
                continue
            return 0.0 if candidate.pitch_class == bass_pitch_class % 12 else 1.0
        return 0.0

    def position_weight(self, frets: FretPattern) -> float:
        fretted = [f for f in frets if f is not None and f > 0]
        if not fretted:
            return 0.0
        return min(fretted) / self.weights.position_normalizer

    # ── Aggregate ─────────────────────────────────────────────

    def score(self, assignment: Sequence[Candidate], bass_pitch_class: int) -> ErgonomicBreakdown:
        """Compute every component and the weighted total for *assignment*.

        Args:
            assignment: One candidate per string, lowest string first.
            bass_pitch_class: Pitch class intended as the lowest sounded note.

        Returns:
            The full :class:`ErgonomicBreakdown`.
        """
        w = self.weights
        frets = [c.fret for c in assignment]

        span = self.fret_span(frets)
        fingers = count_fingers(frets)
        stretch = self.stretch_evenness(frets)
        contiguity = self.string_contiguity(frets)
        open_bonus = self.open_string_bonus(frets)
        bass = self.bass_correctness(assignment, bass_pitch_class)
        position = self.position_weight(frets)

        total = (
            w.fret_span_weight * (span / w.span_normalizer)
            + w.finger_count_weight * self.finger_count_score(fingers)
            + w.stretch_evenness_weight * stretch
            + w.string_contiguity_weight * contiguity
            + w.open_string_bonus_weight * open_bonus
            + w.bass_correctness_weight * bass
            + w.position_weight * position
        )

        return ErgonomicBreakdown(
            fret_span=span,
            finger_count=fingers,
            stretch_evenness=stretch,
            string_contiguity=contiguity,
            open_string_bonus=open_bonus,
            bass_correctness=bass,
            position_weight=position,
            total_cost=total,
        )

    def total_cost(self, assignment: Sequence[Candidate], bass_pitch_class: int) -> float:
        """Convenience wrapper returning only ``total_cost``."""
        return self.score(assignment, bass_pitch_class).total_cost
