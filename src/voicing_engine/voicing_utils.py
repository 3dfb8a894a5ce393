"""Voicing utilities — labels and summaries for finished voicings."""

from __future__ import annotations

from typing import Literal

from .cost_model import ErgonomicCostModel, ErgonomicWeights, detect_barres
from .voicing import MUTED, Candidate, ErgonomicBreakdown, Voicing

StringStatus = Literal["muted", "open", "fretted"]
DifficultyTier = Literal["easy", "medium", "hard"]

# Upper bounds (exclusive) of total cost per tier.
_EASY_MAX: float = 1.5
_MEDIUM_MAX: float = 3.0


def tab_shorthand(voicing: Voicing, string_count: int) -> str:
    """Tab-style shorthand, lowest string first, e.g. ``"x32010"``.

    Frets of 10 and above are parenthesised: ``"x(10)(12)..."``.
    """
    parts: list[str] = []
    for fret in voicing.fret_pattern(string_count):
        if fret is None:
            parts.append("x")
        elif fret >= 10:
            parts.append(f"({fret})")
        else:
            parts.append(str(fret))
    return "".join(parts)


def string_statuses(voicing: Voicing, string_count: int) -> list[StringStatus]:
    statuses: list[StringStatus] = []
    for fret in voicing.fret_pattern(string_count):
        if fret is None:
            statuses.append("muted")
        elif fret == 0:
            statuses.append("open")
        else:
            statuses.append("fretted")
    return statuses


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def shape_type(voicing: Voicing, string_count: int) -> str:
    """Classify a shape as ``"Barre"``, ``"Open"`` or ``"<n>th pos"``."""
    if detect_barres(voicing.fret_pattern(string_count)):
        return "Barre"
    if any(sn.fret == 0 for sn in voicing.string_notes):
        return "Open"
    return f"{_ordinal(voicing.min_fret)} pos"


def inversion_label(inversion: int) -> str:
    if inversion == 0:
        return "Root"
    return f"{_ordinal(inversion)} inv"


def score_voicing(
    voicing: Voicing,
    string_count: int,
    bass_pitch_class: int,
    weights: ErgonomicWeights | None = None,
) -> ErgonomicBreakdown:
    """Re-score a finished voicing, e.g. against a different bass target."""
    by_string = voicing.by_string()
    assignment: list[Candidate] = []
    for s in range(string_count):
        sn = by_string.get(s)
        assignment.append(MUTED if sn is None else Candidate(fret=sn.fret, pitch=sn.pitch))
    return ErgonomicCostModel(weights).score(assignment, bass_pitch_class)


def difficulty_tier(total_cost: float) -> DifficultyTier:
    if total_cost < _EASY_MAX:
        return "easy"
    if total_cost < _MEDIUM_MAX:
        return "medium"
    return "hard"
