"""Tuning — open-string pitches for fretted instruments.

A tuning is an ordered sequence of absolute pitches (MIDI note numbers),
index 0 = lowest-pitched string. Note names such as ``"E2"`` or ``"G#3"``
are accepted anywhere a pitch is expected and converted with *pretty_midi*.
"""

from __future__ import annotations

from collections.abc import Sequence

import pretty_midi


# ── Presets ───────────────────────────────────────────────────
TUNINGS: dict[str, dict[str, tuple[str, ...]]] = {
    "guitar": {
        "standard": ("E2", "A2", "D3", "G3", "B3", "E4"),
        "dropped_d": ("D2", "A2", "D3", "G3", "B3", "E4"),
        "open_g": ("D2", "G2", "D3", "G3", "B3", "D4"),
        "major_thirds": ("E2", "G#2", "E3", "G#3", "E4", "G#4"),
    },
    "banjo": {
        "standard": ("D3", "G3", "B3", "D4"),
        "double_c": ("C3", "G3", "C3", "D4"),
    },
    "mandolin": {
        "standard": ("G3", "D4", "A4", "E5"),
    },
}


def note_to_pitch(note: int | str) -> int:
    """Convert a note name or MIDI number to an absolute pitch.

    Args:
        note: MIDI note number, or a name like ``"E2"`` / ``"Bb3"``.

    Returns:
        MIDI note number.

    Raises:
        ValueError: If *note* is a string pretty_midi cannot parse.
    """
    if isinstance(note, str):
        try:
            return pretty_midi.note_name_to_number(note.strip())
        except ValueError as exc:
            raise ValueError(f"Unrecognised note name '{note}': {exc}") from exc
    return int(note)


def resolve_tuning(tuning: Sequence[int | str]) -> tuple[int, ...]:
    """Normalise a tuning to a tuple of absolute pitches (lowest string first)."""
    return tuple(note_to_pitch(n) for n in tuning)


def get_tuning(key: str) -> tuple[int, ...]:
    """Look up a preset by ``"instrument.name"`` (e.g. ``"guitar.standard"``).

    Raises:
        KeyError: If the instrument or tuning name is unknown.
    """
    instrument, _, name = key.partition(".")
    name = name or "standard"
    presets = TUNINGS.get(instrument)
    if presets is None or name not in presets:
        known = sorted(f"{i}.{n}" for i, p in TUNINGS.items() for n in p)
        raise KeyError(f"Unknown tuning '{key}'. Known tunings: {', '.join(known)}")
    return resolve_tuning(presets[name])
