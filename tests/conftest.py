"""
Pytest fixtures for voicing engine tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.voicing_engine.voicing import Candidate, MUTED, StringNote, Voicing  # noqa: E402

STANDARD_TUNING = (40, 45, 50, 55, 59, 64)  # E2 A2 D3 G3 B3 E4


@pytest.fixture
def standard_tuning():
    """Standard guitar tuning as MIDI numbers."""
    return STANDARD_TUNING


@pytest.fixture
def make_voicing():
    """Build a Voicing from (string, pitch, fret) triples."""
    def _make(entries):
        return Voicing(tuple(StringNote(string=s, fret=f, pitch=p) for s, p, f in entries))
    return _make


@pytest.fixture
def make_assignment(standard_tuning):
    """Build an assignment from a fret pattern on standard tuning (None = muted)."""
    def _make(frets, tuning=standard_tuning):
        return tuple(
            MUTED if f is None else Candidate(fret=f, pitch=tuning[s] + f)
            for s, f in enumerate(frets)
        )
    return _make
