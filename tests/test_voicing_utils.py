"""Display helper tests: tab shorthand, statuses, labels and tiers."""
import pytest

from src.voicing_engine.voicing_utils import (
    difficulty_tier,
    inversion_label,
    score_voicing,
    shape_type,
    string_statuses,
    tab_shorthand,
)

TUNING = (40, 45, 50, 55, 59, 64)


@pytest.fixture
def from_frets(make_voicing):
    def _make(frets):
        return make_voicing([(s, TUNING[s] + f, f) for s, f in enumerate(frets) if f is not None])
    return _make


class TestTabShorthand:
    def test_open_c(self, from_frets):
        assert tab_shorthand(from_frets([None, 3, 2, 0, 1, 0]), 6) == "x32010"

    def test_high_frets_parenthesised(self, from_frets):
        assert tab_shorthand(from_frets([None, 10, 12, 12, 11, None]), 6) == "x(10)(12)(12)(11)x"


class TestStringStatuses:
    def test_statuses(self, from_frets):
        assert string_statuses(from_frets([None, 3, 2, 0, 1, 0]), 6) == [
            "muted", "fretted", "fretted", "open", "fretted", "open",
        ]


class TestShapeType:
    @pytest.mark.parametrize(
        "frets, expected",
        [
            ([1, 3, 3, 2, 1, 1], "Barre"),
            ([None, 3, 2, 0, 1, 0], "Open"),
            ([None, 3, 5, 4, None, None], "3rd pos"),
            ([None, None, 10, 12, 11, None], "10th pos"),
            ([None, 1, 3, 2, None, None], "1st pos"),
        ],
    )
    def test_labels(self, from_frets, frets, expected):
        assert shape_type(from_frets(frets), 6) == expected


class TestInversionLabel:
    @pytest.mark.parametrize(
        "inversion, expected",
        [(0, "Root"), (1, "1st inv"), (2, "2nd inv"), (3, "3rd inv"), (4, "4th inv"), (11, "11th inv")],
    )
    def test_labels(self, inversion, expected):
        assert inversion_label(inversion) == expected


class TestScoreVoicing:
    def test_bass_target_changes_score(self, from_frets):
        voicing = from_frets([None, 3, 2, 0, 1, 0])
        assert score_voicing(voicing, 6, 0).bass_correctness == 0
        assert score_voicing(voicing, 6, 4).bass_correctness == 1.0

    def test_matches_generation_score(self, standard_tuning):
        from src.voicing_engine.generator import generate_voicings

        for voicing in generate_voicings([0, 4, 7], 0, standard_tuning, 5):
            assert score_voicing(voicing, 6, 0) == voicing.breakdown


class TestDifficultyTier:
    @pytest.mark.parametrize(
        "cost, expected",
        [(-0.2, "easy"), (1.49, "easy"), (1.5, "medium"), (2.99, "medium"), (3.0, "hard")],
    )
    def test_tiers(self, cost, expected):
        assert difficulty_tier(cost) == expected
