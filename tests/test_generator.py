"""End-to-end voicing generation tests."""
import pytest

from src.voicing_engine.cost_model import ErgonomicWeights
from src.voicing_engine.generator import generate_voicings
from src.voicing_engine.voicing import VoicingConfig

C_MAJOR = [0, 4, 7]
F_MAJOR = [5, 9, 0]
NOTE_NAMES = ["E2", "A2", "D3", "G3", "B3", "E4"]


def _patterns(voicings, string_count=6):
    return [v.fret_pattern(string_count) for v in voicings]


class TestGenerateVoicings:
    def test_empty_pitch_classes(self, standard_tuning):
        assert generate_voicings([], 0, standard_tuning, 12) == []

    def test_empty_tuning(self):
        assert generate_voicings(C_MAJOR, 0, [], 12) == []

    @pytest.mark.parametrize("fret_count", [0, -3])
    def test_non_positive_fret_count(self, standard_tuning, fret_count):
        assert generate_voicings(C_MAJOR, 0, standard_tuning, fret_count) == []

    def test_c_major_has_results(self, standard_tuning):
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5)
        assert 0 < len(voicings) <= 15

    def test_open_c_found(self, standard_tuning):
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5, VoicingConfig(max_results=50))
        assert (None, 3, 2, 0, 1, 0) in _patterns(voicings)

    def test_open_e_found(self, standard_tuning):
        voicings = generate_voicings([4, 8, 11], 4, standard_tuning, 5, VoicingConfig(max_results=500))
        assert (0, 2, 2, 1, 0, 0) in _patterns(voicings)

    def test_f_barre_found(self, standard_tuning):
        voicings = generate_voicings(F_MAJOR, 5, standard_tuning, 5, VoicingConfig(max_results=500))
        assert (1, 3, 3, 2, 1, 1) in _patterns(voicings)

    def test_open_c_in_default_results(self, standard_tuning):
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5)
        assert len(voicings) == 15
        assert (None, 3, 2, 0, 1, 0) in _patterns(voicings)

    def test_f_barre_in_default_results(self, standard_tuning):
        voicings = generate_voicings(F_MAJOR, 5, standard_tuning, 5)
        assert len(voicings) == 15
        assert (1, 3, 3, 2, 1, 1) in _patterns(voicings)

    def test_more_tones_than_strings_gives_empty(self, standard_tuning):
        assert generate_voicings(list(range(7)), 0, standard_tuning, 24) == []

    def test_coverage(self, standard_tuning):
        for voicing in generate_voicings(C_MAJOR, 0, standard_tuning, 12):
            assert voicing.pitch_classes >= {0, 4, 7}

    def test_rank_monotonicity(self, standard_tuning):
        voicings = generate_voicings(F_MAJOR, 5, standard_tuning, 7, VoicingConfig(max_results=100))
        costs = [v.cost for v in voicings]
        assert costs == sorted(costs)

    def test_determinism(self, standard_tuning):
        first = generate_voicings(C_MAJOR, 0, standard_tuning, 12)
        second = generate_voicings(C_MAJOR, 0, standard_tuning, 12)
        assert first == second
        assert [v.cost for v in first] == [v.cost for v in second]

    @pytest.mark.parametrize("max_span", [1, 2, 3])
    def test_span_bound(self, standard_tuning, max_span):
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 12, VoicingConfig(max_span=max_span))
        assert voicings
        for voicing in voicings:
            assert voicing.fretted_span <= max_span

    def test_finger_bound(self, standard_tuning):
        config = VoicingConfig(max_fingers=3, max_results=100)
        voicings = generate_voicings(F_MAJOR, 5, standard_tuning, 5, config)
        assert voicings
        for voicing in voicings:
            assert voicing.breakdown.finger_count <= 3

    def test_best_voicing_has_correct_bass(self, standard_tuning):
        best = generate_voicings(C_MAJOR, 0, standard_tuning, 5)[0]
        assert best.breakdown.bass_correctness == 0
        assert best.string_notes[0].pitch_class == 0

    def test_no_open_strings(self, standard_tuning):
        config = VoicingConfig(allow_open=False)
        for voicing in generate_voicings(C_MAJOR, 0, standard_tuning, 12, config):
            assert all(sn.fret > 0 for sn in voicing.string_notes)

    def test_min_sounded(self, standard_tuning):
        config = VoicingConfig(min_sounded=5)
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5, config)
        assert voicings
        assert all(len(v) >= 5 for v in voicings)

    def test_unsatisfiable_constraints_give_empty(self, standard_tuning):
        config = VoicingConfig(max_fingers=0, allow_open=False)
        assert generate_voicings(C_MAJOR, 0, standard_tuning, 12, config) == []

    def test_search_limit_caps_generation(self, standard_tuning):
        config = VoicingConfig(search_limit=4, max_results=15)
        assert len(generate_voicings(C_MAJOR, 0, standard_tuning, 12, config)) <= 4

    def test_note_name_tuning(self, standard_tuning):
        by_name = generate_voicings(C_MAJOR, 0, NOTE_NAMES, 5)
        by_number = generate_voicings(C_MAJOR, 0, standard_tuning, 5)
        assert by_name == by_number

    def test_pitch_classes_reduced_mod_12(self, standard_tuning):
        assert generate_voicings([12, 16, 19], 12, standard_tuning, 5) == generate_voicings(
            C_MAJOR, 0, standard_tuning, 5
        )

    def test_prune_subsets(self, standard_tuning):
        config = VoicingConfig(prune_subsets=True, max_results=None)
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5, config)
        for i, later in enumerate(voicings):
            later_frets = {sn.string: sn.fret for sn in later.string_notes}
            for earlier in voicings[:i]:
                if len(earlier) <= len(later):
                    continue
                earlier_frets = {sn.string: sn.fret for sn in earlier.string_notes}
                assert not all(earlier_frets.get(s) == f for s, f in later_frets.items())

    def test_custom_weights_are_used(self, standard_tuning):
        config = VoicingConfig(weights=ErgonomicWeights(bass_correctness_weight=0.0), max_results=None)
        voicings = generate_voicings(C_MAJOR, 0, standard_tuning, 5, config)
        default = generate_voicings(C_MAJOR, 0, standard_tuning, 5, VoicingConfig(max_results=None))
        assert len(voicings) == len(default)
        assert [v.cost for v in voicings] != [v.cost for v in default]

    def test_mandolin(self):
        voicings = generate_voicings(C_MAJOR, 0, ["G3", "D4", "A4", "E5"], 7)
        assert voicings
        assert all(len(v.fret_pattern(4)) == 4 for v in voicings)
