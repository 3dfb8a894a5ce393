"""Generator — the public voicing pipeline.

    pitch classes + tuning
        → build_candidate_map   (candidates)
        → search_assignments    (search)
        → ErgonomicCostModel    (cost_model)
        → rank_voicings         (ranker)
        → ordered voicings, best first

Pure and stateless: identical inputs always give identical output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .candidates import build_candidate_map, normalize_pitch_classes
from .cost_model import ErgonomicCostModel
from .ranker import rank_voicings
from .search import assignment_to_voicing, search_assignments
from .tuning import resolve_tuning
from .voicing import Voicing, VoicingConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = VoicingConfig()


def generate_voicings(
    pitch_classes: Iterable[int],
    bass_pitch_class: int,
    tuning: Sequence[int | str],
    fret_count: int,
    config: VoicingConfig | None = None,
) -> list[Voicing]:
    """Find playable voicings of a chord, best first.

    Args:
        pitch_classes: Required pitch classes (values are reduced mod 12).
        bass_pitch_class: Pitch class intended as the lowest sounded note.
        tuning: Open-string pitches or note names, lowest string first.
        fret_count: Highest fret considered (inclusive).
        config: Search / ranking options; defaults to :class:`VoicingConfig`.

    Returns:
        Ranked voicings. Empty when the input is empty or invalid, or when
        no assignment satisfies the constraints; never raises for those.
    """
    cfg = config or DEFAULT_CONFIG
    targets = normalize_pitch_classes(pitch_classes)

    if not targets or not tuning or fret_count <= 0:
        logger.debug(
            "No voicings: pitch_classes=%s strings=%d fret_count=%d",
            sorted(targets), len(tuning), fret_count,
        )
        return []

    pitches = resolve_tuning(tuning)
    candidate_map = build_candidate_map(targets, pitches, fret_count, cfg.allow_open)
    assignments = search_assignments(
        candidate_map,
        targets,
        max_span=cfg.max_span,
        max_fingers=cfg.max_fingers,
        min_sounded=cfg.min_sounded,
        limit=cfg.search_limit,
    )

    if not assignments:
        logger.debug("No assignment satisfies the constraints for %s", sorted(targets))
        return []

    cost_model = ErgonomicCostModel(cfg.weights)
    bass = bass_pitch_class % 12
    scored = [
        assignment_to_voicing(a, cost_model.score(a, bass)) for a in assignments
    ]

    return rank_voicings(scored, cfg.max_results, subsets=cfg.prune_subsets)
