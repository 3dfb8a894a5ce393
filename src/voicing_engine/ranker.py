"""Ranker — dedupe, order and cap scored voicings."""

from __future__ import annotations

from collections.abc import Iterable

from .voicing import Voicing


def _pattern_key(voicing: Voicing) -> tuple[tuple[int, int], ...]:
    return tuple((sn.string, sn.fret) for sn in voicing.string_notes)


def prune_subsets(ranked: list[Voicing]) -> list[Voicing]:
    """Remove voicings dominated by a better-ranked superset.

    A voicing is dominated when every string it sounds is sounded at the
    same fret by an earlier voicing that sounds strictly more strings.

    Args:
        ranked: Voicings already in rank order.

    Returns:
        A new list, rank order preserved.
    """
    kept: list[Voicing] = []
    for candidate in ranked:
        frets = {sn.string: sn.fret for sn in candidate.string_notes}
        dominated = False
        for existing in kept:
            if len(existing) <= len(candidate):
                continue
            existing_frets = existing.by_string()
            if all(
                s in existing_frets and existing_frets[s].fret == f
                for s, f in frets.items()
            ):
                dominated = True
                break
        if not dominated:
            kept.append(candidate)
    return kept


def rank_voicings(
    voicings: Iterable[Voicing],
    max_results: int | None = 15,
    subsets: bool = False,
) -> list[Voicing]:
    """Order voicings best first.

    Duplicate fret patterns keep their first occurrence; the sort is stable,
    so equal costs keep enumeration order.

    Args:
        voicings: Scored voicings in enumeration order.
        max_results: Cap on the number returned; ``None`` = no cap.
        subsets: Also drop dominated subset voicings (see :func:`prune_subsets`).

    Returns:
        At most *max_results* voicings, ascending by cost.
    """
    seen: set[tuple[tuple[int, int], ...]] = set()
    unique: list[Voicing] = []
    for voicing in voicings:
        key = _pattern_key(voicing)
        if key in seen:
            continue
        seen.add(key)
        unique.append(voicing)

    ranked = sorted(unique, key=lambda v: v.cost)
    if subsets:
        ranked = prune_subsets(ranked)

    if max_results is None:
        return ranked
    return ranked[:max_results]
