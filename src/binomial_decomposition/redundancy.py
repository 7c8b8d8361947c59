"""Pruning of redundant ideals from decompositions."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar

from .ideals import Ideal, intersect

T = TypeVar("T")


def _minimal_indices(ideals: Sequence[Ideal]) -> List[int]:
    """Indices of the inclusion-minimal members; of equal ideals the first is kept."""
    minimal = [True] * len(ideals)
    for i, I in enumerate(ideals):
        if not minimal[i]:
            continue
        for j, J in enumerate(ideals):
            if i == j or not minimal[j]:
                continue
            if I.issubset(J):
                minimal[j] = False
            elif J.issubset(I):
                minimal[i] = False
                break
    return [i for i, keep in enumerate(minimal) if keep]


def inclusion_minimal_ideals(ideals: Sequence[Ideal]) -> List[Ideal]:
    """The members of ``ideals`` that are minimal under inclusion, in input order."""
    ideals = list(ideals)
    return [ideals[i] for i in _minimal_indices(ideals)]


def remove_redundancy(pairs: Sequence[Tuple[Ideal, T]]) -> List[Tuple[Ideal, T]]:
    """Keep the pairs whose first entry (the primary component) is inclusion-minimal."""
    pairs = list(pairs)
    return [pairs[i] for i in _minimal_indices([p[0] for p in pairs])]


def drop_redundant_components(
    ideals: Sequence[Ideal], running: Optional[Ideal] = None
) -> Tuple[List[Ideal], Optional[Ideal]]:
    """Stream ``ideals`` through a running intersection.

    An ideal is kept iff intersecting it into the running intersection makes
    the latter strictly smaller. ``running=None`` stands for the whole ring.

    Returns
    -------
    (kept, running)
        The surviving ideals and the updated running intersection, so that
        several lists can be streamed one after another.
    """
    kept: List[Ideal] = []
    for I in ideals:
        if running is None:
            if not I.is_one():
                kept.append(I)
            running = I
            continue
        meet = intersect(running, I)
        if not running.issubset(meet):
            kept.append(I)
        running = meet
    return kept, running
