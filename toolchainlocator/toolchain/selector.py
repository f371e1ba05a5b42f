"""
Pick the best Candidate.

Candidates are ranked by their VersionKey; a Candidate without one sorts
below every Candidate that has one.

When several Candidates have equal keys (same version and build date), the
one seen last in the input wins. Input order is directory enumeration order,
which may differ between filesystems and platforms, so the winner among
such ties is not guaranteed to be stable across machines.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from .scanner import Candidate


def _ranking_key(candidate: Candidate) -> tuple:
    if candidate.version_key is None:
        return (0,)
    return (1, candidate.version_key)


def rank_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """
    Sort Candidates from worst to best.

    Args:
        candidates: Candidates in discovery order

    Returns:
        New list in ascending order; the sort is stable, so equal
        Candidates keep their discovery order
    """
    return sorted(candidates, key=_ranking_key)


def select_best(candidates: Iterable[Candidate]) -> Optional[Path]:
    """
    Get the path of the highest ranked Candidate.

    Args:
        candidates: Candidates in discovery order

    Returns:
        Path of the best Candidate, or None if there are none
    """
    ranked = rank_candidates(candidates)
    if not ranked:
        return None
    return ranked[-1].path
