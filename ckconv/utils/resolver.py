"""Fuzzy candidate scoring over unit names.

Exact resolution lives in :mod:`ckconv.units.unitidentity`; this module only
ranks near-misses so an unknown token can be answered with suggestions.
"""

from __future__ import annotations
from typing import Iterable, List, Tuple

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from ckconv.systems.unitsystems import Unit
from ckconv.utils.normalize import normalize_name


def searchable_strings(unit: Unit) -> List[str]:
    """Normalized symbol, names and aliases of a unit, without duplicates.

    Examples:
        >>> from ckconv.systems.unitsystems import IMPERIAL
        >>> searchable_strings(IMPERIAL.FOOT)
        ["'", 'foot', 'feet', 'ft']
    """
    strings = []
    candidates = [unit.symbol, unit.name]
    if unit.has_name:
        candidates.append(unit.full_name(plural=True))
    candidates.extend(unit.aliases)

    for s in candidates:
        norm = normalize_name(s)
        if norm and norm not in strings:
            strings.append(norm)
    return strings


def build_search_corpus(units: Iterable[Unit]) -> Tuple[List[str], List[Unit]]:
    """Flatten units into parallel (string, owning unit) lists for RapidFuzz."""
    corpus: List[str] = []
    owners: List[Unit] = []
    for unit in units:
        for s in searchable_strings(unit):
            corpus.append(s)
            owners.append(unit)
    return corpus, owners


def topk_matches(
    query: str,
    units: Iterable[Unit],
    *,
    k: int = 5,
    score_cutoff: float = 0.0,
) -> List[Tuple[Unit, float]]:
    """Return the K best-scoring units for a query.

    Scores every searchable string with RapidFuzz WRatio and keeps the best
    score per unit.

    Args:
        query: Raw token
        units: Candidate units
        k: Number of candidates to return
        score_cutoff: Minimum score (0-100) for a candidate to be kept

    Returns:
        List of (unit, score) tuples, best first
    """
    query_norm = normalize_name(query)
    if not query_norm:
        return []

    corpus, owners = build_search_corpus(units)
    if not corpus:
        return []

    matches = process.extract(
        query_norm,
        corpus,
        scorer=fuzz.WRatio,
        limit=None,
        score_cutoff=score_cutoff,
    )

    best = {}
    order = []
    for _matched, score, idx in matches:
        unit = owners[idx]
        ident = (unit.system, unit.key)
        if ident not in best:
            best[ident] = (unit, float(score))
            order.append(ident)
        elif score > best[ident][1]:
            best[ident] = (unit, float(score))

    ranked = sorted((best[ident] for ident in order), key=lambda pair: pair[1], reverse=True)
    return ranked[:k]


__all__ = [
    "searchable_strings",
    "build_search_corpus",
    "topk_matches",
]
