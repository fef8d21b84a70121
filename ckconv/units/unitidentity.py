"""
Unit Resolution
---------------

Maps a user-supplied token to a Unit by searching the catalogs in a fixed
order, first system wins:

  1) Imperial
  2) Metric (after rewriting "metre" to "meter")
  3) Creation Kit

Within a system a unit matches when:
  - its symbol equals the token exactly (case-sensitive: "Mm" is not "mm")
  - its name, plural form or an alias equals the token case-insensitively,
    optionally after dropping one trailing "s" from the token

Units with an irregular plural ("Foot"/"Feet") are checked against both
forms before anything else.

API:
  find_unit(token) -> Unit | None
  resolve_unit(token, default=None) -> Unit          (raises InvalidUnitError)
  topk_units(token, k=5) -> list[tuple[Unit, float]]

Examples:
  >>> resolve_unit("feet").key
  'FOOT'
  >>> resolve_unit("kilometres").key
  'KILOMETER'
  >>> resolve_unit("nmi").key
  'NAUTICAL_MILE'
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from ckconv.systems.unitsystems import (
    CREATIONKIT,
    IMPERIAL,
    METRIC,
    SYSTEMS,
    System,
    Unit,
)
from ckconv.utils.errors import InvalidUnitError
from ckconv.utils.normalize import (
    change_metre_to_meter,
    normalize_name,
    normalize_quotes,
    strip_plural,
)
from ckconv.utils.resolver import topk_matches

# Suggestions offered with an InvalidUnitError
SUGGESTION_LIMIT = 3
SUGGESTION_CUTOFF = 80.0


def compare_symbol(token: str, symbol: str) -> bool:
    return token == symbol


def compare_name(token: str, name: str) -> bool:
    """Case-insensitive name comparison tolerating one trailing 's' on the token."""
    token_norm = normalize_name(token)
    name_norm = normalize_name(name)
    if not token_norm or not name_norm:
        return False
    if token_norm == name_norm:
        return True
    return strip_plural(token_norm) == name_norm


def matches_unit(token: str, unit: Unit) -> bool:
    """True when ``token`` names ``unit`` by symbol, name, plural or alias."""
    if unit.has_unique_plural and unit.has_name:
        if compare_name(token, unit.full_name(plural=False)) or compare_name(token, unit.full_name(plural=True)):
            return True

    if unit.has_symbol and compare_symbol(token, unit.symbol):
        return True

    if unit.has_name:
        if compare_name(token, unit.name) or compare_name(token, unit.full_name(plural=True)):
            return True

    return any(compare_name(token, alias) for alias in unit.aliases)


def find_in_system(token: str, system: System) -> Optional[Unit]:
    """First unit of ``system`` matching ``token``, in catalog order."""
    for unit in system.units:
        if matches_unit(token, unit):
            return unit
    return None


def find_unit(token: str) -> Optional[Unit]:
    """Search Imperial, then Metric, then Creation Kit. None when nothing matches."""
    if token is None:
        return None

    token = normalize_quotes(token.strip())
    if not token:
        return None

    unit = find_in_system(token, IMPERIAL)
    if unit is not None:
        return unit

    unit = find_in_system(change_metre_to_meter(token), METRIC)
    if unit is not None:
        return unit

    return find_in_system(token, CREATIONKIT)


def topk_units(token: str, *, k: int = 5, units: Optional[Iterable[Unit]] = None) -> List[Tuple[Unit, float]]:
    """Rank units by fuzzy similarity to ``token`` (for suggestions only)."""
    if units is None:
        units = [unit for system in SYSTEMS for unit in system.units]
    return topk_matches(token or "", units, k=k)


def suggest_units(token: str) -> List[str]:
    """Printable names of the closest units, used in error messages."""
    suggestions = []
    for unit, score in topk_units(token, k=SUGGESTION_LIMIT):
        if score >= SUGGESTION_CUTOFF:
            suggestions.append(unit.printable_name(prefer_full_name=False))
    return suggestions


def resolve_unit(token: str, default: Optional[Unit] = None) -> Unit:
    """Resolve ``token`` to a Unit, falling back to ``default`` when given.

    Raises:
        InvalidUnitError: nothing matches and no default was supplied
    """
    unit = find_unit(token)
    if unit is not None:
        return unit
    if default is not None:
        return default
    raise InvalidUnitError(token, suggestions=suggest_units(token))


__all__ = [
    "compare_symbol",
    "compare_name",
    "matches_unit",
    "find_in_system",
    "find_unit",
    "topk_units",
    "suggest_units",
    "resolve_unit",
]
