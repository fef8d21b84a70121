"""Unit resolution API.

Public API for turning user-supplied tokens ("ft", "feet", "kilometres",
"u") into catalog units. Failures come back as a ``Result`` rather than an
exception.
"""

from typing import Optional

from ckconv.systems.unitsystems import Unit
from ckconv.units.unitidentity import (
    resolve_unit as _resolve_unit,
    topk_units as _topk_units,
)
from ckconv.utils.result import Result, returns_result


def resolve_unit(token: str, default: Optional[Unit] = None) -> Result[Unit]:
    """Resolve a symbol, name or alias to a Unit.

    Resolution order (first system wins):
      1. Imperial
      2. Metric ("metre" spellings accepted)
      3. Creation Kit

    Symbols compare exactly ("M" and "m" are different prefixes); names and
    aliases compare case-insensitively and accept plurals.

    Args:
        token: Unit text, e.g. "m", "ft", "feet", "yards", "km", "u"
        default: Returned instead of failing when nothing matches

    Returns:
        Result holding the Unit, or an InvalidUnit error

    Examples:
        >>> resolve_unit("feet").value.name
        'Foot'

        >>> resolve_unit("bogus").kind
        <ErrorKind.INVALID_UNIT: 'InvalidUnit'>
    """
    return returns_result(_resolve_unit)(token, default)


def match_unit(token: str, *, k: int = 5) -> list[dict]:
    """Top-K candidate units with similarity scores (for suggestions).

    Args:
        token: Unit text to match
        k: Number of candidates to return. Default 5.

    Returns:
        List of dicts with system, key, symbol, name and score, best first.

    Examples:
        >>> [m["name"] for m in match_unit("kilometr", k=2)]
        ['Kilometer', ...]
    """
    return [
        {
            "system": unit.system.value,
            "key": unit.key,
            "symbol": unit.symbol,
            "name": unit.name,
            "score": score,
        }
        for unit, score in _topk_units(token, k=k)
    ]


__all__ = [
    "resolve_unit",
    "match_unit",
]
