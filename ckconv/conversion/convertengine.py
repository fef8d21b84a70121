"""
Length Conversion Engine
------------------------

Two-stage conversion:
  1) within a system: scale by the input unit's factor into the base unit,
     then divide by the output unit's factor
  2) across systems: move the base-unit value into the other system's base
     unit using the fixed pairwise constants

API:
  convert_within_system(in_factor, value, out_factor) -> float
  convert_across_systems(in_system, value_in_base, out_system) -> float
  convert(in_unit, value, out_unit) -> float
  convert_triple((in_token, value_token, out_token)) -> Conversion

Examples:
  >>> from ckconv.systems.unitsystems import CREATIONKIT, IMPERIAL, METRIC
  >>> convert(CREATIONKIT.UNIT, 1.0, METRIC.METER)
  0.0142875313
  >>> round(convert(METRIC.METER, 1.0, IMPERIAL.FOOT), 9)
  3.280839895
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

import math
import numbers

from ckconv.systems.unitsystems import (
    ONE_FOOT_IN_METERS,
    ONE_UNIT_IN_FEET,
    ONE_UNIT_IN_METERS,
    SystemID,
    Unit,
)
from ckconv.units.unitidentity import resolve_unit
from ckconv.utils.errors import (
    DivideByZeroError,
    MalformedInputError,
    UnsupportedSystemPairError,
    ZeroConversionFactorError,
)

# Smallest factor in the catalogs is 1e-24; anything this close to zero is corrupt data
FACTOR_EPSILON = 1e-200

# (from, to) -> (operator, constant); "mul" multiplies, "div" divides
_SYSTEM_STEPS: Dict[Tuple[SystemID, SystemID], Tuple[str, float]] = {
    (SystemID.METRIC, SystemID.IMPERIAL): ("div", ONE_FOOT_IN_METERS),
    (SystemID.METRIC, SystemID.CREATIONKIT): ("div", ONE_UNIT_IN_METERS),
    (SystemID.IMPERIAL, SystemID.METRIC): ("mul", ONE_FOOT_IN_METERS),
    (SystemID.IMPERIAL, SystemID.CREATIONKIT): ("div", ONE_UNIT_IN_FEET),
    (SystemID.CREATIONKIT, SystemID.METRIC): ("mul", ONE_UNIT_IN_METERS),
    (SystemID.CREATIONKIT, SystemID.IMPERIAL): ("mul", ONE_UNIT_IN_FEET),
}


@dataclass(frozen=True)
class Conversion:
    """One completed conversion, ready for display."""

    in_unit: Unit
    in_value: float
    out_unit: Unit
    out_value: float


def convert_within_system(in_factor: float, value: float, out_factor: float) -> float:
    """Convert between two units of the same system given their factors.

    Raises:
        DivideByZeroError: ``out_factor`` is (numerically) zero
    """
    if abs(out_factor) < FACTOR_EPSILON:
        raise DivideByZeroError()
    return (value * in_factor) / out_factor


def convert_across_systems(in_system: SystemID, value_in_base: float, out_system: SystemID) -> float:
    """Move a base-unit value from one system's base unit to another's.

    Args:
        in_system: System the value is expressed in
        value_in_base: Value in ``in_system``'s base unit
        out_system: Target system

    Returns:
        Value in ``out_system``'s base unit

    Raises:
        UnsupportedSystemPairError: no constant links the two systems (e.g. ALL)
    """
    if in_system is SystemID.ALL or out_system is SystemID.ALL:
        raise UnsupportedSystemPairError(in_system, out_system)
    if in_system is out_system:
        return value_in_base

    step = _SYSTEM_STEPS.get((in_system, out_system))
    if step is None:
        raise UnsupportedSystemPairError(in_system, out_system)

    op, constant = step
    if op == "mul":
        return value_in_base * constant
    return value_in_base / constant


def convert(in_unit: Unit, value: float, out_unit: Unit) -> float:
    """Convert ``value`` from ``in_unit`` to ``out_unit``.

    Raises:
        ZeroConversionFactorError: either unit has a zero factor
        MalformedInputError: value is not a real number
        DivideByZeroError, UnsupportedSystemPairError: see helpers above
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MalformedInputError(str(value), "is not a number")
    if in_unit.factor == 0.0:
        raise ZeroConversionFactorError("input", in_unit.factor)
    if out_unit.factor == 0.0:
        raise ZeroConversionFactorError("output", out_unit.factor)

    if in_unit == out_unit:
        return value

    if in_unit.system is out_unit.system:
        return convert_within_system(in_unit.factor, value, out_unit.factor)

    value_in_base = convert_across_systems(in_unit.system, in_unit.to_base(value), out_unit.system)
    if abs(out_unit.factor) < FACTOR_EPSILON:
        raise DivideByZeroError()
    return value_in_base / out_unit.factor


def parse_value(token: str) -> float:
    """Parse a numeric token produced by the token normalizer.

    Raises:
        MalformedInputError: not a finite decimal number
    """
    text = (token or "").strip().replace(",", "")
    try:
        value = float(text)
    except ValueError:
        raise MalformedInputError(token or "", "is not a number") from None
    if not math.isfinite(value):
        raise MalformedInputError(token, "is not a finite number")
    return value


def convert_triple(triple: Sequence[str]) -> Conversion:
    """Resolve and convert one ``(in_unit, value, out_unit)`` token triple.

    Raises:
        InvalidUnitError, MalformedInputError, or any convert() error
    """
    if len(triple) != 3:
        raise MalformedInputError(" ".join(map(str, triple)), "is not a <UNIT> <VALUE> <OUTPUT_UNIT> triple")
    in_token, value_token, out_token = triple
    in_value = parse_value(value_token)
    in_unit = resolve_unit(in_token)
    out_unit = resolve_unit(out_token)
    return Conversion(
        in_unit=in_unit,
        in_value=in_value,
        out_unit=out_unit,
        out_value=convert(in_unit, in_value, out_unit),
    )


__all__ = [
    "FACTOR_EPSILON",
    "Conversion",
    "convert_within_system",
    "convert_across_systems",
    "convert",
    "parse_value",
    "convert_triple",
]
