"""Length conversion API.

Public API for converting values between units, within one measurement
system or across Metric, Imperial and Creation Kit. Failures come back as a
``Result`` instead of an exception.
"""

from typing import Sequence

from ckconv.conversion.convertengine import (
    Conversion,
    convert as _convert,
    convert_across_systems as _convert_across_systems,
    convert_triple as _convert_triple,
    convert_within_system as _convert_within_system,
)
from ckconv.systems.unitsystems import SystemID, Unit
from ckconv.utils.result import Result, returns_result


def convert(in_unit: Unit, value: float, out_unit: Unit) -> Result[float]:
    """Convert ``value`` expressed in ``in_unit`` into ``out_unit``.

    Same-system conversions scale through the system's base unit. Cross-system
    conversions additionally hop between base units using fixed constants
    (1 ft = 0.3048 m, 1 CK unit = 0.0142875313 m = 0.046875 ft).

    Args:
        in_unit: Unit of the input value
        value: Input value
        out_unit: Unit to convert into

    Returns:
        Result holding the converted value, or a ZeroConversionFactor /
        DivideByZero / UnsupportedSystemPair error

    Examples:
        >>> from ckconv.systems import METRIC, IMPERIAL
        >>> convert(IMPERIAL.MILE, 1, IMPERIAL.FOOT).value
        5280.0
        >>> round(convert(METRIC.METER, 1, IMPERIAL.FOOT).value, 6)
        3.28084
    """
    return returns_result(_convert)(in_unit, value, out_unit)


def convert_within_system(in_factor: float, value: float, out_factor: float) -> Result[float]:
    """Convert between two units of one system given their factors.

    Fails with DivideByZero when ``out_factor`` is zero.

    Examples:
        >>> convert_within_system(1000.0, 2.5, 1.0).value
        2500.0
        >>> convert_within_system(1.0, 2.5, 0.0).kind
        <ErrorKind.DIVIDE_BY_ZERO: 'DivideByZero'>
    """
    return returns_result(_convert_within_system)(in_factor, value, out_factor)


def convert_across_systems(in_system: SystemID, value_in_base: float, out_system: SystemID) -> Result[float]:
    """Move a base-unit value into another system's base unit.

    Fails with UnsupportedSystemPair when either side is not a concrete system.
    """
    return returns_result(_convert_across_systems)(in_system, value_in_base, out_system)


def convert_triple(triple: Sequence[str]) -> Result[Conversion]:
    """Resolve and convert one ``(in_unit, value, out_unit)`` token triple.

    Examples:
        >>> result = convert_triple(("m", "250", "ft"))
        >>> round(result.value.out_value, 3)
        820.21
        >>> convert_triple(("m", "250", "")).kind
        <ErrorKind.INVALID_UNIT: 'InvalidUnit'>
    """
    return returns_result(_convert_triple)(triple)


__all__ = [
    "Conversion",
    "convert",
    "convert_within_system",
    "convert_across_systems",
    "convert_triple",
]
