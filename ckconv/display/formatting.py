"""Plain-text formatting of numbers, units and conversion expressions.

Examples:
    >>> from ckconv.config import Settings
    >>> format_number(3.2808398950131235, Settings())
    '3.28084'
    >>> format_number(2.5, Settings(notation="fixed"))
    '2.5'
    >>> format_number(2.5, Settings(notation="fixed", precision=3))
    '2.500'
"""

from typing import Tuple

from ckconv.config import Settings
from ckconv.conversion.convertengine import Conversion
from ckconv.systems.unitsystems import Unit

DEFAULT_PRECISION = 6


def _trim_fixed(s: str) -> str:
    if "." not in s:
        return s
    s = s.rstrip("0")
    return s[:-1] if s.endswith(".") else s


def format_number(value: float, settings: Settings) -> str:
    """Format a value using the configured notation and precision.

    - general: ``%g`` with ``precision`` significant digits (default 6)
    - fixed: ``precision`` decimals; without a precision, six decimals with
      trailing zeros removed
    - scientific: ``%e`` with ``precision`` decimals (default 6)
    - hex: ``float.hex()``
    """
    notation = settings.notation
    precision = settings.precision

    if notation == "hex":
        return float(value).hex()

    if notation == "fixed":
        if precision is None:
            return _trim_fixed(f"{value:.{DEFAULT_PRECISION}f}")
        return f"{value:.{precision}f}"

    digits = DEFAULT_PRECISION if precision is None else precision
    if notation == "scientific":
        return f"{value:.{digits}e}"
    return f"{value:.{digits}g}"


def format_unit(unit: Unit, settings: Settings, plural: bool = True) -> str:
    """Symbol by default, full name with ``full_name`` set."""
    return unit.printable_name(prefer_full_name=settings.full_name, plural=plural)


def alignment_padding(used: int, settings: Settings) -> int:
    """Spaces needed so " = " starts at column ``align_to``."""
    if not settings.align_to:
        return 0
    margin = settings.align_to - 1
    return max(margin - used, 0)


def expression_parts(conversion: Conversion, settings: Settings) -> Tuple[str, str, str, str, str]:
    """Formatted (in_value, in_unit, padding, out_value, out_unit)."""
    in_value = format_number(conversion.in_value, settings)
    out_value = format_number(conversion.out_value, settings)
    in_unit = format_unit(conversion.in_unit, settings, plural=conversion.in_value != 1)
    out_unit = format_unit(conversion.out_unit, settings, plural=conversion.out_value != 1)
    used = len(in_value) + 1 + len(in_unit)
    return in_value, in_unit, " " * alignment_padding(used, settings), out_value, out_unit


def format_conversion(conversion: Conversion, settings: Settings) -> str:
    """``<in> <unit> = <out> <unit>``, or just ``<out>`` when quiet.

    Examples:
        >>> from ckconv.conversion import convert_triple
        >>> c = convert_triple(("mi", "1", "ft")).value
        >>> format_conversion(c, Settings())
        "1 mi = 5280 '"
        >>> format_conversion(c, Settings(quiet=True))
        '5280'
    """
    in_value, in_unit, padding, out_value, out_unit = expression_parts(conversion, settings)
    if settings.quiet:
        return out_value
    return f"{in_value} {in_unit}{padding} = {out_value} {out_unit}"


__all__ = [
    "DEFAULT_PRECISION",
    "format_number",
    "format_unit",
    "alignment_padding",
    "expression_parts",
    "format_conversion",
]
