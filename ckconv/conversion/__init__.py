"""Length conversion within and across measurement systems."""

from ckconv.conversion.convertapi import (
    Conversion,
    convert,
    convert_within_system,
    convert_across_systems,
    convert_triple,
)

__all__ = [
    "Conversion",
    "convert",
    "convert_within_system",
    "convert_across_systems",
    "convert_triple",
]
