"""Unit resolution: text tokens to catalog units."""

from ckconv.units.unitapi import (
    resolve_unit,
    match_unit,
)

__all__ = [
    "resolve_unit",
    "match_unit",
]
