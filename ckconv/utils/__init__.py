"""Shared utilities for the ckconv package."""

from ckconv.utils.errors import (
    ErrorKind,
    CKConvError,
    InvalidUnitError,
    MalformedInputError,
    ZeroConversionFactorError,
    DivideByZeroError,
    UnsupportedSystemPairError,
    CatalogError,
    ConfigError,
)
from ckconv.utils.result import Result, returns_result
from ckconv.utils.normalize import (
    normalize_name,
    normalize_quotes,
    change_metre_to_meter,
    strip_plural,
)

__all__ = [
    # Errors
    "ErrorKind",
    "CKConvError",
    "InvalidUnitError",
    "MalformedInputError",
    "ZeroConversionFactorError",
    "DivideByZeroError",
    "UnsupportedSystemPairError",
    "CatalogError",
    "ConfigError",
    # Results
    "Result",
    "returns_result",
    # Normalization
    "normalize_name",
    "normalize_quotes",
    "change_metre_to_meter",
    "strip_plural",
]
