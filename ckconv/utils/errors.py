"""Error kinds shared by the resolver, converter and token normalizer.

Implementation modules raise these exceptions; the public ``*api`` modules
catch them and hand back a :class:`ckconv.utils.result.Result` instead.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure reported by the core."""

    INVALID_UNIT = "InvalidUnit"
    MALFORMED_INPUT = "MalformedInput"
    ZERO_CONVERSION_FACTOR = "ZeroConversionFactor"
    DIVIDE_BY_ZERO = "DivideByZero"
    UNSUPPORTED_SYSTEM_PAIR = "UnsupportedSystemPair"


class CKConvError(ValueError):
    """Base class for errors the core reports to its callers."""

    kind: ErrorKind

    def __init__(self, message: str, *, token: str = None):
        super().__init__(message)
        self.token = token


class InvalidUnitError(CKConvError):
    kind = ErrorKind.INVALID_UNIT

    def __init__(self, token: str, suggestions=None):
        message = f"Couldn't find any measurement units matching '{token}'"
        if suggestions:
            message += f" (did you mean: {', '.join(suggestions)}?)"
        super().__init__(message, token=token)
        self.suggestions = list(suggestions or [])


class MalformedInputError(CKConvError):
    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, token: str, reason: str = "is invalid"):
        super().__init__(f"Malformed input '{token}' {reason}!", token=token)
        self.reason = reason


class ZeroConversionFactorError(CKConvError):
    kind = ErrorKind.ZERO_CONVERSION_FACTOR

    def __init__(self, which: str, factor: float):
        super().__init__(f"Illegal {which} conversion factor '{factor}'")
        self.factor = factor


class DivideByZeroError(CKConvError):
    kind = ErrorKind.DIVIDE_BY_ZERO

    def __init__(self):
        super().__init__("convert_within_system() failed: cannot divide by zero")


class UnsupportedSystemPairError(CKConvError):
    kind = ErrorKind.UNSUPPORTED_SYSTEM_PAIR

    def __init__(self, in_system, out_system):
        super().__init__(
            f"convert_across_systems() failed: no handler for {in_system} -> {out_system}"
        )
        self.in_system = in_system
        self.out_system = out_system


class CatalogError(RuntimeError):
    """Raised when a built-in unit catalog violates its invariants."""


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be read or has invalid values."""


__all__ = [
    "ErrorKind",
    "CKConvError",
    "InvalidUnitError",
    "MalformedInputError",
    "ZeroConversionFactorError",
    "DivideByZeroError",
    "UnsupportedSystemPairError",
    "CatalogError",
    "ConfigError",
]
