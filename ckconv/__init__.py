"""ckconv - Creation Kit Unit Converter

Public API for converting lengths between Metric, Imperial and Creation Kit units.

Usage:
    from ckconv import resolve_unit, convert, convert_triple

    # Resolve a unit by symbol, name, plural or alias
    unit = resolve_unit("ft").value          # Returns: Unit(key='FOOT', ...)

    # Convert between two units
    convert(resolve_unit("mi").value, 1, resolve_unit("ft").value).value   # Returns: 5280.0

    # Convert a normalized (unit, value, unit) triple
    conversion = convert_triple(("u", "128", "m")).value
    conversion.out_value                     # Returns: 1.8288...

    # Tokenize command-line style input
    normalize_tokens(["250m", "ft"]).value   # Returns: [('m', '250', 'ft')]

Every function above returns a Result; check ``.ok`` before reading ``.value``.
"""

__version__ = "1.0.0"

# ============================================================================
# Measurement Systems
# ============================================================================
# Catalogs: ckconv.systems.unitsystems
# Listing: ckconv.systems.systemapi

from .systems.unitsystems import (
    SystemID,       # Metric, Imperial, Creation Kit, All
    Unit,           # A single unit of length
    METRIC,         # SI units, base: Meter
    IMPERIAL,       # Imperial units, base: Foot
    CREATIONKIT,    # Creation Kit units, base: Unit
)

from .systems.systemapi import (
    list_units,          # List units in one or all systems
    load_units,          # Units as a DataFrame
    system_identifier,   # Resolve a system name or unit to a SystemID
)

# ============================================================================
# Unit Resolution API
# ============================================================================

from .units.unitapi import (
    resolve_unit,   # Primary API - resolve a token to a unit
    match_unit,     # Get top-K fuzzy candidates
)

# ============================================================================
# Conversion API
# ============================================================================

from .conversion.convertapi import (
    Conversion,               # Result of one conversion
    convert,                  # Convert a value between any two units
    convert_within_system,    # Same-system conversion by factor ratio
    convert_across_systems,   # Base unit to base unit step
    convert_triple,           # Convert a (unit, value, unit) triple
)

# ============================================================================
# Input Tokens
# ============================================================================

from .tokens.tokenapi import (
    normalize_tokens,   # Raw tokens to (unit, value, unit) triples
)

# ============================================================================
# Results and Errors
# ============================================================================

from .utils.result import Result
from .utils.errors import ErrorKind

__all__ = [
    "__version__",
    # Systems
    "SystemID",
    "Unit",
    "METRIC",
    "IMPERIAL",
    "CREATIONKIT",
    "list_units",
    "load_units",
    "system_identifier",
    # Units
    "resolve_unit",
    "match_unit",
    # Conversion
    "Conversion",
    "convert",
    "convert_within_system",
    "convert_across_systems",
    "convert_triple",
    # Tokens
    "normalize_tokens",
    # Results
    "Result",
    "ErrorKind",
]
