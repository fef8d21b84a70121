"""Measurement system listing API.

Public API for enumerating the built-in unit catalogs, either as ``Unit``
objects or as a pandas DataFrame for tabular display and export.
"""

from functools import lru_cache
from typing import List, Optional, Union

import pandas as pd

from ckconv.systems.unitsystems import SystemID, Unit, iter_systems
from ckconv.units.unitidentity import find_unit

# Names accepted for each system by system_identifier(), compared case-insensitively
SYSTEM_NAMES = {
    SystemID.METRIC: ("metric", "mt", "standard", "std"),
    SystemID.IMPERIAL: ("imperial", "imp"),
    SystemID.CREATIONKIT: (
        "creationkit", "ck", "creation-kit", "creation_kit",
        "gamebryo", "engine", "bethesda",
    ),
}


def list_units(system: SystemID = SystemID.ALL) -> List[Unit]:
    """Ordered units of one system, or of every system for ``SystemID.ALL``.

    Args:
        system: System to list. ALL lists Creation Kit, then Metric, then Imperial.

    Returns:
        List of Unit objects in catalog order

    Examples:
        >>> [u.symbol for u in list_units(SystemID.IMPERIAL)][:4]
        ['', 'th', 'Bc', '"']
        >>> len(list_units())
        58
    """
    units: List[Unit] = []
    for catalog in iter_systems(system):
        units.extend(catalog.units)
    return units


@lru_cache(maxsize=None)
def load_units(system: SystemID = SystemID.ALL) -> pd.DataFrame:
    """Unit catalog as a DataFrame.

    Cached per system; callers should copy before mutating.

    Returns:
        DataFrame with columns:
          - key: stable unit identifier (e.g. "KILOMETER")
          - system: system display name
          - symbol: official symbol ("" when the unit has none)
          - name: singular full name
          - plural: plural full name
          - factor: size of one unit in the system's base unit
          - base: symbol (or name) of the system's base unit

    Examples:
        >>> df = load_units(SystemID.METRIC)
        >>> df.loc[df["symbol"] == "km", "factor"].item()
        1000.0
    """
    rows = []
    for catalog in iter_systems(system):
        base = catalog.base.printable_name()
        for unit in catalog.units:
            rows.append({
                "key": unit.key,
                "system": catalog.name,
                "symbol": unit.symbol,
                "name": unit.name,
                "plural": unit.full_name(plural=True),
                "factor": unit.factor,
                "base": base,
            })
    return pd.DataFrame(
        rows, columns=["key", "system", "symbol", "name", "plural", "factor", "base"]
    )


def system_identifier(text: Optional[str]) -> Optional[SystemID]:
    """Resolve a system name, or the name of one of its units, to a SystemID.

    Args:
        text: "metric", "imp", "ck", ..., a unit such as "km", or ""/None for ALL

    Returns:
        SystemID, or None when the text names neither a system nor a unit

    Examples:
        >>> system_identifier("imp")
        <SystemID.IMPERIAL: 'Imperial'>
        >>> system_identifier("km")
        <SystemID.METRIC: 'Metric'>
        >>> system_identifier("") is SystemID.ALL
        True
    """
    if not text or not text.strip():
        return SystemID.ALL

    lowered = text.strip().lower()
    for system_id, names in SYSTEM_NAMES.items():
        if lowered in names:
            return system_id

    unit = find_unit(text.strip())
    return None if unit is None else unit.system


def resolve_listing(text: Union[str, SystemID, None]) -> Optional[SystemID]:
    """Accept either a SystemID or free text naming one."""
    if isinstance(text, SystemID):
        return text
    return system_identifier(text)


__all__ = [
    "SYSTEM_NAMES",
    "list_units",
    "load_units",
    "system_identifier",
    "resolve_listing",
]
