"""Measurement systems and their unit catalogs."""

from ckconv.systems.unitsystems import (
    SystemID,
    Unit,
    System,
    METRIC,
    IMPERIAL,
    CREATIONKIT,
)
from ckconv.systems.systemapi import (
    list_units,
    load_units,
    system_identifier,
)

__all__ = [
    "SystemID",
    "Unit",
    "System",
    "METRIC",
    "IMPERIAL",
    "CREATIONKIT",
    "list_units",
    "load_units",
    "system_identifier",
]
