"""
Measurement Systems and Unit Catalogs
-------------------------------------

Three fixed catalogs of length units, each with one base unit:

  - Metric       base = Meter  (21 SI-prefixed meters, yocto .. yotta)
  - Imperial     base = Foot   (16 historical English units)
  - CreationKit  base = Unit   (21 SI-prefixed Creation Kit units)

Every unit carries a conversion factor into its own system's base unit.
Converting between systems goes through the three cross-system constants
defined at the bottom of this module.

The catalogs are module constants, built once on import and never mutated.
Units are reached by stable keys rather than positions:

  >>> METRIC.METER.symbol
  'm'
  >>> IMPERIAL.unit("FOOT").full_name()
  'Feet'
  >>> CREATIONKIT.base.name
  'Unit'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Iterator, Optional, Tuple

from ckconv.utils.errors import CatalogError


class SystemID(Enum):
    """Accepted measurement systems. ALL is a listing wildcard only."""

    METRIC = "Metric"
    IMPERIAL = "Imperial"
    CREATIONKIT = "Creation Kit"
    ALL = "All"


class SIPrefix(IntEnum):
    """SI prefixes and their base-10 exponent."""

    YOCTO = -24
    ZEPTO = -21
    ATTO = -18
    FEMTO = -15
    PICO = -12
    NANO = -9
    MICRO = -6
    MILLI = -3
    CENTI = -2
    DECI = -1
    BASE = 0
    DECA = 1
    HECTO = 2
    KILO = 3
    MEGA = 6
    GIGA = 9
    TERA = 12
    PETA = 15
    EXA = 18
    ZETTA = 21
    YOTTA = 24


SI_SYMBOLS: Dict[SIPrefix, str] = {
    SIPrefix.YOCTO: "y",
    SIPrefix.ZEPTO: "z",
    SIPrefix.ATTO: "a",
    SIPrefix.FEMTO: "f",
    SIPrefix.PICO: "p",
    SIPrefix.NANO: "n",
    SIPrefix.MICRO: "u",
    SIPrefix.MILLI: "m",
    SIPrefix.CENTI: "c",
    SIPrefix.DECI: "d",
    SIPrefix.BASE: "",
    SIPrefix.DECA: "da",
    SIPrefix.HECTO: "h",
    SIPrefix.KILO: "k",
    SIPrefix.MEGA: "M",
    SIPrefix.GIGA: "G",
    SIPrefix.TERA: "T",
    SIPrefix.PETA: "P",
    SIPrefix.EXA: "E",
    SIPrefix.ZETTA: "Z",
    SIPrefix.YOTTA: "Y",
}


@dataclass(frozen=True)
class Unit:
    """A length measurement unit. Holds no value, only how to name and scale one."""

    key: str
    system: SystemID
    factor: float
    symbol: str
    name: str = ""
    plural: str = "s"
    plural_is_override: bool = False
    aliases: Tuple[str, ...] = ()

    @property
    def has_symbol(self) -> bool:
        return bool(self.symbol)

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    @property
    def has_unique_plural(self) -> bool:
        return self.plural_is_override

    def full_name(self, plural: bool = True) -> str:
        """Full name, pluralized by suffix or by override."""
        if not plural:
            return self.name
        if self.plural_is_override:
            return self.plural
        return self.name + self.plural

    def printable_name(self, prefer_full_name: bool = False, plural: bool = True) -> str:
        """Name used for display, falling back to whichever of symbol/name exists."""
        if prefer_full_name:
            return self.full_name(plural) if self.has_name else self.symbol
        return self.symbol if self.has_symbol else self.full_name(plural)

    def to_base(self, value: float) -> float:
        """Express ``value`` (in this unit) in the system's base unit."""
        return value * self.factor


@dataclass(frozen=True)
class System:
    """An ordered, closed catalog of units sharing one base unit."""

    name: str
    system_id: SystemID
    units: Tuple[Unit, ...]
    base_key: str
    _by_key: Dict[str, Unit] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.units:
            raise CatalogError(f"{self.name} system has no units")

        by_key: Dict[str, Unit] = {}
        for unit in self.units:
            if unit.system is not self.system_id:
                raise CatalogError(
                    f"{unit.key} belongs to {unit.system.value}, not {self.name}"
                )
            if unit.factor == 0.0:
                raise CatalogError(f"{unit.key} has a zero conversion factor")
            if unit.key in by_key:
                raise CatalogError(f"Duplicate unit key {unit.key} in {self.name}")
            by_key[unit.key] = unit

        if self.base_key not in by_key:
            raise CatalogError(f"Base unit {self.base_key} is not part of {self.name}")

        object.__setattr__(self, "_by_key", by_key)

    @property
    def base(self) -> Unit:
        return self._by_key[self.base_key]

    def unit(self, key: str) -> Unit:
        """Look up a unit by its stable key, e.g. ``"KILOMETER"``."""
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"{self.name} system has no unit '{key}'") from None

    def get(self, key: str) -> Optional[Unit]:
        return self._by_key.get(key)

    def __getattr__(self, key: str) -> Unit:
        # Only reached for attributes dataclass didn't define
        if key.isupper():
            by_key = self.__dict__.get("_by_key", {})
            if key in by_key:
                return by_key[key]
        raise AttributeError(key)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, unit: object) -> bool:
        return unit in self.units


def _si_units(system_id: SystemID, stem: str, symbol_stem: str) -> Tuple[Unit, ...]:
    """Build the 21 SI-prefixed units for one stem ("meter" / "unit")."""
    units = []
    for prefix in SIPrefix:
        if prefix is SIPrefix.BASE:
            key, name = stem.upper(), stem.title()
        else:
            key, name = prefix.name + stem.upper(), prefix.name.title() + stem
        units.append(
            Unit(
                key=key,
                system=system_id,
                # Parsed rather than 10.0 ** n so each factor is correctly rounded
                factor=float(f"1e{int(prefix)}"),
                symbol=SI_SYMBOLS[prefix] + symbol_stem,
                name=name,
            )
        )
    return tuple(units)


METRIC = System(
    name="Metric",
    system_id=SystemID.METRIC,
    units=_si_units(SystemID.METRIC, "meter", "m"),
    base_key="METER",
)

CREATIONKIT = System(
    name="Creation Kit",
    system_id=SystemID.CREATIONKIT,
    units=_si_units(SystemID.CREATIONKIT, "unit", "u"),
    base_key="UNIT",
)

_IMP = SystemID.IMPERIAL

IMPERIAL = System(
    name="Imperial",
    system_id=_IMP,
    units=(
        Unit("TWIP", _IMP, 1.0 / 17280.0, "", "Twip"),
        Unit("THOU", _IMP, 1.0 / 12000.0, "th", "Thou"),
        Unit("BARLEYCORN", _IMP, 1.0 / 36.0, "Bc", "Barleycorn"),
        Unit("INCH", _IMP, 1.0 / 12.0, '"', "Inch", "es", aliases=("in",)),
        Unit("HAND", _IMP, 1.0 / 3.0, "h", "Hand"),
        Unit("FOOT", _IMP, 1.0, "'", "Foot", "Feet", True, aliases=("ft",)),
        Unit("YARD", _IMP, 3.0, "yd", "Yard"),
        Unit("CHAIN", _IMP, 66.0, "ch", "Chain"),
        Unit("FURLONG", _IMP, 660.0, "fur", "Furlong"),
        Unit("MILE", _IMP, 5280.0, "mi", "Mile"),
        Unit("LEAGUE", _IMP, 15840.0, "lea", "League"),
        # maritime
        Unit("FATHOM", _IMP, 6.0761, "ftm", "Fathom"),
        Unit("CABLE", _IMP, 607.61, "", "Cable"),
        Unit(
            "NAUTICAL_MILE", _IMP, 6076.1, "nmi", "Nautical Mile",
            aliases=("NauticalMile", "nmile"),
        ),
        # surveying, 17th century onwards
        Unit("LINK", _IMP, 66.0 / 100.0, "", "Link"),
        Unit("ROD", _IMP, 66.0 / 4.0, "rd", "Rod"),
    ),
    base_key="FOOT",
)

# Resolution order: the first system containing a match wins
SYSTEMS: Tuple[System, ...] = (IMPERIAL, METRIC, CREATIONKIT)

# Listing order for SystemID.ALL
LISTING_ORDER: Tuple[System, ...] = (CREATIONKIT, METRIC, IMPERIAL)

_BY_ID: Dict[SystemID, System] = {s.system_id: s for s in SYSTEMS}


# ============================================================================
# Inter-system conversion constants
# ============================================================================

ONE_FOOT_IN_METERS = 0.3048        # Metric : Imperial
ONE_UNIT_IN_METERS = 0.0142875313  # CreationKit : Metric
ONE_UNIT_IN_FEET = 0.046875        # CreationKit : Imperial


def get_system(system_id: SystemID) -> System:
    """Return the catalog for a concrete system id (not ALL)."""
    try:
        return _BY_ID[system_id]
    except KeyError:
        raise KeyError(f"No catalog for system {system_id}") from None


def iter_systems(system_id: SystemID = SystemID.ALL) -> Tuple[System, ...]:
    """Catalogs selected by ``system_id``, in listing order."""
    if system_id is SystemID.ALL:
        return LISTING_ORDER
    return (get_system(system_id),)


__all__ = [
    "SystemID",
    "SIPrefix",
    "Unit",
    "System",
    "METRIC",
    "IMPERIAL",
    "CREATIONKIT",
    "SYSTEMS",
    "LISTING_ORDER",
    "ONE_FOOT_IN_METERS",
    "ONE_UNIT_IN_METERS",
    "ONE_UNIT_IN_FEET",
    "get_system",
    "iter_systems",
]
