"""Tests for unit resolution.

Resolution order is Imperial, then Metric, then Creation Kit. Symbols are
case-sensitive; names, plurals and aliases are not.

Run with: pytest tests/test_units.py -v
"""

import pytest

from ckconv import ErrorKind, resolve_unit, match_unit
from ckconv.systems import CREATIONKIT, IMPERIAL, METRIC, SystemID
from ckconv.units.unitidentity import (
    compare_name,
    compare_symbol,
    find_unit,
    matches_unit,
    suggest_units,
    topk_units,
)
from ckconv.units.unitidentity import resolve_unit as resolve_unit_or_raise
from ckconv.utils.errors import InvalidUnitError


# ============================================================================
# Basic Resolution
# ============================================================================

class TestResolveBasic:
    """Test the canonical resolution examples"""

    def test_meter_symbol(self):
        result = resolve_unit("m")
        assert result.ok
        assert result.value is METRIC.METER

    def test_foot_alias(self):
        assert resolve_unit("ft").value is IMPERIAL.FOOT

    def test_feet_irregular_plural(self):
        assert resolve_unit("feet").value is IMPERIAL.FOOT

    def test_yards_plural(self):
        assert resolve_unit("yards").value is IMPERIAL.YARD

    def test_kilometer_symbol(self):
        assert resolve_unit("km").value is METRIC.KILOMETER

    def test_creationkit_unit(self):
        result = resolve_unit("u")
        assert result.value is CREATIONKIT.UNIT
        assert result.value.system is SystemID.CREATIONKIT

    def test_bogus_is_invalid_unit(self):
        result = resolve_unit("bogus")
        assert not result.ok
        assert result.kind is ErrorKind.INVALID_UNIT
        assert result.error.token == "bogus"
        assert "bogus" in str(result.error)


class TestResolveNames:
    """Test case-insensitive name, plural and alias matching"""

    @pytest.mark.parametrize("token,key", [
        ("Foot", "FOOT"),
        ("FEET", "FOOT"),
        ("inch", "INCH"),
        ("inches", "INCH"),
        ("in", "INCH"),
        ("Yard", "YARD"),
        ("miles", "MILE"),
        ("twips", "TWIP"),
        ("cable", "CABLE"),
        ("Links", "LINK"),
        ("nautical mile", "NAUTICAL_MILE"),
        ("Nautical Miles", "NAUTICAL_MILE"),
        ("nauticalmile", "NAUTICAL_MILE"),
        ("nmile", "NAUTICAL_MILE"),
    ])
    def test_imperial_names(self, token, key):
        unit = resolve_unit(token).value
        assert unit.system is SystemID.IMPERIAL
        assert unit.key == key

    @pytest.mark.parametrize("token,key", [
        ("meter", "METER"),
        ("Meters", "METER"),
        ("kilometer", "KILOMETER"),
        ("decameters", "DECAMETER"),
        ("Yoctometer", "YOCTOMETER"),
    ])
    def test_metric_names(self, token, key):
        assert resolve_unit(token).value is METRIC.unit(key)

    @pytest.mark.parametrize("token,key", [
        ("unit", "UNIT"),
        ("Units", "UNIT"),
        ("kilounit", "KILOUNIT"),
        ("Megaunits", "MEGAUNIT"),
    ])
    def test_creationkit_names(self, token, key):
        assert resolve_unit(token).value is CREATIONKIT.unit(key)

    def test_surrounding_whitespace(self):
        assert resolve_unit("  ft ").value is IMPERIAL.FOOT


class TestResolveMetre:
    """Test the 'metre' spelling of metric names"""

    @pytest.mark.parametrize("token,key", [
        ("metre", "METER"),
        ("Metres", "METER"),
        ("kilometres", "KILOMETER"),
        ("CENTIMETRE", "CENTIMETER"),
    ])
    def test_metre_spelling(self, token, key):
        assert resolve_unit(token).value is METRIC.unit(key)


class TestResolveSymbols:
    """Test exact, case-sensitive symbol matching"""

    def test_mega_vs_milli(self):
        """'Mm' is a megameter, 'mm' a millimeter"""
        assert resolve_unit("Mm").value is METRIC.MEGAMETER
        assert resolve_unit("mm").value is METRIC.MILLIMETER

    def test_symbol_case_matters(self):
        assert resolve_unit("KM").kind is ErrorKind.INVALID_UNIT

    def test_nmi_is_nautical_mile(self):
        """'nmi' resolves to Nautical Mile, never Cable"""
        unit = resolve_unit("nmi").value
        assert unit is IMPERIAL.NAUTICAL_MILE
        assert unit is not IMPERIAL.CABLE

    @pytest.mark.parametrize("token,unit", [
        ("'", IMPERIAL.FOOT),
        ('"', IMPERIAL.INCH),
        ("th", IMPERIAL.THOU),
        ("Bc", IMPERIAL.BARLEYCORN),
        ("h", IMPERIAL.HAND),
        ("ftm", IMPERIAL.FATHOM),
        ("rd", IMPERIAL.ROD),
        ("dam", METRIC.DECAMETER),
        ("hm", METRIC.HECTOMETER),
        ("um", METRIC.MICROMETER),
        ("ku", CREATIONKIT.KILOUNIT),
        ("uu", CREATIONKIT.MICROUNIT),
        ("Yu", CREATIONKIT.YOTTAUNIT),
    ])
    def test_symbols(self, token, unit):
        assert resolve_unit(token).value is unit

    def test_typographic_quotes(self):
        """Smart quotes are read as foot and inch marks"""
        assert resolve_unit("’").value is IMPERIAL.FOOT
        assert resolve_unit("”").value is IMPERIAL.INCH

    def test_imperial_wins_over_metric(self):
        """'h' is a Hand before it could be anything metric"""
        assert find_unit("h").system is SystemID.IMPERIAL


class TestResolveDefault:
    """Test the default fallback"""

    def test_default_used_when_nothing_matches(self):
        result = resolve_unit("bogus", default=METRIC.METER)
        assert result.ok
        assert result.value is METRIC.METER

    def test_default_ignored_when_token_matches(self):
        assert resolve_unit("ft", default=METRIC.METER).value is IMPERIAL.FOOT

    def test_empty_token(self):
        assert resolve_unit("").kind is ErrorKind.INVALID_UNIT
        assert resolve_unit("", default=CREATIONKIT.UNIT).value is CREATIONKIT.UNIT

    def test_raising_variant(self):
        with pytest.raises(InvalidUnitError):
            resolve_unit_or_raise("bogus")

    def test_unwrap_reraises(self):
        with pytest.raises(InvalidUnitError):
            resolve_unit("bogus").unwrap()


# ============================================================================
# Comparison Helpers
# ============================================================================

class TestComparisons:
    """Test the symbol and name comparison rules"""

    def test_compare_symbol_exact(self):
        assert compare_symbol("km", "km")
        assert not compare_symbol("Km", "km")

    def test_compare_name_case_insensitive(self):
        assert compare_name("YARD", "Yard")

    def test_compare_name_one_trailing_s(self):
        assert compare_name("yards", "Yard")
        assert not compare_name("yardss", "Yard")

    def test_compare_name_empty(self):
        assert not compare_name("", "Yard")
        assert not compare_name("s", "")

    def test_matches_unit(self):
        assert matches_unit("feet", IMPERIAL.FOOT)
        assert matches_unit("'", IMPERIAL.FOOT)
        assert not matches_unit("yd", IMPERIAL.FOOT)

    def test_find_unit_none(self):
        assert find_unit(None) is None
        assert find_unit("   ") is None


# ============================================================================
# Suggestions
# ============================================================================

class TestSuggestions:
    """Test fuzzy candidates offered for unknown tokens"""

    def test_match_unit_ranks_closest_first(self):
        matches = match_unit("kilometr", k=2)
        assert len(matches) == 2
        assert matches[0]["name"] == "Kilometer"
        assert matches[0]["system"] == "Metric"
        assert matches[0]["score"] >= matches[1]["score"]

    def test_match_unit_fields(self):
        match = match_unit("yard", k=1)[0]
        assert set(match) == {"system", "key", "symbol", "name", "score"}
        assert match["key"] == "YARD"
        assert match["score"] == pytest.approx(100.0)

    def test_match_unit_empty_query(self):
        assert match_unit("") == []

    def test_topk_one_entry_per_unit(self):
        """'feet' and 'foot' both point at FOOT; it is listed once"""
        ranked = topk_units("foot", k=10)
        keys = [(u.system, u.key) for u, _ in ranked]
        assert len(keys) == len(set(keys))

    def test_suggestions_in_error(self):
        result = resolve_unit("kilometr")
        assert result.kind is ErrorKind.INVALID_UNIT
        assert "km" in result.error.suggestions
        assert "did you mean" in str(result.error)

    def test_no_suggestions_for_noise(self):
        assert suggest_units("zzzzqqqq") == []
