"""Tests for number formatting, conversion expressions and unit listings."""

import io

import pytest

from ckconv import convert_triple
from ckconv.config import Settings
from ckconv.display import (
    conversion_text,
    error_text,
    format_conversion,
    format_number,
    format_unit,
    make_console,
    render_units,
)
from ckconv.display.formatting import alignment_padding
from ckconv.systems import CREATIONKIT, IMPERIAL, METRIC, SystemID


@pytest.fixture
def mile_in_feet():
    return convert_triple(("mi", "1", "ft")).value


# ============================================================================
# Numbers
# ============================================================================

class TestFormatNumber:
    """Test each notation"""

    def test_general_default(self):
        assert format_number(3.2808398950131235, Settings()) == "3.28084"
        assert format_number(5280.0, Settings()) == "5280"

    def test_general_precision(self):
        assert format_number(3.2808398950131235, Settings(precision=3)) == "3.28"

    def test_general_switches_to_exponent(self):
        assert format_number(1e-24, Settings()) == "1e-24"

    def test_fixed_trims_zeros(self):
        settings = Settings(notation="fixed")
        assert format_number(2.5, settings) == "2.5"
        assert format_number(3.0, settings) == "3"
        assert format_number(1e-9, settings) == "0"

    def test_fixed_precision_keeps_zeros(self):
        assert format_number(2.5, Settings(notation="fixed", precision=3)) == "2.500"
        assert format_number(820.2099737532808, Settings(notation="fixed", precision=2)) == "820.21"

    def test_scientific(self):
        assert format_number(1500.0, Settings(notation="scientific")) == "1.500000e+03"
        assert format_number(1500.0, Settings(notation="scientific", precision=2)) == "1.50e+03"

    def test_hex(self):
        assert format_number(1.0, Settings(notation="hex")) == "0x1.0000000000000p+0"
        assert format_number(5280.0, Settings(notation="hex")) == "0x1.4a00000000000p+12"


class TestFormatUnit:
    """Test symbol / full name selection"""

    def test_symbol_by_default(self):
        assert format_unit(METRIC.KILOMETER, Settings()) == "km"

    def test_full_name(self):
        settings = Settings(full_name=True)
        assert format_unit(IMPERIAL.FOOT, settings) == "Feet"
        assert format_unit(IMPERIAL.FOOT, settings, plural=False) == "Foot"

    def test_missing_symbol_falls_back_to_name(self):
        assert format_unit(IMPERIAL.CABLE, Settings()) == "Cables"


# ============================================================================
# Expressions
# ============================================================================

class TestFormatConversion:
    """Test the '<in> <unit> = <out> <unit>' expression"""

    def test_default(self, mile_in_feet):
        assert format_conversion(mile_in_feet, Settings()) == "1 mi = 5280 '"

    def test_quiet(self, mile_in_feet):
        assert format_conversion(mile_in_feet, Settings(quiet=True)) == "5280"

    def test_full_name_singular_and_plural(self, mile_in_feet):
        assert format_conversion(mile_in_feet, Settings(full_name=True)) == "1 Mile = 5280 Feet"

    def test_full_name_plural_input(self):
        conversion = convert_triple(("yd", "2", "in")).value
        assert format_conversion(conversion, Settings(full_name=True)) == "2 Yards = 72 Inches"

    def test_alignment(self, mile_in_feet):
        line = format_conversion(mile_in_feet, Settings(align_to=12))
        assert line == "1 mi        = 5280 '"
        assert line.index(" = ") == 11

    def test_alignment_too_narrow(self, mile_in_feet):
        assert format_conversion(mile_in_feet, Settings(align_to=2)) == "1 mi = 5280 '"

    def test_alignment_padding(self):
        assert alignment_padding(4, Settings()) == 0
        assert alignment_padding(4, Settings(align_to=10)) == 5

    def test_creationkit(self):
        conversion = convert_triple(("ft", "6", "u")).value
        assert format_conversion(conversion, Settings()) == "6 ' = 128 u"


class TestRichText:
    """Test styled rich renderables"""

    def test_conversion_text_plain(self, mile_in_feet):
        assert conversion_text(mile_in_feet, Settings()).plain == "1 mi = 5280 '"

    def test_conversion_text_quiet(self, mile_in_feet):
        assert conversion_text(mile_in_feet, Settings(quiet=True)).plain == "5280"

    def test_conversion_text_styles(self, mile_in_feet):
        text = conversion_text(mile_in_feet, Settings())
        styles = {str(span.style) for span in text.spans}
        assert "cyan" in styles
        assert "green" in styles

    def test_error_text_styles(self):
        assert str(error_text("oops", Settings()).style) == "red"
        assert str(error_text("oops", Settings(), fatal=True).style) == "bold red"

    def test_console_without_color(self, mile_in_feet):
        buffer = io.StringIO()
        console = make_console(Settings(color=False), file=buffer)
        console.print(conversion_text(mile_in_feet, Settings()))
        assert buffer.getvalue() == "1 mi = 5280 '\n"


# ============================================================================
# Unit Listing
# ============================================================================

class TestRenderUnits:
    """Test the unit listing tables"""

    def test_single_system(self, plain_settings):
        listing = render_units(SystemID.CREATIONKIT, plain_settings)
        assert "Creation Kit Units:" in listing
        assert "Metric Units:" not in listing
        assert "Kilounit" in listing
        assert "ku" in listing
        assert "1 in Base Unit" in listing

    def test_all_systems_in_order(self, plain_settings):
        listing = render_units(SystemID.ALL, plain_settings)
        ck = listing.index("Creation Kit Units:")
        metric = listing.index("Metric Units:")
        imperial = listing.index("Imperial Units:")
        assert ck < metric < imperial

    def test_factor_column(self, plain_settings):
        listing = render_units(SystemID.IMPERIAL, plain_settings)
        assert "5280 '" in listing
        assert "Nautical Mile" in listing

    def test_every_unit_listed(self, plain_settings):
        listing = render_units(SystemID.METRIC, plain_settings)
        for unit in METRIC:
            assert unit.name in listing
        assert CREATIONKIT.KILOUNIT.name not in listing
