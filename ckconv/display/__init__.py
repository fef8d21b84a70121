"""Presentation of conversions and unit listings."""

from ckconv.display.formatting import (
    format_number,
    format_unit,
    format_conversion,
)
from ckconv.display.rendering import (
    make_console,
    conversion_text,
    error_text,
    units_renderables,
    render_units,
)

__all__ = [
    "format_number",
    "format_unit",
    "format_conversion",
    "make_console",
    "conversion_text",
    "error_text",
    "units_renderables",
    "render_units",
]
