"""Colored terminal output with rich.

Builds styled ``Text``/``Table`` renderables from the plain formatters and
prints them through a ``Console`` configured from the settings.
"""

import io
from typing import IO, List, Optional

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from ckconv.config import Settings
from ckconv.conversion.convertengine import Conversion
from ckconv.display.formatting import expression_parts
from ckconv.systems.systemapi import load_units
from ckconv.systems.unitsystems import SystemID


def make_console(settings: Settings, file: Optional[IO[str]] = None, stderr: bool = False) -> Console:
    """Console honoring the ``color`` setting; rich also drops color off-terminal."""
    return Console(
        file=file,
        stderr=stderr,
        no_color=not settings.color,
        color_system="auto" if settings.color else None,
        highlight=False,
        markup=False,
        soft_wrap=True,
        emoji=False,
    )


def conversion_text(conversion: Conversion, settings: Settings) -> Text:
    in_value, in_unit, padding, out_value, out_unit = expression_parts(conversion, settings)
    text = Text()
    if not settings.quiet:
        text.append(in_value, style=settings.style("input"))
        text.append(" ")
        text.append(in_unit, style=settings.style("unit"))
        text.append(padding + " = ")
    text.append(out_value, style=settings.style("result"))
    if not settings.quiet:
        text.append(" ")
        text.append(out_unit, style=settings.style("unit"))
    return text


def error_text(message: str, settings: Settings, fatal: bool = False) -> Text:
    return Text(message, style=settings.style("fatal" if fatal else "error"))


def units_renderables(system: SystemID, settings: Settings) -> List[RenderableType]:
    """Header and table per system: Symbol, Name, size in the base unit."""
    df = load_units(system)
    renderables: List[RenderableType] = []

    for system_name, group in df.groupby("system", sort=False):
        if renderables:
            renderables.append(Text(""))
        renderables.append(Text(f"{system_name} Units:", style=settings.style("header")))

        table = Table(box=None, padding=(0, 2), pad_edge=True, show_edge=False)
        table.add_column("Symbol", no_wrap=True)
        table.add_column("Name", no_wrap=True)
        table.add_column("1 in Base Unit", no_wrap=True)

        for row in group.itertuples(index=False):
            table.add_row(
                Text(row.symbol, style=settings.style("accent")),
                row.name,
                f"{row.factor:.10g} {row.base}",
            )
        renderables.append(table)

    return renderables


def render_units(system: SystemID, settings: Settings, width: int = 100) -> str:
    """Unit listing as plain text (used by tests and non-terminal callers)."""
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, color_system=None, width=width, highlight=False)
    for renderable in units_renderables(system, settings):
        console.print(renderable)
    return buffer.getvalue()


__all__ = [
    "make_console",
    "conversion_text",
    "error_text",
    "units_renderables",
    "render_units",
]
