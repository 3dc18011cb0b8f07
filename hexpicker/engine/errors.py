"""Exception types raised by the layout engine.

Only configuration mistakes are fatal. A zero-sized draw area is a normal
transient state while a widget is being laid out, so the layout functions
catch ``DegenerateGeometryError`` themselves and fall back to an empty
layout; it only escapes from the low-level ``require_draw_area`` check.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid widget configuration (radius < 1, empty palette, ...)."""


class DegenerateGeometryError(ValueError):
    """Draw area has zero or negative width or height after padding."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(f"Degenerate draw area {width}x{height}")
        self.width = width
        self.height = height
