"""Data types shared by the hex grid and color bar layouts.

Colors are plain ``(r, g, b)`` tuples. Widget parameters mirror the JSON
attribute names used by ``frontend/config_io.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from PIL import ImageColor

from .errors import ConfigurationError

Color = tuple[int, int, int]

DEFAULT_RADIUS = 3
DEFAULT_STROKE_WIDTH = 0.0
DEFAULT_THUMB_SIZE = 24.0
DEFAULT_BAR_HEIGHT = 16.0
DEFAULT_BAR_MASK_COLOR: Color = (255, 255, 255)
DEFAULT_BAR_COLOR_COUNT = 8
DEFAULT_DRAG_SLOP = 8.0


def parse_color(value: str | list[int] | tuple[int, ...]) -> Color:
    """Parse ``"#rrggbb"``, a CSS color name or an RGB sequence."""
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid color {value!r}") from e
        return (rgb[0], rgb[1], rgb[2])
    if len(value) != 3 or not all(0 <= int(c) <= 255 for c in value):
        raise ConfigurationError(f"Invalid RGB triple {value!r}")
    return (int(value[0]), int(value[1]), int(value[2]))


def color_to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class Padding:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @staticmethod
    def from_dict(d: dict | None) -> Padding:
        if not d:
            return Padding()
        return Padding(
            left=d.get("left", 0.0),
            top=d.get("top", 0.0),
            right=d.get("right", 0.0),
            bottom=d.get("bottom", 0.0),
        )

    def to_dict(self) -> dict:
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
        }

    def draw_size(self, width: float, height: float) -> tuple[float, float]:
        """Width and height left for drawing inside a widget of this size."""
        return (
            width - self.left - self.right,
            height - self.top - self.bottom,
        )


@dataclass(frozen=True)
class HexCell:
    center: Point2D
    color: Color
    index: int


@dataclass(frozen=True, eq=False)
class Grid:
    """Cached hex grid geometry.

    ``centers`` is an ``(N, 2)`` array parallel to ``cells``; the cell index
    joins geometry and color.
    """

    radius: int
    cells: list[HexCell]
    cell_circumradius: float
    cell_spacing: float
    centers: np.ndarray
    draw_left: float = 0.0
    draw_top: float = 0.0
    draw_width: float = 0.0
    draw_height: float = 0.0

    @property
    def inscribed_radius(self) -> float:
        """Hexagon apothem: half the distance between adjacent centers."""
        return self.cell_spacing / 2

    def is_empty(self) -> bool:
        return not self.cells

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) is inside the draw area."""
        return (
            self.draw_left <= x < self.draw_left + self.draw_width
            and self.draw_top <= y < self.draw_top + self.draw_height
        )


@dataclass(frozen=True)
class BarSegment:
    color_index: int
    range_end: float


@dataclass
class Palette:
    """Ordered display colors with a version bumped on every mutation."""

    colors: list[Color] = field(default_factory=list)
    version: int = 0

    def replace(self, colors: list[Color]) -> None:
        self.colors = list(colors)
        self.version += 1

    def extend(self, colors: list[Color]) -> None:
        if not colors:
            return
        self.colors.extend(colors)
        self.version += 1

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    def index_of(self, color: Color) -> int:
        """First index of ``color``, or -1 when absent."""
        try:
            return self.colors.index(color)
        except ValueError:
            return -1


def _parse_colors(raw: list | None) -> list[Color]:
    return [parse_color(c) for c in raw or []]


@dataclass
class HexGridParams:
    radius: int = DEFAULT_RADIUS
    stroke_width: float = DEFAULT_STROKE_WIDTH
    stroke_color: Color | None = None
    colors: list[Color] = field(default_factory=list)
    padding: Padding = field(default_factory=Padding)

    @staticmethod
    def from_dict(d: dict) -> HexGridParams:
        radius = d.get("radius", DEFAULT_RADIUS)
        if not isinstance(radius, int) or isinstance(radius, bool):
            raise ConfigurationError(f"Invalid radius {radius!r}")
        stroke_color = d.get("stroke_color")
        return HexGridParams(
            radius=radius,
            stroke_width=d.get("stroke_width", DEFAULT_STROKE_WIDTH),
            stroke_color=(
                parse_color(stroke_color) if stroke_color else None
            ),
            colors=_parse_colors(d.get("colors")),
            padding=Padding.from_dict(d.get("padding")),
        )

    def to_dict(self) -> dict:
        d: dict = {
            "radius": self.radius,
            "stroke_width": self.stroke_width,
        }
        if self.stroke_color:
            d["stroke_color"] = color_to_hex(self.stroke_color)
        if self.colors:
            d["colors"] = [color_to_hex(c) for c in self.colors]
        d["padding"] = self.padding.to_dict()
        return d


@dataclass
class ColorBarParams:
    thumb_size: float = DEFAULT_THUMB_SIZE
    bar_height: float = DEFAULT_BAR_HEIGHT
    bar_mask_color: Color = DEFAULT_BAR_MASK_COLOR
    colors: list[Color] = field(default_factory=list)
    padding: Padding = field(default_factory=Padding)
    drag_slop: float = DEFAULT_DRAG_SLOP
    in_scrolling_container: bool = False
    shrink_ends: bool | None = None

    @staticmethod
    def from_dict(d: dict) -> ColorBarParams:
        mask = d.get("bar_mask_color")
        return ColorBarParams(
            thumb_size=d.get("thumb_size", DEFAULT_THUMB_SIZE),
            bar_height=d.get("bar_height", DEFAULT_BAR_HEIGHT),
            bar_mask_color=(
                parse_color(mask) if mask else DEFAULT_BAR_MASK_COLOR
            ),
            colors=_parse_colors(d.get("colors")),
            padding=Padding.from_dict(d.get("padding")),
            drag_slop=d.get("drag_slop", DEFAULT_DRAG_SLOP),
            in_scrolling_container=d.get("in_scrolling_container", False),
            shrink_ends=d.get("shrink_ends"),
        )

    def to_dict(self) -> dict:
        d: dict = {
            "thumb_size": self.thumb_size,
            "bar_height": self.bar_height,
            "bar_mask_color": color_to_hex(self.bar_mask_color),
            "padding": self.padding.to_dict(),
            "drag_slop": self.drag_slop,
            "in_scrolling_container": self.in_scrolling_container,
        }
        if self.shrink_ends is not None:
            d["shrink_ends"] = self.shrink_ends
        if self.colors:
            d["colors"] = [color_to_hex(c) for c in self.colors]
        return d
