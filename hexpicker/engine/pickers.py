"""Toolkit-independent picker models.

``HexGridPicker`` and ``ColorBarPicker`` hold everything a widget needs:
configuration, palette, cached geometry and gesture state. A frontend
adapter forwards size changes and pointer events and redraws whenever the
``on_invalidate`` hook fires. Every setter validates synchronously and
raises ``ConfigurationError`` instead of clamping.

Geometry is never rebuilt eagerly: setters only change the inputs of the
cache key, and the next read of ``grid`` / ``layout`` recomputes.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from .bar import BarLayout
from .cache import GeometryCache
from .errors import ConfigurationError
from .gestures import (
    Action,
    BarDragTracker,
    ColorCallback,
    HexTouchTracker,
    PointerEvent,
)
from .hexgrid import build_grid, check_radius, count_cells, hit_test
from .palette import ColorSource, RandomColorSource, random_palette
from .raster import CellIndexMap
from .types import (
    DEFAULT_BAR_COLOR_COUNT,
    ColorBarParams,
    Color,
    Grid,
    HexCell,
    HexGridParams,
    Padding,
    Palette,
)

logger = logging.getLogger(__name__)


class HitStrategy(enum.Enum):
    ANALYTIC = "analytic"
    RASTER = "raster"


def _check_colors(colors: list[Color]) -> None:
    if not colors:
        raise ConfigurationError("At least one color is required.")


class _PickerBase:
    def __init__(
        self,
        color_source: ColorSource | None,
        on_invalidate: Callable[[], None] | None,
    ) -> None:
        self.width = 0.0
        self.height = 0.0
        self.color_source = color_source
        self.on_invalidate = on_invalidate
        self.on_color_touch: ColorCallback | None = None
        self.on_color_click: ColorCallback | None = None

    def set_listeners(
        self,
        on_color_touch: ColorCallback | None = None,
        on_color_click: ColorCallback | None = None,
    ) -> None:
        self.on_color_touch = on_color_touch
        self.on_color_click = on_color_click

    def _fallback_colors(self, count: int) -> list[Color]:
        if self.color_source is None:
            self.color_source = RandomColorSource()
        return random_palette(count, self.color_source)

    def _invalidate(self) -> None:
        if self.on_invalidate is not None:
            self.on_invalidate()


class HexGridPicker(_PickerBase):
    def __init__(
        self,
        params: HexGridParams | None = None,
        hit_strategy: HitStrategy = HitStrategy.ANALYTIC,
        color_source: ColorSource | None = None,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color_source, on_invalidate)
        params = params or HexGridParams()
        check_radius(params.radius)
        if params.stroke_width < 0:
            raise ConfigurationError("Stroke width has to be at least 0.")
        self.radius = params.radius
        self.stroke_width = params.stroke_width
        self.stroke_color = params.stroke_color
        self.padding = params.padding
        self.palette = Palette(list(params.colors))
        self.hit_strategy = hit_strategy
        self.tracker = HexTouchTracker()
        self._grid_cache: GeometryCache[Grid] = GeometryCache("hex grid")
        self._index_map_cache: GeometryCache[CellIndexMap] = GeometryCache(
            "hex index map"
        )

    # -- configuration --

    def set_size(self, width: float, height: float) -> None:
        if (width, height) == (self.width, self.height):
            return
        self.width = width
        self.height = height
        self._invalidate()

    def set_radius(self, radius: int) -> None:
        check_radius(radius)
        self.radius = radius
        self._invalidate()

    def set_stroke_width(self, stroke_width: float) -> None:
        if stroke_width < 0:
            raise ConfigurationError("Stroke width has to be at least 0.")
        self.stroke_width = stroke_width
        self._invalidate()

    def set_stroke_color(self, stroke_color: Color | None) -> None:
        self.stroke_color = stroke_color
        self._invalidate()

    def set_colors(self, colors: list[Color]) -> None:
        _check_colors(colors)
        self.palette.replace(colors)
        self._invalidate()

    def set_padding(self, padding: Padding) -> None:
        self.padding = padding
        self._invalidate()

    def set_hit_strategy(self, strategy: HitStrategy) -> None:
        self.hit_strategy = strategy

    # -- geometry --

    def _layout_key(self) -> tuple:
        return (
            self.width,
            self.height,
            self.radius,
            self.palette.version,
            self.padding,
        )

    def _ensure_colors(self) -> None:
        if not self.palette.colors:
            count = count_cells(self.radius)
            logger.debug("No palette set, using %d random colors", count)
            self.palette.extend(self._fallback_colors(count))

    @property
    def grid(self) -> Grid:
        self._ensure_colors()
        return self._grid_cache.get(
            self._layout_key(),
            lambda: build_grid(
                self.width,
                self.height,
                self.radius,
                self.palette.colors,
                self.padding,
            ),
        )

    def _index_map(self) -> CellIndexMap:
        grid = self.grid
        return self._index_map_cache.get(
            self._layout_key(),
            lambda: CellIndexMap.from_grid(grid, self.width, self.height),
        )

    # -- hit testing and events --

    def hit_test(self, x: float, y: float) -> HexCell | None:
        grid = self.grid
        if grid.is_empty():
            return None
        if self.hit_strategy is HitStrategy.RASTER:
            return self._index_map().hit_test(x, y)
        return hit_test(grid, x, y)

    def color_at(self, x: float, y: float) -> Color | None:
        cell = self.hit_test(x, y)
        return cell.color if cell is not None else None

    def handle_event(self, event: PointerEvent) -> bool:
        """Feed one pointer event; returns True if it landed on a cell."""
        color = None
        if event.action is not Action.CANCEL:
            color = self.color_at(event.x, event.y)
        return self.tracker.handle(
            event, color, self.on_color_touch, self.on_color_click
        )


class ColorBarPicker(_PickerBase):
    def __init__(
        self,
        params: ColorBarParams | None = None,
        color_source: ColorSource | None = None,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color_source, on_invalidate)
        params = params or ColorBarParams()
        _check_thumb_size(params.thumb_size)
        _check_bar_height(params.bar_height)
        self.thumb_size = params.thumb_size
        self.bar_height = params.bar_height
        self.bar_mask_color = params.bar_mask_color
        self.padding = params.padding
        self.shrink_ends = params.shrink_ends
        self.palette = Palette(list(params.colors))
        self.selected_color: Color | None = (
            params.colors[0] if params.colors else None
        )
        self.enabled = True
        self.tracker = BarDragTracker(
            params.drag_slop, params.in_scrolling_container
        )
        self._layout_cache: GeometryCache[BarLayout] = GeometryCache(
            "color bar"
        )

    # -- configuration --

    def set_size(self, width: float, height: float) -> None:
        if (width, height) == (self.width, self.height):
            return
        self.width = width
        self.height = height
        self._ensure_colors()
        self._invalidate()

    def set_thumb_size(self, thumb_size: float) -> None:
        _check_thumb_size(thumb_size)
        self.thumb_size = thumb_size
        self._invalidate()

    def set_bar_height(self, bar_height: float) -> None:
        _check_bar_height(bar_height)
        self.bar_height = bar_height
        self._invalidate()

    def set_bar_mask_color(self, color: Color) -> None:
        self.bar_mask_color = color
        self._invalidate()

    def set_colors(self, colors: list[Color]) -> None:
        _check_colors(colors)
        self.palette.replace(colors)
        self.selected_color = colors[0]
        self._invalidate()

    def set_selected_color(self, color: Color) -> None:
        self.selected_color = color
        self._invalidate()

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_in_scrolling_container(self, value: bool) -> None:
        self.tracker.in_scrolling_container = value

    def _ensure_colors(self) -> None:
        if not self.palette.colors:
            colors = self._fallback_colors(DEFAULT_BAR_COLOR_COUNT)
            self.palette.extend(colors)
            self.selected_color = colors[0]

    # -- geometry --

    @property
    def layout(self) -> BarLayout:
        key = (
            self.width,
            self.height,
            self.palette.version,
            self.bar_height,
            self.padding,
            self.shrink_ends,
        )
        return self._layout_cache.get(
            key,
            lambda: BarLayout(
                self.width,
                self.height,
                len(self.palette),
                self.bar_height,
                self.padding,
                self.shrink_ends,
            ),
        )

    @property
    def selected_index(self) -> int:
        if self.selected_color is None:
            return -1
        return self.palette.index_of(self.selected_color)

    @property
    def dragging(self) -> bool:
        return self.tracker.dragging

    def thumb_center(self) -> tuple[float, float] | None:
        layout = self.layout
        if layout.is_empty() or self.selected_color is None:
            return None
        return layout.thumb_center(self.selected_index)

    def thumb_offset(self) -> float:
        """Thumb x relative to the bar start."""
        return self.layout.thumb_offset(self.selected_index)

    # -- hit testing and events --

    def color_at(self, x: float) -> Color | None:
        index = self.layout.resolve(x)
        if index is None:
            return None
        return self.palette[index]

    def handle_event(self, event: PointerEvent) -> bool:
        if not self.enabled:
            return False
        was_dragging = self.tracker.dragging
        consumed = self.tracker.handle(event, self._track)
        if was_dragging != self.tracker.dragging or event.action in (
            Action.UP,
            Action.CANCEL,
        ):
            self._invalidate()
        return consumed

    def _track(self, event: PointerEvent) -> None:
        color = self.color_at(event.x)
        if color is None:
            return
        if color != self.selected_color:
            self.selected_color = color
            self._invalidate()
        if self.on_color_touch is not None:
            self.on_color_touch(color)
        if event.action is Action.UP and self.on_color_click is not None:
            self.on_color_click(color)


def _check_thumb_size(thumb_size: float) -> None:
    if thumb_size < 0:
        raise ConfigurationError("Thumb size has to be at least 0.")


def _check_bar_height(bar_height: float) -> None:
    if bar_height < 0:
        raise ConfigurationError("Bar height has to be at least 0.")
