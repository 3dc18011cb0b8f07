"""Linear color bar layout: segment spans, boundary table and thumb position.

With more than two colors the bar uses the "shrunk ends" layout by default:
the first and last colors get half a segment each so that the thumb rests
flush with the bar edges when either is selected. Otherwise every segment
is ``width / count`` wide. Callers can force either layout with
``shrink_ends``.

Hit testing uses a cumulative boundary table. A pointer at ``x`` picks the
first color whose ``range_end >= x``. The last entry is ``math.inf``, so
anything right of the bar still resolves to the last color and anything
left of it to the first.
"""

from __future__ import annotations

import bisect
import logging
import math

from .errors import DegenerateGeometryError
from .types import BarSegment, Padding

logger = logging.getLogger(__name__)


def uses_shrunk_ends(count: int, shrink_ends: bool | None = None) -> bool:
    if shrink_ends is None:
        return count > 2
    return shrink_ends and count > 1


def segment_width(
    count: int, draw_width: float, shrink_ends: bool | None = None
) -> float:
    """Width of a full (interior) segment."""
    if count < 1:
        return 0.0
    if uses_shrunk_ends(count, shrink_ends):
        return draw_width / (count - 1)
    return draw_width / count


def boundary_table(
    count: int,
    draw_width: float,
    padding_left: float = 0.0,
    shrink_ends: bool | None = None,
) -> list[BarSegment]:
    """Cumulative segment ends, ascending; the last one is unbounded."""
    if count < 1:
        return []
    width = segment_width(count, draw_width, shrink_ends)
    first_end = padding_left + (
        width / 2 if uses_shrunk_ends(count, shrink_ends) else width
    )
    table = [
        BarSegment(color_index=i, range_end=first_end + i * width)
        for i in range(count - 1)
    ]
    table.append(BarSegment(color_index=count - 1, range_end=math.inf))
    return table


def resolve_index(table: list[BarSegment], x: float) -> int | None:
    """Index of the color under ``x``, or None for an empty table."""
    if not table:
        return None
    ends = [s.range_end for s in table]
    i = bisect.bisect_left(ends, x)
    return table[min(i, len(table) - 1)].color_index


def segment_spans(
    count: int,
    draw_width: float,
    padding_left: float = 0.0,
    shrink_ends: bool | None = None,
) -> list[tuple[float, float]]:
    """``(start, end)`` x-range each color is drawn over."""
    width = segment_width(count, draw_width, shrink_ends)
    shrunk = uses_shrunk_ends(count, shrink_ends)
    spans = []
    start = padding_left
    for i in range(count):
        if shrunk and i in (0, count - 1):
            end = start + width / 2
        else:
            end = start + width
        spans.append((start, end))
        start = end
    return spans


def thumb_x(
    index: int,
    count: int,
    draw_width: float,
    shrink_ends: bool | None = None,
) -> float:
    """Resting x of the thumb for color ``index``, relative to the bar start.

    The last color sits on the right edge, the first on the left edge, and
    interior colors on ``index * segment_width``. Unknown colors
    (index < 0) sit on the left edge.
    """
    if index == count - 1:
        return draw_width
    if index > 0:
        return index * segment_width(count, draw_width, shrink_ends)
    return 0.0


def bar_rect(
    width: float, height: float, bar_height: float, padding: Padding
) -> tuple[float, float, float, float]:
    """``(left, top, right, bottom)`` of the bar, vertically centered.

    Raises ``DegenerateGeometryError`` when there is no room to draw.
    """
    draw_width, draw_height = padding.draw_size(width, height)
    if draw_width <= 0 or draw_height <= 0:
        raise DegenerateGeometryError(draw_width, draw_height)
    center_y = padding.top + draw_height / 2
    return (
        padding.left,
        center_y - bar_height / 2,
        padding.left + draw_width,
        center_y + bar_height / 2,
    )


def preferred_height(
    thumb_size: float, bar_height: float, padding: Padding
) -> int:
    return math.ceil(max(thumb_size, bar_height)) + int(
        padding.top + padding.bottom
    )


class BarLayout:
    """Geometry of one bar for a given size and color count."""

    def __init__(
        self,
        width: float,
        height: float,
        count: int,
        bar_height: float,
        padding: Padding | None = None,
        shrink_ends: bool | None = None,
    ) -> None:
        padding = padding or Padding()
        self.count = count
        self.padding = padding
        self.shrink_ends = shrink_ends
        self.draw_width, self.draw_height = padding.draw_size(width, height)
        try:
            self.rect: tuple[float, float, float, float] | None = bar_rect(
                width, height, bar_height, padding
            )
        except DegenerateGeometryError as e:
            logger.debug("Empty bar layout: %s", e)
            self.rect = None
        if self.rect is None:
            self.boundaries: list[BarSegment] = []
            self.spans: list[tuple[float, float]] = []
        else:
            self.boundaries = boundary_table(
                count, self.draw_width, padding.left, shrink_ends
            )
            self.spans = segment_spans(
                count, self.draw_width, padding.left, shrink_ends
            )

    def is_empty(self) -> bool:
        return self.rect is None

    def resolve(self, x: float) -> int | None:
        return resolve_index(self.boundaries, x)

    def thumb_offset(self, index: int) -> float:
        return thumb_x(index, self.count, self.draw_width, self.shrink_ends)

    def thumb_center(self, index: int) -> tuple[float, float]:
        """Thumb center in widget coordinates."""
        return (
            self.padding.left + self.thumb_offset(index),
            self.padding.top + self.draw_height / 2,
        )
