"""Tkinter frontend for the hexpicker widgets.

The widgets here are thin adapters around the toolkit-independent picker
models in ``engine/pickers.py``:

  * ``HexGridView`` / ``ColorBarView`` own a Tk Canvas each. They forward
    ``<Configure>`` as a size change, translate mouse button 1 press,
    motion and release into ``PointerEvent``s, and treat button 3 as a
    gesture cancel. Whenever the model's ``on_invalidate`` hook fires they
    schedule a single re-render with ``after_idle``; rendering itself is
    done by ``renderer.py`` into a Pillow image shown via ``ImageTk``.
  * ``App`` is a demo window with three honeycomb pickers and three color
    bars. Touching a color tints the window background, clicking one shows
    it in the status line.

Run with ``python -m hexpicker.frontend.app`` or the ``hexpicker`` script.
"""

import argparse
import logging
import tkinter as tk
from tkinter import ttk

from PIL import ImageTk

from ..engine.bar import preferred_height
from ..engine.gestures import Action, PointerEvent
from ..engine.palette import RandomColorSource
from ..engine.pickers import ColorBarPicker, HexGridPicker, HitStrategy
from ..engine.types import (
    ColorBarParams,
    HexGridParams,
    Padding,
    color_to_hex,
)
from ..logging_config import setup_logging
from .config_io import load_config
from .renderer import ColorBarRenderer, HexGridRenderer

logger = logging.getLogger(__name__)

# -- Visual constants --

WINDOW_BG = (255, 255, 255)
TINT_ALPHA = 0x3F  # touch tint strength, out of 255
HEX_VIEW_SIZE = 220
BAR_VIEW_WIDTH = 480
BAR_PADDING = Padding(16.0, 4.0, 16.0, 4.0)

GRAYSCALE_COLORS = [
    (0x44, 0x44, 0x44),
    (0xFF, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
    (0x88, 0x88, 0x88),
    (0x44, 0x44, 0x44),
    (0x44, 0x44, 0x44),
    (0xFF, 0xFF, 0xFF),
]

RAINBOW_COLORS = [
    (0xE5, 0x39, 0x35),
    (0xFB, 0x8C, 0x00),
    (0xFD, 0xD8, 0x35),
    (0x43, 0xA0, 0x47),
    (0x1E, 0x88, 0xE5),
    (0x5E, 0x35, 0xB1),
]


def _tint(base, color, alpha=TINT_ALPHA):
    """Blend ``color`` over ``base`` with ``alpha`` in [0, 255]."""
    a = alpha / 255
    return tuple(round(b + (c - b) * a) for b, c in zip(base, color))


def _pointer_event(event, action):
    return PointerEvent(float(event.x), float(event.y), action)


def _bind_pointer(canvas, handler):
    canvas.bind(
        "<ButtonPress-1>", lambda e: handler(_pointer_event(e, Action.DOWN))
    )
    canvas.bind(
        "<B1-Motion>", lambda e: handler(_pointer_event(e, Action.MOVE))
    )
    canvas.bind(
        "<ButtonRelease-1>", lambda e: handler(_pointer_event(e, Action.UP))
    )
    canvas.bind(
        "<Button-3>", lambda e: handler(_pointer_event(e, Action.CANCEL))
    )


# ---------------------------------------------------------------------------
# Widgets
# ---------------------------------------------------------------------------


class _PickerView:
    def __init__(self, parent, picker, renderer, width, height):
        self.picker = picker
        self.renderer = renderer
        self.canvas = tk.Canvas(
            parent,
            width=width,
            height=height,
            bg=color_to_hex(WINDOW_BG),
            highlightthickness=0,
        )
        self._photo = None  # prevent GC
        self._render_pending = False
        picker.on_invalidate = self.request_render
        self.canvas.bind("<Configure>", self._on_configure)
        _bind_pointer(self.canvas, picker.handle_event)

    def _on_configure(self, event):
        self.picker.set_size(float(event.width), float(event.height))
        self.request_render()

    def request_render(self):
        if self._render_pending:
            return
        self._render_pending = True
        self.canvas.after_idle(self._render)

    def _render(self):
        self._render_pending = False
        if self.picker.width < 1 or self.picker.height < 1:
            return
        img = self.renderer.render(self.picker)
        self._photo = ImageTk.PhotoImage(img)
        self.canvas.delete("all")
        self.canvas.create_image(0, 0, image=self._photo, anchor="nw")

    def set_background(self, color):
        self.canvas.configure(bg=color_to_hex(color))


class HexGridView(_PickerView):
    def __init__(self, parent, picker, size=HEX_VIEW_SIZE):
        super().__init__(parent, picker, HexGridRenderer(), size, size)


class ColorBarView(_PickerView):
    def __init__(self, parent, picker, width=BAR_VIEW_WIDTH):
        height = preferred_height(
            picker.thumb_size, picker.bar_height, picker.padding
        )
        super().__init__(parent, picker, ColorBarRenderer(), width, height)


# ---------------------------------------------------------------------------
# Demo application
# ---------------------------------------------------------------------------


def build_hex_pickers(primary_params, hit_strategy, seed=None):
    """The three demo honeycombs; the first uses ``primary_params``."""

    def source(offset):
        return RandomColorSource(None if seed is None else seed + offset)

    return [
        HexGridPicker(primary_params, hit_strategy, source(0)),
        HexGridPicker(
            HexGridParams(radius=2, colors=list(GRAYSCALE_COLORS)),
            hit_strategy,
            source(1),
        ),
        HexGridPicker(
            HexGridParams(
                radius=4, stroke_width=2.0, stroke_color=(0x22, 0x22, 0x22)
            ),
            hit_strategy,
            source(2),
        ),
    ]


def build_bar_pickers(primary_params, seed=None):
    """The three demo bars; the first uses ``primary_params``."""
    return [
        ColorBarPicker(
            primary_params,
            RandomColorSource(None if seed is None else seed + 10),
        ),
        ColorBarPicker(
            ColorBarParams(colors=list(RAINBOW_COLORS), padding=BAR_PADDING)
        ),
        ColorBarPicker(
            ColorBarParams(
                colors=RAINBOW_COLORS[:2],
                padding=BAR_PADDING,
                in_scrolling_container=True,
            )
        ),
    ]


class App:
    def __init__(self, hex_params, bar_params, hit_strategy, seed=None):
        self.root = tk.Tk()
        self.root.title("hexpicker")
        self.root.configure(bg=color_to_hex(WINDOW_BG))

        style = ttk.Style()
        style.theme_use("clam")

        self.content = tk.Frame(self.root, bg=color_to_hex(WINDOW_BG))
        self.content.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        self.views = []
        hex_row = tk.Frame(self.content, bg=color_to_hex(WINDOW_BG))
        hex_row.pack(side=tk.TOP, fill=tk.X)
        for picker in build_hex_pickers(hex_params, hit_strategy, seed):
            view = HexGridView(hex_row, picker)
            view.canvas.pack(side=tk.LEFT, padx=5, pady=5)
            self._listen(picker)
            self.views.append(view)

        for picker in build_bar_pickers(bar_params, seed):
            view = ColorBarView(self.content, picker)
            view.canvas.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)
            self._listen(picker)
            self.views.append(view)

        self.status_label = ttk.Label(self.root, text="Pick a color")
        self.status_label.pack(side=tk.BOTTOM, fill=tk.X, padx=10, pady=5)
        self.frames = [self.root, self.content, hex_row]

    def _listen(self, picker):
        picker.set_listeners(
            on_color_touch=self._on_color_touch,
            on_color_click=self._on_color_click,
        )

    def _on_color_touch(self, color):
        bg = _tint(WINDOW_BG, color)
        for frame in self.frames:
            frame.configure(bg=color_to_hex(bg))
        for view in self.views:
            view.set_background(bg)

    def _on_color_click(self, color):
        logger.info("Color clicked: %s", color_to_hex(color))
        self.status_label.config(text=f"Clicked {color_to_hex(color)}")

    def run(self):
        self.root.mainloop()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Honeycomb color picker demo")
    parser.add_argument("--config", help="JSON picker configuration")
    parser.add_argument(
        "--radius", type=int, help="Ring count of the first honeycomb"
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for the fallback random palettes"
    )
    parser.add_argument(
        "--hit-strategy",
        choices=[s.value for s in HitStrategy],
        default=HitStrategy.ANALYTIC.value,
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.config:
        hex_params, bar_params = load_config(args.config)
    else:
        hex_params, bar_params = HexGridParams(), ColorBarParams()
    if args.radius is not None:
        hex_params.radius = args.radius

    App(
        hex_params,
        bar_params,
        HitStrategy(args.hit_strategy),
        seed=args.seed,
    ).run()


if __name__ == "__main__":
    main()
