"""Fallback palette generation.

When a widget is shown without an explicit palette it fills itself with
random colors. The colors come from a ``ColorSource`` so that tests and
screenshots can pin a seed, while the default source draws a fresh seed on
every construction.

Random numbers come from a small PCG32 generator (PCG-XSH-RR, 32-bit output,
64-bit state; https://www.pcg-random.org/).
"""

from __future__ import annotations

import random
from typing import Protocol

from .errors import ConfigurationError
from .types import Color


class PCG32:
    _MASK32 = 0xFFFFFFFF
    _MASK64 = 0xFFFFFFFFFFFFFFFF
    _MUL = 6364136223846793005

    def __init__(self, seed: int, seq: int = 0) -> None:
        self._state: int = 0
        self._inc: int = ((seq << 1) | 1) & self._MASK64
        self._advance()
        self._state = (self._state + seed) & self._MASK64
        self._advance()

    def _advance(self) -> None:
        self._state = (self._state * self._MUL + self._inc) & self._MASK64

    def next_u32(self) -> int:
        old = self._state
        self._advance()
        xorshifted = (((old >> 18) ^ old) >> 27) & self._MASK32
        rot = (old >> 59) & 31
        return (
            (xorshifted >> rot) | (xorshifted << ((-rot) & 31))
        ) & self._MASK32

    def next_below(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        return self.next_u32() % bound


class ColorSource(Protocol):
    def next_color(self) -> Color: ...


class RandomColorSource:
    """Uniform RGB colors, each channel in [0, 255].

    ``seed=None`` picks a fresh seed, so two default sources produce
    different palettes.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.getrandbits(64)
        self.seed = seed
        self._rng = PCG32(seed)

    def next_color(self) -> Color:
        return (
            self._rng.next_below(256),
            self._rng.next_below(256),
            self._rng.next_below(256),
        )


class CyclingColorSource:
    """Replays a fixed list of colors in order, wrapping around."""

    def __init__(self, colors: list[Color]) -> None:
        if not colors:
            raise ConfigurationError("CyclingColorSource needs colors")
        self._colors = list(colors)
        self._next = 0

    def next_color(self) -> Color:
        color = self._colors[self._next % len(self._colors)]
        self._next += 1
        return color


def random_palette(count: int, source: ColorSource | None = None) -> list[Color]:
    """Return ``count`` colors drawn from ``source`` (random by default)."""
    if source is None:
        source = RandomColorSource()
    return [source.next_color() for _ in range(count)]
