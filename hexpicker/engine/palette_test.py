"""Tests for the PCG32 generator and fallback palette helpers."""

import pytest

from .errors import ConfigurationError
from .palette import (
    PCG32,
    CyclingColorSource,
    RandomColorSource,
    random_palette,
)
from .types import DEFAULT_BAR_COLOR_COUNT


def test_pcg32_same_seed_same_sequence():
    a = PCG32(42)
    b = PCG32(42)
    assert [a.next_u32() for _ in range(10)] == [b.next_u32() for _ in range(10)]


def test_pcg32_different_seeds_differ():
    a = PCG32(1)
    b = PCG32(2)
    assert [a.next_u32() for _ in range(10)] != [b.next_u32() for _ in range(10)]


def test_pcg32_output_is_32_bit():
    rng = PCG32(7)
    for _ in range(1000):
        assert 0 <= rng.next_u32() <= 0xFFFFFFFF


def test_next_below_range():
    rng = PCG32(3)
    values = {rng.next_below(4) for _ in range(500)}
    assert values == {0, 1, 2, 3}


def test_default_bar_palette_size_and_range():
    colors = random_palette(DEFAULT_BAR_COLOR_COUNT)
    assert len(colors) == 8
    for color in colors:
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_random_source_channel_range():
    source = RandomColorSource()
    for _ in range(2000):
        assert all(0 <= c <= 255 for c in source.next_color())


def test_seeded_source_is_reproducible():
    a = random_palette(5, RandomColorSource(seed=99))
    b = random_palette(5, RandomColorSource(seed=99))
    assert a == b


def test_unseeded_source_picks_a_seed():
    source = RandomColorSource()
    assert isinstance(source.seed, int)


def test_cycling_source_wraps():
    source = CyclingColorSource([(1, 1, 1), (2, 2, 2)])
    assert random_palette(3, source) == [(1, 1, 1), (2, 2, 2), (1, 1, 1)]


def test_cycling_source_needs_colors():
    with pytest.raises(ConfigurationError):
        CyclingColorSource([])
