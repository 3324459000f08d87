"""Packing of linear RGB colours into the integer form used for custom colours."""

from __future__ import annotations

from dataclasses import dataclass

COLOR_OFFSET = 2_000_000_000
"""Base added to every packed colour so it can't be mistaken for a plain value."""

_CHANNEL_MASK = 0xFF
_ENCODE_SCALE = 255
_DECODE_SCALE = 0xFE


@dataclass(frozen=True)
class LinearColor:
    """A colour with linear float channels, nominally in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


def _encode_channel(value: float) -> int:
    # int() truncates toward zero; the mask wraps out-of-range values.
    return int(value * _ENCODE_SCALE) & _CHANNEL_MASK


def _decode_channel(packed: int, shift: int) -> float:
    return ((packed >> shift) & _CHANNEL_MASK) / _DECODE_SCALE


def color_to_int(color: LinearColor) -> int:
    """Pack the RGB channels of ``color`` into a single offset integer."""
    return (
        COLOR_OFFSET
        + (_encode_channel(color.r) << 16)
        + (_encode_channel(color.g) << 8)
        + _encode_channel(color.b)
    )


def int_to_color(value: int) -> LinearColor:
    """Unpack an offset integer produced by :func:`color_to_int`."""
    packed = value - COLOR_OFFSET
    return LinearColor(
        r=_decode_channel(packed, 16),
        g=_decode_channel(packed, 8),
        b=_decode_channel(packed, 0),
    )