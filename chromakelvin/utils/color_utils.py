"""Helpers for the packed 0xRRGGBB and hex RRGGBB notations of 8-bit colors."""

import string
from typing import Sequence

from ..types.color_types import RGBTuple


def _check_channels(rgb: Sequence[int]) -> None:
    if len(rgb) != 3:
        raise ValueError(f"Expected 3 channels, got {len(rgb)}")
    for value in rgb:
        if not 0 <= value <= 255:
            raise ValueError(f"Channel value {value} outside [0, 255]")


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a single 0xRRGGBB integer."""
    _check_channels((r, g, b))
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(value: int) -> RGBTuple:
    """Split a 0xRRGGBB integer into its three channels."""
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"Packed color {value:#x} outside [0, 0xFFFFFF]")
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format a color as upper-case RRGGBB, e.g. ``FF8C00``."""
    return f"{pack_rgb(r, g, b):06X}"


def hex_to_rgb(text: str) -> RGBTuple:
    """Parse RRGGBB, with or without a leading ``#``."""
    digits = text[1:] if text.startswith("#") else text
    if len(digits) != 6 or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {text!r}")
    return unpack_rgb(int(digits, 16))


def channel_delta(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest absolute difference between matching channels of two colors."""
    _check_channels(a)
    _check_channels(b)
    return max(abs(int(x) - int(y)) for x, y in zip(a, b))
