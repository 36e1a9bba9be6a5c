"""
Chromakelvin Temperature Conversions
====================================

This module converts black-body color temperatures (Kelvin) to approximate
8-bit RGB colors and back, with both scalar and vectorized (numpy)
implementations.

Features
--------
- Curve-fit forward conversion with a hard white point at 6500K
- Table-driven forward conversion using integer arithmetic only
- Inverse conversion by bisection over the curve fit
- Tanner Helland's original fit for comparison
- Multiple output formats: integer (0-255), float (0.0-1.0), percentage (0-100)

Conversion Functions
-------------------

Kelvin → RGB:
    kelvin_to_rgb(kelvin)
        Curve fit, accurate to about 18 per channel over 1000K-30000K
    kelvin_to_rgb_fast(kelvin)
        Lookup tables + linear interpolation, clamped to 1000K-29999K
    kelvin_to_rgb_helland(kelvin)
        Tanner Helland's power/log fit
    np_kelvin_to_rgb, np_kelvin_to_rgb_fast, np_kelvin_to_rgb_helland
        Vectorized forms returning uint8 arrays of shape (..., 3)

RGB → Kelvin:
    rgb_to_kelvin(r, g, b)
        Bisection on the blue/red ratio of kelvin_to_rgb
    np_rgb_to_kelvin(colors)
        Vectorized form returning uint16 temperatures

Quantization:
    float_to_uint8(x), float_to_uint16(x)
        ceil(x + 0.5) rounding with saturation
    np_float_to_uint8, np_float_to_uint16
        Vectorized forms

High-Level API
-------------
    convert(kelvin, method="curve", output_type=FormatType.INT)
    np_convert(kelvin, method="curve", output_type="int")
    to_kelvin(color, input_type=FormatType.INT)
    np_to_kelvin(colors, input_type="int")

Examples
--------
>>> from chromakelvin.conversions import kelvin_to_rgb, rgb_to_kelvin
>>> kelvin_to_rgb(2000)
(255, 140, 0)
>>> kelvin_to_rgb(6500)
(255, 255, 255)
>>> rgb_to_kelvin(214, 226, 255)
8939
"""

# Kelvin → RGB
from .curve_fit import kelvin_to_rgb, np_kelvin_to_rgb
from .lookup import kelvin_to_rgb_fast, np_kelvin_to_rgb_fast
from .helland import kelvin_to_rgb_helland, np_kelvin_to_rgb_helland

# RGB → Kelvin
from .inverse import rgb_to_kelvin, np_rgb_to_kelvin

# Quantization
from .quantize import float_to_uint8, float_to_uint16, np_float_to_uint8, np_float_to_uint16

# Domain
from .domain import (
    KelvinRangeWarning,
    MIN_KELVIN,
    MAX_KELVIN,
    FAST_MAX_KELVIN,
    WHITE_POINT_KELVIN,
    INVERSE_TOLERANCE,
)

# High-level API
from .wrapper import convert, np_convert, to_kelvin, np_to_kelvin

# Types and enums
from ..types.format_type import FormatType

__all__ = [
    # Kelvin → RGB
    'kelvin_to_rgb',
    'np_kelvin_to_rgb',
    'kelvin_to_rgb_fast',
    'np_kelvin_to_rgb_fast',
    'kelvin_to_rgb_helland',
    'np_kelvin_to_rgb_helland',

    # RGB → Kelvin
    'rgb_to_kelvin',
    'np_rgb_to_kelvin',

    # Quantization
    'float_to_uint8',
    'float_to_uint16',
    'np_float_to_uint8',
    'np_float_to_uint16',

    # Domain
    'KelvinRangeWarning',
    'MIN_KELVIN',
    'MAX_KELVIN',
    'FAST_MAX_KELVIN',
    'WHITE_POINT_KELVIN',
    'INVERSE_TOLERANCE',

    # High-level API
    'convert',
    'np_convert',
    'to_kelvin',
    'np_to_kelvin',

    # Types
    'FormatType',
]
