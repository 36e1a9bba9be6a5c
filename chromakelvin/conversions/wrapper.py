import warnings

import numpy as np
from typing import Callable, Dict, Literal, Tuple, Union, cast

from ..types.format_type import FormatType, format_classes, max_channel
from ..types.color_types import (
    ConversionMethod,
    KelvinArray,
    KelvinConverter,
    KelvinLike,
    NpKelvinConverter,
    ScalarRGB,
    colors_to_array,
)

from .curve_fit import kelvin_to_rgb, np_kelvin_to_rgb
from .domain import KelvinRangeWarning
from .lookup import kelvin_to_rgb_fast, np_kelvin_to_rgb_fast
from .helland import kelvin_to_rgb_helland, np_kelvin_to_rgb_helland
from .inverse import rgb_to_kelvin, np_rgb_to_kelvin

KELVIN_TO_RGB: Dict[str, KelvinConverter] = {
    "curve": kelvin_to_rgb,
    "fast": kelvin_to_rgb_fast,
    "helland": kelvin_to_rgb_helland,
}

NP_KELVIN_TO_RGB: Dict[str, NpKelvinConverter] = {
    "curve": np_kelvin_to_rgb,
    "fast": np_kelvin_to_rgb_fast,
    "helland": np_kelvin_to_rgb_helland,
}


def _method(method: str) -> str:
    if not isinstance(method, str):
        raise ValueError(f"Unknown conversion method: {method!r}")
    key = method.lower()
    if key not in KELVIN_TO_RGB:
        raise ValueError(f"Unknown conversion method: {method}")
    return key


def _run_converter(converter: Callable, kelvin):
    """Call ``converter`` and re-issue its range warnings from the wrapper's caller."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", KelvinRangeWarning)
        result = converter(kelvin)
    for w in caught:
        if issubclass(w.category, KelvinRangeWarning):
            # _run_converter -> convert / np_convert -> user code
            warnings.warn(w.message, w.category, stacklevel=3)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
    return result


def normalize(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    """Bring channels given in ``fmt`` to 8-bit integers."""
    if fmt == FormatType.INT:
        return color.astype(np.int64)
    scaled = color / max_channel[fmt] * 255
    return np.round(scaled).astype(np.int64)


def scale(rgb: np.ndarray, fmt: FormatType) -> np.ndarray:
    """Express 8-bit channels in ``fmt``."""
    if fmt == FormatType.INT:
        return rgb
    return rgb / 255 * max_channel[fmt]


def convert(
    kelvin: KelvinLike,
    method: ConversionMethod = "curve",
    output_type: FormatType = FormatType.INT,
) -> Tuple:
    rgb = _run_converter(KELVIN_TO_RGB[_method(method)], kelvin)
    fmt = FormatType(output_type)
    if fmt == FormatType.INT:
        return rgb
    cast_value = format_classes[fmt]
    return tuple(cast_value(v) for v in scale(np.array(rgb, dtype=float), fmt))


def np_convert(
    kelvin: KelvinArray,
    method: ConversionMethod = "curve",
    output_type: Literal["int", "float", "percentage"] = "int",
) -> np.ndarray:
    rgb = _run_converter(NP_KELVIN_TO_RGB[_method(method)], kelvin)
    return scale(rgb, FormatType(output_type))


def to_kelvin(
    color: ScalarRGB,
    input_type: FormatType = FormatType.INT,
) -> int:
    fmt = FormatType(input_type)
    color_array = colors_to_array(color)
    if color_array.ndim != 1:
        raise ValueError("to_kelvin expects a single color; use np_to_kelvin for batches")
    if fmt == FormatType.INT:
        r, g, b = color
    else:
        r, g, b = (int(v) for v in normalize(color_array, fmt))
    return rgb_to_kelvin(r, g, b)


def np_to_kelvin(
    colors: Union[np.ndarray, list],
    input_type: Literal["int", "float", "percentage"] = "int",
) -> np.ndarray:
    fmt = FormatType(input_type)
    color_array = colors_to_array(colors)
    if fmt == FormatType.INT and np.any(color_array != np.round(color_array)):
        raise ValueError("Integer colors must not have fractional channels")
    return cast(np.ndarray, np_rgb_to_kelvin(normalize(color_array, fmt)))
