from __future__ import annotations
from typing import Callable, Literal, Tuple, Union
import numpy as np
from numpy import ndarray

RGBTuple = Tuple[int, int, int]
ScalarRGB = Tuple[Union[int, float], Union[int, float], Union[int, float]]
KelvinLike = Union[int, np.integer]
KelvinArray = Union[ndarray, list, tuple]
ConversionMethod = Literal["curve", "fast", "helland"]
KelvinConverter = Callable[[int], RGBTuple]
NpKelvinConverter = Callable[[KelvinArray], ndarray]


def colors_to_array(colors: Union[ScalarRGB, list, ndarray], dtype=np.float64) -> np.ndarray:
    """
    Convert a color or a batch of colors to a numpy array of shape (..., 3).

    Args:
        colors: A single (r, g, b) triple, a sequence of triples, or an ndarray

    Returns:
        numpy array whose last axis holds the three channels
    """
    arr = np.asarray(colors, dtype=dtype)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected colors with a trailing axis of 3 channels, got shape {arr.shape}")
    return arr
