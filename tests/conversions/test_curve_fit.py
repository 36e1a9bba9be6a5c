from chromakelvin.conversions.curve_fit import kelvin_to_rgb, np_kelvin_to_rgb
from chromakelvin.conversions.domain import KelvinRangeWarning
from chromakelvin.utils.color_utils import rgb_to_hex
import numpy as np
import pytest
import warnings

# Published listing of the curve fit, RRGGBB
samples_kelvin_hex = {
    1000: "FF3B00",
    1500: "FF6C00",
    2000: "FF8C00",
    2500: "FFA348",
    3000: "FFB56D",
    3500: "FFC48B",
    4000: "FFD1A5",
    4500: "FFDCBA",
    5000: "FFE5CE",
    5500: "FFEDE0",
    6000: "FFF4F0",
    6499: "FFFBFF",
    6500: "FFFFFF",
    6501: "FFFCFF",
    7000: "F6F4FF",
    7500: "EBEEFF",
    8000: "E2E9FF",
    8500: "DBE5FF",
    9000: "D6E2FF",
}


def test_kelvin_to_rgb_listing():
    for kelvin, expected in samples_kelvin_hex.items():
        assert rgb_to_hex(*kelvin_to_rgb(kelvin)) == expected, kelvin


def test_white_point_is_exact():
    assert kelvin_to_rgb(6500) == (255, 255, 255)


def test_red_is_full_below_white_point():
    for kelvin in range(1000, 6500, 7):
        assert kelvin_to_rgb(kelvin)[0] == 255, kelvin


def test_blue_is_full_above_white_point():
    for kelvin in range(6501, 40001, 37):
        assert kelvin_to_rgb(kelvin)[2] == 255, kelvin
    assert kelvin_to_rgb(40000)[2] == 255


def test_blue_is_off_up_to_2000k():
    for kelvin in range(1000, 2001):
        assert kelvin_to_rgb(kelvin)[2] == 0, kelvin
    assert kelvin_to_rgb(2100)[2] > 0


def test_channels_are_8bit_ints():
    for kelvin in range(1000, 40001, 250):
        rgb = kelvin_to_rgb(kelvin)
        assert len(rgb) == 3
        for value in rgb:
            assert type(value) is int
            assert 0 <= value <= 255


def test_idempotent():
    for kelvin in (1000, 2345, 6500, 6501, 12345, 40000):
        assert kelvin_to_rgb(kelvin) == kelvin_to_rgb(kelvin)


def test_numpy_integer_input():
    assert kelvin_to_rgb(np.uint16(9000)) == (0xD6, 0xE2, 0xFF)


def test_in_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        kelvin_to_rgb(1000)
        kelvin_to_rgb(40000)


def test_below_range_is_clamped_with_warning():
    with pytest.warns(KelvinRangeWarning):
        assert kelvin_to_rgb(0) == kelvin_to_rgb(1000)
    with pytest.warns(KelvinRangeWarning):
        assert kelvin_to_rgb(-50) == (0xFF, 0x3B, 0x00)


def test_above_range_is_clamped_with_warning():
    with pytest.warns(KelvinRangeWarning):
        assert kelvin_to_rgb(65535) == kelvin_to_rgb(40000)
    assert kelvin_to_rgb(40000) == (157, 190, 255)


def test_rejects_non_integer_kelvin():
    for bad in (6500.0, "6500", None, True):
        with pytest.raises(TypeError):
            kelvin_to_rgb(bad)


def test_kelvin_to_rgb_numpy():
    kelvins = np.array(list(range(1000, 40001, 250)) + [6499, 6500, 6501])
    expected = np.array([kelvin_to_rgb(int(k)) for k in kelvins])
    result = np_kelvin_to_rgb(kelvins)
    assert result.dtype == np.uint8
    assert result.shape == (len(kelvins), 3)
    assert np.array_equal(result, expected)


def test_kelvin_to_rgb_numpy_keeps_shape():
    kelvins = np.array([[1000, 2000], [6500, 9000]])
    result = np_kelvin_to_rgb(kelvins)
    assert result.shape == (2, 2, 3)
    assert tuple(result[1, 0]) == (255, 255, 255)
    assert tuple(result[1, 1]) == (0xD6, 0xE2, 0xFF)


def test_kelvin_to_rgb_numpy_scalar_array():
    assert tuple(np_kelvin_to_rgb(np.array(6500))) == (255, 255, 255)
    assert tuple(np_kelvin_to_rgb(np.array(2000))) == (0xFF, 0x8C, 0x00)


def test_kelvin_to_rgb_numpy_clamps_with_one_warning():
    with pytest.warns(KelvinRangeWarning) as record:
        result = np_kelvin_to_rgb(np.array([0, 50000, 3000]))
    assert len(record) == 1
    assert tuple(result[0]) == kelvin_to_rgb(1000)
    assert tuple(result[1]) == kelvin_to_rgb(40000)


def test_kelvin_to_rgb_numpy_rejects_float_arrays():
    with pytest.raises(TypeError):
        np_kelvin_to_rgb(np.array([1000.0, 2000.0]))
