from chromakelvin.conversions.quantize import (
    float_to_uint8,
    float_to_uint16,
    np_float_to_uint8,
    np_float_to_uint16,
)
import math
import numpy as np

# value -> expected, ceil(x + 0.5) with saturation
samples_uint8 = {
    -5.0: 0,
    0.0: 0,
    0.1: 1,
    1.0: 2,
    1.5: 2,
    100.49: 101,
    100.5: 101,
    100.51: 102,
    253.4: 254,
    254.39: 255,
    254.4: 255,
    300.0: 255,
}

samples_uint16 = {
    -1.0: 0,
    0.0: 0,
    1000.0: 1001,
    6499.6: 6501,
    39999.7: 40001,
    65534.39: 65535,
    65534.4: 65535,
    1e9: 65535,
}


def test_float_to_uint8():
    for x, expected in samples_uint8.items():
        assert float_to_uint8(x) == expected, x


def test_float_to_uint16():
    for x, expected in samples_uint16.items():
        assert float_to_uint16(x) == expected, x


def test_non_finite_inputs_saturate():
    assert float_to_uint8(math.inf) == 255
    assert float_to_uint8(-math.inf) == 0
    assert float_to_uint8(math.nan) == 0
    assert float_to_uint16(math.inf) == 65535
    assert float_to_uint16(math.nan) == 0


def test_returns_plain_int():
    assert type(float_to_uint8(12.3)) is int
    assert type(float_to_uint16(1234.5)) is int


def test_float_to_uint8_numpy():
    values = np.array(list(samples_uint8.keys()) + [math.nan, math.inf, -math.inf])
    expected = np.array(list(samples_uint8.values()) + [0, 255, 0])
    result = np_float_to_uint8(values)
    assert result.dtype == np.uint8
    assert np.array_equal(result, expected)


def test_float_to_uint16_numpy():
    values = np.array(list(samples_uint16.keys()) + [math.nan])
    expected = np.array(list(samples_uint16.values()) + [0])
    result = np_float_to_uint16(values)
    assert result.dtype == np.uint16
    assert np.array_equal(result, expected)


def test_numpy_matches_scalar_on_a_sweep():
    values = np.linspace(-10.0, 270.0, 2801)
    expected = np.array([float_to_uint8(float(v)) for v in values])
    assert np.array_equal(np_float_to_uint8(values), expected)
