"""Basic Chromakelvin usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromakelvin import (
    FormatType,
    convert,
    kelvin_to_rgb,
    kelvin_to_rgb_fast,
    np_kelvin_to_rgb,
    rgb_to_hex,
    rgb_to_kelvin,
)


def print_listing(converter, title: str) -> None:
    # Same layout as the published listings: Kelvin then RRGGBB.
    print(title)
    print("Kelvin RRGGBB")
    for kelvin in range(1000, 9001, 500):
        if kelvin == 6500:
            for around in (6499, 6500, 6501):
                print(f"{around:<4}   {rgb_to_hex(*converter(around))}")
        else:
            print(f"{kelvin:<4}   {rgb_to_hex(*converter(kelvin))}")


def demonstrate_forward() -> None:
    print_listing(kelvin_to_rgb, "Curve fit")
    print()
    print_listing(kelvin_to_rgb_fast, "Lookup tables")
    print()
    print("2700K as floats:", convert(2700, output_type=FormatType.FLOAT))


def demonstrate_inverse() -> None:
    for color in ((255, 255, 255), (255, 181, 109), (214, 226, 255)):
        print(f"{rgb_to_hex(*color)} -> {rgb_to_kelvin(*color)}K")


def demonstrate_arrays() -> None:
    sweep = np_kelvin_to_rgb(np.arange(2000, 10001, 2000))
    print("Sweep 2000K-10000K:\n", sweep)


if __name__ == "__main__":
    demonstrate_forward()
    print()
    demonstrate_inverse()
    print()
    demonstrate_arrays()
