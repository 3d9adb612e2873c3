#!/usr/bin/env python3
"""
Tests for the progress arithmetic in scale_math.

What matters:
1. divide_scale stays inside [0, 1] and is 0 before its sub-interval starts
2. scale_factor switches from 0 to 1 at the 0.51 threshold
3. update_value steps 1/lines * gap below the threshold and gap above it
"""

import math
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ball_line_updown.scale_math import (SCALE_GAP, divide_scale, inverse,
                                         max_scale, mirror_value, scale_factor,
                                         update_value)


def test_inverse():
    assert inverse(4) == 0.25
    assert inverse(1) == 1.0


def test_max_scale_floors_at_zero():
    assert max_scale(0.2, 1, 2) == 0.0
    assert math.isclose(max_scale(0.75, 1, 2), 0.25)


def test_divide_scale_within_unit_interval():
    """divide_scale(scale, i, n) is in [0, 1] for scale in [0, n]."""
    print("\n=== Test: divide_scale Range ===")

    for n in (1, 2, 3, 5):
        for step in range(0, 101):
            scale = n * step / 100
            for i in range(n):
                value = divide_scale(scale, i, n)
                assert 0.0 <= value <= 1.0 + 1e-12, f"divide_scale({scale}, {i}, {n}) = {value}"

    print("✓ divide_scale stays in [0, 1]")


def test_divide_scale_zero_before_interval():
    assert divide_scale(0.2, 1, 2) == 0.0
    assert divide_scale(0.3, 2, 3) == 0.0
    assert divide_scale(0.0, 0, 3) == 0.0


def test_divide_scale_splits_progress():
    assert divide_scale(0.75, 0, 2) == 1.0
    assert math.isclose(divide_scale(0.75, 1, 2), 0.5)
    assert divide_scale(1.0, 1, 2) == 1.0
    assert math.isclose(divide_scale(0.5, 1, 3), 0.5)


def test_scale_factor_threshold():
    assert scale_factor(0.0) == 0
    assert scale_factor(0.5) == 0
    assert scale_factor(0.51) == 1
    assert scale_factor(1.0) == 1


def test_mirror_value_blends_reciprocals():
    assert math.isclose(mirror_value(0.0, 3, 1), 1 / 3)
    assert math.isclose(mirror_value(0.3, 3, 1), 1 / 3)
    assert mirror_value(0.6, 3, 1) == 1.0


def test_update_value_step_sizes():
    print("\n=== Test: update_value Step Sizes ===")

    assert math.isclose(update_value(0.0, 1, 3, 1), SCALE_GAP / 3)
    assert math.isclose(update_value(0.8, 1, 3, 1), SCALE_GAP)
    assert math.isclose(update_value(0.8, -1, 3, 1), -SCALE_GAP)
    assert math.isclose(update_value(0.2, -1, 3, 1), -SCALE_GAP / 3)
    assert update_value(0.4, 0, 3, 1) == 0.0, "Idle direction must not move progress"

    print("✓ Steps are gap/lines below 0.51 and gap above")


def test_update_value_custom_gap():
    assert math.isclose(update_value(0.0, 1, 2, 1, gap=0.1), 0.05)
    assert math.isclose(update_value(0.3, 1, 2, 1, gap=0.1, div=0.25), 0.1)


if __name__ == "__main__":
    test_inverse()
    test_max_scale_floors_at_zero()
    test_divide_scale_within_unit_interval()
    test_divide_scale_zero_before_interval()
    test_divide_scale_splits_progress()
    test_scale_factor_threshold()
    test_mirror_value_blends_reciprocals()
    test_update_value_step_sizes()
    test_update_value_custom_gap()
    print("\nAll scale_math tests passed!")
