from __future__ import annotations

import dataclasses

import pytest

from breakout.config import DEFAULT_CONFIG, FieldConfig


def test_default_constants() -> None:
    c = DEFAULT_CONFIG
    assert (c.field_width, c.field_height) == (380.0, 640.0)
    assert c.paddle_speed == 190.0
    assert c.paddle_width == 38.0
    assert c.block_width == 20.0
    assert c.ball_margin == 5.0
    assert c.block_gap_factor == 1.0


def test_derived_values() -> None:
    c = DEFAULT_CONFIG
    assert (c.half_width, c.half_height) == (190.0, 320.0)
    assert c.paddle_bounds_x == 171.0
    assert c.paddle_start == (0.0, -295.0)
    assert c.block_gap == (20.0, 10.0)


def test_config_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.field_width = 100.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"field_width": 0.0},
        {"block_height": -1.0},
        {"paddle_width": 400.0},
        {"block_gap_factor": -0.5},
    ],
)
def test_invalid_config_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        FieldConfig(**kwargs)
