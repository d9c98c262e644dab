"""Tests for numerical settings, point/pose types and motion model conversions."""

import dataclasses
import math
import pytest

from pathcalc import (
    DEFAULT_CONFIG,
    GeometryConfig,
    Point2D,
    Pose2D,
    curvature_to_radius,
    degrees_to_radians,
    radius_to_curvature,
)
from pathcalc.types import wrap_angle


def test_defaults():
    assert DEFAULT_CONFIG.epsilon == 1e-9
    assert DEFAULT_CONFIG.min_lead == 1e-6
    assert DEFAULT_CONFIG.max_lead == 1e6
    assert DEFAULT_CONFIG.default_radius == 1.0


@pytest.mark.parametrize("field", ["epsilon", "min_lead", "max_lead", "default_radius"])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_non_positive_settings_rejected(field, value):
    with pytest.raises(ValueError):
        GeometryConfig(**{field: value})


def test_min_lead_above_max_lead_rejected():
    with pytest.raises(ValueError):
        GeometryConfig(min_lead=2.0, max_lead=1.0)


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.epsilon = 1.0


def test_replace_returns_copy():
    cfg = DEFAULT_CONFIG.replace(default_radius=5.0)
    assert cfg.default_radius == 5.0
    assert cfg.epsilon == DEFAULT_CONFIG.epsilon
    assert DEFAULT_CONFIG.default_radius == 1.0


def test_radius_curvature_roundtrip():
    assert radius_to_curvature(4.0) == 0.25
    assert curvature_to_radius(-0.5) == -2.0
    with pytest.raises(ValueError):
        radius_to_curvature(0.0)
    with pytest.raises(ValueError):
        curvature_to_radius(0.0)


def test_degrees_to_radians():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert Pose2D.from_degrees(1, 2, 90).theta == pytest.approx(math.pi / 2)


def test_wrap_angle():
    assert wrap_angle(3 * math.pi) == pytest.approx(math.pi)
    assert wrap_angle(-math.pi / 2 - 2 * math.pi) == pytest.approx(-math.pi / 2)


def test_point_helpers():
    p = Point2D(3.0, 4.0)
    assert tuple(p) == (3.0, 4.0)
    assert Point2D(0.0, 0.0).distance_to(p) == 5.0
    assert Pose2D(3.0, 4.0, 1.0).position == p
