"""Motion models a target point can be computed with.

A model is one of ``Straight``, ``Arc`` or ``Curvature``. ``Arc`` and
``Curvature`` describe the same circular path, once by radius and once by
signed curvature (positive turns left).
"""
from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class Straight:
    """Straight-line ("collinear") travel along the current heading."""

@dataclass(frozen=True)
class Arc:
    """
    Boomerang arc travel with a given radius.

    Attributes:
        radius (Optional[float]): Curvature radius; None selects the configured default.
    """
    radius: Optional[float] = None

@dataclass(frozen=True)
class Curvature:
    """
    Boomerang arc travel with a signed curvature (1/radius, positive turns left).

    Attributes:
        curvature (float): Signed path curvature.
    """
    curvature: float = 0.0

MotionModel = Union[Straight, Arc, Curvature]

def radius_to_curvature(radius: float) -> float:
    """
    Converts a radius to curvature.

    Args:
        radius (float): Curvature radius, non-zero.

    Returns:
        float: Curvature (1/radius).
    """
    if radius == 0.0:
        raise ValueError("radius must be non-zero")
    return 1.0 / radius

def curvature_to_radius(curvature: float) -> float:
    """
    Converts a curvature to a radius. The sign of the curvature is kept.

    Args:
        curvature (float): Curvature, non-zero.

    Returns:
        float: Radius (1/curvature).
    """
    if curvature == 0.0:
        raise ValueError("curvature must be non-zero")
    return 1.0 / curvature
