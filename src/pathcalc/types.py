from dataclasses import dataclass, asdict
from typing import Iterator
import math

def wrap_angle(rad: float) -> float:
    """
    Normalizes an angle to the range [-π, π].

    Args:
        rad (float): Angle in radians.

    Returns:
        float: Normalized angle in radians.
    """
    while rad >  math.pi: rad -= 2.0*math.pi
    while rad < -math.pi: rad += 2.0*math.pi
    return rad

def degrees_to_radians(degrees: float) -> float:
    """Converts an angle in degrees to radians."""
    return degrees * math.pi / 180.0

@dataclass
class Pose2D:
    """
    Represents a 2D pose with position and heading.

    Attributes:
        x (float): X-coordinate in the world frame.
        y (float): Y-coordinate in the world frame.
        theta (float): Heading in radians, measured from +X, counterclockwise positive.
    """
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0  # radians

    @classmethod
    def from_degrees(cls, x: float, y: float, theta_deg: float) -> "Pose2D":
        """
        Creates a pose from a heading given in degrees.

        Args:
            x (float): X-coordinate.
            y (float): Y-coordinate.
            theta_deg (float): Heading in degrees.

        Returns:
            Pose2D: The pose with its heading converted to radians.
        """
        return cls(float(x), float(y), degrees_to_radians(float(theta_deg)))

    @property
    def position(self) -> "Point2D":
        return Point2D(self.x, self.y)

@dataclass(frozen=True)
class Point2D:
    """
    Represents a computed target location.

    Attributes:
        x (float): X-coordinate in the world frame.
        y (float): Y-coordinate in the world frame.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def distance_to(self, other: "Point2D") -> float:
        """
        Calculates the Euclidean distance to another point.

        Args:
            other (Point2D): The other point.

        Returns:
            float: Distance between the two points.
        """
        return math.hypot(other.x - self.x, other.y - self.y)

@dataclass
class ArcReport:
    """
    Represents the result of a boomerang arc calculation along with its display values.

    Attributes:
        start (Point2D): Position the arc starts from.
        target (Point2D): Computed target point.
        radius (float): Radius actually used, after normalization.
        dlead (float): Arc length actually travelled, after clamping.
        arc_angle_deg (float): Arc angle swept in degrees.
        chord_length (float): Straight-line distance from start to target.
        bearing_deg (float): Bearing from start to target in degrees.
        heading_deg (float): Heading at the target along the arc, wrapped to [-180, 180].
    """
    start: Point2D
    target: Point2D
    radius: float
    dlead: float
    arc_angle_deg: float
    chord_length: float
    bearing_deg: float
    heading_deg: float

    def to_dict(self) -> dict:
        """
        Converts the report to a dictionary representation.

        Returns:
            dict: A dictionary containing the report values.
        """
        return asdict(self)
