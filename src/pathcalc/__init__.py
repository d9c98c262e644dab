from .types import Pose2D, Point2D, ArcReport, degrees_to_radians
from .config import GeometryConfig, DEFAULT_CONFIG
from .motion import Straight, Arc, Curvature, MotionModel, radius_to_curvature, curvature_to_radius
from .geometry import (compute_arc_point, compute_arc_point_from_curvature, project_straight,
                       target_point, arc_report, curvature_report, sweep_arc_points)
from .batch import Query, load_csv, load_json, evaluate
__all__ = [
    "Pose2D","Point2D","ArcReport","degrees_to_radians",
    "GeometryConfig","DEFAULT_CONFIG",
    "Straight","Arc","Curvature","MotionModel","radius_to_curvature","curvature_to_radius",
    "compute_arc_point","compute_arc_point_from_curvature","project_straight",
    "target_point","arc_report","curvature_report","sweep_arc_points",
    "Query","load_csv","load_json","evaluate",
]
