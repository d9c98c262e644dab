from typing import Iterable, Optional, Tuple
import logging
import math
import numpy as np

from .config import GeometryConfig, DEFAULT_CONFIG
from .motion import Arc, Curvature, MotionModel, Straight, curvature_to_radius
from .types import ArcReport, Point2D, Pose2D, wrap_angle

log = logging.getLogger(__name__)

def _snap(value: float, epsilon: float) -> float:
    # suppress floating point noise around zero
    return 0.0 if abs(value) < epsilon else value

def _normalize_arc(dlead: float, radius: Optional[float], cfg: GeometryConfig) -> Tuple[float, float]:
    """
    Applies the arc model's input rules: saturate dlead, default a near-zero radius,
    and keep only the magnitude of the radius.

    Args:
        dlead (float): Signed arc length.
        radius (Optional[float]): Requested radius, None for the default.
        cfg (GeometryConfig): Numerical settings.

    Returns:
        Tuple[float, float]: The clamped dlead and the positive radius.
    """
    clamped = max(-cfg.max_lead, min(cfg.max_lead, dlead))
    if clamped != dlead:
        log.debug("dlead %g saturated to %g", dlead, clamped)
    if radius is None:
        radius = cfg.default_radius
    elif abs(radius) < cfg.epsilon:
        log.debug("radius %g is degenerate, using default %g", radius, cfg.default_radius)
        radius = cfg.default_radius
    return clamped, abs(radius)

def compute_arc_point(x: float, y: float, theta: float, dlead: float,
                      radius: Optional[float] = None,
                      cfg: GeometryConfig = DEFAULT_CONFIG) -> Point2D:
    """
    Calculates the point reached by travelling dlead along a boomerang arc.

    The arc starts at (x, y) tangent to the heading theta and turns left for a
    positive dlead. A lead shorter than cfg.min_lead returns the start position.

    Args:
        x (float): Current x position.
        y (float): Current y position.
        theta (float): Current heading in radians.
        dlead (float): Signed arc length to travel, saturated to ±cfg.max_lead.
        radius (Optional[float], optional): Curvature radius. Defaults to cfg.default_radius.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        Point2D: Target coordinates in the world frame.
    """
    if abs(dlead) < cfg.min_lead:
        return Point2D(float(x), float(y))
    dlead, radius = _normalize_arc(dlead, radius, cfg)

    phi = dlead / radius
    # arc from the origin tangent to +X
    lx = radius * math.sin(phi)
    ly = radius * (1.0 - math.cos(phi))

    c, s = math.cos(theta), math.sin(theta)
    wx = x + lx*c - ly*s
    wy = y + lx*s + ly*c
    return Point2D(_snap(wx, cfg.epsilon), _snap(wy, cfg.epsilon))

def compute_arc_point_from_curvature(x: float, y: float, theta: float, dlead: float,
                                     curvature: float,
                                     cfg: GeometryConfig = DEFAULT_CONFIG) -> Point2D:
    """
    Calculates the boomerang arc point using a signed curvature instead of a radius.

    A near-zero curvature is straight-line travel. A negative curvature flips the
    direction of travel along the left-turning arc.

    Args:
        x (float): Current x position.
        y (float): Current y position.
        theta (float): Current heading in radians.
        dlead (float): Signed arc length to travel.
        curvature (float): Path curvature (1/radius), positive turns left.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        Point2D: Target coordinates in the world frame.
    """
    if abs(curvature) < cfg.epsilon:
        log.debug("curvature %g is degenerate, travelling straight", curvature)
        return Point2D(x + dlead*math.cos(theta), y + dlead*math.sin(theta))
    radius = curvature_to_radius(abs(curvature))
    if curvature < 0.0:
        dlead = -dlead
    return compute_arc_point(x, y, theta, dlead, radius, cfg)

def project_straight(x: float, y: float, theta: float, distance: float) -> Point2D:
    """
    Projects a point along the heading. No clamping or snapping is applied.

    Args:
        x (float): Current x position.
        y (float): Current y position.
        theta (float): Current heading in radians.
        distance (float): Signed distance, negative travels backwards.

    Returns:
        Point2D: The projected point.
    """
    return Point2D(x + distance*math.cos(theta), y + distance*math.sin(theta))

def target_point(pose: Pose2D, distance: float, model: MotionModel,
                 cfg: GeometryConfig = DEFAULT_CONFIG) -> Point2D:
    """
    Calculates the target point for a pose under the given motion model.

    Args:
        pose (Pose2D): Current pose.
        distance (float): Signed travel distance or arc length.
        model (MotionModel): Straight, Arc or Curvature.
        cfg (GeometryConfig, optional): Numerical settings for the arc models. Defaults to DEFAULT_CONFIG.

    Returns:
        Point2D: Target coordinates in the world frame.
    """
    if isinstance(model, Straight):
        return project_straight(pose.x, pose.y, pose.theta, distance)
    if isinstance(model, Arc):
        return compute_arc_point(pose.x, pose.y, pose.theta, distance, model.radius, cfg)
    if isinstance(model, Curvature):
        return compute_arc_point_from_curvature(pose.x, pose.y, pose.theta, distance, model.curvature, cfg)
    raise TypeError(f"unknown motion model: {model!r}")

def arc_report(pose: Pose2D, dlead: float, radius: Optional[float] = None,
               cfg: GeometryConfig = DEFAULT_CONFIG) -> ArcReport:
    """
    Calculates a boomerang arc point together with its display values.

    Args:
        pose (Pose2D): Current pose.
        dlead (float): Signed arc length to travel.
        radius (Optional[float], optional): Curvature radius. Defaults to cfg.default_radius.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        ArcReport: Target point, normalized inputs, arc angle, chord length, bearing and heading.
    """
    target = compute_arc_point(pose.x, pose.y, pose.theta, dlead, radius, cfg)
    used_dlead, used_radius = _normalize_arc(dlead, radius, cfg)
    if abs(dlead) < cfg.min_lead:
        used_dlead = 0.0
    phi = used_dlead / used_radius
    return _report(pose, target, used_radius, used_dlead, phi)

def curvature_report(pose: Pose2D, dlead: float, curvature: float,
                     cfg: GeometryConfig = DEFAULT_CONFIG) -> ArcReport:
    """
    Same as arc_report, for a signed curvature.

    The reported dlead is the one travelled along the left-turning arc, so it is
    negated for a negative curvature. A degenerate curvature reports an infinite
    radius and no arc angle.
    """
    if abs(curvature) < cfg.epsilon:
        target = compute_arc_point_from_curvature(pose.x, pose.y, pose.theta, dlead, curvature, cfg)
        return _report(pose, target, math.inf, dlead, 0.0)
    signed = -dlead if curvature < 0.0 else dlead
    return arc_report(pose, signed, curvature_to_radius(abs(curvature)), cfg)

def _report(pose: Pose2D, target: Point2D, radius: float, dlead: float, phi: float) -> ArcReport:
    start = pose.position
    dx, dy = target.x - start.x, target.y - start.y
    return ArcReport(
        start=start,
        target=target,
        radius=radius,
        dlead=dlead,
        arc_angle_deg=math.degrees(phi),
        chord_length=start.distance_to(target),
        bearing_deg=math.degrees(math.atan2(dy, dx)),
        heading_deg=math.degrees(wrap_angle(pose.theta + phi)),
    )

def sweep_arc_points(pose: Pose2D, dleads: Iterable[float], radius: Optional[float] = None,
                     cfg: GeometryConfig = DEFAULT_CONFIG) -> np.ndarray:
    """
    Evaluates compute_arc_point for several lead distances.

    Args:
        pose (Pose2D): Current pose.
        dleads (Iterable[float]): Lead distances to evaluate.
        radius (Optional[float], optional): Curvature radius. Defaults to cfg.default_radius.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        np.ndarray: Array of shape (N, 2) with one target point per row.
    """
    leads = np.asarray(list(dleads), dtype=float).ravel()
    out = np.empty((leads.size, 2))
    for i, d in enumerate(leads):
        out[i] = tuple(compute_arc_point(pose.x, pose.y, pose.theta, float(d), radius, cfg))
    return out
