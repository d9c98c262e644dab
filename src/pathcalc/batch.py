# pathcalc/batch.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import csv, json, logging

from .config import GeometryConfig, DEFAULT_CONFIG
from .geometry import target_point
from .motion import Arc, Curvature, MotionModel, Straight
from .types import Pose2D

log = logging.getLogger(__name__)

MODES = ("straight", "arc", "curvature")

@dataclass
class Query:
    """
    Represents one target point calculation read from a batch file.

    Attributes:
        x (float): Current x position.
        y (float): Current y position.
        theta_deg (float): Current heading in degrees.
        distance (float): Signed travel distance or arc length.
        mode (str): One of "straight", "arc" or "curvature".
        radius (Optional[float]): Radius for the arc mode, None for the default.
        curvature (Optional[float]): Curvature for the curvature mode.
        id (Optional[str]): Identifier for the query.
    """
    x: float
    y: float
    theta_deg: float
    distance: float
    mode: str = "straight"
    radius: Optional[float] = None
    curvature: Optional[float] = None
    id: Optional[str] = None

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValueError(f"query {'?' if self.id is None else self.id}: unknown mode {self.mode!r}, expected one of {MODES}")
        if self.mode == "curvature" and self.curvature is None:
            raise ValueError(f"query {'?' if self.id is None else self.id}: curvature mode needs a curvature")

    @property
    def pose(self) -> Pose2D:
        return Pose2D.from_degrees(self.x, self.y, self.theta_deg)

    def model(self, cfg: GeometryConfig = DEFAULT_CONFIG) -> MotionModel:
        """
        Builds the motion model for this query. A non-positive radius is replaced
        by the default radius with a warning.

        Args:
            cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

        Returns:
            MotionModel: The motion model to evaluate the query with.
        """
        if self.mode == "straight":
            return Straight()
        if self.mode == "curvature":
            return Curvature(self.curvature)
        radius = self.radius
        if radius is not None and radius <= 0.0:
            log.warning("query %s: radius %g must be positive, using default %g",
                        self.id, radius, cfg.default_radius)
            radius = cfg.default_radius
        return Arc(radius)

def _number(row: dict, key: str, where: str, required: bool = False) -> Optional[float]:
    value = row.get(key)
    if value is None or value == "":
        if required:
            raise ValueError(f"{where}: missing field {key!r}")
        return None
    if isinstance(value, bool):
        raise ValueError(f"{where}: field {key!r} is not a number: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where}: field {key!r} is not a number: {value!r}") from e

def _query(row: dict, i: int) -> Query:
    qid = row.get("id")
    if qid is None or qid == "":
        qid = f"q{i:03d}"
    where = f"query {qid}"
    return Query(
        x=_number(row, "x", where, required=True),
        y=_number(row, "y", where, required=True),
        theta_deg=_number(row, "theta_deg", where, required=True),
        distance=_number(row, "distance", where, required=True),
        mode=str(row.get("mode") or "straight").strip().lower(),
        radius=_number(row, "radius", where),
        curvature=_number(row, "curvature", where),
        id=qid,
    )

def load_csv(filepath: str) -> List[Query]:
    """
    Reads queries from a CSV file with a header row. Lines starting with "#" are skipped.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        List[Query]: The queries in file order.
    """
    with open(filepath, "r", newline="") as f:
        reader = csv.DictReader(filter(lambda line: not line.startswith("#"), f))
        queries = [_query(row, i) for i, row in enumerate(reader)]
    log.info("loaded %d queries from %s", len(queries), filepath)
    return queries

def load_json(filepath: str) -> List[Query]:
    """
    Reads queries from a JSON file of the form {"queries": [{...}, ...]}.

    Args:
        filepath (str): Path to the JSON file.

    Returns:
        List[Query]: The queries in file order.
    """
    with open(filepath, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath}: invalid JSON: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("queries"), list):
        raise ValueError(f"{filepath}: expected an object with a 'queries' list")
    for i, q in enumerate(data["queries"]):
        if not isinstance(q, dict):
            raise ValueError(f"{filepath}: query {i} is not an object")
    queries = [_query(q, i) for i, q in enumerate(data["queries"])]
    log.info("loaded %d queries from %s", len(queries), filepath)
    return queries

def evaluate(queries: List[Query], cfg: GeometryConfig = DEFAULT_CONFIG) -> List[dict]:
    """
    Calculates the target point of every query.

    Args:
        queries (List[Query]): Queries to evaluate.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        List[dict]: One row per query with its id, mode and target x/y.
    """
    rows = []
    for q in queries:
        p = target_point(q.pose, q.distance, q.model(cfg), cfg)
        rows.append({"id": q.id, "mode": q.mode, "x": p.x, "y": p.y})
    return rows
