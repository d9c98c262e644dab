#!/usr/bin/env python3
"""Console front end: the interactive menu and one-shot sub-commands."""
from typing import Callable, List, Optional
import argparse, csv, logging, math, sys
import numpy as np

from .batch import evaluate, load_csv, load_json
from .config import DEFAULT_CONFIG, GeometryConfig
from .motion import radius_to_curvature
from .geometry import arc_report, curvature_report, project_straight, sweep_arc_points
from .types import ArcReport, Point2D, Pose2D

log = logging.getLogger(__name__)

RULE = "============================="
MENU_TITLE = "Main Screen"

Reader = Callable[[str], str]
Writer = Callable[[str], None]

def clear_screen(write: Writer = print):
    # ANSI clear only when attached to a terminal
    if sys.stdout.isatty():
        write("\033[2J\033[H")

def display_screen(title: str, write: Writer = print):
    clear_screen(write)
    write(RULE)
    write(f"       {title}       ")
    write(RULE)
    write("1. Collinear calc")
    write("2. Boomerang curve calc")
    write("3. Exit")
    write(RULE)

def read_float(prompt: str, read: Reader = input, write: Writer = print) -> float:
    """
    Prompts until the user enters a number.

    Args:
        prompt (str): Prompt to show.
        read (Reader, optional): Input function. Defaults to input.
        write (Writer, optional): Output function. Defaults to print.

    Returns:
        float: The number entered.
    """
    while True:
        text = read(prompt)
        try:
            return float(text)
        except ValueError:
            write(f"Not a number: {text!r}. Please try again.")

def read_radius(read: Reader = input, write: Writer = print,
                cfg: GeometryConfig = DEFAULT_CONFIG) -> float:
    """Prompts for a radius. A non-positive radius is replaced by the default with a warning."""
    radius = read_float("Please Enter Curve Radius: ", read, write)
    if radius <= 0.0:
        log.warning("radius %g must be positive, using default %g", radius, cfg.default_radius)
        write(f"Warning: radius must be positive. Using default radius {cfg.default_radius:g}.")
        radius = cfg.default_radius
    return radius

def format_point(p: Point2D, title: str = "New Points") -> List[str]:
    return [RULE, title, RULE, f"NEWX: {p.x:.6g}", f"NEWY: {p.y:.6g}", RULE]

def format_report(r: ArcReport) -> List[str]:
    lines = format_point(r.target, "Boomerang Target")
    lines[-1:-1] = [
        f"Arc angle swept (deg): {r.arc_angle_deg:.6g}",
        f"Chord length: {r.chord_length:.6g}",
        f"Bearing to target (deg): {r.bearing_deg:.6g}",
        f"Heading at target (deg): {r.heading_deg:.6g}",
        f"Curvature (1/radius): {0.0 if math.isinf(r.radius) else radius_to_curvature(r.radius):.6g}",
    ]
    return lines

def read_pose(read: Reader = input, write: Writer = print) -> Pose2D:
    x = read_float("Please Enter Current X: ", read, write)
    y = read_float("Please Enter Current Y: ", read, write)
    theta = read_float("Please Enter Current Theta (deg): ", read, write)
    return Pose2D.from_degrees(x, y, theta)

def collinear_calc(read: Reader = input, write: Writer = print) -> Point2D:
    """Asks for a pose and a distance and prints the straight-line target."""
    pose = read_pose(read, write)
    distance = read_float("How far travel? (Positive is straight, negative is backwards): ", read, write)
    p = project_straight(pose.x, pose.y, pose.theta, distance)
    for line in format_point(p):
        write(line)
    return p

def curve_calc(read: Reader = input, write: Writer = print,
               cfg: GeometryConfig = DEFAULT_CONFIG) -> ArcReport:
    """Asks for a pose, a lead distance and a radius or curvature, and prints the arc target."""
    pose = read_pose(read, write)
    dlead = read_float("Lookahead distance along curve: ", read, write)
    while True:
        kind = read("Enter (r)adius or (c)urvature? ").strip().lower()
        if kind in ("r", "radius", ""):
            r = arc_report(pose, dlead, read_radius(read, write, cfg), cfg)
            break
        if kind in ("c", "curvature"):
            k = read_float("Please Enter Curvature (1/radius, positive turns left): ", read, write)
            r = curvature_report(pose, dlead, k, cfg)
            break
        write("Invalid choice. Please try again.")
    for line in format_report(r):
        write(line)
    return r

def run_menu(read: Reader = input, write: Writer = print,
             cfg: GeometryConfig = DEFAULT_CONFIG) -> int:
    """
    Runs the main menu loop until the user exits.

    Args:
        read (Reader, optional): Input function. Defaults to input.
        write (Writer, optional): Output function. Defaults to print.
        cfg (GeometryConfig, optional): Numerical settings. Defaults to DEFAULT_CONFIG.

    Returns:
        int: Exit status.
    """
    while True:
        display_screen(MENU_TITLE, write)
        # end of input anywhere in an iteration ends the session
        try:
            choice = read("Select an option: ").strip()
            if choice == "1":
                collinear_calc(read, write)
            elif choice == "2":
                curve_calc(read, write, cfg)
            elif choice == "3":
                write("Exiting...")
                return 0
            else:
                write("Invalid choice. Please try again.")
            read("Press Enter to return to the main menu...")
        except EOFError:
            return 0

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pathcalc",
                                 description="Straight-line and boomerang arc target point calculator")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = ap.add_subparsers(dest="command")

    sub.add_parser("menu", help="interactive menu (default)")

    p = sub.add_parser("straight", help="project a point along the heading")
    for name in ("x", "y", "theta_deg", "distance"):
        p.add_argument(name, type=float)

    p = sub.add_parser("arc", help="point reached along a boomerang arc")
    for name in ("x", "y", "theta_deg", "dlead"):
        p.add_argument(name, type=float)
    shape = p.add_mutually_exclusive_group()
    shape.add_argument("--radius", type=float, default=None)
    shape.add_argument("--curvature", type=float, default=None)

    p = sub.add_parser("sweep", help="arc points for evenly spaced lead distances")
    for name in ("x", "y", "theta_deg"):
        p.add_argument(name, type=float)
    p.add_argument("--radius", type=float, default=None)
    p.add_argument("--start", type=float, default=0.0)
    p.add_argument("--stop", type=float, default=1.0)
    p.add_argument("--num", type=int, default=11)

    p = sub.add_parser("batch", help="evaluate queries from a CSV or JSON file")
    p.add_argument("file")
    p.add_argument("--format", choices=("csv", "json"), default=None,
                   help="file format, guessed from the extension by default")
    return ap

def _warn_radius(radius: Optional[float], cfg: GeometryConfig) -> Optional[float]:
    if radius is not None and radius <= 0.0:
        log.warning("radius %g must be positive, using default %g", radius, cfg.default_radius)
        return cfg.default_radius
    return radius

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s - %(levelname)s - %(message)s")
    cfg = DEFAULT_CONFIG

    if args.command in (None, "menu"):
        return run_menu(cfg=cfg)

    if args.command == "straight":
        pose = Pose2D.from_degrees(args.x, args.y, args.theta_deg)
        lines = format_point(project_straight(pose.x, pose.y, pose.theta, args.distance))
    elif args.command == "arc":
        pose = Pose2D.from_degrees(args.x, args.y, args.theta_deg)
        if args.curvature is not None:
            r = curvature_report(pose, args.dlead, args.curvature, cfg)
        else:
            r = arc_report(pose, args.dlead, _warn_radius(args.radius, cfg), cfg)
        lines = format_report(r)
    elif args.command == "sweep":
        pose = Pose2D.from_degrees(args.x, args.y, args.theta_deg)
        leads = np.linspace(args.start, args.stop, args.num)
        pts = sweep_arc_points(pose, leads, _warn_radius(args.radius, cfg), cfg)
        w = csv.writer(sys.stdout)
        w.writerow(["dlead", "x", "y"])
        for d, (px, py) in zip(leads, pts):
            w.writerow([f"{d:.6g}", f"{px:.6g}", f"{py:.6g}"])
        return 0
    else:
        fmt = args.format or ("json" if args.file.lower().endswith(".json") else "csv")
        try:
            queries = load_json(args.file) if fmt == "json" else load_csv(args.file)
            rows = evaluate(queries, cfg)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        w = csv.DictWriter(sys.stdout, fieldnames=["id", "mode", "x", "y"])
        w.writeheader()
        w.writerows(rows)
        return 0

    for line in lines:
        print(line)
    return 0

if __name__ == "__main__":
    sys.exit(main())
