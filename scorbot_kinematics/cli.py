"""
Command-line front end for the kinematics engine.

Usage examples::

    # Joint angles (radians) to end-effector pose
    scorbot-kinematics fk 0 0.5 -0.8 -0.4 0.2

    # Pose to both inverse-kinematic branches, angles in degrees
    scorbot-kinematics --degrees ik 300 100 400 -30 0 --policy all

    # Use the reference arm geometry
    scorbot-kinematics --robot reference ik 200 0 100 0 0
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from scorbot_kinematics.errors import KinematicsError
from scorbot_kinematics.kinematics.results import BranchOutcome, resolve_request
from scorbot_kinematics.robots.dh_parameters import available_robots
from scorbot_kinematics.robots.scorbot_arm import ScorbotKinematics
from scorbot_kinematics.utils.constants import (
    DEFAULT_ROBOT,
    JOINT_NAMES,
    LENGTH_UNITS,
    ORIENTATION_SLICE,
    POSE_NAMES,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Formatting
# ======================================================================


def _format_joints(joints: np.ndarray, degrees: bool) -> str:
    """Render a joint vector as ``name=value`` pairs.

    Args:
        joints: BSEPR vector in radians.
        degrees: Print angles in degrees instead of radians.

    Returns:
        Single-line string.
    """
    values = np.degrees(joints) if degrees else joints
    unit = "deg" if degrees else "rad"
    return ", ".join(f"{n}={v:.4f}" for n, v in zip(JOINT_NAMES, values)) + f" [{unit}]"


def _format_pose(pose: np.ndarray, degrees: bool) -> str:
    """Render an XYZPR pose as ``name=value`` pairs.

    Args:
        pose: XYZPR vector with angles in radians.
        degrees: Print pitch/roll in degrees instead of radians.

    Returns:
        Single-line string.
    """
    shown = pose.copy()
    if degrees:
        shown[ORIENTATION_SLICE] = np.degrees(shown[ORIENTATION_SLICE])
    unit = "deg" if degrees else "rad"
    return ", ".join(f"{n}={v:.4f}" for n, v in zip(POSE_NAMES, shown)) + (
        f" [{LENGTH_UNITS}, {unit}]"
    )


def _format_outcome(outcome: BranchOutcome, degrees: bool) -> str:
    """Render a branch outcome, marking unreachable branches."""
    label = f"{outcome.branch.value:>10}"
    if outcome.joints is None:
        return f"{label}: unreachable (residual {outcome.diagnostic.error:.3e})"
    return f"{label}: {_format_joints(outcome.joints, degrees)}"


# ======================================================================
# Command runners
# ======================================================================


def _run_fk(engine: ScorbotKinematics, args: argparse.Namespace) -> int:
    """Print the pose of the joint vector given on the command line.

    Args:
        engine: Kinematics engine for the selected robot.
        args: Parsed CLI arguments.

    Returns:
        Process exit code.
    """
    joints = np.radians(args.values) if args.degrees else np.asarray(args.values)
    pose = engine.forward(joints)
    print(_format_pose(pose, args.degrees))
    return 0


def _run_ik(engine: ScorbotKinematics, args: argparse.Namespace) -> int:
    """Print the inverse-kinematic branch(es) of the pose on the command line.

    Args:
        engine: Kinematics engine for the selected robot.
        args: Parsed CLI arguments.

    Returns:
        ``0`` if at least one requested branch is reachable, else ``1``.
    """
    pose = np.asarray(args.values, dtype=np.float64)
    if args.degrees:
        pose[ORIENTATION_SLICE] = np.radians(pose[ORIENTATION_SLICE])
    result = engine.inverse(pose, resolve_request(args.policy))
    for outcome in result.outcomes:
        print(_format_outcome(outcome, args.degrees))
    return 0 if any(o.valid for o in result.outcomes) else 1


# ======================================================================
# CLI
# ======================================================================


def _build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ``argparse.ArgumentParser``.
    """
    parser = argparse.ArgumentParser(
        prog="scorbot-kinematics",
        description="Forward and inverse kinematics of a 5-DOF ScorBot-style arm",
    )
    parser.add_argument("--robot", choices=available_robots(), default=DEFAULT_ROBOT)
    parser.add_argument(
        "--degrees", action="store_true", help="Read and print angles in degrees"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    fk = sub.add_parser("fk", help="Joint angles (BSEPR) to pose (XYZPR)")
    fk.add_argument("values", type=float, nargs=5, metavar="BSEPR")

    ik = sub.add_parser("ik", help="Pose (XYZPR) to joint angles (BSEPR)")
    ik.add_argument("values", type=float, nargs=5, metavar="XYZPR")
    ik.add_argument(
        "--policy",
        choices=["up", "down", "all"],
        default="up",
        help="Which elbow branch(es) to return",
    )
    return parser


_COMMAND_DISPATCH = {
    "fk": _run_fk,
    "ik": _run_ik,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    engine = ScorbotKinematics.for_robot(args.robot)
    logger.debug("Robot %s: d=%s a=%s", args.robot, engine.dh.d, engine.dh.a)
    try:
        return _COMMAND_DISPATCH[args.command](engine, args)
    except KinematicsError as exc:
        print(f"error: {exc}")
        return 2
