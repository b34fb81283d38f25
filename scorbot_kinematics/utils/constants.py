"""
Shared constants for the scorbot_kinematics package.

Holds the fixed Denavit-Hartenberg convention of the 5-DOF arm (joint
offsets and link twists), the built-in link tables, vector labels, and the
default tolerance policy used when validating inverse-kinematic solutions.
"""

from __future__ import annotations

import math
from typing import Tuple

# ---------------------------------------------------------------------------
# Vector layout
# ---------------------------------------------------------------------------
NUM_JOINTS: int = 5
JOINT_NAMES: Tuple[str, ...] = ("base", "shoulder", "elbow", "wrist_pitch", "wrist_roll")
POSE_NAMES: Tuple[str, ...] = ("x", "y", "z", "pitch", "roll")
ORIENTATION_SLICE: slice = slice(3, 5)

# ---------------------------------------------------------------------------
# Fixed DH convention: Rz(theta + offset) Tz(d) Tx(a) Rx(alpha)
# ---------------------------------------------------------------------------
DH_JOINT_OFFSETS: Tuple[float, ...] = (0.0, 0.0, 0.0, math.pi / 2, 0.0)
DH_LINK_TWISTS: Tuple[float, ...] = (math.pi / 2, 0.0, 0.0, math.pi / 2, 0.0)

# ---------------------------------------------------------------------------
# Link tables (millimetres)
# ---------------------------------------------------------------------------
LENGTH_UNITS: str = "mm"

# ScorBot-ER 4U
SCORBOT_LINK_OFFSETS: Tuple[float, ...] = (349.0, 0.0, 0.0, 0.0, 145.0)
SCORBOT_LINK_LENGTHS: Tuple[float, ...] = (16.0, 221.0, 221.0, 0.0, 0.0)

# Small reference geometry with a tool offset on the last link
REFERENCE_LINK_OFFSETS: Tuple[float, ...] = (100.0, 0.0, 0.0, 0.0, 30.0)
REFERENCE_LINK_LENGTHS: Tuple[float, ...] = (100.0, 150.0, 150.0, 0.0, 50.0)

DEFAULT_ROBOT: str = "scorbot"

# ---------------------------------------------------------------------------
# Solution check tolerances
# ---------------------------------------------------------------------------
# Multiplier applied to the floating-point spacing of the compared poses.
DEFAULT_ZERO_SCALE: float = 10.0
# Angle pairs further apart than this after wrapping to [0, 2*pi) are
# re-wrapped to (-pi, pi] before differencing.
DEFAULT_WRAP_THRESHOLD: float = 3 * math.pi / 4
