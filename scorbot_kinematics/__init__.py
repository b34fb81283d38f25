"""
ScorBot kinematics.

Closed-form forward and inverse kinematics for a 5-DOF serial arm described
by Denavit-Hartenberg link offsets and lengths (ScorBot-ER 4U by default).
Inverse solutions come in elbow-up and elbow-down branches, each validated
by a forward-kinematics round trip.

Modules:
    kinematics: Forward/inverse solvers, solution check, and result types.
    robots: DH link tables, engine configuration, and the kinematics engine.
    converters: Functional BSEPR <-> XYZPR converters for built-in robots.
    cli: Command-line front end.
    utils: Shared constants and helper utilities.
"""

from scorbot_kinematics.converters import bsepr_to_xyzpr, xyzpr_to_bsepr
from scorbot_kinematics.errors import (
    InvalidArgumentError,
    KinematicsError,
    UnreachablePoseError,
)
from scorbot_kinematics.kinematics.results import (
    AllSolutions,
    BranchOutcome,
    ResidualDiagnostic,
    SingleSolution,
    SolutionBranch,
    SolutionRequest,
)
from scorbot_kinematics.robots.configs import KinematicsConfig
from scorbot_kinematics.robots.dh_parameters import DHParameters
from scorbot_kinematics.robots.scorbot_arm import ScorbotKinematics

__version__ = "0.1.0"

__all__ = [
    "AllSolutions",
    "BranchOutcome",
    "DHParameters",
    "InvalidArgumentError",
    "KinematicsConfig",
    "KinematicsError",
    "ResidualDiagnostic",
    "ScorbotKinematics",
    "SingleSolution",
    "SolutionBranch",
    "SolutionRequest",
    "UnreachablePoseError",
    "bsepr_to_xyzpr",
    "xyzpr_to_bsepr",
]
