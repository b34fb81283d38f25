"""
Task-space / joint-space converters for the built-in robots.

Thin functional wrappers around :class:`ScorbotKinematics` for callers that
just want to convert a vector for a named arm. Engines are cached per
robot name; they are immutable, so sharing them is safe.

Functions:
    bsepr_to_xyzpr: Joint vector to end-effector pose.
    xyzpr_to_bsepr: End-effector pose to joint solution(s).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import numpy as np

from scorbot_kinematics.kinematics.results import InverseResult, SolutionRequest
from scorbot_kinematics.robots.scorbot_arm import ScorbotKinematics
from scorbot_kinematics.utils.constants import DEFAULT_ROBOT


@lru_cache(maxsize=None)
def _engine_for(robot: str) -> ScorbotKinematics:
    return ScorbotKinematics.for_robot(robot)


def bsepr_to_xyzpr(joints: Any, robot: str = DEFAULT_ROBOT) -> np.ndarray:
    """Convert BSEPR joint angles to the XYZPR end-effector pose.

    Args:
        joints: Five joint angles in radians.
        robot: Built-in robot name.

    Returns:
        Array ``[x, y, z, pitch, roll]``.
    """
    return _engine_for(robot).forward(joints)


def xyzpr_to_bsepr(
    pose: Any,
    request: SolutionRequest | str | None = SolutionRequest.ELBOW_UP_ONLY,
    robot: str = DEFAULT_ROBOT,
) -> InverseResult:
    """Convert an XYZPR pose to BSEPR joint solution(s).

    Args:
        pose: Target ``[x, y, z, pitch, roll]``.
        request: ``SolutionRequest`` or a name such as ``'AllSolutions'``.
        robot: Built-in robot name.

    Returns:
        ``SingleSolution`` or ``AllSolutions``.
    """
    return _engine_for(robot).inverse(pose, request)
