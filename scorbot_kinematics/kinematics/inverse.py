"""
Closed-form inverse kinematics: end-effector pose (XYZPR) to joint angles.

The base angle points the arm at the target, the target is projected into
the shoulder-elbow plane, the wrist centre is found by backing off along
the requested pitch, and the shoulder-elbow triangle is solved with the law
of cosines. This yields an elbow-up and an elbow-down candidate, each of
which is validated by forward kinematics.

Only the "standard" base angle is solved; the reach-back configuration
(base rotated by pi with the arm folded over the base axis) is not.

Functions:
    candidate_joints: Unvalidated closed-form candidates per branch.
    inverse_kinematics: Validated solution(s) for a solution request.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Tuple

import numpy as np

from scorbot_kinematics.kinematics.results import (
    AllSolutions,
    InverseResult,
    SingleSolution,
    SolutionBranch,
    SolutionRequest,
    resolve_request,
)
from scorbot_kinematics.kinematics.validation import check_candidate
from scorbot_kinematics.robots.configs import KinematicsConfig
from scorbot_kinematics.robots.dh_parameters import DHParameters
from scorbot_kinematics.utils.helpers import as_vector5, clamped_acos, wrap_angle_to_pi


# ---------------------------------------------------------------------------
# Geometric steps
# ---------------------------------------------------------------------------


def _base_angle(x: float, y: float, lateral: float) -> Tuple[float, float]:
    """Solve the base joint and the in-plane radial distance.

    Args:
        x: Target x.
        y: Target y.
        lateral: Signed offset of the tool out of the arm plane.

    Returns:
        Tuple ``(theta1, radial)``.
    """
    planar = math.hypot(x, y)
    if lateral == 0.0:
        return math.atan2(y, x), planar
    # radial**2 = planar**2 - offset**2, factored so it cannot overflow
    offset = abs(lateral)
    radial = math.sqrt(max((planar - offset) * (planar + offset), 0.0))
    return math.atan2(y, x) - math.atan2(lateral, radial), radial


def _wrist_centre(
    radial: float, z: float, pitch: float, roll: float, dh: DHParameters
) -> Tuple[float, float]:
    """Planar coordinates of the wrist pitch axis relative to the shoulder.

    Args:
        radial: Horizontal distance of the tool from the base axis.
        z: Target height.
        pitch: Requested pitch.
        roll: Requested roll.
        dh: Link table.

    Returns:
        Tuple ``(x_b, y_b)``.
    """
    d, a = dh.d, dh.a
    normal = a[3] + a[4] * math.cos(roll)
    x_t = radial - a[0]
    y_t = z - d[0]
    x_b = x_t - d[4] * math.cos(pitch) + normal * math.sin(pitch)
    y_b = y_t - d[4] * math.sin(pitch) - normal * math.cos(pitch)
    return x_b, y_b


def _triangle_angles(m: float, a2: float, a3: float) -> Tuple[float, float]:
    """Interior angles of the shoulder-elbow triangle.

    Args:
        m: Shoulder to wrist distance.
        a2: Upper arm length.
        a3: Forearm length.

    Returns:
        Tuple ``(beta, gamma)``: angle at the shoulder and at the elbow.
    """
    if m == 0.0:
        beta = clamped_acos(math.inf if a2 >= a3 else -math.inf)
    else:
        beta = clamped_acos((a2 * a2 + m * m - a3 * a3) / (2.0 * a2 * m))
    gamma = clamped_acos((a2 * a2 + a3 * a3 - m * m) / (2.0 * a2 * a3))
    return beta, gamma


def _candidate_joints(target: np.ndarray, dh: DHParameters) -> Dict[SolutionBranch, np.ndarray]:
    """Closed-form candidates of an already validated XYZPR target."""
    x, y, z, pitch, roll = target
    lateral = -dh.lateral_offset - dh.a[4] * math.sin(roll)
    theta1, radial = _base_angle(x, y, lateral)
    x_b, y_b = _wrist_centre(radial, z, pitch, roll, dh)
    m = math.hypot(x_b, y_b)
    alpha = math.atan2(y_b, x_b)
    beta, gamma = _triangle_angles(m, dh.a[1], dh.a[2])

    shoulder_down = wrap_angle_to_pi(alpha - beta)
    shoulder_up = wrap_angle_to_pi(alpha + beta)
    elbow_down = math.pi - gamma
    elbow_up = gamma - math.pi
    return {
        SolutionBranch.ELBOW_UP: np.array(
            [theta1, shoulder_up, elbow_up, pitch - shoulder_up - elbow_up, roll]
        ),
        SolutionBranch.ELBOW_DOWN: np.array(
            [theta1, shoulder_down, elbow_down, pitch - shoulder_down - elbow_down, roll]
        ),
    }


def candidate_joints(pose: Any, dh: DHParameters) -> Dict[SolutionBranch, np.ndarray]:
    """Return the closed-form joint vector of each branch, unvalidated.

    Args:
        pose: XYZPR target.
        dh: Link table.

    Returns:
        Mapping of branch to BSEPR candidate.

    Raises:
        InvalidArgumentError: If *pose* is not a finite 5-vector.
    """
    return _candidate_joints(as_vector5(pose, "pose"), dh)


def inverse_kinematics(
    pose: Any,
    config: KinematicsConfig,
    request: SolutionRequest | str | None = SolutionRequest.ELBOW_UP_ONLY,
) -> InverseResult:
    """Solve and validate the joint vector(s) reaching *pose*.

    Every branch is validated independently; an unreachable branch yields
    ``None`` joints without affecting the other.

    Args:
        pose: XYZPR target (position in table units, pitch/roll in radians).
        config: Link table and tolerance policy.
        request: Branch selection; see :func:`resolve_request`.

    Returns:
        ``SingleSolution`` for single-branch requests, ``AllSolutions``
        (elbow-up, elbow-down) for ``ALL_BRANCHES``.

    Raises:
        InvalidArgumentError: If the pose or request is malformed.
    """
    resolved = resolve_request(request)
    target = as_vector5(pose, "pose")
    candidates = _candidate_joints(target, config.dh)
    outcomes = {
        branch: check_candidate(branch, target, candidates[branch], config)
        for branch in resolved.branches
    }
    if resolved is SolutionRequest.ALL_BRANCHES:
        return AllSolutions(
            elbow_up=outcomes[SolutionBranch.ELBOW_UP],
            elbow_down=outcomes[SolutionBranch.ELBOW_DOWN],
        )
    return SingleSolution(request=resolved, outcome=outcomes[resolved.branches[0]])
