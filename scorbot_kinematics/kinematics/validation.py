"""
Round-trip check of inverse-kinematic candidates.

A candidate joint vector is pushed back through forward kinematics and the
recomputed pose is compared with the requested one. Pitch and roll are
wrapped before differencing so that angles equal modulo 2*pi compare as
equal, and the residual is judged against a "zero" derived from the
floating-point spacing of the poses themselves, so relative rather than
absolute error decides validity.

Functions:
    wrap_pose_angles: Wrap the pitch/roll of two poses for comparison.
    zero_threshold: Adaptive floating-point zero for two poses.
    pose_residual: Residual norm and zero threshold of a pose pair.
    check_candidate: Validate one branch candidate.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from scorbot_kinematics.kinematics.forward import forward_kinematics
from scorbot_kinematics.kinematics.results import (
    BranchOutcome,
    ResidualDiagnostic,
    SolutionBranch,
)
from scorbot_kinematics.robots.configs import KinematicsConfig
from scorbot_kinematics.utils.constants import (
    DEFAULT_WRAP_THRESHOLD,
    DEFAULT_ZERO_SCALE,
    ORIENTATION_SLICE,
)
from scorbot_kinematics.utils.helpers import as_vector5, wrap_to_2pi, wrap_to_pi

logger = logging.getLogger(__name__)


def wrap_pose_angles(
    pose_in: np.ndarray,
    pose_calc: np.ndarray,
    wrap_threshold: float = DEFAULT_WRAP_THRESHOLD,
) -> Tuple[np.ndarray, np.ndarray]:
    """Wrap the pitch and roll of two poses so they can be differenced.

    Both angles are first wrapped into [0, 2*pi). A pair that still differs
    by more than *wrap_threshold* straddles the 0/2*pi seam and is
    re-wrapped into (-pi, pi].

    Args:
        pose_in: Requested XYZPR pose.
        pose_calc: Recomputed XYZPR pose.
        wrap_threshold: Seam detection threshold in radians.

    Returns:
        Copies of both poses with wrapped orientation components.
    """
    wrapped_in = np.array(pose_in, dtype=np.float64)
    wrapped_calc = np.array(pose_calc, dtype=np.float64)
    wrapped_in[ORIENTATION_SLICE] = wrap_to_2pi(wrapped_in[ORIENTATION_SLICE])
    wrapped_calc[ORIENTATION_SLICE] = wrap_to_2pi(wrapped_calc[ORIENTATION_SLICE])
    for idx in range(ORIENTATION_SLICE.start, ORIENTATION_SLICE.stop):
        if abs(wrapped_in[idx] - wrapped_calc[idx]) > wrap_threshold:
            wrapped_in[idx] = wrap_to_pi(wrapped_in[idx])
            wrapped_calc[idx] = wrap_to_pi(wrapped_calc[idx])
    return wrapped_in, wrapped_calc


def zero_threshold(
    pose_in: np.ndarray,
    pose_calc: np.ndarray,
    zero_scale: float = DEFAULT_ZERO_SCALE,
) -> float:
    """Conservative floating-point zero for comparing two poses.

    Args:
        pose_in: First pose.
        pose_calc: Second pose.
        zero_scale: Multiplier on the larger spacing.

    Returns:
        ``zero_scale * max(spacing(|pose_in|), spacing(|pose_calc|))``.
    """
    spacing_in = np.spacing(math.hypot(*pose_in))
    spacing_calc = np.spacing(math.hypot(*pose_calc))
    return float(zero_scale * max(spacing_in, spacing_calc))


def pose_residual(
    pose_in,
    pose_calc,
    zero_scale: float = DEFAULT_ZERO_SCALE,
    wrap_threshold: float = DEFAULT_WRAP_THRESHOLD,
) -> Tuple[float, float]:
    """Return the wrapped residual norm and the zero threshold of two poses.

    Args:
        pose_in: Requested XYZPR pose.
        pose_calc: Recomputed XYZPR pose.
        zero_scale: Multiplier for :func:`zero_threshold`.
        wrap_threshold: Seam detection threshold for :func:`wrap_pose_angles`.

    Returns:
        Tuple ``(error, zero)``.

    Raises:
        InvalidArgumentError: If either pose is not a finite 5-vector.
    """
    wrapped_in, wrapped_calc = wrap_pose_angles(
        as_vector5(pose_in, "pose"), as_vector5(pose_calc, "pose"), wrap_threshold
    )
    error = math.hypot(*(wrapped_in - wrapped_calc))
    return error, zero_threshold(wrapped_in, wrapped_calc, zero_scale)


def check_candidate(
    branch: SolutionBranch,
    pose: np.ndarray,
    candidate: np.ndarray,
    config: KinematicsConfig,
) -> BranchOutcome:
    """Validate one branch candidate by forward kinematics.

    A residual above the adaptive zero marks the branch invalid and is
    logged as a warning; it is never raised.

    Args:
        branch: Branch the candidate belongs to.
        pose: Requested XYZPR pose (validated).
        candidate: Closed-form joint vector for the branch.
        config: Link table and tolerance policy.

    Returns:
        The branch outcome with its diagnostic attached.
    """
    pose_calc = forward_kinematics(candidate, config.dh)
    error, zero = pose_residual(
        pose, pose_calc, config.zero_scale, config.wrap_threshold
    )
    diagnostic = ResidualDiagnostic(
        branch=branch, pose_in=pose.copy(), pose_calc=pose_calc, error=error, zero=zero
    )
    if diagnostic.is_large:
        logger.warning(diagnostic.describe())
    return BranchOutcome(
        branch=branch,
        candidate=candidate,
        diagnostic=diagnostic,
        valid=not diagnostic.is_large,
    )
