import logging
import math

import numpy as np
import pytest

from scorbot_kinematics.errors import InvalidArgumentError
from scorbot_kinematics.kinematics.results import SolutionBranch
from scorbot_kinematics.kinematics.validation import (
    check_candidate,
    pose_residual,
    wrap_pose_angles,
    zero_threshold,
)
from scorbot_kinematics.robots.configs import KinematicsConfig

POSE = np.array([200.0, 0.0, 100.0, 0.3, 0.2])


def test_identical_poses_have_zero_residual():
    error, zero = pose_residual(POSE, POSE)
    assert error == 0.0
    assert zero > 0.0


def test_multiples_of_two_pi_compare_equal():
    shifted = POSE.copy()
    shifted[3] += 2 * math.pi
    shifted[4] -= 4 * math.pi
    error, zero = pose_residual(POSE, shifted)
    assert error <= zero


def test_seam_straddling_angles_compare_equal():
    a = np.array([200.0, 0.0, 100.0, 0.0, 2 * math.pi - 1e-15])
    b = np.array([200.0, 0.0, 100.0, -1e-15, 0.0])
    error, zero = pose_residual(a, b)
    assert error <= zero


def test_wrap_pose_angles_rewraps_only_far_pairs():
    a = np.array([1.0, 2.0, 3.0, 0.01, 1.0])
    b = np.array([1.0, 2.0, 3.0, -0.01, 1.5])
    wrapped_a, wrapped_b = wrap_pose_angles(a, b)
    # pitch pair straddles the seam and lands in (-pi, pi]
    assert wrapped_a[3] == pytest.approx(0.01)
    assert wrapped_b[3] == pytest.approx(-0.01)
    # roll pair is close and stays in [0, 2*pi)
    assert wrapped_a[4] == pytest.approx(1.0)
    assert wrapped_b[4] == pytest.approx(1.5)
    np.testing.assert_array_equal(wrapped_a[:3], a[:3])
    # inputs untouched
    assert b[3] == -0.01


def test_opposite_angles_stay_different():
    a = POSE.copy()
    b = POSE.copy()
    b[3] += math.pi
    error, zero = pose_residual(a, b)
    assert error == pytest.approx(math.pi)
    assert error > zero


def test_zero_threshold_scales_with_magnitude():
    base = zero_threshold(POSE, POSE)
    assert base == pytest.approx(10 * np.spacing(math.hypot(*POSE)))
    big = POSE.copy()
    big[:3] *= 1000.0
    ratio = zero_threshold(big, big) / base
    assert 500.0 < ratio < 2000.0
    assert zero_threshold(POSE, POSE, zero_scale=20.0) == pytest.approx(2 * base)


@pytest.mark.parametrize("scale", [1.0, 1e3, 1e6])
def test_relative_error_governs_validity(scale):
    pose = POSE.copy()
    pose[:3] *= scale
    nudged = pose.copy()
    nudged[0] += 4 * np.spacing(np.linalg.norm(pose))
    error, zero = pose_residual(pose, nudged)
    assert error <= zero


def test_absolute_error_fails_at_small_scale():
    nudged = POSE.copy()
    nudged[0] += 1e-9
    error, zero = pose_residual(POSE, nudged)
    assert error > zero


def test_pose_residual_validates_shapes():
    with pytest.raises(InvalidArgumentError):
        pose_residual(POSE[:4], POSE)


def test_check_candidate_flags_and_logs_bad_joints(caplog):
    config = KinematicsConfig(dh="reference")
    pose = np.array([200.0, 0.0, 100.0, 0.0, 0.0])
    with caplog.at_level(logging.WARNING, logger="scorbot_kinematics"):
        outcome = check_candidate(SolutionBranch.ELBOW_DOWN, pose, np.zeros(5), config)
    assert not outcome.valid
    assert outcome.joints is None
    assert outcome.warning is outcome.diagnostic
    np.testing.assert_allclose(outcome.diagnostic.pose_calc, [430, 0, 150, 0, 0], atol=1e-9)
    assert "elbow-down" in caplog.text
    assert "XYZPR_in" in outcome.diagnostic.describe()


def test_check_candidate_accepts_exact_joints(caplog):
    config = KinematicsConfig(dh="reference")
    pose = np.array([430.0, 0.0, 150.0, 0.0, 0.0])
    with caplog.at_level(logging.WARNING, logger="scorbot_kinematics"):
        outcome = check_candidate(SolutionBranch.ELBOW_UP, pose, np.zeros(5), config)
    assert outcome.valid
    assert outcome.warning is None
    np.testing.assert_array_equal(outcome.joints, np.zeros(5))
    assert caplog.records == []


def test_looser_zero_scale_accepts_small_errors():
    strict = KinematicsConfig(dh="reference")
    loose = KinematicsConfig(dh="reference", zero_scale=1e12)
    pose = np.array([430.0 + 1e-6, 0.0, 150.0, 0.0, 0.0])
    assert not check_candidate(SolutionBranch.ELBOW_UP, pose, np.zeros(5), strict).valid
    assert check_candidate(SolutionBranch.ELBOW_UP, pose, np.zeros(5), loose).valid
