import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from scorbot_kinematics.errors import InvalidArgumentError
from scorbot_kinematics.kinematics.forward import dh_link_transform


def test_home_pose(scorbot):
    # 16 + 221 + 221 + 145 out, 349 up
    np.testing.assert_allclose(scorbot.forward([0, 0, 0, 0, 0]), [603, 0, 349, 0, 0], atol=1e-9)


def test_base_rotation_swings_arm(scorbot):
    pose = scorbot.forward([math.pi / 2, 0, 0, 0, 0])
    np.testing.assert_allclose(pose, [0, 603, 349, 0, 0], atol=1e-9)


def test_vertical_arm(scorbot):
    pose = scorbot.forward([0, math.pi / 2, 0, 0, 0])
    np.testing.assert_allclose(pose, [16, 0, 936, math.pi / 2, 0], atol=1e-9)


def test_reference_tool_offset(reference_arm):
    # a5 lifts the tool point along the wrist x axis
    np.testing.assert_allclose(
        reference_arm.forward([0, 0, 0, 0, 0]), [430, 0, 150, 0, 0], atol=1e-9
    )


def test_roll_is_wrist_roll(scorbot):
    np.testing.assert_allclose(
        scorbot.forward([0, 0, 0, 0, 0.4]), [603, 0, 349, 0, 0.4], atol=1e-9
    )


def test_pitch_is_base_relative(scorbot):
    joints = [0.3, 0.5, -0.8, -0.4, 0.2]
    x, y, z, pitch, roll = scorbot.forward(joints)
    assert pitch == pytest.approx(0.5 - 0.8 - 0.4)
    assert roll == pytest.approx(0.2)
    assert math.atan2(y, x) == pytest.approx(0.3)
    radial = 16 + 221 * math.cos(0.5) + 221 * math.cos(-0.3) + 145 * math.cos(-0.7)
    height = 349 + 221 * math.sin(0.5) + 221 * math.sin(-0.3) + 145 * math.sin(-0.7)
    assert math.hypot(x, y) == pytest.approx(radial)
    assert z == pytest.approx(height)


def test_pitch_and_roll_are_wrapped(scorbot):
    pose = scorbot.forward([0, 0, 0, 2 * math.pi + 0.1, -2 * math.pi + 0.3])
    assert pose[3] == pytest.approx(0.1)
    assert pose[4] == pytest.approx(0.3)


def test_link_transforms(scorbot):
    joints = [0.3, 0.5, -0.8, -0.4, 0.2]
    frames = scorbot.link_transforms(joints)
    assert len(frames) == 5
    np.testing.assert_array_equal(frames[-1], scorbot.forward_transform(joints))
    for frame in frames:
        np.testing.assert_allclose(frame[3], [0, 0, 0, 1])
        rot = frame[:3, :3]
        np.testing.assert_allclose(rot @ rot.T, np.eye(3), atol=1e-12)
    np.testing.assert_allclose(frames[-1][:3, 3], scorbot.forward(joints)[:3])
    # first frame sits at the shoulder
    np.testing.assert_allclose(
        frames[0][:3, 3], [16 * math.cos(0.3), 16 * math.sin(0.3), 349], atol=1e-12
    )


def test_dh_link_transform_identity():
    np.testing.assert_allclose(dh_link_transform(0.0, 0.0, 0.0, 0.0), np.eye(4))
    t = dh_link_transform(math.pi / 2, 5.0, 2.0, 0.0)
    np.testing.assert_allclose(t[:3, 3], [0.0, 2.0, 5.0], atol=1e-12)


@pytest.mark.parametrize("bad", [[0, 0, 0, 0], "abcde", [0, 0, 0, 0, float("nan")]])
def test_forward_rejects_malformed_joints(scorbot, bad):
    with pytest.raises(InvalidArgumentError):
        scorbot.forward(bad)


def test_forward_is_thread_safe(scorbot):
    rng = np.random.default_rng(7)
    joints = rng.uniform(-math.pi, math.pi, size=(64, 5))
    serial = [scorbot.forward(j) for j in joints]
    with ThreadPoolExecutor(max_workers=8) as pool:
        threaded = list(pool.map(scorbot.forward, joints))
    for a, b in zip(serial, threaded):
        np.testing.assert_array_equal(a, b)
