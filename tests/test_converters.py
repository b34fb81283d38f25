import numpy as np

from scorbot_kinematics import (
    AllSolutions,
    SingleSolution,
    bsepr_to_xyzpr,
    xyzpr_to_bsepr,
)


def test_bsepr_to_xyzpr_uses_scorbot_by_default():
    np.testing.assert_allclose(bsepr_to_xyzpr([0, 0, 0, 0, 0]), [603, 0, 349, 0, 0], atol=1e-9)


def test_xyzpr_to_bsepr_round_trip():
    joints = np.array([0.3, 0.5, -0.8, -0.4, 0.2])
    pose = bsepr_to_xyzpr(joints)
    result = xyzpr_to_bsepr(pose)
    assert isinstance(result, SingleSolution)
    np.testing.assert_allclose(result.joints, joints, atol=1e-9)


def test_xyzpr_to_bsepr_all_solutions_for_named_robot():
    result = xyzpr_to_bsepr([200, 0, 100, 0, 0], "AllSolutions", robot="reference")
    assert isinstance(result, AllSolutions)
    assert all(j is not None for j in result.joints)
