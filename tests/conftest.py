import pytest

from scorbot_kinematics.robots.scorbot_arm import ScorbotKinematics


@pytest.fixture
def scorbot():
    return ScorbotKinematics.for_robot("scorbot")


@pytest.fixture
def reference_arm():
    # d = [100, 0, 0, 0, 30], a = [100, 150, 150, 0, 50] (mm)
    return ScorbotKinematics.for_robot("reference")

