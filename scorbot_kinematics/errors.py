"""
Exception types raised by scorbot_kinematics.

Classes:
    KinematicsError: Base class for every error raised by the package.
    InvalidArgumentError: Malformed joint vector, pose, policy, or DH table.
    UnreachablePoseError: Raised on request when a branch has no solution.
"""

from __future__ import annotations


class KinematicsError(Exception):
    """Base class for scorbot_kinematics errors."""


class InvalidArgumentError(KinematicsError, ValueError):
    """An input has the wrong shape, type, or value.

    Raised before any computation takes place and never retried.
    """


class UnreachablePoseError(KinematicsError):
    """The requested branch has no valid joint solution for the pose.

    The solvers report unreachable branches as ``None`` joints; this error
    is only raised by :meth:`BranchOutcome.require`.

    Attributes:
        branch: Name of the branch that failed.
        pose: The requested end-effector pose.
    """

    def __init__(self, branch: str, pose) -> None:
        self.branch = branch
        self.pose = pose
        super().__init__(f"No {branch} solution reaches pose {list(pose)}")
