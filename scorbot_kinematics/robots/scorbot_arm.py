"""
Kinematics engine for a 5-DOF ScorBot-style arm.

Bundles an immutable :class:`KinematicsConfig` with the forward and inverse
solvers so callers can build the engine once and share it between threads.

Classes:
    ScorbotKinematics: Forward/inverse kinematics for one arm geometry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from scorbot_kinematics.kinematics.forward import (
    forward_kinematics,
    forward_transform,
    link_transforms,
)
from scorbot_kinematics.kinematics.inverse import candidate_joints, inverse_kinematics
from scorbot_kinematics.kinematics.results import (
    InverseResult,
    SolutionBranch,
    SolutionRequest,
)
from scorbot_kinematics.robots.configs import KinematicsConfig, resolve_config
from scorbot_kinematics.robots.dh_parameters import DHParameters


@dataclass(frozen=True)
class ScorbotKinematics:
    """Stateless forward/inverse kinematics for a fixed link table.

    Attributes:
        config: Link table and tolerance policy; never mutated.
    """

    config: KinematicsConfig = field(default_factory=KinematicsConfig)

    @classmethod
    def for_robot(cls, robot: KinematicsConfig | DHParameters | str) -> "ScorbotKinematics":
        """Build an engine from a config, a DH table, or a built-in robot name.

        Args:
            robot: Anything accepted by :func:`resolve_config`.

        Returns:
            A ``ScorbotKinematics`` instance.
        """
        return cls(config=resolve_config(robot))

    @property
    def dh(self) -> DHParameters:
        """The link table of this arm."""
        return self.config.dh

    # ------------------------------------------------------------------
    # Forward kinematics
    # ------------------------------------------------------------------

    def forward(self, joints: Any) -> np.ndarray:
        """Return the XYZPR pose of a BSEPR joint vector.

        Args:
            joints: Five joint angles in radians.

        Returns:
            Array ``[x, y, z, pitch, roll]``.
        """
        return forward_kinematics(joints, self.config.dh)

    def forward_transform(self, joints: Any) -> np.ndarray:
        """Return the 4x4 base-to-tool transform of a joint vector."""
        return forward_transform(joints, self.config.dh)

    def link_transforms(self, joints: Any) -> List[np.ndarray]:
        """Return the cumulative transform of every joint frame."""
        return link_transforms(joints, self.config.dh)

    # ------------------------------------------------------------------
    # Inverse kinematics
    # ------------------------------------------------------------------

    def inverse(
        self,
        pose: Any,
        request: SolutionRequest | str | None = SolutionRequest.ELBOW_UP_ONLY,
    ) -> InverseResult:
        """Return the validated joint solution(s) for an XYZPR pose.

        Args:
            pose: Target ``[x, y, z, pitch, roll]``.
            request: Branch selection policy (default elbow-up only).

        Returns:
            ``SingleSolution`` or ``AllSolutions`` depending on *request*.
        """
        return inverse_kinematics(pose, self.config, request)

    def candidates(self, pose: Any) -> Dict[SolutionBranch, np.ndarray]:
        """Return the unvalidated closed-form candidates of both branches."""
        return candidate_joints(pose, self.config.dh)
