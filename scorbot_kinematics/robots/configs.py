"""
Dataclass configuration for the kinematics engine.

Classes:
    KinematicsConfig: Link table plus the tolerance policy of the solution check.

Functions:
    resolve_config: Build a config from a config, a DH table, or a robot name.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from scorbot_kinematics.errors import InvalidArgumentError
from scorbot_kinematics.robots.dh_parameters import DHParameters, resolve_dh_parameters
from scorbot_kinematics.utils.constants import (
    DEFAULT_ROBOT,
    DEFAULT_WRAP_THRESHOLD,
    DEFAULT_ZERO_SCALE,
)


@dataclass(frozen=True)
class KinematicsConfig:
    """Immutable configuration shared by forward and inverse kinematics.

    Attributes:
        dh: Link offsets and lengths of the arm.
        zero_scale: Multiplier on the floating-point spacing of the compared
            poses that defines "zero" residual.
        wrap_threshold: Angle difference (radians) above which pitch/roll
            pairs are re-wrapped to (-pi, pi] before comparison.
    """

    dh: DHParameters = field(default_factory=lambda: resolve_dh_parameters(DEFAULT_ROBOT))
    zero_scale: float = DEFAULT_ZERO_SCALE
    wrap_threshold: float = DEFAULT_WRAP_THRESHOLD

    def __post_init__(self) -> None:
        """Resolve robot names and check the tolerance values."""
        object.__setattr__(self, "dh", resolve_dh_parameters(self.dh))
        if not self.zero_scale > 0.0:
            raise InvalidArgumentError(f"zero_scale must be positive, got {self.zero_scale}")
        if not 0.0 < self.wrap_threshold < 2 * DEFAULT_WRAP_THRESHOLD:
            raise InvalidArgumentError(
                f"wrap_threshold must lie in (0, 3*pi/2), got {self.wrap_threshold}"
            )


def resolve_config(cfg: KinematicsConfig | DHParameters | str) -> KinematicsConfig:
    """Wrap a DH table or robot name in a default config, or pass a config through.

    Args:
        cfg: A ``KinematicsConfig``, a ``DHParameters`` table, or a built-in
            robot name such as ``'scorbot'``.

    Returns:
        A ``KinematicsConfig`` instance.
    """
    if isinstance(cfg, KinematicsConfig):
        return cfg
    return KinematicsConfig(dh=resolve_dh_parameters(cfg))
