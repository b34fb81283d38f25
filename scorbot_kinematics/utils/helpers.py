"""
Small stateless helpers used across the scorbot_kinematics package.

Provides numerical clamping, angle wrapping, a domain-tolerant arccosine,
and coercion of user input into 5-element float vectors.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from scorbot_kinematics.errors import InvalidArgumentError
from scorbot_kinematics.utils.constants import NUM_JOINTS

TWO_PI: float = 2.0 * math.pi


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def clamped_acos(value: float) -> float:
    """Arccosine that tolerates arguments slightly outside [-1, 1].

    Rounding in the law-of-cosines ratio can push the argument just past
    the domain boundary; the argument is clamped before evaluation so the
    result is always real. Targets that are genuinely out of reach also
    land on 0 or pi here and are rejected later by the solution check.

    Args:
        value: Cosine value, possibly outside the domain.

    Returns:
        Angle in [0, pi].
    """
    return math.acos(clamp(value, -1.0, 1.0))


def wrap_to_2pi(angles: Any) -> np.ndarray:
    """Wrap angles into [0, 2*pi).

    Args:
        angles: Scalar or array of angles in radians.

    Returns:
        Array of wrapped angles.
    """
    return np.mod(np.asarray(angles, dtype=np.float64), TWO_PI)


def wrap_to_pi(angles: Any) -> np.ndarray:
    """Wrap angles into (-pi, pi].

    Args:
        angles: Scalar or array of angles in radians.

    Returns:
        Array of wrapped angles.
    """
    return math.pi - np.mod(math.pi - np.asarray(angles, dtype=np.float64), TWO_PI)


def wrap_angle_to_pi(angle: float) -> float:
    """Scalar version of :func:`wrap_to_pi` returning a plain float."""
    return float(wrap_to_pi(angle))


def as_vector5(values: Any, name: str = "vector") -> np.ndarray:
    """Coerce *values* into a finite float64 array of shape ``(5,)``.

    Any real numeric array-like holding exactly five elements is accepted;
    row and column vectors are flattened.

    Args:
        values: Sequence or array of five numbers.
        name: Label used in error messages (e.g. ``'pose'``).

    Returns:
        A new 1-D float64 array.

    Raises:
        InvalidArgumentError: On non-numeric input, wrong element count,
            or non-finite entries.
    """
    if isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"{name} must be numeric, got {type(values).__name__}")
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} could not be read as an array: {exc}") from exc
    if raw.dtype.kind not in "iuf":
        raise InvalidArgumentError(f"{name} must hold real numbers, got dtype {raw.dtype}")
    if raw.size != NUM_JOINTS:
        raise InvalidArgumentError(
            f"{name} must have {NUM_JOINTS} elements, got {raw.size}"
        )
    vec = raw.astype(np.float64).reshape(NUM_JOINTS)
    if not np.all(np.isfinite(vec)):
        raise InvalidArgumentError(f"{name} must be finite, got {vec.tolist()}")
    return vec
