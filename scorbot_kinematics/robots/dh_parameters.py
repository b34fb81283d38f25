"""
Denavit-Hartenberg link tables for 5-DOF arms.

The table holds only the geometric constants that vary between arms: the
link offset ``d`` and link length ``a`` of each joint. Joint offsets and
link twists are fixed by the arm's convention and live in
:mod:`scorbot_kinematics.utils.constants`.

Classes:
    DHParameters: Immutable 5-row ``(d, a)`` table.

Functions:
    resolve_dh_parameters: Look up a built-in table by name or pass one through.
    available_robots: Names of the built-in tables.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from scorbot_kinematics.errors import InvalidArgumentError
from scorbot_kinematics.utils.constants import (
    DH_JOINT_OFFSETS,
    DH_LINK_TWISTS,
    NUM_JOINTS,
    REFERENCE_LINK_LENGTHS,
    REFERENCE_LINK_OFFSETS,
    SCORBOT_LINK_LENGTHS,
    SCORBOT_LINK_OFFSETS,
)


def _as_row_values(values: Any, label: str) -> Tuple[float, ...]:
    """Convert one column of the table to a tuple of finite floats.

    Args:
        values: Sequence of five numbers.
        label: Column name used in error messages.

    Returns:
        Tuple of five floats.

    Raises:
        InvalidArgumentError: On wrong length or non-finite entries.
    """
    try:
        out = tuple(float(v) for v in values)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"DH column '{label}' must be numeric: {exc}") from exc
    if len(out) != NUM_JOINTS:
        raise InvalidArgumentError(
            f"DH column '{label}' needs {NUM_JOINTS} values, got {len(out)}"
        )
    if not all(math.isfinite(v) for v in out):
        raise InvalidArgumentError(f"DH column '{label}' must be finite, got {out}")
    return out


@dataclass(frozen=True)
class DHParameters:
    """Link offsets and lengths of a 5-DOF arm.

    Attributes:
        d: Link offset of each joint (length units).
        a: Link length of each joint (length units).
        name: Human-readable label for the arm.
    """

    d: Tuple[float, ...]
    a: Tuple[float, ...]
    name: str = "custom"

    def __post_init__(self) -> None:
        """Normalise both columns to float tuples and check the planar links."""
        object.__setattr__(self, "d", _as_row_values(self.d, "d"))
        object.__setattr__(self, "a", _as_row_values(self.a, "a"))
        if self.a[1] <= 0.0 or self.a[2] <= 0.0:
            raise InvalidArgumentError(
                f"Upper arm and forearm lengths (a2, a3) must be positive, got {self.a[1:3]}"
            )

    @classmethod
    def from_table(cls, table: Any, name: str = "custom") -> "DHParameters":
        """Build parameters from a 5x2 array of ``(d, a)`` rows.

        Args:
            table: Array-like with shape ``(5, 2)``.
            name: Label for the arm.

        Returns:
            A ``DHParameters`` instance.

        Raises:
            InvalidArgumentError: If the table does not have shape ``(5, 2)``.
        """
        try:
            arr = np.asarray(table, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"DH table must be numeric: {exc}") from exc
        if arr.shape != (NUM_JOINTS, 2):
            raise InvalidArgumentError(
                f"DH table must have shape ({NUM_JOINTS}, 2), got {arr.shape}"
            )
        return cls(d=tuple(arr[:, 0]), a=tuple(arr[:, 1]), name=name)

    def as_table(self) -> np.ndarray:
        """Return the table as a ``(5, 2)`` array of ``(d, a)`` rows."""
        return np.column_stack([self.d, self.a])

    def rows(self) -> List[Tuple[float, float, float, float]]:
        """Return full DH rows ``(offset, d, a, alpha)`` for every joint."""
        return list(zip(DH_JOINT_OFFSETS, self.d, self.a, DH_LINK_TWISTS))

    @property
    def lateral_offset(self) -> float:
        """Sum of the offsets along the parallel pitch axes (``d2 + d3 + d4``)."""
        return self.d[1] + self.d[2] + self.d[3]

    @property
    def max_reach(self) -> float:
        """Upper bound on the horizontal distance from the base axis to the tool."""
        return self.a[0] + self.a[1] + self.a[2] + math.hypot(self.d[4], self.a[3] + self.a[4])

    def scaled(self, factor: float) -> "DHParameters":
        """Return a copy with every length multiplied by *factor*.

        Args:
            factor: Positive unit-conversion factor.

        Returns:
            A new ``DHParameters`` instance.
        """
        if not factor > 0.0:
            raise InvalidArgumentError(f"Scale factor must be positive, got {factor}")
        return DHParameters(
            d=tuple(v * factor for v in self.d),
            a=tuple(v * factor for v in self.a),
            name=self.name,
        )


# ---------------------------------------------------------------------------
# Built-in tables (name -> constructor)
# ---------------------------------------------------------------------------
_DH_REGISTRY: Dict[str, Callable[[], DHParameters]] = {
    "scorbot": lambda: DHParameters(
        d=SCORBOT_LINK_OFFSETS, a=SCORBOT_LINK_LENGTHS, name="scorbot"
    ),
    "reference": lambda: DHParameters(
        d=REFERENCE_LINK_OFFSETS, a=REFERENCE_LINK_LENGTHS, name="reference"
    ),
}


def available_robots() -> List[str]:
    """Return the names accepted by :func:`resolve_dh_parameters`."""
    return list(_DH_REGISTRY)


def resolve_dh_parameters(dh: DHParameters | str) -> DHParameters:
    """Convert a built-in robot name to its table, or pass a table through.

    Args:
        dh: Either a ``DHParameters`` instance or one of the names returned
            by :func:`available_robots`.

    Returns:
        A ``DHParameters`` instance.

    Raises:
        InvalidArgumentError: If the name is not registered.
    """
    if isinstance(dh, DHParameters):
        return dh
    key = str(dh).lower()
    if key not in _DH_REGISTRY:
        raise InvalidArgumentError(f"Unknown robot '{dh}'. Choose from {available_robots()}")
    return _DH_REGISTRY[key]()
