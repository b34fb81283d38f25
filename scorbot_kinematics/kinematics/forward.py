"""
Forward kinematics: joint angles (BSEPR) to end-effector pose (XYZPR).

Each joint contributes the standard DH link transform
``Rz(theta + offset) Tz(d) Tx(a) Rx(alpha)``; the transforms are composed
from the base outwards. Position is read from the composed transform.
Pitch is measured in the vertical plane swept by the base joint and roll
about the approach axis relative to the zero-roll wrist frame.

Functions:
    dh_link_transform: Homogeneous transform of a single DH row.
    link_transforms: Cumulative base-to-joint transforms for all five joints.
    forward_transform: Base-to-tool homogeneous transform.
    forward_kinematics: XYZPR pose of a joint vector.
"""

from __future__ import annotations

import math
from typing import Any, List

import numpy as np

from scorbot_kinematics.robots.dh_parameters import DHParameters
from scorbot_kinematics.utils.helpers import as_vector5


def dh_link_transform(theta: float, d: float, a: float, alpha: float) -> np.ndarray:
    """Return the 4x4 transform ``Rz(theta) Tz(d) Tx(a) Rx(alpha)``.

    Args:
        theta: Joint angle including any fixed offset (radians).
        d: Link offset along the previous z axis.
        a: Link length along the new x axis.
        alpha: Link twist about the new x axis (radians).

    Returns:
        Homogeneous transform as a ``(4, 4)`` float64 array.
    """
    ct, st = math.cos(theta), math.sin(theta)
    ca, sa = math.cos(alpha), math.sin(alpha)
    return np.array(
        [
            [ct, -st * ca, st * sa, a * ct],
            [st, ct * ca, -ct * sa, a * st],
            [0.0, sa, ca, d],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def _compose_chain(joints: np.ndarray, dh: DHParameters) -> List[np.ndarray]:
    """Compose the link transforms of an already validated joint vector.

    Args:
        joints: Float array of shape ``(5,)``.
        dh: Link table.

    Returns:
        List of five cumulative transforms, frame 1 to frame 5.
    """
    frames = []
    current = np.eye(4)
    for theta, (offset, d, a, alpha) in zip(joints, dh.rows()):
        current = current @ dh_link_transform(theta + offset, d, a, alpha)
        frames.append(current)
    return frames


def link_transforms(joints: Any, dh: DHParameters) -> List[np.ndarray]:
    """Return the cumulative base-to-joint transform of every joint.

    Args:
        joints: BSEPR joint vector (radians).
        dh: Link table.

    Returns:
        List of five ``(4, 4)`` arrays; the last is the tool frame.

    Raises:
        InvalidArgumentError: If *joints* is not a finite 5-vector.
    """
    return _compose_chain(as_vector5(joints, "joint vector"), dh)


def forward_transform(joints: Any, dh: DHParameters) -> np.ndarray:
    """Return the base-to-tool homogeneous transform.

    Args:
        joints: BSEPR joint vector (radians).
        dh: Link table.

    Returns:
        ``(4, 4)`` pose matrix of the end effector.
    """
    return link_transforms(joints, dh)[-1]


def _pitch_from_frames(frames: List[np.ndarray]) -> float:
    """Angle of the approach vector above the radial axis of the base plane."""
    approach = frames[-1][:3, 2]
    radial, vertical = frames[0][:3, 0], frames[0][:3, 1]
    return math.atan2(float(approach @ vertical), float(approach @ radial))


def _roll_from_frames(frames: List[np.ndarray]) -> float:
    """Rotation of the tool x axis about the approach axis (body fixed)."""
    tool_x = frames[-1][:3, 0]
    wrist_x, wrist_y = frames[3][:3, 0], frames[3][:3, 1]
    return math.atan2(float(tool_x @ wrist_y), float(tool_x @ wrist_x))


def forward_kinematics(joints: Any, dh: DHParameters) -> np.ndarray:
    """Compute the XYZPR pose of a BSEPR joint vector.

    Args:
        joints: Base, shoulder, elbow, wrist pitch, and wrist roll angles
            (radians).
        dh: Link table.

    Returns:
        Array ``[x, y, z, pitch, roll]``; pitch and roll lie in (-pi, pi].

    Raises:
        InvalidArgumentError: If *joints* is not a finite 5-vector.
    """
    frames = link_transforms(joints, dh)
    position = frames[-1][:3, 3]
    return np.array(
        [
            position[0],
            position[1],
            position[2],
            _pitch_from_frames(frames),
            _roll_from_frames(frames),
        ],
        dtype=np.float64,
    )
