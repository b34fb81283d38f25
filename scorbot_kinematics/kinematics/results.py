"""
Result and request types for inverse kinematics.

Classes:
    SolutionBranch: Elbow-up / elbow-down tag.
    SolutionRequest: Which branch(es) the caller wants back.
    ResidualDiagnostic: Round-trip error record for one branch.
    BranchOutcome: Candidate joints, validity, and diagnostic for one branch.
    SingleSolution: Result of the single-branch requests.
    AllSolutions: Result of ``ALL_BRANCHES`` (elbow-up, elbow-down).

Functions:
    resolve_request: Convert a request name to a ``SolutionRequest``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

import numpy as np

from scorbot_kinematics.errors import InvalidArgumentError, UnreachablePoseError


class SolutionBranch(Enum):
    """Configuration of the shoulder-elbow sub-chain."""

    ELBOW_UP = "elbow-up"
    ELBOW_DOWN = "elbow-down"


class SolutionRequest(Enum):
    """Branch selection policy for inverse kinematics."""

    ELBOW_UP_ONLY = "elbow_up"
    ELBOW_DOWN_ONLY = "elbow_down"
    ALL_BRANCHES = "all"

    @property
    def branches(self) -> Tuple[SolutionBranch, ...]:
        """Branches returned for this request, in output order."""
        return _REQUEST_BRANCHES[self]


_REQUEST_BRANCHES: Dict[SolutionRequest, Tuple[SolutionBranch, ...]] = {
    SolutionRequest.ELBOW_UP_ONLY: (SolutionBranch.ELBOW_UP,),
    SolutionRequest.ELBOW_DOWN_ONLY: (SolutionBranch.ELBOW_DOWN,),
    SolutionRequest.ALL_BRANCHES: (SolutionBranch.ELBOW_UP, SolutionBranch.ELBOW_DOWN),
}

# Accepted request names, including the toolbox property values
_REQUEST_ALIASES: Dict[str, SolutionRequest] = {
    "elbowupsolution": SolutionRequest.ELBOW_UP_ONLY,
    "elbowdownsolution": SolutionRequest.ELBOW_DOWN_ONLY,
    "allsolutions": SolutionRequest.ALL_BRANCHES,
    "elbow_up": SolutionRequest.ELBOW_UP_ONLY,
    "elbow_down": SolutionRequest.ELBOW_DOWN_ONLY,
    "up": SolutionRequest.ELBOW_UP_ONLY,
    "down": SolutionRequest.ELBOW_DOWN_ONLY,
    "all": SolutionRequest.ALL_BRANCHES,
}


def resolve_request(request: SolutionRequest | str | None) -> SolutionRequest:
    """Convert a request name to a ``SolutionRequest``, or pass one through.

    Args:
        request: A ``SolutionRequest``, ``None`` for the default
            (elbow-up only), or a case-insensitive name such as
            ``'AllSolutions'`` or ``'down'``.

    Returns:
        The matching ``SolutionRequest``.

    Raises:
        InvalidArgumentError: For unknown names or unsupported types.
    """
    if request is None:
        return SolutionRequest.ELBOW_UP_ONLY
    if isinstance(request, SolutionRequest):
        return request
    if not isinstance(request, str):
        raise InvalidArgumentError(
            f"Solution request must be a SolutionRequest or str, got {type(request).__name__}"
        )
    key = request.strip().lower().replace("-", "_")
    if key not in _REQUEST_ALIASES:
        raise InvalidArgumentError(
            f"Unexpected solution request '{request}'. Choose from {sorted(_REQUEST_ALIASES)}"
        )
    return _REQUEST_ALIASES[key]


def _format_vector(values) -> str:
    return "[" + ",".join(f"{x:0.4f}" for x in values) + "]"


@dataclass(frozen=True, eq=False)
class ResidualDiagnostic:
    """Round-trip comparison between a requested and a recomputed pose.

    Attributes:
        branch: Branch the candidate belongs to.
        pose_in: Requested XYZPR pose.
        pose_calc: Forward kinematics of the candidate joints.
        error: Norm of the wrapped pose difference.
        zero: Adaptive floating-point zero the error is compared against.
    """

    branch: SolutionBranch
    pose_in: np.ndarray
    pose_calc: np.ndarray
    error: float
    zero: float

    @property
    def is_large(self) -> bool:
        """True when the residual exceeds the floating-point zero or is not a number."""
        return not (self.error <= self.zero)

    def describe(self) -> str:
        """Multi-line summary in the format used for log messages."""
        return (
            f"In the {self.branch.value} solution, the round-trip error is larger than expected."
            f"\n\t-> XYZPR_in   = {_format_vector(self.pose_in)}"
            f"\n\t-> XYZPR_calc = {_format_vector(self.pose_calc)}"
            f"\n\t-> Error from norm(XYZPR_in - XYZPR_calc): {self.error:.20f}"
            f"\n\t-> Floating point zero estimate:           {self.zero:.20f}"
        )


@dataclass(frozen=True, eq=False)
class BranchOutcome:
    """Inverse-kinematic outcome of one branch.

    Attributes:
        branch: Elbow-up or elbow-down.
        candidate: Closed-form joint vector, whether or not it is valid.
        diagnostic: Round-trip residual record.
        valid: Whether the candidate reproduces the requested pose.
    """

    branch: SolutionBranch
    candidate: np.ndarray
    diagnostic: ResidualDiagnostic
    valid: bool

    @property
    def joints(self) -> Optional[np.ndarray]:
        """The joint vector, or ``None`` if the pose is unreachable for this branch."""
        return self.candidate.copy() if self.valid else None

    @property
    def warning(self) -> Optional[ResidualDiagnostic]:
        """The diagnostic when the residual was large, else ``None``."""
        return self.diagnostic if self.diagnostic.is_large else None

    def require(self) -> np.ndarray:
        """Return the joint vector or raise if the branch is unreachable.

        Raises:
            UnreachablePoseError: When the branch has no valid solution.
        """
        if not self.valid:
            raise UnreachablePoseError(self.branch.value, self.diagnostic.pose_in)
        return self.candidate.copy()


@dataclass(frozen=True)
class SingleSolution:
    """Result of an ``ELBOW_UP_ONLY`` or ``ELBOW_DOWN_ONLY`` request."""

    request: SolutionRequest
    outcome: BranchOutcome

    @property
    def joints(self) -> Optional[np.ndarray]:
        """Joint vector of the requested branch, or ``None``."""
        return self.outcome.joints

    @property
    def outcomes(self) -> Tuple[BranchOutcome, ...]:
        return (self.outcome,)


@dataclass(frozen=True)
class AllSolutions:
    """Result of an ``ALL_BRANCHES`` request, always elbow-up then elbow-down."""

    elbow_up: BranchOutcome
    elbow_down: BranchOutcome
    request: SolutionRequest = SolutionRequest.ALL_BRANCHES

    @property
    def outcomes(self) -> Tuple[BranchOutcome, BranchOutcome]:
        return (self.elbow_up, self.elbow_down)

    @property
    def joints(self) -> Tuple[Optional[np.ndarray], Optional[np.ndarray]]:
        """Pair of joint vectors (elbow-up, elbow-down); ``None`` where unreachable."""
        return (self.elbow_up.joints, self.elbow_down.joints)

    def valid_joints(self) -> Tuple[np.ndarray, ...]:
        """Only the reachable joint vectors, in branch order."""
        return tuple(o.candidate.copy() for o in self.outcomes if o.valid)


InverseResult = Union[SingleSolution, AllSolutions]
