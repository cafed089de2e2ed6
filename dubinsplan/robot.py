import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .primitives import SegmentType

ENDPOINT_EPSILON = 1e-9


@dataclass
class VehicleParams:
    turning_radius: float = 1.0
    sample_step: float = 0.1
    endpoint_epsilon: float = ENDPOINT_EPSILON


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    theta: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.theta


PoseLike = Union[Pose, Sequence[float]]


def as_pose(q: PoseLike) -> Pose:
    if isinstance(q, Pose):
        return q
    x, y, theta = q
    return Pose(float(x), float(y), float(theta))


def propagate(state: Pose, segment: SegmentType, t: float) -> Pose:
    """Advance `state` along one unit-radius segment by normalised length `t`.

    Uses the exact constant-curvature solution, so arcs are traced on the unit
    circle and straights move `t` along the current heading. The heading is
    left unwrapped.
    """
    x, y, theta = state.x, state.y, state.theta
    if segment == SegmentType.L:
        return Pose(
            x + math.sin(theta + t) - math.sin(theta),
            y - math.cos(theta + t) + math.cos(theta),
            theta + t,
        )
    if segment == SegmentType.R:
        return Pose(
            x - math.sin(theta - t) + math.sin(theta),
            y + math.cos(theta - t) - math.cos(theta),
            theta - t,
        )
    if segment == SegmentType.S:
        return Pose(x + math.cos(theta) * t, y + math.sin(theta) * t, theta)
    raise ValueError(f"unknown segment type: {segment!r}")
