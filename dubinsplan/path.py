import logging
import math
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .common import euclidean, mod2pi
from .errors import InvalidRadiusError, NoPathError, ParameterOutOfRangeError
from .primitives import DubinsWord, SegmentType
from .robot import ENDPOINT_EPSILON, Pose, PoseLike, as_pose, propagate
from .words import WORD_SOLVERS, WordParams, solve_word

logger = logging.getLogger(__name__)

SampleVisitor = Callable[[Pose, float], int]


@dataclass(frozen=True)
class DubinsPath:
    """
    Forward-only path of at most three L/S/R segments.

    `params` are the segment lengths normalised by `turning_radius`; multiply
    by the radius for the arc length in world units. Arc segments are therefore
    measured in radians of turn.
    """

    start: Pose
    turning_radius: float
    word: DubinsWord
    params: Tuple[float, float, float]

    @property
    def length(self) -> float:
        return path_length(self)

    @property
    def segment_types(self) -> Tuple[SegmentType, SegmentType, SegmentType]:
        return self.word.segments


def _check_radius(turning_radius: float) -> float:
    turning_radius = float(turning_radius)
    if not math.isfinite(turning_radius) or turning_radius <= 0.0:
        raise InvalidRadiusError(f"turning_radius must be finite and > 0, got {turning_radius}")
    return turning_radius


def normalized_problem(start: PoseLike, goal: PoseLike, turning_radius: float) -> Tuple[float, float, float]:
    """
    Express a start/goal pair in the solvers' frame.

    Returns `(alpha, beta, d)`: both headings measured from the start-to-goal
    chord, and the chord length in turning radii.
    """
    turning_radius = _check_radius(turning_radius)
    q0 = as_pose(start)
    q1 = as_pose(goal)
    dx = q1.x - q0.x
    dy = q1.y - q0.y
    d = euclidean((q0.x, q0.y), (q1.x, q1.y)) / turning_radius
    theta = mod2pi(math.atan2(dy, dx))
    alpha = mod2pi(q0.theta - theta)
    beta = mod2pi(q1.theta - theta)
    return alpha, beta, d


def _best_word(
    alpha: float, beta: float, d: float, words: Iterable[DubinsWord]
) -> Optional[Tuple[DubinsWord, WordParams]]:
    best: Optional[Tuple[DubinsWord, WordParams]] = None
    best_cost = math.inf
    for word in words:
        params = solve_word(word, alpha, beta, d)
        if params is None:
            logger.debug("word %s infeasible (alpha=%.6f beta=%.6f d=%.6f)", word, alpha, beta, d)
            continue
        cost = params[0] + params[1] + params[2]
        if cost < best_cost:
            best_cost = cost
            best = (word, params)
    return best


def shortest_path(start: PoseLike, goal: PoseLike, turning_radius: float) -> DubinsPath:
    """
    Compute the shortest Dubins path from `start` to `goal`.

    All six words are tried in the order LSL, LSR, RSL, RSR, RLR, LRL and the
    first one with the strictly smallest length wins.

    Raises InvalidRadiusError for a non-positive radius and NoPathError when
    no word applies.
    """
    alpha, beta, d = normalized_problem(start, goal, turning_radius)
    found = _best_word(alpha, beta, d, (word for word, _ in WORD_SOLVERS))
    if found is None:
        raise NoPathError(f"no Dubins word connects {start} to {goal}")
    word, params = found
    path = DubinsPath(as_pose(start), float(turning_radius), word, params)
    logger.debug("selected %s params=%s length=%.6f", word, params, path.length)
    return path


def path_for_word(start: PoseLike, goal: PoseLike, turning_radius: float, word: DubinsWord) -> DubinsPath:
    """Build the path of one given word; raises NoPathError if it is infeasible."""
    word = DubinsWord(word)
    alpha, beta, d = normalized_problem(start, goal, turning_radius)
    params = solve_word(word, alpha, beta, d)
    if params is None:
        raise NoPathError(f"word {word} cannot connect {start} to {goal}")
    return DubinsPath(as_pose(start), float(turning_radius), word, params)


def path_length(path: DubinsPath) -> float:
    return (path.params[0] + path.params[1] + path.params[2]) * path.turning_radius


def segment_length(path: DubinsPath, i: int) -> float:
    """World length of segment `i`; out-of-range indices give math.inf."""
    if i < 0 or i > 2:
        return math.inf
    return path.params[i] * path.turning_radius


def segment_length_normalized(path: DubinsPath, i: int) -> float:
    if i < 0 or i > 2:
        return math.inf
    return path.params[i]


def path_type(path: DubinsPath) -> DubinsWord:
    return path.word


def _sample_local(path: DubinsPath, tprime: float) -> Pose:
    # local frame: start translated to the origin, unit radius
    types = path.segment_types
    p1, p2 = path.params[0], path.params[1]
    qi = Pose(0.0, 0.0, path.start.theta)
    if tprime < p1:
        return propagate(qi, types[0], tprime)
    q1 = propagate(qi, types[0], p1)
    if tprime < p1 + p2:
        return propagate(q1, types[1], tprime - p1)
    q2 = propagate(q1, types[1], p2)
    return propagate(q2, types[2], tprime - p1 - p2)


def _to_world(path: DubinsPath, q: Pose) -> Pose:
    rho = path.turning_radius
    return Pose(q.x * rho + path.start.x, q.y * rho + path.start.y, mod2pi(q.theta))


def sample(path: DubinsPath, t: float) -> Pose:
    """
    Pose at arc length `t` from the start, heading wrapped to [0, 2*pi).

    Raises ParameterOutOfRangeError unless 0 <= t < path length.
    """
    if t < 0 or t >= path_length(path):
        raise ParameterOutOfRangeError(f"t={t} outside [0, {path_length(path)})")
    return _to_world(path, _sample_local(path, t / path.turning_radius))


def sample_many(path: DubinsPath, step_size: float, visit: SampleVisitor) -> int:
    """
    Call `visit(pose, t)` every `step_size` along the path, starting at t=0.

    A non-zero return from `visit` stops the walk and is passed back to the
    caller; 0 means the whole path was visited. `step_size` must be positive.
    """
    x = 0.0
    length = path_length(path)
    while x < length:
        retcode = visit(sample(path, x), x)
        if retcode != 0:
            return retcode
        x += step_size
    return 0


def sample_path(path: DubinsPath, step_size: float) -> Tuple[np.ndarray, np.ndarray]:
    """Sample the whole path; returns `(poses, distances)` as (N, 3) and (N,) arrays."""
    poses: List[Tuple[float, float, float]] = []
    distances: List[float] = []

    def collect(q: Pose, t: float) -> int:
        poses.append(q.as_tuple())
        distances.append(t)
        return 0

    sample_many(path, step_size, collect)
    return np.asarray(poses, dtype=float).reshape(-1, 3), np.asarray(distances, dtype=float)


def path_endpoint(path: DubinsPath, exact: bool = False, epsilon: float = ENDPOINT_EPSILON) -> Pose:
    """
    Final pose of the path.

    By default this samples `epsilon` short of the end, since the end itself is
    outside the sampling range; the position error is at most `epsilon`.
    `exact=True` propagates through all three segments instead.
    """
    if not exact:
        return sample(path, path_length(path) - epsilon)
    q = Pose(0.0, 0.0, path.start.theta)
    for segment, t in zip(path.segment_types, path.params):
        q = propagate(q, segment, t)
    return _to_world(path, q)


def extract_subpath(path: DubinsPath, t: float) -> DubinsPath:
    """
    Prefix of `path` with length min(t, path length).

    Raises ParameterOutOfRangeError for negative `t`.
    """
    if t < 0:
        raise ParameterOutOfRangeError(f"subpath length must be >= 0, got {t}")
    tprime = t / path.turning_radius
    p0 = min(path.params[0], tprime)
    p1 = min(path.params[1], tprime - p0)
    p2 = min(path.params[2], tprime - p0 - p1)
    return replace(path, params=(p0, p1, p2))


def path_segments(path: DubinsPath) -> Iterable[Tuple[SegmentType, float]]:
    for segment, t in zip(path.segment_types, path.params):
        yield segment, t * path.turning_radius
