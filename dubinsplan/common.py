import math
from typing import Tuple

TWO_PI = 2.0 * math.pi


def ring_mod(x: float, y: float) -> float:
    """Floor-based modulus, result in [0, y) for y > 0.

    `math.fmod` keeps the sign of `x`, which is wrong for angular quantities.
    """
    r = x - y * math.floor(x / y)
    # tiny negative x rounds up to exactly y
    if r >= y:
        r -= y
    return r


def mod2pi(angle: float) -> float:
    """Wrap angle to [0, 2*pi)."""
    return ring_mod(angle, TWO_PI)


def wrap_angle(angle: float) -> float:
    """Wrap angle to [-pi, pi)."""
    return (angle + math.pi) % TWO_PI - math.pi


def heading_diff(a: float, b: float) -> float:
    """Smallest signed difference a-b."""
    return wrap_angle(a - b)


def euclidean(p: Tuple[float, float], q: Tuple[float, float]) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])
