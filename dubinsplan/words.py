"""
Closed-form solvers for the six Dubins words.

Every solver works in the normalised frame: unit turning radius, start at the
origin with heading `alpha`, goal at `(d, 0)` with heading `beta`. Both angles
must already lie in [0, 2*pi). A solver returns the normalised segment lengths
`(t, p, q)` or None when the word cannot connect the two poses.
"""

import math
from typing import Callable, Optional, Tuple

from .common import mod2pi
from .primitives import DubinsWord

WordParams = Tuple[float, float, float]
WordSolver = Callable[[float, float, float], Optional[WordParams]]


def _trig(alpha: float, beta: float) -> Tuple[float, float, float, float, float]:
    return (
        math.sin(alpha),
        math.sin(beta),
        math.cos(alpha),
        math.cos(beta),
        math.cos(alpha - beta),
    )


def dubins_lsl(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp0 = d + sa - sb
    p_squared = 2.0 + d * d - 2.0 * c_ab + 2.0 * d * (sa - sb)
    if p_squared < 0.0:
        return None
    tmp1 = math.atan2(cb - ca, tmp0)
    t = mod2pi(-alpha + tmp1)
    p = math.sqrt(p_squared)
    q = mod2pi(beta - tmp1)
    return t, p, q


def dubins_rsr(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp0 = d - sa + sb
    p_squared = 2.0 + d * d - 2.0 * c_ab + 2.0 * d * (sb - sa)
    if p_squared < 0.0:
        return None
    tmp1 = math.atan2(ca - cb, tmp0)
    t = mod2pi(alpha - tmp1)
    p = math.sqrt(p_squared)
    q = mod2pi(-beta + tmp1)
    return t, p, q


def dubins_lsr(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    p_squared = -2.0 + d * d + 2.0 * c_ab + 2.0 * d * (sa + sb)
    if p_squared < 0.0:
        return None
    p = math.sqrt(p_squared)
    tmp2 = math.atan2(-ca - cb, d + sa + sb) - math.atan2(-2.0, p)
    t = mod2pi(-alpha + tmp2)
    q = mod2pi(-mod2pi(beta) + tmp2)
    return t, p, q


def dubins_rsl(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    p_squared = d * d - 2.0 + 2.0 * c_ab - 2.0 * d * (sa + sb)
    if p_squared < 0.0:
        return None
    p = math.sqrt(p_squared)
    tmp2 = math.atan2(ca + cb, d - sa - sb) - math.atan2(2.0, p)
    t = mod2pi(alpha - tmp2)
    q = mod2pi(beta - tmp2)
    return t, p, q


def dubins_rlr(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp_rlr = (6.0 - d * d + 2.0 * c_ab + 2.0 * d * (sa - sb)) / 8.0
    # acos domain doubles as the bound on the middle arc
    if abs(tmp_rlr) > 1.0:
        return None
    p = mod2pi(2.0 * math.pi - math.acos(tmp_rlr))
    t = mod2pi(alpha - math.atan2(ca - cb, d - sa + sb) + mod2pi(p / 2.0))
    q = mod2pi(alpha - beta - t + mod2pi(p))
    return t, p, q


def dubins_lrl(alpha: float, beta: float, d: float) -> Optional[WordParams]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp_lrl = (6.0 - d * d + 2.0 * c_ab + 2.0 * d * (sb - sa)) / 8.0
    if abs(tmp_lrl) > 1.0:
        return None
    p = mod2pi(2.0 * math.pi - math.acos(tmp_lrl))
    t = mod2pi(-alpha - math.atan2(ca - cb, d + sa - sb) + p / 2.0)
    q = mod2pi(mod2pi(beta) - alpha - t + mod2pi(p))
    return t, p, q


# Order matters: equal-cost words are resolved in favour of the earlier entry.
WORD_SOLVERS: Tuple[Tuple[DubinsWord, WordSolver], ...] = (
    (DubinsWord.LSL, dubins_lsl),
    (DubinsWord.LSR, dubins_lsr),
    (DubinsWord.RSL, dubins_rsl),
    (DubinsWord.RSR, dubins_rsr),
    (DubinsWord.RLR, dubins_rlr),
    (DubinsWord.LRL, dubins_lrl),
)

_SOLVER_BY_WORD = dict(WORD_SOLVERS)


def solve_word(word: DubinsWord, alpha: float, beta: float, d: float) -> Optional[WordParams]:
    return _SOLVER_BY_WORD[DubinsWord(word)](alpha, beta, d)
