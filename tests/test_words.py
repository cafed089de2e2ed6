import math

import numpy as np
import pytest

from dubinsplan import DubinsWord, Pose, SegmentType, propagate
from dubinsplan.common import heading_diff
from dubinsplan.primitives import WORD_SEGMENTS
from dubinsplan.words import (
    WORD_SOLVERS,
    dubins_lrl,
    dubins_lsl,
    dubins_lsr,
    dubins_rlr,
    dubins_rsl,
    dubins_rsr,
    solve_word,
)


def reconstruct(word: DubinsWord, alpha: float, params) -> Pose:
    q = Pose(0.0, 0.0, alpha)
    for segment, t in zip(WORD_SEGMENTS[word], params):
        q = propagate(q, segment, t)
    return q


def test_solver_table_order_and_segments():
    assert [w for w, _ in WORD_SOLVERS] == list(DubinsWord)
    assert [str(w) for w in DubinsWord] == ["LSL", "LSR", "RSL", "RSR", "RLR", "LRL"]
    for word in DubinsWord:
        letters = "".join(seg.name for seg in word.segments)
        assert letters == str(word)
    assert DubinsWord.RLR.segments == (SegmentType.R, SegmentType.L, SegmentType.R)


def test_segment_table_is_read_only():
    with pytest.raises(TypeError):
        WORD_SEGMENTS[DubinsWord.LSL] = (SegmentType.S, SegmentType.S, SegmentType.S)


@pytest.mark.parametrize("word", list(DubinsWord))
def test_every_solution_reaches_the_normalised_goal(word):
    rng = np.random.default_rng(0)
    feasible = 0
    for _ in range(300):
        alpha = rng.uniform(0.0, 2.0 * math.pi)
        beta = rng.uniform(0.0, 2.0 * math.pi)
        d = rng.uniform(0.0, 5.0)
        params = solve_word(word, alpha, beta, d)
        if params is None:
            continue
        feasible += 1
        assert all(v >= 0.0 for v in params), (word, params)
        q = reconstruct(word, alpha, params)
        assert abs(q.x - d) < 1e-8
        assert abs(q.y) < 1e-8
        assert abs(heading_diff(q.theta, beta)) < 1e-8
    assert feasible > 0


def test_lsl_straight_ahead():
    assert dubins_lsl(0.0, 0.0, 4.0) == pytest.approx((0.0, 4.0, 0.0))


def test_rsr_straight_ahead():
    assert dubins_rsr(0.0, 0.0, 4.0) == pytest.approx((0.0, 4.0, 0.0))


def test_csc_infeasible_when_discriminant_negative():
    # both headings point away from the chord on the same side
    assert dubins_lsr(1.5 * math.pi, 1.5 * math.pi, 1.0) is None
    assert dubins_rsl(0.5 * math.pi, 0.5 * math.pi, 1.0) is None


def test_ccc_infeasible_when_poses_far_apart():
    assert dubins_rlr(0.0, 0.0, 10.0) is None
    assert dubins_lrl(0.0, 0.0, 10.0) is None


def test_ccc_middle_arc_longer_than_half_turn():
    for solver in (dubins_rlr, dubins_lrl):
        params = solver(0.0, 0.0, 1.0)
        assert params is not None
        assert math.pi < params[1] < 2.0 * math.pi


def test_solve_word_accepts_plain_ints():
    assert solve_word(0, 0.0, 0.0, 4.0) == dubins_lsl(0.0, 0.0, 4.0)
