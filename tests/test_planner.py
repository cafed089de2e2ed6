import logging
import math

import pytest

from dubinsplan import DubinsPlanner, InvalidRadiusError, Pose, VehicleParams
from dubinsplan.common import heading_diff


def test_planner_reaches_goal():
    params = VehicleParams(turning_radius=1.2, sample_step=0.05)
    planner = DubinsPlanner(params)
    start = Pose(0.5, 0.5, 0.0)
    goal = Pose(5.0, 2.8, math.radians(90))
    path, stats = planner.plan(start, goal)
    assert path, f"Planner failed: {stats}"
    assert path[0].x == pytest.approx(start.x)
    assert path[0].y == pytest.approx(start.y)
    assert math.hypot(path[-1].x - goal.x, path[-1].y - goal.y) < 1e-6
    assert abs(heading_diff(path[-1].theta, goal.theta)) < 1e-6
    assert stats["samples"] == len(path)
    assert stats["word"] in ("LSL", "LSR", "RSL", "RSR", "RLR", "LRL")
    assert sum(stats["segment_lengths"]) == pytest.approx(stats["path_length"])
    assert len(stats["trace_poses"]) == len(path)
    # consecutive samples are at most one step apart
    for a, b in zip(path, path[1:]):
        assert math.hypot(b.x - a.x, b.y - a.y) <= params.sample_step + 1e-9


def test_planner_accepts_tuples():
    planner = DubinsPlanner(VehicleParams(sample_step=0.5))
    path, stats = planner.plan((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
    assert stats["path_length"] == pytest.approx(4.0)
    assert stats["word"] == "LSL"
    # eight samples plus the endpoint
    assert len(path) == 9
    assert path[-1].x == pytest.approx(4.0)


def test_planner_default_params():
    planner = DubinsPlanner()
    assert planner.params == VehicleParams()
    assert planner.params.turning_radius == 1.0


def test_planner_zero_length_plan_returns_goal():
    planner = DubinsPlanner()
    path, stats = planner.plan((2.0, 3.0, 0.0), (2.0, 3.0, 0.0))
    assert len(path) == 1
    assert path[0].x == pytest.approx(2.0)
    assert path[0].y == pytest.approx(3.0)


def test_planner_propagates_bad_radius():
    planner = DubinsPlanner(VehicleParams(turning_radius=0.0))
    with pytest.raises(InvalidRadiusError):
        planner.plan((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))


def test_planner_logs_selected_word(caplog):
    with caplog.at_level(logging.DEBUG, logger="dubinsplan"):
        DubinsPlanner().plan((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
    messages = [r.getMessage() for r in caplog.records]
    assert any("selected LSL" in m for m in messages)
    assert any("planned LSL path" in m for m in messages)


@pytest.mark.parametrize("step", [0.0, -0.1, math.nan])
def test_planner_rejects_non_positive_step(step):
    planner = DubinsPlanner(VehicleParams(sample_step=step))
    with pytest.raises(ValueError):
        planner.plan((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
