"""
Quick-start visualization for Dubins paths.

What it does:
- Plans a handful of start/goal pairs with DubinsPlanner.
- Plots the sampled trace, the turning circles at both ends and the headings.

Run:
    python -m examples.plot_dubins

If you don't have matplotlib installed, install it with:
    pip install matplotlib
"""

import logging
import math
from pathlib import Path

import numpy as np

from dubinsplan import DubinsPlanner, Pose, VehicleParams

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None


SCENARIOS = [
    ("straight", Pose(0.0, 0.0, 0.0), Pose(4.0, 0.0, 0.0)),
    ("u-turn", Pose(0.0, 0.0, 0.0), Pose(0.0, 1.5, math.pi)),
    ("s-bend", Pose(0.0, 0.0, math.radians(90)), Pose(5.0, 2.0, math.radians(-90))),
    ("tight", Pose(0.0, 0.0, 0.0), Pose(0.5, 0.5, math.radians(180))),
]


def plot(name: str, start: Pose, goal: Pose, poses, stats, params: VehicleParams):
    if plt is None:
        print("matplotlib not available; install it with `pip install matplotlib` to see the plot.")
        return

    trace = np.asarray([q.as_tuple() for q in poses])
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(trace[:, 0], trace[:, 1], c="blue", lw=2, label=f"{stats['word']} ({stats['path_length']:.2f})")

    r = params.turning_radius
    for pose, color in ((start, "green"), (goal, "red")):
        ax.arrow(
            pose.x,
            pose.y,
            0.4 * r * math.cos(pose.theta),
            0.4 * r * math.sin(pose.theta),
            color=color,
            width=0.02 * r,
            head_width=0.12 * r,
        )
        for side in (+1.0, -1.0):
            cx = pose.x - side * r * math.sin(pose.theta)
            cy = pose.y + side * r * math.cos(pose.theta)
            ax.add_patch(plt.Circle((cx, cy), r, fill=False, color="gray", ls="--", alpha=0.5))

    ax.set_aspect("equal")
    ax.grid(True, alpha=0.3)
    ax.set_title(name)
    ax.legend(loc="best")
    out_dir = Path(__file__).resolve().parent / "outputs"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"dubins_{name.replace('-', '_')}.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"Saved: {out_path}")
    plt.show()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    params = VehicleParams(turning_radius=1.0, sample_step=0.05)
    planner = DubinsPlanner(params)
    for name, start, goal in SCENARIOS:
        poses, stats = planner.plan(start, goal)
        segs = ", ".join(f"{length:.2f}" for length in stats["segment_lengths"])
        print(f"{name}: word={stats['word']} length={stats['path_length']:.3f} segments=[{segs}]")
        plot(name, start, goal, poses, stats, params)


if __name__ == "__main__":
    main()
