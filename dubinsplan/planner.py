import logging
import time
from typing import Dict, List, Optional, Tuple

from .path import DubinsPath, path_endpoint, path_segments, sample_many, shortest_path
from .robot import Pose, PoseLike, VehicleParams

logger = logging.getLogger(__name__)


class DubinsPlanner:
    """Obstacle-free planner that connects two poses with the shortest Dubins path."""

    def __init__(self, params: Optional[VehicleParams] = None):
        self.params = params if params is not None else VehicleParams()

    def plan(self, start: PoseLike, goal: PoseLike) -> Tuple[List[Pose], Dict[str, object]]:
        """Return sampled poses (goal endpoint last) and a stats dict."""
        if not self.params.sample_step > 0.0:
            raise ValueError(f"sample_step must be > 0, got {self.params.sample_step}")
        start_time = time.time()
        path = shortest_path(start, goal, self.params.turning_radius)

        poses: List[Pose] = []

        def collect(q: Pose, t: float) -> int:
            poses.append(q)
            return 0

        sample_many(path, self.params.sample_step, collect)
        # sampling stops short of the end; a zero-length path has no samples at all
        if path.length > self.params.endpoint_epsilon:
            poses.append(path_endpoint(path, epsilon=self.params.endpoint_epsilon))
        else:
            poses.append(path_endpoint(path, exact=True))
        elapsed = time.time() - start_time
        logger.info("planned %s path, length %.3f, %d samples", path.word, path.length, len(poses))
        return poses, self._stats(path, poses, elapsed)

    def _stats(self, path: DubinsPath, poses: List[Pose], elapsed: float) -> Dict[str, object]:
        return {
            "path": path,
            "path_length": path.length,
            "word": str(path.word),
            "segment_lengths": [length for _, length in path_segments(path)],
            "samples": len(poses),
            "time": elapsed,
            "trace_poses": [q.as_tuple() for q in poses],
        }
