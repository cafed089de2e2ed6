"""
Dubins path synthesis for forward-only vehicles with a minimum turning radius.
Exports:
- shortest_path / path_for_word: build a DubinsPath between two poses
- sample / sample_many / sample_path / path_endpoint / extract_subpath
- DubinsPlanner: config-driven wrapper returning sampled poses and stats
"""

from .errors import DubinsError, InvalidRadiusError, NoPathError, ParameterOutOfRangeError
from .path import (
    DubinsPath,
    extract_subpath,
    normalized_problem,
    path_endpoint,
    path_for_word,
    path_length,
    path_segments,
    path_type,
    sample,
    sample_many,
    sample_path,
    segment_length,
    segment_length_normalized,
    shortest_path,
)
from .planner import DubinsPlanner
from .primitives import DubinsWord, SegmentType
from .robot import Pose, VehicleParams, propagate

__all__ = [
    "DubinsError",
    "InvalidRadiusError",
    "NoPathError",
    "ParameterOutOfRangeError",
    "DubinsPath",
    "DubinsPlanner",
    "DubinsWord",
    "SegmentType",
    "Pose",
    "VehicleParams",
    "propagate",
    "shortest_path",
    "path_for_word",
    "normalized_problem",
    "path_length",
    "segment_length",
    "segment_length_normalized",
    "path_type",
    "path_segments",
    "sample",
    "sample_many",
    "sample_path",
    "path_endpoint",
    "extract_subpath",
]
