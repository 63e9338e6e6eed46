"""
PathResult dataclass for grid pathfinding results.

Captures path, cost, search statistics and a mask helper for rendering.
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional
import numpy as np
import time


@dataclass
class PathResult:
    """
    Result of a grid pathfinding run.

    Path points are (x, y) pixel coordinates. The start point is not part of
    the path; the path ends at the goal.
    """
    path: List[Tuple[int, int]]
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None
    total_cost: float = 0.0
    path_length: int = 0
    success: bool = False

    # Performance metrics
    nodes_expanded: int = 0
    computation_time: float = 0.0

    def __post_init__(self):
        """Compute derived fields."""
        if self.path_length == 0:
            self.path_length = len(self.path)

    def to_mask(self, height: int, width: int) -> np.ndarray:
        """
        Create binary mask of path pixels.

        Args:
            height: Image height
            width: Image width

        Returns:
            Boolean mask indexed [y, x] where path pixels are True
        """
        mask = np.zeros((height, width), dtype=bool)
        for x, y in self.path:
            if 0 <= x < width and 0 <= y < height:
                mask[y, x] = True
        return mask

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "Path Result",
            f"  Start: {self.start}",
            f"  Goal: {self.goal}",
            f"  Success: {self.success}",
            f"  Path length: {self.path_length} steps",
            f"  Total cost: {self.total_cost}",
            f"  Nodes expanded: {self.nodes_expanded}",
            f"  Computation time: {self.computation_time:.3f}s",
        ]
        return '\n'.join(lines)


class Timer:
    """Simple context manager for timing operations."""

    def __init__(self):
        self.start_time = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, *args):
        self.elapsed = time.time() - self.start_time
