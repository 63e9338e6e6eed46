"""
PixelGrid - Image grid as an implicit pathfinding graph.

Wraps a 2D blocking mask as a graph where:
- Nodes are (x, y) pixel coordinates
- Edges follow a move set (see shortestpath.moves)
- Edge weights are the integer move costs; blocked pixels have no edges

Blocking is derived from pixel color: strongly red pixels are obstacles.
"""

from typing import List, Tuple, Optional, Sequence, Union
import numpy as np

from .moves import Direction, DIRECTIONS
from .result import PathResult, Timer
from .search import shortest_path_with_cost

Point = Tuple[int, int]

# Red obstacle thresholds (8-bit channels)
MIN_RED = 0xE0
MAX_GREEN = 0x40
MAX_BLUE = 0x40


def is_red(
    color: Union[int, Sequence[int]],
    min_red: int = MIN_RED,
    max_green: int = MAX_GREEN,
    max_blue: int = MAX_BLUE
) -> bool:
    """
    Check whether a color counts as an obstacle.

    Args:
        color: Packed 0xRRGGBB integer (alpha bits ignored) or (r, g, b)
        min_red: Red channel must be strictly above this
        max_green: Green channel must be at most this
        max_blue: Blue channel must be at most this
    """
    if isinstance(color, (int, np.integer)):
        r = (int(color) >> 16) & 0xFF
        g = (int(color) >> 8) & 0xFF
        b = int(color) & 0xFF
    else:
        r, g, b = (int(v) for v in color[:3])
    return r > min_red and g <= max_green and b <= max_blue


def red_blocking_mask(
    image: np.ndarray,
    min_red: int = MIN_RED,
    max_green: int = MAX_GREEN,
    max_blue: int = MAX_BLUE
) -> np.ndarray:
    """
    Create blocking mask from an RGB image.

    Args:
        image: (H, W, 3) or (H, W, 4) uint8 image
        min_red: Red channel must be strictly above this
        max_green: Green channel must be at most this
        max_blue: Blue channel must be at most this

    Returns:
        Boolean mask indexed [y, x] where True = blocked
    """
    if image.ndim != 3 or image.shape[2] < 3:
        raise ValueError(f"Expected (H, W, 3) RGB image, got shape {image.shape}")

    rgb = image[:, :, :3].astype(np.int32)
    return (
        (rgb[:, :, 0] > min_red) &
        (rgb[:, :, 1] <= max_green) &
        (rgb[:, :, 2] <= max_blue)
    )


class PixelGrid:
    """
    Pixel grid with blocked cells, queried lazily by the search.
    """

    def __init__(
        self,
        blocking_mask: np.ndarray,
        directions: Sequence[Direction] = DIRECTIONS
    ):
        """
        Initialize pixel grid.

        Args:
            blocking_mask: 2D boolean mask indexed [y, x], True = blocked
            directions: Move set used to generate neighbors
        """
        if blocking_mask.ndim != 2:
            raise ValueError(f"Blocking mask must be 2D, got {blocking_mask.ndim}D")

        self.blocking_mask = blocking_mask.astype(bool)
        self.height, self.width = blocking_mask.shape
        self.directions = list(directions)

    @classmethod
    def from_image(
        cls,
        image: np.ndarray,
        directions: Sequence[Direction] = DIRECTIONS,
        **thresholds
    ) -> 'PixelGrid':
        """Build a grid whose red pixels are blocked."""
        return cls(red_blocking_mask(image, **thresholds), directions)

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid(self, point: Point) -> bool:
        """Check if (x, y) is within bounds and not blocked."""
        if not self.in_bounds(point):
            return False
        x, y = point
        return not self.blocking_mask[y, x]

    def successors(self, point: Point) -> List[Tuple[Point, int]]:
        """
        Get reachable neighbors with move costs.

        Returns list of ((x, y), cost) tuples.
        """
        result = []
        for direction in self.directions:
            neighbor = direction.apply(point)
            if self.is_valid(neighbor):
                result.append((neighbor, direction.cost))
        return result


def find_path(
    grid: Union[PixelGrid, np.ndarray],
    start: Point,
    goal: Point,
    directions: Optional[Sequence[Direction]] = None,
    stop_at_first_target: bool = False
) -> PathResult:
    """
    Find the cheapest path between two pixels avoiding red obstacles.

    Args:
        grid: PixelGrid, or an RGB image array to classify
        start: (x, y) start pixel
        goal: (x, y) goal pixel
        directions: Move set; defaults to the grid's own (or DIRECTIONS)
        stop_at_first_target: Stop once the goal is settled

    Returns:
        PathResult with path and statistics. A start pixel that is out of
        bounds or blocked gives success=False, even when it equals goal.
    """
    if not isinstance(grid, PixelGrid):
        grid = PixelGrid.from_image(
            grid, directions if directions is not None else DIRECTIONS
        )
    elif directions is not None:
        grid = PixelGrid(grid.blocking_mask, directions)

    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))

    if not grid.is_valid(start):
        return PathResult(
            path=[],
            start=start,
            goal=goal,
            success=False,
            total_cost=float('inf')
        )

    expanded = 0

    def counted_successors(point: Point) -> List[Tuple[Point, int]]:
        nonlocal expanded
        expanded += 1
        return grid.successors(point)

    with Timer() as timer:
        found = shortest_path_with_cost(
            start,
            lambda point: point == goal,
            counted_successors,
            stop_at_first_target=stop_at_first_target
        )

    if found is None:
        return PathResult(
            path=[],
            start=start,
            goal=goal,
            success=False,
            total_cost=float('inf'),
            nodes_expanded=expanded,
            computation_time=timer.elapsed
        )

    path, cost = found
    return PathResult(
        path=path,
        start=start,
        goal=goal,
        total_cost=cost,
        success=True,
        nodes_expanded=expanded,
        computation_time=timer.elapsed
    )
