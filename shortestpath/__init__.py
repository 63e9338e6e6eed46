"""
Shortest Path - Cheapest routes around colored obstacles in images.

The core is a generic uniform-cost search over any hashable node type,
driven by a caller-supplied successor function. The grid adapter turns an
image into such a graph, treating red pixels as blocked and moving with
unit steps plus knight-like jumps.

Main API:
    - shortest_path_with_cost: Generic search returning (path, cost) or None
    - find_path: Path between two pixels of an image or PixelGrid
    - PixelGrid: Blocking mask as an implicit graph
    - PathResult: Dataclass for grid pathfinding results
    - Road: Distance along a polyline

Example:
    >>> from shortestpath import load_image, find_path, draw_path, save_image
    >>>
    >>> image = load_image('input/input.png')
    >>> result = find_path(image, start=(570, 100), goal=(320, 300))
    >>> print(result.summary())
    >>> save_image(draw_path(image, result.path), 'output/output.png')
"""

from .search import shortest_path_with_cost, shortest_path, reconstruct_path

from .moves import (
    Direction,
    DIRECTIONS,
    UNIT_DIRECTIONS,
    KNIGHT_DIRECTIONS,
    FOUR_DIRECTIONS,
    MOVE_SETS,
    make_directions,
    move_cost,
)

from .grid import PixelGrid, find_path, is_red, red_blocking_mask

from .result import PathResult

from .image_io import load_image, save_image

from .visualization import draw_path, draw_road, annotate_road_distances

from .road import Vec, LineSegment, Road, default_road

from .config import PathConfig, RoadConfig

__all__ = [
    # Search engine
    'shortest_path_with_cost',
    'shortest_path',
    'reconstruct_path',

    # Cost model
    'Direction',
    'DIRECTIONS',
    'UNIT_DIRECTIONS',
    'KNIGHT_DIRECTIONS',
    'FOUR_DIRECTIONS',
    'MOVE_SETS',
    'make_directions',
    'move_cost',

    # Grid adapter
    'PixelGrid',
    'find_path',
    'is_red',
    'red_blocking_mask',
    'PathResult',

    # Image I/O and rendering
    'load_image',
    'save_image',
    'draw_path',
    'draw_road',
    'annotate_road_distances',

    # Polyline utility
    'Vec',
    'LineSegment',
    'Road',
    'default_road',

    # Configuration
    'PathConfig',
    'RoadConfig',
]
