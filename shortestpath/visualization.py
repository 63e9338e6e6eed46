"""
Path Visualization - Render paths and road annotations onto images.

All functions draw on a copy and return it as a uint8 RGB array.
"""

from typing import List, Optional, Tuple
import numpy as np
from PIL import Image, ImageDraw

from .road import Road, Vec


def _to_pil(image: np.ndarray) -> Image.Image:
    return Image.fromarray(np.asarray(image, dtype=np.uint8)).convert('RGB')


def draw_path(
    image: np.ndarray,
    path: List[Tuple[int, int]],
    color: Tuple[int, int, int] = (0, 0, 0),
    dot_size: int = 5
) -> np.ndarray:
    """
    Mark every path point with a filled dot.

    Args:
        image: (H, W, 3) RGB image
        path: (x, y) points
        color: RGB dot color
        dot_size: Dot diameter; each point is the dot's top-left corner

    Returns:
        RGB image with dots (H, W, 3) as uint8

    Raises:
        ValueError: If dot_size is less than 1
    """
    if dot_size < 1:
        raise ValueError(f"dot_size must be at least 1, got {dot_size}")

    canvas = _to_pil(image)
    draw = ImageDraw.Draw(canvas)
    for x, y in path:
        draw.ellipse([x, y, x + dot_size - 1, y + dot_size - 1], fill=color)
    return np.array(canvas)


def draw_road(
    image: np.ndarray,
    road: Road,
    color: Tuple[int, int, int] = (0, 255, 0)
) -> np.ndarray:
    """Draw each road segment as a one pixel line."""
    canvas = _to_pil(image)
    draw = ImageDraw.Draw(canvas)
    for s in road.segments:
        draw.line([(s.a.x, s.a.y), (s.b.x, s.b.y)], fill=color, width=1)
    return np.array(canvas)


def sample_near_road(
    road: Road,
    samples_per_segment: int = 3,
    jitter: float = 10.0,
    rng: Optional[np.random.Generator] = None
) -> List[Tuple[Vec, float]]:
    """
    Pick random points near each segment with their distance from start.

    Returns:
        List of (point, distance_from_start) pairs
    """
    if rng is None:
        rng = np.random.default_rng()

    samples = []
    for s in road.segments:
        for _ in range(samples_per_segment):
            v = s(rng.random()) + jitter * Vec.random(rng)
            samples.append((v, road.distance_from_start(v)))
    return samples


def annotate_road_distances(
    image: np.ndarray,
    road: Road,
    samples_per_segment: int = 3,
    jitter: float = 10.0,
    color: Tuple[int, int, int] = (0, 255, 0),
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Label random points near the road with their integer distance from start.

    Args:
        image: (H, W, 3) RGB image
        road: Road to sample around
        samples_per_segment: Points drawn per segment
        jitter: Max offset of a point from the segment along each axis
        color: Text color
        rng: Random generator (fresh one if None)

    Returns:
        Annotated RGB image (H, W, 3) as uint8
    """
    canvas = _to_pil(image)
    draw = ImageDraw.Draw(canvas)
    for v, distance in sample_near_road(road, samples_per_segment, jitter, rng):
        # Anchored at the left end of the baseline
        draw.text((v.x, v.y), str(int(distance)), fill=color, anchor="ls")
    return np.array(canvas)
