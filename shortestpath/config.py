"""
Run configuration for the command-line entry points.

Defaults reproduce the reference runs: a path across input/input.png and
road distance labels on input/original.jpg.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .grid import MIN_RED, MAX_GREEN, MAX_BLUE


@dataclass
class PathConfig:
    """
    Settings for a path run.

    Attributes:
        input_path: Image whose red pixels are obstacles
        output_path: Where the rendered path is written
        start: (x, y) start pixel
        goal: (x, y) goal pixel
        moves: Move set key: '4', '8' or '16'
        stop_at_first_target: Stop the search once the goal is settled
        timestamp: Inject a timestamp into the output filename
        dot_size: Rendered dot diameter
        min_red, max_green, max_blue: Obstacle color thresholds
    """
    input_path: str = "input/input.png"
    output_path: str = "output/output.png"
    start: Tuple[int, int] = (570, 100)
    goal: Tuple[int, int] = (320, 300)
    moves: str = "16"
    stop_at_first_target: bool = False
    timestamp: bool = False
    dot_size: int = 5
    min_red: int = MIN_RED
    max_green: int = MAX_GREEN
    max_blue: int = MAX_BLUE


@dataclass
class RoadConfig:
    """Settings for a road annotation run."""
    input_path: str = "input/original.jpg"
    output_path: str = "output/output2.png"
    samples_per_segment: int = 3
    jitter: float = 10.0
    seed: Optional[int] = None
    timestamp: bool = False


def parse_point(text: str) -> Tuple[int, int]:
    """
    Parse 'x,y' into an integer point.

    Raises:
        ValueError: If text is not two comma separated integers
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise ValueError(f"Expected point as 'x,y', got {text!r}")
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise ValueError(f"Expected integer coordinates, got {text!r}") from None
