"""
Move Set - Allowed grid displacements and their integer costs.

Costs are Euclidean lengths scaled by COST_SCALE and truncated, so all
arithmetic in the search stays in integers.

The default move set mixes the 8 unit steps with 8 knight-like moves so
that near-diagonal travel is not penalized against axis-aligned travel and
paths come out as straight lines rather than staircases.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

COST_SCALE = 100


def move_cost(dx: int, dy: int) -> int:
    """Scaled Euclidean length of a displacement, truncated to int."""
    return int(math.sqrt(dx * dx + dy * dy) * COST_SCALE)


@dataclass(frozen=True)
class Direction:
    """A single allowed displacement with its precomputed cost."""
    dx: int
    dy: int
    cost: int = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'cost', move_cost(self.dx, self.dy))

    def apply(self, point: Tuple[int, int]) -> Tuple[int, int]:
        return point[0] + self.dx, point[1] + self.dy


def make_directions(offsets: Iterable[Tuple[int, int]]) -> List[Direction]:
    """Build a move set from raw (dx, dy) offsets."""
    return [Direction(dx, dy) for dx, dy in offsets]


UNIT_DIRECTIONS = make_directions([
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (1, -1), (1, 1), (-1, 1), (-1, -1),
])

KNIGHT_DIRECTIONS = make_directions([
    (2, -1), (2, 1), (-2, 1), (-2, -1),
    (1, -2), (1, 2), (-1, 2), (-1, -2),
])

FOUR_DIRECTIONS = UNIT_DIRECTIONS[:4]

DIRECTIONS = UNIT_DIRECTIONS + KNIGHT_DIRECTIONS

MOVE_SETS = {
    '4': FOUR_DIRECTIONS,
    '8': UNIT_DIRECTIONS,
    '16': DIRECTIONS,
}
