"""Occupancy grid encoding of a board snapshot.

The grid marks every cell as passable or blocked. Which snake segments
count as obstacles depends on the personality: a head hunter leaves heads
open so it can path onto them, every other personality avoids whole
bodies. The grid is rebuilt from scratch every tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from snakebrain.grid.coords import GridPos, to_grid
from snakebrain.models.behavior import HazardPolicy, Personality
from snakebrain.models.board import Board, Coord, Snake

logger = logging.getLogger(__name__)

BLOCKED = "X"
PASSABLE = "1"

# Grid-space steps: up, down, left, right.
_NEIGHBOUR_STEPS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class OccupancyGrid:
    """Passable/blocked matrix in grid space.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        blocked: Grid positions that may not be entered.
    """

    width: int
    height: int
    blocked: frozenset[GridPos]

    def in_bounds(self, pos: GridPos) -> bool:
        """Check whether a position lies inside the grid."""
        return 0 <= pos.col < self.width and 0 <= pos.row < self.height

    def is_passable(self, pos: GridPos) -> bool:
        """Check whether a position is inside the grid and not blocked."""
        return self.in_bounds(pos) and pos not in self.blocked

    def successors(self, pos: GridPos) -> list[tuple[GridPos, int]]:
        """Get passable neighbours of a position with their step cost.

        Diagonals are never successors. The position itself does not need
        to be passable.
        """
        result: list[tuple[GridPos, int]] = []
        for d_col, d_row in _NEIGHBOUR_STEPS:
            nxt = GridPos(pos.col + d_col, pos.row + d_row)
            if self.is_passable(nxt):
                result.append((nxt, 1))
        return result

    @property
    def rows(self) -> list[str]:
        """Render the grid as one string per row, top row first."""
        return [
            "".join(
                BLOCKED if GridPos(col, row) in self.blocked else PASSABLE
                for col in range(self.width)
            )
            for row in range(self.height)
        ]

    def render(self) -> str:
        """Render the grid as a single newline-separated block."""
        return "\n".join(self.rows)


def obstacle_segments(snake: Snake, personality: Personality) -> list[Coord]:
    """Get the segments of a snake that count as obstacles.

    A head hunter skips the head and collapses repeated segments; every
    other personality treats the whole body as an obstacle.
    """
    if personality == Personality.HEADHUNTER:
        seen: set[tuple[int, int]] = set()
        unique: list[Coord] = []
        for segment in snake.body[1:]:
            key = segment.as_tuple()
            if key in seen:
                continue
            seen.add(key)
            unique.append(segment)
        return unique
    return list(snake.body)


def encode_board(
    personality: Personality,
    board: Board,
    me: Snake | None = None,
    hazard_policy: HazardPolicy = HazardPolicy.IGNORE,
) -> OccupancyGrid:
    """Build the occupancy grid for one tick.

    Args:
        personality: Decides which segments of each snake are obstacles.
        board: Snapshot to encode. Every snake is scanned, ourselves included.
        me: The controlled snake. Accepted for symmetry with the rest of the
            pipeline; it does not change which cells are blocked.
        hazard_policy: Whether hazard cells are blocked or left passable.

    Returns:
        The encoded grid.
    """
    blocked: set[GridPos] = set()
    for snake in board.snakes:
        for segment in obstacle_segments(snake, personality):
            if board.contains(segment):
                blocked.add(to_grid(board, segment))

    if hazard_policy == HazardPolicy.BLOCK:
        for hazard in board.hazards:
            if board.contains(hazard):
                blocked.add(to_grid(board, hazard))

    grid = OccupancyGrid(width=board.width, height=board.height, blocked=frozenset(blocked))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Occupancy grid (%s):\n%s", personality.value, grid.render())
    return grid
