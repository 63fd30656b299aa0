"""Translation between game space and grid space.

Game space is the snapshot's native system: origin bottom-left, ``y``
grows upward. Grid space is what the search works on: origin top-left,
``row`` grows downward. ``col`` and ``x`` are the same axis.
"""

from __future__ import annotations

from typing import NamedTuple

from snakebrain.models.board import Board, Coord


class GridPos(NamedTuple):
    """A cell in grid space."""

    col: int
    row: int


def to_grid(board: Board, coord: Coord) -> GridPos:
    """Convert a game-space cell to grid space."""
    return GridPos(coord.x, board.height - 1 - coord.y)


def to_game(board: Board, pos: GridPos) -> Coord:
    """Convert a grid-space cell back to game space."""
    return Coord(x=pos.col, y=board.height - 1 - pos.row)
