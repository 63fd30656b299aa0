"""Turning a path into a move token, and the safe fallback move."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from snakebrain.errors import PathTooShort
from snakebrain.grid.coords import GridPos, to_game, to_grid
from snakebrain.grid.encoder import OccupancyGrid
from snakebrain.models.behavior import Move
from snakebrain.models.board import Board, Coord

logger = logging.getLogger(__name__)

# Fixed priority used when no planned step is available.
FALLBACK_PRIORITY: tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)

_GAME_STEPS: dict[Move, tuple[int, int]] = {
    Move.UP: (0, 1),
    Move.DOWN: (0, -1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}


def direction_between(me: Coord, nxt: Coord) -> Move:
    """Get the move that takes ``me`` to the adjacent cell ``nxt``."""
    if me.y == nxt.y:
        if me.x - nxt.x == -1:
            return Move.RIGHT
        return Move.LEFT
    if me.y - nxt.y == -1:
        return Move.UP
    return Move.DOWN


def resolve_move(path: Sequence[GridPos], board: Board, head: Coord) -> Move:
    """Resolve the first step of a grid path into a move.

    Raises:
        PathTooShort: If the path has no step beyond the start cell.
    """
    if len(path) < 2:
        raise PathTooShort(f"Path has {len(path)} position(s); no next step")

    next_cell = to_game(board, path[1])
    logger.debug("Next grid step: %s, next game cell: %s", path[1], next_cell.as_tuple())
    return direction_between(head, next_cell)


def fallback_move(grid: OccupancyGrid, board: Board, head: Coord) -> Move:
    """Pick a move without a plan.

    Takes the first move in ``FALLBACK_PRIORITY`` that lands on a passable
    cell, then the first that at least stays on the board, then ``up``.
    """
    in_bounds: list[Move] = []
    for move in FALLBACK_PRIORITY:
        dx, dy = _GAME_STEPS[move]
        x, y = head.x + dx, head.y + dy
        # Coord rejects negative values.
        if x < 0 or y < 0:
            continue
        cell = Coord(x=x, y=y)
        if not board.contains(cell):
            continue
        if grid.is_passable(to_grid(board, cell)):
            return move
        in_bounds.append(move)

    if in_bounds:
        logger.warning("No passable neighbour around %s; moving %s", head.as_tuple(), in_bounds[0])
        return in_bounds[0]
    return Move.UP
