"""Shortest-path search over an occupancy grid.

The grid is turned into a directed ``networkx`` graph (an edge ``u -> v``
exists when ``v`` is a passable neighbour of ``u``) and searched with A*
using the Manhattan distance as heuristic. Moves are four-directional with
unit cost, so the heuristic is admissible and the returned path is optimal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import networkx as nx

from snakebrain.errors import NoPathFound
from snakebrain.grid.coords import GridPos
from snakebrain.grid.encoder import OccupancyGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    """An ordered grid path and its total step cost.

    ``path[0]`` is always the start position.
    """

    path: tuple[GridPos, ...]
    cost: int

    @property
    def next_step(self) -> GridPos | None:
        """Get the first position after the start, if any."""
        return self.path[1] if len(self.path) > 1 else None


def manhattan(a: GridPos, b: GridPos) -> int:
    """L1 distance between two grid positions."""
    return abs(a.col - b.col) + abs(a.row - b.row)


def build_graph(grid: OccupancyGrid) -> nx.DiGraph:
    """Build the successor graph for a grid.

    Blocked cells are still nodes (the snake's own head may be one) but have
    no incoming edges, so they can be left but never entered.
    """
    graph = nx.DiGraph()
    for row in range(grid.height):
        for col in range(grid.width):
            pos = GridPos(col, row)
            graph.add_node(pos)
            for nxt, cost in grid.successors(pos):
                graph.add_edge(pos, nxt, weight=cost)
    return graph


def find_path(grid: OccupancyGrid, start: GridPos, goal: GridPos) -> PathResult:
    """Find the lowest-cost path from ``start`` to ``goal``.

    Args:
        grid: Occupancy grid to search.
        start: Start position (the snake's head in grid space).
        goal: Target position.

    Returns:
        The path including ``start`` and its cost.

    Raises:
        NoPathFound: If the goal cannot be reached from the start.
    """
    if not grid.in_bounds(start) or not grid.in_bounds(goal):
        raise NoPathFound(
            f"Start {start} or goal {goal} is outside the {grid.width}x{grid.height} grid"
        )

    graph = build_graph(grid)
    try:
        path = nx.astar_path(graph, start, goal, heuristic=manhattan, weight="weight")
    except nx.NetworkXNoPath as e:
        raise NoPathFound(f"No path from {start} to {goal}") from e

    cost = int(nx.path_weight(graph, path, weight="weight")) if len(path) > 1 else 0
    logger.debug("Path %s -> %s cost=%s: %s", start, goal, cost, path)
    return PathResult(path=tuple(GridPos(*p) for p in path), cost=cost)
