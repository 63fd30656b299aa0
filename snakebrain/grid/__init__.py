"""Grid-space machinery: coordinate mapping, occupancy encoding and search."""

from snakebrain.grid.coords import GridPos, to_game, to_grid
from snakebrain.grid.encoder import OccupancyGrid, encode_board, obstacle_segments
from snakebrain.grid.search import PathResult, find_path, manhattan

__all__ = [
    "GridPos",
    "OccupancyGrid",
    "PathResult",
    "encode_board",
    "find_path",
    "manhattan",
    "obstacle_segments",
    "to_game",
    "to_grid",
]
