"""Strategy package: mode classification, goal selection and move resolution."""

from snakebrain.strategy.goals import (
    euclidean,
    find_food_target,
    find_prey_target,
    select_goal,
)
from snakebrain.strategy.moves import (
    FALLBACK_PRIORITY,
    direction_between,
    fallback_move,
    resolve_move,
)
from snakebrain.strategy.personality import classify_mode

__all__ = [
    "FALLBACK_PRIORITY",
    "classify_mode",
    "direction_between",
    "euclidean",
    "fallback_move",
    "find_food_target",
    "find_prey_target",
    "resolve_move",
    "select_goal",
]
