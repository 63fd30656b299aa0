"""Target selection: which food cell or opponent head to go after.

Targets are ranked with Euclidean distance, which separates candidates more
finely than the grid metric used by the search itself.
"""

from __future__ import annotations

import logging
import math

from snakebrain.errors import NoGoalCandidate, UnimplementedPersonality
from snakebrain.models.behavior import Mode, Personality, TieBreak
from snakebrain.models.board import Board, Coord, Snake

logger = logging.getLogger(__name__)


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance between two game-space cells."""
    return math.hypot(b.x - a.x, b.y - a.y)


def find_food_target(board: Board, head: Coord) -> Coord:
    """Choose the food cell to go after.

    Alone on the board, the nearest food wins. With opponents around, food
    is ranked by our distance first; among equally close cells, the one
    whose nearest rival head is farthest away wins. Remaining ties keep the
    snapshot's food order.

    Raises:
        NoGoalCandidate: If there is no food on the board.
    """
    if not board.food:
        raise NoGoalCandidate("No food on the board")

    if len(board.snakes) <= 1:
        return min(board.food, key=lambda food: euclidean(head, food))

    opponents = board.opponents

    def rank(food: Coord) -> tuple[float, float]:
        nearest_rival = min(euclidean(s.head_cell, food) for s in opponents)
        return (euclidean(head, food), -nearest_rival)

    ranked = [(rank(food), food) for food in board.food]
    logger.debug("Food ranking: %s", [(key, food.as_tuple()) for key, food in ranked])
    return min(ranked, key=lambda item: item[0])[1]


def _tie_break_size(opponents: list[Snake], target: Snake, tie_break: TieBreak) -> int:
    if tie_break == TieBreak.TARGET_LENGTH:
        return target.size
    # Identical for every candidate, so only distance discriminates.
    return min(s.size for s in opponents)


def find_prey_target(
    board: Board,
    head: Coord,
    tie_break: TieBreak = TieBreak.SMALLEST_OPPONENT,
) -> Coord:
    """Choose the opponent head to go after.

    Candidates are ranked by ``(distance to their head, size)`` where the
    size term depends on ``tie_break``. Heads at distance zero are skipped.
    Ties keep the snapshot's snake order.

    Raises:
        NoGoalCandidate: If there is no opponent to target.
    """
    opponents = board.opponents
    ranked: list[tuple[tuple[float, int], Snake]] = []
    for snake in opponents:
        distance = euclidean(head, snake.head_cell)
        if distance == 0.0:
            continue
        ranked.append(((distance, _tie_break_size(opponents, snake, tie_break)), snake))

    if not ranked:
        raise NoGoalCandidate("No opponent heads to target")

    logger.debug("Prey ranking: %s", [(key, s.id) for key, s in ranked])
    key, prey = min(ranked, key=lambda item: item[0])
    logger.debug("Targeting snake %s (%s) at %s", prey.id, prey.name, key)
    return prey.head_cell


def select_goal(
    personality: Personality,
    mode: Mode,
    board: Board,
    head: Coord,
    tie_break: TieBreak = TieBreak.SMALLEST_OPPONENT,
) -> Coord:
    """Pick the goal cell for this tick in game space.

    Raises:
        UnimplementedPersonality: For personalities without a goal rule.
        NoGoalCandidate: If the chosen rule has nothing to target.
    """
    if personality == Personality.SNACKY:
        return find_food_target(board, head)
    if personality == Personality.HEADHUNTER:
        if mode == Mode.KILL:
            return find_prey_target(board, head, tie_break)
        return find_food_target(board, head)
    raise UnimplementedPersonality(f"Personality has no goal rule: {personality.value}")
