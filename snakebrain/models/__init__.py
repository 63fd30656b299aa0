"""Shared data models for snakebrain.

All models use Pydantic for validation and serialization.
"""

from snakebrain.models.behavior import HazardPolicy, Mode, Move, Personality, TieBreak
from snakebrain.models.board import Board, Coord, Game, GameState, Ruleset, Snake
from snakebrain.models.decisions import MoveDecision

__all__ = [
    "Board",
    "Coord",
    "Game",
    "GameState",
    "HazardPolicy",
    "Mode",
    "Move",
    "MoveDecision",
    "Personality",
    "Ruleset",
    "Snake",
    "TieBreak",
]
