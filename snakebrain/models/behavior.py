"""Behavioral enumerations shared by the decision pipeline."""

from __future__ import annotations

from enum import StrEnum


class Personality(StrEnum):
    """Behavioral archetype governing obstacle selection and goal choice."""

    HUNGRY = "hungry"  # eats food no matter what
    TIMID = "timid"  # avoids snakes at all costs
    HEADHUNTER = "headhunter"  # goes after other snakes' heads when bigger
    SNACKY = "snacky"  # eats food when it is safe to do so


class Mode(StrEnum):
    """Per-tick sub-state derived from relative snake sizes."""

    EAT = "eat"
    KILL = "kill"


class TieBreak(StrEnum):
    """Second key used when ranking opponent heads as targets."""

    SMALLEST_OPPONENT = "smallest_opponent"
    TARGET_LENGTH = "target_length"


class HazardPolicy(StrEnum):
    """How hazard cells are encoded in the occupancy grid."""

    IGNORE = "ignore"
    BLOCK = "block"


class Move(StrEnum):
    """The four move tokens accepted by the game server."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
