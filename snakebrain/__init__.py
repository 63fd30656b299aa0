"""snakebrain: goal-seeking Battlesnake decision engine."""

__version__ = "0.1.0"
