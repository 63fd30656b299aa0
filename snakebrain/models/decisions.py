"""Decision models for representing the outcome of one tick."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, Field

from snakebrain.models.behavior import Mode, Move, Personality
from snakebrain.models.board import Coord


class MoveDecision(BaseModel):
    """A move chosen by the decision engine.

    Decisions are immutable records of how the move was reached: the mode,
    the goal, the planned path, or the reason the fallback was used.
    """

    move: Move = Field(..., description="Move token sent to the game server")
    personality: Personality = Field(..., description="Personality in effect")
    mode: Mode = Field(..., description="Mode computed for this tick")
    goal: Coord | None = Field(default=None, description="Target cell in game space")
    path: list[Coord] = Field(
        default_factory=list,
        description="Planned path in game space, starting at the head",
    )
    cost: Annotated[int, Field(ge=0)] = Field(default=0, description="Path step cost")
    fallback: bool = Field(default=False, description="Whether the fallback move was used")
    reason: str | None = Field(default=None, description="Why the fallback was used")
    board_rows: list[str] = Field(
        default_factory=list,
        description="Occupancy grid rows, top row first",
    )
    turn: int = Field(default=0, ge=0, description="Game turn")
    duration_ms: Annotated[float, Field(ge=0)] = Field(
        default=0.0, description="Time spent deciding"
    )
    timestamp: datetime = Field(
        default_factory=datetime.now,
        description="When the decision was made",
    )

    model_config = {"frozen": True}

    @property
    def planned(self) -> bool:
        """Check if the move came from a searched path."""
        return not self.fallback and len(self.path) > 1

    def to_response(self) -> dict[str, Any]:
        """Build the ``/move`` response body."""
        shout = f"{self.mode.value}: fallback" if self.fallback else self.mode.value
        return {"move": self.move.value, "shout": shout}
