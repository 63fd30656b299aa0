"""Board snapshot models for the Battlesnake wire format.

All coordinates in this module are in game space: origin bottom-left,
``y`` increasing upward.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field


class Coord(BaseModel):
    """A cell on the board in game space."""

    x: Annotated[int, Field(ge=0)] = Field(..., description="Column, 0 at the left edge")
    y: Annotated[int, Field(ge=0)] = Field(..., description="Row, 0 at the bottom edge")

    model_config = {"frozen": True, "extra": "ignore"}

    def as_tuple(self) -> tuple[int, int]:
        """Get the cell as an ``(x, y)`` tuple."""
        return (self.x, self.y)


class Snake(BaseModel):
    """A snake on the board.

    ``body[0]`` is the head. Segments may repeat when the snake has just
    eaten or at the start of a game.
    """

    id: str = Field(..., min_length=1, description="Unique snake identifier")
    name: str = Field(default="", description="Display name")
    health: int = Field(default=100, ge=0, description="Remaining health")
    body: list[Coord] = Field(..., min_length=1, description="Segments, head first")
    head: Coord | None = Field(default=None, description="Head cell (same as body[0])")
    length: int | None = Field(default=None, ge=0, description="Reported length")
    latency: str | None = Field(default=None, description="Last response latency")
    shout: str | None = Field(default=None, description="Last shout")
    squad: str | None = Field(default=None, description="Squad identifier")
    customizations: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def head_cell(self) -> Coord:
        """Get the head cell, preferring the explicit ``head`` field."""
        return self.head if self.head is not None else self.body[0]

    @property
    def size(self) -> int:
        """Number of body segments, duplicates included."""
        return len(self.body)


class Board(BaseModel):
    """The board at one tick."""

    height: Annotated[int, Field(gt=0)] = Field(..., description="Number of rows")
    width: Annotated[int, Field(gt=0)] = Field(..., description="Number of columns")
    food: list[Coord] = Field(default_factory=list, description="Food cells")
    hazards: list[Coord] = Field(default_factory=list, description="Hazard cells")
    snakes: list[Snake] = Field(default_factory=list, description="All snakes on the board")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def opponents(self) -> list[Snake]:
        """Every snake except the controlled one at index 0."""
        return self.snakes[1:]

    def contains(self, coord: Coord) -> bool:
        """Check whether a cell lies on the board."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height


class Ruleset(BaseModel):
    """Ruleset the game is played under."""

    name: str = Field(default="standard")
    version: str = Field(default="")
    settings: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "extra": "ignore"}


class Game(BaseModel):
    """Game metadata sent with every request."""

    id: str = Field(..., min_length=1, description="Game identifier")
    ruleset: Ruleset = Field(default_factory=Ruleset)
    map: str = Field(default="standard")
    timeout: int = Field(default=500, ge=0, description="Move deadline in milliseconds")
    source: str = Field(default="")

    model_config = {"frozen": True, "extra": "ignore"}


class GameState(BaseModel):
    """Request body of the ``/start``, ``/move`` and ``/end`` endpoints."""

    game: Game
    turn: int = Field(default=0, ge=0)
    board: Board
    you: Snake

    model_config = {"frozen": True, "extra": "ignore"}

    def ordered_board(self) -> Board:
        """Get the board with ``you`` moved to index 0 of the snake list.

        The decision pipeline assumes the controlled snake comes first. If
        ``you`` is not on the board (e.g. a partial snapshot), it is
        prepended.
        """
        others = [s for s in self.board.snakes if s.id != self.you.id]
        mine = next((s for s in self.board.snakes if s.id == self.you.id), self.you)
        return self.board.model_copy(update={"snakes": [mine, *others]})
