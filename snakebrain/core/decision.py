"""Decision engine that turns a board snapshot into a move.

One call to ``DecisionEngine.decide`` is one tick:

1. Classify the mode (eat or kill) from relative snake sizes
2. Encode the board into an occupancy grid for the personality
3. Select a goal cell (food or an opponent head)
4. Search a shortest path from our head to the goal
5. Resolve the first step of the path into a move

Any failure along the way is a ``DecisionError``. Unless fallback is
disabled, it is logged and answered with the first passable neighbour in
a fixed direction priority, so every tick yields a legal move token.

Example:
    >>> from snakebrain.core.decision import DecisionEngine
    >>>
    >>> engine = DecisionEngine()
    >>> decision = engine.decide(game_state)
    >>> print(decision.move, decision.mode, decision.goal)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime

from snakebrain.errors import DecisionError
from snakebrain.grid.coords import to_game, to_grid
from snakebrain.grid.encoder import OccupancyGrid, encode_board
from snakebrain.grid.search import find_path
from snakebrain.models.behavior import HazardPolicy, Mode, Personality, TieBreak
from snakebrain.models.board import Board, Coord, GameState
from snakebrain.models.decisions import MoveDecision
from snakebrain.strategy.goals import select_goal
from snakebrain.strategy.moves import fallback_move, resolve_move
from snakebrain.strategy.personality import classify_mode

logger = logging.getLogger(__name__)


@dataclass
class DecisionConfig:
    """Configuration for the decision engine.

    Attributes:
        personality: Behavioral archetype used every tick.
        tie_break: Second ranking key for opponent heads.
        hazard_policy: Whether hazards block the search.
        fallback_enabled: Answer failures with a fallback move instead of
            raising.
    """

    personality: Personality = Personality.HEADHUNTER
    tie_break: TieBreak = TieBreak.SMALLEST_OPPONENT
    hazard_policy: HazardPolicy = HazardPolicy.IGNORE
    fallback_enabled: bool = True


class DecisionEngine:
    """Goal-seeking move selection for a single snake.

    The engine keeps no state between ticks; each call builds its grid,
    goal and path from the snapshot it is given.
    """

    def __init__(self, config: DecisionConfig | None = None) -> None:
        """Initialize the decision engine.

        Args:
            config: Engine configuration. Uses defaults if None.
        """
        self._config = config or DecisionConfig()
        logger.debug(
            f"DecisionEngine initialized: personality={self._config.personality}, "
            f"tie_break={self._config.tie_break}, hazards={self._config.hazard_policy}"
        )

    @property
    def config(self) -> DecisionConfig:
        """Get the engine configuration."""
        return self._config

    def decide(self, state: GameState) -> MoveDecision:
        """Decide the move for one tick.

        Args:
            state: The ``/move`` request body.

        Returns:
            The chosen move and how it was reached.

        Raises:
            DecisionError: Only when fallback is disabled and the pipeline
                fails.
        """
        return self.decide_board(state.ordered_board(), turn=state.turn)

    def decide_board(self, board: Board, turn: int = 0) -> MoveDecision:
        """Decide the move for a board whose first snake is ours."""
        start_time = time.time()
        personality = self._config.personality
        me = board.snakes[0]
        head = me.head_cell

        mode = classify_mode(board, me, personality)
        logger.debug(f"Snake mode: {mode}")

        grid = encode_board(personality, board, me, self._config.hazard_policy)

        goal: Coord | None = None
        try:
            goal = select_goal(personality, mode, board, head, self._config.tie_break)
            result = find_path(grid, to_grid(board, head), to_grid(board, goal))
            move = resolve_move(result.path, board, head)
        except DecisionError as e:
            if not self._config.fallback_enabled:
                raise
            logger.warning(f"Decision failed on turn {turn} ({e.kind}): {e}")
            return self.create_fallback_decision(
                board,
                grid,
                mode=mode,
                turn=turn,
                reason=f"{e.kind}: {e}",
                goal=goal,
                start_time=start_time,
            )

        duration_ms = (time.time() - start_time) * 1000
        path = [to_game(board, pos) for pos in result.path]
        logger.info(f"MOVE {turn}: {move}")
        logger.debug(
            f"Goal {goal.as_tuple()} cost={result.cost} path={[c.as_tuple() for c in path]} "
            f"decided in {duration_ms:.1f}ms"
        )
        return MoveDecision(
            move=move,
            personality=personality,
            mode=mode,
            goal=goal,
            path=path,
            cost=result.cost,
            board_rows=grid.rows,
            turn=turn,
            duration_ms=duration_ms,
            timestamp=datetime.now(),
        )

    def fallback(self, state: GameState, reason: str) -> MoveDecision:
        """Answer a tick with the fallback move, skipping goal selection.

        Used by callers that let ``decide`` raise and still owe the game
        server a move.
        """
        board = state.ordered_board()
        me = board.snakes[0]
        mode = classify_mode(board, me, self._config.personality)
        grid = encode_board(self._config.personality, board, me, self._config.hazard_policy)
        return self.create_fallback_decision(
            board, grid, mode=mode, turn=state.turn, reason=reason
        )

    def create_fallback_decision(
        self,
        board: Board,
        grid: OccupancyGrid,
        mode: Mode,
        turn: int = 0,
        reason: str = "Fallback due to error",
        goal: Coord | None = None,
        start_time: float | None = None,
    ) -> MoveDecision:
        """Create a safe fallback decision when planning fails.

        Args:
            board: Board with our snake first.
            grid: Occupancy grid already built for this tick.
            mode: Mode computed for this tick.
            turn: Game turn.
            reason: Why the fallback is being used.
            goal: Goal that was selected before the failure, if any.
            start_time: ``time.time()`` at the start of the tick.

        Returns:
            Fallback MoveDecision.
        """
        move = fallback_move(grid, board, board.snakes[0].head_cell)
        duration_ms = (time.time() - start_time) * 1000 if start_time is not None else 0.0
        logger.info(f"MOVE {turn}: {move} (fallback)")
        return MoveDecision(
            move=move,
            personality=self._config.personality,
            mode=mode,
            goal=goal,
            fallback=True,
            reason=reason,
            board_rows=grid.rows,
            turn=turn,
            duration_ms=duration_ms,
            timestamp=datetime.now(),
        )
