"""FastAPI application implementing the Battlesnake webhook API."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, Response

from snakebrain import __version__
from snakebrain.config.loader import Config, ConfigManager
from snakebrain.core.decision import DecisionEngine
from snakebrain.errors import DecisionError
from snakebrain.models.board import GameState

logger = logging.getLogger(__name__)

SERVER_HEADER = f"battlesnake/snakebrain/{__version__}"


def info_payload(config: Config) -> dict[str, Any]:
    """Build the info response describing the snake's appearance."""
    appearance = config.appearance
    return {
        "apiversion": "1",
        "author": appearance.author,
        "color": appearance.color,
        "head": appearance.head,
        "tail": appearance.tail,
        "version": appearance.version,
    }


def create_app(
    config: Config | None = None,
    engine: DecisionEngine | None = None,
) -> FastAPI:
    """Create the FastAPI app serving ``/``, ``/start``, ``/move`` and ``/end``.

    Args:
        config: Loaded configuration. Defaults are used if None.
        engine: Decision engine. If None, one is built from the live config
            and rebuilt whenever ``app.state.config_manager`` is updated.
    """
    manager = ConfigManager(config)
    app = FastAPI(title="snakebrain", version=__version__)
    app.state.config_manager = manager
    app.state.engine = engine or DecisionEngine(manager.config.decision_config())

    if engine is None:

        def rebuild_engine(new_config: Config) -> None:
            app.state.engine = DecisionEngine(new_config.decision_config())
            logger.info("Strategy now %s", new_config.strategy.personality.value)

        manager.subscribe(rebuild_engine)

    @app.middleware("http")
    async def identify_server(request: Request, call_next: Any) -> Response:
        response = await call_next(request)
        response.headers["Server"] = SERVER_HEADER
        return response

    @app.get("/")
    async def handle_info() -> dict[str, Any]:
        logger.info("INFO")
        return info_payload(manager.config)

    @app.post("/start")
    async def handle_start(state: GameState) -> str:
        logger.info(
            "GAME START %s (%sx%s, %s snakes)",
            state.game.id,
            state.board.width,
            state.board.height,
            len(state.board.snakes),
        )
        return "ok"

    @app.post("/move")
    def handle_move(state: GameState) -> dict[str, Any]:
        engine: DecisionEngine = app.state.engine
        try:
            decision = engine.decide(state)
        except DecisionError as e:
            # A failed tick still owes the game server a legal move.
            logger.warning("MOVE %s failed (%s): %s", state.turn, e.kind, e)
            decision = engine.fallback(state, reason=f"{e.kind}: {e}")
        return decision.to_response()

    @app.post("/end")
    async def handle_end(state: GameState) -> str:
        logger.info("GAME OVER %s after %s turns", state.game.id, state.turn)
        return "ok"

    return app
