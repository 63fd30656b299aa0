"""CLI entrypoint for serving and debugging the snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from snakebrain.cli.helpers import _configure_logging
from snakebrain.cli.options import LogFormat, build_arg_parser
from snakebrain.config.loader import Config, load_config
from snakebrain.core.decision import DecisionEngine
from snakebrain.models.behavior import Personality
from snakebrain.models.board import GameState
from snakebrain.server.app import create_app

logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace) -> Config:
    """Load config and reconfigure logging from it."""
    config = load_config(args.config)
    _configure_logging(
        level=config.logging.level,
        log_format=str(args.log_format or config.logging.format),
    )
    return config


def serve_command(args: argparse.Namespace) -> int:
    """Run the webhook server until interrupted."""
    import uvicorn

    config = _load(args)
    host = str(args.host or config.server.host)
    port = int(args.port or config.server.port)
    app = create_app(config=config)

    logger.info(
        "[SERVE] personality=%s listening on http://%s:%s",
        config.strategy.personality.value,
        host,
        port,
    )
    uvicorn.run(app, host=host, port=port, log_level="warning", access_log=False)
    return 0


def decide_command(args: argparse.Namespace) -> int:
    """Decide one move for a saved game state and print it."""
    config = _load(args)
    if args.personality:
        config = config.model_copy(
            update={
                "strategy": config.strategy.model_copy(
                    update={"personality": Personality(args.personality)}
                )
            }
        )

    state = GameState.model_validate_json(Path(args.snapshot).read_text())
    decision = DecisionEngine(config.decision_config()).decide(state)

    print(json.dumps(decision.model_dump(mode="json", exclude={"board_rows"}), indent=2))
    print("\n".join(decision.board_rows))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint function."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Configure a sane bootstrap logger before config loading.
    _configure_logging(
        level="INFO",
        log_format=str(getattr(args, "log_format", None) or LogFormat.READABLE.value),
    )

    try:
        if args.command == "serve":
            return serve_command(args)
        if args.command == "decide":
            return decide_command(args)
        raise ValueError(f"Unsupported command: {args.command}")
    except Exception as exc:
        logger.error("[BOOT] CLI execution failed: %s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
