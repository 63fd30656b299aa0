"""CLI option models and parser helpers."""

from __future__ import annotations

import argparse
from enum import StrEnum

from snakebrain.models.behavior import Personality


class LogFormat(StrEnum):
    """CLI log formatter mode."""

    READABLE = "readable"
    JSON = "json"


def build_arg_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(prog="snakebrain", description="Goal-seeking Battlesnake")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Serve the Battlesnake webhook API")
    serve_parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    serve_parser.add_argument("--host", type=str, default=None, help="Bind host override")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port override")
    serve_parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=[fmt.value for fmt in LogFormat],
        help="Terminal log format",
    )

    decide_parser = subparsers.add_parser(
        "decide", help="Decide one move from a saved /move request body"
    )
    decide_parser.add_argument("snapshot", type=str, help="Path to a JSON game state")
    decide_parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    decide_parser.add_argument(
        "--personality",
        type=str,
        default=None,
        choices=[p.value for p in Personality],
        help="Personality override",
    )
    decide_parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=[fmt.value for fmt in LogFormat],
        help="Terminal log format",
    )
    return parser
