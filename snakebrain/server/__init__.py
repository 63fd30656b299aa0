"""HTTP shell serving the Battlesnake webhook API."""

from snakebrain.server.app import create_app, info_payload

__all__ = ["create_app", "info_payload"]
