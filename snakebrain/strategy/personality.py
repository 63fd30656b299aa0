"""Mode classification from relative snake sizes."""

from __future__ import annotations

import logging

from snakebrain.models.behavior import Mode, Personality
from snakebrain.models.board import Board, Snake

logger = logging.getLogger(__name__)


def classify_mode(board: Board, me: Snake, personality: Personality) -> Mode:
    """Pick the behavioral mode for this tick.

    A head hunter switches to ``KILL`` once it is strictly longer than every
    opponent. All other personalities always eat. The mode is derived from
    the current snapshot only.
    """
    if personality != Personality.HEADHUNTER:
        return Mode.EAT

    largest = max((s.size for s in board.opponents), default=0)
    logger.debug("Our size: %s, largest opponent size: %s", me.size, largest)
    return Mode.KILL if me.size > largest else Mode.EAT
