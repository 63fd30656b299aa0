"""Error taxonomy for per-tick decision failures.

Every failure the pipeline can hit while choosing a move is a
``DecisionError``. None of them is fatal: the decision engine classifies
the error, logs it and answers with a fallback move.
"""

from __future__ import annotations

from enum import StrEnum


class DecisionErrorKind(StrEnum):
    """Typed decision failure classes."""

    UNIMPLEMENTED_PERSONALITY = "unimplemented_personality"
    NO_GOAL_CANDIDATE = "no_goal_candidate"
    NO_PATH_FOUND = "no_path_found"
    PATH_TOO_SHORT = "path_too_short"


class DecisionError(Exception):
    """Base class for errors raised while deciding a move."""

    kind: DecisionErrorKind


class UnimplementedPersonality(DecisionError):
    """The personality has no goal-selection rule."""

    kind = DecisionErrorKind.UNIMPLEMENTED_PERSONALITY


class NoGoalCandidate(DecisionError):
    """No food (food seeking) or no opponent (head hunting) to target."""

    kind = DecisionErrorKind.NO_GOAL_CANDIDATE


class NoPathFound(DecisionError):
    """The search exhausted every reachable cell without reaching the goal."""

    kind = DecisionErrorKind.NO_PATH_FOUND


class PathTooShort(DecisionError):
    """The path has no step beyond the start cell."""

    kind = DecisionErrorKind.PATH_TOO_SHORT
