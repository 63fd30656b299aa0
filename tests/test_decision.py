"""Tests for the per-tick DecisionEngine pipeline."""

from __future__ import annotations

import logging

import pytest

from snakebrain.core.decision import DecisionConfig, DecisionEngine
from snakebrain.errors import NoGoalCandidate, NoPathFound, UnimplementedPersonality
from snakebrain.models.behavior import HazardPolicy, Mode, Move, Personality, TieBreak
from snakebrain.models.board import Board, Coord, Game, GameState, Snake


def _snake(snake_id: str, *cells: tuple[int, int]) -> Snake:
    """Helper to create a snake from (x, y) cells, head first."""
    return Snake(id=snake_id, name=snake_id, body=[Coord(x=x, y=y) for x, y in cells])


def _state(
    me: Snake,
    *others: Snake,
    food: list[tuple[int, int]] | None = None,
    hazards: list[tuple[int, int]] | None = None,
    turn: int = 7,
) -> GameState:
    board = Board(
        width=11,
        height=11,
        food=[Coord(x=x, y=y) for x, y in (food or [])],
        hazards=[Coord(x=x, y=y) for x, y in (hazards or [])],
        snakes=[me, *others],
    )
    return GameState(game=Game(id="game-1"), turn=turn, board=board, you=me)


def _engine(personality: Personality, **kwargs: object) -> DecisionEngine:
    return DecisionEngine(DecisionConfig(personality=personality, **kwargs))


class TestPlannedMoves:
    """The pipeline produces a searched move when a goal is reachable."""

    def test_snacky_walks_to_food(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        decision = _engine(Personality.SNACKY).decide(_state(me, food=[(8, 5)]))

        assert decision.move == Move.RIGHT
        assert decision.mode == Mode.EAT
        assert decision.goal == Coord(x=8, y=5)
        assert decision.cost == 3
        assert decision.path == [Coord(x=x, y=5) for x in range(5, 9)]
        assert decision.fallback is False
        assert decision.planned is True
        assert decision.turn == 7

    def test_headhunter_eats_when_not_longest(self) -> None:
        me = _snake("me", (2, 2), (2, 1), (2, 0))
        rival = _snake("rival", (8, 8), (8, 7), (8, 6), (8, 5))
        decision = _engine(Personality.HEADHUNTER).decide(
            _state(me, rival, food=[(2, 5), (9, 9)])
        )

        assert decision.mode == Mode.EAT
        assert decision.goal == Coord(x=2, y=5)
        assert decision.move == Move.UP
        assert decision.cost == 3

    def test_headhunter_hunts_when_longest(self) -> None:
        me = _snake("me", (1, 1), (1, 0), (0, 0), (0, 1), (0, 2))
        rival = _snake("rival", (4, 1), (5, 1), (6, 1))
        decision = _engine(Personality.HEADHUNTER).decide(_state(me, rival, food=[(9, 9)]))

        assert decision.mode == Mode.KILL
        assert decision.goal == Coord(x=4, y=1)
        assert decision.move == Move.RIGHT
        assert decision.path[-1] == Coord(x=4, y=1)

    def test_path_avoids_bodies(self) -> None:
        me = _snake("me", (5, 5), (4, 5), (3, 5))
        wall = _snake("wall", (6, 7), (6, 6), (6, 5), (6, 4), (6, 3), (6, 2))
        decision = _engine(Personality.SNACKY).decide(_state(me, wall, food=[(7, 5)]))

        assert decision.fallback is False
        blocked = set(wall.body)
        assert not any(cell in blocked for cell in decision.path[1:])
        assert decision.path[-1] == Coord(x=7, y=5)

    def test_you_is_moved_to_front(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        rival = _snake("rival", (0, 10), (0, 9))
        state = _state(me, food=[(8, 5)])
        state = state.model_copy(
            update={"board": state.board.model_copy(update={"snakes": [rival, me]})}
        )

        decision = _engine(Personality.HEADHUNTER).decide(state)

        # We are longer than the rival, so the rival's head is the target.
        assert decision.mode == Mode.KILL
        assert decision.goal == Coord(x=0, y=10)

    def test_board_rows_are_reported(self) -> None:
        me = _snake("me", (5, 5), (5, 4))
        decision = _engine(Personality.SNACKY).decide(_state(me, food=[(5, 8)]))
        assert len(decision.board_rows) == 11
        assert decision.board_rows[5][5] == "X"
        assert decision.board_rows[6][5] == "X"


class TestFallback:
    """Failures degrade to the fallback move instead of aborting."""

    def test_headhunter_alone_falls_back(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        decision = _engine(Personality.HEADHUNTER).decide(_state(me, food=[(8, 5)]))

        assert decision.mode == Mode.KILL
        assert decision.fallback is True
        assert decision.move == Move.UP
        assert decision.reason is not None
        assert decision.reason.startswith("no_goal_candidate")

    def test_enclosed_food_falls_back(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        fence = _snake("fence", (0, 1), (1, 1), (1, 0))
        decision = _engine(Personality.SNACKY).decide(_state(me, fence, food=[(0, 0)]))

        assert decision.fallback is True
        assert decision.goal == Coord(x=0, y=0)
        assert decision.move == Move.UP
        assert "no_path_found" in (decision.reason or "")
        assert decision.planned is False

    def test_no_food_falls_back(self) -> None:
        me = _snake("me", (0, 10), (0, 9))
        decision = _engine(Personality.SNACKY).decide(_state(me))
        assert decision.fallback is True
        assert decision.move == Move.RIGHT

    @pytest.mark.parametrize("personality", [Personality.HUNGRY, Personality.TIMID])
    def test_unimplemented_personality_falls_back(self, personality: Personality) -> None:
        me = _snake("me", (5, 5), (5, 4))
        decision = _engine(personality).decide(_state(me, food=[(8, 5)]))
        assert decision.fallback is True
        assert decision.move == Move.UP
        assert "unimplemented_personality" in (decision.reason or "")

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        me = _snake("me", (5, 5), (5, 4))
        with caplog.at_level(logging.WARNING, logger="snakebrain.core.decision"):
            _engine(Personality.SNACKY).decide(_state(me))
        assert any("no_goal_candidate" in r.getMessage() for r in caplog.records)


class TestFallbackDisabled:
    """With fallback disabled the typed error reaches the caller."""

    def test_no_goal_raises(self) -> None:
        me = _snake("me", (5, 5), (5, 4))
        engine = _engine(Personality.HEADHUNTER, fallback_enabled=False)
        with pytest.raises(NoGoalCandidate):
            engine.decide(_state(me))

    def test_no_path_raises(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        fence = _snake("fence", (0, 1), (1, 1), (1, 0))
        engine = _engine(Personality.SNACKY, fallback_enabled=False)
        with pytest.raises(NoPathFound):
            engine.decide(_state(me, fence, food=[(0, 0)]))

    def test_unimplemented_personality_raises(self) -> None:
        me = _snake("me", (5, 5), (5, 4))
        engine = _engine(Personality.TIMID, fallback_enabled=False)
        with pytest.raises(UnimplementedPersonality):
            engine.decide(_state(me, food=[(8, 5)]))


class TestConfigurablePolicies:
    """Hazard and tie-break policies flow through the engine."""

    def test_blocked_hazard_forces_detour(self) -> None:
        me = _snake("me", (5, 5), (5, 4), (5, 3))
        state = _state(me, food=[(8, 5)], hazards=[(6, 5)])

        ignored = _engine(Personality.SNACKY).decide(state)
        blocked = _engine(Personality.SNACKY, hazard_policy=HazardPolicy.BLOCK).decide(state)

        assert ignored.cost == 3
        assert blocked.cost == 5
        assert Coord(x=6, y=5) not in blocked.path

    def test_tie_break_changes_prey(self) -> None:
        me = _snake("me", (5, 5), (4, 5), (3, 5), (2, 5), (1, 5), (0, 5))
        big = _snake("big", (5, 8), (6, 8), (7, 8), (8, 8), (9, 8))
        small = _snake("small", (5, 2), (6, 2), (7, 2))
        state = _state(me, big, small)

        default = _engine(Personality.HEADHUNTER).decide(state)
        by_length = _engine(
            Personality.HEADHUNTER, tie_break=TieBreak.TARGET_LENGTH
        ).decide(state)

        assert default.goal == Coord(x=5, y=8)
        assert default.move == Move.UP
        assert by_length.goal == Coord(x=5, y=2)
        assert by_length.move == Move.DOWN


def test_engine_keeps_no_state_between_ticks() -> None:
    engine = _engine(Personality.HEADHUNTER)
    me_small = _snake("me", (2, 2), (2, 1))
    me_big = _snake("me", (2, 2), (2, 1), (2, 0), (3, 0))
    rival = _snake("rival", (2, 6), (3, 6), (4, 6))

    first = engine.decide(_state(me_small, rival, food=[(2, 4)]))
    second = engine.decide(_state(me_big, rival, food=[(2, 4)]))

    assert first.mode == Mode.EAT
    assert first.goal == Coord(x=2, y=4)
    assert second.mode == Mode.KILL
    assert second.goal == Coord(x=2, y=6)


class TestExplicitFallback:
    """DecisionEngine.fallback answers without selecting a goal."""

    def test_fallback_uses_tick_grid(self) -> None:
        me = _snake("me", (5, 5), (5, 6), (5, 7))
        engine = _engine(Personality.SNACKY, fallback_enabled=False)

        decision = engine.fallback(_state(me, food=[(8, 5)]), reason="no_goal_candidate: test")

        assert decision.fallback is True
        assert decision.move == Move.DOWN
        assert decision.goal is None
        assert decision.reason == "no_goal_candidate: test"
        assert decision.turn == 7
