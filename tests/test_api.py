"""
Tests for totito.api

Tests move parsing and the text-mode driver with injected input/output.
"""

import pytest

from totito.api import attach_printer, describe_result, parse_move, parse_move_list, play_game
from totito.core.events import MoveMade
from totito.core.types import GameResult, Player, WinInfo, WinType
from totito.games.engine import GameEngine
from totito.utils.config import DEFAULT_SYMBOLS


def _feed(lines):
    """input() replacement that raises EOFError once lines run out."""
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return fake_input


class TestParseMove:
    """parse_move / parse_move_list tests."""

    def test_parse(self):
        assert parse_move("1,2") == (1, 2)
        assert parse_move(" 0 , 0 ") == (0, 0)

    @pytest.mark.parametrize("raw", ["1", "1,2,3", "a,b", ""])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_move(raw)

    def test_parse_list(self):
        assert parse_move_list("0,0;1,1; 2,2;") == [(0, 0), (1, 1), (2, 2)]


class TestDescribeResult:

    def test_tie(self):
        assert describe_result(GameResult.tie(), DEFAULT_SYMBOLS) == "It's a tie!"

    def test_row(self):
        result = GameResult(Player.X, WinInfo(WinType.ROW, 0))
        assert describe_result(result, DEFAULT_SYMBOLS) == "Winner: X (row 0)"

    def test_diagonal(self):
        result = GameResult(Player.O, WinInfo(WinType.ANTI_DIAGONAL))
        assert describe_result(result, DEFAULT_SYMBOLS) == "Winner: O (anti diagonal)"


class TestScriptedPlay:
    """play_game with a move script."""

    def test_win(self, engine: GameEngine, row_zero_win):
        out = []
        result = play_game(engine, moves=row_zero_win, output=out.append)

        assert result == GameResult(Player.X, WinInfo(WinType.ROW, 0))
        assert "Winner: X (row 0)" in out

    def test_tie(self, engine: GameEngine, tie_game):
        out = []
        result = play_game(engine, moves=tie_game, output=out.append)
        assert result == GameResult.tie()
        assert "It's a tie!" in out

    def test_rejected_move_reported(self, engine: GameEngine):
        out = []
        result = play_game(engine, moves=[(0, 0), (0, 0), (5, 5)], output=out.append)

        assert result is None
        assert any(line.startswith("Skipped 0,0") for line in out)
        assert any(line.startswith("Skipped 5,5") for line in out)

    def test_stops_at_game_end(self, engine: GameEngine, row_zero_win):
        play_game(engine, moves=row_zero_win + [(2, 2)], output=lambda s: None)
        assert engine.cell(2, 2) is Player.NONE

    def test_listeners_removed_afterwards(self, engine: GameEngine):
        play_game(engine, moves=[(0, 0)], output=lambda s: None)
        assert engine.events.listener_count(MoveMade) == 0


class TestInteractivePlay:
    """play_game reading from an injected input function."""

    def test_full_game(self, engine: GameEngine):
        out = []
        lines = ["0,0", "1,1", "0,1", "1,0", "0,2"]
        result = play_game(engine, input_fn=_feed(lines), output=out.append)

        assert result.winner is Player.X

    def test_bad_input_reprompts(self, engine: GameEngine):
        out = []
        play_game(engine, input_fn=_feed(["nonsense", "1,1", "quit", "2,2"]), output=out.append)

        assert any(line.startswith("Invalid input") for line in out)
        assert engine.cell(1, 1) is Player.X
        assert engine.cell(2, 2) is Player.NONE  # Never read after quit

    def test_illegal_move_reported(self, engine: GameEngine):
        out = []
        play_game(engine, input_fn=_feed(["1,1", "1,1"]), output=out.append)
        assert any(line.startswith("Illegal move") for line in out)

    def test_reset_command(self, engine: GameEngine):
        out = []
        result = play_game(engine, input_fn=_feed(["1,1", "reset"]), output=out.append)

        assert result is None
        assert engine.turns_passed == 0
        assert "\nNew game" in out


class TestAttachPrinter:

    def test_echoes_moves(self, engine: GameEngine):
        out = []
        unsubscribers = attach_printer(engine, out.append)
        engine.make_move(2, 1)

        assert "\nX played: 2,1" in out
        assert len(unsubscribers) == 3
