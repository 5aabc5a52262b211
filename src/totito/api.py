"""
Public API and a text-mode driver.

Usage:
    from totito import GameEngine, play_game

    engine = GameEngine()
    engine.events.on_game_finished(lambda e: print(e.result))
    engine.make_move(1, 1)

    # or drive a whole game from the terminal
    play_game(GameEngine())
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from totito.core.events import GameFinished, GameRestarted, MoveMade
from totito.core.types import GameResult, MoveStatus, Player, WinType
from totito.games.engine import GameEngine

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")
RESET_COMMANDS = ("r", "reset", "restart")

_REJECTION_MESSAGES = {
    MoveStatus.REJECTED_OCCUPIED: "Cell is already taken",
    MoveStatus.REJECTED_GAME_OVER: "Game is over (type 'reset' to play again)",
    MoveStatus.REJECTED_OUT_OF_RANGE: "Row and column must be 0-2",
}


def parse_move(raw: str) -> Tuple[int, int]:
    """Parse 'row,col' into a pair of ints."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'row,col', got '{raw}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Row and column must be integers, got '{raw}'") from e


def parse_move_list(moves_str: str) -> List[Tuple[int, int]]:
    """Parse a semicolon-separated move script, e.g. '0,0;1,1;0,1'."""
    return [parse_move(m) for m in moves_str.split(";") if m.strip()]


def describe_result(result: GameResult, symbols: dict) -> str:
    if result.is_tie:
        return "It's a tie!"
    info = result.win_info
    line = info.type.name.replace("_", " ").lower()
    if info.type in (WinType.ROW, WinType.COLUMN):
        line = f"{line} {info.index}"
    return f"Winner: {symbols[result.winner]} ({line})"


def attach_printer(engine: GameEngine, output: Callable[[str], None] = print) -> List[Callable[[], None]]:
    """
    Subscribe listeners that echo every notification to output.

    Returns the unsubscribe callables.
    """
    symbols = engine.config.symbols

    def on_move(event: MoveMade) -> None:
        output(f"\n{symbols[event.player]} played: {event.row},{event.col}")
        output(engine.state_string())

    def on_finished(event: GameFinished) -> None:
        output("\n" + "=" * 40)
        output(describe_result(event.result, symbols))
        output("=" * 40)

    def on_restarted(event: GameRestarted) -> None:
        output("\nNew game")
        output(engine.state_string())

    return [
        engine.events.subscribe(MoveMade, on_move),
        engine.events.subscribe(GameFinished, on_finished),
        engine.events.subscribe(GameRestarted, on_restarted),
    ]


def _prompt_lines(input_fn: Callable[[str], str]) -> Iterator[str]:
    while True:
        try:
            yield input_fn("Move: ").strip()
        except EOFError:
            return


def play_game(
    engine: GameEngine,
    moves: Optional[Iterable[Tuple[int, int]]] = None,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> Optional[GameResult]:
    """
    Drive engine from scripted moves or interactive input.

    Parameters
    ----------
    engine : GameEngine
        The engine to play on.
    moves : iterable of (row, col), optional
        Scripted moves. When given, no input is read and the game stops
        when the script runs out or the game ends.
    input_fn : callable
        Prompt reader for interactive play.
    output : callable
        Line writer for board and messages.

    Returns
    -------
    The final GameResult, or None if play stopped before the game ended.
    """
    unsubscribers = attach_printer(engine, output)
    symbols = engine.config.symbols

    try:
        output(engine.state_string())

        if moves is not None:
            for row, col in moves:
                outcome = engine.make_move(row, col)
                if not outcome.accepted:
                    output(f"Skipped {row},{col}: {_REJECTION_MESSAGES[outcome.status]}")
                if engine.game_over:
                    break
            return engine.result

        output(f"\n{symbols[engine.current_player]} to move. Enter row,col ('reset', 'quit').")
        for raw in _prompt_lines(input_fn):
            command = raw.lower()
            if command in QUIT_COMMANDS:
                break
            if command in RESET_COMMANDS:
                engine.reset()
                continue
            try:
                row, col = parse_move(raw)
            except ValueError as e:
                output(f"Invalid input: {e}")
                continue

            outcome = engine.make_move(row, col)
            if not outcome.accepted:
                output(f"Illegal move: {_REJECTION_MESSAGES[outcome.status]}")
            elif not engine.game_over:
                output(f"{symbols[engine.current_player]} to move.")

        return engine.result

    except Exception:
        logger.exception("Fatal error in game loop")
        raise
    finally:
        for unsubscribe in unsubscribers:
            unsubscribe()


__all__ = [
    "GameEngine",
    "Player",
    "play_game",
    "attach_printer",
    "parse_move",
    "parse_move_list",
    "describe_result",
]
