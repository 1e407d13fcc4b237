"""
Interactive console session: one board, players taking turns from a text stream.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from .board import Board

DEFAULT_HEIGHT = 3
DEFAULT_WIDTH = 3
DEFAULT_WIN_LINE_LENGTH = 3
DEFAULT_PLAYERS = "XO"


def _int_or_default(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class GameConfig:
    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    win_line_length: int = DEFAULT_WIN_LINE_LENGTH
    players: str = DEFAULT_PLAYERS

    @classmethod
    def from_args(
        cls,
        height: Optional[str] = None,
        width: Optional[str] = None,
        win_line_length: Optional[str] = None,
        players: Optional[str] = None,
    ) -> "GameConfig":
        """Resolve raw command-line strings, falling back to defaults.

        Numbers that do not parse take their default; anything below 1 is
        raised to 1. Fewer than two player symbols means the default pair.
        """
        if players is None or len(players) < 2:
            players = DEFAULT_PLAYERS
        return cls(
            height=max(_int_or_default(height, DEFAULT_HEIGHT), 1),
            width=max(_int_or_default(width, DEFAULT_WIDTH), 1),
            win_line_length=max(_int_or_default(win_line_length, DEFAULT_WIN_LINE_LENGTH), 1),
            players=players,
        )

    def new_board(self) -> Board:
        return Board(self.win_line_length, self.width, self.height)


def parse_move(raw: str, width: int, height: int) -> Optional[Tuple[int, int]]:
    parts = raw.split()
    if len(parts) != 2:
        return None
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if x < 0 or x >= width or y < 0 or y >= height:
        return None
    return x, y


def print_board(board: Board) -> None:
    print()
    print(board)
    print()


def run_game(
    config: GameConfig, stdin: Optional[TextIO] = None, board: Optional[Board] = None
) -> Optional[str]:
    """Play one game reading moves line by line.

    `board` defaults to a fresh one built from `config`.

    Returns the winner's symbol, "" for a tie, or None if input ran out first.
    """
    stream = stdin if stdin is not None else sys.stdin
    if board is None:
        board = config.new_board()
    players = config.players
    current = 0
    print(
        f"\nTic-tac-toe\n  {config.height} x {config.width} board\n"
        f"  {config.win_line_length} marks in row to win\n"
        f"  {len(players)} players = {players}"
    )
    while True:
        print_board(board)
        player = players[current]
        print(f"'{player}' turn. Enter your move as 'x y':")
        line = stream.readline()
        if not line:
            logging.debug("Input closed before the game ended")
            return None
        move = parse_move(line, board.width, board.height)
        if move is None:
            print("Invalid input. Please input two space separated integer coordinates 'x y'.")
            continue
        x, y = move
        if not board.is_spot_empty(x, y):
            print(f"Spot ({x} {y}) is taken, please choose another spot.")
            continue
        board.place_move(x, y, player)
        print(f"Placed '{player}' at ({x}, {y})")
        logging.debug("free_spots=%d", board.free_spots)

        if board.is_game_over():
            print_board(board)
            if board.winner is not None:
                print(f"'{board.winner}' wins!")
                return board.winner
            print("Game tied!")
            return ""
        current = (current + 1) % len(players)
