"""tictactoe package.

m,n,k tic-tac-toe for the console: board state with win evaluation,
text rendering, and an interactive session loop.
"""

from .board import DIRECTIONS, Board
from .game import GameConfig, parse_move, run_game
from .render import render_board

__all__ = [
    "Board",
    "DIRECTIONS",
    "GameConfig",
    "parse_move",
    "render_board",
    "run_game",
]
