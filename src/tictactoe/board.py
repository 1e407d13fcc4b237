"""
Board state and win evaluation for m,n,k tic-tac-toe.
Notes:
- The grid is indexed grid[y][x]; y grows upward when rendered.
- A cell is None (empty) or a one-character player symbol, and is never cleared.
- Only the cell just placed can complete a line, so evaluation scans outward
  from it along four axes instead of re-checking the whole board.
"""
from __future__ import annotations

from typing import List, Optional

# vertical, diagonal-up, horizontal, diagonal-down
DIRECTIONS = ((0, 1), (1, 1), (1, 0), (1, -1))


class Board:
    def __init__(self, win_line_length: int, width: int, height: int) -> None:
        if win_line_length < 1:
            raise ValueError("win_line_length must be >= 1")
        if width < 1 or height < 1:
            raise ValueError("width must be >= 1 and height must be >= 1")
        self.win_line_length = win_line_length
        self.width = width
        self.height = height
        self.grid: List[List[Optional[str]]] = [[None] * width for _ in range(height)]
        self.free_spots = width * height
        self.winner: Optional[str] = None
        self.tie = False

    def __str__(self) -> str:
        from .render import render_board

        return render_board(self)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_mark(self, x: int, y: int) -> Optional[str]:
        if not self.in_bounds(x, y):
            return None
        return self.grid[y][x]

    def is_spot_empty(self, x: int, y: int) -> bool:
        """Out-of-bounds spots count as taken."""
        return self.in_bounds(x, y) and self.grid[y][x] is None

    def is_game_over(self) -> bool:
        return self.tie or self.winner is not None

    def line_length(self, x: int, y: int, dx: int, dy: int, player: str) -> int:
        """Count consecutive `player` marks strictly past (x, y) along (dx, dy)."""
        length = 0
        x += dx
        y += dy
        while self.in_bounds(x, y) and self.grid[y][x] == player:
            length += 1
            x += dx
            y += dy
        return length

    def place_move(self, x: int, y: int, player: str) -> bool:
        """Mark (x, y) for `player` and update winner/tie.

        Returns False, leaving the board untouched, when the game is over or
        the spot is out of bounds or taken.
        """
        if self.is_game_over() or not self.is_spot_empty(x, y) or self.free_spots == 0:
            return False
        self.grid[y][x] = player
        self.free_spots -= 1

        for dx, dy in DIRECTIONS:
            # |<------------*------------>|
            # -dir      placed cell      dir
            run = 1 + self.line_length(x, y, dx, dy, player) + self.line_length(x, y, -dx, -dy, player)
            if run >= self.win_line_length:
                self.winner = player
                break

        if self.winner is None and self.free_spots == 0:
            self.tie = True
        return True
