from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .board import Board

EMPTY_CELL = "."


def render_board(board: "Board") -> str:
    """Text picture of the board with labelled axes, highest row first."""
    pad = "   " * (board.width // 2)
    lines: List[str] = ["     " + pad + "board"]
    for y in range(board.height - 1, -1, -1):
        row = "  y" if y == board.height // 2 else "   "
        row += f"{y:2} | "
        for x in range(board.width):
            cell = board.grid[y][x]
            row += f"{cell if cell is not None else EMPTY_CELL:<2} "
        lines.append(row)
    lines.append("      +-" + "---" * board.width)
    lines.append("        " + "".join(f"{x:<2} " for x in range(board.width)))
    lines.append("        " + pad + "x")
    return "\n".join(lines)
