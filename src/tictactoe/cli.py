from __future__ import annotations

import argparse
import logging

from .game import GameConfig, run_game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ttt",
        description="Console tic-tac-toe on an arbitrary board with a configurable line length",
    )
    p.add_argument("height", nargs="?", default=None, help="Board height (default: 3)")
    p.add_argument("width", nargs="?", default=None, help="Board width (default: 3)")
    p.add_argument(
        "win_line_length",
        nargs="?",
        default=None,
        help="Marks in a row needed to win (default: 3)",
    )
    p.add_argument(
        "players",
        nargs="?",
        default=None,
        help="One character per player, in turn order (default: XO)",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-dup"))
        except Exception:
            print("unknown")
        return 0

    config = GameConfig.from_args(ns.height, ns.width, ns.win_line_length, ns.players)
    logging.debug("config=%s", config)
    try:
        board = config.new_board()
    except ValueError as e:
        logging.error("Invalid game configuration: %s", e)
        return 2
    run_game(config, board=board)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
