import pytest

from tictactoe.board import DIRECTIONS, Board


def test_new_board_is_empty():
    b = Board(3, 4, 2)
    assert b.free_spots == 8
    assert b.winner is None
    assert b.tie is False
    assert not b.is_game_over()
    assert all(b.is_spot_empty(x, y) for x in range(4) for y in range(2))


@pytest.mark.parametrize("k,w,h", [(0, 3, 3), (3, 0, 3), (3, 3, 0), (-1, 3, 3)])
def test_invalid_construction_raises(k: int, w: int, h: int):
    with pytest.raises(ValueError):
        Board(k, w, h)


def test_three_in_a_row_wins():
    b = Board(3, 3, 3)
    b.place_move(0, 0, "X")
    b.place_move(1, 0, "X")
    assert b.winner is None
    b.place_move(2, 0, "X")
    assert b.winner == "X"
    assert b.is_game_over()
    assert b.tie is False


def test_single_cell_board_wins_immediately():
    b = Board(1, 1, 1)
    assert b.place_move(0, 0, "O")
    assert b.winner == "O"
    assert b.tie is False


@pytest.mark.parametrize("cells", [
    [(1, 0), (1, 1), (1, 2)],  # vertical
    [(0, 0), (1, 1), (2, 2)],  # diagonal up
    [(0, 2), (1, 1), (2, 0)],  # diagonal down
    [(0, 1), (2, 1), (1, 1)],  # horizontal, completed in the middle
])
def test_every_axis_can_win(cells):
    b = Board(3, 3, 3)
    for x, y in cells:
        b.place_move(x, y, "X")
    assert b.winner == "X"


def test_run_counts_both_directions_from_placed_cell():
    b = Board(4, 5, 1)
    for x in (0, 1, 3):
        b.place_move(x, 0, "X")
    assert b.winner is None
    b.place_move(2, 0, "X")
    assert b.winner == "X"


def test_opposing_mark_breaks_run():
    b = Board(3, 4, 1)
    b.place_move(0, 0, "X")
    b.place_move(1, 0, "X")
    b.place_move(2, 0, "O")
    b.place_move(3, 0, "X")
    assert b.winner is None
    assert b.tie is True


def test_full_board_without_line_is_tie():
    # X O X
    # X O O
    # O X X
    b = Board(3, 3, 3)
    moves = [
        (0, 2, "X"), (1, 2, "O"), (2, 2, "X"),
        (0, 1, "X"), (1, 1, "O"), (2, 1, "O"),
        (0, 0, "O"), (1, 0, "X"), (2, 0, "X"),
    ]
    for x, y, p in moves:
        b.place_move(x, y, p)
    assert b.free_spots == 0
    assert b.tie is True
    assert b.winner is None
    assert b.is_game_over()


def test_win_on_last_cell_is_not_a_tie():
    b = Board(2, 2, 1)
    b.place_move(0, 0, "X")
    b.place_move(1, 0, "X")
    assert b.free_spots == 0
    assert b.winner == "X"
    assert b.tie is False


def test_line_longer_than_board_never_wins():
    b = Board(4, 3, 3)
    for y in range(3):
        for x in range(3):
            b.place_move(x, y, "X")
    assert b.winner is None
    assert b.tie is True


def test_rejected_moves_leave_state_unchanged():
    b = Board(3, 3, 3)
    assert b.place_move(1, 1, "X")
    before = ([row[:] for row in b.grid], b.free_spots, b.winner, b.tie)
    assert not b.place_move(1, 1, "O")
    assert not b.place_move(-1, 0, "O")
    assert not b.place_move(3, 0, "O")
    assert not b.place_move(0, 3, "O")
    assert ([row[:] for row in b.grid], b.free_spots, b.winner, b.tie) == before
    assert b.get_mark(1, 1) == "X"


def test_moves_after_game_over_are_ignored():
    b = Board(1, 2, 2)
    b.place_move(0, 0, "X")
    assert b.winner == "X"
    assert not b.place_move(1, 1, "O")
    assert b.get_mark(1, 1) is None
    assert b.free_spots == 3
    assert b.winner == "X"


def test_out_of_bounds_spots_are_not_empty():
    b = Board(3, 3, 3)
    assert not b.in_bounds(3, 0)
    assert not b.is_spot_empty(3, 0)
    assert not b.is_spot_empty(0, -1)
    assert b.get_mark(5, 5) is None


def test_grid_indexed_by_row_then_column():
    b = Board(3, 4, 2)
    b.place_move(3, 1, "X")
    assert b.grid[1][3] == "X"
    assert b.get_mark(3, 1) == "X"


def test_line_length_stops_at_edge_and_other_marks():
    b = Board(5, 5, 1)
    for x, p in [(0, "O"), (1, "X"), (2, "X"), (4, "X")]:
        b.place_move(x, 0, p)
    assert b.line_length(2, 0, -1, 0, "X") == 1
    assert b.line_length(2, 0, 1, 0, "X") == 0
    assert b.line_length(4, 0, 1, 0, "X") == 0


def test_directions_cover_four_axes():
    axes = {frozenset({d, (-d[0], -d[1])}) for d in DIRECTIONS}
    assert len(axes) == 4
