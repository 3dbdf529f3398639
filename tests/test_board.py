import pytest

from logic.board import (
    EMPTY,
    Board,
    InvalidPositionError,
    apply_move,
    get_empty_cells,
    new_board,
)


def test_new_board_is_empty():
    board = new_board()
    assert all(cell == EMPTY for row in board for cell in row)
    assert len(get_empty_cells(board)) == 9
    assert not board.is_full()


def test_apply_move_on_empty_cell():
    board = new_board()
    new, accepted = apply_move(board, 1, 2, "X")

    assert accepted
    assert new[1][2] == "X"
    # Everything else untouched
    for row in range(3):
        for col in range(3):
            if (row, col) != (1, 2):
                assert new[row][col] == board[row][col]
    # Original is a value and doesn't change
    assert board[1][2] == EMPTY


def test_apply_move_on_occupied_cell_is_refused():
    board, _ = apply_move(new_board(), 0, 0, "X")
    same, accepted = apply_move(board, 0, 0, "O")

    assert not accepted
    assert same == board
    assert same[0][0] == "X"


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 3), (3, 3), (1, -2)])
def test_apply_move_out_of_range(row, col):
    with pytest.raises(InvalidPositionError):
        apply_move(new_board(), row, col, "X")


def test_apply_move_rejects_empty_symbol():
    with pytest.raises(ValueError):
        apply_move(new_board(), 0, 0, EMPTY)


def test_every_empty_cell_accepts_a_move():
    board = Board.from_grid([
        ["X", "", "O"],
        ["", "X", ""],
        ["O", "", ""],
    ])
    for row, col in get_empty_cells(board):
        new, accepted = apply_move(board, row, col, "O")
        assert accepted
        assert new.copy_grid() == [
            ["O" if (r, c) == (row, col) else board[r][c] for c in range(3)]
            for r in range(3)
        ]


def test_get_empty_cells_row_major_order():
    board = Board.from_grid([
        ["X", "", ""],
        ["", "O", ""],
        ["", "", "X"],
    ])
    assert get_empty_cells(board) == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]


def test_board_shape_is_checked():
    with pytest.raises(ValueError):
        Board.from_grid([["X", "", ""], ["", "", ""]])


def test_boards_are_hashable_values():
    a = Board.from_grid([["X", "", ""], ["", "", ""], ["", "", ""]])
    b, _ = apply_move(new_board(), 0, 0, "X")
    assert a == b
    assert len({a, b}) == 1


def test_render_shows_symbols():
    board, _ = apply_move(new_board(), 1, 1, "X")
    text = board.render()
    assert "X" in text
    assert text.count("\n") == 7


def test_board_built_from_lists_is_frozen():
    board = Board(cells=[["X", "", ""], ["", "O", ""], ["", "", ""]])
    assert board.cells == (("X", "", ""), ("", "O", ""), ("", "", ""))
    assert isinstance(board[0], tuple)
    assert hash(board) == hash(Board.from_grid(board.cells))
