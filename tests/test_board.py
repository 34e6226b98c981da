import numpy as np
import pytest

from hexmc.board import Board, Team, opponent
from hexmc.errors import ConfigurationError


@pytest.mark.parametrize("rows,columns", [(1, 1), (1, 5), (4, 2), (11, 11), (3, 7)])
def test_cell_count_and_ids(rows, columns):
    board = Board(rows, columns)
    assert board.size == rows * columns
    assert len(board.cells) == rows * columns
    assert [cell.id for cell in board.cells] == list(range(rows * columns))


def test_neighbours_follow_the_adjacency_order():
    board = Board(3, 3)
    # right, below, diagonal down left, left, above, diagonal up right
    assert board[4].neighbours == (5, 7, 6, 3, 1, 2)
    assert board[0].neighbours == (1, 3)
    assert board[2].neighbours == (5, 4, 1)
    assert board[6].neighbours == (7, 3, 4)
    assert board[8].neighbours == (7, 5)
    assert board[1].neighbours == (2, 4, 3, 0)
    assert board[3].neighbours == (4, 6, 0, 1)


def test_diagonals_are_down_left_and_up_right_only():
    board = Board(4, 4)
    interior = board.cell_id(1, 1)
    neighbours = set(board[interior].neighbours)
    assert board.cell_id(2, 0) in neighbours
    assert board.cell_id(0, 2) in neighbours
    assert board.cell_id(0, 0) not in neighbours
    assert board.cell_id(2, 2) not in neighbours


def test_adjacency_is_symmetric():
    board = Board(5, 4)
    for cell in board.cells:
        for neighbour in cell.neighbours:
            assert cell.id in board[neighbour].neighbours


def test_single_cell_board_has_no_neighbours():
    board = Board(1, 1)
    assert board[0].neighbours == ()
    assert board.edges(Team.RED) == ((0,), (0,))
    assert board.edges(Team.BLUE) == ((0,), (0,))


def test_edge_sets():
    board = Board(2, 3)
    assert board.red_starts == (0, 1, 2)
    assert board.red_ends == (3, 4, 5)
    assert board.blue_starts == (0, 3)
    assert board.blue_ends == (2, 5)


@pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2)])
def test_empty_dimensions_are_rejected(rows, columns):
    with pytest.raises(ConfigurationError) as excinfo:
        Board(rows, columns)
    assert excinfo.value.context == {"rows": rows, "columns": columns}


def test_opponent():
    assert opponent(Team.RED) == Team.BLUE
    assert opponent(Team.BLUE) == Team.RED


def test_copy_has_independent_ownership(board_3x3):
    board_3x3[4].team = Team.RED
    clone = board_3x3.copy()
    clone[0].team = Team.BLUE

    assert clone[4].team == Team.RED
    assert board_3x3[0].team == Team.NONE
    assert clone[4].neighbours is board_3x3[4].neighbours


def test_snapshot_and_restore(board_3x3, claim):
    claim(board_3x3, Team.RED, 1)
    snapshot = board_3x3.snapshot()
    claim(board_3x3, Team.BLUE, 0, 2, 8)
    board_3x3.restore(snapshot)

    assert board_3x3.unclaimed() == [0, 2, 3, 4, 5, 6, 7, 8]
    assert board_3x3[1].team == Team.RED


def test_array_conversion(claim):
    board = claim(Board(2, 3), Team.RED, 0)
    claim(board, Team.BLUE, 5)
    array = board.to_array()

    assert array.dtype == np.int8
    np.testing.assert_array_equal(array, [[1, 0, 0], [0, 0, -1]])

    rebuilt = Board.from_array(array)
    assert rebuilt.snapshot() == board.snapshot()


def test_in_bounds(board_3x3):
    assert board_3x3.in_bounds(0)
    assert board_3x3.in_bounds(np.int64(8))
    assert not board_3x3.in_bounds(9)
    assert not board_3x3.in_bounds(-1)
    assert not board_3x3.in_bounds(None)
    assert not board_3x3.in_bounds(True)
    assert not board_3x3.in_bounds(False)
