import pytest

from hexmc.board import Board, Team
from hexmc.codec import INVALID_CELL
from hexmc.errors import InvalidTeamError
from hexmc.game_state import FORFEIT, GameState, RejectReason


def test_players():
    game = GameState(Board(3, 3), player=Team.BLUE)
    assert game.ai == Team.RED
    assert not game.over
    assert game.winner == Team.NONE


def test_accepted_move_claims_cell_and_passes_turn(make_game):
    game = make_game(player=Team.RED)
    result = game.apply_move(4, Team.RED)

    assert result
    assert result.reason is None
    assert game.board[4].team == Team.RED
    assert game.turn == Team.BLUE
    assert 4 not in game.legal_moves()


def test_out_of_bounds(make_game):
    game = make_game()
    for cell_id in (9, 100, -5, INVALID_CELL, None):
        result = game.apply_move(cell_id, Team.BLUE)
        assert not result
        assert result.reason == RejectReason.OUT_OF_BOUNDS
    assert game.board.unclaimed() == list(range(9))


def test_already_owned_leaves_ownership_unchanged(make_game):
    game = make_game()
    game.apply_move(0, Team.BLUE)
    result = game.apply_move(0, Team.RED)

    assert not result
    assert result.reason == RejectReason.ALREADY_OWNED
    assert game.board[0].team == Team.BLUE
    assert game.turn == Team.RED


def test_win_only_once_both_edges_are_connected(make_game):
    game = make_game(player=Team.RED)
    game.apply_move(1, Team.RED)
    game.apply_move(0, Team.BLUE)
    game.apply_move(4, Team.RED)
    assert not game.over
    game.apply_move(3, Team.BLUE)
    game.apply_move(7, Team.RED)

    assert game.over
    assert game.winner == Team.RED


def test_blue_wins_left_to_right(make_game):
    game = make_game(rows=2)
    game.apply_move(0, Team.BLUE)
    assert not game.over
    game.apply_move(1, Team.BLUE)
    assert game.over
    assert game.winner == Team.BLUE


def test_forfeit_ends_game_for_the_other_team(make_game):
    game = make_game()
    result = game.apply_move(FORFEIT, Team.BLUE)

    assert result
    assert game.over
    assert game.winner == Team.RED
    assert game.board.unclaimed() == list(range(9))


def test_moves_after_the_end_change_nothing(make_game):
    game = make_game()
    game.apply_move(FORFEIT, Team.RED)
    before = game.board.snapshot()

    assert game.apply_move(4, Team.BLUE)
    assert game.apply_move(100, Team.BLUE)
    assert game.board.snapshot() == before
    assert game.winner == Team.BLUE
    assert game.legal_moves() == []


def test_single_cell_board_is_won_by_the_first_move(make_game):
    game = make_game(rows=1)
    game.apply_move(0, Team.BLUE)
    assert game.winner == Team.BLUE


def test_booleans_are_not_cell_ids(make_game):
    game = make_game()
    result = game.apply_move(True, Team.BLUE)

    assert result.reason == RejectReason.OUT_OF_BOUNDS
    assert game.board.unclaimed() == list(range(9))


@pytest.mark.parametrize("cell_id", [4, FORFEIT])
def test_only_playing_teams_can_move(make_game, cell_id):
    game = make_game()
    with pytest.raises(InvalidTeamError):
        game.apply_move(cell_id, Team.NONE)

    assert game.board[4].team == Team.NONE
    assert not game.over
