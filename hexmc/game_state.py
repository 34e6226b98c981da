import logging
from dataclasses import dataclass
from enum import Enum

from hexmc.board import Team, opponent
from hexmc.connectivity import has_path
from hexmc.errors import InvalidTeamError

logger = logging.getLogger(__name__)

# Out-of-band move: the team playing it gives up
FORFEIT = -1


class RejectReason(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    ALREADY_OWNED = "already_owned"


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    reason: RejectReason = None

    def __bool__(self):
        return self.accepted


ACCEPTED = MoveResult(True)


def rejected(reason):
    return MoveResult(False, reason)


class GameState:
    def __init__(self, board, player=Team.RED, turn=Team.RED):
        self.board = board
        self.player = player
        self.ai = opponent(player)
        self.turn = turn
        self.over = False
        self.winner = Team.NONE

    def legal_moves(self):
        return [] if self.over else self.board.unclaimed()

    def apply_move(self, cell_id, team):
        """
        Claims `cell_id` for `team` and checks whether that completed a path.

        Returns a truthy MoveResult when the move was taken. Once the game is
        over every call is accepted and changes nothing.
        """
        if self.over:
            return ACCEPTED

        if team not in (Team.RED, Team.BLUE):
            raise InvalidTeamError("Only red and blue can move", context={"team": team})

        if cell_id == FORFEIT:
            self._finish(opponent(team))
            logger.debug("%s forfeit, %s wins", team, self.winner)
            return ACCEPTED

        if not self.board.in_bounds(cell_id):
            return rejected(RejectReason.OUT_OF_BOUNDS)

        cell = self.board[cell_id]
        if cell.team != Team.NONE:
            return rejected(RejectReason.ALREADY_OWNED)

        cell.team = team
        starts, ends = self.board.edges(team)
        if has_path(self.board, starts, ends, team):
            self._finish(team)
            logger.debug("%s connected its edges with cell %d", team, cell_id)
        else:
            self.turn = opponent(team)
        return ACCEPTED

    def _finish(self, winner):
        self.over = True
        self.winner = winner
