from enum import Enum
from numbers import Integral

import numpy as np

from hexmc.errors import ConfigurationError


class Team(Enum):
    NONE = "."
    RED = "R"    # connects first row to last row
    BLUE = "B"   # connects first column to last column

    def __str__(self):
        return {Team.NONE: "Nobody", Team.RED: "Red", Team.BLUE: "Blue"}[self]


def opponent(team):
    """Returns the other playing team."""
    return Team.RED if team == Team.BLUE else Team.BLUE


# Values used in numpy observations, matching the 1 / -1 / 0 board convention
TEAM_VALUES = {Team.NONE: 0, Team.RED: 1, Team.BLUE: -1}
VALUE_TEAMS = {value: team for team, value in TEAM_VALUES.items()}


class Cell:
    __slots__ = ("id", "team", "neighbours")

    def __init__(self, id, team=Team.NONE, neighbours=()):
        self.id = id
        self.team = team
        self.neighbours = neighbours

    def __repr__(self):
        return f"Cell(id={self.id}, team={self.team.name})"


class Board:
    def __init__(self, rows, columns):
        if rows < 1 or columns < 1:
            raise ConfigurationError(
                "Board needs at least one row and one column",
                context={"rows": rows, "columns": columns},
            )
        self.rows = rows
        self.columns = columns
        self.size = rows * columns

        self.cells = [Cell(tile, Team.NONE, self._neighbours_of(tile)) for tile in range(self.size)]

        # blue = left to right, red = top to bottom
        self.blue_starts = tuple(range(0, self.size, columns))              # first column
        self.blue_ends = tuple(range(columns - 1, self.size, columns))      # last column
        self.red_starts = tuple(range(0, columns))                          # first row
        self.red_ends = tuple(range(self.size - columns, self.size))        # last row

    def _neighbours_of(self, tile):
        columns, size = self.columns, self.size
        first_column = tile % columns == 0
        last_column = (tile + 1) % columns == 0
        first_row = tile < columns
        last_row = tile + columns >= size

        neighbours = []
        if not last_column:
            neighbours.append(tile + 1)                 # right
        if not last_row:
            neighbours.append(tile + columns)           # below
        if not first_column and not last_row:
            neighbours.append(tile + columns - 1)       # diagonal down left
        if not first_column:
            neighbours.append(tile - 1)                 # left
        if not first_row:
            neighbours.append(tile - columns)           # above
        if not first_row and not last_column:
            neighbours.append(tile - columns + 1)       # diagonal up right
        return tuple(neighbours)

    def __getitem__(self, cell_id):
        return self.cells[cell_id]

    def __len__(self):
        return self.size

    def in_bounds(self, cell_id):
        return isinstance(cell_id, Integral) and not isinstance(cell_id, bool) and 0 <= cell_id < self.size

    def cell_id(self, row, column):
        return row * self.columns + column

    def coordinates(self, cell_id):
        return divmod(cell_id, self.columns)

    def edges(self, team):
        """Returns the (starts, ends) edge sets a team has to connect."""
        if team == Team.RED:
            return self.red_starts, self.red_ends
        if team == Team.BLUE:
            return self.blue_starts, self.blue_ends
        raise ValueError(f"{team!r} has no edges")

    def unclaimed(self):
        return [cell.id for cell in self.cells if cell.team == Team.NONE]

    def snapshot(self):
        return [cell.team for cell in self.cells]

    def restore(self, snapshot):
        for cell, team in zip(self.cells, snapshot):
            cell.team = team

    def copy(self):
        """Copy with independent ownership; adjacency tuples are shared."""
        clone = Board.__new__(Board)
        clone.rows, clone.columns, clone.size = self.rows, self.columns, self.size
        clone.cells = [Cell(cell.id, cell.team, cell.neighbours) for cell in self.cells]
        clone.blue_starts, clone.blue_ends = self.blue_starts, self.blue_ends
        clone.red_starts, clone.red_ends = self.red_starts, self.red_ends
        return clone

    def to_array(self):
        return np.array([TEAM_VALUES[cell.team] for cell in self.cells], dtype=np.int8).reshape(self.rows, self.columns)

    @classmethod
    def from_array(cls, array):
        """Builds a board from a 2-D array of 1 (red), -1 (blue) and 0."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ConfigurationError("Board array must be two-dimensional", context={"shape": array.shape})
        board = cls(*array.shape)
        for cell, value in zip(board.cells, array.flat):
            cell.team = VALUE_TEAMS[int(value)]
        return board
