import sys

from hexmc.game_state import FORFEIT

HEX_DIGITS = "0123456789abcdef"

# Input that does not name a cell on the board; GameState rejects it as out of bounds
INVALID_CELL = sys.maxsize

FORFEIT_WORDS = ("q", "quit", "forfeit")


def to_hex(i):
    """Single hexadecimal digit for i, wrapping at 16."""
    return HEX_DIGITS[i % 16]


def from_hex(c):
    """Value of a hexadecimal digit, or None if c is not one."""
    index = HEX_DIGITS.find(c.lower()) if len(c) == 1 else -1
    return None if index < 0 else index


def parse_tile(text, rows, columns):
    """
    Turns a typed move such as "3a" or "3 a" into a cell id.

    Returns FORFEIT for a forfeit word and INVALID_CELL for anything that is
    not a row and column digit inside the board.
    """
    text = text.strip().lower()
    if text in FORFEIT_WORDS:
        return FORFEIT

    digits = text.replace(" ", "")
    if len(digits) != 2:
        return INVALID_CELL

    row, column = from_hex(digits[0]), from_hex(digits[1])
    if row is None or column is None or row >= rows or column >= columns:
        return INVALID_CELL
    return row * columns + column


def format_tile(cell_id, columns):
    row, column = divmod(cell_id, columns)
    return to_hex(row) + to_hex(column)
