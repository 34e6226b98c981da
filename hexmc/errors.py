"""
Error hierarchy for hexmc.

Move outcomes (out of bounds, already owned, no legal move) are reported as
return values by the game state and the evaluator. The exceptions here are
for misuse: bad configuration, or asking an agent to move when nothing is
playable.
"""


class HexError(Exception):
    """Base exception for all hexmc errors."""
    code = "HEX_ERROR"

    def __init__(self, message, code=None, context=None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self):
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(HexError):
    """Invalid board dimensions or evaluator settings."""
    code = "CONFIGURATION_ERROR"


class NoLegalMoveError(HexError):
    """An agent was asked to move on a board with no unclaimed cells."""
    code = "NO_LEGAL_MOVE"


class InvalidTeamError(HexError):
    """A move was made for a team that does not play, such as Team.NONE."""
    code = "INVALID_TEAM"
