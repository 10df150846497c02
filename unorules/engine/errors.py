"""Exceptions raised by the UNO engine.

Rule violations (playing out of turn, an invalid card, ...) are not errors:
``Game.play`` and ``Game.draw`` report them by returning ``False``.
"""


class UnoError(Exception):
    """Base exception for engine errors."""

    pass


class NotEnoughPlayersError(UnoError, ValueError):
    """Raised when starting a game with fewer than two players."""

    pass


class GameAlreadyStartedError(UnoError, RuntimeError):
    """Raised when ``start`` is called on a game that is not NOT_STARTED."""

    pass


class NoOpeningCardError(UnoError, RuntimeError):
    """Raised when the draw deck holds no card that may open the discard pile."""

    pass


class InvalidSnapshotError(UnoError, ValueError):
    """Raised when a JSON snapshot cannot be turned back into a game."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Invalid JSON: {reason}. You can only import a game that was exported."
        )
