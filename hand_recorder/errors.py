"""
Error taxonomy for refused commands and queries.

All of these are recoverable: a refused command leaves the hand untouched.
"""

from __future__ import annotations


class HandRecorderError(RuntimeError):
    pass


class InvalidActionError(HandRecorderError):
    """The action is not legal for this player at this point of the street."""


class AmountOutOfRangeError(HandRecorderError):
    def __init__(self, message: str, minimum: int, maximum: int) -> None:
        super().__init__(message)
        self.minimum = minimum
        self.maximum = maximum


class IllegalRemovalError(HandRecorderError):
    """Removing the hero or the last villain."""


class StaleQueryError(HandRecorderError):
    """Turn or legality asked for a street whose action is already closed."""


class InvalidCardsError(HandRecorderError):
    pass


class SeatingError(HandRecorderError):
    pass
