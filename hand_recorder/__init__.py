"""
Poker hand recorder.

Records a single No-Limit Hold'em hand action by action and answers the
betting questions a hand-entry UI asks. Key modules:

- cards: Card parsing, printing and deck exclusion.
- schemas: Positions, action variants, players and stakes.
- state: The hand being recorded.
- ledger: Per-street contributions and pot sizes.
- limits: Amount to call, minimum bet and raise, effective stacks.
- turns: Action order and who acts next.
- completion: When a street's betting is closed.
- all_in: Pending all-in responses and the showdown trigger.
- engine: The ``HandRecorder`` facade.
- transcript, snapshot: Text and JSON output.
- config, cli: Hand files and the replay command.
"""

from .engine import HandRecorder
from .errors import (
    AmountOutOfRangeError,
    HandRecorderError,
    IllegalRemovalError,
    InvalidActionError,
    InvalidCardsError,
    SeatingError,
    StaleQueryError,
)
from .schemas import ActionType, AllIn, Bet, Blinds, Call, Check, Fold, Player, Position, Raise, make_action
from .state import HandState

__all__ = [
    "HandRecorder",
    "HandState",
    "Player",
    "Blinds",
    "Position",
    "ActionType",
    "Fold",
    "Check",
    "Bet",
    "Call",
    "Raise",
    "AllIn",
    "make_action",
    "HandRecorderError",
    "InvalidActionError",
    "AmountOutOfRangeError",
    "IllegalRemovalError",
    "StaleQueryError",
    "InvalidCardsError",
    "SeatingError",
]
