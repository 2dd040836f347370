"""
Value types shared by every part of the hand recorder.

Actions are a tagged union: one frozen dataclass per action type, and only the
variants that move chips carry an ``amount``. That amount is always the
player's total commitment on the street so far, never an increment.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Dict, Literal, Optional, Tuple, Union

from .cards import Card

StreetName = Literal["preflop", "flop", "turn", "river"]
STREETS: Tuple[StreetName, ...] = ("preflop", "flop", "turn", "river")
BOARD_SIZES: Dict[str, int] = {"flop": 3, "turn": 1, "river": 1}


class Position(enum.Enum):
    BTN = "BTN"
    SB = "SB"
    BB = "BB"
    UTG = "UTG"
    UTG1 = "UTG+1"
    UTG2 = "UTG+2"
    LJ = "LJ"
    HJ = "HJ"
    CO = "CO"

    def __str__(self) -> str:
        return self.value


class ActionType(enum.Enum):
    BET = "bet"
    CALL = "call"
    RAISE = "raise"
    FOLD = "fold"
    CHECK = "check"
    ALL_IN = "all-in"

    def __str__(self) -> str:
        return self.value


PLAYER_TYPES: Tuple[str, ...] = ("LAG", "TAG", "Fish", "Nit", "Calling Station", "Unknown", "Custom")


@dataclass(frozen=True, slots=True)
class Fold:
    player: Position
    type: ClassVar[ActionType] = ActionType.FOLD
    amount: ClassVar[None] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "player", Position(self.player))


@dataclass(frozen=True, slots=True)
class Check:
    player: Position
    type: ClassVar[ActionType] = ActionType.CHECK
    amount: ClassVar[None] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "player", Position(self.player))


@dataclass(frozen=True, slots=True)
class _Wager:
    player: Position
    amount: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "player", Position(self.player))
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"{self.__class__.__name__} amount must be an integer, got {self.amount!r}")
        if self.amount <= 0:
            raise ValueError(f"{self.__class__.__name__} amount must be positive, got {self.amount}")


@dataclass(frozen=True, slots=True)
class Bet(_Wager):
    type: ClassVar[ActionType] = ActionType.BET


@dataclass(frozen=True, slots=True)
class Call(_Wager):
    type: ClassVar[ActionType] = ActionType.CALL


@dataclass(frozen=True, slots=True)
class Raise(_Wager):
    type: ClassVar[ActionType] = ActionType.RAISE


@dataclass(frozen=True, slots=True)
class AllIn(_Wager):
    type: ClassVar[ActionType] = ActionType.ALL_IN


Action = Union[Fold, Check, Bet, Call, Raise, AllIn]

MONEY_ACTIONS = frozenset({ActionType.BET, ActionType.CALL, ActionType.RAISE, ActionType.ALL_IN})
AGGRESSIVE_ACTIONS = frozenset({ActionType.BET, ActionType.RAISE, ActionType.ALL_IN})

_ACTION_CLASSES = {
    ActionType.FOLD: Fold,
    ActionType.CHECK: Check,
    ActionType.BET: Bet,
    ActionType.CALL: Call,
    ActionType.RAISE: Raise,
    ActionType.ALL_IN: AllIn,
}


def make_action(
    player: Position | str,
    action_type: ActionType | str,
    amount: Optional[int] = None,
) -> Action:
    """
    Build the action variant for ``action_type``.

    Money-moving types require an amount; fold and check reject one.
    """
    position = Position(player)
    kind = ActionType(action_type)
    cls = _ACTION_CLASSES[kind]
    if kind in MONEY_ACTIONS:
        if amount is None:
            raise ValueError(f"{kind.value} requires an amount")
        return cls(player=position, amount=amount)
    if amount not in (None, 0):
        raise ValueError(f"{kind.value} does not take an amount")
    return cls(player=position)


@dataclass(slots=True)
class Player:
    position: Position
    stack: int
    hole_cards: Optional[Tuple[Card, Card]] = None
    is_hero: bool = False
    player_type: str = "Unknown"
    notes: str = ""

    def __post_init__(self) -> None:
        self.position = Position(self.position)
        if self.stack <= 0:
            raise ValueError(f"stack for {self.position} must be positive")
        if self.player_type not in PLAYER_TYPES:
            raise ValueError(f"unknown player type {self.player_type!r}")


@dataclass(frozen=True, slots=True)
class Blinds:
    sb: int
    bb: int

    def __post_init__(self) -> None:
        if self.sb <= 0 or self.bb <= 0:
            raise ValueError("blinds must be positive")
        if self.sb > self.bb:
            raise ValueError("small blind cannot exceed big blind")

    @property
    def default_stack(self) -> int:
        return self.bb * 100

    def as_dict(self) -> Dict[str, int]:
        return {"sb": self.sb, "bb": self.bb}
