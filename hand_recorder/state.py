"""
Hand state: the seated players, the four streets and the stakes.

``HandState`` only holds data. Everything the recorder reports about a hand is
derived from it on demand by the ledger, limits, turns, completion and all-in
modules.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from .cards import Card
from .schemas import STREETS, Action, Blinds, Player, Position


@dataclass(slots=True)
class Street:
    name: str
    actions: List[Action] = field(default_factory=list)
    board: List[Card] = field(default_factory=list)

    def reset(self) -> None:
        self.actions = []
        self.board = []


def _empty_streets() -> Dict[str, Street]:
    return {name: Street(name) for name in STREETS}


def new_hand_id() -> str:
    return uuid.uuid4().hex


def street_index(street: str) -> int:
    try:
        return STREETS.index(street)
    except ValueError:
        raise ValueError(f"unknown street {street!r}") from None


def previous_street(street: str) -> Optional[str]:
    idx = street_index(street)
    return STREETS[idx - 1] if idx > 0 else None


@dataclass
class HandState:
    players: List[Player]
    blinds: Blinds
    straddle: int = 0
    streets: Dict[str, Street] = field(default_factory=_empty_streets)
    hand_id: str = field(default_factory=new_hand_id)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not 2 <= len(self.players) <= 9:
            raise ValueError("a hand needs between 2 and 9 players")
        positions = [player.position for player in self.players]
        if len(set(positions)) != len(positions):
            raise ValueError("two players share a position")
        heroes = [player for player in self.players if player.is_hero]
        if len(heroes) != 1:
            raise ValueError("exactly one player must be the hero")
        validate_straddle(self.straddle, self.blinds, set(positions))
        if set(self.streets) != set(STREETS):
            raise ValueError("a hand must hold exactly the four streets")

    def player(self, position: Position | str) -> Optional[Player]:
        position = Position(position)
        for player in self.players:
            if player.position == position:
                return player
        return None

    @property
    def hero(self) -> Player:
        return next(player for player in self.players if player.is_hero)

    def seated_positions(self) -> Set[Position]:
        return {player.position for player in self.players}

    def street(self, name: str) -> Street:
        street_index(name)
        return self.streets[name]

    def streets_through(self, name: str) -> List[Street]:
        """Streets from preflop up to and including ``name``."""
        return [self.streets[s] for s in STREETS[: street_index(name) + 1]]

    def has_actions(self) -> bool:
        return any(street.actions for street in self.streets.values())

    def clear_streets(self) -> None:
        for street in self.streets.values():
            street.reset()


def validate_straddle(straddle: int, blinds: Blinds, seated: Sequence[Position] | Set[Position]) -> None:
    if straddle < 0:
        raise ValueError("straddle cannot be negative")
    if straddle == 0:
        return
    if Position.UTG not in seated:
        raise ValueError("a straddle needs a player seated at UTG")
    if straddle < 2 * blinds.bb:
        raise ValueError(f"straddle must be at least {2 * blinds.bb} (twice the big blind)")
