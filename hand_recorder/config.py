"""
Table and hand configuration files.

A hand file describes the table (stakes, straddle, seats) and, optionally, the
streets to replay: each street may carry a board and a list of actions.
"""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .cards import cards_from_iterable
from .config_loader import load_config
from .engine import HandRecorder
from .logging_utils import NDJSONLogger
from .schemas import BOARD_SIZES, PLAYER_TYPES, STREETS, ActionType, Blinds, Player, Position
from .state import HandState, validate_straddle

STAKE_PRESETS: Dict[str, Tuple[int, int]] = {
    "1/2": (1, 2),
    "2/3": (2, 3),
    "2/5": (2, 5),
    "5/5": (5, 5),
    "5/10": (5, 10),
}


@dataclass(slots=True)
class SeatConfig:
    position: str
    stack: Optional[int] = None
    hero: bool = False
    cards: Optional[List[str]] = None
    type: str = "Unknown"
    notes: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeatConfig":
        if "position" not in data:
            raise ValueError("every player needs a position")
        cards = data.get("cards")
        return cls(
            position=str(data["position"]),
            stack=data.get("stack"),
            hero=bool(data.get("hero", False)),
            cards=list(cards) if cards else None,
            type=data.get("type", "Unknown"),
            notes=data.get("notes", ""),
        )


@dataclass(slots=True)
class ScriptedAction:
    player: str
    action: str
    amount: Optional[int] = None

    @classmethod
    def parse(cls, entry: Any) -> "ScriptedAction":
        """Accepts ``{"player": "BTN", "action": "raise", "amount": 6}`` or ``"BTN raise 6"``."""
        if isinstance(entry, str):
            parts = entry.split()
            if len(parts) not in (2, 3):
                raise ValueError(f"cannot parse action {entry!r}")
            amount = int(parts[2]) if len(parts) == 3 else None
            return cls(player=parts[0], action=parts[1].lower(), amount=amount)
        if isinstance(entry, dict):
            if "player" not in entry or "action" not in entry:
                raise ValueError(f"action entry needs player and action: {entry!r}")
            amount = entry.get("amount")
            return cls(
                player=str(entry["player"]),
                action=str(entry["action"]).lower(),
                amount=int(amount) if amount is not None else None,
            )
        raise ValueError(f"cannot parse action {entry!r}")


@dataclass(slots=True)
class StreetScript:
    board: List[str] = field(default_factory=list)
    actions: List[ScriptedAction] = field(default_factory=list)


def _parse_blinds(raw: Any) -> Dict[str, int]:
    if isinstance(raw, str):
        if raw not in STAKE_PRESETS:
            raise ValueError(f"unknown stakes {raw!r}; presets: {', '.join(STAKE_PRESETS)}")
        sb, bb = STAKE_PRESETS[raw]
        return {"sb": sb, "bb": bb}
    if isinstance(raw, dict) and "sb" in raw and "bb" in raw:
        return {"sb": int(raw["sb"]), "bb": int(raw["bb"])}
    raise ValueError("blinds must be a preset name or a mapping with sb and bb")


@dataclass
class TableConfig:
    blinds: Dict[str, int]
    players: List[SeatConfig]
    straddle: int = 0
    stacks_bb: int = 100
    streets: Dict[str, StreetScript] = field(default_factory=dict)

    @property
    def starting_stack(self) -> int:
        return self.stacks_bb * self.blinds["bb"]

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "TableConfig":
        return cls.from_dict(load_config(path))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableConfig":
        if "blinds" not in data:
            raise ValueError("config requires blinds")
        streets: Dict[str, StreetScript] = {}
        for name, raw in (data.get("streets") or {}).items():
            raw = raw or {}
            streets[name] = StreetScript(
                board=list(raw.get("board") or []),
                actions=[ScriptedAction.parse(entry) for entry in raw.get("actions") or []],
            )
        config = cls(
            blinds=_parse_blinds(data["blinds"]),
            players=[SeatConfig.from_dict(entry) for entry in data.get("players") or []],
            straddle=int(data.get("straddle", 0)),
            stacks_bb=int(data.get("stacks_bb", 100)),
            streets=streets,
        )
        config.validate()
        return config

    def validate(self) -> None:
        blinds = Blinds(**self.blinds)
        if self.stacks_bb <= 0:
            raise ValueError("stacks_bb must be positive")
        if not 2 <= len(self.players) <= 9:
            raise ValueError("config requires between 2 and 9 players")
        positions = [Position(seat.position) for seat in self.players]
        if len(set(positions)) != len(positions):
            raise ValueError("two players share a position")
        if sum(1 for seat in self.players if seat.hero) != 1:
            raise ValueError("exactly one player must be marked hero")
        for seat in self.players:
            if seat.type not in PLAYER_TYPES:
                raise ValueError(f"unknown player type {seat.type!r}")
            if seat.stack is not None and seat.stack <= 0:
                raise ValueError(f"stack for {seat.position} must be positive")
            if seat.cards is not None and len(seat.cards) != 2:
                raise ValueError(f"{seat.position} needs exactly two hole cards")
        validate_straddle(self.straddle, blinds, set(positions))
        for name, script in self.streets.items():
            if name not in STREETS:
                raise ValueError(f"unknown street {name!r}")
            if script.board and name not in BOARD_SIZES:
                raise ValueError(f"the {name} has no board")
            for entry in script.actions:
                Position(entry.player)
                ActionType(entry.action)

    def build_state(self) -> HandState:
        players = [
            Player(
                position=Position(seat.position),
                stack=seat.stack if seat.stack is not None else self.starting_stack,
                is_hero=seat.hero,
                player_type=seat.type,
                notes=seat.notes,
            )
            for seat in self.players
        ]
        return HandState(players=players, blinds=Blinds(**self.blinds), straddle=self.straddle)

    def build_recorder(self, event_log: Optional[NDJSONLogger] = None) -> HandRecorder:
        """A recorder for this table with every configured hole-card pair placed."""
        recorder = HandRecorder(self.build_state(), event_log)
        for seat in self.players:
            if seat.cards:
                recorder.set_hole_cards(seat.position, cards_from_iterable(seat.cards))
        return recorder

    def replay(self, recorder: HandRecorder) -> HandRecorder:
        """Feed every scripted street through ``recorder.record``; the first refusal propagates."""
        for name in STREETS:
            script = self.streets.get(name)
            if script is None:
                continue
            if script.board:
                recorder.set_board(name, script.board)
            for entry in script.actions:
                recorder.record(name, entry.player, entry.action, entry.amount)
        return recorder
