"""
JSON snapshots of a hand in progress.

Loading a snapshot restores the state as saved; actions are not replayed
through the recorder.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any, Dict

from .cards import cards_from_iterable
from .schemas import STREETS, Blinds, Player, Position, make_action
from .state import HandState, Street, new_hand_id

SNAPSHOT_VERSION = 1


def to_dict(state: HandState) -> Dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        "hand_id": state.hand_id,
        "blinds": state.blinds.as_dict(),
        "straddle": state.straddle,
        "players": [
            {
                "position": player.position.value,
                "stack": player.stack,
                "hero": player.is_hero,
                "cards": [str(card) for card in player.hole_cards] if player.hole_cards else None,
                "type": player.player_type,
                "notes": player.notes,
            }
            for player in state.players
        ],
        "streets": {
            name: {
                "board": [str(card) for card in state.street(name).board],
                "actions": [
                    {"player": action.player.value, "action": action.type.value, "amount": action.amount}
                    for action in state.street(name).actions
                ],
            }
            for name in STREETS
        },
    }


def from_dict(data: Dict[str, Any]) -> HandState:
    version = data.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version {version}")
    players = []
    for entry in data["players"]:
        cards = entry.get("cards")
        pair = tuple(cards_from_iterable(cards)) if cards else None
        players.append(
            Player(
                position=Position(entry["position"]),
                stack=int(entry["stack"]),
                hole_cards=pair,
                is_hero=bool(entry.get("hero", False)),
                player_type=entry.get("type", "Unknown"),
                notes=entry.get("notes", ""),
            )
        )
    streets = {}
    raw_streets = data.get("streets") or {}
    for name in STREETS:
        raw = raw_streets.get(name) or {}
        streets[name] = Street(
            name=name,
            actions=[
                make_action(item["player"], item["action"], item.get("amount"))
                for item in raw.get("actions") or []
            ],
            board=cards_from_iterable(raw.get("board") or []),
        )
    return HandState(
        players=players,
        blinds=Blinds(**data["blinds"]),
        straddle=int(data.get("straddle", 0)),
        streets=streets,
        hand_id=data.get("hand_id") or new_hand_id(),
    )


def save(state: HandState, path: str | pathlib.Path) -> pathlib.Path:
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(to_dict(state), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load(path: str | pathlib.Path) -> HandState:
    return from_dict(json.loads(pathlib.Path(path).read_text(encoding="utf-8")))
