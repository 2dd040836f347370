"""
All-in coordination: pending responses to an all-in and the showdown trigger.
"""

from __future__ import annotations

from typing import List, Optional

from .completion import is_street_complete
from .schemas import STREETS, Player, Position
from .state import HandState
from .turns import (
    acting_players,
    active_players,
    awaiting_all_in_response,
    is_committed,
    last_all_in,
)

OPEN = "open"
ACTING = "acting"
ALL_IN_PENDING = "all-in-pending-response"
COMPLETE = "complete"


def needs_to_respond_to_all_in(state: HandState, player: Position | str, street: str) -> bool:
    return awaiting_all_in_response(state, player, street)


def players_who_need_to_respond(state: HandState, street: str) -> List[Player]:
    return [p for p in acting_players(state, street) if needs_to_respond_to_all_in(state, p.position, street)]


def any_players_need_to_respond(state: HandState, street: str) -> bool:
    return bool(players_who_need_to_respond(state, street))


def is_all_players_all_in(state: HandState, street: str) -> bool:
    """
    Betting is over for the rest of the hand: at most one live player is left
    among two or more, and every response owed to an all-in has been given.
    """
    active = active_players(state, street)
    if len(active) < 2:
        return False
    committed = sum(1 for p in active if is_committed(state, p.position, street))
    if committed < len(active) - 1:
        return False
    if any_players_need_to_respond(state, street):
        return False
    return is_street_complete(state, street)


def is_ready_for_showdown(state: HandState) -> bool:
    if len(active_players(state, "river")) < 2:
        return False
    for street in STREETS:
        if is_all_players_all_in(state, street):
            return True
        if not is_street_complete(state, street):
            return False
    return True


def uncontested_winner(state: HandState) -> Optional[Position]:
    remaining = active_players(state, "river")
    if len(remaining) == 1:
        return remaining[0].position
    return None


def street_status(state: HandState, street: str) -> str:
    if is_street_complete(state, street):
        return COMPLETE
    if not state.street(street).actions:
        return OPEN
    if last_all_in(state, street) is not None and any_players_need_to_respond(state, street):
        return ALL_IN_PENDING
    return ACTING
