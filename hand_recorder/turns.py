"""
Turn sequencing: who is still in the hand, who can still act, who is next.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .limits import effective_stack
from .schemas import ActionType, AllIn, Player, Position
from .state import HandState

P = Position

PREFLOP_ORDER: Tuple[Position, ...] = (P.UTG, P.UTG1, P.UTG2, P.LJ, P.HJ, P.CO, P.BTN, P.SB, P.BB)
POSTFLOP_ORDER: Tuple[Position, ...] = (P.SB, P.BB, P.UTG, P.UTG1, P.UTG2, P.LJ, P.HJ, P.CO, P.BTN)
STRADDLE_PREFLOP_ORDER: Tuple[Position, ...] = PREFLOP_ORDER[1:] + PREFLOP_ORDER[:1]


def closing_position(state: HandState) -> Position:
    return Position.UTG if state.straddle > 0 else Position.BB


def compute_order(state: HandState, street: str) -> List[Position]:
    if street == "preflop":
        table = STRADDLE_PREFLOP_ORDER if state.straddle > 0 else PREFLOP_ORDER
    else:
        table = POSTFLOP_ORDER
    seated = state.seated_positions()
    return [position for position in table if position in seated]


def has_folded(state: HandState, player: Position | str, street: str) -> bool:
    position = Position(player)
    return any(
        action.player == position and action.type is ActionType.FOLD
        for past in state.streets_through(street)
        for action in past.actions
    )


def is_player_all_in(state: HandState, player: Position | str, street: str) -> bool:
    position = Position(player)
    return any(
        action.player == position and action.type is ActionType.ALL_IN
        for past in state.streets_through(street)
        for action in past.actions
    )


def is_committed(state: HandState, player: Position | str, street: str) -> bool:
    """All-in, or nothing left behind after blinds and bets."""
    return is_player_all_in(state, player, street) or effective_stack(state, player, street) <= 0


def _ordered_players(state: HandState, street: str) -> List[Player]:
    return [state.player(position) for position in compute_order(state, street)]


def active_players(state: HandState, street: str) -> List[Player]:
    return [p for p in _ordered_players(state, street) if not has_folded(state, p.position, street)]


def acting_players(state: HandState, street: str) -> List[Player]:
    return [p for p in active_players(state, street) if not is_committed(state, p.position, street)]


def last_all_in(state: HandState, street: str) -> Optional[Tuple[int, AllIn]]:
    actions = state.street(street).actions
    for idx in range(len(actions) - 1, -1, -1):
        if actions[idx].type is ActionType.ALL_IN:
            return idx, actions[idx]
    return None


def acted_after(state: HandState, player: Position, street: str, index: int) -> bool:
    return any(action.player == player for action in state.street(street).actions[index + 1 :])


def awaiting_all_in_response(state: HandState, player: Position | str, street: str) -> bool:
    """
    True when the street's most recent all-in still needs an answer from ``player``.

    The all-in's author, folded or committed players and anyone who has
    acted since owe nothing. A player who already covers a short all-in
    still has to answer it.
    """
    position = Position(player)
    if state.player(position) is None:
        return False
    found = last_all_in(state, street)
    if found is None:
        return False
    index, all_in = found
    if all_in.player == position:
        return False
    if has_folded(state, position, street) or is_committed(state, position, street):
        return False
    return not acted_after(state, position, street, index)


def _rotation_after(order: List[Position], position: Position) -> List[Position]:
    if position not in order:
        return list(order)
    idx = order.index(position)
    return order[idx + 1 :] + order[: idx + 1]


def next_acting_player(state: HandState, street: str) -> Optional[Position]:
    order = compute_order(state, street)
    acting = {p.position for p in acting_players(state, street)}
    if not acting:
        return None
    actions = state.street(street).actions
    if not actions:
        return next(position for position in order if position in acting)

    rotation = _rotation_after(order, actions[-1].player)
    if last_all_in(state, street) is not None:
        pending = [p for p in rotation if p in acting and awaiting_all_in_response(state, p, street)]
        if pending:
            return pending[0]
    return next(position for position in rotation if position in acting)
