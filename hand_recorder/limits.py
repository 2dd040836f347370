"""
Betting limits: amount to call, minimum bet and raise, reachable stack.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ledger import contributions, highest_street_contribution, street_contributions
from .schemas import AGGRESSIVE_ACTIONS, ActionType, Position
from .state import HandState, previous_street


@dataclass(frozen=True, slots=True)
class BetLimits:
    min: int
    max: int

    def allows(self, amount: int) -> bool:
        return self.min <= amount <= self.max


def current_bet_to_call(state: HandState, street: str) -> int:
    return highest_street_contribution(state, street)


def min_bet(state: HandState, street: str) -> int:
    if street == "preflop":
        if state.straddle > 0:
            return state.straddle * 2
        return state.blinds.bb * 2
    return state.blinds.bb


def has_aggression(state: HandState, street: str) -> bool:
    return any(action.type in AGGRESSIVE_ACTIONS for action in state.street(street).actions)


def min_raise(state: HandState, street: str) -> int:
    if not has_aggression(state, street):
        return min_bet(state, street)
    return current_bet_to_call(state, street) * 2


def effective_stack(state: HandState, player: Position | str, street: str) -> int:
    seat = state.player(player)
    if seat is None:
        return 0
    committed = contributions(state, street).get(seat.position, 0)
    return max(0, seat.stack - committed)


def max_commitment(state: HandState, player: Position | str, street: str) -> int:
    """Largest street total the player can reach: everything not committed on earlier streets."""
    seat = state.player(player)
    if seat is None:
        return 0
    before = previous_street(street)
    committed = contributions(state, before).get(seat.position, 0) if before else 0
    return max(0, seat.stack - committed)


def amount_to_call(state: HandState, player: Position | str, street: str) -> int:
    position = Position(player)
    owed = current_bet_to_call(state, street) - street_contributions(state, street).get(position, 0)
    return max(0, owed)


def bet_limits(
    state: HandState,
    action_type: ActionType | str,
    player: Position | str,
    street: str,
) -> BetLimits:
    kind = ActionType(action_type)
    ceiling = max_commitment(state, player, street)
    if kind is ActionType.CALL:
        to_call = current_bet_to_call(state, street)
        return BetLimits(min=to_call, max=to_call)
    if kind is ActionType.BET:
        return BetLimits(min=min_bet(state, street), max=ceiling)
    if kind is ActionType.RAISE:
        return BetLimits(min=min_raise(state, street), max=ceiling)
    if kind is ActionType.ALL_IN:
        return BetLimits(min=ceiling, max=ceiling)
    return BetLimits(min=0, max=0)
