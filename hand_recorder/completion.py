"""
Street completion: decides when the betting on a street is closed.

Resolution order:

1. one player (or none) left in the hand;
2. everyone left is all-in or has nothing behind; otherwise the street stays
   open while anyone still owes an answer to the latest all-in, and closes if
   only one player can still act and owes nothing;
3. preflop without a raise above the big blind (or straddle): the closing
   position has to check;
4. otherwise, everyone who can still act has answered the last voluntary
   aggression by matching the highest commitment, or there was no aggression
   and everyone has acted.
"""

from __future__ import annotations

from typing import Optional

from .ledger import seeded_postings, street_contributions
from .schemas import ActionType, MONEY_ACTIONS
from .state import HandState
from .turns import acted_after, active_players, awaiting_all_in_response, closing_position, is_committed


def last_aggression_index(state: HandState, street: str) -> Optional[int]:
    """
    Index of the last bet, raise or all-in that lifted the street's highest commitment.

    An all-in that only matches or falls short of the current bet does not
    reopen the action.
    """
    running = dict(seeded_postings(state)) if street == "preflop" else {}
    highest = max(running.values(), default=0)
    found: Optional[int] = None
    for idx, action in enumerate(state.street(street).actions):
        if action.type in (ActionType.BET, ActionType.RAISE):
            found = idx
        elif action.type is ActionType.ALL_IN and action.amount > highest:
            found = idx
        if action.type in MONEY_ACTIONS:
            running[action.player] = action.amount
            highest = max(highest, action.amount)
    return found


def is_street_complete(state: HandState, street: str) -> bool:
    active = [p.position for p in active_players(state, street)]
    if len(active) <= 1:
        return True

    acting = [p for p in active if not is_committed(state, p, street)]
    if not acting:
        return True
    if any(awaiting_all_in_response(state, p, street) for p in acting):
        return False

    contributions = street_contributions(state, street)
    highest = max(contributions.values(), default=0)
    if len(acting) == 1 and contributions.get(acting[0], 0) >= highest:
        return True

    actions = state.street(street).actions

    if street == "preflop":
        closer = closing_position(state)
        closing_amount = state.straddle if state.straddle > 0 else state.blinds.bb
        if highest <= closing_amount and closer in acting:
            if not actions:
                return False
            last = actions[-1]
            return last.player == closer and last.type is ActionType.CHECK

    aggression = last_aggression_index(state, street)
    if aggression is None:
        acted = {action.player for action in actions}
        return all(p in acted and contributions.get(p, 0) >= highest for p in acting)

    aggressor = actions[aggression].player
    for position in active:
        if position == aggressor or is_committed(state, position, street):
            continue
        if not acted_after(state, position, street, aggression):
            return False
        if contributions.get(position, 0) < highest:
            return False
    return True
