"""
Contribution ledger: who has put how much into the pot.

An action amount is the player's total on that street, so within a street the
latest amount replaces the previous one. Across streets the per-street totals
add up.
"""

from __future__ import annotations

from typing import Dict

from .schemas import MONEY_ACTIONS, Position
from .state import HandState, previous_street


def seeded_postings(state: HandState) -> Dict[Position, int]:
    """Blinds and straddle posted before any preflop action, seated positions only."""
    seated = state.seated_positions()
    postings: Dict[Position, int] = {}
    if Position.SB in seated:
        postings[Position.SB] = state.blinds.sb
    if Position.BB in seated:
        postings[Position.BB] = state.blinds.bb
    if state.straddle > 0 and Position.UTG in seated:
        postings[Position.UTG] = state.straddle
    return postings


def street_contributions(state: HandState, street: str) -> Dict[Position, int]:
    contributions = dict(seeded_postings(state)) if street == "preflop" else {}
    for action in state.street(street).actions:
        if action.type in MONEY_ACTIONS:
            contributions[action.player] = action.amount
    return contributions


def contributions(state: HandState, upto: str) -> Dict[Position, int]:
    totals: Dict[Position, int] = {}
    for street in state.streets_through(upto):
        for position, amount in street_contributions(state, street.name).items():
            totals[position] = totals.get(position, 0) + amount
    return totals


def total_pot(state: HandState, upto: str) -> int:
    return sum(contributions(state, upto).values())


def pot_entering_street(state: HandState, street: str) -> int:
    before = previous_street(street)
    if before is None:
        return sum(seeded_postings(state).values())
    return total_pot(state, before)


def highest_street_contribution(state: HandState, street: str) -> int:
    return max(street_contributions(state, street).values(), default=0)
