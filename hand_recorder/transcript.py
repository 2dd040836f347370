"""
Shareable text transcript of a recorded hand.
"""

from __future__ import annotations

from typing import List

from . import all_in, ledger, turns
from .cards import Card
from .schemas import STREETS, Player
from .state import HandState


def format_amount(amount: int, bb: int, use_dollars: bool = True) -> str:
    """``$6`` in dollars, ``3BB`` (or ``1.5BB``) in big blinds."""
    if use_dollars:
        return f"${amount}"
    return f"{amount / bb:g}BB"


def format_card(card: Card) -> str:
    return card.symbol


def blind_info(state: HandState) -> str:
    text = f"Small Blind: ${state.blinds.sb}, Big Blind: ${state.blinds.bb}"
    if state.straddle > 0:
        text += f", Straddle: ${state.straddle}"
    return text


def player_line(player: Player, bb: int, use_dollars: bool = True) -> str:
    label = "Hero" if player.is_hero else "Villain"
    line = f"{label} ({player.position}): {format_amount(player.stack, bb, use_dollars)}"
    if player.hole_cards:
        line += " with " + " ".join(format_card(card) for card in player.hole_cards)
    if player.player_type != "Unknown":
        line += f" • {player.player_type}"
    if player.notes:
        line += f" - {player.notes}"
    return line


def render(state: HandState, use_dollars: bool = True) -> str:
    bb = state.blinds.bb
    lines: List[str] = [f"Hand {state.hand_id}", blind_info(state), ""]
    lines.extend(player_line(player, bb, use_dollars) for player in state.players)

    for name in STREETS:
        street = state.street(name)
        if name != "preflop" and not street.board and not street.actions:
            continue
        pot = format_amount(ledger.pot_entering_street(state, name), bb, use_dollars)
        header = name.capitalize()
        if street.board:
            header += ": " + " ".join(format_card(card) for card in street.board)
        lines.append("")
        lines.append(f"{header} (pot {pot})")
        for action in street.actions:
            text = f"{action.player}: {action.type}"
            if action.amount is not None:
                text += " " + format_amount(action.amount, bb, use_dollars)
            lines.append(text)

    final_pot = format_amount(ledger.total_pot(state, "river"), bb, use_dollars)
    lines.append("")
    lines.append(f"Final pot: {final_pot}")
    winner = all_in.uncontested_winner(state)
    if winner is not None:
        lines.append(f"{winner} wins {final_pot} uncontested")
    elif all_in.is_ready_for_showdown(state):
        lines.append("Showdown: " + ", ".join(str(p.position) for p in turns.active_players(state, "river")))
    else:
        lines.append("Hand in progress")
    return "\n".join(lines) + "\n"
