"""
Hand recorder facade.

``HandRecorder`` is the only object a UI needs: it accepts commands (append an
action, set a board, change seating between hands) and answers every query by
re-deriving it from the full action log held in ``HandState``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from . import all_in, completion, ledger, limits, transcript, turns
from .cards import Card, cards_from_iterable, find_duplicates, remaining_cards
from .errors import (
    AmountOutOfRangeError,
    IllegalRemovalError,
    InvalidActionError,
    InvalidCardsError,
    SeatingError,
    StaleQueryError,
)
from .limits import BetLimits
from .logging_utils import NDJSONLogger
from .schemas import (
    AGGRESSIVE_ACTIONS,
    BOARD_SIZES,
    MONEY_ACTIONS,
    STREETS,
    Action,
    ActionType,
    AllIn,
    Blinds,
    Player,
    Position,
    make_action,
)
from .state import HandState, new_hand_id, street_index, validate_straddle

logger = logging.getLogger(__name__)


class HandRecorder:
    """
    Records one hand at a time and answers turn, legality and pot queries.
    """

    def __init__(self, state: HandState, event_log: Optional[NDJSONLogger] = None) -> None:
        self.state = state
        self.event_log = event_log
        self._emit("hand_start", self._hand_payload())

    @classmethod
    def create(
        cls,
        players: Sequence[Player],
        blinds: Blinds,
        straddle: int = 0,
        event_log: Optional[NDJSONLogger] = None,
    ) -> "HandRecorder":
        return cls(HandState(players=list(players), blinds=blinds, straddle=straddle), event_log)

    # ------------------------------------------------------------------ commands

    def append_action(self, street: str, action: Action) -> Action:
        """
        Validate ``action`` against the current street and append it.

        Returns the action actually stored, which is an ``AllIn`` when a call,
        bet or raise commits the player's whole reachable stack.
        """
        self._require_open(street)
        position = action.player
        self._require_turn(street, position)

        legal = self._legal_action_types(street, position)
        if action.type not in legal:
            raise InvalidActionError(
                f"{position} cannot {action.type} on the {street}; legal: {', '.join(a.value for a in legal)}"
            )

        stored = self._normalize(street, action)
        self.state.street(street).actions.append(stored)
        if stored is not action:
            logger.info("%s %s %s reclassified as all-in for %s", street, position, action.type, stored.amount)
        logger.debug("%s: %s %s %s", street, position, stored.type, stored.amount or "")
        self._emit(
            "action",
            {
                "street": street,
                "player": position.value,
                "action": stored.type.value,
                "amount": stored.amount,
                "pot": ledger.total_pot(self.state, street),
            },
        )
        return stored

    def record(
        self,
        street: str,
        player: Position | str,
        action_type: ActionType | str,
        amount: Optional[int] = None,
    ) -> Action:
        """Convenience wrapper: fills in call and all-in amounts before appending."""
        position = Position(player)
        kind = ActionType(action_type)
        if kind is ActionType.CALL and amount is None:
            amount = limits.current_bet_to_call(self.state, street)
        elif kind is ActionType.ALL_IN and amount is None:
            amount = limits.max_commitment(self.state, position, street)
        if kind in MONEY_ACTIONS and amount == 0:
            raise InvalidActionError(f"{position} has nothing to {kind} on the {street}")
        return self.append_action(street, make_action(position, kind, amount))

    def undo_last_action(self) -> Optional[Action]:
        for name in reversed(STREETS):
            actions = self.state.street(name).actions
            if actions:
                removed = actions.pop()
                self._emit("undo", {"street": name, "player": removed.player.value, "action": removed.type.value})
                return removed
        return None

    def set_board(self, street: str, cards: Iterable[str | Card]) -> List[Card]:
        if street not in BOARD_SIZES:
            raise InvalidCardsError(f"the {street} has no board")
        board = cards_from_iterable(cards)
        expected = BOARD_SIZES[street]
        if len(board) != expected:
            raise InvalidCardsError(f"the {street} needs {expected} card(s), got {len(board)}")
        target = self.state.street(street)
        others = [card for card in self.used_cards() if card not in target.board]
        clash = find_duplicates(board) + [card for card in board if card in others]
        if clash:
            raise InvalidCardsError(f"card(s) already in use: {' '.join(str(c) for c in clash)}")
        target.board = board
        self._emit("board", {"street": street, "cards": [str(card) for card in board]})
        return board

    def set_hole_cards(self, player: Position | str, cards: Optional[Iterable[str | Card]]) -> None:
        seat = self._seat(player)
        if cards is None:
            seat.hole_cards = None
            return
        pair = cards_from_iterable(cards)
        if len(pair) != 2:
            raise InvalidCardsError("hole cards come in pairs")
        others = [card for card in self.used_cards() if seat.hole_cards is None or card not in seat.hole_cards]
        clash = find_duplicates(pair) + [card for card in pair if card in others]
        if clash:
            raise InvalidCardsError(f"card(s) already in use: {' '.join(str(c) for c in clash)}")
        seat.hole_cards = (pair[0], pair[1])
        self._emit("hole_cards", {"player": seat.position.value, "cards": [str(c) for c in pair]})

    def seat_player(
        self,
        position: Position | str,
        stack: Optional[int] = None,
        *,
        player_type: str = "Unknown",
        notes: str = "",
    ) -> Player:
        self._require_between_hands("seat a player")
        position = Position(position)
        if len(self.state.players) >= 9:
            raise SeatingError("the table is full")
        if self.state.player(position) is not None:
            raise SeatingError(f"{position} is already taken")
        player = Player(
            position=position,
            stack=stack if stack is not None else self.state.blinds.default_stack,
            player_type=player_type,
            notes=notes,
        )
        self.state.players.append(player)
        self._emit("seat", {"player": position.value, "stack": player.stack})
        return player

    def remove_player(self, position: Position | str) -> Player:
        seat = self._seat(position)
        if seat.is_hero:
            raise IllegalRemovalError("the hero cannot be removed")
        villains = [p for p in self.state.players if not p.is_hero]
        if len(villains) <= 1:
            raise IllegalRemovalError("the last villain cannot be removed")
        self._require_between_hands("remove a player")
        if seat.position == Position.UTG and self.state.straddle > 0:
            raise SeatingError("remove the straddle before unseating UTG")
        self.state.players.remove(seat)
        self._emit("unseat", {"player": seat.position.value})
        return seat

    def set_stack(self, position: Position | str, stack: int) -> None:
        self._require_between_hands("change a stack")
        if stack <= 0:
            raise SeatingError("stack must be positive")
        self._seat(position).stack = stack

    def set_straddle(self, amount: int) -> None:
        self._require_between_hands("change the straddle")
        validate_straddle(amount, self.state.blinds, self.state.seated_positions())
        self.state.straddle = amount

    def new_hand(self, preserve_seats: bool = True) -> None:
        self.state.clear_streets()
        self.state.hand_id = new_hand_id()
        for player in self.state.players:
            player.hole_cards = None
            if not preserve_seats:
                player.stack = self.state.blinds.default_stack
        self._emit("hand_start", self._hand_payload())

    # ------------------------------------------------------------------- queries

    def current_bet_to_call(self, street: str) -> int:
        return limits.current_bet_to_call(self.state, street)

    def min_bet(self, street: str) -> int:
        return limits.min_bet(self.state, street)

    def min_raise(self, street: str) -> int:
        return limits.min_raise(self.state, street)

    def effective_stack(self, player: Position | str, street: str) -> int:
        return limits.effective_stack(self.state, player, street)

    def bet_limits(self, action_type: ActionType | str, player: Position | str, street: str) -> BetLimits:
        return limits.bet_limits(self.state, action_type, player, street)

    def active_players(self, street: str) -> List[Player]:
        return turns.active_players(self.state, street)

    def acting_players(self, street: str) -> List[Player]:
        return turns.acting_players(self.state, street)

    def next_acting_player(self, street: str) -> Optional[Position]:
        if self.is_street_complete(street):
            raise StaleQueryError(f"action on the {street} is closed")
        return turns.next_acting_player(self.state, street)

    def legal_actions(self, player: Position | str, street: str) -> List[ActionType]:
        if self.is_street_complete(street):
            raise StaleQueryError(f"action on the {street} is closed")
        position = Position(player)
        if position not in self._players_to_act(street):
            return []
        return self._legal_action_types(street, position)

    def is_player_all_in(self, player: Position | str, street: str) -> bool:
        return turns.is_player_all_in(self.state, player, street)

    def is_street_complete(self, street: str) -> bool:
        return completion.is_street_complete(self.state, street)

    def street_status(self, street: str) -> str:
        return all_in.street_status(self.state, street)

    def needs_to_respond_to_all_in(self, player: Position | str, street: str) -> bool:
        return all_in.needs_to_respond_to_all_in(self.state, player, street)

    def players_who_need_to_respond(self, street: str) -> List[Player]:
        return all_in.players_who_need_to_respond(self.state, street)

    def any_players_need_to_respond(self, street: str) -> bool:
        return all_in.any_players_need_to_respond(self.state, street)

    def is_all_players_all_in(self, street: str) -> bool:
        return all_in.is_all_players_all_in(self.state, street)

    def is_ready_for_showdown(self) -> bool:
        return all_in.is_ready_for_showdown(self.state)

    def uncontested_winner(self) -> Optional[Position]:
        return all_in.uncontested_winner(self.state)

    def pot_entering_street(self, street: str) -> int:
        return ledger.pot_entering_street(self.state, street)

    def total_pot(self, upto: str = "river") -> int:
        return ledger.total_pot(self.state, upto)

    def used_cards(self) -> List[Card]:
        used: List[Card] = []
        for player in self.state.players:
            if player.hole_cards:
                used.extend(player.hole_cards)
        for name in STREETS[1:]:
            used.extend(self.state.street(name).board)
        return used

    def available_cards(self) -> List[Card]:
        return remaining_cards(self.used_cards())

    def current_street(self) -> Optional[str]:
        """The street taking action, or ``None`` once betting is over for the hand."""
        if len(turns.active_players(self.state, "river")) <= 1:
            return None
        for name in STREETS:
            if all_in.is_all_players_all_in(self.state, name):
                return None
            if not completion.is_street_complete(self.state, name):
                return name
        return None

    def blind_info(self) -> str:
        return transcript.blind_info(self.state)

    # ------------------------------------------------------------------ internals

    def _seat(self, position: Position | str) -> Player:
        seat = self.state.player(position)
        if seat is None:
            raise SeatingError(f"nobody is seated at {Position(position)}")
        return seat

    def _require_between_hands(self, what: str) -> None:
        if self.state.has_actions():
            raise SeatingError(f"cannot {what} while a hand is in progress")

    def _require_open(self, street: str) -> None:
        street_index(street)
        current = self.current_street()
        if current is None:
            raise InvalidActionError("betting is over for this hand")
        if street != current:
            raise InvalidActionError(f"the {street} is not open for action (current street: {current})")

    def _players_to_act(self, street: str) -> List[Position]:
        pending = [p.position for p in all_in.players_who_need_to_respond(self.state, street)]
        if pending:
            return pending
        nxt = turns.next_acting_player(self.state, street)
        return [nxt] if nxt is not None else []

    def _require_turn(self, street: str, position: Position) -> None:
        if self.state.player(position) is None:
            raise InvalidActionError(f"nobody is seated at {position}")
        if turns.has_folded(self.state, position, street):
            raise InvalidActionError(f"{position} has already folded")
        if turns.is_committed(self.state, position, street):
            raise InvalidActionError(f"{position} is all-in and cannot act")
        expected = self._players_to_act(street)
        if position not in expected:
            raise InvalidActionError(
                f"it is not {position}'s turn on the {street}; waiting on {', '.join(str(p) for p in expected)}"
            )

    def _legal_action_types(self, street: str, position: Position) -> List[ActionType]:
        to_call = limits.amount_to_call(self.state, position, street)
        current_bet = limits.current_bet_to_call(self.state, street)
        ceiling = limits.max_commitment(self.state, position, street)
        others_can_act = any(
            p.position != position for p in turns.acting_players(self.state, street)
        )

        legal = [ActionType.FOLD]
        legal.append(ActionType.CHECK if to_call == 0 else ActionType.CALL)
        if others_can_act:
            opened = any(a.type in AGGRESSIVE_ACTIONS for a in self.state.street(street).actions)
            if not opened and current_bet == 0:
                legal.append(ActionType.BET)
            if current_bet > 0 and ceiling > current_bet:
                legal.append(ActionType.RAISE)
        if others_can_act or ceiling <= current_bet:
            legal.append(ActionType.ALL_IN)
        return legal

    def _normalize(self, street: str, action: Action) -> Action:
        position = action.player
        ceiling = limits.max_commitment(self.state, position, street)
        kind = action.type

        if kind is ActionType.CALL:
            to_call = limits.current_bet_to_call(self.state, street)
            if to_call >= ceiling:
                if action.amount < ceiling:
                    raise AmountOutOfRangeError(
                        f"{position} calls all-in for {ceiling}, got {action.amount}", ceiling, ceiling
                    )
                return AllIn(player=position, amount=ceiling)
            if action.amount != to_call:
                raise AmountOutOfRangeError(
                    f"a call on the {street} must be {to_call}, got {action.amount}", to_call, to_call
                )
            return action

        if kind in (ActionType.BET, ActionType.RAISE):
            bounds = limits.bet_limits(self.state, kind, position, street)
            if action.amount > bounds.max:
                raise AmountOutOfRangeError(
                    f"{position} can {kind} at most {bounds.max}, got {action.amount}", bounds.min, bounds.max
                )
            if action.amount == bounds.max:
                return AllIn(player=position, amount=ceiling)
            if action.amount < bounds.min:
                raise AmountOutOfRangeError(
                    f"minimum {kind} on the {street} is {bounds.min}, got {action.amount}", bounds.min, bounds.max
                )
            return action

        if kind is ActionType.ALL_IN and action.amount != ceiling:
            raise AmountOutOfRangeError(
                f"{position} is all-in for {ceiling}, got {action.amount}", ceiling, ceiling
            )
        return action

    def _hand_payload(self) -> dict:
        return {
            "hand_id": self.state.hand_id,
            "blinds": self.state.blinds.as_dict(),
            "straddle": self.state.straddle,
            "seats": {
                p.position.value: {"stack": p.stack, "hero": p.is_hero} for p in self.state.players
            },
        }

    def _emit(self, event_type: str, payload: dict) -> None:
        if self.event_log is not None:
            self.event_log.log(event_type, payload)
