"""Tests for all-in coordination and the showdown trigger."""

from conftest import build_state
from hand_recorder import all_in
from hand_recorder.schemas import AllIn, Call, Check, Fold, Position, Raise

P = Position


def _push(state, street, *actions):
    state.street(street).actions.extend(actions)


class TestResponses:
    def test_players_who_need_to_respond_in_order(self):
        state = build_state(["BTN", "SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", Raise(P.BTN, 6), AllIn(P.SB, 50))
        assert [p.position for p in all_in.players_who_need_to_respond(state, "preflop")] == [P.BTN, P.BB]
        assert all_in.any_players_need_to_respond(state, "preflop")
        assert all_in.street_status(state, "preflop") == all_in.ALL_IN_PENDING

    def test_response_clears_pending(self):
        state = build_state(["SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", AllIn(P.SB, 50), Call(P.BB, 50))
        assert not all_in.needs_to_respond_to_all_in(state, P.BB, "preflop")
        assert all_in.players_who_need_to_respond(state, "preflop") == []


class TestAllPlayersAllIn:
    def test_called_all_in(self):
        state = build_state(["SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", AllIn(P.SB, 50), Call(P.BB, 50))
        assert all_in.is_all_players_all_in(state, "preflop")
        assert all_in.is_ready_for_showdown(state)

    def test_pending_all_in_is_not_all_in(self):
        state = build_state(["SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", AllIn(P.SB, 50))
        assert not all_in.is_all_players_all_in(state, "preflop")
        assert not all_in.is_ready_for_showdown(state)

    def test_two_live_players_keep_betting(self):
        state = build_state(["BTN", "SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", Raise(P.BTN, 6), AllIn(P.SB, 50), Call(P.BB, 50), Call(P.BTN, 50))
        assert not all_in.is_all_players_all_in(state, "preflop")
        assert not all_in.is_ready_for_showdown(state)

    def test_folded_out_hand_is_not_all_in(self):
        state = build_state(["SB", "BB"], stacks={"SB": 50})
        _push(state, "preflop", AllIn(P.SB, 50), Fold(P.BB))
        assert not all_in.is_all_players_all_in(state, "preflop")
        assert all_in.uncontested_winner(state) is P.SB


class TestShowdown:
    def test_river_completed(self):
        state = build_state(["BTN", "BB"])
        _push(state, "preflop", Call(P.BTN, 2), Check(P.BB))
        for street in ("flop", "turn"):
            _push(state, street, Check(P.BB), Check(P.BTN))
        assert not all_in.is_ready_for_showdown(state)
        _push(state, "river", Check(P.BB), Check(P.BTN))
        assert all_in.is_ready_for_showdown(state)
        assert all_in.uncontested_winner(state) is None

    def test_street_status_progression(self):
        state = build_state(["BTN", "BB"])
        assert all_in.street_status(state, "preflop") == all_in.OPEN
        _push(state, "preflop", Raise(P.BTN, 6))
        assert all_in.street_status(state, "preflop") == all_in.ACTING
        _push(state, "preflop", Call(P.BB, 6))
        assert all_in.street_status(state, "preflop") == all_in.COMPLETE
