"""Tests for action variants, players and stakes."""

import pytest

from hand_recorder.schemas import (
    ActionType,
    AllIn,
    Bet,
    Blinds,
    Check,
    Fold,
    Player,
    Position,
    Raise,
    make_action,
)


class TestActions:
    def test_only_money_actions_carry_amounts(self):
        assert Fold(Position.BTN).amount is None
        assert Check(Position.BB).amount is None
        assert Raise(Position.BTN, 6).amount == 6

    def test_player_is_coerced_to_position(self):
        assert Bet("CO", 10).player is Position.CO
        assert Fold("UTG+1").player is Position.UTG1

    @pytest.mark.parametrize("amount", [0, -5, 2.5, True])
    def test_wager_amount_must_be_positive_int(self, amount):
        with pytest.raises(ValueError):
            Bet(Position.BTN, amount)

    def test_make_action_builds_variant(self):
        action = make_action("BTN", "all-in", 200)
        assert isinstance(action, AllIn)
        assert action.type is ActionType.ALL_IN

    def test_make_action_requires_amount_for_money(self):
        with pytest.raises(ValueError):
            make_action("BTN", "call")

    def test_make_action_rejects_amount_for_fold(self):
        with pytest.raises(ValueError):
            make_action("BTN", "fold", 4)

    def test_unknown_position(self):
        with pytest.raises(ValueError):
            make_action("MP", "fold")


class TestPlayerAndBlinds:
    def test_player_requires_positive_stack(self):
        with pytest.raises(ValueError):
            Player(position=Position.BTN, stack=0)

    def test_player_type_must_be_known(self):
        with pytest.raises(ValueError):
            Player(position=Position.BTN, stack=100, player_type="Shark")

    def test_blinds_order(self):
        with pytest.raises(ValueError):
            Blinds(sb=3, bb=2)

    def test_default_stack_is_100_big_blinds(self):
        assert Blinds(sb=2, bb=5).default_stack == 500
