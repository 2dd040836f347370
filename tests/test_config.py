"""Tests for table and hand configuration files."""

import json

import pytest

from hand_recorder.config import STAKE_PRESETS, ScriptedAction, TableConfig
from hand_recorder.errors import InvalidActionError
from hand_recorder.schemas import Position

HAND_YAML = """\
blinds: "2/5"
stacks_bb: 100
players:
  - position: BTN
    hero: true
    cards: [Ah, Ks]
    type: TAG
  - position: BB
    stack: 300
    notes: defends wide
streets:
  preflop:
    actions:
      - BTN raise 15
      - BB call
  flop:
    board: [7c, 8d, 2s]
    actions:
      - {player: BB, action: check}
      - {player: BTN, action: bet, amount: 20}
      - BB fold
"""


def _write(tmp_path, text, name="hand.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestTableConfig:
    def test_from_yaml(self, tmp_path):
        config = TableConfig.from_file(_write(tmp_path, HAND_YAML))
        assert config.blinds == {"sb": 2, "bb": 5}
        assert config.starting_stack == 500
        assert [seat.position for seat in config.players] == ["BTN", "BB"]
        assert config.streets["preflop"].actions[1] == ScriptedAction(player="BB", action="call")

    def test_from_json(self, tmp_path):
        data = {
            "blinds": {"sb": 1, "bb": 2},
            "players": [{"position": "SB", "hero": True}, {"position": "BB"}],
        }
        config = TableConfig.from_file(_write(tmp_path, json.dumps(data), "table.json"))
        state = config.build_state()
        assert [p.stack for p in state.players] == [200, 200]
        assert state.hero.position is Position.SB

    def test_build_recorder_places_hole_cards(self, tmp_path):
        recorder = TableConfig.from_file(_write(tmp_path, HAND_YAML)).build_recorder()
        hero = recorder.state.hero
        assert [str(card) for card in hero.hole_cards] == ["Ah", "Ks"]
        assert hero.player_type == "TAG"
        assert recorder.state.player("BB").notes == "defends wide"

    def test_replay(self, tmp_path):
        config = TableConfig.from_file(_write(tmp_path, HAND_YAML))
        recorder = config.replay(config.build_recorder())
        assert recorder.uncontested_winner() is Position.BTN
        assert recorder.total_pot() == 50

    def test_replay_refuses_illegal_action(self, tmp_path):
        text = HAND_YAML.replace("- BTN raise 15\n      - BB call", "- BB call")
        config = TableConfig.from_file(_write(tmp_path, text))
        with pytest.raises(InvalidActionError):
            config.replay(config.build_recorder())


class TestValidation:
    def _base(self):
        return {
            "blinds": "1/2",
            "players": [{"position": "BTN", "hero": True}, {"position": "BB"}],
        }

    def test_presets(self):
        assert STAKE_PRESETS["5/10"] == (5, 10)
        with pytest.raises(ValueError):
            TableConfig.from_dict({**self._base(), "blinds": "3/6"})

    def test_two_heroes(self):
        data = self._base()
        data["players"][1]["hero"] = True
        with pytest.raises(ValueError):
            TableConfig.from_dict(data)

    def test_straddle_without_utg(self):
        with pytest.raises(ValueError):
            TableConfig.from_dict({**self._base(), "straddle": 4})

    def test_unknown_street(self):
        with pytest.raises(ValueError):
            TableConfig.from_dict({**self._base(), "streets": {"showdown": {}}})

    def test_bad_action_string(self):
        with pytest.raises(ValueError):
            ScriptedAction.parse("BTN")

    def test_unknown_player_type(self):
        data = self._base()
        data["players"][1]["type"] = "Shark"
        with pytest.raises(ValueError):
            TableConfig.from_dict(data)
