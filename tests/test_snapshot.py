"""Tests for JSON snapshots."""

import pytest

from hand_recorder import snapshot
from hand_recorder.engine import HandRecorder
from hand_recorder.schemas import Position


class TestSnapshot:
    def test_save_and_load_hand_in_progress(self, tmp_path, make_recorder):
        rec = make_recorder(["BTN", "BB"])
        rec.set_hole_cards("BTN", ["Ah", "Ks"])
        rec.state.player("BB").notes = "limps a lot"
        rec.record("preflop", "BTN", "raise", 6)
        rec.record("preflop", "BB", "call")
        rec.set_board("flop", ["7c", "8d", "2s"])

        path = snapshot.save(rec.state, tmp_path / "hand.json")
        restored = snapshot.load(path)

        assert snapshot.to_dict(restored) == snapshot.to_dict(rec.state)
        assert restored.hand_id == rec.state.hand_id
        resumed = HandRecorder(restored)
        assert resumed.current_street() == "flop"
        assert resumed.next_acting_player("flop") is Position.BB
        assert resumed.total_pot("preflop") == 12

    def test_actions_serialized_with_amounts(self, make_recorder):
        rec = make_recorder(["BTN", "BB"])
        rec.record("preflop", "BTN", "fold")
        data = snapshot.to_dict(rec.state)
        assert data["streets"]["preflop"]["actions"] == [{"player": "BTN", "action": "fold", "amount": None}]

    def test_unknown_version(self, make_recorder):
        data = snapshot.to_dict(make_recorder().state)
        data["version"] = 99
        with pytest.raises(ValueError):
            snapshot.from_dict(data)
