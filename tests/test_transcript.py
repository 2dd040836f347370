"""Tests for the shareable text transcript."""

from hand_recorder import transcript


def _raise_and_call(make_recorder):
    rec = make_recorder(["BTN", "BB"])
    hero = rec.state.player("BTN")
    hero.player_type = "TAG"
    hero.notes = "reg"
    rec.set_hole_cards("BTN", ["Ah", "Ks"])
    rec.record("preflop", "BTN", "raise", 6)
    rec.record("preflop", "BB", "call")
    return rec


class TestFormatAmount:
    def test_dollars(self):
        assert transcript.format_amount(6, 2) == "$6"

    def test_big_blinds(self):
        assert transcript.format_amount(6, 2, use_dollars=False) == "3BB"
        assert transcript.format_amount(3, 2, use_dollars=False) == "1.5BB"


class TestRender:
    def test_in_dollars(self, make_recorder):
        rec = _raise_and_call(make_recorder)
        lines = transcript.render(rec.state).splitlines()
        assert lines[0] == f"Hand {rec.state.hand_id}"
        assert lines[1] == "Small Blind: $1, Big Blind: $2"
        assert "Hero (BTN): $200 with A♥ K♠ • TAG - reg" in lines
        assert "Villain (BB): $200" in lines
        assert "Preflop (pot $2)" in lines
        assert lines.index("BTN: raise $6") < lines.index("BB: call $6")
        assert "Final pot: $12" in lines
        assert lines[-1] == "Hand in progress"
        assert not any(line.startswith("Flop") for line in lines)

    def test_in_big_blinds(self, make_recorder):
        rec = _raise_and_call(make_recorder)
        text = transcript.render(rec.state, use_dollars=False)
        assert "Hero (BTN): 100BB with A♥ K♠ • TAG - reg" in text
        assert "BTN: raise 3BB" in text
        assert "Final pot: 6BB" in text

    def test_board_and_uncontested_result(self, make_recorder):
        rec = _raise_and_call(make_recorder)
        rec.set_board("flop", ["7c", "8d", "2s"])
        rec.record("flop", "BB", "bet", 8)
        rec.record("flop", "BTN", "fold")
        lines = transcript.render(rec.state).splitlines()
        assert "Flop: 7♣ 8♦ 2♠ (pot $12)" in lines
        assert "BB: bet $8" in lines
        assert "BTN: fold" in lines
        assert lines[-1] == "BB wins $20 uncontested"

    def test_showdown(self, make_recorder):
        rec = make_recorder(["SB", "BB"], stacks={"SB": 50})
        rec.record("preflop", "SB", "all-in")
        rec.record("preflop", "BB", "call")
        lines = transcript.render(rec.state).splitlines()
        assert "SB: all-in $50" in lines
        assert lines[-1] == "Showdown: SB, BB"
