"""Shared builders for hand recorder tests."""

from typing import Dict, Optional, Sequence

import pytest

from hand_recorder.engine import HandRecorder
from hand_recorder.schemas import Blinds, Player, Position
from hand_recorder.state import HandState


def build_state(
    positions: Sequence[str],
    stacks: Optional[Dict[str, int]] = None,
    hero: Optional[str] = None,
    sb: int = 1,
    bb: int = 2,
    straddle: int = 0,
) -> HandState:
    """Seat ``positions`` with 100bb each unless ``stacks`` says otherwise; hero defaults to the first seat."""
    stacks = stacks or {}
    hero = hero or positions[0]
    players = [
        Player(position=Position(pos), stack=stacks.get(pos, bb * 100), is_hero=(pos == hero))
        for pos in positions
    ]
    return HandState(players=players, blinds=Blinds(sb=sb, bb=bb), straddle=straddle)


@pytest.fixture
def make_recorder():
    def _make(positions: Sequence[str] = ("BTN", "BB"), **kwargs) -> HandRecorder:
        return HandRecorder(build_state(positions, **kwargs))

    return _make
