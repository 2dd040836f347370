"""
Card primitives for the hand recorder.

Cards are written as two-character tokens (rank then suit), e.g. ``As`` or
``Td``. The recorder never ranks hands; it only needs to parse, print and
exclude cards that are already on the table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

SUITS: Tuple[str, ...] = ("s", "h", "d", "c")
RANKS: Tuple[str, ...] = ("2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A")
SUIT_SYMBOLS = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"invalid rank {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"invalid suit {self.suit}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card(rank={self.rank!r}, suit={self.suit!r})"

    @property
    def symbol(self) -> str:
        return f"{self.rank}{SUIT_SYMBOLS[self.suit]}"


def card_from_str(token: str) -> Card:
    token = token.strip()
    if len(token) == 3 and token[:2] == "10":
        token = "T" + token[2]
    if len(token) != 2:
        raise ValueError(f"invalid card token: {token!r}")
    return Card(rank=token[0].upper(), suit=token[1].lower())


def cards_from_iterable(tokens: Iterable[str | Card]) -> List[Card]:
    return [token if isinstance(token, Card) else card_from_str(token) for token in tokens]


def new_deck() -> List[Card]:
    return [Card(rank, suit) for rank in RANKS for suit in SUITS]


def remaining_cards(used: Iterable[Card]) -> List[Card]:
    """Deck order minus the cards already placed (card-picker exclusion)."""
    taken = set(used)
    return [card for card in new_deck() if card not in taken]


def find_duplicates(cards: Iterable[Card]) -> List[Card]:
    seen = set()
    duplicates: List[Card] = []
    for card in cards:
        if card in seen and card not in duplicates:
            duplicates.append(card)
        seen.add(card)
    return duplicates
