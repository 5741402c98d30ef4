from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Iterable, List, Tuple


class Rank(str, Enum):
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value


class Suit(str, Enum):
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


# Enum values are strings, so ordering always goes through these tables.
RANK_ORDER: Tuple[Rank, ...] = tuple(Rank)
SUIT_ORDER: Tuple[Suit, ...] = tuple(Suit)
RANK_VALUE: Dict[Rank, int] = {rank: idx for idx, rank in enumerate(RANK_ORDER)}
SUIT_VALUE: Dict[Suit, int] = {suit: idx for idx, suit in enumerate(SUIT_ORDER)}

RANKS_PER_SUIT = len(RANK_ORDER)
DECK_SIZE = len(SUIT_ORDER) * RANKS_PER_SUIT

SUIT_LETTERS: Dict[str, Suit] = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
}


@total_ordering
@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Plain values such as "A" or "♦" are promoted to their enum member.
        try:
            object.__setattr__(self, "rank", Rank(self.rank))
        except ValueError:
            raise ValueError(f"Invalid rank: {self.rank!r}") from None
        try:
            object.__setattr__(self, "suit", Suit(self.suit))
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit!r}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def label(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    @property
    def sort_key(self) -> Tuple[int, int]:
        return SUIT_VALUE[self.suit], RANK_VALUE[self.rank]

    @property
    def index(self) -> int:
        """Position of the card in a freshly built deck (0..51)."""
        return SUIT_VALUE[self.suit] * RANKS_PER_SUIT + RANK_VALUE[self.rank]

    @classmethod
    def from_index(cls, index: int) -> "Card":
        index = int(index)
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Invalid card index: {index}")
        suit_idx, rank_idx = divmod(index, RANKS_PER_SUIT)
        return cls(RANK_ORDER[rank_idx], SUIT_ORDER[suit_idx])


def all_cards() -> List[Card]:
    """Return the 52 cards in canonical order: clubs to spades, ace to king."""
    return [Card(rank, suit) for suit in SUIT_ORDER for rank in RANK_ORDER]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def make_string(cards: Iterable[Card], separator: str = ", ") -> str:
    return separator.join(cards_to_labels(cards))


def parse_label(label: str) -> Card:
    if not isinstance(label, str) or not 2 <= len(label) <= 3:
        raise ValueError(f"Invalid card label: {label!r}")
    rank_part, suit_part = label[:-1], label[-1]
    if rank_part.upper() == "T":
        rank_part = Rank.TEN.value
    suit = SUIT_LETTERS.get(suit_part.lower(), suit_part)
    try:
        return Card(rank_part.upper(), suit)
    except ValueError:
        raise ValueError(f"Invalid card label: {label!r}") from None
