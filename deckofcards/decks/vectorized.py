from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List

import numpy as np

from ..cards import DECK_SIZE, RANK_ORDER, RANKS_PER_SUIT, SUIT_ORDER, SUIT_VALUE, Card, Rank, Suit
from ..dealing import SeedOrRng, require_available, require_positive, resolve_rng, swap_sequence
from ..views import ImmutableBag, ImmutableMapping, ImmutableSortedSet


def _to_cards(indices: Iterable[int]) -> List[Card]:
    return [Card.from_index(int(idx)) for idx in indices]


class NumpyDeckOfCards:
    """Backend holding the deck as an array of card indices (suit * 13 + rank)."""

    name = "numpy"

    def __init__(self) -> None:
        self._indices = np.arange(DECK_SIZE, dtype=np.int64)
        self._indices.setflags(write=False)
        # One row per suit, ranks ascending along each row.
        self._grid = self._indices.reshape(len(SUIT_ORDER), RANKS_PER_SUIT)
        self._cards = ImmutableSortedSet(_to_cards(self._indices))
        self._cards_by_suit = ImmutableMapping(
            (suit, ImmutableSortedSet(_to_cards(self._grid[SUIT_VALUE[suit]]))) for suit in SUIT_ORDER
        )

    def get_cards(self) -> ImmutableSortedSet[Card]:
        return self._cards

    def cards_of(self, suit: Suit) -> ImmutableSortedSet[Card]:
        return self._cards_by_suit[suit]

    def clubs(self) -> ImmutableSortedSet[Card]:
        return self.cards_of(Suit.CLUBS)

    def diamonds(self) -> ImmutableSortedSet[Card]:
        return self.cards_of(Suit.DIAMONDS)

    def hearts(self) -> ImmutableSortedSet[Card]:
        return self.cards_of(Suit.HEARTS)

    def spades(self) -> ImmutableSortedSet[Card]:
        return self.cards_of(Suit.SPADES)

    def get_cards_by_suit(self) -> ImmutableMapping[Suit, ImmutableSortedSet[Card]]:
        return self._cards_by_suit

    def counts_by_suit(self) -> ImmutableBag[Suit]:
        counts = np.bincount(self._indices // RANKS_PER_SUIT, minlength=len(SUIT_ORDER))
        return ImmutableBag(zip(SUIT_ORDER, counts.tolist()))

    def counts_by_rank(self) -> ImmutableBag[Rank]:
        counts = np.bincount(self._indices % RANKS_PER_SUIT, minlength=RANKS_PER_SUIT)
        return ImmutableBag(zip(RANK_ORDER, counts.tolist()))

    def shuffle(self, seed_or_rng: SeedOrRng) -> Deque[Card]:
        rng = resolve_rng(seed_or_rng)
        order = self._indices.copy()
        for i, j in swap_sequence(order.size, rng):
            order[[i, j]] = order[[j, i]]
        return deque(_to_cards(order))

    def _take(self, shuffled: Deque[Card], count: int) -> np.ndarray:
        return np.fromiter((shuffled.popleft().index for _ in range(count)), dtype=np.int64, count=count)

    def deal(self, shuffled: Deque[Card], hand_size: int) -> ImmutableSortedSet[Card]:
        require_positive("hand_size", hand_size)
        require_available(len(shuffled), hand_size)
        return ImmutableSortedSet(_to_cards(np.sort(self._take(shuffled, hand_size))))

    def deal_hands(
        self, shuffled: Deque[Card], hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        require_positive("hand_size", hand_size)
        require_positive("hand_count", hand_count)
        require_available(len(shuffled), hand_size * hand_count)
        # Consecutive rows of the block are the consecutive hands.
        block = self._take(shuffled, hand_size * hand_count).reshape(hand_count, hand_size)
        return [ImmutableSortedSet(_to_cards(row)) for row in np.sort(block, axis=1)]

    def shuffle_and_deal(
        self, seed_or_rng: SeedOrRng, hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        return self.deal_hands(self.shuffle(seed_or_rng), hand_size, hand_count)
