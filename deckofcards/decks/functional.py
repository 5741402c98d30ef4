from __future__ import annotations

from collections import Counter, deque
from itertools import groupby, product
from operator import attrgetter
from typing import Deque, List

from ..cards import RANK_ORDER, SUIT_ORDER, Card, Rank, Suit
from ..dealing import SeedOrRng, require_available, require_positive, resolve_rng, shuffle_order
from ..views import ImmutableBag, ImmutableMapping, ImmutableSortedSet


class FunctionalDeckOfCards:
    """Backend built from itertools and collections pipelines."""

    name = "functional"

    def __init__(self) -> None:
        self._cards = ImmutableSortedSet(Card(rank, suit) for suit, rank in product(SUIT_ORDER, RANK_ORDER))
        # Cards iterate suit-major, so groupby sees each suit as one run.
        self._cards_by_suit = ImmutableMapping(
            (suit, ImmutableSortedSet(group)) for suit, group in groupby(self._cards, key=attrgetter("suit"))
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
        return ImmutableBag(Counter(map(attrgetter("suit"), self._cards)))

    def counts_by_rank(self) -> ImmutableBag[Rank]:
        return ImmutableBag(Counter(map(attrgetter("rank"), self._cards)))

    def shuffle(self, seed_or_rng: SeedOrRng) -> Deque[Card]:
        cards = self._cards.to_list()
        return deque(cards[idx] for idx in shuffle_order(len(cards), resolve_rng(seed_or_rng)))

    def deal(self, shuffled: Deque[Card], hand_size: int) -> ImmutableSortedSet[Card]:
        require_positive("hand_size", hand_size)
        require_available(len(shuffled), hand_size)
        return ImmutableSortedSet(shuffled.popleft() for _ in range(hand_size))

    def deal_hands(
        self, shuffled: Deque[Card], hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        require_positive("hand_size", hand_size)
        require_positive("hand_count", hand_count)
        require_available(len(shuffled), hand_size * hand_count)
        return [self.deal(shuffled, hand_size) for _ in range(hand_count)]

    def shuffle_and_deal(
        self, seed_or_rng: SeedOrRng, hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        return self.deal_hands(self.shuffle(seed_or_rng), hand_size, hand_count)
