from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List

from ..cards import RANK_ORDER, SUIT_ORDER, Card, Rank, Suit
from ..dealing import SeedOrRng, require_available, require_positive, resolve_rng, swap_sequence
from ..views import ImmutableBag, ImmutableMapping, ImmutableSortedSet

LOGGER = logging.getLogger("deckofcards.decks.imperative")


class ImperativeDeckOfCards:
    """Reference backend: explicit loops over plain lists and dicts."""

    name = "imperative"

    def __init__(self) -> None:
        cards: List[Card] = []
        for suit in SUIT_ORDER:
            for rank in RANK_ORDER:
                cards.append(Card(rank, suit))
        self._cards = ImmutableSortedSet(cards)

        groups: Dict[Suit, List[Card]] = {}
        for card in self._cards:
            if card.suit not in groups:
                groups[card.suit] = []
            groups[card.suit].append(card)
        by_suit: Dict[Suit, ImmutableSortedSet[Card]] = {}
        for suit in SUIT_ORDER:
            by_suit[suit] = ImmutableSortedSet(groups[suit])
        self._cards_by_suit = ImmutableMapping(by_suit)

    # Queries ---------------------------------------------------------

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
        counts: Dict[Suit, int] = {}
        for card in self._cards:
            counts.setdefault(card.suit, 0)
            counts[card.suit] += 1
        return ImmutableBag(counts)

    def counts_by_rank(self) -> ImmutableBag[Rank]:
        counts: Dict[Rank, int] = {}
        for card in self._cards:
            counts.setdefault(card.rank, 0)
            counts[card.rank] += 1
        return ImmutableBag(counts)

    # Dealing ---------------------------------------------------------

    def shuffle(self, seed_or_rng: SeedOrRng) -> Deque[Card]:
        rng = resolve_rng(seed_or_rng)
        cards = list(self._cards)
        for i, j in swap_sequence(len(cards), rng):
            cards[i], cards[j] = cards[j], cards[i]
        LOGGER.debug("Shuffled %d cards", len(cards))
        return deque(cards)

    def deal(self, shuffled: Deque[Card], hand_size: int) -> ImmutableSortedSet[Card]:
        require_positive("hand_size", hand_size)
        require_available(len(shuffled), hand_size)
        hand: List[Card] = []
        for _ in range(hand_size):
            hand.append(shuffled.popleft())
        return ImmutableSortedSet(hand)

    def deal_hands(
        self, shuffled: Deque[Card], hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        require_positive("hand_size", hand_size)
        require_positive("hand_count", hand_count)
        require_available(len(shuffled), hand_size * hand_count)
        hands: List[ImmutableSortedSet[Card]] = []
        for _ in range(hand_count):
            hands.append(self.deal(shuffled, hand_size))
        return hands

    def shuffle_and_deal(
        self, seed_or_rng: SeedOrRng, hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]:
        return self.deal_hands(self.shuffle(seed_or_rng), hand_size, hand_count)
