from __future__ import annotations

from typing import Deque, List, Protocol, runtime_checkable

from ..cards import Card, Rank, Suit
from ..dealing import SeedOrRng
from ..views import ImmutableBag, ImmutableMapping, ImmutableSortedSet


@runtime_checkable
class DeckOfCards(Protocol):
    """Operations every deck backend provides.

    Backends share no base class. They are held to the same results by the
    contract tests, which compare each one against the imperative backend.
    """

    name: str

    def get_cards(self) -> ImmutableSortedSet[Card]: ...

    def cards_of(self, suit: Suit) -> ImmutableSortedSet[Card]: ...

    def clubs(self) -> ImmutableSortedSet[Card]: ...

    def diamonds(self) -> ImmutableSortedSet[Card]: ...

    def hearts(self) -> ImmutableSortedSet[Card]: ...

    def spades(self) -> ImmutableSortedSet[Card]: ...

    def get_cards_by_suit(self) -> ImmutableMapping[Suit, ImmutableSortedSet[Card]]: ...

    def counts_by_suit(self) -> ImmutableBag[Suit]: ...

    def counts_by_rank(self) -> ImmutableBag[Rank]: ...

    def shuffle(self, seed_or_rng: SeedOrRng) -> Deque[Card]: ...

    def deal(self, shuffled: Deque[Card], hand_size: int) -> ImmutableSortedSet[Card]: ...

    def deal_hands(
        self, shuffled: Deque[Card], hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]: ...

    def shuffle_and_deal(
        self, seed_or_rng: SeedOrRng, hand_size: int, hand_count: int
    ) -> List[ImmutableSortedSet[Card]]: ...
