"""Deck-of-cards kata: one deck contract, several collection backends."""

from .cards import (
    DECK_SIZE,
    RANK_ORDER,
    SUIT_ORDER,
    Card,
    Rank,
    Suit,
    all_cards,
    cards_to_labels,
    make_string,
    parse_label,
)
from .dealing import PreconditionError, shuffle_order
from .decks import BACKENDS, DeckOfCards, available_backends, create_deck
from .models import DealConfig, DealResult
from .views import ImmutableBag, ImmutableMapping, ImmutableSortedSet, UnsupportedMutationError

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "DECK_SIZE",
    "RANK_ORDER",
    "SUIT_ORDER",
    "all_cards",
    "cards_to_labels",
    "make_string",
    "parse_label",
    "PreconditionError",
    "shuffle_order",
    "BACKENDS",
    "DeckOfCards",
    "available_backends",
    "create_deck",
    "DealConfig",
    "DealResult",
    "ImmutableBag",
    "ImmutableMapping",
    "ImmutableSortedSet",
    "UnsupportedMutationError",
]
