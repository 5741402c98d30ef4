from __future__ import annotations

from typing import Iterable, List, Set

from deckofcards.cards import Card, parse_label
from deckofcards.decks import REFERENCE_BACKEND, DeckOfCards, available_backends, create_deck

BACKEND_NAMES: List[str] = available_backends()
ALTERNATE_BACKENDS: List[str] = [name for name in BACKEND_NAMES if name != REFERENCE_BACKEND]


def reference_deck() -> DeckOfCards:
    return create_deck(REFERENCE_BACKEND)


def labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def card_set(*names: str) -> Set[Card]:
    """Build a plain set of cards from labels such as ``"A♦"`` or ``"Td"``."""
    return {parse_label(name) for name in names}
