"""Check that deck backends agree with the reference backend."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .cards import SUIT_ORDER, cards_to_labels
from .decks import REFERENCE_BACKEND, DeckOfCards, available_backends, create_deck
from .models import DealConfig, DealResult

LOGGER = logging.getLogger("deckofcards.compare")


def run_deal(config: DealConfig, deck: Optional[DeckOfCards] = None) -> DealResult:
    """Shuffle once with ``config.seed`` and deal the configured hands."""
    deck = deck or create_deck(config.backend)
    shuffled = deck.shuffle(config.seed)
    hands = deck.deal_hands(shuffled, config.hand_size, config.hand_count)
    LOGGER.debug("Dealt %d hands of %d with %s (seed=%s)", len(hands), config.hand_size, deck.name, config.seed)
    return DealResult(
        backend=deck.name,
        seed=config.seed,
        hands=[cards_to_labels(hand) for hand in hands],
        remaining=len(shuffled),
    )


def _checks(config: DealConfig) -> List[Tuple[str, Callable[[DeckOfCards], object]]]:
    checks: List[Tuple[str, Callable[[DeckOfCards], object]]] = [
        ("cards", lambda deck: list(deck.get_cards())),
        ("cards_by_suit", lambda deck: {suit: list(cards) for suit, cards in deck.get_cards_by_suit().items()}),
        ("counts_by_suit", lambda deck: dict(deck.counts_by_suit())),
        ("counts_by_rank", lambda deck: dict(deck.counts_by_rank())),
        ("shuffle", lambda deck: list(deck.shuffle(config.seed))),
        (
            "shuffle_and_deal",
            lambda deck: [list(hand) for hand in deck.shuffle_and_deal(config.seed, config.hand_size, config.hand_count)],
        ),
    ]
    for suit in SUIT_ORDER:
        checks.append((f"cards_of[{suit.name}]", lambda deck, suit=suit: list(deck.cards_of(suit))))
    return checks


def compare_backends(config: DealConfig, names: Optional[Iterable[str]] = None) -> Dict[str, bool]:
    """Return, per backend name, whether it matches the reference on every check."""
    reference = create_deck(REFERENCE_BACKEND)
    checks = _checks(config)
    expected = {label: check(reference) for label, check in checks}

    results: Dict[str, bool] = {}
    for name in available_backends() if names is None else names:
        deck = create_deck(name)
        mismatches = [label for label, check in checks if check(deck) != expected[label]]
        if mismatches:
            LOGGER.warning("Backend %s disagrees with %s on: %s", name, REFERENCE_BACKEND, ", ".join(mismatches))
        else:
            LOGGER.info("Backend %s matches %s", name, REFERENCE_BACKEND)
        results[name] = not mismatches
    return results
