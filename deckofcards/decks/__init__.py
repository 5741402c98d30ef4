"""Interchangeable deck backends and the registry used to pick one by name."""

from __future__ import annotations

from typing import Dict, List, Type

from .base import DeckOfCards
from .functional import FunctionalDeckOfCards
from .imperative import ImperativeDeckOfCards
from .vectorized import NumpyDeckOfCards

REFERENCE_BACKEND = ImperativeDeckOfCards.name

BACKENDS: Dict[str, Type[DeckOfCards]] = {
    ImperativeDeckOfCards.name: ImperativeDeckOfCards,
    FunctionalDeckOfCards.name: FunctionalDeckOfCards,
    NumpyDeckOfCards.name: NumpyDeckOfCards,
}


def available_backends() -> List[str]:
    return list(BACKENDS)


def create_deck(name: str = REFERENCE_BACKEND) -> DeckOfCards:
    try:
        factory = BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend {name!r}; choose from {', '.join(BACKENDS)}") from None
    return factory()


__all__ = [
    "BACKENDS",
    "REFERENCE_BACKEND",
    "DeckOfCards",
    "FunctionalDeckOfCards",
    "ImperativeDeckOfCards",
    "NumpyDeckOfCards",
    "available_backends",
    "create_deck",
]
