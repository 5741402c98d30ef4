import pytest

from deckofcards.decks import create_deck

from .helpers import BACKEND_NAMES


@pytest.fixture(params=BACKEND_NAMES)
def deck(request):
    return create_deck(request.param)
