from collections import Counter

import pytest

from deckofcards.cards import Card, Rank, Suit
from deckofcards.views import ImmutableBag, ImmutableMapping, ImmutableSortedSet, UnsupportedMutationError

from .helpers import card_set


def test_sorted_set_iterates_in_order_and_drops_duplicates():
    cards = ImmutableSortedSet([Card(Rank.KING, Suit.CLUBS), Card(Rank.ACE, Suit.CLUBS), Card(Rank.ACE, Suit.CLUBS)])
    assert len(cards) == 2
    assert cards.first() == Card(Rank.ACE, Suit.CLUBS)
    assert cards.last() == Card(Rank.KING, Suit.CLUBS)
    assert cards[1] == Card(Rank.KING, Suit.CLUBS)
    assert list(reversed(cards)) == [Card(Rank.KING, Suit.CLUBS), Card(Rank.ACE, Suit.CLUBS)]


def test_sorted_set_equals_plain_sets_with_same_members():
    cards = ImmutableSortedSet(card_set("A♦", "2♦"))
    assert cards == card_set("2♦", "A♦")
    assert cards == frozenset(card_set("A♦", "2♦"))
    assert cards != card_set("A♦")
    assert hash(cards) == hash(ImmutableSortedSet(card_set("2♦", "A♦")))


def test_sorted_set_slices_and_set_algebra_return_new_views():
    cards = ImmutableSortedSet(card_set("A♣", "2♣", "3♣"))
    head = cards[:2]
    assert isinstance(head, ImmutableSortedSet)
    assert head == card_set("A♣", "2♣")

    union = cards | card_set("4♣")
    assert isinstance(union, ImmutableSortedSet)
    assert len(union) == 4
    assert len(cards) == 3


@pytest.mark.parametrize(
    "mutate",
    [
        lambda s: s.add(None),
        lambda s: s.remove(None),
        lambda s: s.discard(None),
        lambda s: s.pop(),
        lambda s: s.clear(),
        lambda s: s.update([None]),
        lambda s: s.__ior__({None}),
    ],
)
def test_sorted_set_rejects_every_mutator(mutate):
    cards = ImmutableSortedSet(card_set("A♠"))
    with pytest.raises(UnsupportedMutationError):
        mutate(cards)
    assert cards == card_set("A♠")


def test_in_place_union_on_sorted_set_is_rejected():
    cards = ImmutableSortedSet(card_set("A♠"))
    with pytest.raises(UnsupportedMutationError):
        cards |= card_set("K♠")


@pytest.mark.parametrize(
    "mutate",
    [
        lambda m: m.__setitem__(Suit.CLUBS, 1),
        lambda m: m.__delitem__(Suit.CLUBS),
        lambda m: m.pop(Suit.CLUBS),
        lambda m: m.popitem(),
        lambda m: m.clear(),
        lambda m: m.update({Suit.HEARTS: 3}),
        lambda m: m.setdefault(Suit.HEARTS, 3),
    ],
)
def test_mapping_rejects_every_mutator(mutate):
    mapping = ImmutableMapping({Suit.CLUBS: 1, Suit.DIAMONDS: 2})
    with pytest.raises(UnsupportedMutationError):
        mutate(mapping)
    assert dict(mapping) == {Suit.CLUBS: 1, Suit.DIAMONDS: 2}


def test_mapping_keeps_insertion_order():
    mapping = ImmutableMapping([(Suit.SPADES, 1), (Suit.CLUBS, 2)])
    assert list(mapping) == [Suit.SPADES, Suit.CLUBS]
    assert mapping.get(Suit.HEARTS) is None


def test_mutation_error_is_a_type_error():
    assert issubclass(UnsupportedMutationError, TypeError)


def test_bag_counts_and_compares_with_counter():
    bag = ImmutableBag.of([Rank.ACE, Rank.ACE, Rank.KING])
    assert bag.occurrences_of(Rank.ACE) == 2
    assert bag.occurrences_of(Rank.TWO) == 0
    assert bag.size() == 3
    assert bag.distinct_count() == 2
    assert bag == Counter({Rank.ACE: 2, Rank.KING: 1})
    assert Counter({Rank.ACE: 2, Rank.KING: 1}) == bag


def test_bag_drops_zero_counts():
    assert ImmutableBag({Suit.CLUBS: 13, Suit.HEARTS: 0}) == {Suit.CLUBS: 13}


def test_bag_rejects_mutation():
    bag = ImmutableBag({Suit.CLUBS: 13})
    for mutate in (lambda: bag.add(Suit.CLUBS), lambda: bag.remove(Suit.CLUBS), bag.clear):
        with pytest.raises(UnsupportedMutationError):
            mutate()


def test_bag_from_counts_accepts_mappings_and_pairs():
    from_mapping = ImmutableBag.from_counts({Suit.CLUBS: 13, Suit.SPADES: 13})
    from_pairs = ImmutableBag.from_counts([(Suit.CLUBS, 13), (Suit.SPADES, 13), (Suit.HEARTS, 0)])
    assert isinstance(from_mapping, ImmutableBag)
    assert from_mapping == from_pairs == Counter({Suit.CLUBS: 13, Suit.SPADES: 13})
    assert from_pairs.size() == 26
    with pytest.raises(UnsupportedMutationError):
        from_pairs.add(Suit.HEARTS)
