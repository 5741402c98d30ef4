import random

import pytest

from deckofcards.dealing import resolve_rng, shuffle_order, swap_sequence


class RecordingRandom(random.Random):
    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.bounds: list[int] = []

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        self.bounds.append(args[0])
        return super().randrange(*args, **kwargs)


def test_swap_sequence_draws_once_per_position_from_the_top():
    rng = RecordingRandom(5)
    swaps = list(swap_sequence(52, rng))
    assert [i for i, _ in swaps] == list(range(51, 0, -1))
    assert rng.bounds == list(range(52, 1, -1))
    assert all(0 <= j <= i for i, j in swaps)


def test_shuffle_order_is_a_permutation():
    order = shuffle_order(52, random.Random(11))
    assert sorted(order) == list(range(52))


def test_shuffle_order_matches_fisher_yates_replay():
    replay = list(range(10))
    rng = random.Random(42)
    for i in range(9, 0, -1):
        j = rng.randrange(i + 1)
        replay[i], replay[j] = replay[j], replay[i]
    assert shuffle_order(10, random.Random(42)) == replay


def test_shuffle_order_depends_on_seed():
    assert shuffle_order(52, random.Random(1)) == shuffle_order(52, random.Random(1))
    assert shuffle_order(52, random.Random(1)) != shuffle_order(52, random.Random(2))


def test_shuffle_order_handles_tiny_inputs():
    assert shuffle_order(0, random.Random(1)) == []
    assert shuffle_order(1, random.Random(1)) == [0]


def test_resolve_rng_wraps_int_seeds_and_passes_generators_through():
    rng = random.Random(3)
    assert resolve_rng(rng) is rng
    assert resolve_rng(3).random() == random.Random(3).random()


@pytest.mark.parametrize("seed", ["1", 1.5, None, True])
def test_resolve_rng_rejects_other_seed_types(seed):
    with pytest.raises(TypeError, match="Seed must be"):
        resolve_rng(seed)
