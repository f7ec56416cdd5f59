from collections import Counter

import pytest

from restsim.randomizer import Randomizer


def test_same_seed_same_sequence():
    a = Randomizer.from_seed("restaurant-sim")
    b = Randomizer.from_seed("restaurant-sim")

    assert [a.float() for _ in range(20)] == [b.float() for _ in range(20)]
    assert [a.range(7) for _ in range(20)] == [b.range(7) for _ in range(20)]
    assert a.choose_n(list(range(10)), 4) == b.choose_n(list(range(10)), 4)


def test_integer_seeds_are_deterministic():
    a = Randomizer.from_seed(42)
    b = Randomizer.from_seed(42)
    assert [a.signed_int() for _ in range(10)] == [b.signed_int() for _ in range(10)]


def test_different_seeds_differ():
    a = Randomizer.from_seed("one")
    b = Randomizer.from_seed("two")
    assert [a.float() for _ in range(10)] != [b.float() for _ in range(10)]


def test_autoseeded_float_in_unit_interval():
    randomizer = Randomizer.autoseeded()
    for _ in range(100):
        assert 0 <= randomizer.float() < 1


def test_nonnegative_int_clears_sign_bit():
    randomizer = Randomizer.from_seed(1)
    randomizer.signed_int = lambda: -1
    assert randomizer.nonnegative_int() == 0x7FFFFFFF
    randomizer.signed_int = lambda: -(2**31)
    assert randomizer.nonnegative_int() == 0


def test_nonnegative_int_range():
    randomizer = Randomizer.from_seed(3)
    for _ in range(1000):
        assert 0 <= randomizer.nonnegative_int() < 2**31


def test_range_bounds():
    randomizer = Randomizer.from_seed(5)
    for _ in range(500):
        assert 0 <= randomizer.range(6) < 6
        assert 10 <= randomizer.range(10, 13) < 13


@pytest.mark.parametrize("args", [(0,), (-3,), (5, 5), (5, 2), (2**31 + 1,), (-1, 2**31)])
def test_range_rejects_invalid_ranges(args):
    with pytest.raises(ValueError):
        Randomizer.from_seed(1).range(*args)


def test_range_rejects_samples_above_largest_multiple():
    randomizer = Randomizer.from_seed(1)
    # For n=3 the accepted samples are [0, 2^31 - 2)
    randomizer.nonnegative_int = iter([2**31 - 1, 2**31 - 2, 7]).__next__
    assert randomizer.range(3) == 1


def test_range_is_uniform_for_non_power_of_two():
    randomizer = Randomizer.from_seed("uniformity")
    n = 7
    draws = 70_000
    counts = Counter(randomizer.range(n) for _ in range(draws))

    assert set(counts) == set(range(n))
    expected = draws / n
    # Standard deviation per bucket is about 93 draws
    for value in range(n):
        assert abs(counts[value] - expected) < 600


def test_choose_n_without_replacement():
    randomizer = Randomizer.from_seed(11)
    choices = list("abcdefgh")
    chosen = randomizer.choose_n(choices, 5)

    assert len(chosen) == 5
    assert len(set(chosen)) == 5
    assert set(chosen) <= set(choices)
    assert choices == list("abcdefgh")


def test_choose_n_edge_counts():
    randomizer = Randomizer.from_seed(11)
    assert randomizer.choose_n([1, 2, 3], 0) == []
    assert sorted(randomizer.choose_n([1, 2, 3], 3)) == [1, 2, 3]
    with pytest.raises(ValueError):
        randomizer.choose_n([1, 2, 3], 4)
    with pytest.raises(ValueError):
        randomizer.choose_n([1, 2, 3], -1)


def test_choose_n_is_prefix_of_full_shuffle():
    choices = list(range(12))
    chosen = Randomizer.from_seed("prefix").choose_n(choices, 4)
    shuffled = Randomizer.from_seed("prefix").shuffled_copy(choices)
    assert chosen == shuffled[:4]


def test_choose_one_matches_choose_n():
    choices = ["x", "y", "z", "w"]
    one = Randomizer.from_seed(9).choose_one(choices)
    n = Randomizer.from_seed(9).choose_n(choices, 1)
    assert [one] == n


def test_choose_one_empty():
    with pytest.raises(ValueError):
        Randomizer.from_seed(1).choose_one([])


def test_choose_n_with_replacement():
    randomizer = Randomizer.from_seed(2)
    drawn = randomizer.choose_n_with_replacement(["a", "b"], 50)
    assert len(drawn) == 50
    assert set(drawn) == {"a", "b"}

    assert randomizer.choose_n_with_replacement([], 0) == []
    with pytest.raises(ValueError):
        randomizer.choose_n_with_replacement([], 1)
    with pytest.raises(ValueError):
        randomizer.choose_n_with_replacement(["a"], -1)


def test_shuffle_in_place_matches_shuffled_copy():
    original = list(range(20))
    in_place = list(original)
    Randomizer.from_seed("shuffle").shuffle(in_place)
    copy = Randomizer.from_seed("shuffle").shuffled_copy(original)

    assert in_place == copy
    assert sorted(in_place) == original
    assert original == list(range(20))


def test_range_accepts_full_native_width():
    randomizer = Randomizer.from_seed(8)
    for _ in range(100):
        assert 0 <= randomizer.range(2**31) < 2**31


def test_negative_seeds_differ_from_positive():
    assert Randomizer.from_seed(5).float() != Randomizer.from_seed(-5).float()
    assert Randomizer.from_seed(0).float() != Randomizer.from_seed(-1).float()


@pytest.mark.parametrize("seed", [1.5, [1], b"bytes"])
def test_unsupported_seed_types(seed):
    with pytest.raises(TypeError):
        Randomizer.from_seed(seed)
