"""Deterministic pseudo-random source for restsim."""

import hashlib
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")

# Native draws are signed 32-bit integers; nonnegative draws cover [0, 2^31)
NONNEGATIVE_UPPER = 0x80000000
SIGN_MASK = 0x7FFFFFFF


def _seed_to_int(seed: int | str) -> int:
    """Map a seed to a non-negative integer accepted by numpy, keeping distinct seeds distinct."""
    if isinstance(seed, int):
        # Zig-zag: 0, -1, 1, -2, 2, ... -> 0, 1, 2, 3, 4, ...
        return 2 * seed if seed >= 0 else -2 * seed - 1
    if isinstance(seed, str):
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big")
    raise TypeError(f"Seed must be an int or str, got {type(seed).__name__}")


class Randomizer:
    """
    Seeded random source with unbiased integer ranges and sampling.

    A Randomizer is always constructed and passed around explicitly; two
    instances built from the same seed produce identical sequences.
    """

    def __init__(self, seed: int | str | None = None):
        self._seed = seed
        self._rng = np.random.default_rng(None if seed is None else _seed_to_int(seed))

    @classmethod
    def from_seed(cls, seed: int | str) -> "Randomizer":
        return cls(seed)

    @classmethod
    def autoseeded(cls) -> "Randomizer":
        return cls(None)

    @property
    def seed(self) -> int | str | None:
        return self._seed

    def float(self) -> float:
        """Return a float in [0, 1)."""
        return float(self._rng.random())

    def signed_int(self) -> int:
        """Return an integer in [-2^31, 2^31)."""
        return int(self._rng.integers(-NONNEGATIVE_UPPER, NONNEGATIVE_UPPER))

    def nonnegative_int(self) -> int:
        """Return an integer in [0, 2^31) by clearing the sign bit of a signed draw."""
        return self.signed_int() & SIGN_MASK

    def range(self, lower: int, upper: int | None = None) -> int:
        """
        Return a uniform integer in [0, lower), or in [lower, upper) if upper is given.

        Raises ValueError for an empty range or one wider than 2^31.
        """
        if upper is None:
            return self._range_impl(lower)
        if upper <= lower:
            raise ValueError("Upper bound must be greater than lower bound.")
        return lower + self._range_impl(upper - lower)

    def _range_impl(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Upper bound must be positive.")
        if n > NONNEGATIVE_UPPER:
            raise ValueError(f"Range size must be at most 2^31, got {n}.")

        # Only accept samples below the largest multiple of n that fits in
        # [0, 2^31), so the final modulo is unbiased
        accept_upper = NONNEGATIVE_UPPER - (NONNEGATIVE_UPPER % n)
        sample = self.nonnegative_int()
        while sample >= accept_upper:
            sample = self.nonnegative_int()
        return sample % n

    def choose_one(self, choices: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""
        if len(choices) == 0:
            raise ValueError("Cannot choose one from an empty sequence.")
        # Same draws as choose_n(choices, 1)
        return self.choose_n(choices, 1)[0]

    def choose_n(self, choices: Sequence[T], n: int) -> list[T]:
        """Return n elements of choices selected without replacement."""
        if n < 0:
            raise ValueError("Number to randomly choose must be non-negative.")
        if n > len(choices):
            raise ValueError("Number to randomly choose is larger than number of choices.")

        copy = list(choices)
        self._partial_fisher_yates_shuffle(copy, n)
        return copy[:n]

    def choose_n_with_replacement(self, choices: Sequence[T], n: int) -> list[T]:
        """Return n elements of choices drawn independently (duplicates allowed)."""
        if n < 0:
            raise ValueError("Number to randomly choose must be non-negative.")
        if n > 0 and len(choices) == 0:
            raise ValueError("Cannot choose from an empty sequence.")
        return [choices[self.range(len(choices))] for _ in range(n)]

    def shuffle(self, seq: MutableSequence[T]) -> None:
        """Shuffle seq in place."""
        self._partial_fisher_yates_shuffle(seq)

    def shuffled_copy(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of seq."""
        copy = list(seq)
        self._partial_fisher_yates_shuffle(copy)
        return copy

    def _partial_fisher_yates_shuffle(self, seq: MutableSequence[T], n: int | None = None) -> None:
        """
        Move n randomly selected elements, in random order, to the front of seq.

        Indices [0, i) are shuffled and [i, len) are not; each iteration
        swaps a random unshuffled element into position i.
        """
        if n is None:
            n = len(seq)
        if n < 0 or n > len(seq):
            raise ValueError("Number of elements to shuffle must be in [0, len(seq)].")

        for i in range(n):
            j = self.range(i, len(seq))
            seq[i], seq[j] = seq[j], seq[i]
