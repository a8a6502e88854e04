"""Continued fractions, partition counts and closed-form sums of series."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from fractions import Fraction
from itertools import chain, count, cycle, islice

from peuler.primes import sieve_of_eratosthenes

__all__ = [
    "ContinuedFraction",
    "partition_p",
    "partition_p_1_to_n",
    "partition_prime",
    "partition_prime_1_to_n",
    "sum_n",
    "sum_n_even",
    "sum_n_even_squares",
    "sum_n_odd",
    "sum_n_odd_squares",
    "sum_n_squares",
]


def _require_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError("The number must be non-negative.")


@dataclass(frozen=True)
class ContinuedFraction:
    """A continued fraction with a leading part and an optional repeating part."""

    non_periodic: tuple[int, ...]
    periodic: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "non_periodic", tuple(self.non_periodic))
        if self.periodic is not None:
            object.__setattr__(self, "periodic", tuple(self.periodic))

    @classmethod
    def from_sqrt(cls, n: int) -> ContinuedFraction:
        """Return the continued fraction of the square root of ``n``."""
        if n < 0:
            raise ValueError("Number must be non-negative.")
        root = math.isqrt(n)
        if root * root == n:
            return cls((root,), None)

        periodic: list[int] = []
        seen: set[tuple[int, int]] = set()
        # the rational part of the numerator is kept as a positive number
        numerator, denominator = root, 1
        while (numerator, denominator) not in seen:
            seen.add((numerator, denominator))
            denominator = (n - numerator * numerator) // denominator
            term = (numerator + root) // denominator
            periodic.append(term)
            numerator = denominator * term - numerator
        return cls((root,), tuple(periodic))

    def _terms(self) -> Iterable[int]:
        if self.periodic is None:
            return iter(self.non_periodic)
        return chain(self.non_periodic, cycle(self.periodic))

    def convergents(self) -> Iterator[Fraction]:
        """Yield the convergents; the stream is infinite for a periodic fraction."""
        prev_num, num = 0, 1
        prev_den, den = 1, 0
        for term in self._terms():
            num, prev_num = term * num + prev_num, num
            den, prev_den = term * den + prev_den, den
            yield Fraction(num, den)

    def convergent_n(self, n: int) -> Fraction | None:
        """Return the convergent at index ``n``, or None if there is none."""
        _require_non_negative(n)
        return next(islice(self.convergents(), n, None), None)


def partition_p_1_to_n(n: int) -> list[int]:
    """Return the partition numbers of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    partitions = [1] if n == 0 else [1, 1]
    while len(partitions) <= n:
        current = len(partitions)
        total = 0
        for k in count(1):
            left = current - k * (3 * k - 1) // 2
            if left < 0:
                break
            right = current - k * (3 * k + 1) // 2
            value = partitions[left] + (partitions[right] if right >= 0 else 0)
            total += value if k % 2 else -value
        partitions.append(total)
    return partitions


def partition_p(n: int) -> int:
    """Return the number of ways ``n`` can be written as a sum of positive integers."""
    return partition_p_1_to_n(n)[-1]


def partition_prime_1_to_n(n: int) -> list[int]:
    """Return the prime partition counts of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    ways = [1] + [0] * n
    for prime in sieve_of_eratosthenes(n):
        for i in range(prime, n + 1):
            ways[i] += ways[i - prime]
    return ways


def partition_prime(n: int) -> int:
    """Return the number of ways ``n`` can be written as a sum of primes."""
    return partition_prime_1_to_n(n)[-1]


def sum_n(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    _require_non_negative(n)
    return n * (n + 1) // 2


def sum_n_even(n: int) -> int:
    """Return the sum of the first ``n`` even natural numbers."""
    _require_non_negative(n)
    return n * (n + 1)


def sum_n_even_squares(n: int) -> int:
    """Return the sum of the squares of the first ``n`` even natural numbers."""
    _require_non_negative(n)
    return 2 * n * (n + 1) * (2 * n + 1) // 3


def sum_n_odd(n: int) -> int:
    """Return the sum of the first ``n`` odd natural numbers."""
    _require_non_negative(n)
    return n * n


def sum_n_odd_squares(n: int) -> int:
    """Return the sum of the squares of the first ``n`` odd natural numbers."""
    _require_non_negative(n)
    if n == 0:
        return 0
    return n * (2 * n + 1) * (2 * n - 1) // 3


def sum_n_squares(n: int) -> int:
    """Return 1^2 + 2^2 + ... + n^2."""
    _require_non_negative(n)
    return n * (n + 1) * (2 * n + 1) // 6