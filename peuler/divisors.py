"""Divisor counts, divisor sums and Euler's totient, singly and in tables."""

from __future__ import annotations

import math

from peuler.primes import distinct_prime_factors

__all__ = [
    "num_of_divisors",
    "num_of_divisors_1_to_n",
    "num_of_proper_divisors",
    "num_of_proper_divisors_1_to_n",
    "phi",
    "phi_1_to_n",
    "sum_of_divisors",
    "sum_of_divisors_1_to_n",
    "sum_of_proper_divisors",
    "sum_of_proper_divisors_1_to_n",
]


def _require_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError("The number must be non-negative.")


def num_of_divisors(n: int) -> int:
    """Return the number of divisors of ``n``; 0 has none."""
    _require_non_negative(n)
    if n == 0:
        return 0
    return math.prod(power + 1 for _, power in distinct_prime_factors(n))


def num_of_divisors_1_to_n(n: int) -> list[int]:
    """Return the divisor counts of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    counts = [0] + [1] * n
    for i in range(2, n + 1):
        for j in range(i, n + 1, i):
            counts[j] += 1
    return counts


def num_of_proper_divisors(n: int) -> int:
    """Return the number of divisors of ``n`` other than ``n`` itself."""
    return max(num_of_divisors(n) - 1, 0)


def num_of_proper_divisors_1_to_n(n: int) -> list[int]:
    """Return the proper divisor counts of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    counts = [0] * (n + 1)
    for i in range(2, n + 1):
        for j in range(i, n + 1, i):
            counts[j] += 1
    return counts


def phi(n: int) -> int:
    """Return Euler's totient of ``n``."""
    _require_non_negative(n)
    result = n
    for factor, _ in distinct_prime_factors(n):
        result -= result // factor
    return result


def phi_1_to_n(n: int) -> list[int]:
    """Return Euler's totient of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    values = list(range(n + 1))
    for i in range(2, n + 1):
        if values[i] == i:
            for j in range(i, n + 1, i):
                values[j] -= values[j] // i
    return values


def sum_of_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n``; 0 gives 0."""
    _require_non_negative(n)
    if n == 0:
        return 0
    return math.prod(
        (prime ** (power + 1) - 1) // (prime - 1)
        for prime, power in distinct_prime_factors(n)
    )


def sum_of_divisors_1_to_n(n: int) -> list[int]:
    """Return the divisor sums of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    sums = [0] * (n + 1)
    for i in range(1, n + 1):
        for j in range(i, n + 1, i):
            sums[j] += i
    return sums


def sum_of_proper_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n`` other than ``n`` itself."""
    return sum_of_divisors(n) - n


def sum_of_proper_divisors_1_to_n(n: int) -> list[int]:
    """Return the proper divisor sums of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    sums = [0] * (n + 1)
    for i in range(1, n + 1):
        for j in range(2 * i, n + 1, i):
            sums[j] += i
    return sums