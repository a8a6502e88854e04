"""Prime numbers: sieving, primality, factorisation and counting estimates."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import compress, groupby

from peuler.arith import newtons_method

__all__ = [
    "apcf",
    "distinct_prime_factors",
    "is_prime",
    "pcf",
    "pcf_exact",
    "prime_factors",
    "sieve_of_eratosthenes",
]

_SMALL_APCF = {0: 0.0, 1: 2.0, 2: 3.0, 3: 5.0}


def _require_non_negative(value: int) -> None:
    if value < 0:
        raise ValueError("The number must be non-negative.")


def apcf(n: int) -> float:
    """Estimate the number whose prime count is ``n``.

    Exact for ``n <= 3`` and an overestimate for larger ``n``.
    """
    _require_non_negative(n)
    if n in _SMALL_APCF:
        return _SMALL_APCF[n]
    n = float(n)
    return newtons_method(
        n + 1.0,
        1e-10,
        lambda x: n * math.log(x) - x,
        lambda x: n / x - 1.0,
    )


def sieve_of_eratosthenes(n: int) -> list[int]:
    """Return all primes less than or equal to ``n`` in ascending order."""
    if n < 2:
        return []
    # slot i stands for the odd number 2 * i + 3
    size = (n - 1) // 2
    is_candidate = bytearray([1]) * size
    for index in range(size):
        prime = 2 * index + 3
        if prime * prime > n:
            break
        if is_candidate[index]:
            start = (prime * prime - 3) // 2
            is_candidate[start::prime] = bytes(len(range(start, size, prime)))
    return [2, *(2 * index + 3 for index in compress(range(size), is_candidate))]


def is_prime(n: int) -> tuple[bool, int]:
    """Tell whether ``n`` is prime.

    Returns ``(True, 1)`` for a prime and ``(False, d)`` otherwise, where
    ``d`` is the smallest divisor. Raises ValueError for ``n < 2``.
    """
    if n < 2:
        raise ValueError("Number must be greater than or equal to 2.")
    if n in (2, 3):
        return True, 1
    if n % 2 == 0:
        return False, 2
    if n % 3 == 0:
        return False, 3
    for i in range(5, math.isqrt(n) + 1, 6):
        if n % i == 0:
            return False, i
        if n % (i + 2) == 0:
            return False, i + 2
    return True, 1


def pcf(x: int) -> float:
    """Estimate the number of primes up to ``x``.

    Exact for ``x <= 10`` and an underestimate for larger ``x``.
    """
    _require_non_negative(x)
    if x <= 1:
        return 0.0
    if x == 2:
        return 1.0
    if x <= 4:
        return 2.0
    if x <= 6:
        return 3.0
    if x <= 10:
        return 4.0
    value = float(x)
    return value / math.log(value)


def pcf_exact(x: int) -> int:
    """Return the exact number of primes up to ``x``."""
    return len(sieve_of_eratosthenes(x))


def prime_factors(x: int) -> Iterator[int]:
    """Yield the prime factors of ``x`` in ascending order, with repetition.

    Zero and one have no prime factors.
    """
    _require_non_negative(x)
    if x < 2:
        return
    for prime in sieve_of_eratosthenes(math.isqrt(x)):
        if prime * prime > x:
            break
        while x % prime == 0:
            x //= prime
            yield prime
    if x != 1:
        yield x


def distinct_prime_factors(x: int) -> Iterator[tuple[int, int]]:
    """Yield ``(prime, power)`` pairs of ``x`` in ascending order of prime."""
    for prime, group in groupby(prime_factors(x)):
        yield prime, sum(1 for _ in group)