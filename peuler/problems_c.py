"""Solutions to problems 24 to 32."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import count, permutations

from peuler.arith import digits_to_int, factorial, gcd, newtons_method, ord
from peuler.primes import is_prime, sieve_of_eratosthenes
from peuler.series import sum_n_odd, sum_n_odd_squares

__all__ = [
    "solve_0024",
    "solve_0025",
    "solve_0026",
    "solve_0027",
    "solve_0028",
    "solve_0029",
    "solve_0030",
    "solve_0031",
    "solve_0032",
    "count_coin_combinations",
]

_BRITISH_COINS = (200, 100, 50, 20, 10, 5, 2, 1)


def solve_0024() -> str:
    """Lexicographic Permutations."""
    remaining_digits = list(range(10))
    # the first permutation is the sorted one, so skip 999 999 more
    remaining = 999_999
    result = []
    while remaining:
        index, remaining = divmod(remaining, factorial(len(remaining_digits) - 1))
        result.append(str(remaining_digits.pop(index)))
    result.extend(str(digit) for digit in remaining_digits)
    return "".join(result)


def solve_0025() -> str:
    """1000-digit Fibonacci Number."""
    # Binet's formula without the vanishing term: phi^n / sqrt(5) >= 10^999
    golden_ratio = (1.0 + math.sqrt(5.0)) / 2.0
    index = (999.0 + math.log10(5.0) / 2.0) / math.log10(golden_ratio)
    return str(math.ceil(index))


def solve_0026() -> str:
    """Reciprocal Cycles."""
    # the cycle length of 1/d is the multiplicative order of 10 modulo d
    longest_d = 0
    longest_cycle = 0
    for d in range(2, 1000):
        if gcd(10, d) == 1:
            cycle = ord(10, d)
            if cycle > longest_cycle:
                longest_cycle = cycle
                longest_d = d
    return str(longest_d)


def _consecutive_primes(a: int, b: int) -> int:
    produced = 0
    for n in count():
        value = n * n + a * n + b
        if value < 2 or not is_prime(value)[0]:
            break
        produced += 1
    return produced


def solve_0027() -> str:
    """Quadratic Primes."""
    # b must be prime (n = 0) and 1 + a + b must be prime (n = 1)
    primes = sieve_of_eratosthenes(2000)
    best_count = 0
    best_product = 0
    for b in primes:
        if b > 1000:
            break
        for prime in primes:
            a = prime - b - 1
            if a >= 1000:
                break
            produced = _consecutive_primes(a, b)
            if produced > best_count:
                best_count = produced
                best_product = a * b
    return str(best_product)


def solve_0028() -> str:
    """Number Spiral Diagonals."""
    # each ring of side x contributes 4x^2 - 6x + 6; the centre is 1
    size = 1001
    rings = size // 2
    total = (
        1
        + 4 * (sum_n_odd_squares(rings + 1) - 1)
        - 6 * (sum_n_odd(rings + 1) - 1)
        + 6 * rings
    )
    return str(total)


def solve_0029() -> str:
    """Distinct Powers."""
    # b * log(a) is injective on the distinct values of a^b
    values = sorted(b * math.log2(a) for a in range(2, 101) for b in range(2, 101))
    distinct = 1 + sum(
        1 for previous, current in zip(values, values[1:]) if abs(current - previous) > 1e-7
    )
    return str(distinct)


def solve_0030() -> str:
    """Digit Fifth Powers."""
    ninth_power = 9**5
    # a number with more digits than the root of 10^n = 9^5 * n cannot qualify
    max_digits = math.ceil(
        newtons_method(
            10.0,
            1e-10,
            lambda n: 10.0**n - n * ninth_power,
            lambda n: 10.0**n * math.log(10.0) - ninth_power,
        )
    )
    powers = [digit**5 for digit in range(10)]
    total = sum(
        n
        for n in range(10, ninth_power * max_digits + 1)
        if sum(powers[int(ch)] for ch in str(n)) == n
    )
    return str(total)


def count_coin_combinations(amount: int, coins: Iterable[int]) -> int:
    """Return the number of ways to make ``amount`` from any number of ``coins``.

    The order of the coins in a combination does not matter.
    """
    if amount < 0:
        raise ValueError("The amount must be non-negative.")
    coin_values = list(coins)
    if any(coin <= 0 for coin in coin_values):
        raise ValueError("Coin values must be positive.")
    ways = [1] + [0] * amount
    for coin in coin_values:
        for value in range(coin, amount + 1):
            ways[value] += ways[value - coin]
    return ways[amount]


def solve_0031() -> str:
    """Coin Sums."""
    return str(count_coin_combinations(200, _BRITISH_COINS))


def solve_0032() -> str:
    """Pandigital Products."""
    # only 1-digit * 4-digit and 2-digit * 3-digit factors give 9 digits in total
    found = set()
    for perm in permutations(range(1, 10)):
        product = digits_to_int(perm[5:], 10)
        for split in (1, 2):
            if digits_to_int(perm[:split], 10) * digits_to_int(perm[split:5], 10) == product:
                found.add(product)
    return str(sum(found))