"""Solutions to problems 1 to 10."""

from __future__ import annotations

import math

from peuler.arith import is_palindrome, lcm_multiple
from peuler.primes import apcf, prime_factors, sieve_of_eratosthenes
from peuler.series import sum_n, sum_n_squares

__all__ = [
    "solve_0001",
    "solve_0002",
    "solve_0003",
    "solve_0004",
    "solve_0005",
    "solve_0006",
    "solve_0007",
    "solve_0008",
    "solve_0009",
    "solve_0010",
]

_SERIES = "7316717653133062491922511967442657474235534919493496983520312774506326239578318016984801869478851843858615607891129494954595017379583319528532088055111254069874715852386305071569329096329522744304355766896648950445244523161731856403098711121722383113622298934233803081353362766142828064444866452387493035890729629049156044077239071381051585930796086670172427121883998797908792274921901699720888093776657273330010533678812202354218097512545405947522435258490771167055601360483958644670632441572215539753697817977846174064955149290862569321978468622482839722413756570560574902614079729686524145351004748216637048440319989000889524345065854122758866688116427171479924442928230863465674813919123162824586178664583591245665294765456828489128831426076900422421902267105562632111110937054421750694165896040807198403850962455444362981230987879927244284909188845801561660979191338754992005240636899125607176060588611646710940507754100225698315520005593572972571636269561882670428252483600823257530420752963450"


def _sum_of_multiples_below(factor: int, limit: int) -> int:
    count = (limit - 1) // factor
    return factor * count * (count + 1) // 2


def solve_0001() -> str:
    """Multiples of 3 or 5."""
    limit = 1000
    total = (
        _sum_of_multiples_below(3, limit)
        + _sum_of_multiples_below(5, limit)
        - _sum_of_multiples_below(15, limit)
    )
    return str(total)


def solve_0002() -> str:
    """Even Fibonacci Numbers."""
    total = 0
    previous, current = 1, 2
    while current < 4_000_000:
        if current % 2 == 0:
            total += current
        previous, current = current, previous + current
    return str(total)


def solve_0003() -> str:
    """Largest Prime Factor."""
    return str(max(prime_factors(600851475143)))


def solve_0004() -> str:
    """Largest Palindrome Product."""
    largest = max(
        (
            a * b
            for a in range(100, 1000)
            for b in range(a, 1000)
            if is_palindrome(a * b, 10)
        ),
        default=0,
    )
    return str(largest)


def solve_0005() -> str:
    """Smallest Multiple."""
    return str(lcm_multiple(range(1, 21)))


def solve_0006() -> str:
    """Sum Square Difference."""
    return str(abs(sum_n_squares(100) - sum_n(100) ** 2))


def solve_0007() -> str:
    """10001st Prime."""
    bound = int(apcf(10001) + 0.5)
    return str(sieve_of_eratosthenes(bound)[10_000])


def _largest_window_product(series: str, span: int) -> int:
    best = 0
    # a window holding a zero has product zero, so only zero-free runs matter
    for run in series.split("0"):
        values = [int(ch) for ch in run]
        for start in range(len(values) - span + 1):
            best = max(best, math.prod(values[start:start + span]))
    return best


def solve_0008() -> str:
    """Largest Product in a Series."""
    return str(_largest_window_product(_SERIES, 13))


def solve_0009() -> str:
    """Special Pythagorean Triplet."""
    limit = 1000
    for a in range(1, limit // 3 + 1):
        for b in range(a, (limit - a) // 2 + 1):
            c = limit - a - b
            if a * a + b * b == c * c:
                return str(a * b * c)
    return "No solution found!"


def solve_0010() -> str:
    """Summation of Primes."""
    return str(sum(sieve_of_eratosthenes(1_999_999)))