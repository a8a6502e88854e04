"""Integer and numeric helpers: digits, divisibility, roots and sequences."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "collatz_seq",
    "digits",
    "digits_to_int",
    "factorial",
    "factorial_1_to_n",
    "gcd",
    "gcd_multiple",
    "is_palindrome",
    "is_permutation",
    "isqrt",
    "lcm",
    "lcm_multiple",
    "newtons_method",
    "ord",
    "reverse",
]


def _require_non_negative(value: int, name: str = "number") -> None:
    if value < 0:
        raise ValueError(f"The {name} must be non-negative.")


def _require_radix(radix: int) -> None:
    if radix < 2:
        raise ValueError("The radix must be at least 2.")


def collatz_seq(num: int) -> Iterator[int]:
    """Yield the Collatz sequence from ``num`` down to 1, both included."""
    if num < 1:
        raise ValueError("The Collatz sequence starts at a positive number.")
    current = num
    yield current
    while current != 1:
        current = current >> 1 if current % 2 == 0 else 3 * current + 1
        yield current


def digits(n: int, radix: int = 10) -> list[int]:
    """Return the digits of ``n``, most significant first; 0 has no digits."""
    _require_non_negative(n)
    _require_radix(radix)
    result = []
    while n:
        n, digit = divmod(n, radix)
        result.append(digit)
    result.reverse()
    return result


def digits_to_int(digits: Iterable[int], radix: int = 10) -> int:
    """Build an integer from its digits, most significant first."""
    result = 0
    for digit in digits:
        result = result * radix + digit
    return result


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative(n)
    return math.factorial(n)


def factorial_1_to_n(n: int) -> list[int]:
    """Return the factorials of 0 to ``n``; the index is the number."""
    _require_non_negative(n)
    factorials = [1]
    for i in range(1, n + 1):
        factorials.append(factorials[-1] * i)
    return factorials


def gcd(num1: int, num2: int) -> int:
    """Return the greatest common divisor of two non-negative numbers."""
    _require_non_negative(num1)
    _require_non_negative(num2)
    return math.gcd(num1, num2)


def _fold_at_least_two(nums: Iterable[int], combine: Callable[[int, int], int]) -> int:
    values = iter(nums)
    try:
        first = next(values)
        second = next(values)
    except StopIteration:
        raise ValueError("There must be at least 2 numbers.") from None
    result = combine(first, second)
    for value in values:
        result = combine(result, value)
    return result


def gcd_multiple(nums: Iterable[int]) -> int:
    """Return the greatest common divisor of at least two numbers."""
    return _fold_at_least_two(nums, gcd)


def lcm(num1: int, num2: int) -> int:
    """Return the least common multiple of two numbers (not both zero)."""
    return (num1 // gcd(num1, num2)) * num2


def lcm_multiple(nums: Iterable[int]) -> int:
    """Return the least common multiple of at least two numbers."""
    return _fold_at_least_two(nums, lcm)


def reverse(num: int, radix: int = 10) -> int:
    """Return ``num`` with its digits in reverse order."""
    _require_non_negative(num)
    _require_radix(radix)
    reversed_num = 0
    while num > 0:
        num, digit = divmod(num, radix)
        reversed_num = reversed_num * radix + digit
    return reversed_num


def is_palindrome(num: int, radix: int = 10) -> bool:
    """Tell whether ``num`` reads the same both ways in ``radix``."""
    return num == reverse(num, radix)


def is_permutation(n: int, m: int, radix: int = 10) -> bool:
    """Tell whether ``n`` and ``m`` consist of the same digits."""
    return Counter(digits(n, radix)) == Counter(digits(m, radix))


def isqrt(n: int) -> int:
    """Return the integer square root of a non-negative number."""
    _require_non_negative(n)
    return math.isqrt(n)


def newtons_method(
    x0: float,
    precision: float,
    function: Callable[[float], float],
    derivative: Callable[[float], float],
) -> float:
    """Find a zero of ``function`` starting at ``x0``.

    Iterates until two successive estimates differ by no more than
    ``precision``; does not stop if the method never converges.
    """
    x = x0
    prev_x = -math.inf
    while abs(x - prev_x) > precision:
        prev_x = x
        x = prev_x - function(prev_x) / derivative(prev_x)
    return x


def ord(a: int, n: int) -> int:
    """Return the multiplicative order of ``a`` modulo ``n``.

    Raises ValueError when no order exists, i.e. ``a`` and ``n`` are not coprime.
    """
    result = 1
    for k in range(1, n):
        result = (result * a) % n
        if result == 1:
            return k
    raise ValueError("Multiplicative order not found (a and n must be coprime).")