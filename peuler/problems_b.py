"""Solutions to problems 11 to 23."""

from __future__ import annotations

import calendar
import math
from collections.abc import Iterator

from peuler.arith import digits
from peuler.divisors import num_of_divisors, sum_of_proper_divisors_1_to_n

__all__ = [
    "solve_0011",
    "solve_0012",
    "solve_0014",
    "solve_0015",
    "solve_0016",
    "solve_0017",
    "solve_0018",
    "solve_0019",
    "solve_0020",
    "solve_0021",
    "solve_0023",
    "number_to_words",
]

_GRID = """
08 02 22 97 38 15 00 40 00 75 04 05 07 78 52 12 50 77 91 08
49 49 99 40 17 81 18 57 60 87 17 40 98 43 69 48 04 56 62 00
81 49 31 73 55 79 14 29 93 71 40 67 53 88 30 03 49 13 36 65
52 70 95 23 04 60 11 42 69 24 68 56 01 32 56 71 37 02 36 91
22 31 16 71 51 67 63 89 41 92 36 54 22 40 40 28 66 33 13 80
24 47 32 60 99 03 45 02 44 75 33 53 78 36 84 20 35 17 12 50
32 98 81 28 64 23 67 10 26 38 40 67 59 54 70 66 18 38 64 70
67 26 20 68 02 62 12 20 95 63 94 39 63 08 40 91 66 49 94 21
24 55 58 05 66 73 99 26 97 17 78 78 96 83 14 88 34 89 63 72
21 36 23 09 75 00 76 44 20 45 35 14 00 61 33 97 34 31 33 95
78 17 53 28 22 75 31 67 15 94 03 80 04 62 16 14 09 53 56 92
16 39 05 42 96 35 31 47 55 58 88 24 00 17 54 24 36 29 85 57
86 56 00 48 35 71 89 07 05 44 44 37 44 60 21 58 51 54 17 58
19 80 81 68 05 94 47 69 28 73 92 13 86 52 17 77 04 89 55 40
04 52 08 83 97 35 99 16 07 97 57 32 16 26 26 79 33 27 98 66
88 36 68 87 57 62 20 72 03 46 33 67 46 55 12 32 63 93 53 69
04 42 16 73 38 25 39 11 24 94 72 18 08 46 29 32 40 62 76 36
20 69 36 41 72 30 23 88 34 62 99 69 82 67 59 85 74 04 36 16
20 73 35 29 78 31 90 01 74 31 49 71 48 86 81 16 23 57 05 54
01 70 54 71 83 51 54 69 16 92 33 48 61 43 52 01 89 19 67 48
"""

_TRIANGLE = """
75
95 64
17 47 82
18 35 87 10
20 04 82 47 65
19 01 23 75 03 34
88 02 77 73 07 63 67
99 65 04 28 06 16 70 92
41 41 26 56 83 40 80 70 33
41 48 72 33 47 32 37 16 94 29
53 71 44 65 25 43 91 52 97 51 14
70 11 33 28 77 73 17 78 39 68 17 57
91 71 52 38 17 14 91 43 58 50 27 29 48
63 66 04 68 89 53 67 30 73 16 69 87 40 31
04 62 98 27 23 09 70 98 73 93 38 53 60 04 23
"""

_SINGLE = {
    1: "one", 2: "two", 3: "three", 4: "four", 5: "five",
    6: "six", 7: "seven", 8: "eight", 9: "nine",
}
_TENS = {
    2: "twenty", 3: "thirty", 4: "forty", 5: "fifty",
    6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety",
}
_TEENS = {
    10: "ten", 11: "eleven", 12: "twelve", 13: "thirteen", 14: "fourteen",
    15: "fifteen", 16: "sixteen", 17: "seventeen", 18: "eighteen", 19: "nineteen",
}

# index 0 is unused so that the month number is the index
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _parse_rows(text: str) -> list[list[int]]:
    return [[int(token) for token in line.split()] for line in text.strip().splitlines()]


def _grid_runs(grid: list[list[int]], length: int) -> Iterator[list[int]]:
    rows, cols = len(grid), len(grid[0])
    for row in range(rows):
        for col in range(cols):
            for d_row, d_col in ((0, 1), (1, 0), (1, 1), (1, -1)):
                end_row = row + d_row * (length - 1)
                end_col = col + d_col * (length - 1)
                if 0 <= end_row < rows and 0 <= end_col < cols:
                    yield [grid[row + d_row * k][col + d_col * k] for k in range(length)]


def solve_0011() -> str:
    """Largest Product in a Grid."""
    grid = _parse_rows(_GRID)
    return str(max(math.prod(run) for run in _grid_runs(grid, 4)))


def solve_0012() -> str:
    """Highly Divisible Triangular Number."""
    # n and n + 1 are coprime, so d(n(n+1)/2) splits into two factors,
    # one of which carries over to the next triangular number
    n = 5
    d_first = num_of_divisors(n)
    d_second = num_of_divisors((n + 1) // 2)
    while d_first * d_second <= 500:
        n += 1
        d_first = d_second
        d_second = num_of_divisors(n + 1) if n % 2 == 0 else num_of_divisors((n + 1) // 2)
    return str(n * (n + 1) // 2)


def _collatz_lengths(limit: int) -> list[int]:
    lengths = [0] * limit
    if limit > 1:
        lengths[1] = 1
    for start in range(2, limit):
        path = []
        current = start
        while current >= limit or lengths[current] == 0:
            path.append(current)
            current = current >> 1 if current % 2 == 0 else 3 * current + 1
        length = lengths[current]
        for value in reversed(path):
            length += 1
            if value < limit:
                lengths[value] = length
    return lengths


def solve_0014() -> str:
    """Longest Collatz Sequence."""
    limit = 1_000_000
    lengths = _collatz_lengths(limit)
    # on ties the larger starting number wins
    return str(max(range(1, limit), key=lambda n: (lengths[n], n)))


def solve_0015() -> str:
    """Lattice Paths."""
    # 20 steps right and 20 down, in any order
    return str(math.comb(40, 20))


def solve_0016() -> str:
    """Power Digit Sum."""
    return str(sum(digits(2**1000, 10)))


def number_to_words(n: int) -> str:
    """Return the British English name of ``n`` for 0 <= n <= 1000; 0 is empty."""
    if not 0 <= n <= 1000:
        raise ValueError("Only numbers from 0 to 1000 can be named.")
    if n == 1000:
        return "one thousand"
    hundreds, rest = divmod(n, 100)
    parts = []
    if hundreds:
        parts.append(f"{_SINGLE[hundreds]} hundred")
    if rest:
        if hundreds:
            parts.append("and")
        if rest in _TEENS:
            parts.append(_TEENS[rest])
        elif rest < 10:
            parts.append(_SINGLE[rest])
        else:
            tens, ones = divmod(rest, 10)
            parts.append(f"{_TENS[tens]}-{_SINGLE[ones]}" if ones else _TENS[tens])
    return " ".join(parts)


def solve_0017() -> str:
    """Number Letter Counts."""
    total = sum(
        sum(1 for ch in number_to_words(n) if ch not in " -") for n in range(1, 1001)
    )
    return str(total)


def solve_0018() -> str:
    """Maximum Path Sum I."""
    rows = _parse_rows(_TRIANGLE)
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return str(best[0])


def solve_0019() -> str:
    """Counting Sundays."""
    # 1 Jan 1900 was a Monday, so a day count divisible by 7 is a Sunday
    year, month, day = 1900, 1, 1
    sundays = 0
    while year <= 2000:
        if day % 7 == 0 and year != 1900:
            sundays += 1
        day += _DAYS_IN_MONTH[month]
        if month == 2 and calendar.isleap(year):
            day += 1
        elif month == 12:
            month = 0
            year += 1
        month += 1
    return str(sundays)


def solve_0020() -> str:
    """Factorial Digit Sum."""
    return str(sum(digits(math.factorial(100), 10)))


def solve_0021() -> str:
    """Amicable Numbers."""
    limit = 10_000
    sums = sum_of_proper_divisors_1_to_n(limit - 1)
    total = sum(
        i
        for i, partner in enumerate(sums)
        if i and partner < limit and partner != i and sums[partner] == i
    )
    return str(total)


def solve_0023() -> str:
    """Non-Abundant Sums."""
    upper_bound = 28123
    sums = sum_of_proper_divisors_1_to_n(upper_bound)
    abundant = [n for n in range(12, upper_bound + 1) if sums[n] > n]
    abundant_set = set(abundant)

    def is_abundant_sum(num: int) -> bool:
        half = num >> 1
        for addend in abundant:
            if addend > half:
                return False
            if num - addend in abundant_set:
                return True
        return False

    return str(sum(num for num in range(1, upper_bound + 1) if not is_abundant_sum(num)))