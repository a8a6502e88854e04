import math

import pytest

from peuler.divisors import (
    num_of_divisors,
    num_of_divisors_1_to_n,
    num_of_proper_divisors,
    num_of_proper_divisors_1_to_n,
    phi,
    phi_1_to_n,
    sum_of_divisors,
    sum_of_divisors_1_to_n,
    sum_of_proper_divisors,
    sum_of_proper_divisors_1_to_n,
)
from peuler.primes import sieve_of_eratosthenes

LIMIT = 300


def _divisor_list(n):
    return [d for d in range(1, n + 1) if n % d == 0]


def test_documented_examples():
    assert num_of_divisors(12) == 6
    assert sum_of_divisors(10) == 18
    assert sum_of_proper_divisors_1_to_n(10) == [0, 0, 1, 1, 3, 1, 6, 1, 7, 4, 8]


def test_zero_has_no_divisors():
    assert num_of_divisors(0) == 0
    assert num_of_proper_divisors(0) == 0
    assert sum_of_divisors(0) == 0
    assert phi(0) == 0


def test_one():
    assert num_of_divisors(1) == 1
    assert num_of_proper_divisors(1) == 0
    assert sum_of_divisors(1) == 1
    assert sum_of_proper_divisors(1) == 0
    assert phi(1) == 1


@pytest.mark.parametrize("n", range(1, 120))
def test_single_values_match_enumeration(n):
    divisors = _divisor_list(n)
    assert num_of_divisors(n) == len(divisors)
    assert num_of_proper_divisors(n) == len(divisors) - 1
    assert sum_of_divisors(n) == sum(divisors)
    assert sum_of_proper_divisors(n) == sum(divisors) - n
    assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


@pytest.mark.parametrize("p", sieve_of_eratosthenes(200))
def test_prime_properties(p):
    assert num_of_divisors(p) == 2
    assert sum_of_divisors(p) == p + 1
    assert sum_of_proper_divisors(p) == 1
    assert phi(p) == p - 1


def test_tables_agree_with_single_values():
    assert num_of_divisors_1_to_n(LIMIT) == [num_of_divisors(k) for k in range(LIMIT + 1)]
    assert num_of_proper_divisors_1_to_n(LIMIT) == [
        num_of_proper_divisors(k) for k in range(LIMIT + 1)
    ]
    assert phi_1_to_n(LIMIT) == [phi(k) for k in range(LIMIT + 1)]
    assert sum_of_divisors_1_to_n(LIMIT) == [sum_of_divisors(k) for k in range(LIMIT + 1)]
    assert sum_of_proper_divisors_1_to_n(LIMIT) == [
        sum_of_proper_divisors(k) for k in range(LIMIT + 1)
    ]


@pytest.mark.parametrize(
    "table",
    [
        num_of_divisors_1_to_n,
        num_of_proper_divisors_1_to_n,
        phi_1_to_n,
        sum_of_divisors_1_to_n,
        sum_of_proper_divisors_1_to_n,
    ],
)
def test_tables_have_one_entry_per_number(table):
    assert len(table(0)) == 1
    assert len(table(25)) == 26
    assert table(0) == [0]


def test_perfect_numbers_equal_their_proper_divisor_sum():
    for perfect in (6, 28, 496, 8128):
        assert sum_of_proper_divisors(perfect) == perfect


def test_large_number_multiplicativity():
    a, b = 9973, 1024
    assert sum_of_divisors(a * b) == sum_of_divisors(a) * sum_of_divisors(b)
    assert num_of_divisors(a * b) == num_of_divisors(a) * num_of_divisors(b)
    assert phi(a * b) == phi(a) * phi(b)


@pytest.mark.parametrize(
    "func",
    [
        num_of_divisors,
        num_of_divisors_1_to_n,
        num_of_proper_divisors_1_to_n,
        phi,
        phi_1_to_n,
        sum_of_divisors,
        sum_of_divisors_1_to_n,
        sum_of_proper_divisors_1_to_n,
    ],
)
def test_negative_input_raises(func):
    with pytest.raises(ValueError):
        func(-1)