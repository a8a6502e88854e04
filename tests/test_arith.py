import math

import pytest

from peuler.arith import (
    collatz_seq,
    digits,
    digits_to_int,
    factorial,
    factorial_1_to_n,
    gcd,
    gcd_multiple,
    is_palindrome,
    is_permutation,
    isqrt,
    lcm,
    lcm_multiple,
    newtons_method,
    ord,
    reverse,
)


def test_collatz_seq_from_13():
    assert list(collatz_seq(13)) == [13, 40, 20, 10, 5, 16, 8, 4, 2, 1]


def test_collatz_seq_of_one_is_single():
    assert list(collatz_seq(1)) == [1]


def test_collatz_seq_rejects_zero():
    with pytest.raises(ValueError):
        next(collatz_seq(0))


def test_digits_examples():
    assert digits(123, 10) == [1, 2, 3]
    assert list(reversed(digits(123, 10))) == [3, 2, 1]
    assert len(digits(0, 10)) == 0
    assert len(digits(123, 10)) == 3


@pytest.mark.parametrize("n", [1, 7, 10, 255, 4096, 987654321, 2**70 + 5])
@pytest.mark.parametrize("radix", [2, 3, 10, 16])
def test_digits_round_trip(n, radix):
    ds = digits(n, radix)
    assert digits_to_int(ds, radix) == n
    assert all(0 <= d < radix for d in ds)
    assert ds[0] != 0


def test_digits_rejects_bad_radix():
    with pytest.raises(ValueError):
        digits(5, 1)


def test_digits_to_int_example():
    assert digits_to_int([1, 2, 3], 10) == 123


def test_factorial():
    assert factorial(5) == 120
    assert factorial(0) == 1


def test_factorial_1_to_n():
    assert factorial_1_to_n(5) == [1, 1, 2, 6, 24, 120]
    table = factorial_1_to_n(12)
    assert all(table[i] == factorial(i) for i in range(13))


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_gcd_examples():
    assert gcd(12, 18) == 6
    assert gcd(0, 0) == 0
    assert gcd(0, 5) == 5


def test_gcd_is_symmetric_and_divides():
    for a, b in [(84, 36), (17, 5), (1000, 250)]:
        g = gcd(a, b)
        assert g == gcd(b, a)
        assert a % g == 0 and b % g == 0


def test_gcd_multiple():
    assert gcd_multiple([12, 18, 24]) == 6


def test_gcd_multiple_needs_two_numbers():
    with pytest.raises(ValueError):
        gcd_multiple([12])


def test_lcm():
    assert lcm(12, 18) == 36


def test_lcm_of_zeros_fails():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_lcm_multiple():
    assert lcm_multiple([12, 18, 24]) == 72
    result = lcm_multiple(range(1, 11))
    assert all(result % k == 0 for k in range(1, 11))


def test_lcm_multiple_needs_two_numbers():
    with pytest.raises(ValueError):
        lcm_multiple([])


def test_is_palindrome():
    assert is_palindrome(12321, 10)
    assert not is_palindrome(12345, 10)
    assert is_palindrome(0b11011, 2)


def test_is_permutation():
    assert is_permutation(123, 321, 10)
    assert not is_permutation(123, 3210, 10)
    assert is_permutation(0b1101, 0b1011, 2)


def test_isqrt():
    assert isqrt(12) == 3
    assert isqrt(0) == 0
    assert isqrt(1) == 1


@pytest.mark.parametrize("n", [2, 15, 16, 17, 10**18 + 7, 2**127 - 1])
def test_isqrt_invariant(n):
    r = isqrt(n)
    assert r * r <= n < (r + 1) * (r + 1)


def test_newtons_method_sqrt2():
    precision = 1e-10
    root = newtons_method(1.0, precision, lambda x: x * x - 2.0, lambda x: 2.0 * x)
    assert abs(root - math.sqrt(2.0)) < precision


def test_ord():
    assert ord(3, 7) == 6
    k = ord(10, 7)
    assert pow(10, k, 7) == 1


def test_ord_not_coprime():
    with pytest.raises(ValueError):
        ord(2, 4)


def test_reverse():
    assert reverse(123, 10) == 321
    assert reverse(0, 10) == 0
    assert reverse(0b1101, 2) == 0b1011