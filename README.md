# peuler

Solutions to the early problems of Project Euler, together with the
number-theory and linear-algebra helpers they are built on. It needs
nothing beyond the Python standard library.

## Solving problems

Every solution is a function that takes no arguments and returns the
answer as a string:

| Module                | Problems                          |
|-----------------------|-----------------------------------|
| `peuler.problems_a`   | 1 to 10                           |
| `peuler.problems_b`   | 11, 12, 14 to 21, 23              |
| `peuler.problems_c`   | 24 to 32                          |

```python
from peuler.problems_a import solve_0001
from peuler.problems_b import number_to_words, solve_0017
from peuler.problems_c import count_coin_combinations, solve_0031

solve_0001()                                          # '233168'
number_to_words(342)                                  # 'three hundred and forty-two'
count_coin_combinations(200, [200, 100, 50, 20, 10, 5, 2, 1])
```

`number_to_words` names numbers from 0 to 1000 (0 gives an empty string)
and raises `ValueError` outside that range. `count_coin_combinations`
raises `ValueError` for a negative amount or a coin that is not positive.

## The maths toolkit

Arithmetic and digits, in `peuler.arith`:

```python
from peuler.arith import collatz_seq, digits, digits_to_int, gcd, lcm_multiple, ord

list(collatz_seq(13))        # [13, 40, 20, 10, 5, 16, 8, 4, 2, 1]
digits(123, 10)              # [1, 2, 3]
digits_to_int([1, 2, 3], 10) # 123
gcd(12, 18)                  # 6
lcm_multiple([12, 18, 24])   # 72
ord(3, 7)                    # 6
```

`gcd_multiple` and `lcm_multiple` need at least two numbers, and `ord`
raises `ValueError` when its arguments are not coprime.

Primes, in `peuler.primes`:

```python
from peuler.primes import distinct_prime_factors, is_prime, pcf_exact, sieve_of_eratosthenes

sieve_of_eratosthenes(10)             # [2, 3, 5, 7]
is_prime(12)                          # (False, 2)
is_prime(7)                           # (True, 1)
list(distinct_prime_factors(12))      # [(2, 2), (3, 1)]
pcf_exact(100)                        # 25
```

`is_prime` raises `ValueError` for numbers below 2. `pcf` and `apcf`
estimate the prime-counting function and its inverse.

Divisors and the totient, in `peuler.divisors`; partitions, closed-form
sums and continued fractions, in `peuler.series`:

```python
from peuler.divisors import num_of_divisors, phi, sum_of_proper_divisors, phi_1_to_n
from peuler.series import ContinuedFraction, partition_p, sum_n_squares

num_of_divisors(12)            # 6
phi(5)                         # 4
phi_1_to_n(5)                  # [0, 1, 1, 2, 2, 4]
sum_of_proper_divisors(10)     # 8
partition_p(5)                 # 7
sum_n_squares(5)               # 55

root_two = ContinuedFraction.from_sqrt(2)
root_two.non_periodic          # (1,)
root_two.periodic              # (2,)
root_two.convergent_n(3)       # Fraction(17, 12)
```

The `*_1_to_n` functions return a list indexed by the number, from 0 to `n`.

Points and vectors of any dimension, in `peuler.linalg`:

```python
from peuler.linalg import Point, Vector

v = Vector.from_points(Point([1.0, 2.0, 3.0]), Point([4.0, 5.0, 6.0]))
v.coords                                  # (3.0, 3.0, 3.0)
v.dot_product(Vector([1.0, 0.0, 0.0]))   # 3.0
(2.0 * v).magnitude()
Vector([1.0, 0.0, 0.0]).cross_product(Vector([0.0, 1.0, 0.0]))  # Vector(coords=(0.0, 0.0, 1.0))
```

## What it does not do

- There is no command-line program and no catalogue that lists the
  problems, runs one by number or times it; call the `solve_NNNN`
  functions directly.
- Problems 13 and 22 have no solution here, and nothing beyond problem 32
  is solved.