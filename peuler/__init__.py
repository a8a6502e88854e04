"""Project Euler solutions to early problems and the number-theory helpers behind them."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "divisors",
    "linalg",
    "primes",
    "problems_a",
    "problems_b",
    "problems_c",
    "series",
]