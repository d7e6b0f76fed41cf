"""Divisors, primes, integer division and other small number-theory routines."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_UINT32_MASK = 0xFFFFFFFF


def _sieve(limit: int) -> List[bool]:
    """Return a table telling, for every integer 0..limit, whether it is prime."""
    if limit < 0:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = False
    if limit >= 1:
        is_prime[1] = False
    factor = 2
    while factor * factor <= limit:
        if is_prime[factor]:
            is_prime[factor * factor::factor] = [False] * len(
                range(factor * factor, limit + 1, factor)
            )
        factor += 1
    return is_prime


def divisors(n: int) -> List[int]:
    """Return the positive divisors of n in ascending order; empty for n < 1."""
    found: List[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            found.append(i)
            if n // i != i:
                found.append(n // i)
        i += 1
    return sorted(found)


def is_armstrong(n: int) -> bool:
    """Return whether n equals the sum of its digits each raised to the digit count."""
    width = len(str(n))
    digits = str(n) if n > 0 else ""
    return sum(int(d) ** width for d in digits) == n


def closest_primes(left: int, right: int) -> Tuple[int, int]:
    """Return the closest pair of consecutive primes in [left, right].

    The earliest pair wins ties; (-1, -1) is returned when fewer than two
    primes lie in the range.
    """
    table = _sieve(right)
    primes = [p for p in range(max(left, 0), right + 1) if table[p]]
    best: Tuple[int, int] = (-1, -1)
    best_gap = None
    for low, high in zip(primes, primes[1:]):
        if best_gap is None or high - low < best_gap:
            best_gap = high - low
            best = (low, high)
    return best


def count_primes(n: int) -> int:
    """Return how many primes are strictly less than n."""
    if n <= 2:
        return 0
    return sum(_sieve(n - 1))


def count_primes_in_range(low: int, high: int) -> int:
    """Return how many primes lie in the inclusive range [low, high]."""
    table = _sieve(high)
    return sum(1 for value in range(max(low, 0), high + 1) if table[value])


def divide(dividend: int, divisor: int) -> int:
    """Divide truncating toward zero, clamped to the signed 32-bit range."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == divisor:
        return 1
    remaining = abs(dividend)
    step = abs(divisor)
    same_sign = (dividend >= 0) == (divisor >= 0)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining >= step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    if not same_sign:
        quotient = -quotient
    return max(_INT_MIN, min(_INT_MAX, quotient))


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError(f"factorial() is not defined for negative values, got {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


@lru_cache(maxsize=None)
def _fib_tree(n: int) -> int:
    if n <= 1:
        return n
    return _fib_tree(n - 1) + _fib_tree(n - 2)


def fib_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by the defining recurrence."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _fib_tree(n)


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits differ between the 32-bit forms of start and goal."""
    return bin((start ^ goal) & _UINT32_MASK).count("1")