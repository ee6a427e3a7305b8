"""Number-theory helpers shared by the problem solvers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

_SENTINEL = object()


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned unchanged."""
    if n <= 1:
        return n
    prev, curr = 0, 1
    for _ in range(n - 1):
        prev, curr = curr, prev + curr
    return curr


def is_palindrome(n: int, base: int = 10) -> bool:
    """Return True if the digits of n in the given base read the same both ways.

    Zero counts as a palindrome; negative numbers never do.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    reversed_value = 0
    remaining = n
    while remaining > 0:
        remaining, digit = divmod(remaining, base)
        reversed_value = reversed_value * base + digit
    return reversed_value == n


def is_prime(n: int) -> bool:
    """Trial division up to the square root of n.

    Values below 2 have no candidate divisor and are reported as prime.
    """
    if n < 4:
        return True
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """Return all primes less than or equal to n, in ascending order."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def prime_sieve(limit: int, reverse: bool = False) -> list[bool]:
    """Return a list of length limit flagging prime indexes.

    With reverse set, the flags are inverted: composites (and 0, 1) are True.
    """
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    flags = [True] * limit
    flags[0] = flags[1] = False
    for i in range(2, math.isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit, i))
    if reverse:
        return [not flag for flag in flags]
    return flags


def all_equal(items: Iterable[Any]) -> bool:
    """Return True if every item equals the first one (True for no items)."""
    iterator = iter(items)
    first = next(iterator, _SENTINEL)
    if first is _SENTINEL:
        return True
    return all(item == first for item in iterator)


def find_in(items: Iterable[Any], element: Any) -> int | None:
    """Return the index of the first item equal to element, or None."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return None


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of n, carrying the sign of n."""
    total = sum(int(ch) for ch in str(abs(n)))
    return -total if n < 0 else total


def digit_count(n: int) -> int:
    """Return the number of decimal digits of n; zero has none."""
    if n == 0:
        return 0
    return len(str(abs(n)))


def gcd(u: int, v: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    if u < 0 or v < 0:
        raise ValueError("gcd is defined here for non-negative integers only")
    return math.gcd(u, v)


def phi(n: int, primes: Iterable[int]) -> int:
    """Euler's totient of n, using an ascending list of primes for factorisation.

    Raises ValueError if the primes run out before n is fully factorised.
    """
    result = n
    remaining = n
    last = 1
    for p in primes:
        if p * p > remaining:
            break
        last = p
        if remaining % p == 0:
            result -= result // p
            while remaining % p == 0:
                remaining //= p
    else:
        if remaining > 1 and remaining >= (last + 1) ** 2:
            raise ValueError("prime list too short to factorise the number")
    if remaining > 1:
        result -= result // remaining
    return result