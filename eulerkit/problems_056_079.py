"""Solutions to problems 56 to 79."""

from __future__ import annotations

import itertools
import math
import re
from array import array
from collections import Counter
from collections.abc import Iterable, Sequence
from fractions import Fraction

from eulerkit.numtheory import digit_count, primes_up_to, sum_of_digits
from eulerkit.problems_013_035 import count_ways, max_path_sum, parse_triangle
from eulerkit.problems_036_055 import is_permutation

_FACTORIAL_OF_DIGIT = {str(d): math.factorial(d) for d in range(10)}
_chain_cache: dict[int, int] = {}
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _is_prime_fast(n: int) -> bool:
    """Deterministic Miller-Rabin test for the sizes used here."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def _totients(size: int) -> array:
    """Euler's totient of every index below size."""
    values = array("q", range(size))
    for p in range(2, size):
        if values[p] == p:
            values[p::p] = array("q", [v - v // p for v in values[p::p]])
    return values


def solve_56() -> int:
    """Greatest digit sum of a**b for a and b from 90 to 99."""
    return max(sum_of_digits(a**b) for a in range(90, 100) for b in range(90, 100))


def solve_57(expansions: int = 1000) -> int:
    """Expansions of sqrt(2), up to the given one, with a longer numerator."""
    numerator, denominator = 3, 2
    count = 0
    for _ in range(1, expansions):
        numerator += 2 * denominator
        denominator = numerator - denominator
        if digit_count(numerator) > digit_count(denominator):
            count += 1
    return count


def solve_58() -> int:
    """Side length of the spiral at which diagonal primes fall to about ten percent."""
    n = 1
    total = 0
    primes = 0
    while True:
        total += 4
        square = 4 * n * n
        primes += sum(
            _is_prime_fast(v)
            for v in (square + 2 * n + 1, square - 2 * n + 1, square + 1)
        )
        n += 1
        if total // 10 >= primes:
            return 2 * n - 1


def decrypted_sum(values: Iterable[int], key: bytes | str) -> int:
    """Sum of the values after XOR with the repeating key."""
    if isinstance(key, str):
        key = key.encode("latin-1")
    if not key:
        raise ValueError("key must not be empty")
    return sum(value ^ k for value, k in zip(values, itertools.cycle(key)))


def solve_59(text: str) -> int:
    """Sum of the ASCII values of the comma-separated cipher text decrypted with 'god'."""
    values = [int(token) & 0xFF for token in re.split(r"[,\s]+", text) if token]
    return decrypted_sum(values, b"god")


def solve_62(count: int = 5) -> int:
    """Smallest cube with exactly count digit permutations that are also cubes."""
    keys = ["".join(sorted(str(i**3))) for i in range(10_000)]
    tally = Counter(keys)
    for i, key in enumerate(keys):
        if tally[key] == count:
            return i**3
    raise ValueError(f"no cube has exactly {count} cubic permutations")


def solve_63() -> int:
    """Number of n-digit positive integers that are also an n-th power."""
    return sum(
        1 for x in range(1, 10) for n in range(1, 22) if digit_count(x**n) == n
    )


def solve_65(terms: int = 100) -> int:
    """Digit sum of the numerator of the given convergent of e."""
    denominator, numerator = 1, 2
    for i in range(2, terms + 1):
        previous = denominator
        coefficient = 2 * (i // 3) if i % 3 == 0 else 1
        denominator = numerator
        numerator = coefficient * denominator + previous
    return sum_of_digits(numerator)


def solve_67(text: str) -> int:
    """Maximum path sum through the triangle given as text."""
    return max_path_sum(parse_triangle(text))


def check_gon_ring(ring: Sequence[int]) -> bool:
    """True if the ten numbers form a valid 16-digit magic 5-gon ring.

    Outer nodes sit at indexes 0, 3, 5, 7, 9; the first must be the smallest.
    """
    if len(ring) != 10:
        raise ValueError(f"ring must hold ten numbers, got {len(ring)}")
    if 10 in (ring[1], ring[2], ring[4], ring[6], ring[8]):
        return False
    if any(ring[0] > ring[i] for i in (3, 5, 7, 9)):
        return False
    line = ring[0] + ring[1] + ring[2]
    return (
        ring[3] + ring[2] + ring[4] == line
        and ring[5] + ring[4] + ring[6] == line
        and ring[7] + ring[6] + ring[8] == line
        and ring[9] + ring[8] + ring[1] == line
    )


def solve_68() -> str:
    """Maximum 16-digit string for a magic 5-gon ring."""
    for ring in itertools.permutations(range(10, 0, -1)):
        if check_gon_ring(ring):
            order = (0, 1, 2, 3, 2, 4, 5, 4, 6, 7, 6, 8, 9, 8, 1)
            return "".join(str(ring[i]) for i in order)
    raise ValueError("no magic 5-gon ring exists")


def solve_69(limit: int = 1_000_000) -> int:
    """n up to limit with the greatest n/phi(n): the largest primorial within it."""
    n = 1
    for p in primes_up_to(100):
        if p * n > limit:
            return n
        n *= p
    raise ValueError(f"limit {limit} is beyond the primes below 100")


def solve_70(limit: int = 10_000_000) -> int:
    """n below limit whose totient is a digit permutation of n, minimising n/phi(n).

    Returns 0 when no such n exists.
    """
    if limit <= 2:
        return 0
    totients = _totients(limit)
    best_ratio = math.inf
    best_n = 0
    for n in range(2, limit):
        totient = totients[n]
        ratio = n / totient
        if ratio < best_ratio and is_permutation(n, totient):
            best_n, best_ratio = n, ratio
    return best_n


def solve_71(limit: int = 1_000_000) -> Fraction:
    """Fraction immediately left of 3/7 among those with denominator up to limit."""
    a, b = 3, 7
    best_n, best_d = 0, 1
    for d in range(1, limit + 1):
        n = (a * d - 1) // b
        if n * best_d > best_n * d:
            best_n, best_d = n, d
    return Fraction(best_n, best_d)


def solve_72(limit: int = 1_000_000) -> int:
    """Number of reduced proper fractions with denominator up to limit."""
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    return sum(_totients(limit + 1)[1:]) - 1


def _fractions_between_third_and_half(order: int) -> int:
    if order < 3:
        raise ValueError(f"order must be at least 3, got {order}")
    c = (order + 1) // 3
    prev_n, prev_d = 1, 3
    next_n, next_d = c, 3 * c - 1
    count = 0
    while (next_n, next_d) != (1, 2):
        k = (order + prev_d) // next_d
        prev_n, prev_d, next_n, next_d = (
            next_n,
            next_d,
            k * next_n - prev_n,
            k * next_d - prev_d,
        )
        count += 1
    return count


def solve_73() -> int:
    """Fractions strictly between 1/3 and 1/2 in the Farey sequence of order 12000."""
    return _fractions_between_third_and_half(12_000)


def _digit_factorial_sum(n: int) -> int:
    if n == 0:
        return 0
    return sum(map(_FACTORIAL_OF_DIGIT.__getitem__, str(n)))


def chain_length(n: int) -> int:
    """Number of distinct terms in the digit-factorial chain starting at n."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    path: list[int] = []
    positions: dict[int, int] = {}
    current = n
    while current not in _chain_cache and current not in positions:
        positions[current] = len(path)
        path.append(current)
        current = _digit_factorial_sum(current)
    if current in _chain_cache:
        base = _chain_cache[current]
        tail = len(path)
    else:
        tail = positions[current]
        base = len(path) - tail
        for member in path[tail:]:
            _chain_cache[member] = base
    for offset, member in enumerate(reversed(path[:tail]), 1):
        _chain_cache[member] = base + offset
    return _chain_cache[n]


def solve_74(limit: int = 1_000_000, length: int = 60) -> int:
    """Starting numbers below limit whose chain has exactly length terms."""
    return sum(1 for i in range(1, limit) if chain_length(i) == length)


def solve_76(n: int = 100) -> int:
    """Ways to write n as a sum of at least two positive integers."""
    return count_ways(n, range(1, n))


def solve_77(threshold: int = 5000) -> int:
    """First number that can be written as a sum of primes in at least threshold ways."""
    primes = primes_up_to(1000)
    for n in itertools.count(1):
        if count_ways(n, primes) >= threshold:
            return n
    raise AssertionError("unreachable")


def _pentagonal_term(i: int) -> tuple[int, int]:
    j = i // 2 + 1 if i % 2 == 0 else -(i // 2 + 1)
    sign = -1 if i % 4 > 1 else 1
    return j * (3 * j - 1) // 2, sign


def solve_78(divisor: int = 1_000_000) -> int:
    """Least positive n whose partition count is divisible by divisor."""
    if divisor < 1:
        raise ValueError(f"divisor must be positive, got {divisor}")
    partitions = [1]
    terms = [_pentagonal_term(0)]
    for n in itertools.count(1):
        while terms[-1][0] <= n:
            terms.append(_pentagonal_term(len(terms)))
        total = 0
        for penta, sign in terms:
            if penta > n:
                break
            total += sign * partitions[n - penta]
        total %= divisor
        if total == 0:
            return n
        partitions.append(total)
    raise AssertionError("unreachable")


def solve_79(text: str) -> str:
    """Shortest passcode guess: digits ordered by their average login position."""
    position_sums = [0.0] * 10
    appearances = [0] * 10
    for token in text.split():
        number = int(token)
        for position in (2, 1, 0):
            digit = number % 10
            position_sums[digit] += position
            appearances[digit] += 1
            number //= 10
    averages = sorted(
        (position_sums[d] / appearances[d], d) for d in range(10) if appearances[d]
    )
    return "".join(str(d) for _, d in averages)