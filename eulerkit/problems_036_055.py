"""Solutions to problems 36 to 55."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence

from eulerkit.numtheory import (
    all_equal,
    is_palindrome,
    is_prime,
    prime_sieve,
    primes_up_to,
)
from eulerkit.problems_013_035 import binomial, concat, is_pandigital, word_score

_SUBSTRING_DIVISORS = (2, 3, 5, 7, 11, 13, 17)


def solve_36(limit: int = 1_000_000) -> int:
    """Sum of numbers below limit that are palindromes in base 10 and base 2."""
    return sum(
        i for i in range(1, limit) if is_palindrome(i, 10) and is_palindrome(i, 2)
    )


def is_truncatable(n: int, flags: Sequence[bool]) -> bool:
    """True if n stays prime while digits are removed from either end.

    Primality is read from flags, indexed by number.
    """
    power = 10
    while power < n:
        if not flags[n % power]:
            return False
        power *= 10
    while n:
        if not flags[n]:
            return False
        n //= 10
    return True


def solve_37(limit: int = 1_000_000) -> int:
    """Sum of the truncatable primes below limit."""
    flags = prime_sieve(limit)
    return sum(n for n in range(11, limit, 2) if is_truncatable(n, flags))


def solve_38() -> int:
    """Largest 1-9 pandigital number formed by concatenating i and 2i."""
    candidates = (concat(i, 2 * i) for i in range(9000, 10_000))
    return max((c for c in candidates if is_pandigital(c)), default=0)


def solve_39(limit: int = 1000) -> int:
    """Perimeter up to limit with the most integer right-angled triangles."""
    best_count, best_perimeter = 0, 0
    for p in range(2, limit + 1, 2):
        count = sum(
            1 for a in range(2, p // 3) if p * (p - 2 * a) % (2 * (p - a)) == 0
        )
        if count > best_count:
            best_count, best_perimeter = count, p
    return best_perimeter


def solve_40() -> int:
    """Product of the 1st, 10th, ..., 1,000,000th digits of Champernowne's constant."""
    chunks: list[str] = []
    length = 0
    for number in itertools.count(1):
        if length >= 1_000_000:
            break
        text = str(number)
        chunks.append(text)
        length += len(text)
    digits = "".join(chunks)
    return math.prod(int(digits[10**k - 1]) for k in range(7))


def solve_41() -> int:
    """Largest pandigital prime, searched from 7654321 downward."""
    for digits in itertools.permutations("7654321"):
        value = int("".join(digits))
        if is_prime(value):
            return value
    raise ValueError("no 7-digit pandigital prime found")


def is_triangular(n: int) -> bool:
    """True if n is a triangular number."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    s = math.isqrt(2 * n)
    return s * (s + 1) // 2 == n


def solve_42(text: str) -> int:
    """Number of whitespace-separated words in text whose score is triangular."""
    return sum(1 for word in text.split() if is_triangular(word_score(word)))


def _substring_divisible(prefix: str, remaining: str) -> Iterator[str]:
    if not remaining:
        yield prefix
        return
    for index, digit in enumerate(remaining):
        candidate = prefix + digit
        size = len(candidate)
        if size >= 4 and int(candidate[size - 3 :]) % _SUBSTRING_DIVISORS[size - 4]:
            continue
        yield from _substring_divisible(
            candidate, remaining[:index] + remaining[index + 1 :]
        )


def solve_43() -> int:
    """Sum of 0-9 pandigital numbers with the sub-string divisibility property."""
    return sum(int(number) for number in _substring_divisible("", "0123456789"))


def pentagonal(n: int) -> int:
    """The n-th pentagonal number."""
    return n * (3 * n - 1) // 2


def is_pentagonal(x: int) -> bool:
    """True if x is a pentagonal number n(3n-1)/2 for a positive integer n."""
    if x <= 0:
        return False
    discriminant = 24 * x + 1
    root = math.isqrt(discriminant)
    return root * root == discriminant and (1 + root) % 6 == 0


def solve_44(count: int = 5000) -> int:
    """Smallest difference D of two of the first count pentagonal numbers
    whose sum and difference are both pentagonal."""
    numbers = [pentagonal(n) for n in range(1, count + 1)]
    members = set(numbers)
    best: int | None = None
    for index, j in enumerate(numbers):
        for k in numbers[index + 1 :]:
            difference = k - j
            if best is not None and difference >= best:
                break
            if difference in members and is_pentagonal(j + k):
                best = difference
    if best is None:
        raise ValueError(f"no qualifying pair among the first {count} pentagonals")
    return best


def solve_45(start: int = 144) -> int:
    """First hexagonal number, from index start on, that is also pentagonal."""
    for i in itertools.count(start):
        hexagonal = i * (2 * i - 1)
        if is_pentagonal(hexagonal):
            return hexagonal
    raise AssertionError("unreachable")


def solve_46() -> int:
    """Smallest odd number that is not a prime plus twice a square."""
    size = 100_000
    reachable = [False] * size
    for p in primes_up_to(10_000):
        for j in range(300):
            total = p + 2 * j * j
            if total >= size:
                break
            reachable[total] = True
    for i in range(3, size, 2):
        if not reachable[i]:
            return i
    raise ValueError("every odd number in range is reachable")


def _distinct_factor_count(n: int, primes: Sequence[int]) -> int:
    return sum(1 for p in primes if n % p == 0)


def prime_factor_count(n: int, flags: Sequence[bool]) -> int:
    """Number of distinct primes below len(flags) that divide n."""
    return _distinct_factor_count(n, [i for i, flag in enumerate(flags) if flag])


def solve_47(target: int = 4) -> int:
    """First of target consecutive numbers each with target distinct prime factors.

    Only prime factors below 1000 are counted.
    """
    if target < 1:
        raise ValueError(f"target must be positive, got {target}")
    primes = primes_up_to(999)
    run = 0
    for n in itertools.count(2):
        if _distinct_factor_count(n, primes) == target:
            run += 1
            if run == target:
                return n - target + 1
        else:
            run = 0
    raise AssertionError("unreachable")


def solve_48(limit: int = 1000) -> str:
    """Last ten digits of the sum of i**i for i from 1 to limit.

    The result is empty when the sum has no more than ten digits.
    """
    text = str(sum(i**i for i in range(1, limit + 1)))
    return text[-10:] if len(text) > 10 else ""


def is_permutation(a: int, b: int) -> bool:
    """True if a and b have the same decimal digits."""
    return sorted(str(a)) == sorted(str(b))


def solve_49() -> list[str]:
    """Concatenations of prime arithmetic sequences whose terms are digit permutations."""
    primes = primes_up_to(10_000)
    prime_set = set(primes)
    keys = {p: sorted(str(p)) for p in primes}
    results = []
    for index, first in enumerate(primes):
        first_key = keys[first]
        for second in itertools.islice(primes, index + 1, None):
            third = 2 * second - first
            if keys[second] == first_key and sorted(str(third)) == first_key:
                if third in prime_set:
                    results.append(f"{first}{second}{third}")
                else:
                    break
    return results


def solve_50(limit: int = 1_000_000) -> int:
    """Prime up to limit that is the sum of the most consecutive primes."""
    primes = primes_up_to(limit)
    flags = prime_sieve(max(limit + 1, 2))
    best_sum, best_span = 0, -1
    for i in range(len(primes)):
        total = 0
        for j, p in enumerate(primes[i:], start=i):
            total += p
            if total > limit:
                break
            if flags[total] and total > best_sum and j - i > best_span:
                best_sum, best_span = total, j - i
    return best_sum


def solve_52() -> int:
    """Smallest x such that 2x to 6x contain the same digits as x."""
    for i in range(100_000, 166_001):
        if all_equal(sorted(str(i * k)) for k in range(1, 7)):
            return i
    raise ValueError("no permuted multiple found in range")


def solve_53(limit: int = 100, threshold: int = 1_000_000) -> int:
    """Number of binomials C(n, r) with 1 <= r <= n <= limit exceeding threshold."""
    return sum(
        1
        for n in range(1, limit + 1)
        for r in range(1, n + 1)
        if binomial(n, r) > threshold
    )


def reverse_number(n: int) -> int:
    """Decimal digits of n reversed; non-positive n gives 0."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def is_lychrel(n: int) -> bool:
    """True if reverse-and-add fails to reach a palindrome within 49 iterations."""
    iterations = 0
    while True:
        n += reverse_number(n)
        iterations += 1
        if is_palindrome(n, 10) or iterations >= 50:
            break
    return iterations >= 50


def solve_55(limit: int = 10_000) -> int:
    """Number of Lychrel numbers from 1 to limit."""
    return sum(1 for i in range(1, limit + 1) if is_lychrel(i))