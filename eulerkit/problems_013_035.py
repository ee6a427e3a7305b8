"""Solutions to problems 13 to 35."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Sequence

from eulerkit.numtheory import gcd, is_prime, prime_sieve, sum_of_digits

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)
_HUNDREDS = (
    "", "onehundred", "twohundred", "threehundred", "fourhundred",
    "fivehundred", "sixhundred", "sevenhundred", "eighthundred", "ninehundred",
)
_DAYS = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
_COINS = (1, 2, 5, 10, 20, 50, 100, 200)

_collatz_cache: dict[int, int] = {1: 1}


def solve_13(text: str) -> int:
    """First ten digits of the sum of the whitespace-separated numbers in text."""
    total = sum(int(token) for token in text.split())
    sign = -1 if total < 0 else 1
    magnitude = abs(total)
    while magnitude >= 10**10:
        magnitude //= 10
    return sign * magnitude


def collatz_length(n: int) -> int:
    """Number of terms in the Collatz chain starting at n, including n and 1."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    path = []
    value = n
    while value not in _collatz_cache:
        path.append(value)
        value = value // 2 if value % 2 == 0 else 3 * value + 1
    length = _collatz_cache[value]
    for step in reversed(path):
        length += 1
        _collatz_cache[step] = length
    return _collatz_cache[n]


def solve_14(limit: int = 1_000_000) -> int:
    """Starting number below limit that produces the longest Collatz chain."""
    best, longest = 1, 0
    for start in range(1, limit):
        length = collatz_length(start)
        if length > longest:
            best, longest = start, length
    return best


def binomial(n: int, r: int) -> int:
    """Number of ways to choose r items from n."""
    if n < 0 or r < 0 or r > n:
        raise ValueError(f"binomial needs 0 <= r <= n, got n={n}, r={r}")
    return math.factorial(n) // (math.factorial(r) * math.factorial(n - r))


def solve_15(size: int = 20) -> int:
    """Number of lattice routes through a size x size grid."""
    return binomial(2 * size, size)


def solve_16(exponent: int = 1000) -> int:
    """Sum of the digits of 2 to the given power."""
    return sum_of_digits(2**exponent)


def number_to_words(n: int) -> str:
    """British English words for n (0 to 1000) without spaces or hyphens."""
    if not 0 <= n <= 1000:
        raise ValueError(f"n must be between 0 and 1000, got {n}")
    if n == 1000:
        return "onethousand"
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + number_to_words(n % 10)
    rest = number_to_words(n % 100)
    return _HUNDREDS[n // 100] + ("and" + rest if rest else "")


def solve_17(limit: int = 1000) -> int:
    """Letters used writing out every number from 1 to limit."""
    return sum(len(number_to_words(i)) for i in range(1, limit + 1))


def parse_triangle(text: str) -> list[list[int]]:
    """Rows of whitespace-separated integers, skipping blank lines."""
    return [
        [int(token) for token in line.split()]
        for line in text.splitlines()
        if line.strip()
    ]


def max_path_sum(rows: Sequence[Sequence[int]]) -> int:
    """Greatest top-to-bottom path sum through a number triangle."""
    if not rows:
        raise ValueError("triangle has no rows")
    sums = list(rows[-1])
    for row in reversed(rows[:-1]):
        if len(sums) < len(row) + 1:
            raise ValueError("each row must be longer than the one above it")
        sums = [value + max(sums[j], sums[j + 1]) for j, value in enumerate(row)]
    return sums[0]


def solve_18(text: str) -> int:
    """Maximum path sum through the triangle given as text."""
    return max_path_sum(parse_triangle(text))


def weekday(day: int, month: int, year: int) -> str:
    """Name of the weekday of a Gregorian date, via its Julian day number."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    return _DAYS[(jdn + 1) % 7]


def solve_19() -> int:
    """Sundays falling on the first of a month from 1901 to 2000."""
    return sum(
        weekday(1, month, year) == "Sunday"
        for year in range(1901, 2001)
        for month in range(1, 13)
    )


def solve_20(n: int = 100) -> int:
    """Sum of the digits of n factorial."""
    return sum_of_digits(math.factorial(n))


def divisor_sum(n: int) -> int:
    """Sum of the proper divisors of n; 0 and 1 give 1."""
    total = 0
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            quotient = n // i
            total += i if i == quotient else i + quotient
    return total + 1


def solve_21(limit: int = 10_000) -> int:
    """Sum of the amicable numbers below limit."""
    amicable = set()
    for i in range(limit):
        partner = divisor_sum(i)
        if i == divisor_sum(partner) and i != partner:
            amicable.add(i)
    return sum(amicable)


def word_score(word: str) -> int:
    """Sum of the alphabetical positions of the capital letters of word."""
    return sum(ord(ch) - ord("A") + 1 for ch in word)


def solve_22(text: str) -> int:
    """Total of name scores for the whitespace-separated names in text."""
    names = sorted(text.split())
    return sum(position * word_score(name) for position, name in enumerate(names, 1))


def solve_23(limit: int = 28_123) -> int:
    """Sum of numbers up to limit that are not the sum of two abundant numbers."""
    abundant = [i for i in range(2, limit + 1) if divisor_sum(i) > i]
    reachable = [False] * (limit + 1)
    for index, first in enumerate(abundant):
        for second in abundant[index:]:
            total = first + second
            if total > limit:
                break
            reachable[total] = True
    return sum(i for i in range(1, limit + 1) if not reachable[i])


def solve_24(index: int = 1_000_000) -> str:
    """The index-th lexicographic permutation of the digits 0 to 9.

    Indexes past the last permutation wrap around to the first.
    """
    if index < 1:
        raise ValueError(f"index must be positive, got {index}")
    pool = list("0123456789")
    position = (index - 1) % math.factorial(len(pool))
    result = []
    for remaining in range(len(pool) - 1, -1, -1):
        block, position = divmod(position, math.factorial(remaining))
        result.append(pool.pop(block))
    return "".join(result)


def solve_25(digits: int = 1000) -> int:
    """Index of the first Fibonacci number with the given number of digits."""
    if digits < 1:
        raise ValueError(f"digits must be positive, got {digits}")
    threshold = 10 ** (digits - 1)
    prev, curr, index = 0, 1, 1
    while curr < threshold:
        prev, curr = curr, prev + curr
        index += 1
    return index


def solve_26(limit: int = 1001) -> int:
    """Denominator, stepping down by two from limit, with the longest recurring cycle."""
    cycle_length = 0
    best = 0
    for d in range(limit, 1, -2):
        if cycle_length >= d:
            break
        seen = [0] * d
        value, position = 1, 0
        while seen[value] == 0 and value != 0:
            seen[value] = position
            value = value * 10 % d
            position += 1
        if position - seen[value] > cycle_length:
            cycle_length = position - seen[value]
            best = d
    return best


def solve_27(bound: int = 1000) -> int:
    """Product a*b of the quadratic n^2 + an + b, |a|,|b| <= bound, with most primes."""
    best_run, best_a, best_b = 0, 0, 0
    for a in range(-bound, bound + 1):
        for b in range(-bound, bound + 1):
            run = next(
                n for n in itertools.count() if not is_prime(abs(n * n + a * n + b))
            )
            if run > best_run:
                best_run, best_a, best_b = run, a, b
    return best_a * best_b


def solve_28(size: int = 1001) -> int:
    """Sum of the diagonals of a size x size number spiral."""
    if size < 1 or size % 2 == 0:
        raise ValueError(f"size must be a positive odd number, got {size}")
    return 1 + sum(
        (4 * n * n + 4 * n + 1)
        + (4 * n * n + 2 * n + 1)
        + (4 * n * n - 2 * n + 1)
        + (4 * n * n + 1)
        for n in range(1, (size - 1) // 2 + 1)
    )


def solve_29(limit: int = 100) -> int:
    """Distinct terms a**b for 2 <= a, b <= limit."""
    values = range(2, limit + 1)
    return len({a**b for a in values for b in values})


def solve_30(limit: int = 355_000) -> int:
    """Sum of numbers up to limit equal to the sum of fifth powers of their digits."""
    powers = [d**5 for d in range(10)]
    return sum(
        i
        for i in range(2, limit + 1)
        if i == sum(powers[int(ch)] for ch in str(i))
    )


def count_ways(goal: int, parts: Iterable[int]) -> int:
    """Number of ways goal can be written as a sum of the given parts."""
    if goal < 0:
        raise ValueError(f"goal must not be negative, got {goal}")
    ways = [1] + [0] * goal
    for part in parts:
        if part < 1:
            raise ValueError(f"parts must be positive, got {part}")
        for total in range(part, goal + 1):
            ways[total] += ways[total - part]
    return ways[goal]


def solve_31(goal: int = 200) -> int:
    """Ways to make goal pence from British coins."""
    return count_ways(goal, _COINS)


def is_pandigital(n: int) -> bool:
    """True if n uses each of the digits 1 to 9 exactly once."""
    return "".join(sorted(str(n))) == "123456789"


def concat(a: int, b: int) -> int:
    """Decimal concatenation of a and b; a non-positive b is simply added."""
    shift = len(str(b)) if b > 0 else 0
    return a * 10**shift + b


def solve_32() -> int:
    """Sum of products whose multiplicand/multiplier/product identity is 1-9 pandigital."""
    products = set()
    for n in range(1, 100):
        for m in range(1, 10_000 // n + 1):
            product = n * m
            if is_pandigital(concat(concat(n, m), product)):
                products.add(product)
    return sum(products)


def solve_33() -> int:
    """Denominator of the product of the four digit-cancelling fractions, in lowest terms."""
    numerator_product = denominator_product = 1
    for c in range(1, 10):
        for d in range(1, c):
            for n in range(1, d):
                if (n * 10 + c) * d == (c * 10 + d) * n:
                    numerator_product *= n
                    denominator_product *= d
    return denominator_product // gcd(numerator_product, denominator_product)


def digit_factorial_sum(n: int) -> int:
    """Sum of the factorials of the decimal digits of n; zero gives zero."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    return sum(math.factorial(int(ch)) for ch in str(n))


def solve_34(limit: int = 100_000) -> int:
    """Sum of numbers from 3 to limit equal to the sum of their digit factorials."""
    return sum(i for i in range(3, limit + 1) if i == digit_factorial_sum(i))


def is_circular_prime(n: int, flags: Sequence[bool]) -> bool:
    """True if every rotation of n other than n itself is flagged prime."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    digits = len(str(n))
    power = 10**digits - 1
    for _ in range(1, digits):
        n = (n + n % 10 * power) // 10
        if not flags[n]:
            return False
    return True


def solve_35(limit: int = 1_000_000) -> int:
    """Number of circular primes below limit."""
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    flags = prime_sieve(max(10 ** len(str(limit - 1)), 2))
    return 4 + sum(
        1 for i in range(11, limit, 2) if is_circular_prime(i, flags) and flags[i]
    )