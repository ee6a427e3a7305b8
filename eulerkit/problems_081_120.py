"""Solutions to problems 81 to 120."""

from __future__ import annotations

import functools
import itertools
import math
from collections import Counter

from eulerkit.numtheory import gcd, primes_up_to

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_ROMAN_RULES = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (100, "C"), (90, "XC"),
    (50, "L"), (40, "XL"), (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)
_RECTANGLE_BOUND = 2000


def parse_matrix(text: str) -> list[list[int]]:
    """Rows of comma- or whitespace-separated integers, skipping blank lines."""
    return [
        [int(token) for token in line.replace(",", " ").split()]
        for line in text.splitlines()
        if line.strip()
    ]


def _rectangular(text: str) -> list[list[int]]:
    rows = parse_matrix(text)
    if not rows or not rows[0]:
        raise ValueError("matrix is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows differ in length")
    return rows


def solve_81(text: str) -> int:
    """Minimal path sum from top left to bottom right, moving right and down."""
    rows = _rectangular(text)
    best = list(itertools.accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for above, value in zip(best, row):
            left = current[-1] if current else math.inf
            current.append(value + min(above, left))
        best = current
    return best[-1]


def solve_82(text: str) -> int:
    """Minimal path sum from the left column to the right one, moving up, down and right."""
    rows = _rectangular(text)
    columns = list(zip(*rows))
    sums = list(columns[-1])
    height = len(sums)
    for column in reversed(columns[:-1]):
        sums[0] += column[0]
        for j in range(1, height):
            sums[j] = min(sums[j - 1], sums[j]) + column[j]
        for j in range(height - 2, -1, -1):
            sums[j] = min(sums[j], sums[j + 1] + column[j])
    return min(sums)


def count_rectangles(length: int, width: int) -> int:
    """Number of rectangles contained in a length x width grid."""
    return length * width * (length + 1) * (width + 1) // 4


def solve_85(target: int = 2_000_000) -> int:
    """Area of the grid, sides up to 2000, whose rectangle count is nearest target."""
    best_diff = math.inf
    best_area = 0
    for length in range(1, _RECTANGLE_BOUND + 1):
        local_diff = math.inf
        local_width = 0
        for width in range(1, _RECTANGLE_BOUND + 1):
            count = count_rectangles(length, width)
            diff = abs(count - target)
            if diff <= local_diff:
                local_diff, local_width = diff, width
            if count > target:
                break
        if local_diff < best_diff:
            best_diff, best_area = local_diff, length * local_width
    return best_area


def solve_87(limit: int = 50_000_000) -> int:
    """Numbers below limit expressible as a prime square, cube and fourth power summed."""
    if limit <= 0:
        return 0
    primes = primes_up_to(math.isqrt(limit))
    squares = [p * p for p in primes]
    cubes = [p**3 for p in primes if p**3 < limit]
    fourths = [p**4 for p in primes if p**4 < limit]
    found: set[int] = set()
    for fourth in fourths:
        for cube in cubes:
            base = fourth + cube
            if base >= limit:
                break
            for square in squares:
                value = base + square
                if value >= limit:
                    break
                found.add(value)
    return len(found)


def roman_to_int(numeral: str) -> int:
    """Value of a Roman numeral, accepting non-minimal forms such as IIII."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in numeral]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character {exc.args[0]!r}") from None
    total = 0
    for current, following in itertools.zip_longest(values, values[1:], fillvalue=0):
        total += current if following <= current else -current
    return total


def int_to_roman(number: int) -> str:
    """Minimal Roman numeral for number; zero or less gives an empty string."""
    parts = []
    for value, symbol in _ROMAN_RULES:
        count, number = divmod(number, value) if number > 0 else (0, number)
        parts.append(symbol * count)
    return "".join(parts)


def solve_89(text: str) -> int:
    """Characters saved by writing each whitespace-separated numeral in minimal form."""
    return sum(
        len(numeral) - len(int_to_roman(roman_to_int(numeral)))
        for numeral in text.split()
    )


def solve_91(size: int = 50) -> int:
    """Right triangles OPQ with integer points P, Q in a size x size grid."""
    result = 3 * size * size
    for x in range(1, size + 1):
        for y in range(1, size + 1):
            f = gcd(x, y)
            result += min(y * f // x, (size - x) * f // y) * 2
    return result


def square_digit_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of n."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(int(ch) ** 2 for ch in str(n))


@functools.lru_cache(maxsize=None)
def _arrives_at_89(n: int) -> bool:
    while n not in (1, 89):
        n = square_digit_sum(n)
    return n == 89


def _square_sum_counts(limit: int) -> Counter[int]:
    """Count of numbers in [0, limit) for each square digit sum."""
    if limit <= 0:
        return Counter()
    digits = [int(ch) for ch in str(limit)]
    free = [Counter({0: 1})]
    for _ in range(len(digits)):
        nxt: Counter[int] = Counter()
        for total, count in free[-1].items():
            for d in range(10):
                nxt[total + d * d] += count
        free.append(nxt)
    result: Counter[int] = Counter()
    prefix = 0
    for position, top in enumerate(digits):
        tail = free[len(digits) - position - 1]
        for d in range(top):
            start = prefix + d * d
            for total, count in tail.items():
                result[start + total] += count
        prefix += top * top
    return result


def solve_92(limit: int = 10_000_000) -> int:
    """Starting numbers below limit whose square digit chain arrives at 89."""
    return sum(
        count
        for total, count in _square_sum_counts(limit).items()
        if total and _arrives_at_89(total)
    )


def solve_94(limit: int = 1_000_000_000) -> int:
    """Sum of perimeters up to limit of almost equilateral integral triangles."""
    zero, side, m = 1, 1, 1
    perimeter = total = 0
    while perimeter <= limit:
        zero, side = side, 4 * side - zero + 2 * m
        m = -m
        total += perimeter
        perimeter = 3 * side - m
    return total


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """base to the power exponent, reduced modulo modulus."""
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    return pow(base, exponent, modulus)


def solve_97() -> int:
    """Last ten digits of the prime 28433 * 2**7830457 + 1."""
    modulus = 10_000_000_000
    return (28433 * mod_pow(2, 7830457, modulus) + 1) % modulus


def solve_99(text: str) -> int:
    """1-based line number of the largest base**exponent pair in text."""
    pairs = parse_matrix(text)
    if not pairs:
        raise ValueError("no base/exponent pairs given")
    if any(len(pair) < 2 for pair in pairs):
        raise ValueError("every line needs a base and an exponent")
    weights = (math.log10(base) * exponent for base, exponent, *_ in pairs)
    return max(enumerate(weights, 1), key=lambda item: item[1])[0]


def solve_120(limit: int = 1000) -> int:
    """Sum of the maximum remainders of (a-1)^n + (a+1)^n by a^2 for 3 <= a <= limit."""
    return sum((a - 1) // 2 * 2 * a for a in range(3, limit + 1))