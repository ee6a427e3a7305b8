"""Solutions to problems 1 to 12."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence

from eulerkit.numtheory import fib, is_palindrome, is_prime, primes_up_to

DIGITS = (
    "7316717653133062491922511967442657474235534919493496983520312774506326"
    "2395783180169848018694788518438586156078911294949545950173795833195285"
    "3208805511125406987471585238630507156932909632952274430435576689664895"
    "0445244523161731856403098711121722383113622298934233803081353362766142"
    "8280644448664523874930358907296290491560440772390713810515859307960866"
    "7017242712188399879790879227492190169972088809377665727333001053367881"
    "2202354218097512545405947522435258490771167055601360483958644670632441"
    "5722155397536978179778461740649551492908625693219784686224828397224137"
    "5657056057490261407972968652414535100474821663704844031998900088952434"
    "5065854122758866688116427171479924442928230863465674813919123162824586"
    "1786645835912456652947654568284891288314260769004224219022671055626321"
    "1111093705442175069416589604080719840385096245544436298123098787992724"
    "4284909188845801561660979191338754992005240636899125607176060588611646"
    "7109405077541002256983155200055935729725716362695618826704282524836008"
    "23257530420752963450"
)

GRID = (
    (8, 2, 22, 97, 38, 15, 0, 40, 0, 75, 4, 5, 7, 78, 52, 12, 50, 77, 91, 8),
    (49, 49, 99, 40, 17, 81, 18, 57, 60, 87, 17, 40, 98, 43, 69, 48, 4, 56, 62, 0),
    (81, 49, 31, 73, 55, 79, 14, 29, 93, 71, 40, 67, 53, 88, 30, 3, 49, 13, 36, 65),
    (52, 70, 95, 23, 4, 60, 11, 42, 69, 24, 68, 56, 1, 32, 56, 71, 37, 2, 36, 91),
    (22, 31, 16, 71, 51, 67, 63, 89, 41, 92, 36, 54, 22, 40, 40, 28, 66, 33, 13, 80),
    (24, 47, 32, 60, 99, 3, 45, 2, 44, 75, 33, 53, 78, 36, 84, 20, 35, 17, 12, 50),
    (32, 98, 81, 28, 64, 23, 67, 10, 26, 38, 40, 67, 59, 54, 70, 66, 18, 38, 64, 70),
    (67, 26, 20, 68, 2, 62, 12, 20, 95, 63, 94, 39, 63, 8, 40, 91, 66, 49, 94, 21),
    (24, 55, 58, 5, 66, 73, 99, 26, 97, 17, 78, 78, 96, 83, 14, 88, 34, 89, 63, 72),
    (21, 36, 23, 9, 75, 0, 76, 44, 20, 45, 35, 14, 0, 61, 33, 97, 34, 31, 33, 95),
    (78, 17, 53, 28, 22, 75, 31, 67, 15, 94, 3, 80, 4, 62, 16, 14, 9, 53, 56, 92),
    (16, 39, 5, 42, 96, 35, 31, 47, 55, 58, 88, 24, 0, 17, 54, 24, 36, 29, 85, 57),
    (86, 56, 0, 48, 35, 71, 89, 7, 5, 44, 44, 37, 44, 60, 21, 58, 51, 54, 17, 58),
    (19, 80, 81, 68, 5, 94, 47, 69, 28, 73, 92, 13, 86, 52, 17, 77, 4, 89, 55, 40),
    (4, 52, 8, 83, 97, 35, 99, 16, 7, 97, 57, 32, 16, 26, 26, 79, 33, 27, 98, 66),
    (88, 36, 68, 87, 57, 62, 20, 72, 3, 46, 33, 67, 46, 55, 12, 32, 63, 93, 53, 69),
    (4, 42, 16, 73, 38, 25, 39, 11, 24, 94, 72, 18, 8, 46, 29, 32, 40, 62, 76, 36),
    (20, 69, 36, 41, 72, 30, 23, 88, 34, 62, 99, 69, 82, 67, 59, 85, 74, 4, 36, 16),
    (20, 73, 35, 29, 78, 31, 90, 1, 74, 31, 49, 71, 48, 86, 81, 16, 23, 57, 5, 54),
    (1, 70, 54, 71, 83, 51, 54, 69, 16, 92, 33, 48, 61, 43, 52, 1, 89, 19, 67, 48),
)


def solve_1(limit: int = 1000) -> int:
    """Sum of the multiples of 3 or 5 below limit."""
    return sum(i for i in range(3, limit) if i % 3 == 0 or i % 5 == 0)


def solve_2(limit: int = 4_000_000) -> int:
    """Sum of the even Fibonacci numbers below limit."""
    total = 0
    for index in itertools.count():
        value = fib(index)
        if value >= limit:
            return total
        if value % 2 == 0:
            total += value
    raise AssertionError("unreachable")


def solve_3(number: int = 600_851_475_143) -> int:
    """Largest prime factor of number."""
    if number < 2:
        raise ValueError(f"number must be at least 2, got {number}")
    factors: set[int] = set()
    remaining = number
    while remaining % 2 == 0:
        factors.add(2)
        remaining //= 2
    factor = 3
    while factor * factor <= remaining:
        while remaining % factor == 0:
            factors.add(factor)
            remaining //= factor
        factor += 2
    if remaining > 2:
        factors.add(remaining)
    return max(factors)


def solve_4() -> int:
    """Largest palindrome made from the product of two three-digit numbers."""
    best = 0
    for i in range(1000, 100, -1):
        for j in range(1000, 100, -1):
            product = i * j
            if product <= best:
                break
            if is_palindrome(product, 10):
                best = product
    return best


def solve_5() -> int:
    """Smallest positive number evenly divisible by all of 1 to 20."""
    for candidate in itertools.count(20, 20):
        if all(candidate % d == 0 for d in range(11, 20)):
            return candidate
    raise AssertionError("unreachable")


def solve_6(n: int = 100) -> int:
    """Square of the sum minus sum of the squares of 1..n."""
    numbers = range(1, n + 1)
    return sum(numbers) ** 2 - sum(i * i for i in numbers)


def solve_7(count: int = 10_001) -> int:
    """The count-th prime number."""
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    primes = (n for n in itertools.count(2) if is_prime(n))
    return next(itertools.islice(primes, count - 1, None))


def largest_digit_product(digits: str, span: int) -> int:
    """Greatest product of span adjacent digits in the string."""
    if span < 1 or span > len(digits):
        raise ValueError(f"span must be between 1 and {len(digits)}, got {span}")
    values = [int(ch) for ch in digits]
    return max(
        math.prod(values[start : start + span])
        for start in range(len(values) - span + 1)
    )


def solve_8() -> int:
    """Greatest product of thirteen adjacent digits of the thousand-digit number."""
    return largest_digit_product(DIGITS, 13)


def solve_9(total: int = 1000) -> int:
    """Product abc of the Pythagorean triplet with a + b + c == total."""
    for a in range(1, total + 1):
        for b in range(a, total + 1):
            c = total - a - b
            if c < a:
                break
            if c * c - b * b == a * a:
                return a * b * c
    raise ValueError(f"no Pythagorean triplet sums to {total}")


def solve_10(limit: int = 2_000_000) -> int:
    """Sum of the primes below limit."""
    return sum(primes_up_to(limit - 1))


def max_grid_product(grid: Sequence[Sequence[int]], run: int = 4) -> int:
    """Greatest product of run adjacent cells in a line, column or diagonal.

    Starting cells cover the top-left block of the grid from which a full run
    fits; cells falling outside the grid count as zero.
    """
    if run < 1:
        raise ValueError(f"run must be positive, got {run}")

    def value(y: int, x: int) -> int:
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
            return grid[y][x]
        return 0

    height = len(grid)
    width = len(grid[0]) if grid else 0
    best = 0
    for y in range(height - run + 1):
        for x in range(width - run + 1):
            steps = range(run)
            best = max(
                best,
                math.prod(value(y, x + i) for i in steps),
                math.prod(value(y + i, x) for i in steps),
                math.prod(value(y + i, x + i) for i in steps),
                math.prod(value(y + i, x - i) for i in steps),
            )
    return best


def solve_11() -> int:
    """Greatest product of four adjacent numbers in the 20x20 grid."""
    return max_grid_product(GRID, 4)


def triangular(n: int) -> int:
    """The n-th triangular number."""
    return n * (n + 1) // 2


def divisor_count(n: int) -> int:
    """Number of divisors of n, from its prime factorisation."""
    if n == 1:
        return 1
    remaining = n
    count = 1
    factor = 2
    while factor * factor <= remaining:
        exponent = 0
        while remaining % factor == 0:
            remaining //= factor
            exponent += 1
        count *= exponent + 1
        factor += 1
    if remaining == n or remaining > 1:
        count *= 2
    return count


def solve_12(min_divisors: int = 500) -> int:
    """First triangular number with at least min_divisors divisors."""
    for n in itertools.count():
        tri = triangular(n)
        if divisor_count(tri) >= min_divisors:
            return tri
    raise AssertionError("unreachable")