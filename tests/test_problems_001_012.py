import pytest

from eulerkit import numtheory as nt
from eulerkit import problems_001_012 as p


@pytest.mark.parametrize("k", range(1, 60))
def test_solve_1_steps_add_multiples(k):
    step = p.solve_1(k + 1) - p.solve_1(k)
    assert step == (k if k % 3 == 0 or k % 5 == 0 else 0)


def test_solve_2_even_and_steps():
    assert p.solve_2(4_000_000) % 2 == 0
    assert p.solve_2(9) == p.solve_2(8) + 8
    assert p.solve_2(3) == p.solve_2(2) + 2
    assert p.solve_2(8) == p.solve_2(5)


@pytest.mark.parametrize(
    "number, expected",
    [(97, 97), (2**5, 2), (97 * 89, 97), (3 * 3 * 89, 89)],
)
def test_solve_3_small_numbers(number, expected):
    assert p.solve_3(number) == expected


def test_solve_3_default_is_largest_prime_factor():
    number = 600_851_475_143
    result = p.solve_3(number)
    assert number % result == 0
    assert nt.is_prime(result)
    quotient = number // result
    assert quotient == 1 or p.solve_3(quotient) <= result


def test_solve_3_rejects_small_number():
    with pytest.raises(ValueError):
        p.solve_3(1)


def test_solve_4():
    result = p.solve_4()
    assert result == 906609
    assert nt.is_palindrome(result, 10)
    assert any(result % i == 0 and 100 < result // i <= 1000 for i in range(101, 1001))


def test_solve_5_divisible_and_minimal():
    result = p.solve_5()
    assert all(result % k == 0 for k in range(1, 21))
    for prime in nt.primes_up_to(20):
        smaller = result // prime
        assert not all(smaller % k == 0 for k in range(1, 21))


def test_solve_6():
    assert p.solve_6(10) == 2640
    assert p.solve_6(100) > p.solve_6(10)


def test_solve_7_matches_prime_list():
    primes = nt.primes_up_to(600)
    for k in range(1, 100):
        assert p.solve_7(k) == primes[k - 1]


def test_solve_7_rejects_zero():
    with pytest.raises(ValueError):
        p.solve_7(0)


def test_largest_digit_product_single_digit_is_max_digit():
    assert p.largest_digit_product("3141592", 1) == 9


def test_largest_digit_product_zero_window():
    assert p.largest_digit_product("05", 2) == 0


def test_largest_digit_product_grows_with_wider_ones():
    digits = "1111" + "7" + "1111"
    for span in range(1, 6):
        assert p.largest_digit_product(digits, span) == 7


def test_largest_digit_product_rejects_long_span():
    with pytest.raises(ValueError):
        p.largest_digit_product("123", 4)


def test_solve_8_bounds():
    result = p.solve_8()
    assert result == p.largest_digit_product(p.DIGITS, 13)
    assert 0 < result <= 9**13
    assert result >= p.largest_digit_product(p.DIGITS, 14) // 9


def test_solve_9_without_triplet():
    with pytest.raises(ValueError):
        p.solve_9(5)


def test_solve_10_matches_prime_sum():
    assert p.solve_10(10) == sum(nt.primes_up_to(9))
    assert p.solve_10(2) == sum(nt.primes_up_to(1))
    assert p.solve_10(1000) == sum(nt.primes_up_to(999))


def test_max_grid_product_uniform_grids():
    ones = [[1] * 6 for _ in range(6)]
    zeros = [[0] * 6 for _ in range(6)]
    threes = [[3] * 3 for _ in range(3)]
    assert p.max_grid_product(ones, 4) == 1
    assert p.max_grid_product(zeros, 4) == 0
    assert p.max_grid_product(threes, 1) == 3


def test_max_grid_product_too_small_grid():
    assert p.max_grid_product([[5, 5], [5, 5]], 3) == 0


def test_max_grid_product_rejects_bad_run():
    with pytest.raises(ValueError):
        p.max_grid_product([[1]], 0)


def test_solve_11_consistency():
    assert p.max_grid_product(p.GRID, 1) == max(max(row) for row in p.GRID)
    assert p.solve_11() == p.max_grid_product(p.GRID, 4)
    assert p.solve_11() >= p.max_grid_product(p.GRID, 3)


@pytest.mark.parametrize("n", range(1, 50))
def test_triangular_steps(n):
    assert p.triangular(n) - p.triangular(n - 1) == n


def test_divisor_count_prime_powers():
    assert p.divisor_count(1) == 1
    for prime in nt.primes_up_to(50):
        assert p.divisor_count(prime) == 2
        for k in range(1, 5):
            assert p.divisor_count(prime**k) == k + 1


def test_divisor_count_multiplicative():
    for m, n in ((4, 9), (8, 15), (7, 10), (12, 35)):
        assert p.divisor_count(m * n) == p.divisor_count(m) * p.divisor_count(n)


def test_solve_12():
    assert p.solve_12(5) == 28
    for k in range(1, 60, 7):
        result = p.solve_12(k)
        assert p.divisor_count(result) >= k
        assert any(p.triangular(n) == result for n in range(0, 2000))