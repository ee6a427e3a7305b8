import itertools

import pytest

from eulerkit.problems_081_120 import (
    count_rectangles,
    int_to_roman,
    mod_pow,
    parse_matrix,
    roman_to_int,
    solve_81,
    solve_82,
    solve_85,
    solve_87,
    solve_89,
    solve_91,
    solve_92,
    solve_94,
    solve_97,
    solve_99,
    solve_120,
    square_digit_sum,
)

EXAMPLE = """131,673,234,103,18
201,96,342,965,150
630,803,746,422,111
537,699,497,121,956
805,732,524,37,331
"""


def test_parse_matrix():
    assert parse_matrix("1,2,3\n4,5,6\n\n") == [[1, 2, 3], [4, 5, 6]]


def test_parse_matrix_rejects_garbage():
    with pytest.raises(ValueError):
        parse_matrix("1,x")


def test_solve_81_example():
    assert solve_81(EXAMPLE) == 2427


def test_solve_81_single_row_and_column():
    assert solve_81("1,2,3") == 6
    assert solve_81("4\n5\n6") == 15


def test_solve_81_bounded_by_edge_path():
    rows = parse_matrix(EXAMPLE)
    edge = sum(rows[0]) + sum(row[-1] for row in rows[1:])
    assert solve_81(EXAMPLE) <= edge


def test_solve_82_example():
    assert solve_82(EXAMPLE) == 994


def test_solve_82_single_column_is_minimum():
    assert solve_82("7\n3\n9") == 3


def test_solve_82_bounded_by_straight_rows():
    rows = parse_matrix(EXAMPLE)
    assert solve_82(EXAMPLE) <= min(sum(row) for row in rows)
    assert solve_82(EXAMPLE) <= solve_81(EXAMPLE)


@pytest.mark.parametrize("solver", [solve_81, solve_82])
def test_ragged_matrix_rejected(solver):
    with pytest.raises(ValueError):
        solver("1,2\n3")


@pytest.mark.parametrize("solver", [solve_81, solve_82])
def test_empty_matrix_rejected(solver):
    with pytest.raises(ValueError):
        solver("")


def test_count_rectangles_example():
    assert count_rectangles(3, 2) == 18
    assert count_rectangles(2, 3) == count_rectangles(3, 2)


def test_solve_85_exact_hit():
    assert solve_85(count_rectangles(3, 2)) == 3 * 2


def test_solve_87_example():
    assert solve_87(50) == 4


def test_solve_87_smallest_value():
    assert solve_87(28) == 0
    assert solve_87(29) == 1


def test_solve_87_monotone():
    assert solve_87(1000) >= solve_87(100)


def test_roman_round_trip():
    assert all(roman_to_int(int_to_roman(n)) == n for n in range(1, 4000))


@pytest.mark.parametrize(
    "number, numeral", [(1000, "M"), (900, "CM"), (4, "IV"), (0, "")]
)
def test_int_to_roman_values(number, numeral):
    assert int_to_roman(number) == numeral


def test_roman_to_int_non_minimal():
    assert roman_to_int("IIII") == roman_to_int("IV")


def test_roman_to_int_invalid():
    with pytest.raises(ValueError):
        roman_to_int("IZ")


def test_solve_89_minimal_text_saves_nothing():
    text = " ".join(int_to_roman(n) for n in range(1, 200))
    assert solve_89(text) == 0


def test_solve_89_savings():
    assert solve_89("IIII") == len("IIII") - len("IV")


def _brute_right_triangles(size):
    points = [
        (x, y)
        for x in range(size + 1)
        for y in range(size + 1)
        if (x, y) != (0, 0)
    ]
    count = 0
    for (px, py), (qx, qy) in itertools.combinations(points, 2):
        if px * qy - py * qx == 0:
            continue
        at_o = px * qx + py * qy
        at_p = (-px) * (qx - px) + (-py) * (qy - py)
        at_q = (-qx) * (px - qx) + (-qy) * (py - qy)
        if 0 in (at_o, at_p, at_q):
            count += 1
    return count


def test_solve_91_example():
    assert solve_91(2) == 14


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_solve_91_matches_brute_force(size):
    assert solve_91(size) == _brute_right_triangles(size)


def test_square_digit_sum():
    assert square_digit_sum(85) == 89


def test_square_digit_sum_negative():
    with pytest.raises(ValueError):
        square_digit_sum(-1)


@pytest.mark.parametrize("limit", [1, 10, 100, 1000, 1234])
def test_solve_92_matches_simulation(limit):
    expected = 0
    for start in range(1, limit):
        value = start
        while value not in (1, 89):
            value = square_digit_sum(value)
        expected += value == 89
    assert solve_92(limit) == expected


def test_solve_94_small_limits():
    assert solve_94(15) == 0
    assert solve_94(16) == 16


def test_solve_94_monotone():
    assert solve_94(10**6) >= solve_94(10**3)


@pytest.mark.parametrize(
    "base, exponent, modulus", [(2, 10, 1000), (7, 0, 13), (123, 456, 789)]
)
def test_mod_pow_matches_builtin(base, exponent, modulus):
    assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_pow_rejects_bad_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_solve_97():
    assert solve_97() == 8739992577


def test_solve_99_picks_largest():
    assert solve_99("2,10\n2,11\n2,9") == 2


def test_solve_99_first_of_ties():
    assert solve_99("3,2\n9,1") == 1


def test_solve_99_empty():
    with pytest.raises(ValueError):
        solve_99("")


def test_solve_120_example_term():
    assert solve_120(7) - solve_120(6) == 42


@pytest.mark.parametrize("a", range(3, 21))
def test_solve_120_terms_match_brute_force(a):
    best = max(
        ((a - 1) ** n + (a + 1) ** n) % (a * a) for n in range(1, 2 * a + 1)
    )
    assert solve_120(a) - solve_120(a - 1) == best