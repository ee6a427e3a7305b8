import math

import pytest

from eulerkit import numtheory as nt


@pytest.mark.parametrize("n", range(2, 30))
def test_fib_recurrence(n):
    assert nt.fib(n) == nt.fib(n - 1) + nt.fib(n - 2)


def test_fib_small_values_pass_through():
    assert nt.fib(0) == 0
    assert nt.fib(1) == 1
    assert nt.fib(-3) == -3


def test_fib_neighbours_are_coprime():
    for n in range(1, 40):
        assert math.gcd(nt.fib(n), nt.fib(n + 1)) == 1


def test_is_palindrome_decimal():
    for k in (1, 12, 907, 12345):
        s = str(k)
        assert nt.is_palindrome(int(s + s[::-1]), 10)
        assert nt.is_palindrome(int(s + s[-2::-1]), 10)
    assert not nt.is_palindrome(10, 10)
    assert not nt.is_palindrome(123, 10)


def test_is_palindrome_binary_matches_bit_string():
    for n in range(1, 300):
        bits = format(n, "b")
        assert nt.is_palindrome(n, 2) == (bits == bits[::-1])


def test_is_palindrome_zero_and_negative():
    assert nt.is_palindrome(0, 10)
    assert not nt.is_palindrome(-5, 10)


def test_is_palindrome_rejects_bad_base():
    with pytest.raises(ValueError):
        nt.is_palindrome(5, 1)


def test_is_prime_agrees_with_sieve():
    primes = set(nt.primes_up_to(2000))
    for n in range(2, 2001):
        assert nt.is_prime(n) == (n in primes)


def test_is_prime_treats_values_below_two_as_prime():
    assert nt.is_prime(0)
    assert nt.is_prime(1)


def test_primes_up_to_small_limits():
    assert nt.primes_up_to(0) == []
    assert nt.primes_up_to(1) == []
    assert nt.primes_up_to(2) == [2]


def test_primes_up_to_are_prime_and_sorted():
    primes = nt.primes_up_to(1000)
    assert primes == sorted(set(primes))
    for p in primes:
        assert all(p % q for q in primes if q * q <= p)
    assert primes[-1] <= 1000


def test_prime_sieve_matches_prime_list():
    flags = nt.prime_sieve(500, False)
    assert len(flags) == 500
    assert [i for i, flag in enumerate(flags) if flag] == nt.primes_up_to(499)


def test_prime_sieve_reverse_is_complement():
    flags = nt.prime_sieve(500, False)
    reverse = nt.prime_sieve(500, True)
    assert reverse == [not flag for flag in flags]


def test_prime_sieve_rejects_small_limit():
    with pytest.raises(ValueError):
        nt.prime_sieve(1, False)


def test_all_equal():
    assert nt.all_equal([])
    assert nt.all_equal([3, 3, 3])
    assert nt.all_equal(iter(["ab", "ab"]))
    assert not nt.all_equal([1, 2])
    assert not nt.all_equal([4, 4, 5])


def test_find_in():
    items = [5, 7, 9, 7]
    assert nt.find_in(items, 7) == 1
    assert nt.find_in(items, 5) == 0
    assert nt.find_in(items, 8) is None


def test_sum_of_digits_powers_of_ten_and_sign():
    for k in range(0, 30):
        assert nt.sum_of_digits(10**k) == 1
    for n in (7, 48, 12345):
        assert nt.sum_of_digits(-n) == -nt.sum_of_digits(n)
    assert nt.sum_of_digits(0) == 0


def test_sum_of_digits_concatenation_adds():
    assert nt.sum_of_digits(int("123" + "456")) == nt.sum_of_digits(123) + nt.sum_of_digits(456)


def test_digit_count():
    for k in range(0, 40):
        assert nt.digit_count(10**k) == k + 1
        assert nt.digit_count(-(10**k)) == k + 1
    assert nt.digit_count(0) == 0


def test_gcd_divides_both_and_edges():
    for u in range(1, 60):
        for v in range(1, 60):
            g = nt.gcd(u, v)
            assert u % g == 0 and v % g == 0
            assert nt.gcd(u // g, v // g) == 1
    assert nt.gcd(0, 17) == 17
    assert nt.gcd(17, 0) == 17


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        nt.gcd(-4, 6)


def test_phi_of_primes():
    primes = nt.primes_up_to(100)
    for p in nt.primes_up_to(1000):
        assert nt.phi(p, primes) == p - 1


def test_phi_divisor_sum_identity():
    primes = nt.primes_up_to(100)
    for n in range(1, 300):
        total = sum(nt.phi(d, primes) for d in range(1, n + 1) if n % d == 0)
        assert total == n


def test_phi_is_multiplicative():
    primes = nt.primes_up_to(100)
    for m, n in ((4, 9), (7, 10), (15, 16)):
        assert nt.phi(m * n, primes) == nt.phi(m, primes) * nt.phi(n, primes)


def test_phi_raises_when_primes_run_out():
    with pytest.raises(ValueError):
        nt.phi(10007, [2, 3])
    assert nt.phi(7, [2, 3]) == 7 - 1