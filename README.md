# eulerkit

Number-theory helpers plus solvers for a numbered collection of classic
computational mathematics problems: 1–50, 52, 53, 55–59, 62, 63, 65, 67–74,
76–79, 81, 82, 85, 87, 89, 91, 92, 94, 97, 99 and 120.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Print the answer to a problem by number:

```
eulerkit 1
```

Problems 13, 18, 22, 42, 59, 67, 79, 81, 82, 89 and 99 work on an input data
file. By default it is read from `Data.txt` in the current directory; another
file can be given with `--data`:

```
eulerkit 22 --data names.txt
```

Fractional answers (problem 71) are printed as `numerator / denominator`, and
list answers (problem 49) one item per line. An unknown problem number or an
unreadable data file is reported on standard error with exit status 1.

## Library use

The helpers in `eulerkit.numtheory` can be used on their own:

```python
from eulerkit.numtheory import is_prime, primes_up_to, phi, gcd, sum_of_digits

is_prime(97)            # True
primes_up_to(20)        # [2, 3, 5, 7, 11, 13, 17, 19]
gcd(48, 18)             # 6
sum_of_digits(2 ** 15)  # 26
phi(36, primes_up_to(10))  # 12
```

`is_prime` is plain trial division and reports values below 2 as prime;
`prime_sieve(limit, reverse)` returns a list of prime flags indexed by number,
and `phi` raises `ValueError` when the list of primes it is given is too short
to factorise the number. Other helpers: `fib`, `is_palindrome`, `all_equal`,
`find_in` and `digit_count`.

Each problem has a `solve_<n>` function in one of the modules
`problems_001_012`, `problems_013_035`, `problems_036_055`,
`problems_056_079` and `problems_081_120`. Most take the problem's limit as a
parameter, so smaller cases are easy to try:

```python
from eulerkit.problems_001_012 import solve_1, solve_6
from eulerkit.problems_013_035 import solve_17, number_to_words

solve_1(10)           # 23
solve_6(10)           # 2640
number_to_words(342)  # "threehundredandfortytwo"
```

Solvers for problems that read data take the file's text rather than a path:

```python
from eulerkit.problems_013_035 import solve_18

solve_18("3\n7 4\n2 4 6\n8 5 9 3\n")  # 23
```

The command-line lookup is also available from Python as
`eulerkit.cli.solve_problem(number, data_path)`.

## What it does not do

No data files are shipped with the package: for the problems that need one,
the input text has to be supplied by the caller. Only the problem numbers
listed above have solvers; any other number is rejected.