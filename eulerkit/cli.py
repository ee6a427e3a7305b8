"""Command-line entry point that prints the answer to a chosen problem."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from fractions import Fraction
from pathlib import Path
from typing import Any

from eulerkit import problems_001_012 as _a
from eulerkit import problems_013_035 as _b
from eulerkit import problems_036_055 as _c
from eulerkit import problems_056_079 as _d
from eulerkit import problems_081_120 as _e

DEFAULT_DATA = Path("Data.txt")

_SOLVERS: dict[int, Callable[..., Any]] = {
    1: _a.solve_1, 2: _a.solve_2, 3: _a.solve_3, 4: _a.solve_4,
    5: _a.solve_5, 6: _a.solve_6, 7: _a.solve_7, 8: _a.solve_8,
    9: _a.solve_9, 10: _a.solve_10, 11: _a.solve_11, 12: _a.solve_12,
    13: _b.solve_13, 14: _b.solve_14, 15: _b.solve_15, 16: _b.solve_16,
    17: _b.solve_17, 18: _b.solve_18, 19: _b.solve_19, 20: _b.solve_20,
    21: _b.solve_21, 22: _b.solve_22, 23: _b.solve_23, 24: _b.solve_24,
    25: _b.solve_25, 26: _b.solve_26, 27: _b.solve_27, 28: _b.solve_28,
    29: _b.solve_29, 30: _b.solve_30, 31: _b.solve_31, 32: _b.solve_32,
    33: _b.solve_33, 34: _b.solve_34, 35: _b.solve_35,
    36: _c.solve_36, 37: _c.solve_37, 38: _c.solve_38, 39: _c.solve_39,
    40: _c.solve_40, 41: _c.solve_41, 42: _c.solve_42, 43: _c.solve_43,
    44: _c.solve_44, 45: _c.solve_45, 46: _c.solve_46, 47: _c.solve_47,
    48: _c.solve_48, 49: _c.solve_49, 50: _c.solve_50, 52: _c.solve_52,
    53: _c.solve_53, 55: _c.solve_55,
    56: _d.solve_56, 57: _d.solve_57, 58: _d.solve_58, 59: _d.solve_59,
    62: _d.solve_62, 63: _d.solve_63, 65: _d.solve_65, 67: _d.solve_67,
    68: _d.solve_68, 69: _d.solve_69, 70: _d.solve_70, 71: _d.solve_71,
    72: _d.solve_72, 73: _d.solve_73, 74: _d.solve_74, 76: _d.solve_76,
    77: _d.solve_77, 78: _d.solve_78, 79: _d.solve_79,
    81: _e.solve_81, 82: _e.solve_82, 85: _e.solve_85, 87: _e.solve_87,
    89: _e.solve_89, 91: _e.solve_91, 92: _e.solve_92, 94: _e.solve_94,
    97: _e.solve_97, 99: _e.solve_99, 120: _e.solve_120,
}

_NEEDS_DATA = frozenset({13, 18, 22, 42, 59, 67, 79, 81, 82, 89, 99})


def solve_problem(number: int, data_path: str | os.PathLike[str] | None = None) -> Any:
    """Answer to the given problem, reading its data file where it needs one.

    Raises ValueError for a problem without a solution and OSError when the
    data file cannot be read.
    """
    try:
        solver = _SOLVERS[number]
    except KeyError:
        raise ValueError(f"no solution for problem {number}") from None
    if number in _NEEDS_DATA:
        path = Path(data_path) if data_path is not None else DEFAULT_DATA
        return solver(path.read_text(encoding="utf-8"))
    return solver()


def _format(result: Any) -> str:
    if isinstance(result, Fraction):
        return f"{result.numerator} / {result.denominator}"
    if isinstance(result, list):
        return "\n".join(str(item) for item in result)
    return str(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the answer to the problem named on the command line."""
    parser = argparse.ArgumentParser(
        prog="eulerkit", description="Print the answer to a numbered problem."
    )
    parser.add_argument("problem", type=int, help="problem number")
    parser.add_argument(
        "--data", default=None, help=f"data file for problems that need one (default {DEFAULT_DATA})"
    )
    args = parser.parse_args(argv)
    try:
        result = solve_problem(args.problem, args.data)
    except (ValueError, OSError) as exc:
        print(f"eulerkit: {exc}", file=sys.stderr)
        return 1
    print(_format(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())