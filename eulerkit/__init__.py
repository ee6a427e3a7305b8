"""Number-theory helpers, problem solvers and a command that prints their answers."""

__version__ = "0.1.0"