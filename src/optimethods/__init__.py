"""Optimization methods engine: simplex, graphical and transportation solvers."""

from .errors import (
    BalanceError,
    InfeasibleError,
    InputError,
    NonConvergenceError,
    OptimizationError,
    ParseError,
    UnboundedError,
)
from .lp import graphical_solve, parse_problem, simplex_solve
from .transport import north_west_corner, solve_transportation

__all__ = [
    "BalanceError",
    "InfeasibleError",
    "InputError",
    "NonConvergenceError",
    "OptimizationError",
    "ParseError",
    "UnboundedError",
    "graphical_solve",
    "parse_problem",
    "simplex_solve",
    "north_west_corner",
    "solve_transportation",
]
