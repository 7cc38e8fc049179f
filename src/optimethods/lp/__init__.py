"""Two-variable linear programming: text parser, tableau simplex and graphical method."""

from .parser import indexed_variables, parse_constraint, parse_objective, parse_problem
from .simplex import simplex_solve
from .graphical import graphical_solve
from .reference import solve_reference

__all__ = [
    "indexed_variables",
    "parse_constraint",
    "parse_objective",
    "parse_problem",
    "simplex_solve",
    "graphical_solve",
    "solve_reference",
]
