"""Transportation problems: initial feasible allocation by the North-West Corner rule."""

from .northwest import north_west_corner, parse_transportation_input, solve_transportation

__all__ = ["north_west_corner", "parse_transportation_input", "solve_transportation"]
