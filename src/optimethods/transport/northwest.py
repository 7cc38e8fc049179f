from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Union

from ..errors import BalanceError, InputError
from ..schemas import Allocation, TransportationProblem

logger = logging.getLogger(__name__)

Cell = Union[str, float, int, None]

MAX_GRID = 10


def solve_transportation(
    costs: Sequence[Sequence[Cell]],
    supply: Sequence[Cell],
    demand: Sequence[Cell],
) -> Allocation:
    problem = parse_transportation_input(costs, supply, demand)
    return north_west_corner(problem)


def parse_transportation_input(
    costs: Sequence[Sequence[Cell]],
    supply: Sequence[Cell],
    demand: Sequence[Cell],
) -> TransportationProblem:
    """
    Turn form input (numbers or text, possibly blank) into a TransportationProblem.

    Balance is checked before completeness, blank cells counting as zero, so an
    unbalanced grid reports the totals even when some cells are still empty.
    """

    sources, destinations = len(supply), len(demand)
    if not 1 <= sources <= MAX_GRID or not 1 <= destinations <= MAX_GRID:
        raise InputError(f"Sources and destinations must each be between 1 and {MAX_GRID}")
    if len(costs) != sources or any(len(row) != destinations for row in costs):
        raise InputError(f"Cost matrix must be {sources} x {destinations}")

    supply_values = [_to_number(value, f"supply {i + 1}") for i, value in enumerate(supply)]
    demand_values = [_to_number(value, f"demand {j + 1}") for j, value in enumerate(demand)]
    cost_values = [
        [_to_number(value, f"cost ({i + 1}, {j + 1})") for j, value in enumerate(row)]
        for i, row in enumerate(costs)
    ]

    total_supply = sum(value or 0.0 for value in supply_values)
    total_demand = sum(value or 0.0 for value in demand_values)
    if not _balanced(total_supply, total_demand):
        raise BalanceError(total_supply, total_demand)

    if (
        None in supply_values
        or None in demand_values
        or any(None in row for row in cost_values)
    ):
        raise InputError("All fields must be filled")

    return TransportationProblem(costs=cost_values, supply=supply_values, demand=demand_values)


def north_west_corner(problem: TransportationProblem) -> Allocation:
    """
    Initial feasible shipment plan by the North-West Corner rule.

    Fills the top-left remaining cell with as much as it can take, then moves
    down when the source is exhausted and right when the destination is. The plan
    satisfies every supply and demand but is not cost-minimal.
    """

    total_supply = sum(problem.supply)
    total_demand = sum(problem.demand)
    if not _balanced(total_supply, total_demand):
        raise BalanceError(total_supply, total_demand)

    sources, destinations = problem.shape
    supply = list(problem.supply)
    demand = list(problem.demand)
    allocation: List[List[float]] = [[0.0] * destinations for _ in range(sources)]
    total_cost = 0.0

    i = j = 0
    while i < sources and j < destinations:
        quantity = min(supply[i], demand[j])
        allocation[i][j] = quantity
        total_cost += quantity * problem.costs[i][j]
        logger.debug("Ship %g from source %d to destination %d", quantity, i + 1, j + 1)

        supply[i] -= quantity
        demand[j] -= quantity
        if supply[i] == 0:
            i += 1
        if demand[j] == 0:
            j += 1

    return Allocation(allocation=allocation, total_cost=total_cost)


def _to_number(value: Cell, label: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError as exc:
            raise InputError(f"Value '{value}' for {label} is not a number") from exc
    else:
        number = float(value)
    if not math.isfinite(number):
        raise InputError(f"Value for {label} must be finite")
    if number < 0:
        raise InputError(f"Value for {label} must be non-negative")
    return number


def _balanced(total_supply: float, total_demand: float) -> bool:
    return math.isclose(total_supply, total_demand, rel_tol=1e-9, abs_tol=1e-9)
