import json
import math
from pathlib import Path

import pytest

from optimethods.errors import BalanceError, InputError
from optimethods.schemas import TransportationProblem
from optimethods.transport.northwest import (
    north_west_corner,
    parse_transportation_input,
    solve_transportation,
)
from scripts.generate_instances import generate_transportation


def test_two_by_two_allocation():
    case = json.loads(Path(__file__).parent.parent.joinpath("examples", "transportation.json").read_text())
    allocation = solve_transportation(case["costs"], case["supply"], case["demand"])

    assert allocation.allocation == [[10.0, 10.0], [0.0, 30.0]]
    assert allocation.total_cost == pytest.approx(190.0)
    assert allocation.as_result() == case["expected"]


def test_unbalanced_totals_are_reported():
    with pytest.raises(BalanceError) as excinfo:
        solve_transportation([[1, 2], [3, 4]], [10, 10], [5, 5])

    assert excinfo.value.total_supply == 20
    assert excinfo.value.total_demand == 10
    assert "20" in str(excinfo.value) and "10" in str(excinfo.value)


@pytest.mark.parametrize(
    "supply, demand, message",
    [
        ([1234567], [1234560, 8], "Supply (1234567) and demand (1234568) must be equal"),
        ([1.5], [0.25, 0.5], "Supply (1.5) and demand (0.75) must be equal"),
    ],
)
def test_unbalanced_totals_keep_full_precision(supply, demand, message):
    costs = [[1] * len(demand)]
    with pytest.raises(BalanceError) as excinfo:
        solve_transportation(costs, supply, demand)

    assert str(excinfo.value) == message
    assert excinfo.value.total_supply == sum(supply)
    assert excinfo.value.total_demand == sum(demand)


def test_text_cells_are_parsed():
    allocation = solve_transportation(
        [["4", " 6 "], ["8", "3"]],
        ["20", "30"],
        ["10", "40"],
    )
    assert allocation.total_cost == pytest.approx(190.0)


def test_balance_is_checked_before_blank_cells():
    with pytest.raises(BalanceError):
        parse_transportation_input([["1", "2"], ["3", "4"]], ["20", ""], ["5", "5"])

    with pytest.raises(InputError):
        parse_transportation_input([["1", ""], ["3", "4"]], ["5", "5"], ["5", "5"])
    with pytest.raises(InputError):
        parse_transportation_input([["1", "2"], ["3", "4"]], ["10", ""], ["5", "5"])


@pytest.mark.parametrize(
    "costs, supply, demand",
    [
        ([["1", "x"], ["3", "4"]], ["5", "5"], ["5", "5"]),
        ([["1", "2"], ["3", "4"]], ["-5", "15"], ["5", "5"]),
        ([["1", "2"]], ["5", "5"], ["5", "5"]),
        ([[1] * 11], [11], [1] * 11),
        ([], [], []),
    ],
)
def test_invalid_grids(costs, supply, demand):
    with pytest.raises(InputError):
        parse_transportation_input(costs, supply, demand)


def test_simultaneous_exhaustion_moves_diagonally():
    problem = TransportationProblem(costs=[[1, 2], [3, 4]], supply=[10, 10], demand=[10, 10])
    allocation = north_west_corner(problem)

    assert allocation.allocation == [[10.0, 0.0], [0.0, 10.0]]
    assert allocation.total_cost == pytest.approx(50.0)


def test_north_west_corner_checks_balance():
    problem = TransportationProblem(costs=[[1, 2]], supply=[5], demand=[1, 1])
    with pytest.raises(BalanceError):
        north_west_corner(problem)


@pytest.mark.parametrize("seed", range(10))
def test_allocation_conserves_supply_and_demand(seed):
    case = generate_transportation(2 + seed % 4, 1 + seed % 5, seed)
    allocation = solve_transportation(case["costs"], case["supply"], case["demand"])

    for row, supply in zip(allocation.allocation, case["supply"]):
        assert math.isclose(sum(row), supply)
        assert all(cell >= 0 for cell in row)
    for j, demand in enumerate(case["demand"]):
        assert math.isclose(sum(row[j] for row in allocation.allocation), demand)

    expected_cost = sum(
        quantity * cost
        for qty_row, cost_row in zip(allocation.allocation, case["costs"])
        for quantity, cost in zip(qty_row, cost_row)
    )
    assert allocation.total_cost == pytest.approx(expected_cost)
