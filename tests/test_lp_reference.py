import pytest

from optimethods.lp.graphical import graphical_solve
from optimethods.lp.parser import parse_problem
from optimethods.lp.reference import solve_reference
from optimethods.lp.simplex import simplex_solve
from scripts.generate_instances import generate_random_lp


def test_reference_matches_resource_allocation():
    problem = parse_problem("Maximize Z = 3x + 2y", ["2x + y <= 10", "x + 2y <= 8"])
    reference = solve_reference(problem)

    assert reference.status == "optimal"
    assert reference.objective_value == pytest.approx(16.0, rel=1e-6)
    assert reference.x is not None
    assert reference.x["x"] == pytest.approx(4.0, rel=1e-6)
    assert reference.x["y"] == pytest.approx(2.0, rel=1e-6)


def test_reference_reports_unbounded_without_values():
    problem = parse_problem("Maximize Z = x", ["y <= 5"])
    reference = solve_reference(problem)

    assert reference.status == "unbounded"
    assert reference.objective_value is None
    assert reference.x is None


@pytest.mark.parametrize("seed", range(8))
def test_tableau_solvers_agree_with_reference(seed):
    case = generate_random_lp(3, seed)
    problem = parse_problem(case["objective"], case["constraints"])

    reference = solve_reference(problem)
    simplex = simplex_solve(problem)
    graphical = graphical_solve(problem)

    assert reference.status == "optimal"
    assert simplex.objective_value == pytest.approx(reference.objective_value, rel=1e-6, abs=1e-6)
    assert graphical.optimal.value == pytest.approx(reference.objective_value, rel=1e-6, abs=1e-6)
