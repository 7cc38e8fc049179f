import pytest

from optimethods.errors import InputError, ParseError
from optimethods.lp.parser import (
    indexed_variables,
    parse_constraint,
    parse_objective,
    parse_problem,
)


def test_objective_direction_and_coefficients():
    objective = parse_objective("Maximize Z = 3x + 2y")

    assert objective.sense == "max"
    assert objective.expression.coefficients == {"x": 3.0, "y": 2.0}


def test_direction_is_case_insensitive():
    assert parse_objective("MINIMIZE Z = x + y").sense == "min"
    assert parse_objective("maximize z = x").sense == "max"


def test_missing_direction_falls_back_to_minimize_unless_strict():
    assert parse_objective("Z = 2x + y").sense == "min"
    with pytest.raises(ParseError):
        parse_objective("Z = 2x + y", strict=True)


def test_bare_and_signed_terms():
    objective = parse_objective("Minimize Z = x + -y")
    assert objective.expression.coefficients == {"x": 1.0, "y": -1.0}

    decimals = parse_objective("Maximize Z = 0.08x + 0.05*y")
    assert decimals.expression.coefficient("x") == pytest.approx(0.08)
    assert decimals.expression.coefficient("y") == pytest.approx(0.05)


def test_objective_without_equals_sign():
    with pytest.raises(ParseError):
        parse_objective("Maximize 3x + 2y")


def test_unrecognised_terms_default_to_zero():
    objective = parse_objective("Maximize Z = 3x + 2z")
    assert objective.expression.coefficients == {"x": 3.0, "y": 0.0}

    with pytest.raises(ParseError):
        parse_objective("Maximize Z = 3x + 2z", strict=True)


def test_strict_mode_rejects_subtraction_inside_a_term():
    lenient = parse_objective("Maximize Z = 3x - y")
    assert lenient.expression.coefficients == {"x": 3.0, "y": 0.0}

    with pytest.raises(ParseError):
        parse_objective("Maximize Z = 3x - y", strict=True)


def test_empty_inputs_are_input_errors():
    with pytest.raises(InputError):
        parse_objective("   ")
    with pytest.raises(InputError):
        parse_constraint("", 1)
    with pytest.raises(InputError):
        parse_problem("Maximize Z = x", [])


def test_constraint_parsing_assigns_slack_by_position():
    problem = parse_problem("Maximize Z = 3x + 2y", ["2x + y <= 10", "x + 2y <= 8"])

    first, second = problem.constraints
    assert first.lhs.coefficients == {"x": 2.0, "y": 1.0}
    assert first.rhs == 10.0
    assert first.cmp == "<="
    assert (first.slack, second.slack) == ("s1", "s2")
    assert first.slack_coef == 1.0
    assert problem.slack_names() == ["s1", "s2"]


def test_constraint_requires_less_or_equal():
    with pytest.raises(ParseError):
        parse_constraint("10x + 5y >= 50", 1)
    with pytest.raises(ParseError):
        parse_constraint("x + y <= lots", 1)


def test_numeric_terms_without_a_variable_are_ignored():
    constraint = parse_constraint("x + y + 2 <= 10", 1)
    assert constraint.rhs == 10.0
    assert constraint.lhs.coefficients == {"x": 1.0, "y": 1.0}

    objective = parse_objective("Maximize Z = 3x + 2y + 10")
    assert objective.expression.coefficients == {"x": 3.0, "y": 2.0}

    with pytest.raises(ParseError):
        parse_constraint("x + y + 2 <= 10", 1, strict=True)


def test_non_finite_coefficients_are_rejected():
    huge = "1" + "0" * 400
    with pytest.raises(ParseError):
        parse_objective(f"Maximize Z = {huge}x + y")
    with pytest.raises(ParseError):
        parse_constraint(f"{huge}x + y <= 5", 1)


def test_indexed_variable_names():
    variables = indexed_variables(2)
    assert variables == ("x1", "x2")

    objective = parse_objective("Maximize Z = 3x1 + 2x2", variables)
    assert objective.expression.coefficients == {"x1": 3.0, "x2": 2.0}

    with pytest.raises(InputError):
        indexed_variables(0)
