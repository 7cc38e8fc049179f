from __future__ import annotations

import logging
import math
import re
from collections import OrderedDict
from typing import List, Sequence, Tuple

from ..errors import InputError, ParseError
from ..schemas import Constraint, LinearExpression, LPProblem, Objective

logger = logging.getLogger(__name__)

DEFAULT_VARIABLES: Tuple[str, ...] = ("x", "y")

_TERM = re.compile(r"([+-]?\s*(?:\d+(?:\.\d*)?|\.\d+)?)\s*\*?\s*([A-Za-z_]\w*)")
_NUMBER = re.compile(r"[+-]?\s*(?:\d+(?:\.\d*)?|\.\d+)")


def indexed_variables(count: int) -> Tuple[str, ...]:
    """Variable names ``x1 .. xN`` used by the multi-variable pages."""
    if count < 1:
        raise InputError("At least one decision variable is required")
    return tuple(f"x{idx}" for idx in range(1, count + 1))


def parse_objective(
    text: str,
    variables: Sequence[str] = DEFAULT_VARIABLES,
    strict: bool = False,
) -> Objective:
    """
    Parse ``"Maximize Z = 3x + 2y"`` style text.

    The direction is found by a case-insensitive search for ``maximize`` /
    ``minimize``; anything else falls back to minimisation unless ``strict``.
    """

    if not text or not text.strip():
        raise InputError("Please enter an objective function")

    lowered = text.lower()
    if "maximize" in lowered:
        sense = "max"
    elif "minimize" in lowered:
        sense = "min"
    elif strict:
        raise ParseError(f"Objective '{text}' must say 'Maximize' or 'Minimize'")
    else:
        sense = "min"

    _, sep, function_part = text.partition("=")
    if not sep:
        raise ParseError(f"Objective '{text}' is missing '='")
    if not function_part.strip():
        raise ParseError(f"Objective '{text}' has no terms after '='")

    expression = _parse_expression(function_part, variables, strict)
    return Objective(sense=sense, expression=expression)


def parse_constraint(
    text: str,
    index: int,
    variables: Sequence[str] = DEFAULT_VARIABLES,
    strict: bool = False,
) -> Constraint:
    """Parse ``"2x + y <= 10"``; ``index`` is 1-based and names the slack ``s<index>``."""

    if not text or not text.strip():
        raise InputError("Please fill in all constraints")

    left, sep, right = text.partition("<=")
    if not sep:
        raise ParseError(f"Constraint '{text}' is missing '<='")
    if not left.strip():
        raise ParseError(f"Constraint '{text}' has no left-hand side")
    try:
        rhs = float(right.strip())
    except ValueError as exc:
        raise ParseError(f"Right-hand side '{right.strip()}' is not numeric") from exc
    if not math.isfinite(rhs):
        raise ParseError(f"Right-hand side '{right.strip()}' is not a finite number")

    expression = _parse_expression(left, variables, strict)
    if rhs < 0:
        logger.warning("Constraint '%s' has a negative right-hand side (%g)", text, rhs)

    return Constraint(
        name=f"c{index}",
        lhs=expression,
        cmp="<=",
        rhs=rhs,
        slack=f"s{index}",
        slack_coef=1.0,
    )


def parse_problem(
    objective: str,
    constraints: Sequence[str],
    variables: Sequence[str] = DEFAULT_VARIABLES,
    strict: bool = False,
) -> LPProblem:
    parsed_objective = parse_objective(objective, variables, strict)
    if not constraints:
        raise InputError("At least one constraint is required")
    parsed: List[Constraint] = [
        parse_constraint(text, idx, variables, strict)
        for idx, text in enumerate(constraints, start=1)
    ]
    return LPProblem(
        name="parsed",
        variables=list(variables),
        objective=parsed_objective,
        constraints=parsed,
    )


def _parse_expression(text: str, variables: Sequence[str], strict: bool) -> LinearExpression:
    coeffs: OrderedDict[str, float] = OrderedDict((name, 0.0) for name in variables)

    for raw_term in text.split("+"):
        term = raw_term.strip()
        if not term:
            if strict:
                raise ParseError(f"Empty term in '{text.strip()}'")
            continue

        if _NUMBER.fullmatch(term):
            if strict:
                raise ParseError(f"Term '{term}' has no variable")
            logger.debug("Ignoring numeric term '%s'", term)
            continue

        match = _TERM.match(term)
        if match is None or match.group(2) not in coeffs:
            if strict:
                raise ParseError(f"Unrecognised term '{term}'")
            logger.debug("Ignoring unrecognised term '%s'", term)
            continue
        if strict and match.end() != len(term):
            raise ParseError(f"Unexpected text after '{match.group(0)}' in term '{term}'")

        coef_text = match.group(1).replace(" ", "")
        if coef_text in ("", "+"):
            coef = 1.0
        elif coef_text == "-":
            coef = -1.0
        else:
            coef = float(coef_text)
        coeffs[match.group(2)] += coef
        if not math.isfinite(coeffs[match.group(2)]):
            raise ParseError(f"Coefficient of '{match.group(2)}' in '{text.strip()}' is not a finite number")

    return LinearExpression(coefficients=dict(coeffs))
