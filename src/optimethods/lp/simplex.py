import logging
from typing import List, Optional

import numpy as np

from ..errors import NonConvergenceError, UnboundedError
from ..schemas import (
    LPProblem,
    SimplexSolution,
    SimplexStep,
    SolveOptions,
    Tableau,
    TableauRow,
)

logger = logging.getLogger(__name__)


def simplex_solve(problem: LPProblem, options: Optional[SolveOptions] = None) -> SimplexSolution:
    """
    Tableau simplex for ``<=`` constraints with slack starting basis.

    Dantzig's rule picks the entering column, the minimum ratio test the leaving
    row; ties go to the lowest index. Every tableau is kept as a step so callers
    can display the full iteration history. No anti-cycling rule is applied,
    the pivot cap is the only guard.

    The direction is honoured: Minimize builds the objective row from ``+c``
    (maximising -Z) and negates the final value. A direction-blind tableau that
    always stores ``-c`` would maximise a Minimize objective instead.
    """

    opts = options or SolveOptions()
    tableau = build_initial_tableau(problem)
    steps: List[SimplexStep] = [SimplexStep(step=1, tableau=tableau)]
    pivots = 0

    while not tableau.is_optimal():
        if pivots >= opts.max_pivots:
            raise NonConvergenceError(pivots)

        pivot_col = find_pivot_column(tableau)
        entering = tableau.variables[pivot_col]
        pivot_row = find_pivot_row(tableau, pivot_col)
        if pivot_row is None:
            raise UnboundedError(entering)

        leaving = tableau.rows[pivot_row].basic
        logger.debug("Pivot %d: %s enters, %s leaves", pivots + 1, entering, leaving)
        tableau = pivot(tableau, pivot_row, pivot_col)
        pivots += 1
        steps.append(
            SimplexStep(step=pivots + 1, tableau=tableau, entering=entering, leaving=leaving)
        )

    return extract_solution(problem, tableau, steps)


def build_initial_tableau(problem: LPProblem) -> Tableau:
    slacks = problem.slack_names()
    variables = tuple(problem.variables) + tuple(slacks) + ("RHS",)

    rows: List[TableauRow] = []
    for idx, cons in enumerate(problem.constraints):
        decision = [cons.lhs.coefficient(var) for var in problem.variables]
        indicators = [cons.slack_coef if k == idx else 0.0 for k in range(len(slacks))]
        rows.append(
            TableauRow(basic=cons.slack, coefficients=tuple(decision + indicators + [cons.rhs]))
        )

    # maximisation stores -c; minimisation maximises -Z and so stores +c
    sign = -1.0 if problem.objective.sense == "max" else 1.0
    costs = [sign * problem.objective.expression.coefficient(var) + 0.0 for var in problem.variables]
    objective_row = tuple(costs + [0.0] * len(slacks) + [0.0])

    return Tableau(variables=variables, rows=tuple(rows), objective_row=objective_row)


def find_pivot_column(tableau: Tableau) -> Optional[int]:
    reduced = np.asarray(tableau.objective_row[:-1], dtype=float)
    col = int(np.argmin(reduced))
    if reduced[col] >= 0:
        return None
    return col


def find_pivot_row(tableau: Tableau, pivot_col: int) -> Optional[int]:
    best_ratio = np.inf
    pivot_row: Optional[int] = None
    for idx, row in enumerate(tableau.rows):
        coef = row.coefficients[pivot_col]
        if coef > 0:
            ratio = row.rhs / coef
            if ratio < best_ratio:
                best_ratio = ratio
                pivot_row = idx
    return pivot_row


def pivot(tableau: Tableau, pivot_row: int, pivot_col: int) -> Tableau:
    """Return the tableau obtained by pivoting on ``(pivot_row, pivot_col)``."""

    body = np.array([row.coefficients for row in tableau.rows], dtype=float)
    objective = np.array(tableau.objective_row, dtype=float)

    body[pivot_row] = body[pivot_row] / body[pivot_row, pivot_col]
    for idx in range(body.shape[0]):
        if idx != pivot_row:
            body[idx] -= body[idx, pivot_col] * body[pivot_row]
    objective -= objective[pivot_col] * body[pivot_row]

    labels = [row.basic for row in tableau.rows]
    labels[pivot_row] = tableau.variables[pivot_col]

    return Tableau(
        variables=tableau.variables,
        rows=tuple(
            TableauRow(basic=label, coefficients=tuple(float(v) for v in values))
            for label, values in zip(labels, body)
        ),
        objective_row=tuple(float(v) for v in objective),
    )


def extract_solution(
    problem: LPProblem, tableau: Tableau, steps: List[SimplexStep]
) -> SimplexSolution:
    values = {var: tableau.value_of(var) for var in problem.variables}
    slack = {name: tableau.value_of(name) for name in problem.slack_names()}

    objective = tableau.rhs if problem.objective.sense == "max" else -tableau.rhs

    return SimplexSolution(
        values=values,
        objective_value=float(objective) + 0.0,
        slack=slack,
        steps=steps,
        iterations=len(steps) - 1,
    )
