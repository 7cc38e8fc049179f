from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
from scipy.optimize import linprog

from ..schemas import LPProblem, ReferenceSolution


def solve_reference(problem: LPProblem, max_iters: int = 10_000) -> ReferenceSolution:
    """Solve ``problem`` with SciPy's HiGHS backend to cross-check the tableau solvers."""

    c = _build_objective(problem)
    A_ub, b_ub = _build_constraint_matrices(problem)

    sense_factor = 1.0 if problem.objective.sense == "min" else -1.0
    res = linprog(
        c * sense_factor,
        A_ub=A_ub if A_ub.size else None,
        b_ub=b_ub if b_ub.size else None,
        bounds=[(0.0, None)] * len(problem.variables),
        method="highs",
        options={"maxiter": max_iters},
    )

    if not res.success:
        status = _map_status(res.status)
        if res.status != 1 and np.all(b_ub >= 0):
            # origin is feasible, so HiGHS' "infeasible or unbounded" can only be unbounded
            status = "unbounded"
        return ReferenceSolution(
            status=status,
            objective_value=None,
            x=None,
            iterations=res.nit,
            message=res.message,
        )

    return ReferenceSolution(
        status="optimal",
        objective_value=float(res.fun * sense_factor),
        x={var: float(value) for var, value in zip(problem.variables, res.x)},
        iterations=res.nit,
        message=res.message or "",
    )


def _build_objective(problem: LPProblem) -> np.ndarray:
    expression = problem.objective.expression
    return np.array([expression.coefficient(var) for var in problem.variables], dtype=float)


def _build_constraint_matrices(problem: LPProblem) -> Tuple[np.ndarray, np.ndarray]:
    n = len(problem.variables)
    rows = [[cons.lhs.coefficient(var) for var in problem.variables] for cons in problem.constraints]
    rhs = [cons.rhs for cons in problem.constraints]
    return (
        np.array(rows, dtype=float) if rows else np.empty((0, n)),
        np.array(rhs, dtype=float) if rhs else np.empty(0),
    )


def _map_status(code: int) -> str:
    mapping: Dict[int, str] = {
        0: "optimal",
        1: "iteration_limit",
        2: "infeasible",
        3: "unbounded",
    }
    return mapping.get(code, "iteration_limit")
