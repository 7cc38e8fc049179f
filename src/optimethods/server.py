from __future__ import annotations

import logging
import os
from typing import List

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from .errors import OptimizationError
from .lp.graphical import graphical_solve
from .lp.parser import parse_problem
from .lp.reference import solve_reference
from .lp.simplex import simplex_solve
from .schemas import SolveOptions
from .transport.northwest import Cell, solve_transportation as allocate_north_west

logger = logging.getLogger(__name__)

app = FastMCP("Optimization Methods")

# HiGHS status -> error kind raised by the tableau simplex for the same outcome
_FAILURE_KINDS = {
    "unbounded": "UnboundedError",
    "iteration_limit": "NonConvergenceError",
}


def _error(exc: OptimizationError) -> dict:
    logger.info("%s: %s", type(exc).__name__, exc)
    return {"error": str(exc), "kind": type(exc).__name__}


@app.tool()
def parse_linear_program(objective: str, constraints: List[str], strict: bool = False) -> dict:
    """Parse a 'Maximize Z = ...' objective and '<=' constraints into structured JSON."""
    try:
        problem = parse_problem(objective, constraints, strict=strict)
    except OptimizationError as exc:
        return _error(exc)
    return problem.model_dump()


@app.tool()
def solve_simplex(
    objective: str,
    constraints: List[str],
    options: SolveOptions | None = None,
) -> dict:
    """
    Solve a two-variable LP with the tableau simplex method.

    Returns ``{x, y, z, slack, steps}`` where ``steps`` holds every tableau from
    the initial one to the optimum, or ``{error, kind}`` on failure.
    """
    opts = options or SolveOptions()
    try:
        problem = parse_problem(objective, constraints, strict=opts.strict)
        solution = simplex_solve(problem, opts)
    except OptimizationError as exc:
        return _error(exc)

    result = solution.as_result()
    result["steps"] = [step.model_dump() for step in solution.steps]
    return result


@app.tool()
def solve_graphical(
    objective: str,
    constraints: List[str],
    options: SolveOptions | None = None,
) -> dict:
    """Enumerate the feasible corner points of a two-variable LP and pick the optimum."""
    opts = options or SolveOptions()
    try:
        problem = parse_problem(objective, constraints, strict=opts.strict)
        solution = graphical_solve(problem, opts)
    except OptimizationError as exc:
        return _error(exc)

    result = solution.as_result()
    result["objective"] = {
        "sense": solution.objective.sense,
        "coefficients": dict(solution.objective.expression.coefficients),
        "slope": solution.objective_slope,
    }
    return result


@app.tool()
def solve_transportation(
    costs: List[List[Cell]],
    supply: List[Cell],
    demand: List[Cell],
) -> dict:
    """North-West Corner initial allocation: ``{allocation, totalCost}`` or ``{error}``."""
    try:
        allocation = allocate_north_west(costs, supply, demand)
    except OptimizationError as exc:
        return _error(exc)
    return allocation.as_result()


@app.tool()
def cross_check_lp(objective: str, constraints: List[str]) -> dict:
    """Solve the same LP with both the tableau simplex and HiGHS and report both."""
    try:
        problem = parse_problem(objective, constraints)
    except OptimizationError as exc:
        return _error(exc)

    reference = solve_reference(problem)
    try:
        simplex = simplex_solve(problem).as_result()
    except OptimizationError as exc:
        simplex = _error(exc)

    if reference.status == "optimal":
        agree = "z" in simplex and abs(simplex["z"] - reference.objective_value) <= 1e-6
    else:
        agree = simplex.get("kind") == _FAILURE_KINDS.get(reference.status)
    return {"simplex": simplex, "reference": reference.model_dump(), "agree": agree}


def configure_logging() -> None:
    level = os.environ.get("OPTIMETHODS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


if __name__ == "__main__":
    import sys

    configure_logging()
    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "stdio" or "--stdio" in sys.argv:
        app.run(transport="stdio")
    else:
        port = int(os.environ.get("PORT", "8081"))
        app.settings.host = "0.0.0.0"
        app.settings.port = port
        app.settings.streamable_http_path = "/mcp"
        app.settings.transport_security = TransportSecuritySettings(
            enable_dns_rebinding_protection=False,
            allowed_hosts=["*"],
            allowed_origins=["*"],
        )
        app.run(transport="streamable-http")
