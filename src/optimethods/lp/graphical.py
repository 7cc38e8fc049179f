import logging
from typing import List, Optional, Sequence, Tuple

from ..errors import InfeasibleError, InputError
from ..schemas import (
    Constraint,
    GraphicalSolution,
    LPProblem,
    OptimalVertex,
    Point,
    SolveOptions,
)

logger = logging.getLogger(__name__)

# boundary line a*x + b*y = c
Line = Tuple[float, float, float]


def graphical_solve(problem: LPProblem, options: Optional[SolveOptions] = None) -> GraphicalSolution:
    """
    Enumerate the corner points of the feasible region of a two-variable LP and
    evaluate the objective at each of them.

    Candidates are pairwise boundary intersections, the origin and the axis
    intercepts of every constraint; only non-negative feasible points survive.
    """

    opts = options or SolveOptions()
    if len(problem.variables) != 2:
        raise InputError("The graphical method needs exactly two decision variables")

    lines = [_as_line(cons, problem.variables) for cons in problem.constraints]
    candidates: List[Point] = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            point = intersect(lines[i], lines[j], opts.tol)
            if point is not None and point.x >= 0 and point.y >= 0 and is_feasible(point, lines, opts.tol):
                candidates.append(point)

    origin = Point(x=0.0, y=0.0)
    if is_feasible(origin, lines, opts.tol):
        candidates.append(origin)

    for a, b, c in lines:
        if a != 0:
            x_intercept = Point(x=c / a, y=0.0)
            if x_intercept.x >= 0 and is_feasible(x_intercept, lines, opts.tol):
                candidates.append(x_intercept)
        if b != 0:
            y_intercept = Point(x=0.0, y=c / b)
            if y_intercept.y >= 0 and is_feasible(y_intercept, lines, opts.tol):
                candidates.append(y_intercept)

    vertices = _unique(candidates, opts.tol)
    logger.debug("Found %d feasible vertices from %d candidates", len(vertices), len(candidates))
    if not vertices:
        raise InfeasibleError("No feasible vertex found; the constraints admit no solution")

    optimal = _best_vertex(problem, vertices)
    return GraphicalSolution(
        vertices=vertices,
        optimal=optimal,
        objective=problem.objective,
        variables=tuple(problem.variables),
    )


def intersect(line1: Line, line2: Line, tol: float = 1e-4) -> Optional[Point]:
    """Cramer's rule; ``None`` when the lines are parallel or coincident."""
    a1, b1, c1 = line1
    a2, b2, c2 = line2
    det = a1 * b2 - a2 * b1
    if abs(det) < tol:
        return None
    return Point(x=(c1 * b2 - c2 * b1) / det, y=(a1 * c2 - a2 * c1) / det)


def is_feasible(point: Point, lines: Sequence[Line], tol: float = 1e-4) -> bool:
    for a, b, c in lines:
        if a * point.x + b * point.y > c + tol:
            return False
    return True


def _as_line(cons: Constraint, variables: Sequence[str]) -> Line:
    x_name, y_name = variables
    return cons.lhs.coefficient(x_name), cons.lhs.coefficient(y_name), cons.rhs


def _unique(points: List[Point], tol: float) -> List[Point]:
    unique: List[Point] = []
    for point in points:
        duplicate = any(
            abs(seen.x - point.x) < tol and abs(seen.y - point.y) < tol for seen in unique
        )
        if not duplicate:
            unique.append(point)
    return unique


def _best_vertex(problem: LPProblem, vertices: List[Point]) -> OptimalVertex:
    x_name, y_name = problem.variables
    expression = problem.objective.expression
    maximize = problem.objective.sense == "max"

    best: Optional[Point] = None
    best_value = float("-inf") if maximize else float("inf")
    for vertex in vertices:
        value = expression.evaluate({x_name: vertex.x, y_name: vertex.y})
        # strict comparison keeps the first vertex on ties
        if (maximize and value > best_value) or (not maximize and value < best_value):
            best = vertex
            best_value = value

    if best is None:
        raise InfeasibleError("No vertex has a finite objective value")
    return OptimalVertex(vertex=best, value=best_value)
