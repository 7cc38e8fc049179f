from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

Sense = Literal["max", "min"]
Cmp = Literal["<="]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class LinearExpression(_Frozen):
    coefficients: Dict[str, float] = Field(default_factory=dict)

    def coefficient(self, var: str) -> float:
        return self.coefficients.get(var, 0.0)

    def evaluate(self, values: Dict[str, float]) -> float:
        total = 0.0
        for var, coef in self.coefficients.items():
            total += coef * values.get(var, 0.0)
        return total


class Objective(_Frozen):
    sense: Sense
    expression: LinearExpression


class Constraint(_Frozen):
    name: str
    lhs: LinearExpression
    cmp: Cmp = "<="
    rhs: float
    slack: str
    slack_coef: float = 1.0


class LPProblem(_Frozen):
    name: str = "problem"
    variables: List[str]
    objective: Objective
    constraints: List[Constraint]

    def slack_names(self) -> List[str]:
        return [cons.slack for cons in self.constraints]


class SolveOptions(BaseModel):
    max_pivots: int = 10
    tol: float = 1e-4
    strict: bool = False


class TableauRow(_Frozen):
    basic: str
    coefficients: Tuple[float, ...]

    @property
    def rhs(self) -> float:
        return self.coefficients[-1]


class Tableau(_Frozen):
    """Simplex tableau: column labels end with ``RHS``, one row per constraint."""

    variables: Tuple[str, ...]
    rows: Tuple[TableauRow, ...]
    objective_row: Tuple[float, ...]

    @model_validator(mode="after")
    def _check_widths(self) -> "Tableau":
        width = len(self.variables)
        if len(self.objective_row) != width:
            raise ValueError("Objective row width does not match the column labels")
        for row in self.rows:
            if len(row.coefficients) != width:
                raise ValueError(f"Row '{row.basic}' width does not match the column labels")
        return self

    @property
    def rhs(self) -> float:
        return self.objective_row[-1]

    def is_optimal(self) -> bool:
        return all(value >= 0 for value in self.objective_row[:-1])

    def value_of(self, name: str) -> float:
        for row in self.rows:
            if row.basic == name:
                return row.rhs
        return 0.0


class SimplexStep(_Frozen):
    step: int
    tableau: Tableau
    entering: Optional[str] = None
    leaving: Optional[str] = None


class SimplexSolution(_Frozen):
    values: Dict[str, float]
    objective_value: float
    slack: Dict[str, float]
    steps: List[SimplexStep]
    iterations: int

    def as_result(self) -> Dict[str, Any]:
        result: Dict[str, Any] = dict(self.values)
        result["z"] = self.objective_value
        result["slack"] = dict(self.slack)
        return result


class Point(_Frozen):
    x: float
    y: float


class OptimalVertex(_Frozen):
    vertex: Point
    value: float


class GraphicalSolution(_Frozen):
    vertices: List[Point]
    optimal: OptimalVertex
    objective: Objective
    variables: Tuple[str, str] = ("x", "y")

    @property
    def objective_slope(self) -> Optional[float]:
        x_name, y_name = self.variables
        c_x = self.objective.expression.coefficient(x_name)
        c_y = self.objective.expression.coefficient(y_name)
        if c_y == 0:
            return None
        return -c_x / c_y

    def as_result(self) -> Dict[str, Any]:
        return {
            "vertices": [point.model_dump() for point in self.vertices],
            "optimal": self.optimal.model_dump(),
        }


class TransportationProblem(_Frozen):
    costs: List[List[float]]
    supply: List[float]
    demand: List[float]

    @model_validator(mode="after")
    def _check_shape(self) -> "TransportationProblem":
        if len(self.costs) != len(self.supply):
            raise ValueError("Cost matrix needs one row per source")
        for row in self.costs:
            if len(row) != len(self.demand):
                raise ValueError("Cost matrix needs one column per destination")
        return self

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.supply), len(self.demand)


class Allocation(_Frozen):
    allocation: List[List[float]]
    total_cost: float

    def as_result(self) -> Dict[str, Any]:
        return {
            "allocation": [list(row) for row in self.allocation],
            "totalCost": self.total_cost,
        }


class ReferenceSolution(BaseModel):
    status: Literal["optimal", "infeasible", "unbounded", "iteration_limit"]
    objective_value: Optional[float]
    x: Dict[str, float] | None
    iterations: int
    message: str = ""
