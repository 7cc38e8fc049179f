from __future__ import annotations


class OptimizationError(ValueError):
    """Base class for every failure the solvers report back to the caller."""


class ParseError(OptimizationError):
    """Objective or constraint text does not follow the expected grammar."""


class InputError(OptimizationError):
    """A required field is blank, non-numeric or has the wrong shape."""


class BalanceError(OptimizationError):
    def __init__(self, total_supply: float, total_demand: float) -> None:
        self.total_supply = total_supply
        self.total_demand = total_demand
        super().__init__(
            f"Supply ({_format_total(total_supply)}) and demand ({_format_total(total_demand)}) must be equal"
        )


def _format_total(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class UnboundedError(OptimizationError):
    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(
            f"No leaving variable found for entering variable '{variable}'. The problem is unbounded."
        )


class NonConvergenceError(OptimizationError):
    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"Simplex did not reach optimality within {iterations} pivots.")


class InfeasibleError(OptimizationError):
    """No point of the non-negative quadrant satisfies every constraint."""
