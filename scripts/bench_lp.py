#!/usr/bin/env python3
import json
import time
from pathlib import Path

from optimethods.errors import OptimizationError
from optimethods.lp.graphical import graphical_solve
from optimethods.lp.parser import parse_problem
from optimethods.lp.reference import solve_reference
from optimethods.lp.simplex import simplex_solve
from scripts.generate_instances import generate_random_lp


def load_example(name: str) -> dict:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return json.loads(path.read_text())


def main() -> None:
    cases = [
        ("examples/resource_allocation.json", load_example("resource_allocation.json")),
        ("examples/production_planning.json", load_example("production_planning.json")),
    ]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(3, seed)))

    print("name,simplex_z,graphical_z,highs_z,pivots,time_ms")
    for name, case in cases:
        problem = parse_problem(case["objective"], case["constraints"])
        start = time.perf_counter()
        try:
            simplex = simplex_solve(problem)
            simplex_z, pivots = simplex.objective_value, simplex.iterations
        except OptimizationError as exc:
            simplex_z, pivots = type(exc).__name__, ""
        elapsed_ms = (time.perf_counter() - start) * 1000
        try:
            graphical_z = graphical_solve(problem).optimal.value
        except OptimizationError as exc:
            graphical_z = type(exc).__name__
        reference = solve_reference(problem)
        print(f"{name},{simplex_z},{graphical_z},{reference.objective_value},{pivots},{elapsed_ms:.2f}")


if __name__ == "__main__":
    main()
