#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import Dict, List, Optional


def generate_random_lp(num_constraints: int, seed: Optional[int] = None) -> Dict[str, object]:
    """Random bounded two-variable LP written in the text grammar the parser reads."""
    rng = random.Random(seed)
    constraints: List[str] = []
    for _ in range(num_constraints):
        a = rng.randint(1, 9)
        b = rng.randint(1, 9)
        rhs = rng.randint(10, 60)
        constraints.append(f"{a}x + {b}y <= {rhs}")
    objective = f"Maximize Z = {rng.randint(1, 9)}x + {rng.randint(1, 9)}y"
    return {"objective": objective, "constraints": constraints}


def generate_transportation(
    sources: int, destinations: int, seed: Optional[int] = None
) -> Dict[str, object]:
    """Random balanced transportation instance with integer costs and quantities."""
    rng = random.Random(seed)
    supply = [rng.randint(5, 50) for _ in range(sources)]
    total = sum(supply)

    cuts = sorted(rng.randint(0, total) for _ in range(destinations - 1))
    bounds = [0] + cuts + [total]
    demand = [bounds[k + 1] - bounds[k] for k in range(destinations)]

    costs = [[rng.randint(1, 20) for _ in range(destinations)] for _ in range(sources)]
    return {"costs": costs, "supply": supply, "demand": demand}


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random LP and transportation instances.")
    parser.add_argument("--kind", choices=["lp", "transportation"], default="lp")
    parser.add_argument("--constraints", type=int, default=3, help="Constraints per LP")
    parser.add_argument("--sources", type=int, default=3, help="Transportation sources")
    parser.add_argument("--destinations", type=int, default=3, help="Transportation destinations")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = []
    for idx in range(args.count):
        seed = (args.seed or 0) + idx
        if args.kind == "lp":
            instances.append(generate_random_lp(args.constraints, seed))
        else:
            instances.append(generate_transportation(args.sources, args.destinations, seed))

    if args.out:
        Path(args.out).write_text(json.dumps(instances, indent=2))
    else:
        print(json.dumps(instances, indent=2))


if __name__ == "__main__":
    main()
