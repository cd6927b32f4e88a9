from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from bin_packer.benchmark import compare_heuristics, format_table
from bin_packer.config import get_settings
from bin_packer.instances import random_instance
from bin_packer.io.loader import find_instance, load_beasley_format, load_instance_json
from bin_packer.metrics import lower_bound
from bin_packer.models import ProblemInstance
from bin_packer.packing.heuristics import HEURISTICS
from bin_packer.timing import CLOCKS

logger = logging.getLogger(__name__)


def load_problem(args: argparse.Namespace) -> tuple[ProblemInstance, Optional[int]]:
    """Return the instance selected on the command line and its known optimum, if any."""
    if args.input:
        return load_instance_json(Path(args.input)), None

    if args.beasley:
        instances = load_beasley_format(Path(args.beasley))
        if args.instance_name:
            entry = find_instance(instances, args.instance_name)
        elif instances:
            entry = instances[0]
        else:
            raise ValueError(f"{args.beasley}: no instances in file")
        return entry.instance, entry.optimal

    return (
        random_instance(
            n=args.random,
            capacity=args.capacity,
            low=args.low,
            high=args.high,
            seed=args.seed,
        ),
        None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare one-dimensional bin packing heuristics")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="Instance JSON file with 'capacity' and 'items'")
    source.add_argument("--beasley", help="OR-Library (Beasley) instance file")
    source.add_argument("--random", type=int, metavar="N", help="Generate N random items")

    parser.add_argument("--instance-name", help="Instance to pick from a Beasley file (default: first)")
    parser.add_argument("--capacity", type=int, help="Bin capacity for --random")
    parser.add_argument("--low", type=int, default=1, help="Smallest random item size")
    parser.add_argument("--high", type=int, help="Largest random item size (default: capacity)")
    parser.add_argument("--seed", type=int, help="Random seed for --random")
    parser.add_argument(
        "--heuristic",
        action="append",
        choices=sorted(HEURISTICS),
        help="Heuristic to run; repeat for several (default: all)",
    )
    parser.add_argument("--repeats", type=int, default=1, help="Timed runs per heuristic")
    parser.add_argument(
        "--clock",
        choices=sorted(CLOCKS),
        default="wall",
        help="wall = monotonic wall clock, process = CPU time of this process",
    )
    parser.add_argument("--output", help="Write a JSON report to this path")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.random is not None and args.capacity is None:
        parser.error("--random requires --capacity")
    if args.repeats < 1:
        parser.error("--repeats must be >= 1")

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        instance, optimal = load_problem(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    names = args.heuristic or settings.default_heuristics or None
    rows = compare_heuristics(
        instance,
        names=names,
        repeats=args.repeats,
        stopwatch_factory=CLOCKS[args.clock],
    )

    print(f"Instance: {instance.name or '-'} | Items: {instance.n} | Capacity: {instance.capacity}")
    print(f"Lower bound: {lower_bound(instance)}" + (f" | Optimal: {optimal}" if optimal is not None else ""))
    print(format_table(rows))

    if args.output:
        report = {
            "instance": {
                "name": instance.name,
                "n": instance.n,
                "capacity": instance.capacity,
                "min_item_size": instance.min_item_size,
                "total_size": instance.total_size,
            },
            "lower_bound": lower_bound(instance),
            "optimal": optimal,
            "repeats": args.repeats,
            "clock": args.clock,
            "results": [row.model_dump(exclude={"result"}) for row in rows],
        }
        write_report(report, args.output)
        print(f"✅ Report written to {args.output}")

    return 0


def write_report(report: dict, path: str = "report.json") -> None:
    """
    Write a report dictionary to a JSON file.

    Creates parent folders if needed, writes JSON with indent=2 and sort_keys=True,
    and overwrites the file on every run.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("write_report: writing to %s", output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, sort_keys=True)


if __name__ == "__main__":
    raise SystemExit(main())
