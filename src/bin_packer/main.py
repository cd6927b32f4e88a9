from __future__ import annotations

from bin_packer.metrics import compute_metrics
from bin_packer.models import ProblemInstance
from bin_packer.packing.heuristics import HEURISTICS


def run_case(instance: ProblemInstance) -> None:
    print("\n" + "=" * 60)
    print(f"📦 INSTANCE: {instance.items} (K={instance.capacity})")

    for name, heuristic in HEURISTICS.items():
        result = heuristic(instance)
        metrics = compute_metrics(instance, result)
        line = f"  {name:<20} bins={result.bins_used:<4} gap={metrics['gap']:<3} fill={metrics['fill_rate'] * 100:6.2f}%"
        if result.assignment is not None:
            line += f" assignment={result.assignment}"
        print(line)


def main() -> None:
    instances = [
        ProblemInstance(items=[4, 8, 1, 4, 2, 1], capacity=10),
        ProblemInstance(items=[6, 6, 6, 6], capacity=10),
        ProblemInstance(items=[1] * 10, capacity=5),
        ProblemInstance(items=[10], capacity=10),
        ProblemInstance(items=[], capacity=10),
    ]

    for instance in instances:
        run_case(instance)


if __name__ == "__main__":
    main()
