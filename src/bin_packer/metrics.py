from __future__ import annotations

from typing import Any

from bin_packer.models import PackingResult, ProblemInstance


def lower_bound(instance: ProblemInstance) -> int:
    """Trivial lower bound ceil(sum(items) / K)."""
    return -(-instance.total_size // instance.capacity)


def bin_loads(instance: ProblemInstance, assignment: list[int]) -> dict[int, int]:
    if len(assignment) != instance.n:
        raise ValueError(f"assignment has {len(assignment)} entries for {instance.n} items")
    loads: dict[int, int] = {}
    for size, bin_id in zip(instance.items, assignment):
        loads[bin_id] = loads.get(bin_id, 0) + size
    return loads


def is_feasible(instance: ProblemInstance, assignment: list[int]) -> bool:
    return all(load <= instance.capacity for load in bin_loads(instance, assignment).values())


def fill_rate(instance: ProblemInstance, bins_used: int) -> float:
    used_capacity = bins_used * instance.capacity
    return 0.0 if used_capacity == 0 else instance.total_size / used_capacity


def compute_metrics(instance: ProblemInstance, result: PackingResult) -> dict[str, Any]:
    bound = lower_bound(instance)
    return {
        "lower_bound": bound,
        "gap": result.bins_used - bound,
        "fill_rate": fill_rate(instance, result.bins_used),
        "feasible": None if result.assignment is None else is_feasible(instance, result.assignment),
    }
