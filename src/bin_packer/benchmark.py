"""Run several heuristics on one instance and compare bin counts and timings."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from pydantic import BaseModel, Field

from bin_packer.metrics import fill_rate, lower_bound
from bin_packer.models import PackingResult, ProblemInstance
from bin_packer.packing.heuristics import HEURISTICS, get_heuristic
from bin_packer.timing import Stopwatch, default_stopwatch

logger = logging.getLogger(__name__)


class BenchmarkRow(BaseModel):
    heuristic: str
    bins_used: int = Field(ge=0)
    best_seconds: float = Field(ge=0, description="Fastest of the repeated runs")
    mean_seconds: float = Field(ge=0)
    gap: int = Field(description="bins_used minus the trivial lower bound")
    fill_rate: float = Field(ge=0, le=1)
    result: PackingResult


def compare_heuristics(
    instance: ProblemInstance,
    names: Optional[Iterable[str]] = None,
    repeats: int = 1,
    stopwatch_factory: Callable[[], Stopwatch] = default_stopwatch,
) -> list[BenchmarkRow]:
    """
    Run each heuristic `repeats` times on the same instance.

    Bin counts are deterministic; only the timings vary between repeats.
    The row keeps the last of the fastest runs.
    Every run gets a fresh stopwatch.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    selected = list(names) if names else list(HEURISTICS)
    bound = lower_bound(instance)
    rows: list[BenchmarkRow] = []

    for name in selected:
        heuristic = get_heuristic(name)
        best: Optional[PackingResult] = None
        total_seconds = 0.0
        for _ in range(repeats):
            result = heuristic(instance, stopwatch_factory())
            total_seconds += result.elapsed_seconds
            if best is None or result.elapsed_seconds <= best.elapsed_seconds:
                best = result

        logger.info(
            "%s on %s: bins=%d best=%.6fs",
            best.heuristic,
            instance.name or "instance",
            best.bins_used,
            best.elapsed_seconds,
        )
        rows.append(
            BenchmarkRow(
                heuristic=best.heuristic,
                bins_used=best.bins_used,
                best_seconds=best.elapsed_seconds,
                mean_seconds=total_seconds / repeats,
                gap=best.bins_used - bound,
                fill_rate=fill_rate(instance, best.bins_used),
                result=best,
            )
        )

    return rows


def format_table(rows: list[BenchmarkRow]) -> str:
    header = f"{'heuristic':<22}{'bins':>8}{'gap':>6}{'fill':>8}{'best (s)':>12}{'mean (s)':>12}"
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            f"{row.heuristic:<22}{row.bins_used:>8}{row.gap:>6}{row.fill_rate:>8.3f}"
            f"{row.best_seconds:>12.6f}{row.mean_seconds:>12.6f}"
        )
    return "\n".join(lines)
