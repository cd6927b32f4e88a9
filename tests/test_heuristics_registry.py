from __future__ import annotations

import pytest

from bin_packer.models import ProblemInstance
from bin_packer.packing.heuristics import HEURISTICS, get_heuristic, run_heuristic


def test_registry_names_match_results() -> None:
    instance = ProblemInstance(items=[2, 3], capacity=5)

    for name, heuristic in HEURISTICS.items():
        assert heuristic(instance).heuristic == name


def test_get_heuristic_normalizes_name() -> None:
    assert get_heuristic(" Best_Fit_Lookup ") is HEURISTICS["best_fit_lookup"]


def test_get_heuristic_unknown() -> None:
    with pytest.raises(ValueError, match="Valid"):
        get_heuristic("first_fit")


def test_run_heuristic(fake_stopwatch) -> None:
    instance = ProblemInstance(items=[6, 6, 6, 6], capacity=10)

    result = run_heuristic("best_fit_heap", instance, fake_stopwatch)

    assert result.bins_used == 4
    assert result.elapsed_seconds == fake_stopwatch.elapsed
