from __future__ import annotations

import pytest

from bin_packer.metrics import bin_loads
from bin_packer.models import ProblemInstance
from bin_packer.packing.best_fit import best_fit, best_fit_heap, best_fit_lookup

BEST_FITS = [best_fit, best_fit_heap, best_fit_lookup]


def assert_within_capacity(instance, assignment):
    for load in bin_loads(instance, assignment).values():
        assert load <= instance.capacity


def test_best_fit_mixed_items() -> None:
    """{4,4,2} and {8,1,1} fill two bins exactly."""
    instance = ProblemInstance(items=[4, 8, 1, 4, 2, 1], capacity=10)

    result = best_fit(instance)

    assert result.heuristic == "best_fit"
    assert result.bins_used == 2
    assert result.assignment == [0, 1, 1, 0, 0, 1]
    assert bin_loads(instance, result.assignment) == {0: 10, 1: 10}


def test_lookup_mixed_items() -> None:
    instance = ProblemInstance(items=[4, 8, 1, 4, 2, 1], capacity=10)

    assert best_fit_lookup(instance).bins_used == 2


def test_heap_mixed_items() -> None:
    """Once the fullest bin cannot take an item a new bin is opened."""
    instance = ProblemInstance(items=[4, 8, 1, 4, 2, 1], capacity=10)

    result = best_fit_heap(instance)

    assert result.bins_used == 4
    assert best_fit_lookup(instance).bins_used <= result.bins_used


@pytest.mark.parametrize("heuristic", BEST_FITS)
def test_items_that_never_pair(heuristic) -> None:
    instance = ProblemInstance(items=[6, 6, 6, 6], capacity=10)

    assert heuristic(instance).bins_used == 4


def test_unit_items() -> None:
    instance = ProblemInstance(items=[1] * 10, capacity=5)

    assert best_fit_lookup(instance).bins_used == 2
    assert best_fit(instance).bins_used == 2
    # the root stays full, so every later item opens its own bin
    assert best_fit_heap(instance).bins_used == 6


@pytest.mark.parametrize("heuristic", BEST_FITS)
def test_empty_instance(heuristic, fake_stopwatch) -> None:
    instance = ProblemInstance(items=[], capacity=10)

    result = heuristic(instance, fake_stopwatch)

    assert result.bins_used == 0
    assert fake_stopwatch.starts == 1
    assert fake_stopwatch.stops == 1


@pytest.mark.parametrize("heuristic", BEST_FITS)
def test_single_full_item(heuristic) -> None:
    instance = ProblemInstance(items=[10], capacity=10)

    assert heuristic(instance).bins_used == 1


def test_full_item_is_retired_immediately() -> None:
    """A bin holding a K-sized item never receives another item."""
    instance = ProblemInstance(items=[10, 3, 10, 3], capacity=10)

    result = best_fit(instance)

    assert result.bins_used == 3
    assert result.assignment == [0, 1, 2, 1]


def test_assignment_survives_slot_reuse() -> None:
    """Retiring bin 0 moves bin 1 into its slot; identifiers must not change."""
    instance = ProblemInstance(items=[9, 5, 1, 4], capacity=10)

    result = best_fit(instance)

    assert result.bins_used == 2
    assert result.assignment == [0, 1, 0, 1]
    assert bin_loads(instance, result.assignment) == {0: 10, 1: 9}


def test_ties_go_to_the_first_open_bin() -> None:
    instance = ProblemInstance(items=[7, 7, 2], capacity=10)

    result = best_fit(instance)

    assert result.assignment == [0, 1, 0]


def test_assignment_is_feasible_with_loose_min_size() -> None:
    """min_item_size below the smallest item only delays retirement."""
    instance = ProblemInstance(items=[5, 4, 3, 6, 2, 7, 8], capacity=10, min_item_size=1)

    result = best_fit(instance)

    assert_within_capacity(instance, result.assignment)
    assert sorted(set(result.assignment)) == list(range(result.bins_used))


@pytest.mark.parametrize("heuristic", BEST_FITS)
def test_elapsed_time_comes_from_stopwatch(heuristic, fake_stopwatch) -> None:
    instance = ProblemInstance(items=[3, 3, 3], capacity=10)

    result = heuristic(instance, fake_stopwatch)

    assert result.elapsed_seconds == fake_stopwatch.elapsed


@pytest.mark.parametrize("heuristic", [best_fit_heap, best_fit_lookup])
def test_no_assignment_for_count_only_variants(heuristic) -> None:
    instance = ProblemInstance(items=[3, 3], capacity=10)

    assert heuristic(instance).assignment is None
