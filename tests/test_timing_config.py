from __future__ import annotations

import pytest
from pydantic import ValidationError

from bin_packer.config import get_settings
from bin_packer.timing import PerfCounterStopwatch, ProcessTimeStopwatch


@pytest.mark.parametrize("stopwatch_cls", [PerfCounterStopwatch, ProcessTimeStopwatch])
def test_stopwatch_measures_non_negative_time(stopwatch_cls) -> None:
    stopwatch = stopwatch_cls()

    stopwatch.start()
    elapsed = stopwatch.stop()

    assert elapsed >= 0.0


def test_stopwatch_must_be_started() -> None:
    with pytest.raises(RuntimeError):
        PerfCounterStopwatch().stop()


def test_stopwatch_uses_its_clock(monkeypatch) -> None:
    ticks = iter([10.0, 12.5])
    monkeypatch.setattr(PerfCounterStopwatch, "clock", staticmethod(lambda: next(ticks)))
    stopwatch = PerfCounterStopwatch()

    stopwatch.start()

    assert stopwatch.stop() == pytest.approx(2.5)


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.log_level == "INFO"
    assert settings.default_heuristics == []
    assert settings.max_items == 100_000


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("BIN_PACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("BIN_PACKER_DEFAULT_HEURISTICS", "best_fit, next_fit,")
    monkeypatch.setenv("BIN_PACKER_MAX_ITEMS", "500")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.default_heuristics == ["best_fit", "next_fit"]
    assert settings.max_items == 500


def test_settings_reject_bad_limit(monkeypatch) -> None:
    monkeypatch.setenv("BIN_PACKER_MAX_ITEMS", "0")

    with pytest.raises(ValidationError):
        get_settings()
