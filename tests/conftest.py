from __future__ import annotations

import pytest


class FakeStopwatch:
    """Stopwatch returning a fixed duration, recording how it was used."""

    def __init__(self, elapsed: float = 0.25) -> None:
        self.elapsed = elapsed
        self.starts = 0
        self.stops = 0

    def start(self) -> None:
        self.starts += 1

    def stop(self) -> float:
        self.stops += 1
        return self.elapsed


@pytest.fixture
def fake_stopwatch() -> FakeStopwatch:
    return FakeStopwatch()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BIN_PACKER_LOG_LEVEL",
        "BIN_PACKER_DEFAULT_HEURISTICS",
        "BIN_PACKER_MAX_ITEMS",
        "BIN_PACKER_MAX_CAPACITY",
    ):
        monkeypatch.delenv(name, raising=False)
