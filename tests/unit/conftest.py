"""Unit test fixtures."""

from dataclasses import dataclass

import pytest

from pathchain.config import ChainConfig, set_default_config


@dataclass(frozen=True, eq=False)
class StubPath:
    """Straight segment along x; just enough geometry for chain tests."""

    seg_length: float

    def length(self) -> float:
        return self.seg_length

    def get_point(self, t: float) -> tuple[float, float]:
        return (t * self.seg_length, 0.0)

    def get_heading(self, t: float) -> float:
        return 0.0


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> None:
        self.now += dt


@pytest.fixture
def make_path():
    return StubPath


@pytest.fixture
def three_paths() -> list[StubPath]:
    return [StubPath(10.0), StubPath(20.0), StubPath(30.0)]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def restore_default_config():
    """Keep process-wide config changes local to each test."""
    previous = set_default_config(ChainConfig())
    yield
    set_default_config(previous)
