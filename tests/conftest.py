import random
import sys
from pathlib import Path

import pytest

# Allow importing the top-level packages from the repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from engine import SortCoordinator  # noqa: E402


NO_DELAY = {"fast": 0.0, "slow": 0.0}


class Tagged(int):
    """An int that remembers where it came from, for stability checks."""

    def __new__(cls, value, tag):
        obj = super().__new__(cls, value)
        obj.tag = tag
        return obj


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_coordinator():
    """Factory for coordinators; every one created is reset at teardown."""
    created = []

    def _make(values=None, presets=None, **kwargs):
        c = SortCoordinator(values=values, presets=presets or NO_DELAY, seed=7, **kwargs)
        created.append(c)
        return c

    yield _make
    for c in created:
        c.reset()
