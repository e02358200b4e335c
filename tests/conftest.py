# tests/conftest.py
# Ensure the project root (where the local `gamedata/` lives) is first on sys.path
import os, sys
import random

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class FixedUniformRNG(random.Random):
    """Random whose uniform() replays fixed values; everything else is seeded."""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self._values = list(values)

    def uniform(self, a, b):
        return self._values.pop(0)


@pytest.fixture
def fixed_uniform_rng():
    return FixedUniformRNG
