import matplotlib

matplotlib.use("Agg")

import pytest

from colony_tsp import TSPInstance


@pytest.fixture
def square():
    return TSPInstance(coords=[(0, 0), (0, 10), (10, 10), (10, 0)], name="square10")


@pytest.fixture
def random_instance():
    return TSPInstance.random_euclidean(n=8, seed=7)


class FixedRandom:
    """Stand-in for random.Random that replays the given draws."""

    def __init__(self, *draws, start=0):
        self.draws = list(draws)
        self.start = start

    def random(self):
        return self.draws.pop(0)

    def randrange(self, n):
        return self.start


@pytest.fixture
def fixed_random():
    return FixedRandom
