import math
import random

import pytest

from colony_tsp import ACOConfig, PheromoneField, TSPInstance, distance_matrix, optimize
from colony_tsp.construction import DEGENERATE_WEIGHT, construct_tour, desirability, select_next


def test_desirability_matches_formula():
    assert desirability(2.0, 4.0, 1.0, 2.0) == pytest.approx(2.0 * (1 / 4.0) ** 2)
    assert desirability(4.0, 2.0, 0.5, 1.0) == pytest.approx(2.0 * 0.5)


def test_desirability_zero_distance_is_finite():
    w = desirability(1.0, 0.0, 1.0, 2.0)
    assert math.isfinite(w)
    assert w == DEGENERATE_WEIGHT


@pytest.mark.parametrize("n", [2, 3, 5, 12, 30])
def test_tours_are_permutations(n):
    inst = TSPInstance.random_euclidean(n=n, seed=n)
    D = inst.distance_matrix()
    field = PheromoneField(n)
    rng = random.Random(1)
    for _ in range(20):
        tour = construct_tour(D, field, 1.0, 2.0, rng)
        assert sorted(tour) == list(range(n))


def test_roulette_walks_in_index_order(fixed_random):
    D = [[0.0, 1.0, 1.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0]]
    field = PheromoneField(3)
    # equal scores of 1.0: a draw at exactly the first boundary still picks the first city
    assert select_next(0, [1, 2], D, field, 1.0, 1.0, fixed_random(0.5)) == 1
    assert select_next(0, [1, 2], D, field, 1.0, 1.0, fixed_random(0.75)) == 2
    assert select_next(0, [1, 2], D, field, 1.0, 1.0, fixed_random(0.0)) == 1


def test_roulette_prefers_closer_city(fixed_random):
    D = [[0.0, 1.0, 3.0], [1.0, 0.0, 1.0], [3.0, 1.0, 0.0]]
    field = PheromoneField(3)
    # scores 1 and 1/9; the draw 0.85 * 10/9 lands inside the first slot
    assert select_next(0, [1, 2], D, field, 1.0, 2.0, fixed_random(0.85)) == 1
    assert select_next(0, [1, 2], D, field, 1.0, 2.0, fixed_random(0.95)) == 2


def test_overshoot_falls_back_to_lowest_index(fixed_random):
    D = [[0.0, 1.0, 1.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0]]
    field = PheromoneField(3)
    assert select_next(0, [1, 2], D, field, 1.0, 1.0, fixed_random(1.5)) == 1


def test_start_city_comes_from_rng(fixed_random):
    D = [[0.0, 1.0, 1.0], [1.0, 0.0, 1.0], [1.0, 1.0, 0.0]]
    tour = construct_tour(D, PheromoneField(3), 1.0, 1.0, fixed_random(0.25, 0.5, start=2))
    assert tour == [2, 0, 1]


def test_coincident_cities_still_build_tours():
    D = [[0.0] * 4 for _ in range(4)]
    tour = construct_tour(D, PheromoneField(4), 1.0, 2.0, random.Random(0))
    assert sorted(tour) == [0, 1, 2, 3]


@pytest.mark.parametrize("distance", [1e-170, 1e-300, 5e-324])
def test_desirability_nearly_coincident_is_capped(distance):
    assert desirability(1.0, distance, 1.0, 2.0) == DEGENERATE_WEIGHT
    assert desirability(2.0, distance, 1.0, 3.0) == 2.0 * DEGENERATE_WEIGHT


def test_desirability_ignores_distance_when_beta_is_zero():
    assert desirability(3.0, 0.0, 1.0, 0.0) == 3.0
    assert desirability(3.0, 7.0, 1.0, 0.0) == 3.0


def test_nearly_coincident_cities_build_tours():
    D = distance_matrix([(0.0, 0.0), (1e-170, 0.0), (1.0, 0.0)])
    rng = random.Random(0)
    for _ in range(10):
        tour = construct_tour(D, PheromoneField(3), 1.0, 2.0, rng)
        assert sorted(tour) == [0, 1, 2]


def test_optimize_nearly_coincident_cities():
    tour, length = optimize([(0, 0), (1e-170, 0), (1, 0)], ACOConfig(n_ants=3, n_iterations=3, seed=0))
    assert sorted(tour) == [0, 1, 2]
    assert length == pytest.approx(2.0)
