from __future__ import annotations
import logging
import random
from typing import List, Sequence

from .pheromone import PheromoneField

logger = logging.getLogger(__name__)

# Upper bound on (1/d)**beta; coincident or nearly coincident cities get this weight.
DEGENERATE_WEIGHT = 1e12


def desirability(tau: float, distance: float, alpha: float, beta: float) -> float:
    if beta == 0:
        return tau ** alpha
    if distance == 0.0:
        return (tau ** alpha) * DEGENERATE_WEIGHT
    try:
        heuristic = (1.0 / distance) ** beta
    except OverflowError:
        heuristic = DEGENERATE_WEIGHT
    return (tau ** alpha) * min(heuristic, DEGENERATE_WEIGHT)


def select_next(current: int, unvisited: Sequence[int], dist: Sequence[Sequence[float]],
                pheromone: PheromoneField, alpha: float, beta: float, rng: random.Random) -> int:
    """Roulette-wheel choice of the next city.

    `unvisited` must be in ascending index order: the wheel is walked in that
    order, so the first city whose cumulative score reaches the draw wins.
    If rounding leaves the draw above the cumulative total, the lowest-indexed
    unvisited city is returned.
    """
    tau_row = pheromone[current]
    d_row = dist[current]
    scores = [desirability(tau_row[j], d_row[j], alpha, beta) for j in unvisited]
    r = rng.random() * sum(scores)
    for j, w in zip(unvisited, scores):
        r -= w
        if r <= 0:
            return j
    logger.debug("roulette overshoot of %g at city %d; taking lowest unvisited index", r, current)
    return unvisited[0]


def construct_tour(dist: Sequence[Sequence[float]], pheromone: PheromoneField,
                   alpha: float, beta: float, rng: random.Random) -> List[int]:
    n = len(dist)
    start = rng.randrange(n)
    tour = [start]
    unvisited = [j for j in range(n) if j != start]
    current = start
    while unvisited:
        nxt = select_next(current, unvisited, dist, pheromone, alpha, beta, rng)
        tour.append(nxt)
        unvisited.remove(nxt)
        current = nxt
    return tour
