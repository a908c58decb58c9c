from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .pheromone import PheromoneField
from .tsp import tour_length

logger = logging.getLogger(__name__)


def update_pheromones(pheromone: PheromoneField, tours: Sequence[Sequence[int]],
                      dist: Sequence[Sequence[float]], rho: float, Q: float,
                      lengths: Optional[List[float]] = None):
    """Evaporate every edge, then let each tour deposit Q / length on its edges.

    `lengths` may be passed when the caller already scored the tours.
    Zero-length tours (all cities coincident) deposit nothing.
    """
    pheromone.evaporate(rho)
    if lengths is None:
        lengths = [tour_length(t, dist) for t in tours]
    skipped = 0
    for tour, L in zip(tours, lengths):
        if L <= 0:
            skipped += 1
            continue
        dta = Q / L
        n = len(tour)
        for k in range(n):
            pheromone.reinforce(tour[k], tour[(k+1) % n], dta)
    if skipped:
        logger.debug("%d zero-length tour(s) deposited no pheromone", skipped)
