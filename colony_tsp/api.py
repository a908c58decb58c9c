from __future__ import annotations
import random
from typing import List, Optional, Sequence, Tuple

from .colony import ACOConfig, AntSystem
from .errors import InvalidInputError
from .tsp import distance_matrix


def optimize(cities: Sequence[Tuple[float, float]], config: Optional[ACOConfig] = None, *,
             distances: Optional[Sequence[Sequence[float]]] = None,
             rng: Optional[random.Random] = None) -> Tuple[List[int], float]:
    """Run the colony on `cities` and return (best tour, best length).

    If `distances` is given it must be the symmetric matrix for `cities` and
    is used instead of recomputing Euclidean distances.
    """
    if len(cities) < 2:
        raise InvalidInputError(f"at least 2 cities are required, got {len(cities)}")
    if distances is None:
        distances = distance_matrix(cities)
    elif len(distances) != len(cities):
        raise InvalidInputError(f"distance matrix has {len(distances)} rows for {len(cities)} cities")
    return optimize_matrix(distances, config, rng=rng)


def optimize_matrix(distances: Sequence[Sequence[float]], config: Optional[ACOConfig] = None, *,
                    rng: Optional[random.Random] = None) -> Tuple[List[int], float]:
    res = AntSystem(distances, config, rng=rng).run()
    return res.best_tour, res.best_length
