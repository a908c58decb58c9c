from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidInputError

SYMMETRY_TOL = 1e-9


class City(NamedTuple):
    x: float
    y: float


def distance_matrix(coords: Sequence[Tuple[float, float]]) -> List[List[float]]:
    n = len(coords)
    D = [[0.0]*n for _ in range(n)]
    for i in range(n):
        x1, y1 = coords[i]
        for j in range(i+1, n):
            x2, y2 = coords[j]
            d = math.hypot(x1 - x2, y1 - y2)
            D[i][j] = D[j][i] = d
    return D


def tour_length(tour: Sequence[int], dist: Sequence[Sequence[float]]) -> float:
    """Closed length: consecutive edges plus the edge back to the first city."""
    n = len(tour)
    total = 0.0
    for k in range(n):
        i, j = tour[k], tour[(k + 1) % n]
        total += dist[i][j]
    return total


def check_distance_matrix(dist: Sequence[Sequence[float]]) -> List[List[float]]:
    """Validate a caller-supplied matrix and return it as a list of float rows."""
    n = len(dist)
    if n < 2:
        raise InvalidInputError(f"at least 2 cities are required, got {n}")
    rows = []
    for i, row in enumerate(dist):
        if len(row) != n:
            raise InvalidInputError(f"distance matrix must be square; row {i} has {len(row)} entries, expected {n}")
        rows.append([float(x) for x in row])
    for i in range(n):
        for j in range(n):
            d = rows[i][j]
            if not math.isfinite(d) or d < 0:
                raise InvalidInputError(f"distance[{i}][{j}] = {d} is not a finite non-negative value")
            if abs(d - rows[j][i]) > SYMMETRY_TOL * max(1.0, abs(d)):
                raise InvalidInputError(f"distance matrix is not symmetric at ({i}, {j})")
    return rows


@dataclass
class TSPInstance:
    coords: List[City]
    name: str = "euclidean_tsp"

    def __post_init__(self):
        self.coords = [City(float(x), float(y)) for x, y in self.coords]

    @staticmethod
    def random_euclidean(n: int, seed: Optional[int] = None, width: float = 100.0,
                         height: Optional[float] = None, name: str = "random_euclidean"):
        if n < 2:
            raise InvalidInputError(f"at least 2 cities are required, got {n}")
        height = width if height is None else height
        rng = random.Random(seed)
        coords = [City(rng.uniform(0, width), rng.uniform(0, height)) for _ in range(n)]
        return TSPInstance(coords=coords, name=name)

    def n_cities(self) -> int:
        return len(self.coords)

    def distance(self, i: int, j: int) -> float:
        (x1, y1), (x2, y2) = self.coords[i], self.coords[j]
        return math.hypot(x1 - x2, y1 - y2)

    def distance_matrix(self) -> List[List[float]]:
        return distance_matrix(self.coords)

    def tour_length(self, tour: Sequence[int]) -> float:
        n = len(tour)
        dist = 0.0
        for k in range(n):
            i, j = tour[k], tour[(k + 1) % n]
            dist += self.distance(i, j)
        return dist
