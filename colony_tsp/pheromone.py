from __future__ import annotations
from typing import List


class PheromoneField:
    """Symmetric N x N pheromone intensities, owned by a single colony run.

    Both triangles are stored and written explicitly; there is no floor or
    ceiling on the values.
    """

    def __init__(self, n: int, tau0: float = 1.0):
        self.n = n
        self.tau = [[tau0]*n for _ in range(n)]

    def __getitem__(self, i: int) -> List[float]:
        return self.tau[i]

    def get(self, i: int, j: int) -> float:
        return self.tau[i][j]

    def evaporate(self, rate: float):
        keep = 1.0 - rate
        for row in self.tau:
            for j in range(self.n):
                row[j] *= keep

    def reinforce(self, i: int, j: int, amount: float):
        self.tau[i][j] += amount
        if i != j:
            self.tau[j][i] += amount

    def snapshot(self) -> List[List[float]]:
        return [list(row) for row in self.tau]

    def is_symmetric(self) -> bool:
        return all(self.tau[i][j] == self.tau[j][i]
                   for i in range(self.n) for j in range(i+1, self.n))
