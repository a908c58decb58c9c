from __future__ import annotations
import logging
import math
import numbers
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .construction import construct_tour
from .errors import ConfigurationError
from .pheromone import PheromoneField
from .tsp import check_distance_matrix, tour_length
from .update import update_pheromones

logger = logging.getLogger(__name__)


@dataclass
class ACOConfig:
    n_ants: int = 100           # ants per generation
    n_iterations: int = 1000    # generations
    alpha: float = 1.0          # pheromone influence
    beta: float = 2.0           # heuristic (1/d) influence
    rho: float = 0.5            # evaporation rate, 0 <= rho < 1
    Q: float = 100.0            # pheromone deposit scale
    tau0: float = 1.0           # initial pheromone on every edge
    seed: Optional[int] = None

    def validate(self):
        for name in ("n_ants", "n_iterations"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        # written as negations so NaN fails every check
        if not 0.0 <= self.rho < 1.0:
            raise ConfigurationError(f"rho must be in [0, 1), got {self.rho}")
        if not (math.isfinite(self.Q) and self.Q > 0):
            raise ConfigurationError(f"Q must be finite and positive, got {self.Q}")
        if not (math.isfinite(self.tau0) and self.tau0 > 0):
            raise ConfigurationError(f"tau0 must be finite and positive, got {self.tau0}")
        for name in ("alpha", "beta"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value >= 0):
                raise ConfigurationError(f"{name} must be finite and non-negative, got {value}")


@dataclass
class ACOResult:
    best_tour: List[int]
    best_length: float
    history_best_lengths: List[float]
    config: ACOConfig
    elapsed_sec: float
    history_best_tours: List[List[int]] = field(default_factory=list)


class AntSystem:
    """Classic Ant System: every ant of a generation deposits pheromone."""

    def __init__(self, dist_matrix: Sequence[Sequence[float]], cfg: Optional[ACOConfig] = None,
                 rng: Optional[random.Random] = None):
        self.cfg = cfg or ACOConfig()
        self.cfg.validate()
        self.D = check_distance_matrix(dist_matrix)
        self.n = len(self.D)
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)
        self.pheromone = PheromoneField(self.n, self.cfg.tau0)

        coincident = sum(1 for i in range(self.n) for j in range(i+1, self.n) if self.D[i][j] == 0.0)
        if coincident:
            logger.warning("%d pair(s) of distinct cities coincide; using a sentinel weight for them", coincident)

        self.best_tour: List[int] = []
        self.best_length = math.inf
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[int]] = []

    def _generation(self) -> List[List[int]]:
        cfg = self.cfg
        # all ants read the same pheromone state; the update happens afterwards
        tours = [construct_tour(self.D, self.pheromone, cfg.alpha, cfg.beta, self.rng)
                 for _ in range(cfg.n_ants)]
        lengths = [tour_length(t, self.D) for t in tours]
        for t, L in zip(tours, lengths):
            if L < self.best_length:
                self.best_length = L
                self.best_tour = t
        update_pheromones(self.pheromone, tours, self.D, cfg.rho, cfg.Q, lengths=lengths)
        return tours

    def run(self) -> ACOResult:
        start = time.time()
        self.history_best_lengths = []
        self.history_best_tours = []

        for it in range(self.cfg.n_iterations):
            self._generation()
            self.history_best_lengths.append(self.best_length)
            self.history_best_tours.append(list(self.best_tour))
            logger.debug("generation %d: best length %.4f", it + 1, self.best_length)

        elapsed = time.time() - start
        logger.info("%d generations x %d ants on %d cities: best length %.4f in %.2fs",
                    self.cfg.n_iterations, self.cfg.n_ants, self.n, self.best_length, elapsed)
        return ACOResult(best_tour=list(self.best_tour), best_length=self.best_length,
                         history_best_lengths=self.history_best_lengths, config=self.cfg,
                         elapsed_sec=elapsed, history_best_tours=self.history_best_tours)
