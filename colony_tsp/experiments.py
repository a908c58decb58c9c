from __future__ import annotations
import itertools, statistics, os
from typing import Dict, Any, List, Optional
from dataclasses import asdict
import csv
from .tsp import TSPInstance
from .colony import ACOConfig, AntSystem


def run_repeated_trials(instance: TSPInstance, cfg: ACOConfig, n_runs: int = 10, base_seed: int = 42):
    D = instance.distance_matrix()
    lengths = []
    times = []
    best_tours = []
    for r in range(n_runs):
        cfg_r = ACOConfig(**{**asdict(cfg), "seed": base_seed + r})
        res = AntSystem(D, cfg_r).run()
        lengths.append(res.best_length)
        times.append(res.elapsed_sec)
        best_tours.append(res.best_tour)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "n_runs": n_runs,
    }
    return stats, list(zip(lengths, times, best_tours))


def run_parameter_sweep(instance: TSPInstance, param_grid: Dict[str, List[Any]],
                        base_cfg: Optional[ACOConfig] = None, n_runs: int = 5, base_seed: int = 100,
                        csv_path: Optional[str] = None):
    """Repeated trials for every combination in `param_grid` (keys are ACOConfig fields)."""
    base_cfg = base_cfg or ACOConfig()
    keys = sorted(param_grid.keys())
    unknown = set(keys) - set(asdict(base_cfg))
    if unknown:
        raise ValueError(f"Unknown ACOConfig fields: {sorted(unknown)}")
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg = ACOConfig(**{**asdict(base_cfg), **dict(zip(keys, values))})
        stats, _ = run_repeated_trials(instance, cfg, n_runs=n_runs, base_seed=base_seed)
        row = {**{k: getattr(cfg, k) for k in keys}, **stats}
        rows.append(row)
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=row.keys())
                if write_header:
                    w.writeheader()
                w.writerow(row)
    return rows
