# run_experiments.py
import os, json, argparse

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from colony_tsp import TSPInstance, ACOConfig, AntSystem
from colony_tsp.experiments import run_repeated_trials, run_parameter_sweep
from colony_tsp.report import ensure, plot_convergence

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def plot_scatter(details_by_label, save_path):
    plt.figure()
    labels = list(details_by_label.keys())
    for i, label in enumerate(labels, start=1):
        lengths = [L for (L, t, tour) in details_by_label[label]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(labels) + 1), labels)
    plt.ylabel("Best tour length")
    plt.title("Best lengths across runs")
    plt.savefig(ensure(save_path), dpi=150, bbox_inches="tight")
    plt.close()


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=20)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--iters", type=int, default=150)
    ap.add_argument("--ants", type=int, default=25)
    ap.add_argument("--sweep", action="store_true", help="run an alpha/beta/rho grid search")
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args(argv)

    inst = TSPInstance.random_euclidean(n=args.n, seed=123, width=args.square, name=f"demo{args.n}")
    # evaporation rates compared side by side
    configs = {f"rho={rho}": ACOConfig(rho=rho, n_ants=args.ants, n_iterations=args.iters)
               for rho in (0.1, 0.5, 0.9)}

    records = []
    details_by_label = {}
    for label, cfg in configs.items():
        stats, details = run_repeated_trials(inst, cfg, n_runs=args.runs)
        print(label, json.dumps(stats, indent=2))
        records.append({"config": label, **stats})
        details_by_label[label] = details

    df_summary = pd.DataFrame.from_records(records)
    df_summary.to_csv(ensure(os.path.join(args.outdir, "results_summary.csv")), index=False)
    plot_scatter(details_by_label, os.path.join(args.outdir, "results_distribution.png"))

    for label, cfg in configs.items():
        res = AntSystem(inst.distance_matrix(), cfg).run()
        plot_convergence(res.history_best_lengths,
                         os.path.join(args.outdir, f"convergence_{label.replace('=', '')}.png"),
                         title=f"AS convergence ({label})")

    if args.sweep:
        grid = {"alpha": [0.5, 1.0, 1.5], "beta": [2.0, 3.0, 4.0], "rho": [0.1, 0.5]}
        rows = run_parameter_sweep(inst, grid, base_cfg=configs["rho=0.5"], n_runs=3, base_seed=500,
                                   csv_path=os.path.join(args.outdir, "as_grid.csv"))
        print("Grid search evaluated:", len(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
