"""Presentation helpers: distance table, result text, route plots and GIFs."""
from __future__ import annotations
import os, shutil, tempfile
from typing import List, Optional, Sequence

import imageio
import matplotlib.pyplot as plt
import pandas as pd

from .colony import ACOResult
from .tsp import TSPInstance


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def distance_table(instance: TSPInstance) -> pd.DataFrame:
    """One row per unordered city pair (i < j)."""
    D = instance.distance_matrix()
    n = instance.n_cities()
    rows = [{"city1": f"City {i}", "city2": f"City {j}", "distance": D[i][j]}
            for i in range(n) for j in range(i + 1, n)]
    return pd.DataFrame(rows, columns=["city1", "city2", "distance"])


def format_result(tour: Sequence[int], length: float) -> str:
    return f"Best route: {list(tour)}\nLength: {length}"


def tour_to_xy(coords, tour):
    xs = [coords[i][0] for i in tour] + [coords[tour[0]][0]]
    ys = [coords[i][1] for i in tour] + [coords[tour[0]][1]]
    return xs, ys


def draw_route(ax, coords, tour: Optional[List[int]], title: str):
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    ax.plot(cx, cy, "o", color="red")  # cities
    if tour:
        xs, ys = tour_to_xy(coords, tour)
        ax.plot(xs, ys, "-", color="blue", linewidth=2)
    ax.set_title(title)
    ax.set_aspect("equal", adjustable="box")


def plot_route(instance: TSPInstance, tour: List[int], save_path: str, title: Optional[str] = None):
    fig, ax = plt.subplots(figsize=(5, 5))
    if title is None:
        title = f"{instance.name}: length={instance.tour_length(tour):.2f}"
    draw_route(ax, instance.coords, tour, title)
    fig.tight_layout()
    fig.savefig(ensure(save_path), dpi=150, bbox_inches="tight")
    plt.close(fig)


def plot_convergence(history_best_lengths: Sequence[float], save_path: str, title: str = "AS convergence"):
    plt.figure()
    plt.plot(history_best_lengths)
    plt.xlabel("Iteration")
    plt.ylabel("Best-so-far tour length")
    plt.title(title)
    plt.savefig(ensure(save_path), dpi=150, bbox_inches="tight")
    plt.close()


def make_gif(instance: TSPInstance, result: ACOResult, save_gif: str, step: int = 5,
             frames_dir: Optional[str] = None, keep_frames: bool = False) -> List[str]:
    """Render the best-so-far tour every `step` generations into a GIF.

    Frames go to a temp folder that is removed afterwards unless
    `frames_dir` is given. Returns the frame paths.
    """
    tmpdir_was_auto = False
    if frames_dir is None:
        frames_dir = tempfile.mkdtemp(prefix="aco_frames_")
        tmpdir_was_auto = True
    else:
        os.makedirs(frames_dir, exist_ok=True)

    frames = []
    try:
        for it in range(0, len(result.history_best_tours), step):
            tour = result.history_best_tours[it]
            L = result.history_best_lengths[it]
            fig, ax = plt.subplots(figsize=(5, 5))
            try:
                draw_route(ax, instance.coords, tour, f"best-so-far\niter={it+1} length={L:.2f}")
                fig.tight_layout()
                frame_path = os.path.join(frames_dir, f"frame_{it:04d}.png")
                fig.savefig(frame_path, dpi=100)  # fixed size so every frame matches
            finally:
                plt.close(fig)
            frames.append(frame_path)

        with imageio.get_writer(ensure(save_gif), mode="I", duration=0.6) as w:
            for fp in frames:
                w.append_data(imageio.v2.imread(fp))
    finally:
        if tmpdir_was_auto and not keep_frames:
            shutil.rmtree(frames_dir, ignore_errors=True)
    return frames
