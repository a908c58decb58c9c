import os, argparse, logging

from colony_tsp import TSPInstance, ACOConfig, AntSystem
from colony_tsp.report import distance_table, format_result, plot_route, make_gif


def main(argv=None):
    p = argparse.ArgumentParser(description="Generate random cities and route them with Ant System.")
    p.add_argument("--n", type=int, default=10, choices=[5, 10, 15, 20], help="number of cities")
    p.add_argument("--width", type=float, default=600.0)
    p.add_argument("--height", type=float, default=400.0)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--ants", type=int, default=100)
    p.add_argument("--iters", type=int, default=1000)
    p.add_argument("--alpha", type=float, default=1.0)
    p.add_argument("--beta", type=float, default=2.0)
    p.add_argument("--rho", type=float, default=0.5, help="evaporation rate in [0, 1)")
    p.add_argument("--Q", type=float, default=100.0, help="pheromone deposit scale")
    p.add_argument("--outdir", default="viz")
    p.add_argument("--gif", action="store_true", help="also save a best-so-far GIF")
    p.add_argument("--step", type=int, default=25, help="frame every k iterations")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    inst = TSPInstance.random_euclidean(n=args.n, seed=args.seed, width=args.width,
                                        height=args.height, name=f"map{args.n}")
    print(distance_table(inst).to_string(index=False))

    cfg = ACOConfig(n_ants=args.ants, n_iterations=args.iters, alpha=args.alpha, beta=args.beta,
                    rho=args.rho, Q=args.Q, seed=args.seed)
    res = AntSystem(inst.distance_matrix(), cfg).run()
    print(format_result(res.best_tour, res.best_length))

    route_png = os.path.join(args.outdir, "route.png")
    plot_route(inst, res.best_tour, route_png)
    print("Saved:", route_png)
    if args.gif:
        gif_path = os.path.join(args.outdir, "convergence.gif")
        make_gif(inst, res, gif_path, step=args.step)
        print("Saved:", gif_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
