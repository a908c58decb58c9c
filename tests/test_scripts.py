import run_experiments
import visualize


def test_visualize_main(tmp_path, capsys):
    rc = visualize.main(["--n", "5", "--seed", "1", "--ants", "5", "--iters", "10",
                         "--outdir", str(tmp_path), "--gif", "--step", "5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "City 0" in out
    assert "Best route:" in out
    assert (tmp_path / "route.png").exists()
    assert (tmp_path / "convergence.gif").exists()


def test_run_experiments_main(tmp_path):
    rc = run_experiments.main(["--n", "6", "--runs", "2", "--iters", "3", "--ants", "3",
                               "--outdir", str(tmp_path)])
    assert rc == 0
    assert (tmp_path / "results_summary.csv").exists()
    assert (tmp_path / "results_distribution.png").exists()
    assert (tmp_path / "convergence_rho0.5.png").exists()
