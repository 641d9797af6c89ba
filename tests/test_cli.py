# tests/test_cli.py

import numpy as np
import pytest

from elpmoon.cli import main


def test_position_default_frame(capsys):
    assert main(["position", "--t", "0"]) == 0
    out = capsys.readouterr().out
    assert "frame = elp" in out
    assert "longitude" in out
    assert "distance" in out


def test_position_fk5_prints_rectangular(capsys):
    assert main(["position", "--jd-tt", "2448724.5", "--frame", "fk5"]) == 0
    out = capsys.readouterr().out
    assert "JD_TT = 2448724.500000" in out
    assert "x =" in out and "z =" in out


def test_position_reference_wiring(capsys):
    assert main(["position", "--t", "0.1", "--earth-figure-linear", "reference"]) == 0
    assert "latitude" in capsys.readouterr().out


def test_unknown_frame_is_rejected():
    with pytest.raises(SystemExit):
        main(["position", "--frame", "galactic"])


def test_time_options_are_exclusive():
    with pytest.raises(SystemExit):
        main(["position", "--t", "0", "--jd-tt", "2451545.0"])


def test_args(capsys):
    assert main(["args"]) == 0
    out = capsys.readouterr().out
    assert "785939.955710" in out
    assert "Neptune" in out


def test_contributions(capsys):
    assert main(["contributions", "--t", "0.2"]) == 0
    out = capsys.readouterr().out
    for name in ("main_problem", "earth_figure_t", "solar_eccentricity_t2", "mean_longitude"):
        assert name in out


def test_diag_delaunay_check(capsys):
    assert main(["diag", "delaunay-check", "--steps", "5", "--t-min", "-1", "--t-max", "1"]) == 0
    assert "Max |algebraic - direct|" in capsys.readouterr().out


def test_bad_elp_dir_exit_code(tmp_path, capsys):
    assert main(["position", "--elp-dir", str(tmp_path / "nope")]) == 2
    assert "elpmoon:" in capsys.readouterr().err


def test_contributions_plot(tmp_path, capsys):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    out = tmp_path / "contrib.png"
    assert main(["diag", "contributions-plot", "--steps", "5", "--out-png", str(out)]) == 0
    assert out.exists()


def test_contributions_sample_shapes():
    from elpmoon.diagnostics.contributions_plot import sample

    data = sample([-1.0, 0.0, 1.0])
    assert data["solar_eccentricity_t2"].shape == (3, 3)
    assert np.all(data["solar_eccentricity_t2"][1] == 0.0)
