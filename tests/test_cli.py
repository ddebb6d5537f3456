import matplotlib
matplotlib.use("Agg")

import pytest
from click.testing import CliRunner

from perceptual_volume.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_to_amplitude(runner):
    result = runner.invoke(cli, ["to-amplitude", "0", "0.5", "1", "2"])
    assert result.exit_code == 0, result.output
    assert result.output.split() == ["0", "0.0562341", "1", "1.99526"]


def test_to_perceptual(runner):
    result = runner.invoke(cli, ["to-perceptual", "0", "0.0562341", "1"])
    assert result.exit_code == 0, result.output
    assert [float(v) for v in result.output.split()] == pytest.approx([0.0, 0.5, 1.0], abs=1e-5)


def test_overrides(runner):
    result = runner.invoke(cli, ["--normalized-max", "100", "--range-db", "60",
                                 "to-amplitude", "50"])
    assert result.exit_code == 0, result.output
    assert float(result.output) == pytest.approx(100 * 10 ** (-30 / 20), rel=1e-5)


def test_config_file(runner, tmp_path):
    path = tmp_path / "volume.toml"
    path.write_text("[scale]\nnormalized_max = 100\n")
    result = runner.invoke(cli, ["--config", str(path), "to-amplitude", "100"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "100"


def test_bad_config(runner, tmp_path):
    path = tmp_path / "volume.toml"
    path.write_text("[scale]\nrange_db = -1\n")
    result = runner.invoke(cli, ["--config", str(path), "to-amplitude", "1"])
    assert result.exit_code != 0
    assert "range_db must be positive" in result.output


def test_bad_override(runner):
    result = runner.invoke(cli, ["--boost-range-db", "0", "to-amplitude", "1"])
    assert result.exit_code != 0
    assert "--boost-range-db" in result.output


def test_table(runner):
    result = runner.invoke(cli, ["table", "--steps", "4"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 6
    assert lines[0].split() == ["perceptual", "amplitude", "dB"]
    assert lines[3].split()[:2] == ["1", "1"]
    assert lines[-1].split()[-1] == "6.00"


def test_verbose_reports_scale(runner):
    result = runner.invoke(cli, ["--verbose", "to-amplitude", "1"])
    assert result.exit_code == 0
    assert "range_db=50" in result.output


def test_plot_to_file(runner, tmp_path):
    out = tmp_path / "curve.png"
    result = runner.invoke(cli, ["plot", "--output", str(out), "--points", "21"])
    assert result.exit_code == 0, result.output
    assert out.exists()


@pytest.mark.parametrize("option, value", [
    ("--normalized-max", "inf"),
    ("--range-db", "nan"),
    ("--boost-range-db", "nan"),
])
def test_non_finite_override(runner, option, value):
    result = runner.invoke(cli, [option, value, "to-amplitude", "0.5"])
    assert result.exit_code != 0
    assert option in result.output


def test_bad_config_keeps_cause(runner, tmp_path):
    path = tmp_path / "volume.toml"
    path.write_text("[scale]\nboost_range_db = 0\n")
    result = runner.invoke(cli, ["--config", str(path), "to-amplitude", "1"],
                           standalone_mode=False)
    assert isinstance(result.exception.__cause__, ValueError)
