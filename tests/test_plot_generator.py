import os

import pytest

from plot_generator import Config, Plotter, validate_config, main


def small_config(tmp_path):
    config = Config()
    config.FIGURES_DIR = str(tmp_path / "figures")
    config.PRIME_MAX_N = 30
    config.ZETA_T_MAX = 5.0
    config.ZETA_T_STEP = 0.5
    config.ZETA_TERMS = 50
    config.ZETA_CHUNKS = 2
    config.PROGRESS = False
    config.PLOT_FILE_FORMAT = "png"
    config.PLOT_DPI = 40
    config.PLOT_PRIMES_FIGSIZE = (6, 4)
    config.PLOT_ZETA_FIGSIZE = (5, 5)
    return config


def test_plotter_writes_both_figures(tmp_path):
    plotter = Plotter(small_config(tmp_path))
    primes_file = plotter.generate_prime_distribution_plot()
    zeta_file = plotter.generate_zeta_critical_line_plot()
    for filename in (primes_file, zeta_file):
        assert filename.endswith(".png")
        assert os.path.isfile(filename)
        assert os.path.getsize(filename) > 0


@pytest.mark.parametrize("attr,value", [
    ("PRIME_MAX_N", 1),
    ("ZETA_TERMS", 0),
    ("ZETA_T_STEP", 0.0),
    ("LI_STEP", -0.1),
    ("PLOT_DPI", 0),
    ("PLOT_FILE_FORMAT", "bogus"),
])
def test_invalid_config_is_rejected(tmp_path, attr, value):
    config = small_config(tmp_path)
    setattr(config, attr, value)
    with pytest.raises(ValueError):
        validate_config(config)
    with pytest.raises(ValueError):
        Plotter(config)


def test_main_renders_single_figure(tmp_path):
    out = tmp_path / "out"
    code = main([
        "--figures-dir", str(out), "--only", "zeta",
        "--t-max", "4", "--t-step", "0.5", "--terms", "40",
        "--format", "png", "--dpi", "40", "--no-progress",
    ])
    assert code == 0
    assert (out / "plot_zeta_critical_line.png").is_file()
    assert not (out / "plot_prime_distribution.png").exists()


def test_main_reports_bad_arguments(tmp_path, capsys):
    code = main(["--figures-dir", str(tmp_path), "--terms", "0", "--no-progress"])
    assert code == 2
    assert "terms" in capsys.readouterr().err


def test_main_rejects_non_positive_dpi_before_rendering(tmp_path, capsys):
    out = tmp_path / "out"
    code = main(["--figures-dir", str(out), "--format", "png", "--dpi", "0", "--no-progress"])
    assert code == 2
    assert "dpi" in capsys.readouterr().err
    assert not out.exists()


def test_main_rejects_unknown_format(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--figures-dir", str(tmp_path), "--format", "bogus", "--no-progress"])
    assert exc.value.code == 2
