import io

import numpy as np
import pandas as pd
import pytest

from shocktube_reactor import UnrecognizedSpeciesError, run
from shocktube_reactor.cli import EXIT_CONFIG, EXIT_IO, EXIT_OK, EXIT_SOLVER, main


def test_default_step_gives_2000_rows(make_config):
    result = run(make_config(simulation_time=0.003, time_step=1.5e-6))
    df = pd.read_csv(result.path)
    assert len(df) == 2000
    np.testing.assert_allclose(df["time"], np.arange(1, 2001) * 1.5e-6, rtol=1e-9)
    assert df["time"].iloc[-1] == pytest.approx(0.003)
    assert df.columns[0] == "time" and df.columns[1] == "CH4"
    assert df.columns[-1] == "User_Defined_Species"


def test_absent_species_columns_are_zero(make_config):
    result = run(make_config())
    df = pd.read_csv(result.path)
    for label in ("HE", "CH*-radical", "OH*-radical", "Benzene C6H6", "Toluene C7H8",
                  "iso-Butene IC4H8", "User_Defined_Species"):
        assert (df[label] == 0.0).all(), label
    assert (df["AR"] > 0.9).all()


def test_quoted_filebases_write_identical_files(make_config, tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    first = run(make_config(filebase='"20240104"', output_dir=tmp_path / "a"))
    second = run(make_config(filebase="'20240104'", output_dir=tmp_path / "b"))
    assert first.path.name == second.path.name == "20240104_cantera.csv"
    assert first.path.read_bytes() == second.path.read_bytes()


def test_rerun_is_byte_identical(make_config):
    first = run(make_config()).path.read_bytes()
    second = run(make_config()).path.read_bytes()
    assert first == second


def test_correction_attempted_once(make_config):
    calls = []

    def correct(error):
        calls.append(error)
        return "AR:0.99, STILL_NOT_THERE:0.01"

    with pytest.raises(UnrecognizedSpeciesError):
        run(make_config(composition="AR:0.99, NOT_THERE:0.01"), correct=correct)
    assert len(calls) == 1
    assert not make_config().output_path.exists()


def test_result_and_plot(make_config):
    result = run(make_config(), plot=True)
    assert result.plot_path.exists()
    assert result.composition == make_config().composition
    assert len(result.series) == 10
    assert result.elapsed > 0


def test_cli_writes_csv(tmp_path, capsys):
    code = main([
        "-T", "1000", "-P", "1", "-X", "CH4:0.001,O2:0.009,AR:0.99",
        "-o", "'cli'", "-f", "CH4",
        "--simulation-time", "1e-4", "--time-step", "1e-5",
        "--output-dir", str(tmp_path), "--no-prompt",
    ])
    assert code == EXIT_OK
    path = tmp_path / "cli_cantera.csv"
    assert str(path) in capsys.readouterr().out
    assert len(pd.read_csv(path)) == 10


def test_cli_unknown_species_without_prompt(tmp_path):
    code = main([
        "-T", "1000", "-P", "1", "-X", "AR:0.99,NOPE:0.01", "-o", "bad", "-f", "CH4",
        "--output-dir", str(tmp_path), "--no-prompt",
    ])
    assert code == EXIT_CONFIG


def test_cli_prompts_for_corrected_composition(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("CH4:0.001,O2:0.009,AR:0.99\n"))
    code = main([
        "-T", "1000", "-P", "1", "-X", "Methane:0.001,O2:0.009,AR:0.99", "-o", "fixed",
        "-f", "CH4", "--simulation-time", "1e-4", "--time-step", "1e-5",
        "--output-dir", str(tmp_path),
    ])
    assert code == EXIT_OK
    assert (tmp_path / "fixed_cantera.csv").exists()


def test_cli_missing_mechanism(tmp_path):
    code = main([
        "-T", "1000", "-P", "1", "-X", "AR:1", "-o", "m", "-f", "CH4",
        "-m", "not_a_mechanism.yaml", "--output-dir", str(tmp_path),
    ])
    assert code == EXIT_SOLVER


def test_cli_unwritable_output(tmp_path):
    code = main([
        "-T", "1000", "-P", "1", "-X", "AR:1", "-o", "m", "-f", "CH4",
        "--simulation-time", "1e-5", "--time-step", "1e-5",
        "--output-dir", str(tmp_path / "nowhere"),
    ])
    assert code == EXIT_IO


def test_cli_requires_inputs():
    with pytest.raises(SystemExit):
        main(["-T", "1000"])


def test_cli_list_mechanisms(capsys):
    assert main(["--list-mechanisms"]) == EXIT_OK
    assert "gri30.yaml" in capsys.readouterr().out.splitlines()


@pytest.mark.parametrize("content", ["", "key,label,group\nOH,OH,ignition_markers\nCO,CO,products,x,y\n"])
def test_cli_bad_catalog_file(tmp_path, content):
    catalog = tmp_path / "species.csv"
    catalog.write_text(content)
    code = main([
        "-T", "1000", "-P", "1", "-X", "AR:1", "-o", "c", "-f", "CH4",
        "--catalog", str(catalog), "--output-dir", str(tmp_path),
    ])
    assert code == EXIT_CONFIG
    assert not (tmp_path / "c_cantera.csv").exists()
