"""
Pytest configuration for the shocktube_reactor test suite.

Tests run against real Cantera with the gri30.yaml mechanism it ships with.
"""

import os

# headless plotting
os.environ.setdefault("MPLBACKEND", "Agg")

import cantera as ct
import pytest

from shocktube_reactor import ReactorConfig

MIX = "CH4:0.001, O2:0.009, AR:0.99"


@pytest.fixture
def gas():
    return ct.Solution("gri30.yaml")


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        params = dict(
            temperature=1000.0,
            pressure=1.0,
            composition=MIX,
            filebase="run",
            fuel="CH4",
            simulation_time=1e-4,
            time_step=1e-5,
            output_dir=tmp_path,
        )
        params.update(overrides)
        return ReactorConfig(**params)
    return _make
