"""
Zero-D, constant-volume, adiabatic reactor runs for shock-tube experiments.

    from shocktube_reactor import ReactorConfig, run
    run(ReactorConfig(temperature=1500, pressure=2.0,
                      composition="Ar:0.99,O2:0.009,C3H8:0.001",
                      filebase="20240104", fuel="C3H8"))
"""

__version__ = "1.1.0"

from .catalog import DEFAULT_SPECIES, SpeciesCatalog, SpeciesEntry, load_species_csv
from .config import MECHANISMS, ReactorConfig, strip_quotes
from .errors import (
    ConfigurationError,
    ReportWriteError,
    ShockTubeError,
    SimulationCancelled,
    SolverError,
    UnrecognizedSpeciesError,
)
from .gas_state import configure_gas, set_gas_state
from .pipeline import RunResult, run
from .reactor import run_reactor, step_count
from .report import plot_histories, write_report
from .series import TimeSeries
