"""configure -> step-and-sample -> write, once per call."""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .catalog import DEFAULT_SPECIES, SpeciesCatalog
from .gas_state import configure_gas
from .log import get_logger
from .reactor import run_reactor
from .report import plot_histories, write_report
from .series import TimeSeries

log = get_logger(__name__)


@dataclass
class RunResult:
    path: Path
    series: TimeSeries
    catalog: SpeciesCatalog
    composition: str
    elapsed: float
    plot_path: Optional[Path] = None


def run(config, correct=None, cancel=None, plot=False, species=DEFAULT_SPECIES):
    """
    Run one shock-tube reactor simulation and write <filebase>_cantera.csv.

    correct : called once with an UnrecognizedSpeciesError to get a corrected
              composition string (see gas_state.configure_gas).
    cancel  : object with is_set(), checked before every reactor step.
    species : fixed catalog entries between the fuel and the user slot.
    """
    start = time.perf_counter()
    config.validate()

    gas, composition = configure_gas(config, correct=correct)
    catalog = SpeciesCatalog.build(config.fuel, config.user_species, species)

    series = run_reactor(gas, catalog, config.simulation_time, config.time_step, cancel=cancel)
    path = config.output_path
    write_report(series, catalog, path)

    plot_path = None
    if plot:
        plot_path = plot_histories(series, catalog, config.plot_path)

    elapsed = time.perf_counter() - start
    log.info("Elapsed time is %.3f seconds.", elapsed)
    return RunResult(path, series, catalog, composition, elapsed, plot_path)
