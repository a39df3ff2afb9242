"""
Constant-volume, adiabatic zero-D reactor stepped at a fixed interval.

Reactor network follows Cantera's NonIdealShockTube example; the time history
is sampled at n*dt instead of at every internal solver step, which keeps the
row count predictable.
"""

import math

import cantera as ct
import numpy as np

from .errors import ConfigurationError, SimulationCancelled, SolverError
from .log import get_logger
from .series import TimeSeries

log = get_logger(__name__)


def step_count(duration, dt):
    """
    Number of fixed steps, ceil(duration/dt).

    A ratio within round-off of an integer counts as that integer
    (0.003 / 1.5e-6 -> 2000). Otherwise the last step overshoots duration.
    """
    if not (duration > 0 and dt > 0):
        raise ConfigurationError(f"duration and dt must be positive, got {duration}, {dt}")
    ratio = duration / dt
    nearest = round(ratio)
    if math.isclose(ratio, nearest, rel_tol=1e-9):
        return max(int(nearest), 1)
    return math.ceil(ratio)


def species_indices(gas, keys):
    """Index of each key in the mechanism, -1 where the species is absent."""
    idx = np.full(len(keys), -1, dtype=int)
    for i, key in enumerate(keys):
        try:
            idx[i] = gas.species_index(key)
        except (ValueError, ct.CanteraError):
            log.debug("%s not in mechanism, column will be zero", key)
    return idx


def run_reactor(gas, catalog, duration, dt, cancel=None):
    """
    Advance a Reactor/ReactorNet around `gas` to n*dt for n = 1..N and
    sample network time, reactor temperature and the catalog's mole fractions.

    cancel: optional object with is_set() (threading.Event works); checked
    before each step.
    Returns a closed TimeSeries.
    """
    keys = catalog.keys
    idx = species_indices(gas, keys)
    present = idx >= 0
    absent = [k for k, ok in zip(keys, present) if not ok]
    if absent:
        log.info("Not in mechanism (zero-filled): %s", ", ".join(absent))

    # shares `gas` with the caller; for an ideal gas, ct.IdealGasReactor is equivalent
    r = ct.Reactor(gas, clone=False)
    sim = ct.ReactorNet([r])

    nsteps = step_count(duration, dt)
    series = TimeSeries(keys)
    print_every = max(nsteps // 10, 1)

    log.info("Starting Simulation: t_end=%gs, dt=%gs, %d steps", duration, dt, nsteps)
    for n in range(1, nsteps + 1):
        if cancel is not None and cancel.is_set():
            raise SimulationCancelled(f"stopped before step {n} of {nsteps}")

        t = n * dt
        try:
            sim.advance(t)
        except ct.CanteraError as exc:
            raise SolverError(f"Reactor network failed to advance to t={t:.6e}s: {exc}") from exc

        X = r.phase.X
        series.append(sim.time, r.T, np.where(present, X[idx], 0.0))

        if n % print_every == 0 or n == nsteps:
            log.info("step %05d/%d | t=%.6es | T=%.1f K", n, nsteps, sim.time, r.T)

    return series.close()
