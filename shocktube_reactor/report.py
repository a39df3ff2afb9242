"""
CSV export of the mole-fraction history, plus an optional quick-look plot.

Columns: time, fuel, fixed catalog species in group order, user slot.
Species missing from the mechanism are written as zero columns.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .errors import ReportWriteError
from .log import get_logger

log = get_logger(__name__)

# plotted by default when present in the mechanism
PLOT_SPECIES = ("OH", "CH", "CO", "CO2", "H2O", "CH2O")


def build_table(series, catalog):
    if list(series.species_keys) != catalog.keys:
        raise ValueError("series was sampled with a different species catalog")
    data = np.column_stack([series.times, series.mole_fractions])
    return pd.DataFrame(data, columns=catalog.columns)


def write_report(series, catalog, path):
    """Write the table to `path` (no index column). Returns the DataFrame."""
    df = build_table(series, catalog)
    try:
        df.to_csv(path, index=False)
    except OSError as exc:
        raise ReportWriteError(path, exc.strerror or exc) from exc
    log.info("Saved: %s (%d rows x %d columns)", path, len(df), len(df.columns))
    return df


def plot_histories(series, catalog, path, species=None):
    """
    Temperature (top) and mole fractions (bottom, log scale) against time.
    species defaults to the fuel plus PLOT_SPECIES; all-zero columns are skipped.
    """
    if species is None:
        species = [catalog.keys[0]] + [k for k in PLOT_SPECIES if k in catalog.keys]

    t_ms = series.times * 1e3
    fig, (ax_T, ax_X) = plt.subplots(2, 1, figsize=(7, 7), sharex=True)

    ax_T.plot(t_ms, series.temperatures, "k-", lw=1.5)
    ax_T.set_ylabel("Temperature [K]")
    ax_T.grid(True, linestyle="--", alpha=0.4)

    labels = dict(zip(catalog.keys, catalog.labels))
    plotted = 0
    for key in species:
        if key not in series.species_keys:
            log.warning("%s was not sampled, skipping", key)
            continue
        x = series.species(key)
        if not np.any(x > 0):
            continue
        ax_X.semilogy(t_ms, np.where(x > 0, x, np.nan), lw=1.2, label=labels.get(key, key))
        plotted += 1

    ax_X.set_xlabel("Time [ms]")
    ax_X.set_ylabel("Mole Fraction [-]")
    ax_X.grid(True, which="both", linestyle="--", alpha=0.4)
    if plotted:
        ax_X.legend(fontsize=8)

    fig.tight_layout()
    try:
        fig.savefig(path, dpi=200)
    except OSError as exc:
        raise ReportWriteError(path, exc.strerror or exc) from exc
    finally:
        plt.close(fig)
    log.info("Generated: %s", path)
    return path
