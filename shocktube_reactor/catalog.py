"""
Species sampled at every step and the column labels they are written under.

The lookup key is what Cantera is asked for; the label is only the CSV header.
Sampling and header text are both taken from the same ordered entries, so a
value can never land under another species' header.
"""

from dataclasses import dataclass

import pandas as pd

from .errors import ConfigurationError

GROUPS = ("fuel", "reactants", "ignition_markers", "products", "intermediates", "user")


@dataclass(frozen=True)
class SpeciesEntry:
    key: str
    label: str
    group: str


def _entries(group, pairs):
    return tuple(SpeciesEntry(key, label, group) for key, label in pairs)


DEFAULT_SPECIES = (
    # O2 + inerts
    _entries("reactants", [
        ("HE", "HE"), ("AR", "AR"), ("N2", "N2"), ("O2", "O2"),
    ])
    # ignition markers
    + _entries("ignition_markers", [
        ("CH2O", "CH2O"), ("CH", "CH"),
        ("CH*", "CH*-radical"), ("CHV", "CHV-radical"), ("SCH", "SCH-radical"),
        ("CH-S", "CH-S-radical"),
        ("OH", "OH"),
        ("OH*", "OH*-radical"), ("OHV", "OHV-radical"), ("SOH", "SOH-radical"),
        ("OH-S", "OH-S-radical"),
        ("CH3", "CH3"), ("H", "H"),
    ])
    + _entries("products", [
        ("H2O", "H2O"), ("CO", "CO"), ("CO2", "CO2"), ("NO", "NO"), ("NO2", "NO2"),
    ])
    # HyChem intermediates
    + _entries("intermediates", [
        ("C2H4", "Ethylene C2H4"), ("H2", "Hydrogen H2"), ("CH4", "Methane CH4"),
        ("C2H2", "acetylene C2H2"), ("C3H6", "Propene C3H6"), ("C3H8", "Propane C3H8"),
        ("IC4H8", "iso-Butene IC4H8"), ("C4H8-1", "1-butene C4H8-1"),
        ("C4H8-2", "2-Butene C4H8-2"), ("C6H6", "Benzene C6H6"), ("C7H8", "Toluene C7H8"),
    ])
)


class SpeciesCatalog:
    """
    Ordered species list for one run: fuel first, then the fixed entries in
    group order, then the user-defined slot.
    """

    def __init__(self, entries):
        self.entries = tuple(entries)

    @classmethod
    def build(cls, fuel, user_species, entries=DEFAULT_SPECIES):
        fixed = sorted(entries, key=lambda e: _group_rank(e.group))
        if any(e.group in ("fuel", "user") for e in fixed):
            raise ConfigurationError("fuel and user slots are added per run, not in the fixed catalog")
        return cls(
            (SpeciesEntry(fuel, fuel, "fuel"),)
            + tuple(fixed)
            + (SpeciesEntry(user_species, user_species, "user"),)
        )

    @property
    def keys(self):
        return [e.key for e in self.entries]

    @property
    def labels(self):
        return [e.label for e in self.entries]

    @property
    def columns(self):
        return ["time"] + self.labels

    def group(self, name):
        return [e for e in self.entries if e.group == name]

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def _group_rank(group):
    try:
        return GROUPS.index(group)
    except ValueError:
        raise ConfigurationError(
            f"unknown species group {group!r}, expected one of {', '.join(GROUPS)}"
        ) from None


def load_species_csv(path):
    """
    Read a fixed catalog from a CSV with columns key,label,group.
    A blank label falls back to the key. Row order is kept within each group.
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise ConfigurationError(f"{path}: unreadable species catalog ({exc})") from exc
    missing = {"key", "group"} - set(df.columns)
    if missing:
        raise ConfigurationError(f"{path}: missing column(s) {', '.join(sorted(missing))}")
    if "label" not in df.columns:
        df["label"] = ""

    entries = []
    for row in df.itertuples(index=False):
        key = row.key.strip()
        if not key:
            raise ConfigurationError(f"{path}: empty species key")
        group = row.group.strip()
        _group_rank(group)
        entries.append(SpeciesEntry(key, row.label.strip() or key, group))
    return tuple(entries)
