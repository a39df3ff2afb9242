"""
Run parameters for one shock-tube reactor simulation.

Everything the interactive dialog used to collect lives here as plain data,
so the pipeline can run headless.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import cantera as ct

from .errors import ConfigurationError

DEFAULT_SIMULATION_TIME = 0.003   # s
DEFAULT_TIME_STEP = 1.5e-6        # s
DEFAULT_MECHANISM = "gri30.yaml"
DEFAULT_USER_SPECIES = "User_Defined_Species"
OUTPUT_SUFFIX = "_cantera.csv"

# Mechanisms distributed alongside the tool (must sit in the working directory,
# except the ones Cantera ships with). Any other mechanism file also works.
MECHANISMS = (
    "gri30.yaml", "gri30_ion.yaml", "airNASA9.yaml", "curranC8H18.yaml",
    "nDodecane_Reitz.yaml",
    "Decalin_mmc3mech.yaml", "Decalin_mmc3mech_with_Chemi.yaml",
    "Decalin-skeletal.yaml", "Decalin-skeletal_with_Chemi_2.yaml",
    "HyChem_A1highT.yaml", "HyChem_A1NTC.yaml",
    "HyChem_A2highT.yaml", "HyChem_A2NOx.yaml", "HyChem_A2NOx_skeletal.yaml",
    "HyChem_A2NTC.yaml", "HyChem_A2NTC_skeletal.yaml", "HyChem_A2NTCfast.yaml",
    "HyChem_A2NTCfast_ske.yaml", "HyChem_A2NTCslow.yaml", "HyChem_A2skeletal.yaml",
    "HyChem_A3highT.yaml", "HyChem_A3NTC.yaml", "HyChem_A3skeletal.yaml",
    "HyChem_C1A2highT.yaml", "HyChem_C1A2NOx_skeletal.yaml", "HyChem_C1A2skeletal.yaml",
    "HyChem_C1highT.yaml", "HyChem_C1NOx_skeletal.yaml", "HyChem_C1skeletal.yaml",
    "HyChem_C5highT.yaml", "HyChem_C5skeletal.yaml",
    "HyChem_JP10highT.yaml", "HyChem_JP10skeletal.yaml",
    "HyChem_R2highT.yaml", "HyChem_R2NOx_skeletal.yaml", "HyChem_R2skeletal.yaml",
    "HyChem_ShellA_full.yaml", "HyChem_ShellA_highTonly.yaml",
    "HyChem_ShellA_skeletal.yaml",
    "HyChem_ShellD_full.yaml", "HyChem_ShellD_highTonly.yaml",
)


def strip_quotes(text):
    """
    Remove surrounding whitespace and one pair of matching quotes.
    "20240104" and '20240104' both become 20240104.
    """
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        text = text[1:-1].strip()
    return text


@dataclass
class ReactorConfig:
    """
    Inputs for a constant-volume, adiabatic reactor run.

    temperature     : test-section temperature, usually T2 or T5 [K]
    pressure        : test-section pressure, usually P2 or P5 [atm]
    composition     : 'name:fraction' pairs, e.g. 'Ar:0.99,O2:0.009,C3H8:0.001'
    filebase        : output goes to <filebase>_cantera.csv
    fuel            : fuel species name as written in the mechanism
    user_species    : extra species sampled into the last column
    """
    temperature: float
    pressure: float
    composition: str
    filebase: str
    fuel: str
    mechanism: str = DEFAULT_MECHANISM
    simulation_time: float = DEFAULT_SIMULATION_TIME
    time_step: float = DEFAULT_TIME_STEP
    user_species: str = DEFAULT_USER_SPECIES
    output_dir: Path = field(default_factory=Path.cwd)

    def __post_init__(self):
        self.filebase = strip_quotes(str(self.filebase))
        self.composition = strip_quotes(str(self.composition))
        self.fuel = str(self.fuel or "").strip()
        self.user_species = str(self.user_species or "").strip()
        self.output_dir = Path(self.output_dir)

    @property
    def pressure_pa(self):
        return self.pressure * ct.one_atm

    @property
    def output_path(self):
        return self.output_dir / f"{self.filebase}{OUTPUT_SUFFIX}"

    @property
    def plot_path(self):
        return self.output_path.with_suffix(".png")

    def validate(self):
        """Raise ConfigurationError on the first bad field."""
        for name in ("temperature", "pressure", "simulation_time", "time_step"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigurationError(f"{name} must be positive, got {value!r}")
        if self.time_step > self.simulation_time:
            raise ConfigurationError(
                f"time_step ({self.time_step}) exceeds simulation_time "
                f"({self.simulation_time})"
            )
        for name in ("composition", "filebase", "fuel", "user_species", "mechanism"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} must not be empty")
        if os.sep in self.filebase:
            raise ConfigurationError(
                f"filebase {self.filebase!r} must be a name, use output_dir for the folder"
            )
        return self
