"""
Build the Cantera gas at the test-section state.

Species names in the composition must be listed in the mechanism's species
block; being in the elements block doesn't count. Name matching is Cantera's,
which is case-insensitive when the match is unique (Ar and AR both work).
"""

import cantera as ct

from .config import strip_quotes
from .errors import ConfigurationError, SolverError, UnrecognizedSpeciesError
from .log import get_logger

log = get_logger(__name__)

CORRECTION_HINT = (
    "Cantera did not recognize one of your components. Check the \"species\" "
    "block of your mechanism file to make sure your names match, then change "
    "the composition string. Note: being listed in the \"elements\" block "
    "doesn't count. Species need to be listed in the species block, and have "
    "composition, thermo, and in some cases transport information listed "
    "further down."
)


def load_mechanism(mechanism):
    """ct.Solution from a mechanism file (working directory or Cantera data path)."""
    try:
        return ct.Solution(mechanism)
    except ct.CanteraError as exc:
        raise SolverError(f"Could not load mechanism {mechanism}: {exc}") from exc


def parse_composition(spec):
    """
    'Ar:0.99, O2:0.009, C3H8:0.001' -> [('Ar', 0.99), ('O2', 0.009), ('C3H8', 0.001)]
    Fractions need not sum to 1; Cantera normalizes.
    """
    pairs = []
    for item in spec.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, value = item.rpartition(":")
        name = name.strip()
        if not sep or not name:
            raise ConfigurationError(f"expected name:fraction, got {item!r}")
        try:
            fraction = float(value)
        except ValueError:
            raise ConfigurationError(f"bad mole fraction in {item!r}") from None
        if fraction < 0:
            raise ConfigurationError(f"negative mole fraction in {item!r}")
        pairs.append((name, fraction))
    if not pairs:
        raise ConfigurationError(f"empty composition {spec!r}")
    return pairs


def unknown_species(gas, names):
    missing = []
    for name in names:
        try:
            gas.species_index(name)
        except (ValueError, ct.CanteraError):
            missing.append(name)
    return missing


def set_gas_state(gas, temperature, pressure, composition):
    """
    Set T [K], P [Pa] and mole fractions. Unknown species raise
    UnrecognizedSpeciesError; anything else Cantera rejects is a SolverError.
    """
    pairs = parse_composition(composition)
    missing = unknown_species(gas, [name for name, _ in pairs])
    if missing:
        raise UnrecognizedSpeciesError(missing, mechanism=getattr(gas, "source", None))
    try:
        gas.TPX = temperature, pressure, composition
    except ct.CanteraError as exc:
        raise SolverError(f"Could not set gas state: {exc}") from exc
    return gas


def configure_gas(config, correct=None):
    """
    Load the mechanism and set the initial state from a ReactorConfig.

    If the composition names an unknown species and `correct` is given,
    correct(error) is called once and must return a new composition string.
    The second attempt is final. Returns (gas, composition actually used).
    """
    gas = load_mechanism(config.mechanism)
    composition = config.composition
    try:
        set_gas_state(gas, config.temperature, config.pressure_pa, composition)
    except UnrecognizedSpeciesError as exc:
        if correct is None:
            raise
        log.warning("%s", exc)
        composition = correct(exc)
        if composition is None:
            raise
        composition = strip_quotes(composition)
        log.info("Retrying with composition %r", composition)
        set_gas_state(gas, config.temperature, config.pressure_pa, composition)

    log.info(
        "Gas state: T=%.1f K, P=%.4g Pa, X={%s} (%s, %d species)",
        gas.T, gas.P, composition, config.mechanism, gas.n_species,
    )
    return gas, composition
