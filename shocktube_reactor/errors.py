"""Exception types raised by the reactor pipeline."""


class ShockTubeError(Exception):
    """Base class for every failure the pipeline reports to its caller."""


class ConfigurationError(ShockTubeError, ValueError):
    """Run parameters are missing or out of range."""


class UnrecognizedSpeciesError(ConfigurationError):
    """
    The composition string names species that are not in the mechanism's
    species block. `species` holds the offending names as typed by the user.
    """

    def __init__(self, species, mechanism=None):
        self.species = tuple(species)
        self.mechanism = mechanism
        names = ", ".join(self.species)
        where = f" in {mechanism}" if mechanism else ""
        super().__init__(f"Unrecognized species{where}: {names}")


class SolverError(ShockTubeError):
    """Cantera failed to load the mechanism, set the state, or advance the network."""


class ReportWriteError(ShockTubeError, OSError):
    """The output table could not be written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class SimulationCancelled(ShockTubeError):
    """The caller asked the stepping loop to stop."""
