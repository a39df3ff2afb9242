import argparse
import logging
import sys

from . import __version__
from .catalog import DEFAULT_SPECIES, load_species_csv
from .config import (
    DEFAULT_MECHANISM,
    DEFAULT_SIMULATION_TIME,
    DEFAULT_TIME_STEP,
    DEFAULT_USER_SPECIES,
    MECHANISMS,
    ReactorConfig,
)
from .errors import (
    ConfigurationError,
    ReportWriteError,
    SimulationCancelled,
    SolverError,
)
from .gas_state import CORRECTION_HINT
from .pipeline import run

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_SOLVER = 3
EXIT_IO = 4
EXIT_INTERRUPTED = 130


def build_parser():
    parser = argparse.ArgumentParser(
        prog="shocktube-reactor",
        description=(
            "Constant-volume, adiabatic zero-D reactor at shock-tube test-section "
            "conditions. Writes mole-fraction histories to <filebase>_cantera.csv."
        ),
    )
    parser.add_argument("-T", "--temperature", type=float,
                        help="Test-section temperature, typically T2 or T5 [K]")
    parser.add_argument("-P", "--pressure", type=float,
                        help="Test-section pressure, typically P2 or P5 [atm]")
    parser.add_argument("-X", "--composition",
                        help="Mixture as name:fraction pairs, e.g. 'Ar:0.99,O2:0.009,C3H8:0.001'")
    parser.add_argument("-o", "--filebase",
                        help="Output written to <filebase>_cantera.csv (quotes are stripped)")
    parser.add_argument("-f", "--fuel", help="Fuel species name as defined in the mechanism")
    parser.add_argument("-m", "--mechanism", default=DEFAULT_MECHANISM,
                        help="Mechanism file in .yaml format (default: %(default)s)")
    parser.add_argument("--simulation-time", type=float, default=DEFAULT_SIMULATION_TIME,
                        help="Simulated time [s] (default: %(default)s)")
    parser.add_argument("--time-step", type=float, default=DEFAULT_TIME_STEP,
                        help="Sampling interval [s] (default: %(default)s)")
    parser.add_argument("--user-species", default=DEFAULT_USER_SPECIES,
                        help="Extra species written in the last column (default: %(default)s)")
    parser.add_argument("--output-dir", default=".",
                        help="Directory for the output file (default: working directory)")
    parser.add_argument("--catalog",
                        help="CSV with key,label,group columns replacing the built-in species list")
    parser.add_argument("--plot", action="store_true",
                        help="Also save temperature and species histories to <filebase>_cantera.png")
    parser.add_argument("--no-prompt", action="store_true",
                        help="Fail instead of asking for a corrected composition")
    parser.add_argument("--list-mechanisms", action="store_true",
                        help="Print the mechanism files distributed with this tool and exit")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def prompt_composition(error, stream=None):
    """Ask once for a corrected composition on the terminal."""
    print(CORRECTION_HINT, file=sys.stderr)
    print(f"Not found: {', '.join(error.species)}", file=sys.stderr)
    print("Corrected composition: ", end="", file=sys.stderr, flush=True)
    reply = (stream or sys.stdin).readline()
    return reply.strip() or None


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.list_mechanisms:
        print("\n".join(MECHANISMS))
        return EXIT_OK

    required = ("temperature", "pressure", "composition", "filebase", "fuel")
    missing = [f"--{name}" for name in required if getattr(args, name) is None]
    if missing:
        parser.error(f"the following arguments are required: {', '.join(missing)}")

    correct = None if args.no_prompt else prompt_composition

    try:
        species = load_species_csv(args.catalog) if args.catalog else DEFAULT_SPECIES
        config = ReactorConfig(
            temperature=args.temperature,
            pressure=args.pressure,
            composition=args.composition,
            filebase=args.filebase,
            fuel=args.fuel,
            mechanism=args.mechanism,
            simulation_time=args.simulation_time,
            time_step=args.time_step,
            user_species=args.user_species,
            output_dir=args.output_dir,
        )
        result = run(config, correct=correct, plot=args.plot, species=species)
    except ConfigurationError as exc:
        logging.error("Configuration error: %s", exc)
        return EXIT_CONFIG
    except SolverError as exc:
        logging.error("Solver error: %s", exc)
        return EXIT_SOLVER
    except (ReportWriteError, OSError) as exc:
        logging.error("I/O error: %s", exc)
        return EXIT_IO
    except (KeyboardInterrupt, SimulationCancelled):
        logging.error("Simulation stopped by user.")
        return EXIT_INTERRUPTED

    print(result.path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
