import os
import sys

# Ensure local modules are importable (project root)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from shocktube_reactor import ReactorConfig, run


def main():
    print("--- Constant-volume, adiabatic reactor: shock-tube test section ---")

    # 1. Conditions (T5/P5 behind the reflected shock)
    T5 = 1500.0    # K
    P5 = 2.0       # atm
    MIX = "Ar:0.99,O2:0.009,C3H8:0.001"

    config = ReactorConfig(
        temperature=T5,
        pressure=P5,
        composition=MIX,
        mechanism="gri30.yaml",
        filebase="'20240104'",
        fuel="C3H8",
        simulation_time=0.003,
        time_step=1.5e-6,
    )

    # 2. Run + write <filebase>_cantera.csv
    try:
        result = run(config, plot=True)
    except KeyboardInterrupt:
        print("\nSimulation stopped by user.")
        return

    # 3. Quick summary
    T = result.series.temperatures
    print(f"Simulation completed in {len(result.series)} steps, t={result.series.times[-1]:.6f}s")
    print(f"T: {T[0]:.1f} K -> {T[-1]:.1f} K")
    print(f"Result saved to '{result.path}'")


if __name__ == "__main__":
    main()
