"""Command line entry point: load a circuit file and simulate it."""

from __future__ import annotations

import logging
import sys

from .output import OutputHandler
from .parser import CircuitParseError, InputFileHandler
from .simulator import Simulator

SIMULATION_STEPS = 10


def main(argv: list[str] | None = None) -> int:
    """Run the simulator on the circuit file named by the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("Circuit Simulator")
    print("=================")

    if not args:
        print("Usage: circuitsim <path_to_circuit_file>")
        print("For example: circuitsim test_circuits/full_adder.txt")
        return 1

    path = args[0]
    print(f"Circuit file: {path}")

    package_logger = logging.getLogger("circuitsim")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)
    try:
        simulator = Simulator(
            input_file_handler=InputFileHandler(),
            output_handler=OutputHandler(sys.stdout),
            stream=sys.stdout,
        )
        try:
            simulator.load_circuit(path)
        except CircuitParseError as exc:
            print(f"Error while parsing the circuit: {exc}")
            print(f"Error loading circuit from file: {path}")
            return 1

        print("Circuit loaded successfully.")
        print("\nStarting simulation...")
        simulator.simulate(SIMULATION_STEPS)
        print("\nSimulation complete.")
        return 0
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


if __name__ == "__main__":
    sys.exit(main())