"""Event driven simulation of a circuit over discrete time steps."""

from __future__ import annotations

import heapq
import itertools
import os
import sys
from typing import IO

from .circuit import Circuit
from .components import Component, Input, Probe
from .output import OutputHandler
from .parser import InputFileHandler

_RULE = "==================="


class Simulator:
    """Propagates input values through a circuit, honouring gate delays."""

    def __init__(
        self,
        circuit: Circuit | None = None,
        input_file_handler: InputFileHandler | None = None,
        output_handler: OutputHandler | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.circuit = circuit
        self.input_file_handler = input_file_handler
        self.output_handler = output_handler
        self.stream = stream
        self._events: list[tuple[int, int, Component]] = []
        self._counter = itertools.count()

    def load_circuit(self, filename: str | os.PathLike) -> Circuit:
        """Load a circuit through the input file handler and make it current.

        On failure the current circuit is kept and the error propagates.
        """
        if self.input_file_handler is None:
            raise RuntimeError("no input file handler configured")
        self.circuit = self.input_file_handler.read_circuit(filename)
        return self.circuit

    def collect_probes(self) -> list[Probe]:
        if self.circuit is None:
            return []
        return [c for c in self.circuit.components if isinstance(c, Probe)]

    def _schedule(self, component: Component, time: int) -> None:
        heapq.heappush(self._events, (time, next(self._counter), component))

    def simulate(self, time_steps: int) -> None:
        """Process events up to and including time ``time_steps``."""
        if self.circuit is None:
            return

        for component in self.circuit.components:
            if isinstance(component, Input):
                self._schedule(component, 0)
            else:
                component.output_value = False

        current_time = 0
        steps = 0
        while self._events and current_time <= time_steps:
            steps += 1
            current_time, _, component = heapq.heappop(self._events)
            if current_time > time_steps:
                break

            old_value = component.output_value
            new_value = component.calculate_output()
            if new_value != old_value or isinstance(component, Input):
                component.output_value = new_value
                for edge in self.circuit.edges:
                    if edge.source is component:
                        target = edge.target
                        self._schedule(target, current_time + target.propagation_delay)

            if self.output_handler is not None:
                self.display_simulation_results(steps)

    def display_simulation_results(self, time_steps: int) -> None:
        """Print the value of every input and probe under a step header."""
        out = self.stream if self.stream is not None else sys.stdout
        components = self.circuit.components if self.circuit is not None else []
        lines = [f"Time step {time_steps}:"]
        lines += [
            f"Input {c.id}: {'HIGH' if c.output_value else 'LOW'}"
            for c in components
            if isinstance(c, Input)
        ]
        lines += [
            f"Probe {p.id}: {'HIGH' if p.recorded_value else 'LOW'}"
            for p in self.collect_probes()
        ]
        lines.append(_RULE)
        out.write("\n".join(lines) + "\n")