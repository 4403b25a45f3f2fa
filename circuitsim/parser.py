"""Reading circuit descriptions from text."""

from __future__ import annotations

import logging
import os

from .circuit import Circuit
from .components import Component, Edge, LogicGate, Probe
from .factory import ComponentFactory, default_factory

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\f\v"

_COMPONENT_MARKERS = (
    "INPUT_HIGH",
    "INPUT_LOW",
    "PROBE",
    "AND;",
    "NOT;",
    "NAND;",
    "NOR;",
    "XOR;",
)


class CircuitParseError(Exception):
    """Raised when a circuit description cannot be read or understood."""


def _clean(line: str) -> str:
    """Strip a comment and surrounding whitespace from one line."""
    return line.split("#", 1)[0].strip(_WHITESPACE)


def _is_component_line(line: str) -> bool:
    if any(marker in line for marker in _COMPONENT_MARKERS):
        return True
    return "OR;" in line and "XOR;" not in line


def _split_definition(line: str) -> tuple[str, str] | None:
    """Split ``id: body;`` into its id and body, or None without ':' and ';'."""
    colon = line.find(":")
    semicolon = line.find(";")
    if colon == -1 or semicolon == -1:
        return None
    end = semicolon if semicolon > colon else len(line)
    return line[:colon].strip(_WHITESPACE), line[colon + 1:end].strip(_WHITESPACE)


def _target_ids(targets: str):
    """Yield the comma separated target ids; a trailing empty piece is dropped."""
    if not targets:
        return
    pieces = targets.split(",")
    if pieces[-1] == "":
        pieces.pop()
    for piece in pieces:
        yield piece.strip(_WHITESPACE)


class InputFileHandler:
    """Builds a Circuit from the line based circuit description format.

    Each line is either a node definition ``id: TYPE;`` or a connection
    ``source: target1, target2;``. Text after ``#`` is a comment.
    """

    def __init__(self, factory: ComponentFactory | None = None) -> None:
        self.factory = factory if factory is not None else default_factory()

    def read_circuit(self, filename: str | os.PathLike) -> Circuit:
        """Read and parse the circuit description stored in ``filename``."""
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise CircuitParseError(f"Cannot open file: {filename}") from exc
        return self.parse_text(text)

    def parse_text(self, text: str) -> Circuit:
        """Parse a circuit description: all nodes first, then connections."""
        lines = [line for line in map(_clean, text.split("\n")) if line]
        circuit = Circuit()

        remaining = []
        for line in lines:
            if _is_component_line(line):
                self._parse_component(circuit, line)
            else:
                remaining.append(line)
        logger.info("Components parsed, %d lines left for connections", len(remaining))

        for line in remaining:
            parts = _split_definition(line)
            if parts is None:
                raise CircuitParseError(f"Malformed line: {line!r}")
            source_id, targets = parts
            source = circuit.get_component(source_id)
            if source is None:
                logger.warning("Ignoring line with unknown source: %s", line)
                continue
            self._connect(circuit, source, source_id, targets)
        return circuit

    def _parse_component(self, circuit: Circuit, line: str) -> None:
        parts = _split_definition(line)
        if parts is None:
            return
        node_id, node_type = parts
        try:
            component = self.factory.create_component(node_type, node_id)
        except ValueError as exc:
            logger.warning("Could not create component: %s", exc)
            return
        if node_type == "INPUT_HIGH":
            component.output_value = True
        elif node_type == "INPUT_LOW":
            component.output_value = False
        circuit.add_component(component)
        logger.info("Component added: %s of type %s", node_id, node_type)

    def _connect(
        self, circuit: Circuit, source: Component, source_id: str, targets: str
    ) -> None:
        for target_id in _target_ids(targets):
            target = circuit.get_component(target_id)
            if target is None:
                logger.warning("Target component not found: %s", target_id)
                continue
            circuit.add_edge(Edge(source, target))
            logger.info("Edge added: %s -> %s", source_id, target_id)
            if isinstance(target, LogicGate):
                target.add_input(source)
            if isinstance(target, Probe):
                target.observe_component(source)