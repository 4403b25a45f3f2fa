"""Writing simulation results."""

from __future__ import annotations

import os
import sys
from typing import IO, Iterable

from .components import Probe

_RULE = "==================="


class OutputHandler:
    """Writes probe results to a stream, or to a file it opens itself."""

    def __init__(self, output: IO[str] | str | os.PathLike | None = None) -> None:
        if output is None:
            self._stream: IO[str] = sys.stdout
            self._owns_stream = False
        elif isinstance(output, (str, os.PathLike)):
            self._stream = open(output, "w", encoding="utf-8")
            self._owns_stream = True
        else:
            self._stream = output
            self._owns_stream = False

    @property
    def stream(self) -> IO[str]:
        return self._stream

    def write_results(self, probes: Iterable[Probe]) -> None:
        """Write the recorded value of every probe."""
        lines = ["Simulation Results:", _RULE]
        lines += [
            f"Probe {probe.id}: {'HIGH' if probe.recorded_value else 'LOW'}"
            for probe in probes
        ]
        lines.append(_RULE)
        self._stream.write("\n".join(lines) + "\n")

    def close(self) -> None:
        """Close the file if this handler opened it."""
        if self._owns_stream and not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> OutputHandler:
        return self

    def __exit__(self, *args) -> None:
        self.close()