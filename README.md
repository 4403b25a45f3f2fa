# circuitsim

An event-driven simulator for digital logic circuits. A circuit is described
in a plain text file; the simulator propagates signal changes through the
gates, honouring each gate's propagation delay, and reports the values of the
inputs and probes.

## Installation

    pip install .

## Usage

    circuitsim path/to/full_adder.txt

The command reads the circuit file, reports each component and edge as it is
added, and then simulates the circuit up to time step 10. After each
processed event it prints a `Time step N:` block with the value (`HIGH` or
`LOW`) of every input and every probe. If the file cannot be opened or
contains a malformed line, an error is printed and the exit status is 1;
without a file argument a usage message is printed and the exit status is 1.

## Circuit file format

Each line holds either a component definition `id: TYPE;` or a connection
`source: target1, target2;`. Everything after `#` is a comment; blank lines
are ignored. All component definitions are read first, so connections may
appear anywhere in the file.

    # components
    A:     INPUT_HIGH;
    B:     INPUT_LOW;
    GATE1: AND;
    OUT:   PROBE;

    # connections
    A:     GATE1;
    B:     GATE1;
    GATE1: OUT;

Component types in a file: `INPUT_HIGH`, `INPUT_LOW`, `AND`, `OR`, `NOT`,
`NAND`, `NOR`, `XOR` and `PROBE`. Gates have a propagation delay of 1,
inputs and probes of 0. `NOT` uses only its first input; the other gates
take any number of inputs.

Connections whose source or target is unknown are skipped with a warning.
A remaining line without both `:` and `;` raises
`circuitsim.parser.CircuitParseError`.

## Library use

```python
from circuitsim.factory import default_factory
from circuitsim.parser import InputFileHandler
from circuitsim.simulator import Simulator

handler = InputFileHandler(default_factory())
circuit = handler.parse_text("A: INPUT_HIGH;\nP: PROBE;\nA: P;\n")
simulator = Simulator(circuit)
simulator.simulate(10)
for probe in simulator.collect_probes():
    print(probe.id, probe.recorded_value)
```

- `circuitsim.components` holds `Input`, `Probe`, `ANDGate`, `ORGate`,
  `NOTGate`, `NANDGate`, `NORGate`, `XORGate`, their bases `Component` and
  `LogicGate`, and `Edge`.
- `circuitsim.circuit.Circuit` stores components and edges and looks
  components up by id with `get_component`.
- `circuitsim.factory.ComponentFactory` creates components by cloning
  prototypes; new gate kinds can be added with `register_prototype`.
  `default_factory()` returns one with every type of the file format.
- `InputFileHandler.read_circuit(filename)` parses a file,
  `parse_text(text)` a string. Progress is reported through the
  `circuitsim` logger.
- `Simulator.simulate(time_steps)` runs the event queue up to that time.
  When a `Simulator` has an `output_handler`, a `Time step` block is written
  to its `stream` (standard output by default) after every event.
- `circuitsim.output.OutputHandler` writes a `Simulation Results:` summary of
  probe values to a stream or to a file it opens; it can be used as a
  context manager.

## Limitations

The command always simulates 10 time steps and takes no options. Input values
are fixed by the circuit file for the whole run; there is no way to feed a
changing stimulus, and results are printed as text only, with no waveform or
file output from the command.