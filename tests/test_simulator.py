import io

import pytest

from circuitsim.circuit import Circuit
from circuitsim.components import Input, Probe
from circuitsim.output import OutputHandler
from circuitsim.parser import CircuitParseError, InputFileHandler
from circuitsim.simulator import Simulator

FULL_ADDER = """
A: INPUT_HIGH;
B: INPUT_LOW;
CIN: INPUT_HIGH;
X1: XOR;
X2: XOR;
A1: AND;
A2: AND;
O1: OR;
S: PROBE;
COUT: PROBE;
A: X1, A1;
B: X1, A1;
CIN: X2, A2;
X1: X2, A2;
X2: S;
A1: O1;
A2: O1;
O1: COUT;
"""


def _circuit(text):
    return InputFileHandler().parse_text(text)


def _probe_values(sim):
    return {p.id: p.recorded_value for p in sim.collect_probes()}


def test_and_gate_with_high_inputs():
    sim = Simulator(_circuit("A: INPUT_HIGH;\nB: INPUT_HIGH;\nG: AND;\nP: PROBE;\nA: G;\nB: G;\nG: P;\n"))
    sim.simulate(10)
    assert _probe_values(sim) == {"P": True}


def test_not_gate_inverts_low_input():
    sim = Simulator(_circuit("A: INPUT_LOW;\nN: NOT;\nP: PROBE;\nA: N;\nN: P;\n"))
    sim.simulate(10)
    assert _probe_values(sim) == {"P": True}


def test_full_adder():
    sim = Simulator(_circuit(FULL_ADDER))
    sim.simulate(10)
    assert _probe_values(sim) == {"S": False, "COUT": True}


def test_time_limit_stops_propagation():
    text = "A: INPUT_HIGH;\nG: AND;\nP: PROBE;\nA: G;\nG: P;\n"
    early = Simulator(_circuit(text))
    early.simulate(0)
    later = Simulator(_circuit(text))
    later.simulate(1)
    assert _probe_values(early) == {"P": False}
    assert _probe_values(later) == {"P": True}


def test_no_circuit_does_nothing():
    sim = Simulator()
    sim.simulate(10)
    assert sim.collect_probes() == []


def test_collect_probes_in_order():
    sim = Simulator(_circuit("Q: PROBE;\nA: INPUT_LOW;\nP: PROBE;\n"))
    assert [p.id for p in sim.collect_probes()] == ["Q", "P"]


def test_display_simulation_results():
    circuit = Circuit()
    a = Input("A")
    a.set_value(True)
    circuit.add_component(a)
    circuit.add_component(Probe("P"))
    buffer = io.StringIO()
    Simulator(circuit, stream=buffer).display_simulation_results(3)
    assert buffer.getvalue() == (
        "Time step 3:\nInput A: HIGH\nProbe P: LOW\n===================\n"
    )


def test_simulate_reports_each_step_with_output_handler():
    buffer = io.StringIO()
    sim = Simulator(
        _circuit("A: INPUT_HIGH;\nG: OR;\nP: PROBE;\nA: G;\nG: P;\n"),
        output_handler=OutputHandler(io.StringIO()),
        stream=buffer,
    )
    sim.simulate(10)
    blocks = buffer.getvalue().split("===================\n")
    assert blocks[0].startswith("Time step 1:\n")
    assert "Probe P: HIGH" in blocks[-2]


def test_load_circuit(tmp_path):
    path = tmp_path / "adder.txt"
    path.write_text(FULL_ADDER, encoding="utf-8")
    sim = Simulator(input_file_handler=InputFileHandler())
    circuit = sim.load_circuit(path)
    assert sim.circuit is circuit
    assert len(circuit.components) == 10


def test_load_circuit_failure_keeps_current(tmp_path):
    original = Circuit()
    sim = Simulator(original, input_file_handler=InputFileHandler())
    with pytest.raises(CircuitParseError):
        sim.load_circuit(tmp_path / "absent.txt")
    assert sim.circuit is original


def test_load_circuit_without_handler():
    with pytest.raises(RuntimeError):
        Simulator().load_circuit("whatever.txt")