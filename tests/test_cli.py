from circuitsim.cli import main

CIRCUIT = "A: INPUT_HIGH;\nB: INPUT_HIGH;\nG: AND;\nP: PROBE;\nA: G;\nB: G;\nG: P;\n"


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Circuit Simulator\n")
    assert "Usage" in out


def test_missing_file_fails(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 1
    assert f"Error loading circuit from file: {missing}" in capsys.readouterr().out


def test_runs_simulation(tmp_path, capsys):
    path = tmp_path / "circuit.txt"
    path.write_text(CIRCUIT, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Circuit loaded successfully." in out
    assert "Probe P: HIGH" in out
    assert out.rstrip().endswith("Simulation complete.")


def test_parse_diagnostics_are_shown(tmp_path, capsys):
    path = tmp_path / "circuit.txt"
    path.write_text(CIRCUIT, encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Component added: G of type AND" in out
    assert "Edge added: G -> P" in out