import json

import pytest

import app
from config.config_loader import DEFAULT_CONFIG


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "runtime_config.json"
    config = dict(DEFAULT_CONFIG, output_directory=str(tmp_path / "logs"),
                  exhausted_file=str(tmp_path / "exhausted.txt"))
    path.write_text(json.dumps(config), encoding="utf-8")
    return str(path)


def test_cli_examples_logs_runs(config_path, tmp_path, capsys):
    app.main(["--examples", "--machine", "binary_successor", "--config", config_path])
    out = capsys.readouterr().out
    assert "Example Runs" in out

    log_files = list((tmp_path / "logs").glob("turing_*.jsonl"))
    assert len(log_files) == 1
    with open(log_files[0], "r", encoding="utf-8") as f:
        entries = [json.loads(line) for line in f]
    assert [e["output"] for e in entries] == ["1", "10", "100", "110"]
    assert entries[0]["machine"] == "binary_successor"


def test_cli_trace(config_path, capsys):
    app.main(["--trace", "101", "--config", config_path])
    out = capsys.readouterr().out
    assert "binary_increment on 101" in out
    assert "State: qf, Accepting: True" in out


def test_cli_inspect(config_path, capsys):
    app.main(["--inspect", "--config", config_path])
    assert "Transition Table" in capsys.readouterr().out


def test_cli_missing_pool_exits(config_path, tmp_path):
    with pytest.raises(SystemExit) as exc:
        app.main(["--inputs", str(tmp_path / "missing.txt"), "--config", config_path])
    assert exc.value.code == 1


def test_cli_max_steps_override(config_path, monkeypatch):
    seen = {}

    def fake_examples(machine_name, config):
        seen["max_steps"] = config["max_steps"]

    monkeypatch.setattr(app, "handle_examples", fake_examples)
    app.main(["--examples", "--max-steps", "3", "--config", config_path])
    assert seen["max_steps"] == 3
