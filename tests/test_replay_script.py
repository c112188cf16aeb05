"""
Tests for the data point replay script.
"""
import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "replay_datapoints.py"


@pytest.fixture(scope="module")
def replay_module():
    spec = importlib.util.spec_from_file_location("replay_datapoints", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


async def test_replay_capture(replay_module, tmp_path):
    capture = tmp_path / "capture.jsonl"
    messages = [
        {"dp": 28, "value": 3},
        {"dp": 2, "value": 0},
        {"dp": 36, "value": 0},
        {"dp": 16, "value": 240},
        {"dp": 24, "value": 252},
        {"dp": 112, "value": "schedule"},
    ]
    capture.write_text(
        "\n".join(json.dumps(m) for m in messages) + "\nnot json\n\n",
        encoding="utf-8",
    )

    data = await replay_module.replay(capture, "TYBAC-006")

    assert data["metadata"]["processed"] == 6
    assert data["metadata"]["skipped"] == 1
    assert data["capabilities"] == {
        "fan_mode": "auto",
        "thermostat_mode": "cool",
        "valve_status": "open",
        "target_temperature": 24.0,
        "measure_temperature": 25.2,
        "fan_speed": "low",
    }
