"""Tests for snapshot saving and loading."""

import json

import pytest

from puissance4.data.store import (SNAPSHOT_VERSION, load_snapshot,
                                   safe_read_json, safe_write_json,
                                   save_snapshot)
from puissance4.exceptions import InvalidAreaError
from puissance4.game.engine import Engine
from puissance4.utils import Slot

from conftest import ScriptedPlayer


def test_save_and_resume(tmp_path):
    """A resumed engine has the same cells and the same player to move."""
    path = str(tmp_path / "game.json")
    engine = Engine(ScriptedPlayer("a", [3, 3, 1]), ScriptedPlayer("b", [4, 2]))
    for _ in range(5):
        engine.play_turn()

    save_snapshot(path, engine)
    resumed = Engine.restore(load_snapshot(path), ScriptedPlayer("a", []), ScriptedPlayer("b", []))

    assert resumed.active_slot == Slot.TWO
    assert resumed.result == engine.result
    for col in range(7):
        for row in range(6):
            assert resumed.area.get(col, row) == engine.area.get(col, row)


def test_saved_file_is_plain_json(tmp_path):
    path = tmp_path / "game.json"
    engine = Engine(ScriptedPlayer("a", [0]), ScriptedPlayer("b", []))
    engine.play_turn()
    save_snapshot(str(path), engine)

    data = json.loads(path.read_text())
    assert data["version"] == SNAPSHOT_VERSION
    assert data["active"] == 2
    assert data["result"] == "IN_PROGRESS"
    assert data["area"].endswith("Y......")
    assert not (tmp_path / "game.json.tmp").exists()


def test_write_creates_missing_directories(tmp_path):
    path = str(tmp_path / "nested" / "dir" / "data.json")
    safe_write_json(path, {"x": 1})
    assert safe_read_json(path) == {"x": 1}


def test_failed_write_leaves_no_temp_file(tmp_path):
    path = tmp_path / "data.json"
    safe_write_json(str(path), {"x": 1})

    with pytest.raises(TypeError):
        safe_write_json(str(path), {"x": object()})

    assert not (tmp_path / "data.json.tmp").exists()
    assert safe_read_json(str(path)) == {"x": 1}


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_snapshot(str(tmp_path / "absent.json"))


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(InvalidAreaError):
        load_snapshot(str(path))


@pytest.mark.parametrize("content", [[1, 2], {"area": "", "active": 1, "result": "DRAW"}])
def test_load_rejects_non_snapshots(tmp_path, content):
    path = tmp_path / "other.json"
    path.write_text(json.dumps(content))
    with pytest.raises(InvalidAreaError):
        load_snapshot(str(path))
