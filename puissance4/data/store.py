"""
store.py - Save and resume a game position

A snapshot only holds the current area, the slot to play and the result. It
is written as JSON under a file lock, through a temporary file that replaces
the target in one move.
"""

import json
import os
import shutil
from typing import Any, Dict

import filelock

from puissance4.debug import debug
from puissance4.exceptions import InvalidAreaError
from puissance4.game.engine import Engine

SNAPSHOT_VERSION = 1


def safe_read_json(file_path: str) -> Any:
    """
    Read a JSON file while holding its lock.

    Raises:
        FileNotFoundError: if the file does not exist
        InvalidAreaError: if the content is not valid JSON
    """
    lock_path = f"{file_path}.lock"
    with filelock.FileLock(lock_path):
        with open(file_path, 'r') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                debug.error(f"Error decoding JSON from {file_path}: {e}", "store")
                raise InvalidAreaError(f"{file_path} is not valid JSON") from e


def safe_write_json(file_path: str, data: Any):
    """Write ``data`` as JSON, replacing ``file_path`` atomically."""
    directory = os.path.dirname(os.path.abspath(file_path))
    os.makedirs(directory, exist_ok=True)

    lock_path = f"{file_path}.lock"
    with filelock.FileLock(lock_path):
        temp_file = f"{file_path}.tmp"
        try:
            with open(temp_file, 'w') as f:
                json.dump(data, f, indent=2)
            shutil.move(temp_file, file_path)
        except (OSError, TypeError, ValueError) as e:
            debug.error(f"Error writing to {file_path}: {e}", "store")
            if os.path.exists(temp_file):
                os.remove(temp_file)
            raise


def save_snapshot(file_path: str, engine: Engine):
    data = dict(engine.snapshot(), version=SNAPSHOT_VERSION)
    safe_write_json(file_path, data)
    debug.debug(f"Snapshot saved to {file_path}", "store")


def load_snapshot(file_path: str) -> Dict[str, Any]:
    """
    Load a snapshot written by :func:`save_snapshot`.

    Returns:
        The snapshot, ready for Engine.load_snapshot

    Raises:
        FileNotFoundError: if the file does not exist
        InvalidAreaError: if the file is not a snapshot
    """
    data = safe_read_json(file_path)
    if not isinstance(data, dict):
        raise InvalidAreaError(f"{file_path} does not hold a snapshot")

    version = data.pop("version", None)
    if version != SNAPSHOT_VERSION:
        raise InvalidAreaError(f"Unsupported snapshot version {version!r} in {file_path}")

    debug.debug(f"Snapshot loaded from {file_path}", "store")
    return data
