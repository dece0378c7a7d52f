"""Pytest configuration and fixtures for PAIRNAME tests."""

import json
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

PAIRNAME_ENV_VARS = (
    "PAIRNAME_SEPARATOR",
    "PAIRNAME_PRESET",
    "PAIRNAME_WORDS_FILE",
    "PAIRNAME_LOG_LEVEL",
)


class SequenceRandom:
    """Deterministic random source that returns queued indices in order."""

    def __init__(self, indices: List[int]):
        self.indices = list(indices)
        self.calls: List[int] = []

    def randrange(self, n: int) -> int:
        self.calls.append(n)
        return self.indices.pop(0)


@pytest.fixture
def sequence_random() -> Callable[..., SequenceRandom]:
    """Factory for a SequenceRandom returning the given indices."""
    def _make(*indices: int) -> SequenceRandom:
        return SequenceRandom(list(indices))
    return _make


@pytest.fixture
def isolated_env(tmp_path, monkeypatch) -> Path:
    """Run with an empty HOME and cwd, and no PAIRNAME_* env vars.

    Returns the temporary project directory (the cwd).
    """
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for env_var in PAIRNAME_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)

    return project


@pytest.fixture
def write_json(tmp_path) -> Callable[[str, object], Path]:
    """Write a JSON document to a file under tmp_path and return its path."""
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path
    return _write
