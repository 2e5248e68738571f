"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: CLI wiring tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(autouse=True)
def headlink_home(monkeypatch, tmp_path) -> Path:
    """Isolated HEADLINK_HOME so no test touches the real settings file."""
    home = tmp_path / ".headlink"
    home.mkdir()
    monkeypatch.setenv("HEADLINK_HOME", str(home))
    return home


@pytest.fixture
def write_settings(headlink_home):
    """Write a settings blob into the isolated home."""

    def _write(data) -> Path:
        path = headlink_home / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def vault_dir(tmp_path) -> Path:
    """Small vault: two notes in folders, one at the root, one hidden."""
    vault = tmp_path / "vault"
    (vault / "folder").mkdir(parents=True)
    (vault / "x").mkdir()
    (vault / ".obsidian").mkdir()

    (vault / "folder" / "note.md").write_text("# Intro\ntext\ncursor-here\n", encoding="utf-8")
    (vault / "x" / "y.md").write_text("## Setup Steps\nRun it.\n### Teardown\n", encoding="utf-8")
    (vault / "root.md").write_text("Preamble\n# Introduction\nbody\n", encoding="utf-8")
    (vault / ".obsidian" / "hidden.md").write_text("# Hidden Heading\n", encoding="utf-8")
    (vault / "folder" / "image.png").write_bytes(b"\x89PNG")
    return vault
