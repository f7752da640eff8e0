"""Shared pytest fixtures for build tool notifier tests."""

from pathlib import Path

import pytest

from config import notifier_config


@pytest.fixture
def make_project(tmp_path: Path):
    """Create a project root containing the given build files."""

    def _make(*file_names: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for name in file_names:
            (root / name).write_text("")
        return root

    return _make


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    notifier_config.reset()
    yield
    notifier_config.reset()
