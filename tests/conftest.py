"""Pytest configuration and shared fixtures for confstore tests."""

import sys
from pathlib import Path

import pytest

from confstore import ConfigStore

PROGRAM = "confstoreTesting"


@pytest.fixture
def linux_platform(monkeypatch):
    """Force the XDG resolution rules regardless of the host platform."""
    monkeypatch.setattr(sys, "platform", "linux")


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch, linux_platform) -> Path:
    """Temporary $XDG_CONFIG_HOME containing an empty program directory."""
    (tmp_path / PROGRAM).mkdir(mode=0o750)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def program_dir(config_home: Path) -> Path:
    """Directory holding the profile files of the test program."""
    return config_home / PROGRAM


@pytest.fixture
def store(config_home: Path) -> ConfigStore:
    """Empty store resolving paths through the environment."""
    return ConfigStore(program=PROGRAM)


@pytest.fixture
def fresh_store(config_home: Path):
    """Factory for additional empty stores, forcing reads from disk."""
    def _make() -> ConfigStore:
        return ConfigStore(program=PROGRAM)
    return _make
