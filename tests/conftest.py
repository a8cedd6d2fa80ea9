"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from helloworld_core.interpreter import CommandInterpreter
from helloworld_core.state import AppState
from helloworld_app.services.settings import load_settings


@pytest.fixture
def state() -> AppState:
    """Empty store, window hidden."""
    return AppState()


@pytest.fixture
def interpreter(state: AppState) -> CommandInterpreter:
    return CommandInterpreter(state)


@pytest.fixture
def settings(tmp_path: Path) -> Dict[str, Any]:
    """Default settings pointed at a throwaway workspace."""
    s = load_settings(tmp_path / "no-settings.yaml")
    s["workspace_path"] = str(tmp_path / "workspace")
    return s
