"""
Shared pytest fixtures and utilities for the importeur test suite.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

import pytest
import yaml

from importeur.config.loader import merge_dicts
from importeur.launchers.types import Game


class FakeProbe:
    """
    In-memory stand-in for the host registry and filesystem.

    Records every check so tests can assert on probe order.
    """

    def __init__(
        self,
        keys: Iterable[str] = (),
        paths: Iterable[str] = (),
        values: Optional[Dict[tuple, str]] = None
    ):
        self.keys = set(keys)
        self.paths = set(paths)
        self.values = dict(values or {})
        self.calls: list = []

    async def key_exists(self, key_path: str) -> bool:
        self.calls.append(('key', key_path))
        return key_path in self.keys

    async def read_value(self, key_path: str, value_name: str) -> Optional[str]:
        self.calls.append(('value', key_path, value_name))
        return self.values.get((key_path, value_name))

    async def path_exists(self, path: str) -> bool:
        self.calls.append(('path', path))
        return path in self.paths


@pytest.fixture
def fake_probe() -> Callable[..., FakeProbe]:
    """
    Factory for FakeProbe instances.

    Usage:
        probe = fake_probe(keys=[...], paths=[...])
    """

    def _builder(**kwargs) -> FakeProbe:
        return FakeProbe(**kwargs)

    return _builder


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Build a Game with sensible defaults for the fields a test doesn't care about."""

    def _builder(name: str, launcher_id: str = "epic", game_id: Optional[str] = None) -> Game:
        return Game(
            id=game_id or name.lower().replace(" ", "-"),
            name=name,
            executable=f"{name.replace(' ', '')}.exe",
            install_path=rf"C:\Games\{name}",
            launcher_id=launcher_id,
        )

    return _builder


@pytest.fixture
def fast_config() -> Dict[str, Any]:
    """Configuration with no simulated import delay."""
    return {
        "logging": {"level": "INFO", "console": False, "file": None},
        "detection": {"report_matched_path": False},
        "import": {"failure_marker": "Error", "delay_seconds": 0, "max_concurrent": 1},
    }


@pytest.fixture
def make_config(tmp_path: Path, fast_config: Dict[str, Any]) -> Callable[[Optional[Dict[str, Any]]], Path]:
    """
    Create a config.yaml in a temp directory.

    Usage:
        path = make_config({"import": {"max_concurrent": 4}})
    """

    def _builder(overrides: Optional[Dict[str, Any]] = None) -> Path:
        base = fast_config
        if overrides:
            base = merge_dicts(base, overrides)

        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(yaml.safe_dump(base))
        return cfg_path

    return _builder
