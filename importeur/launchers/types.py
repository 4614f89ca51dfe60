"""Launcher, game and import result data structures."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class InvalidGameError(Exception):
    """A game payload is structurally invalid."""
    pass


# Fields a game payload must carry as strings
REQUIRED_GAME_FIELDS = ('id', 'name', 'executable', 'install_path', 'launcher_id')


@dataclass(frozen=True)
class Game:
    """
    A game owned by a launcher.

    This is the unit passed from detection to the import workflow.
    """
    id: str                         # Unique within its launcher
    name: str                       # Display name
    executable: str                 # Binary name relative to install_path
    install_path: str               # Absolute install directory
    launcher_id: str                # Owning launcher (lookup only)
    icon: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Game':
        """
        Build a Game from a front-end payload.

        Args:
            data: Mapping with the wire keys of a game

        Returns:
            Game instance

        Raises:
            InvalidGameError: If a required field is missing or not a string
        """
        if not isinstance(data, dict):
            raise InvalidGameError(
                f"Game entry must be an object, got {type(data).__name__}"
            )

        missing = [key for key in REQUIRED_GAME_FIELDS if key not in data]
        if missing:
            raise InvalidGameError(
                f"Game entry is missing required field(s): {', '.join(missing)}"
            )

        for key in REQUIRED_GAME_FIELDS:
            if not isinstance(data[key], str):
                raise InvalidGameError(f"Game field '{key}' must be a string")

        icon = data.get('icon')
        if icon is not None and not isinstance(icon, str):
            raise InvalidGameError("Game field 'icon' must be a string or null")

        return cls(
            id=data['id'],
            name=data['name'],
            executable=data['executable'],
            install_path=data['install_path'],
            launcher_id=data['launcher_id'],
            icon=icon,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'executable': self.executable,
            'install_path': self.install_path,
            'launcher_id': self.launcher_id,
            'icon': self.icon,
        }


@dataclass(frozen=True)
class Launcher:
    """
    Detection outcome for one launcher.

    games and install_path are only populated when the launcher was detected.
    """
    id: str
    name: str
    icon: str
    detected: bool
    install_path: Optional[str] = None
    games: Tuple[Game, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.detected and self.install_path is None:
            raise ValueError(f"Detected launcher '{self.id}' requires an install_path")
        if not self.detected and (self.install_path is not None or self.games):
            raise ValueError(
                f"Undetected launcher '{self.id}' cannot carry an install_path or games"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'detected': self.detected,
            'games': [game.to_dict() for game in self.games],
            'install_path': self.install_path,
        }


@dataclass(frozen=True)
class ImportResult:
    """Aggregate outcome of one import call."""
    success: int = 0
    failed: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        """Number of games submitted."""
        return self.success + len(self.failed)

    def to_dict(self) -> Dict[str, Any]:
        failed: List[str] = list(self.failed)
        return {'success': self.success, 'failed': failed}
