"""
Commands exposed to a front-end.

Each command returns plain JSON-serialisable data. Detection and enumeration
degrade instead of failing; only structurally invalid requests raise
CommandError.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from importeur.config.loader import DEFAULT_CONFIG, get_config_value
from importeur.launchers.types import Game, InvalidGameError
from importeur.probe import Probe
from importeur.steam.locator import list_steam_users, locate_steam_install
from importeur.workflow.detection import DetectionEngine
from importeur.workflow.importer import (
    ImportOrchestrator,
    ProgressCallback,
    SteamImportAction,
)

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """A command was called with a request it cannot process."""
    pass


def build_detection_engine(
    config: Optional[Dict[str, Any]] = None,
    probe: Optional[Probe] = None
) -> DetectionEngine:
    """Create a DetectionEngine from configuration."""
    config = config or DEFAULT_CONFIG
    return DetectionEngine(
        probe=probe,
        report_matched_path=get_config_value(config, 'detection.report_matched_path', False),
    )


def build_import_orchestrator(config: Optional[Dict[str, Any]] = None) -> ImportOrchestrator:
    """Create an ImportOrchestrator from configuration."""
    config = config or DEFAULT_CONFIG
    action = SteamImportAction(
        failure_marker=get_config_value(config, 'import.failure_marker', 'Error'),
        delay=get_config_value(config, 'import.delay_seconds', 0.1),
    )
    return ImportOrchestrator(
        action=action,
        max_concurrent=get_config_value(config, 'import.max_concurrent', 1),
    )


async def detect_all_launchers(
    config: Optional[Dict[str, Any]] = None,
    probe: Optional[Probe] = None
) -> List[Dict[str, Any]]:
    """
    Detect every supported launcher.

    Returns:
        List of launcher dicts in registry order
    """
    engine = build_detection_engine(config, probe)
    launchers = await engine.detect_all()
    return [launcher.to_dict() for launcher in launchers]


async def games_for_launcher(
    launcher_id: str,
    config: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    """
    List the games of one launcher.

    Args:
        launcher_id: Launcher id; unknown ids yield an empty list

    Raises:
        CommandError: If launcher_id is not a string
    """
    if not isinstance(launcher_id, str):
        raise CommandError(
            f"Launcher id must be a string, got {type(launcher_id).__name__}"
        )

    logger.info(f"Getting games for launcher: {launcher_id}")
    engine = build_detection_engine(config)
    games = await engine.games_for(launcher_id)
    return [game.to_dict() for game in games]


def parse_games(payload: Any) -> List[Game]:
    """
    Convert a front-end game selection into Game values.

    Args:
        payload: List of game dicts or Game instances

    Returns:
        List of Game

    Raises:
        CommandError: If the payload is not a list of valid games
    """
    if not isinstance(payload, (list, tuple)):
        raise CommandError(
            f"Games must be a list, got {type(payload).__name__}"
        )

    games = []
    for index, entry in enumerate(payload):
        if isinstance(entry, Game):
            games.append(entry)
            continue
        try:
            games.append(Game.from_dict(entry))
        except InvalidGameError as e:
            raise CommandError(f"Invalid game at position {index}: {e}") from e
    return games


async def import_games(
    games: Union[Sequence[Dict[str, Any]], Sequence[Game]],
    config: Optional[Dict[str, Any]] = None,
    progress_callback: Optional[ProgressCallback] = None
) -> Dict[str, Any]:
    """
    Import a selection of games into Steam.

    Args:
        games: Game dicts (or Game values) to import
        config: Configuration dictionary
        progress_callback: Optional per-game completion callback

    Returns:
        Import result dict: {'success': int, 'failed': [names]}

    Raises:
        CommandError: If the selection is malformed
    """
    selection = parse_games(games)
    orchestrator = build_import_orchestrator(config)

    try:
        result = await orchestrator.import_games(selection, progress_callback)
    except InvalidGameError as e:
        raise CommandError(f"Steam import failed: {e}") from e

    return result.to_dict()


async def locate_target_platform_install(probe: Optional[Probe] = None) -> Optional[str]:
    """
    Resolve the Steam install directory.

    Returns:
        Install directory, or None when Steam is not installed
    """
    steam_path = await locate_steam_install(probe)
    logger.info(f"Steam path: {steam_path}")
    return steam_path


async def list_target_platform_users(probe: Optional[Probe] = None) -> List[str]:
    """
    List the Steam accounts known to the local install.

    Returns:
        Steam account ids (folder names under ``userdata``)

    Raises:
        CommandError: If Steam is not installed
    """
    steam_path = await locate_steam_install(probe)
    if steam_path is None:
        raise CommandError("Steam not found")

    users = await asyncio.to_thread(list_steam_users, steam_path)
    logger.info(f"Found {len(users)} Steam users")
    return users
