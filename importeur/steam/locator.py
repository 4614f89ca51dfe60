"""Locate the Steam installation directory and its user accounts."""

import logging
from pathlib import Path
from typing import List, Optional

from importeur.launchers.registry import STEAM_RULE, DetectionRule
from importeur.probe import Probe

logger = logging.getLogger(__name__)


async def locate_steam_install(
    probe: Optional[Probe] = None,
    rule: DetectionRule = STEAM_RULE
) -> Optional[str]:
    """
    Resolve the Steam install directory.

    The registry value wins over the filesystem fallbacks, even when both
    exist and point to different directories.

    Args:
        probe: Host probe (default: real registry/filesystem)
        rule: Detection rule holding the registry key, value and fallbacks

    Returns:
        Install directory, or None if Steam was not found
    """
    probe = probe or Probe()

    if rule.value_name:
        install_path = await probe.read_value(rule.registry_key, rule.value_name)
        if install_path:
            logger.debug(f"Steam install path from registry: {install_path}")
            return install_path

    for path in rule.fallback_paths:
        if await probe.path_exists(path):
            logger.debug(f"Steam install path from filesystem: {path}")
            return path

    logger.info("Steam installation not found")
    return None


def list_steam_users(steam_path: str) -> List[str]:
    """
    List the Steam account ids that have a folder under ``userdata``.

    Args:
        steam_path: Steam install directory

    Returns:
        Sorted account ids, empty if userdata is missing or unreadable
    """
    userdata = Path(steam_path) / "userdata"
    try:
        entries = list(userdata.iterdir())
    except OSError as e:
        logger.debug(f"Cannot read {userdata}: {e}")
        return []

    # Account folders are numeric; "0" is a placeholder some installs create
    users = [
        entry.name for entry in entries
        if entry.is_dir() and entry.name.isdigit() and entry.name != "0"
    ]
    return sorted(users, key=int)
