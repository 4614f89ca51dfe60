"""
Registry and filesystem existence checks.

All checks are read-only observations of the host. Lookup errors never
propagate: a missing key, a denied access or an unreadable path all read as
"not there".
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

try:
    import winreg
except ImportError:  # Registry only exists on Windows hosts
    winreg = None

logger = logging.getLogger(__name__)


def key_exists(key_path: str) -> bool:
    """
    Check whether a registry key exists under HKEY_LOCAL_MACHINE.

    Args:
        key_path: Subkey path (e.g., 'SOFTWARE\\WOW6432Node\\Valve\\Steam')

    Returns:
        True if the key can be opened, False otherwise
    """
    if winreg is None:
        return False

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path):
            return True
    except OSError as e:
        logger.debug(f"Registry key not available: HKLM\\{key_path} ({e})")
        return False


def read_value(key_path: str, value_name: str) -> Optional[str]:
    """
    Read a string value from a registry key under HKEY_LOCAL_MACHINE.

    Args:
        key_path: Subkey path
        value_name: Name of the value to read (e.g., 'InstallPath')

    Returns:
        The value as a string, or None if the key or value cannot be read
    """
    if winreg is None:
        return None

    try:
        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
            value, _ = winreg.QueryValueEx(key, value_name)
    except OSError as e:
        logger.debug(f"Registry value not available: HKLM\\{key_path}\\{value_name} ({e})")
        return None

    if value is None:
        return None
    return str(value)


def path_exists(path: str) -> bool:
    """
    Check whether a filesystem path exists.

    Args:
        path: File or directory path

    Returns:
        True if the path exists, False if it does not or cannot be checked
    """
    try:
        return Path(path).exists()
    except (OSError, ValueError) as e:
        logger.debug(f"Path check failed for {path}: {e}")
        return False


class Probe:
    """
    Async facade over the host checks.

    Each check runs in a worker thread so a slow registry or network drive
    does not stall the event loop. Detection takes a Probe instance so tests
    can substitute a fake host.
    """

    async def key_exists(self, key_path: str) -> bool:
        return await asyncio.to_thread(key_exists, key_path)

    async def read_value(self, key_path: str, value_name: str) -> Optional[str]:
        return await asyncio.to_thread(read_value, key_path, value_name)

    async def path_exists(self, path: str) -> bool:
        return await asyncio.to_thread(path_exists, path)
