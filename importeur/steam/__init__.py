"""Steam target package: install location and shortcut entries."""

from .locator import list_steam_users, locate_steam_install
from .shortcuts import SteamShortcut, build_shortcut, generate_app_id, launch_options

__all__ = [
    "locate_steam_install",
    "list_steam_users",
    "SteamShortcut",
    "build_shortcut",
    "generate_app_id",
    "launch_options",
]
