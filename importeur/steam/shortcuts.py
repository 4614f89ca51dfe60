"""
Steam non-Steam-game shortcut entries.

Builds the entry Steam needs for an imported game: app id, quoted target,
start directory and the launcher-specific launch options.
"""

import zlib
from dataclasses import dataclass

from importeur.launchers.types import Game


@dataclass(frozen=True)
class SteamShortcut:
    """A non-Steam game entry as it would appear in shortcuts.vdf."""
    app_id: int
    name: str
    exe: str
    start_dir: str
    icon: str = ""
    launch_options: str = ""


# Launch option templates, formatted with the launcher-side game id
LAUNCH_OPTION_TEMPLATES = {
    'epic': "-EpicPortal -epicapp={game_id}",
    'ubisoft': "uplay://launch/{game_id}",
    'ea': "origin2://game/launch/?offerIds={game_id}",
    'gog': "/command=runGame /gameId={game_id}",
    'battlenet': "battlenet://{game_id}",
}


def generate_app_id(exe: str, name: str) -> int:
    """
    Generate the shortcut app id Steam derives from target and name.

    Args:
        exe: Quoted executable path as stored in the shortcut
        name: Shortcut display name

    Returns:
        32-bit app id with the high bit set
    """
    crc = zlib.crc32(f"{exe}{name}".encode('utf-8'))
    return (crc & 0xFFFFFFFF) | 0x80000000


def launch_options(game: Game) -> str:
    """
    Launch options for a game, based on its owning launcher.

    Returns:
        Launch option string, empty for launchers without a template
    """
    template = LAUNCH_OPTION_TEMPLATES.get(game.launcher_id)
    if template is None:
        return ""
    return template.format(game_id=game.id)


def build_shortcut(game: Game) -> SteamShortcut:
    """
    Build the Steam shortcut entry for a game.

    Args:
        game: Game to import

    Returns:
        SteamShortcut ready to be written to a user's shortcut list
    """
    install_path = game.install_path.rstrip("\\/")
    exe = f'"{install_path}\\{game.executable}"'
    return SteamShortcut(
        app_id=generate_app_id(exe, game.name),
        name=game.name,
        exe=exe,
        start_dir=f'"{install_path}"',
        icon=game.icon or "",
        launch_options=launch_options(game),
    )
