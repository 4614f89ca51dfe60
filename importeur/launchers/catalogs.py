"""
Per-launcher game catalogs.

Each provider knows which games its launcher owns. The current providers
return fixed catalogs; a provider that reads a launcher's manifests only has
to override list_games().
"""

import abc
from typing import List

from .types import Game


class CatalogProvider(abc.ABC):
    """Base class for launcher game catalogs."""

    launcher_id: str = ""

    @abc.abstractmethod
    async def list_games(self) -> List[Game]:
        """Return the games owned by this launcher."""
        return []

    def _game(self, game_id: str, name: str, executable: str, install_path: str) -> Game:
        return Game(
            id=game_id,
            name=name,
            executable=executable,
            install_path=install_path,
            launcher_id=self.launcher_id,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(launcher_id={self.launcher_id!r})"


class EpicCatalog(CatalogProvider):
    # Real catalog: %PROGRAMDATA%\Epic\EpicGamesLauncher\Data\Manifests\*.item
    launcher_id = "epic"

    async def list_games(self) -> List[Game]:
        return [
            self._game(
                "fortnite",
                "Fortnite",
                "FortniteClient-Win64-Shipping.exe",
                r"C:\Program Files\Epic Games\Fortnite",
            ),
            self._game(
                "gta5-epic",
                "Grand Theft Auto V",
                "GTA5.exe",
                r"C:\Program Files\Epic Games\GTAV",
            ),
        ]


class UbisoftCatalog(CatalogProvider):
    launcher_id = "ubisoft"

    async def list_games(self) -> List[Game]:
        return [
            self._game(
                "ac-valhalla",
                "Assassin's Creed Valhalla",
                "ACValhalla.exe",
                r"C:\Program Files\Ubisoft\Assassins Creed Valhalla",
            ),
        ]


class EACatalog(CatalogProvider):
    launcher_id = "ea"

    async def list_games(self) -> List[Game]:
        return [
            self._game(
                "apex",
                "Apex Legends",
                "r5apex.exe",
                r"C:\Program Files\EA Games\Apex",
            ),
        ]


class GOGCatalog(CatalogProvider):
    launcher_id = "gog"

    async def list_games(self) -> List[Game]:
        return [
            self._game(
                "witcher3-gog",
                "The Witcher 3: Wild Hunt",
                "witcher3.exe",
                r"C:\GOG Games\The Witcher 3 Wild Hunt",
            ),
        ]


class BattleNetCatalog(CatalogProvider):
    launcher_id = "battlenet"

    async def list_games(self) -> List[Game]:
        return [
            self._game(
                "diablo4",
                "Diablo IV",
                "Diablo IV.exe",
                r"C:\Program Files (x86)\Diablo IV",
            ),
        ]
