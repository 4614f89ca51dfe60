"""
Launcher package for importeur.

Defines the supported launchers, their detection rules and game catalogs.
"""

from .types import Game, Launcher, ImportResult, InvalidGameError
from .catalogs import (
    CatalogProvider,
    EpicCatalog,
    UbisoftCatalog,
    EACatalog,
    GOGCatalog,
    BattleNetCatalog,
)
from .registry import (
    DetectionRule,
    LauncherDefinition,
    LAUNCHER_REGISTRY,
    STEAM_RULE,
    get_launcher_definition,
)

__all__ = [
    "Game",
    "Launcher",
    "ImportResult",
    "InvalidGameError",
    "CatalogProvider",
    "EpicCatalog",
    "UbisoftCatalog",
    "EACatalog",
    "GOGCatalog",
    "BattleNetCatalog",
    "DetectionRule",
    "LauncherDefinition",
    "LAUNCHER_REGISTRY",
    "STEAM_RULE",
    "get_launcher_definition",
]
