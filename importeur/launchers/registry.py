"""
Known launchers and how to detect them.

The table is built once at import time and never modified. Registry keys
are relative to HKEY_LOCAL_MACHINE.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .catalogs import (
    BattleNetCatalog,
    CatalogProvider,
    EACatalog,
    EpicCatalog,
    GOGCatalog,
    UbisoftCatalog,
)


@dataclass(frozen=True)
class DetectionRule:
    """
    OR-group of host checks deciding whether something is installed.

    The registry key is tried first, then each fallback path in order.
    """
    registry_key: str
    fallback_paths: Tuple[str, ...]
    value_name: Optional[str] = None  # Registry value holding the install dir

    @property
    def canonical_path(self) -> str:
        """Install path reported for a detected launcher."""
        return self.fallback_paths[0]


@dataclass(frozen=True)
class LauncherDefinition:
    """Static description of a supported launcher."""
    id: str
    name: str
    icon: str
    rule: DetectionRule
    catalog: CatalogProvider


def _program_files_pair(relative: str, x86_first: bool = True) -> Tuple[str, str]:
    x86 = rf"C:\Program Files (x86)\{relative}"
    native = rf"C:\Program Files\{relative}"
    return (x86, native) if x86_first else (native, x86)


_DEFINITIONS = (
    LauncherDefinition(
        id="epic",
        name="Epic Games",
        icon="🎮",
        rule=DetectionRule(
            registry_key=r"SOFTWARE\WOW6432Node\Epic Games\EpicGamesLauncher",
            fallback_paths=_program_files_pair(r"Epic Games\Launcher"),
        ),
        catalog=EpicCatalog(),
    ),
    LauncherDefinition(
        id="ubisoft",
        name="Ubisoft Connect",
        icon="🎯",
        rule=DetectionRule(
            registry_key=r"SOFTWARE\WOW6432Node\Ubisoft\Launcher",
            fallback_paths=_program_files_pair(r"Ubisoft\Ubisoft Game Launcher"),
        ),
        catalog=UbisoftCatalog(),
    ),
    LauncherDefinition(
        id="ea",
        name="EA App",
        icon="⚡",
        rule=DetectionRule(
            registry_key=r"SOFTWARE\WOW6432Node\Electronic Arts\EA Desktop",
            # EA installs 64-bit first
            fallback_paths=_program_files_pair(r"Electronic Arts\EA Desktop", x86_first=False),
        ),
        catalog=EACatalog(),
    ),
    LauncherDefinition(
        id="gog",
        name="GOG Galaxy",
        icon="🌟",
        rule=DetectionRule(
            registry_key=r"SOFTWARE\WOW6432Node\GOG.com\GalaxyClient",
            fallback_paths=_program_files_pair("GOG Galaxy"),
        ),
        catalog=GOGCatalog(),
    ),
    LauncherDefinition(
        id="battlenet",
        name="Battle.net",
        icon="⚔️",
        rule=DetectionRule(
            registry_key=r"SOFTWARE\WOW6432Node\Blizzard Entertainment\Battle.net",
            fallback_paths=_program_files_pair("Battle.net"),
        ),
        catalog=BattleNetCatalog(),
    ),
)

# Insertion order is the order launchers are reported in
LAUNCHER_REGISTRY: Mapping[str, LauncherDefinition] = MappingProxyType(
    {definition.id: definition for definition in _DEFINITIONS}
)

STEAM_RULE = DetectionRule(
    registry_key=r"SOFTWARE\WOW6432Node\Valve\Steam",
    fallback_paths=_program_files_pair("Steam"),
    value_name="InstallPath",
)


def get_launcher_definition(launcher_id: str) -> Optional[LauncherDefinition]:
    """
    Look up a launcher by id.

    Args:
        launcher_id: Launcher id (e.g., 'epic')

    Returns:
        LauncherDefinition, or None for an unknown id
    """
    return LAUNCHER_REGISTRY.get(launcher_id)
