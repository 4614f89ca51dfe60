"""
Launcher detection.

Evaluates every known launcher's detection rule concurrently and collects
its game catalog. Results always come back in registry order.
"""

import asyncio
import logging
from typing import List, Mapping, Optional

from importeur.launchers.registry import (
    LAUNCHER_REGISTRY,
    DetectionRule,
    LauncherDefinition,
)
from importeur.launchers.types import Game, Launcher
from importeur.probe import Probe

logger = logging.getLogger(__name__)


class DetectionEngine:
    """
    Detects installed launchers and enumerates their games.

    Features:
    - One concurrent task per launcher, probes offloaded to threads
    - Registry-order output regardless of completion order
    - Catalog failures degrade a single launcher to an empty game list

    Example:
        engine = DetectionEngine()
        launchers = await engine.detect_all()
        games = await engine.games_for('epic')
    """

    def __init__(
        self,
        probe: Optional[Probe] = None,
        registry: Mapping[str, LauncherDefinition] = LAUNCHER_REGISTRY,
        report_matched_path: bool = False
    ):
        """
        Initialize detection engine.

        Args:
            probe: Host probe (default: real registry/filesystem)
            registry: Launcher table to evaluate
            report_matched_path: Report the fallback path that matched
                instead of the canonical one
        """
        self.probe = probe or Probe()
        self.registry = registry
        self.report_matched_path = report_matched_path

    async def detect_all(self) -> List[Launcher]:
        """
        Detect all known launchers.

        Returns:
            One Launcher per registry entry, in registry order
        """
        logger.info("Starting launcher detection...")

        definitions = list(self.registry.values())
        # gather() returns results in argument order
        launchers = await asyncio.gather(
            *(self._detect_one(definition) for definition in definitions)
        )

        detected = sum(1 for launcher in launchers if launcher.detected)
        logger.info(
            f"Launcher detection completed: {detected}/{len(launchers)} launchers found"
        )
        return list(launchers)

    async def games_for(self, launcher_id: str) -> List[Game]:
        """
        List the games of one launcher without running detection.

        Args:
            launcher_id: Launcher id (e.g., 'gog')

        Returns:
            Games owned by the launcher, empty for an unknown id
        """
        definition = self.registry.get(launcher_id)
        if definition is None:
            logger.debug(f"Unknown launcher id: {launcher_id}")
            return []

        try:
            games = await definition.catalog.list_games()
        except Exception as e:
            logger.warning(f"Failed to list games for {definition.name}: {e}")
            return []

        logger.info(f"Found {len(games)} games for {launcher_id}")
        return list(games)

    async def _detect_one(self, definition: LauncherDefinition) -> Launcher:
        matched = await self._match(definition.rule)
        if matched is None:
            logger.debug(f"{definition.name} not detected")
            return Launcher(
                id=definition.id,
                name=definition.name,
                icon=definition.icon,
                detected=False,
            )

        install_path = matched if self.report_matched_path else definition.rule.canonical_path

        try:
            games = await definition.catalog.list_games()
        except Exception as e:
            logger.warning(f"Failed to list games for {definition.name}: {e}")
            games = []

        logger.debug(f"{definition.name} detected at {install_path} ({len(games)} games)")
        return Launcher(
            id=definition.id,
            name=definition.name,
            icon=definition.icon,
            detected=True,
            install_path=install_path,
            games=tuple(games),
        )

    async def _match(self, rule: DetectionRule) -> Optional[str]:
        """
        Evaluate a detection rule.

        Returns:
            Path to report for the match (canonical path when only the
            registry key matched), or None when nothing matched
        """
        if await self.probe.key_exists(rule.registry_key):
            return rule.canonical_path

        for path in rule.fallback_paths:
            if await self.probe.path_exists(path):
                return path

        return None
