"""
Import orchestration.

Imports a batch of games into Steam. Every game is attempted independently;
a failed game is recorded and the batch carries on.
"""

import asyncio
import logging
from typing import Callable, Optional, Sequence, Tuple

from importeur.launchers.types import Game, ImportResult, InvalidGameError
from importeur.steam.shortcuts import SteamShortcut, build_shortcut

logger = logging.getLogger(__name__)

# Progress callback signature: (game, succeeded, error message or None)
ProgressCallback = Callable[[Game, bool, Optional[str]], None]


class ImportFailure(Exception):
    """A single game could not be imported."""
    pass


class SteamImportAction:
    """
    Adds one game to the Steam library.

    The shortcut entry is built but not written; the delay stands in for
    the library write. Games whose name contains the failure marker are
    rejected.
    """

    def __init__(self, failure_marker: str = "Error", delay: float = 0.1):
        """
        Initialize import action.

        Args:
            failure_marker: Substring of a game name that makes its import fail
            delay: Simulated write latency in seconds
        """
        self.failure_marker = failure_marker
        self.delay = delay

    async def __call__(self, game: Game) -> SteamShortcut:
        shortcut = build_shortcut(game)

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if self.failure_marker and self.failure_marker in game.name:
            raise ImportFailure(f"Steam rejected shortcut for {game.name}")

        return shortcut


class ImportOrchestrator:
    """
    Imports a selection of games with partial-failure semantics.

    Example:
        orchestrator = ImportOrchestrator(max_concurrent=2)
        result = await orchestrator.import_games(games)
        print(result.success, result.failed)
    """

    def __init__(
        self,
        action: Optional[Callable] = None,
        max_concurrent: int = 1
    ):
        """
        Initialize import orchestrator.

        Args:
            action: Async callable importing one game (default: SteamImportAction)
            max_concurrent: Maximum number of imports in flight
        """
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")

        self.action = action or SteamImportAction()
        self.max_concurrent = max_concurrent

    async def import_games(
        self,
        games: Sequence[Game],
        progress_callback: Optional[ProgressCallback] = None
    ) -> ImportResult:
        """
        Import games into Steam.

        Args:
            games: Games to import, in the order failures should be reported
            progress_callback: Optional callback invoked as each game finishes.
                Exceptions it raises are logged and do not affect the result.

        Returns:
            ImportResult with the success count and failed names in
            submission order

        Raises:
            InvalidGameError: If the selection is not a sequence of games
        """
        self._validate(games)

        logger.info(f"Adding {len(games)} games to Steam")
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def import_with_semaphore(game: Game) -> Tuple[Game, bool]:
            async with semaphore:
                succeeded, error = await self._import_one(game)
            if progress_callback:
                try:
                    progress_callback(game, succeeded, error)
                except Exception as e:
                    logger.warning(f"Progress callback failed for {game.name}: {e}", exc_info=True)
            return game, succeeded

        # gather() keeps submission order and cancels siblings if cancelled
        outcomes = await asyncio.gather(
            *(import_with_semaphore(game) for game in games)
        )

        success = sum(1 for _, succeeded in outcomes if succeeded)
        failed = tuple(game.name for game, succeeded in outcomes if not succeeded)

        logger.info(
            f"Steam import completed: {success} success, {len(failed)} failed"
        )
        return ImportResult(success=success, failed=failed)

    async def _import_one(self, game: Game) -> Tuple[bool, Optional[str]]:
        try:
            await self.action(game)
        except ImportFailure as e:
            logger.warning(f"Failed to add {game.name} to Steam: {e}")
            return False, str(e)
        except Exception as e:
            logger.error(f"Unexpected error adding {game.name} to Steam: {e}", exc_info=True)
            return False, str(e)

        logger.debug(f"Added {game.name} to Steam")
        return True, None

    @staticmethod
    def _validate(games: Sequence[Game]) -> None:
        if not isinstance(games, (list, tuple)):
            raise InvalidGameError(
                f"Games must be a list, got {type(games).__name__}"
            )

        for index, game in enumerate(games):
            if not isinstance(game, Game):
                raise InvalidGameError(
                    f"Entry {index} is not a game (got {type(game).__name__})"
                )
