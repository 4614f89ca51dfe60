"""
Progress tracking for import operations.

Provides simple console output for tracking a Steam import.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from importeur.launchers.registry import LAUNCHER_REGISTRY
from importeur.launchers.types import Game, ImportResult

logger = logging.getLogger(__name__)


@dataclass
class GameProgress:
    """Progress record for a single game."""
    name: str
    status: str  # 'success', 'failed'
    detail: str = ""


class ImportProgress:
    """
    Tracks import progress with simple console output.

    Features:
    - Per-game status lines as imports finish
    - Final success/failure summary
    """

    def __init__(self):
        """Initialize progress tracker."""
        self.total = 0
        self.processed = 0
        self.games: List[GameProgress] = []
        self.start_time: Optional[float] = None

    def start(self, total_games: int) -> None:
        """
        Start tracking an import run.

        Args:
            total_games: Number of games submitted
        """
        self.total = total_games
        self.processed = 0
        self.games = []
        self.start_time = time.time()

        print(f"\n{'='*60}")
        print("Importing into Steam")
        print(f"Total games: {total_games}")
        print(f"{'='*60}\n")

    def on_game_done(self, game: Game, succeeded: bool, error: Optional[str]) -> None:
        """Import progress callback."""
        if succeeded:
            self.log_game(game.name, 'success')
        else:
            self.log_game(game.name, 'failed', error or "")

    def log_game(self, game_name: str, status: str, detail: str = "") -> None:
        """
        Log game import status.

        Args:
            game_name: Name of the game
            status: Status ('success', 'failed')
            detail: Additional detail message
        """
        self.processed += 1
        symbol = "✓" if status == 'success' else "✗"

        message = f"  {symbol} [{self.processed}/{self.total}] {game_name}"
        if detail:
            message += f" - {detail}"
        print(message)

        self.games.append(GameProgress(name=game_name, status=status, detail=detail))

    def print_summary(self, result: ImportResult) -> None:
        """Print the summary of an import run."""
        elapsed = time.time() - self.start_time if self.start_time else 0.0

        print(f"\n{'-'*60}")
        print("Import Complete")
        print(f"  Total:     {result.total}")
        print(f"  Succeeded: {result.success}")
        print(f"  Failed:    {len(result.failed)}")
        print(f"  Time:      {elapsed:.1f}s")
        print(f"{'-'*60}\n")

        if result.failed:
            print("Failed games:")
            for name in result.failed:
                print(f"  - {name}")
            print()


class FailedImportLog:
    """
    Failed imports of one run, grouped by owning launcher.

    Keeps the failed Game values so the selection can be written back out
    and retried with ``importeur import --from-file``.
    """

    def __init__(self):
        self.failures: Dict[str, List[Tuple[Game, str]]] = {}

    def record(self, game: Game, message: str) -> None:
        """Record a failed import under the game's launcher."""
        self.failures.setdefault(game.launcher_id, []).append((game, message))

    @property
    def count(self) -> int:
        return sum(len(entries) for entries in self.failures.values())

    def has_errors(self) -> bool:
        return bool(self.failures)

    def write_summary(self, output_path: str = "import_errors.log") -> None:
        """
        Write failed imports to a text file, one block per launcher.

        Args:
            output_path: Path to error log file
        """
        if not self.failures:
            return

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(f"Steam import failures ({self.count} games)\n\n")
            for launcher_id, entries in self.failures.items():
                definition = LAUNCHER_REGISTRY.get(launcher_id)
                title = definition.name if definition else launcher_id
                f.write(f"[{launcher_id}] {title}\n")
                for game, message in entries:
                    f.write(f"  {game.name} ({game.id}): {message}\n")
                f.write("\n")

        logger.info(f"Error log written to: {output_path}")

    def write_retry_selection(self, output_path: str) -> None:
        """
        Write the failed games as a JSON selection for a later import.

        Args:
            output_path: Path of the JSON file
        """
        games = [
            game.to_dict()
            for entries in self.failures.values()
            for game, _ in entries
        ]
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(games, f, indent=2, ensure_ascii=False)

        logger.info(f"Retry selection with {len(games)} games written to: {output_path}")
