"""Command-line interface for importeur."""

import sys
import json
import logging
import argparse
import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

from importeur import __version__
from importeur.commands import (
    CommandError,
    detect_all_launchers,
    games_for_launcher,
    import_games,
    list_target_platform_users,
    locate_target_platform_install,
    parse_games,
)
from importeur.config.loader import load_config, ConfigError
from importeur.config.validator import validate_config, ValidationError
from importeur.launchers.types import Game, ImportResult
from importeur.workflow.progress import ImportProgress, FailedImportLog

# Exit code when an import finished with some failed games
EXIT_PARTIAL_FAILURE = 2


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='importeur',
        description='Detect third-party game launchers and import their games into Steam',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show installed launchers and their games
  importeur detect

  # Same, as JSON for another program
  importeur detect --json

  # List the games of one launcher
  importeur games epic

  # Import every game of the detected launchers
  importeur import

  # Import the games of specific launchers only
  importeur import --launcher epic gog

  # Import a selection saved by a front-end
  importeur import --from-file selection.json --error-log errors.log

  # Save failed games and retry them later
  importeur import --retry-file retry.json
  importeur import --from-file retry.json

  # Show where Steam is installed, and its accounts
  importeur steam-path
  importeur steam-users
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to config.yaml (default: ./config.yaml if present)'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    detect = subparsers.add_parser('detect', help='Detect installed launchers')
    detect.add_argument(
        '--json',
        action='store_true',
        help='Print launchers as JSON'
    )
    detect.add_argument(
        '--matched-path',
        action='store_true',
        help='Report the install path that actually matched. Overrides config.'
    )

    games = subparsers.add_parser('games', help='List the games of a launcher')
    games.add_argument('launcher_id', metavar='LAUNCHER_ID', help='Launcher id (e.g., epic, gog)')
    games.add_argument(
        '--json',
        action='store_true',
        help='Print games as JSON'
    )

    import_cmd = subparsers.add_parser('import', help='Import games into Steam')
    source = import_cmd.add_mutually_exclusive_group()
    source.add_argument(
        '--from-file',
        type=Path,
        metavar='FILE',
        help='JSON file holding the list of games to import'
    )
    source.add_argument(
        '--launcher',
        nargs='+',
        metavar='LAUNCHER_ID',
        help='Import all games of these launchers'
    )
    import_cmd.add_argument(
        '--max-concurrent',
        type=int,
        metavar='N',
        help='Maximum number of imports in flight. Overrides config.'
    )
    import_cmd.add_argument(
        '--error-log',
        type=Path,
        metavar='PATH',
        help='Write failed imports to this file'
    )
    import_cmd.add_argument(
        '--retry-file',
        type=Path,
        metavar='PATH',
        help='Write failed games as a JSON selection for --from-file'
    )

    subparsers.add_parser('steam-path', help='Show the Steam install directory')
    subparsers.add_parser('steam-users', help='List the Steam accounts of the local install')

    return parser


def _setup_logging(config: dict) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = logging_config.get('level', 'INFO').upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    # Console handler writes to stderr so JSON output stays clean
    if logging_config.get('console', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            # Create parent directory if it doesn't exist
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    if not handlers:
        handlers.append(logging.NullHandler())

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )


def _apply_overrides(config: dict, args: argparse.Namespace) -> None:
    """Copy command-line overrides into the loaded configuration."""
    if getattr(args, 'matched_path', False):
        config.setdefault('detection', {})['report_matched_path'] = True

    if getattr(args, 'max_concurrent', None) is not None:
        config.setdefault('import', {})['max_concurrent'] = args.max_concurrent


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for importeur CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration, apply CLI overrides, then validate the result
    try:
        config = load_config(args.config)
        _apply_overrides(config, args)
        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error loading config: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)

    try:
        return asyncio.run(run_command(config, args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Fatal error details:", exc_info=True)
        print(f"\nFatal error: {e}", file=sys.stderr)
        return 1


async def run_command(config: dict, args: argparse.Namespace) -> int:
    """
    Dispatch the selected subcommand (async).

    Args:
        config: Loaded configuration
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    if args.command == 'detect':
        return await run_detect(config, args)
    if args.command == 'games':
        return await run_games(config, args)
    if args.command == 'import':
        return await run_import(config, args)
    if args.command == 'steam-path':
        return await run_steam_path()
    if args.command == 'steam-users':
        return await run_steam_users()

    raise CommandError(f"Unknown command: {args.command}")


async def run_detect(config: dict, args: argparse.Namespace) -> int:
    """Detect launchers and print them."""
    launchers = await detect_all_launchers(config)

    if args.json:
        _print_json(launchers)
        return 0

    table = Table(title="Game Launchers")
    table.add_column("", no_wrap=True)
    table.add_column("Launcher", style="bold")
    table.add_column("Status")
    table.add_column("Games", justify="right")
    table.add_column("Install path", overflow="fold")

    for launcher in launchers:
        status = "[green]detected[/green]" if launcher['detected'] else "[dim]not found[/dim]"
        table.add_row(
            launcher['icon'],
            launcher['name'],
            status,
            str(len(launcher['games'])),
            launcher['install_path'] or "",
        )

    Console().print(table)
    return 0


async def run_games(config: dict, args: argparse.Namespace) -> int:
    """List the games of one launcher."""
    games = await games_for_launcher(args.launcher_id, config)

    if args.json:
        _print_json(games)
        return 0

    if not games:
        print(f"No games found for launcher '{args.launcher_id}'")
        return 0

    table = Table(title=f"Games for {args.launcher_id}")
    table.add_column("Id", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Executable")
    table.add_column("Install path", overflow="fold")

    for game in games:
        table.add_row(game['id'], game['name'], game['executable'], game['install_path'])

    Console().print(table)
    return 0


async def run_import(config: dict, args: argparse.Namespace) -> int:
    """Import games into Steam and report per-game results."""
    selection = parse_games(await _collect_selection(config, args))

    if not selection:
        print("No games to import.")
        return 0

    progress = ImportProgress()
    failures = FailedImportLog()

    def on_game_done(game: Game, succeeded: bool, error: Optional[str]) -> None:
        progress.on_game_done(game, succeeded, error)
        if not succeeded:
            failures.record(game, error or "unknown error")

    progress.start(len(selection))
    result_dict = await import_games(selection, config, progress_callback=on_game_done)

    result = ImportResult(
        success=result_dict['success'],
        failed=tuple(result_dict['failed'])
    )
    progress.print_summary(result)

    if failures.has_errors():
        if args.error_log:
            failures.write_summary(str(args.error_log))
            print(f"Error log written to: {args.error_log}")
        if args.retry_file:
            failures.write_retry_selection(str(args.retry_file))
            print(f"Retry with: importeur import --from-file {args.retry_file}")

    return EXIT_PARTIAL_FAILURE if result.failed else 0


async def run_steam_path() -> int:
    """Print the Steam install directory."""
    steam_path = await locate_target_platform_install()
    if steam_path is None:
        print("Steam installation not found", file=sys.stderr)
        return 1

    print(steam_path)
    return 0


async def run_steam_users() -> int:
    """Print the Steam account ids, one per line."""
    users = await list_target_platform_users()
    if not users:
        print("No Steam users found", file=sys.stderr)
        return 1

    for user in users:
        print(user)
    return 0


async def _collect_selection(config: dict, args: argparse.Namespace) -> List[Any]:
    """
    Build the list of games to import from the command-line options.

    Returns:
        Game dicts from --from-file, the games of the --launcher ids, or
        the games of every detected launcher
    """
    if args.from_file:
        try:
            with open(args.from_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {args.from_file}: {e}")
        except OSError as e:
            raise CommandError(f"Failed to read {args.from_file}: {e}")

    if args.launcher:
        selection: List[Dict[str, Any]] = []
        for launcher_id in args.launcher:
            games = await games_for_launcher(launcher_id, config)
            if not games:
                logger.warning(f"No games found for launcher '{launcher_id}'")
            selection.extend(games)
        return selection

    launchers = await detect_all_launchers(config)
    return [game for launcher in launchers if launcher['detected'] for game in launcher['games']]


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


if __name__ == '__main__':
    sys.exit(main())
