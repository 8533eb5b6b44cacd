#!/usr/bin/env python3
"""
Game Launcher

Runs any of the demos found by the game registry. Game-specific arguments
are read from each game class's ARGUMENTS list.

Usage:
    # List available games
    python dev_game.py --list

    # Play a game
    python dev_game.py bouncingball
    python dev_game.py fruitcatch --seed 42

    # See game-specific options
    python dev_game.py fruitcatch --help

    # With custom resolution
    python dev_game.py bouncingball --resolution 1280x720
"""

import argparse
import os
import sys

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from arcade_rt.host import run_game
from arcade_rt.logging import configure_logging, get_logger
from games.registry import GameRegistry
from models import Resolution

log = get_logger('dev_game')

LAUNCHER_ARGS = {'game', 'list', 'resolution', 'fullscreen', 'log_level'}


def _add_game_arguments(parser: argparse.ArgumentParser, game_arguments) -> None:
    """Add a game's ARGUMENTS definitions to the parser."""
    added = set()
    for arg_def in game_arguments:
        arg_name = arg_def['name']
        if arg_name in added:
            continue
        added.add(arg_name)

        kwargs = {}
        if 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']

        parser.add_argument(arg_name, **kwargs)


def build_parser(registry: GameRegistry, game: str = None) -> argparse.ArgumentParser:
    """Full parser, including the chosen game's own arguments."""
    available_games = registry.list_games()

    parser = argparse.ArgumentParser(
        description='Arcade demo launcher',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available games: {', '.join(available_games)}

Examples:
  python dev_game.py --list              # List available games
  python dev_game.py bouncingball        # Play Bouncing Ball
  python dev_game.py fruitcatch --seed 7
  python dev_game.py <game> --help       # See game-specific options
        """
    )
    parser.add_argument('game', nargs='?', choices=available_games, help='Game to play')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List all available games and exit')
    parser.add_argument('--resolution', '-r', type=str, default='1024x768',
                        help='Window resolution as WIDTHxHEIGHT (default: 1024x768)')
    parser.add_argument('--fullscreen', '-f', action='store_true',
                        help='Run in fullscreen mode')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level: TRACE, DEBUG, INFO, WARNING, ERROR, OFF')

    if game:
        _add_game_arguments(parser, registry.get_game_arguments(game))
    return parser


def print_game_list(registry: GameRegistry) -> None:
    print("\nAvailable Games")
    print("=" * 50)
    for slug in registry.list_games():
        info = registry.get_game_info(slug)
        print(f"\n  {slug}")
        print(f"    Name: {info.name}")
        print(f"    Description: {info.description}")
        print(f"    Version: {info.version}")
        if info.arguments:
            arg_names = [a['name'] for a in info.arguments]
            print(f"    Options: {', '.join(arg_names)}")
    print()


def main(argv=None) -> int:
    """Main entry point for the launcher."""
    registry = GameRegistry()
    available_games = registry.list_games()

    # Phase 1: Parse just enough to identify the game
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument('game', nargs='?', choices=available_games)
    pre_args, _ = pre_parser.parse_known_args(argv)

    # Phase 2: Full parser with game-specific arguments
    parser = build_parser(registry, pre_args.game)
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    if args.list:
        print_game_list(registry)
        return 0

    if args.game is None:
        parser.print_help()
        return 1

    try:
        resolution = Resolution.parse(args.resolution)
    except ValueError as e:
        log.error("%s", e)
        return 1

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in LAUNCHER_ARGS and v is not None
    }

    info = registry.get_game_info(args.game)
    game = registry.create_game(args.game, resolution.width, resolution.height, **game_kwargs)
    log.info("Starting %s at %s", info.name, resolution)

    return run_game(game, resolution, title=info.name, fullscreen=args.fullscreen)


if __name__ == "__main__":
    sys.exit(main())
