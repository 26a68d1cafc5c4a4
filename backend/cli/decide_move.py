#!/usr/bin/env python3
"""
CLI tool to decide a move for a saved Battlesnake move request

Usage:
    python decide_move.py <path_to_state.json>
    python decide_move.py - < state.json

Examples:
    # Decide with the default strategy
    python decide_move.py ./turn_42.json

    # Pick a strategy and make the random choice reproducible
    python decide_move.py ./turn_42.json --strategy hungry --seed 7

    # Show the board and the safe moves as well
    python decide_move.py ./turn_42.json --show-board --safe
"""

import os
import sys
import json
import random
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from snakebrain.domain.game_state import GameState
from snakebrain.domain.legality import safe_directions
from snakebrain.logging_setup import configure_logging
from snakebrain.strategies.registry import resolve, AVAILABLE_STRATEGIES, DEFAULT_STRATEGY

logger = logging.getLogger(__name__)


def load_game_state(path: str) -> GameState:
    """Load and decode a move request from a JSON file, or stdin for '-'"""
    if path == '-':
        payload = json.load(sys.stdin)
    else:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Game state file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            payload = json.load(f)

    return GameState.from_dict(payload)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Decide a Battlesnake move for a saved game state',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        'state',
        help="Path to a move request JSON file, or '-' for stdin"
    )
    parser.add_argument(
        '--strategy', '-s',
        default=os.getenv('BATTLESNAKE_STRATEGY', DEFAULT_STRATEGY),
        help=f"Strategy to play ({', '.join(AVAILABLE_STRATEGIES)}; default: {DEFAULT_STRATEGY})"
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed for the random choice between safe moves'
    )
    parser.add_argument(
        '--show-board',
        action='store_true',
        help='Log the board before deciding'
    )
    parser.add_argument(
        '--safe',
        action='store_true',
        help='Also print the safe moves'
    )

    args = parser.parse_args(argv)

    try:
        game_state = load_game_state(args.state)
    except (OSError, ValueError) as e:
        # ValueError covers bad JSON, non-UTF-8 files and InvalidGameStateError
        logger.error(f"Error: {e}")
        return 1

    if args.show_board:
        logger.info(f"Turn {game_state.turn}, game {game_state.game.id}:\n{game_state.board.render()}")

    # A fresh instance keeps the seeded rng away from the shared registry entry
    strategy_cls = type(resolve(args.strategy))
    strategy = strategy_cls(rng=random.Random(args.seed)) if args.seed is not None else strategy_cls()

    if args.safe:
        safe_moves = safe_directions(game_state.board, game_state.you)
        print("safe: " + " ".join(sorted(d.value for d in safe_moves)))

    print(strategy.get_move(game_state).value)
    return 0


if __name__ == '__main__':
    load_dotenv()
    configure_logging()
    sys.exit(main())
