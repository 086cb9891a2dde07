#!/usr/bin/env python3
"""
Play an Oust match between two engines.

Usage:
    python scripts/play_oust.py                          # IDS vs random
    python scripts/play_oust.py --depth-a 3 --depth-b 0  # depth 3 vs IDS
"""

import argparse
import logging
import os
import sys

# Add src to python path
sys.path.append(os.path.join(os.path.dirname(__file__), '../src'))

from oust_search.config import BOARD_CONFIG, MATCH_CONFIG
from oust_search.match import play_match
from oust_search.players import RandomPlayer, SearchPlayer


def make_player(name, depth, seed):
    """depth < 0 selects the random player, 0 iterative deepening."""
    if depth < 0:
        return RandomPlayer(name, seed=seed)
    return SearchPlayer(name, fixed_depth=depth)


def main():
    parser = argparse.ArgumentParser(description="Play an Oust match")
    parser.add_argument('--games', type=int, default=MATCH_CONFIG['num_games'], help='Number of games')
    parser.add_argument('--size', type=int, default=BOARD_CONFIG['size'], help='Hex board radius')
    parser.add_argument('--time', type=float, default=MATCH_CONFIG['time_limit_s'], help='Seconds per turn')
    parser.add_argument('--depth-a', type=int, default=0, help='Player A depth (0 = IDS, -1 = random)')
    parser.add_argument('--depth-b', type=int, default=-1, help='Player B depth (0 = IDS, -1 = random)')
    parser.add_argument('--seed', type=int, default=MATCH_CONFIG['seed'], help='Random player seed')
    parser.add_argument('--verbose', action='store_true', help='Log every turn')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    player_a = make_player("A", args.depth_a, args.seed)
    player_b = make_player("B", args.depth_b, args.seed)

    print("=" * 60)
    print(f"{player_a.name} vs {player_b.name}")
    print(f"{args.games} games, radius {args.size}, {args.time}s per turn")
    print("=" * 60)

    results = play_match(player_a, player_b, num_games=args.games, size=args.size, time_limit_s=args.time)

    print(f"\n{player_a.name}: {results['wins_a']} wins")
    print(f"{player_b.name}: {results['wins_b']} wins")
    print(f"Draws: {results['draws']}")
    print(f"Win rate ({player_a.name}): {results['win_rate_a']:.1%}")


if __name__ == '__main__':
    main()
