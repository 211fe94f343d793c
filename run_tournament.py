"""
Script for running tournaments between minimax players of different depths.
"""
import os
import sys
import argparse
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena, SearchPlayer
from othello.config import Config, get_default_config
from othello.logger import setup_logger

def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Othello search players')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--no-alpha-beta', action='store_true',
                        help='Search without pruning')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move')
    args = parser.parse_args()

    config = Config.load(args.config) if args.config else get_default_config()
    rounds = args.rounds if args.rounds is not None else config.arena.rounds
    output_dir = args.output_dir or config.arena.output_dir
    use_alpha_beta = config.search.use_alpha_beta and not args.no_alpha_beta

    logger = setup_logger(config)

    arena = Arena(metrics_logger=logger)
    for player_id, depth in config.arena.players.items():
        arena.add_player(SearchPlayer(player_id, depth, use_alpha_beta, config.eval))

    print("\nTournament Participants:")
    for i, player in enumerate(arena.players.values(), 1):
        print(f"{i}. {player.player_id} (depth {player.depth})")

    print(f"\nStarting tournament with {rounds} rounds...")
    results = arena.run_tournament(rounds=rounds, verbose=args.verbose)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(output_dir, f'tournament_{timestamp}.json')
    arena.save_results(results_file)

    print(f"\nTournament completed in {results['duration']:.1f}s! Results saved to {results_file}")
    arena.print_standings()
    logger.close()

if __name__ == '__main__':
    main()
