"""
Play Othello in the terminal, either human against machine or machine against machine.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, DIFFICULTY_LEVELS, get_default_config
from othello.game import DARK, LIGHT, OthelloGame, opponent
from othello.game.board import COLOR_NAMES
from othello.logger import setup_logger
from othello.search import create_engine


def parse_move(text: str):
    """Parse 'row col' (or 'row,col') into a tuple, or return None."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        return None
    return int(parts[0]), int(parts[1])


def play_human(game: OthelloGame, config: Config, human_color: int):
    """Human against machine; the human types moves at a prompt."""
    engine = create_engine(config, maximizing_color=opponent(human_color))
    while not game.is_game_over():
        print(game)
        if game.get_current_player() == human_color:
            hints = " ".join(str(m) for m in game.get_valid_moves())
            text = input(f"Your move [row col] or q (legal: {hints}): ").strip().lower()
            if text == 'q':
                print("Exiting.")
                return
            move = parse_move(text)
            if move is None or not game.make_move(*move):
                print("Illegal move, try again.")
        else:
            move = game.machine_move(engine)
            print(f"Machine plays {move} ({engine.nodes} nodes)")
    print(game)


def play_auto(game: OthelloGame, config: Config):
    """Machine against machine with the same settings on both sides."""
    engines = {color: create_engine(config, maximizing_color=color) for color in (DARK, LIGHT)}
    while not game.is_game_over():
        color = game.get_current_player()
        engine = engines[color]
        move = game.machine_move(engine)
        print(f"{COLOR_NAMES[color]} plays {move}")
        if config.logging.verbose:
            print(game)
    print(game)


def main():
    parser = argparse.ArgumentParser(description='Play Othello against a minimax opponent')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--mode', choices=['human', 'auto'], default='human',
                        help='human: human vs machine, auto: machine vs machine')
    parser.add_argument('--difficulty', choices=sorted(DIFFICULTY_LEVELS), default=None,
                        help='Difficulty preset (sets the search depth)')
    parser.add_argument('--depth', type=int, default=None,
                        help='Search depth, ignored when --difficulty is given')
    parser.add_argument('--human-color', choices=['dark', 'light'], default='dark',
                        help='Color played by the human')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every search')
    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.depth is not None:
        config.search.depth = args.depth
    if args.difficulty is not None:
        config.search.difficulty = args.difficulty
    if args.verbose:
        config.logging.verbose = True
    config.logging.log_to_file = False

    logger = setup_logger(config)
    game = OthelloGame()
    try:
        if args.mode == 'human':
            human_color = DARK if args.human_color == 'dark' else LIGHT
            play_human(game, config, human_color)
        else:
            play_auto(game, config)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()
