"""
Tests for machine-vs-machine games in the arena.
"""
import os
import sys
import tempfile
import json
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena, SearchPlayer
from othello.config import get_default_config
from othello.logger import setup_logger


def make_arena():
    arena = Arena()
    arena.add_player(SearchPlayer("greedy", depth=0))
    arena.add_player(SearchPlayer("lookahead", depth=1))
    return arena


def test_play_game_is_reproducible():
    arena = make_arena()
    first = arena.play_game("greedy", "lookahead")
    second = arena.play_game("greedy", "lookahead")
    assert first in (0.0, 0.5, 1.0)
    assert first == second
    assert arena.games[0] == arena.games[1]
    game = arena.games[0]
    assert game['dark_count'] + game['light_count'] <= 64
    assert game['moves'] > 0


def test_unknown_player():
    with pytest.raises(ValueError):
        make_arena().play_game("greedy", "nobody")


def test_tournament_needs_two_players():
    arena = Arena()
    arena.add_player(SearchPlayer("alone", depth=0))
    with pytest.raises(ValueError):
        arena.run_tournament()


def test_run_tournament(tmp_path):
    arena = make_arena()
    results = arena.run_tournament(rounds=1)
    assert results['games_played'] == 2, "Each pairing is played with both colors"

    standings = results['standings']
    assert {s['player_id'] for s in standings} == {"greedy", "lookahead"}
    assert sum(s['points'] for s in standings) == 2.0
    assert all(s['wins'] + s['draws'] + s['losses'] == 2 for s in standings)
    assert standings[0]['points'] >= standings[1]['points']
    assert all(s['nodes'] > 0 for s in standings)

    path = tmp_path / "results.json"
    arena.save_results(str(path))
    with open(path) as f:
        saved = json.load(f)
    assert len(saved['games']) == 2
    assert saved['standings'] == standings


def test_games_are_logged_as_metrics(tmp_path):
    config = get_default_config()
    config.logging.log_dir = str(tmp_path)
    metrics_logger = setup_logger(config)
    arena = Arena(metrics_logger=metrics_logger)
    arena.add_player(SearchPlayer("greedy", depth=0))
    arena.add_player(SearchPlayer("lookahead", depth=1))
    try:
        arena.play_game("greedy", "lookahead")
        arena.play_game("lookahead", "greedy")
    finally:
        metrics_logger.close()

    with open(os.path.join(metrics_logger.run_dir, 'game.log')) as f:
        content = f.read()
    game = arena.games[0]
    assert f"Step 1: dark=greedy light=lookahead dark_count={game['dark_count']}" in content
    assert "Step 2: dark=lookahead light=greedy" in content
    assert "dark_nodes=" in content


if __name__ == "__main__":
    print("Running arena tests...\n")
    test_play_game_is_reproducible()
    print("Play game is reproducible test passed!")
    test_unknown_player()
    print("Unknown player test passed!")
    test_tournament_needs_two_players()
    print("Tournament needs two players test passed!")
    test_run_tournament(Path(tempfile.mkdtemp()))
    print("Run tournament test passed!")
    test_games_are_logged_as_metrics(Path(tempfile.mkdtemp()))
    print("Games are logged as metrics test passed!")

    print("\nAll tests passed successfully!")
