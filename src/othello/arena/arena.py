"""
Arena for running machine-vs-machine games between search players.
"""
import os
import json
import time
import logging
from datetime import datetime
from typing import Dict, List, Optional

from tqdm import tqdm

from ..config import EvalConfig
from ..game import DARK, LIGHT, OthelloGame
from ..search import OthelloRules, SearchEngine

logger = logging.getLogger(__name__)


class SearchPlayer:
    """A named minimax player with a fixed search depth."""

    def __init__(self, player_id: str, depth: int, use_alpha_beta: bool = True,
                 eval_config: Optional[EvalConfig] = None):
        self.player_id = player_id
        self.depth = depth
        self.use_alpha_beta = use_alpha_beta
        self.eval_config = eval_config
        self.nodes = 0

    def engine_for(self, color: int) -> SearchEngine:
        """Build an engine that maximizes for ``color``."""
        return SearchEngine(OthelloRules(color, self.eval_config),
                            depth=self.depth, use_alpha_beta=self.use_alpha_beta)


class Arena:
    """Arena for running tournaments between different players."""

    def __init__(self, metrics_logger=None):
        """
        Args:
            metrics_logger: Optional Logger that receives one metrics line per game
        """
        self.metrics_logger = metrics_logger
        self.players: Dict[str, SearchPlayer] = {}
        self.standings: Dict[str, Dict[str, float]] = {}
        self.games: List[Dict] = []

    def add_player(self, player: SearchPlayer):
        """Add a player to the arena."""
        self.players[player.player_id] = player
        self.standings[player.player_id] = {'wins': 0, 'losses': 0, 'draws': 0, 'points': 0.0}

    def play_game(self, dark_id: str, light_id: str, verbose: bool = False) -> float:
        """
        Play a single game between two players.

        Args:
            dark_id: ID of the player taking Dark (moves first)
            light_id: ID of the player taking Light
            verbose: Whether to print the board after every move

        Returns:
            1.0 if Dark wins, 0.5 for a draw, 0.0 if Light wins
        """
        if dark_id not in self.players or light_id not in self.players:
            raise ValueError(f"One or both players not found: {dark_id}, {light_id}")

        engines = {
            DARK: self.players[dark_id].engine_for(DARK),
            LIGHT: self.players[light_id].engine_for(LIGHT),
        }
        ids = {DARK: dark_id, LIGHT: light_id}
        game = OthelloGame()
        nodes = {DARK: 0, LIGHT: 0}

        while not game.is_game_over():
            color = game.get_current_player()
            engine = engines[color]
            move = game.machine_move(engine)
            nodes[color] += engine.nodes
            if verbose:
                print(f"{ids[color]} plays at {move}")
                print(game)

        dark_nodes, light_nodes = nodes[DARK], nodes[LIGHT]
        self.players[dark_id].nodes += dark_nodes
        self.players[light_id].nodes += light_nodes
        dark_count, light_count = game.get_score()
        if dark_count > light_count:
            result = 1.0
        elif light_count > dark_count:
            result = 0.0
        else:
            result = 0.5

        self.games.append({
            'dark': dark_id,
            'light': light_id,
            'dark_count': dark_count,
            'light_count': light_count,
            'moves': game.move_count,
            'passes': game.pass_count,
            'result': result,
        })
        logger.info(f"{dark_id} (Dark) {dark_count} - {light_count} {light_id} (Light)")
        if self.metrics_logger is not None:
            self.metrics_logger.log_metrics({
                "dark": dark_id,
                "light": light_id,
                "dark_count": dark_count,
                "light_count": light_count,
                "dark_nodes": dark_nodes,
                "light_nodes": light_nodes,
                "result": result,
            }, step=len(self.games))
        return result

    def _record(self, player_id: str, score: float):
        entry = self.standings[player_id]
        entry['points'] += score
        if score == 1.0:
            entry['wins'] += 1
        elif score == 0.0:
            entry['losses'] += 1
        else:
            entry['draws'] += 1

    def run_tournament(self, rounds: int = 1, verbose: bool = False) -> Dict:
        """
        Run a round-robin tournament between all players.

        Each pairing is played twice per round so both players get each color.

        Returns:
            Dictionary with tournament results
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairings = []
        for i in range(len(player_ids)):
            for j in range(i + 1, len(player_ids)):
                pairings.append((player_ids[i], player_ids[j]))
                pairings.append((player_ids[j], player_ids[i]))

        start_time = time.time()
        with tqdm(total=rounds * len(pairings), desc="Games", disable=verbose) as progress:
            for _ in range(rounds):
                for dark_id, light_id in pairings:
                    result = self.play_game(dark_id, light_id, verbose=verbose)
                    self._record(dark_id, result)
                    self._record(light_id, 1.0 - result)
                    progress.update(1)

        return {
            'games_played': len(self.games),
            'duration': time.time() - start_time,
            'standings': self.get_standings(),
            'games': list(self.games),
        }

    def get_standings(self) -> List[Dict]:
        """Players sorted by points, then by name."""
        standings = []
        for player_id, entry in self.standings.items():
            standings.append({
                'player_id': player_id,
                'depth': self.players[player_id].depth,
                'nodes': self.players[player_id].nodes,
                **entry,
            })
        standings.sort(key=lambda x: (-x['points'], x['player_id']))
        return standings

    def print_standings(self):
        """Print the current standings."""
        print("\nStandings:")
        print("Rank  Player ID       Depth  Points  W  D  L")
        print("----  --------------  -----  ------  -  -  -")
        for i, entry in enumerate(self.get_standings(), 1):
            print(f"{i:4d}  {entry['player_id']:14s}  {entry['depth']:5d}  {entry['points']:6.1f}  "
                  f"{entry['wins']}  {entry['draws']}  {entry['losses']}")

    def save_results(self, filepath: str):
        """Save tournament results to a JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump({
                'timestamp': datetime.now().isoformat(),
                'standings': self.get_standings(),
                'games': self.games,
            }, f, indent=2)
