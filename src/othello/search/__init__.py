"""
Minimax search for choosing machine moves.
"""
from .minimax import GameRules, OthelloRules, SearchEngine, SearchResult, create_engine

__all__ = ['GameRules', 'OthelloRules', 'SearchEngine', 'SearchResult', 'create_engine']
