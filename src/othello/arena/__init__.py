"""
Arena module for running tournaments between search players.
"""
from .arena import Arena, SearchPlayer

__all__ = ['Arena', 'SearchPlayer']
