"""
SnakeBrain - move decisions for Battlesnake.

domain: per-turn game values and the pure functions over them
strategies: the move policies and the registry that names them
"""

__version__ = "0.1.0"
