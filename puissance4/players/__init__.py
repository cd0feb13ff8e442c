"""
puissance4.players - Player implementations

Everything the engine can ask for a move: the abstract Player and the bundled
human and random variants.
"""

from puissance4.players.base import Player
from puissance4.players.cli import CLIPlayer
from puissance4.players.random_bot import RandomPlayer

__all__ = ['Player', 'CLIPlayer', 'RandomPlayer']
