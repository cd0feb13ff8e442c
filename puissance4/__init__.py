"""
puissance4 - A Connect Four ("Puissance 4") game engine

This package provides the playing area, win/draw detection, a turn-driven
engine and a player interface, together with a random bot and a command-line
human player.
"""

__version__ = '0.1.0'
