"""
puissance4.game - Core game mechanics

The area, the win/draw detector and the engine driving a game between two
players.
"""

from puissance4.game.area import Area, AreaView
from puissance4.game.detector import check_victory_from, detect_result, scan_result, winning_line
from puissance4.game.engine import Engine, EngineState, TurnOutcome

__all__ = ['Area', 'AreaView', 'check_victory_from', 'detect_result', 'scan_result', 'winning_line',
           'Engine', 'EngineState', 'TurnOutcome']
