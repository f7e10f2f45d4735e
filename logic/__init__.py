"""
Logic module for Blink Tac Toe.
Handles board state, turn rotation, glyph aging, and win/draw detection.
"""

from .game_state import BoardState, Cell, GameStatus, InvalidMove, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .turn_controller import GameEvent, GameSnapshot, TurnController
