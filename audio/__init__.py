"""
Audio module for Blink Tac Toe.
Synthesizes and plays the short sound cues for game events.
"""

from .config import AudioConfig
from .tones import synthesize
from .sound_player import SoundPlayer
