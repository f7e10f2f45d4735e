"""
Audio configuration for Blink Tac Toe.
Settings for the mixer and the tone played for each game event.

Sound needs pygame and a working audio device:
    pip install pygame numpy

Without them the game still runs, just silently.
"""


class AudioConfig:
    """
    Configuration class for sound cues.
    Change these values to taste!
    """

    # ==================== MIXER SETTINGS ====================
    SAMPLE_RATE = 44100
    CHANNELS = 2          # Stereo
    MIXER_BUFFER = 512    # Small buffer for low latency

    # ==================== ENVELOPE ====================
    # Every cue starts at START_GAIN and decays exponentially to END_GAIN
    TONE_DURATION = 0.3   # seconds
    START_GAIN = 0.3
    END_GAIN = 0.01

    # Master volume applied on top of the envelope (0.0 - 1.0)
    VOLUME = 0.6

    # ==================== TONES ====================
    # Sweeps: (start Hz, end Hz, sweep seconds), exponential ramp
    SWEEPS = {
        "place": (800.0, 400.0, 0.1),
        "vanish": (200.0, 100.0, 0.2),
    }

    # Steps: list of (start time seconds, Hz)
    STEPS = {
        "win": [(0.0, 523.0), (0.1, 659.0), (0.2, 784.0)],
        "draw": [(0.0, 300.0)],
    }
