"""
Tone synthesis for Blink Tac Toe.
Builds each cue as a 16-bit stereo sample array with numpy.
"""

import numpy as np
from typing import Optional
from .config import AudioConfig


EVENT_TAGS = ("place", "vanish", "win", "draw")


def sample_times(config: Optional[AudioConfig] = None) -> np.ndarray:
    """Sample timestamps (seconds) covering one cue."""
    config = config or AudioConfig()
    n = int(config.SAMPLE_RATE * config.TONE_DURATION)
    return np.arange(n) / config.SAMPLE_RATE


def frequency_curve(tag: str, config: Optional[AudioConfig] = None) -> np.ndarray:
    """
    Instantaneous frequency for every sample of a cue.

    Args:
        tag: One of "place", "vanish", "win", "draw".
        config: Audio configuration.

    Returns:
        Array of frequencies in Hz.
    """
    config = config or AudioConfig()
    t = sample_times(config)

    if tag in config.SWEEPS:
        f0, f1, sweep = config.SWEEPS[tag]
        # Exponential ramp, then hold the end frequency
        progress = np.clip(t / sweep, 0.0, 1.0)
        return f0 * (f1 / f0) ** progress

    if tag in config.STEPS:
        freqs = np.empty_like(t)
        for start, hz in config.STEPS[tag]:
            freqs[t >= start] = hz
        return freqs

    raise ValueError(f"Unknown sound event: {tag}")


def envelope(config: Optional[AudioConfig] = None) -> np.ndarray:
    """Exponential gain decay from START_GAIN to END_GAIN."""
    config = config or AudioConfig()
    t = sample_times(config)
    ratio = config.END_GAIN / config.START_GAIN
    return config.START_GAIN * ratio ** (t / config.TONE_DURATION)


def synthesize(tag: str, config: Optional[AudioConfig] = None) -> np.ndarray:
    """
    Render a cue as int16 samples.

    Returns:
        Array of shape (samples, channels), C-contiguous, ready for
        pygame.sndarray.make_sound.
    """
    config = config or AudioConfig()

    freqs = frequency_curve(tag, config)
    # Integrate frequency to get phase so sweeps stay continuous
    phase = 2.0 * np.pi * np.cumsum(freqs) / config.SAMPLE_RATE
    wave = np.sin(phase) * envelope(config) * config.VOLUME

    samples = np.clip(wave * 32767, -32768, 32767).astype(np.int16)
    return np.ascontiguousarray(np.repeat(samples[:, None], config.CHANNELS, axis=1))
