"""
Sound player for Blink Tac Toe.
Plays the synthesized cues through pygame's mixer, fire-and-forget.
"""

from typing import Dict, Optional
from .config import AudioConfig
from .tones import EVENT_TAGS, synthesize


class SoundPlayer:
    """
    Plays a short cue for each game event.

    pygame is loaded lazily. If it is missing or there is no audio
    device, the player drops to silent mode and play() does nothing.
    """

    def __init__(self, config: Optional[AudioConfig] = None, enabled: bool = True):
        """
        Initialize the sound player.

        Args:
            config: Audio configuration.
            enabled: Start with sound on (the Sound On/Off toggle).
        """
        self.config = config or AudioConfig()
        self.enabled = enabled
        self.silent = False
        self.pygame = None
        self._sounds: Dict[str, object] = {}

    def _init_mixer(self) -> bool:
        """Load pygame and open the mixer. Returns False in silent mode."""
        if self.pygame is not None:
            return True
        if self.silent:
            return False

        try:
            import pygame
            pygame.mixer.pre_init(
                self.config.SAMPLE_RATE, -16, self.config.CHANNELS, self.config.MIXER_BUFFER
            )
            pygame.mixer.init()
            self.pygame = pygame
            print("Sound initialized!")
            return True
        except ImportError:
            print("WARNING: pygame not available. Running without sound.")
        except Exception as e:
            print(f"WARNING: could not open audio device ({e}). Running without sound.")

        self.silent = True
        return False

    def _make_sound(self, samples):
        return self.pygame.sndarray.make_sound(samples)

    def _get_sound(self, tag: str):
        if tag not in self._sounds:
            self._sounds[tag] = self._make_sound(synthesize(tag, self.config))
        return self._sounds[tag]

    def play(self, tag) -> bool:
        """
        Play the cue for an event tag ("place", "vanish", "win", "draw").

        Never raises: audio problems must not affect the game.

        Returns:
            True if a sound was started.
        """
        tag = getattr(tag, "value", tag)
        if tag not in EVENT_TAGS:
            print(f"WARNING: unknown sound event {tag!r}")
            return False

        if not self.enabled or not self._init_mixer():
            return False

        try:
            self._get_sound(tag).play()
            return True
        except Exception as e:
            print(f"WARNING: failed to play {tag} sound: {e}")
            return False

    def toggle(self) -> bool:
        """Flip sound on/off. Returns the new setting."""
        self.enabled = not self.enabled
        return self.enabled

    def close(self):
        """Shut the mixer down."""
        if self.pygame is not None:
            try:
                self.pygame.mixer.quit()
            except Exception as e:
                print(f"WARNING: error closing mixer: {e}")
            self.pygame = None
        self._sounds.clear()
