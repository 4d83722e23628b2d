from __future__ import annotations
import sys
from typing import Optional

import numpy as np
import pygame

SAMPLE_RATE = 44100
DECAY_FLOOR = 0.00001  # envelope value at the end of the blip


def sine_blip(freq_hz: float, dur_ms: int, gain: float,
              sample_rate: int = SAMPLE_RATE, channels: int = 2) -> np.ndarray:
    """
    Sine tone with an exponential fade from `gain` down to DECAY_FLOOR.
    Returns int16 samples shaped (n,) for mono or (n, channels) otherwise,
    which is what pygame.sndarray.make_sound expects.
    """
    n = max(1, int(sample_rate * dur_ms / 1000.0))
    t = np.arange(n) / float(sample_rate)
    envelope = gain * np.power(DECAY_FLOOR / gain, np.linspace(0.0, 1.0, n)) if gain > 0 else np.zeros(n)
    wave = np.sin(2 * np.pi * freq_hz * t) * envelope
    data = (np.clip(wave, -1.0, 1.0) * (2**15 - 1)).astype(np.int16)
    if channels == 1:
        return data
    return np.ascontiguousarray(np.column_stack([data] * channels))


class ToneCue:
    """
    A short fixed blip, synthesized once and replayed on demand.

    If the mixer can't be brought up (no audio device, dummy driver, mute)
    the cue stays disabled and play() does nothing.
    """

    def __init__(self, freq_hz: float = 880.0, dur_ms: int = 100, gain: float = 0.1,
                 enabled: bool = True, debug: bool = False):
        self.freq_hz = freq_hz
        self.dur_ms = dur_ms
        self.gain = gain
        self.debug = debug
        self._sound: Optional[pygame.mixer.Sound] = None
        if enabled:
            self._sound = self._build()

    @property
    def available(self) -> bool:
        return self._sound is not None

    def _build(self) -> Optional[pygame.mixer.Sound]:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init()
            rate, _size, channels = pygame.mixer.get_init()
            samples = sine_blip(self.freq_hz, self.dur_ms, self.gain,
                                sample_rate=rate, channels=channels)
            return pygame.sndarray.make_sound(samples)
        except (pygame.error, TypeError, ValueError) as e:
            if self.debug:
                print(f"audio cue disabled: {e}", file=sys.stderr)
            return None

    def play(self) -> None:
        if self._sound is None:
            return
        try:
            self._sound.play()
        except pygame.error as e:
            if self.debug:
                print(f"audio cue failed: {e}", file=sys.stderr)
