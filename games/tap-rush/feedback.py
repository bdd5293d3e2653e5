from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np
import pygame

from holetap.core.events import FeedbackEvent, FeedbackKind

log = logging.getLogger(__name__)

SAMPLE_RATE = 44100


@dataclass(frozen=True)
class Tone:
    freq: float
    dur: float          # seconds
    wave: str = "sine"  # sine | square | triangle
    gain: float = 0.05
    slide: float = 0.0  # Hz added linearly over the tone
    delay: float = 0.0  # seconds after the cue starts


CUES: Dict[FeedbackKind, Tuple[Tone, ...]] = {
    FeedbackKind.HIT: (Tone(520, 0.05, "triangle", 0.06, 180),),
    FeedbackKind.BONUS: (
        Tone(660, 0.06, "square", 0.045, 220),
        Tone(880, 0.07, "square", 0.04, 120, delay=0.04),
    ),
    FeedbackKind.MISS: (Tone(180, 0.07, "sine", 0.04, -60),),
    FeedbackKind.START: (Tone(380, 0.08, "triangle", 0.05, 160),),
    FeedbackKind.END: (Tone(240, 0.12, "sine", 0.04, -80),),
}


def synth_tone(tone: Tone, rate: int = SAMPLE_RATE) -> np.ndarray:
    """One tone as float32 samples in [-1, 1] with an exponential fade-out."""
    n = max(1, int(tone.dur * rate))
    t = np.arange(n, dtype=np.float64) / rate
    freq = tone.freq + tone.slide * (t / tone.dur)
    phase = 2.0 * np.pi * np.cumsum(freq) / rate
    if tone.wave == "square":
        wave = np.sign(np.sin(phase))
    elif tone.wave == "triangle":
        wave = 2.0 / np.pi * np.arcsin(np.sin(phase))
    else:
        wave = np.sin(phase)
    env = tone.gain * (0.0001 / tone.gain) ** (t / tone.dur)
    return (wave * env).astype(np.float32)


def render_cue(tones: Tuple[Tone, ...], rate: int = SAMPLE_RATE) -> np.ndarray:
    parts: List[Tuple[int, np.ndarray]] = [(int(tone.delay * rate), synth_tone(tone, rate)) for tone in tones]
    total = max(start + len(samples) for start, samples in parts)
    out = np.zeros(total, dtype=np.float32)
    for start, samples in parts:
        out[start:start + len(samples)] += samples
    return np.clip(out, -1.0, 1.0)


class ToneFeedback:
    """
    Plays a short synthesized cue for each feedback event. Without a usable
    audio device it stays silent.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sounds: Dict[FeedbackKind, pygame.mixer.Sound] = {}
        self._available = self._init_mixer()

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16)
            rate, _, channels = pygame.mixer.get_init()
            for kind, tones in CUES.items():
                pcm = (render_cue(tones, rate) * 32767).astype(np.int16)
                if channels > 1:
                    pcm = np.repeat(pcm[:, None], channels, axis=1)
                self._sounds[kind] = pygame.sndarray.make_sound(np.ascontiguousarray(pcm))
        except (pygame.error, NotImplementedError, ValueError) as exc:
            log.warning("Sound disabled: %s", exc)
            self._sounds.clear()
            return False
        return True

    @property
    def available(self) -> bool:
        return self._available

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def notify(self, event: FeedbackEvent) -> None:
        if not (self.enabled and self._available):
            return
        sound = self._sounds.get(event.kind)
        if sound is not None:
            sound.play()
