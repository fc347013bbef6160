"""Short synthesized UI sounds played through sounddevice when available."""

from __future__ import annotations

import logging

import numpy as np

try:
    import sounddevice as sd
except Exception:  # pragma: no cover - dependency optional at import time
    sd = None

SAMPLE_RATE = 44100
SOUND_TONES: dict[str, tuple[float, float]] = {
    "click": (1200.0, 0.035),
    "notify": (880.0, 0.12),
    "success": (660.0, 0.18),
    "error": (220.0, 0.25),
}


def synthesize_tone(
    frequency: float,
    duration: float,
    *,
    sample_rate: int = SAMPLE_RATE,
    volume: float = 0.2,
    fade_ms: float = 5.0,
) -> np.ndarray:
    frames = max(1, int(round(duration * sample_rate)))
    timeline = np.arange(frames, dtype=np.float32) / float(sample_rate)
    audio = (volume * np.sin(2.0 * np.pi * frequency * timeline)).astype(np.float32)
    fade_frames = min(frames // 2, int(sample_rate * fade_ms / 1000.0))
    if fade_frames > 0:
        ramp = np.linspace(0.0, 1.0, fade_frames, dtype=np.float32)
        audio[:fade_frames] *= ramp
        audio[-fade_frames:] *= ramp[::-1]
    return audio


class SoundPlayer:
    def __init__(
        self,
        *,
        enabled: bool = True,
        logger: logging.Logger | None = None,
        sd_module=None,
    ) -> None:
        self.enabled = bool(enabled)
        self.logger = logger or logging.getLogger("appdeck")
        self._sd = sd_module if sd_module is not None else sd
        self._cache: dict[str, np.ndarray] = {}

    @property
    def available(self) -> bool:
        return self.enabled and self._sd is not None

    def play(self, name: str) -> bool:
        tone = SOUND_TONES.get(name)
        if tone is None:
            self.logger.warning("Unknown sound: %s", name)
            return False
        if not self.available:
            self.logger.debug("Sound skipped (disabled or no output device): %s", name)
            return False
        audio = self._cache.get(name)
        if audio is None:
            audio = synthesize_tone(*tone)
            self._cache[name] = audio
        try:
            self._sd.play(audio, samplerate=SAMPLE_RATE, blocking=False)
        except Exception:
            self.logger.exception("Failed to play sound: %s", name)
            return False
        return True
