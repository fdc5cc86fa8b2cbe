# Sound effects

import math
from array import array

import pygame

from .models import EventKind, GameEvent
from .storage import load_sound_enabled, save_sound_enabled

# Tone per sound category (Hz)
TONES = {
    "spawn": 260,
    "kill": 520,
    "hit": 180,
    "wrong": 150,
    "life": 600,
    "record": 700,
}

EVENT_SOUNDS = {
    EventKind.SPAWN: "spawn",
    EventKind.KILL: "kill",
    EventKind.MISS: "hit",
    EventKind.MISMATCH: "wrong",
    EventKind.LIFE_GAINED: "life",
    EventKind.NEW_RECORD: "record",
}

TONE_MS = 200
ATTACK_MS = 10
DECAY_MS = 180
PEAK = 0.3
FLOOR = 0.001


class ToneBoard:
    """
    Short synthesized beeps, one per game event category.

    The mixer is probed once; when no audio device is available every
    request is silently dropped. The on/off preference lives in the store.
    """

    def __init__(self, store=None, enabled=None):
        self.store = store
        if enabled is None:
            enabled = load_sound_enabled(store) if store is not None else True
        self.enabled = enabled
        self.available = self._init_mixer()
        self.sounds = {}
        if self.available:
            for name, freq in TONES.items():
                self.sounds[name] = self._make_tone(freq)

    def _init_mixer(self):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.pre_init(frequency=22050, size=-16, channels=1, buffer=512)
                pygame.mixer.init()
        except pygame.error as e:
            print(f"Audio unavailable: {e}")
            return False
        return pygame.mixer.get_init() is not None

    def _envelope(self, t_ms):
        # Ramp up to PEAK, then decay exponentially down to FLOOR.
        if t_ms < ATTACK_MS:
            return FLOOR * (PEAK / FLOOR) ** (t_ms / ATTACK_MS)
        decay = min(1.0, (t_ms - ATTACK_MS) / (DECAY_MS - ATTACK_MS))
        return PEAK * (FLOOR / PEAK) ** decay

    def _make_tone(self, freq):
        sample_rate, _, channels = pygame.mixer.get_init()
        n = max(1, int(sample_rate * TONE_MS / 1000))
        buf = array("h")
        for i in range(n):
            t = i / sample_rate
            s = int(32767 * self._envelope(t * 1000) * math.sin(2 * math.pi * freq * t))
            buf.extend([s] * channels)
        return pygame.mixer.Sound(buffer=buf.tobytes())

    def play(self, name):
        if not (self.enabled and self.available):
            return
        snd = self.sounds.get(name)
        if snd is not None:
            snd.play()

    def toggle(self):
        self.enabled = not self.enabled
        if self.store is not None:
            save_sound_enabled(self.store, self.enabled)
        return self.enabled

    def handle(self, event: GameEvent):
        """Simulation listener."""
        name = EVENT_SOUNDS.get(event.kind)
        if name:
            self.play(name)
