# src/runner/collaborators.py
"""
Interfaces between the simulation core and the outside world.

The core only ever talks to an Audio and a HighScoreStore; both have
no-op / in-memory stand-ins so a run can be simulated without pygame,
a sound device or a writable disk.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol
from .config import HIGH_SCORE_FILE, AUDIO_DIR, SOUND_FILES, SOUND_VOLUMES

logger = logging.getLogger(__name__)


class Audio(Protocol):
    def play(self, name: str) -> None: ...


class HighScoreStore(Protocol):
    def load(self) -> int: ...
    def save(self, score: int) -> None: ...


class Renderer(Protocol):
    def draw(self, state) -> None: ...


class NullAudio:
    def play(self, name: str) -> None:
        pass


class MemoryHighScoreStore:
    def __init__(self, score: int = 0):
        self.score = int(score)

    def load(self) -> int:
        return self.score

    def save(self, score: int) -> None:
        self.score = int(score)


class JsonHighScoreStore:
    """High score kept as {"high_score": n} in a small JSON file."""
    def __init__(self, path: str | Path = HIGH_SCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return max(0, int(data.get("high_score", 0)))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> None:
        try:
            self.path.write_text(json.dumps({"high_score": int(score)}, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("could not write high score to %s: %s", self.path, e)


class PygameAudio:
    """
    Fire-and-forget sound effects through pygame.mixer.
    Missing files, a missing audio device or a failed play() are logged and ignored.
    """
    def __init__(self, audio_dir: str | Path = AUDIO_DIR,
                 files: Optional[Dict[str, str]] = None):
        import pygame

        self._pygame = pygame
        self.sounds: Dict[str, "pygame.mixer.Sound"] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning("audio disabled, mixer init failed: %s", e)
            return

        for name, fname in (files or SOUND_FILES).items():
            path = Path(audio_dir) / fname
            try:
                sound = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("could not load sound %r from %s: %s", name, path, e)
                continue
            sound.set_volume(SOUND_VOLUMES.get(name, 1.0))
            self.sounds[name] = sound

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is None:
            logger.debug("no sound loaded for %r", name)
            return
        try:
            sound.stop()    # restart from the beginning on rapid re-triggers
            sound.play()
        except self._pygame.error as e:
            logger.warning("audio play failed for %r: %s", name, e)
