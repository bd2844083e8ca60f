# src/tests/collaborators_unit.py
from __future__ import annotations
import json

import pygame

from src.runner.collaborators import JsonHighScoreStore, MemoryHighScoreStore, NullAudio, PygameAudio


def test_json_store_roundtrip(tmp_path):
    store = JsonHighScoreStore(tmp_path / "hs.json")
    assert store.load() == 0, "missing file reads as 0"
    store.save(321)
    assert json.loads((tmp_path / "hs.json").read_text(encoding="utf-8")) == {"high_score": 321}
    assert JsonHighScoreStore(tmp_path / "hs.json").load() == 321


def test_json_store_tolerates_garbage(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonHighScoreStore(path).load() == 0
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert JsonHighScoreStore(path).load() == 0


def test_json_store_write_failure_is_swallowed(tmp_path):
    # a directory where the file should be: write fails, nothing raises
    (tmp_path / "hs.json").mkdir()
    JsonHighScoreStore(tmp_path / "hs.json").save(5)


def test_memory_store_and_null_audio():
    store = MemoryHighScoreStore(7)
    assert store.load() == 7
    store.save(9)
    assert store.load() == 9
    NullAudio().play("jump")


def test_pygame_audio_missing_files_are_noops(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        audio = PygameAudio(tmp_path)
        assert audio.sounds == {}
        audio.play("jump")
        audio.play("no-such-sound")
    finally:
        pygame.mixer.quit()


if __name__ == "__main__":
    import tempfile
    from pathlib import Path
    with tempfile.TemporaryDirectory() as d:
        test_json_store_roundtrip(Path(d))
    test_memory_store_and_null_audio()
    print("✓ collaborator tests passed")
