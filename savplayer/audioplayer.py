"""Track list and playback state of the music player."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

TRACK_SUFFIX = ".mp3"
REWIND_THRESHOLD = 2.0


class _MusicBackend(Protocol):
    def load(self, path: Path) -> None: ...
    def length(self, path: Path) -> float: ...
    def play(self) -> None: ...
    def pause(self) -> None: ...
    def seek(self, position: float) -> None: ...
    def update(self) -> None: ...
    def unload(self) -> None: ...


class PygameMusic:
    """Streams one track at a time through ``pygame.mixer.music``."""

    def __init__(self) -> None:
        import pygame

        if not pygame.mixer.get_init():
            pygame.mixer.init()
        self._pygame = pygame
        self._music = pygame.mixer.music
        self._loaded = False
        self._started = False
        self._paused = False
        self._start = 0.0

    def load(self, path: Path) -> None:
        self._music.load(str(path))
        self._loaded = True
        self._started = False
        self._paused = False
        self._start = 0.0

    def length(self, path: Path) -> float:
        return float(self._pygame.mixer.Sound(str(path)).get_length())

    def play(self) -> None:
        if not self._loaded:
            return
        if self._started and self._paused:
            self._music.unpause()
        elif not self._started:
            self._music.play(start=self._start)
            self._started = True
        self._paused = False

    def pause(self) -> None:
        if self._started and not self._paused:
            self._music.pause()
            self._paused = True

    def seek(self, position: float) -> None:
        self._start = position
        if self._started:
            self._music.play(start=position)
            if self._paused:
                self._music.pause()

    def update(self) -> None:
        """Notice a finished stream so the next play starts from the top."""
        if self._started and not self._paused and not self._music.get_busy():
            self._started = False
            self._start = 0.0

    def unload(self) -> None:
        if self._loaded:
            self._music.stop()
            self._music.unload()
        self._loaded = False
        self._started = False
        self._paused = False


def discover_tracks(tracks_dir: str | os.PathLike) -> list[str]:
    """Names of the regular files in ``tracks_dir``, without their extension."""
    with os.scandir(tracks_dir) as entries:
        names = [entry.name for entry in entries if entry.is_file(follow_symlinks=False)]
    return sorted(name.rpartition(".")[0] if "." in name else name for name in names)


def format_duration(seconds: float) -> str:
    """Five-character ``MM:SS`` label with a leading zero shown as a space."""
    total = int(seconds)
    text = f"{total // 60:02d}:{total % 60:02d}"[:5]
    if text.startswith("0"):
        text = " " + text[1:]
    return text


class AudioPlayer:
    """Plays the tracks of a directory in order, looping round the list."""

    def __init__(
        self,
        tracks_dir: str | os.PathLike = "tracks",
        backend: _MusicBackend | None = None,
        *,
        announce: bool = True,
    ) -> None:
        self.tracks_dir = Path(tracks_dir)
        self.backend = backend if backend is not None else PygameMusic()
        self.track_names = discover_tracks(self.tracks_dir)
        if not self.track_names:
            raise ValueError(f"no tracks found in {self.tracks_dir}")
        self.track_lengths = [self.backend.length(self._path(name)) for name in self.track_names]
        self.length_labels = [format_duration(length) for length in self.track_lengths]

        self.paused = True
        self.track_playing = 0
        self.pb_time = 0.0
        self.track_prog = 0.0
        self.pause_stamp = 0.0

        if announce:
            print("TRACKS:")
            for number, (name, label) in enumerate(zip(self.track_names, self.length_labels)):
                print(f"{number}. {name}, {label} ")

        self.load_track(self.track_playing)

    def __enter__(self) -> AudioPlayer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _path(self, name: str) -> Path:
        return self.tracks_dir / f"{name}{TRACK_SUFFIX}"

    @property
    def track_count(self) -> int:
        return len(self.track_names)

    @property
    def current_length(self) -> float:
        return self.track_lengths[self.track_playing]

    def close(self) -> None:
        """Release the current stream."""
        self.backend.unload()

    def update(self, dt: float) -> None:
        """Advance playback by ``dt`` seconds and refresh the progress."""
        self.backend.update()
        if not self.paused:
            self.pb_time += dt
            if self.pb_time > self.current_length:
                self.skip_next()
        length = self.current_length
        self.track_prog = min(self.pb_time / length, 1.0) if length > 0 else 0.0

    def load_track(self, index: int) -> None:
        """Make track ``index`` current, starting at its beginning."""
        if not 0 <= index < self.track_count:
            raise IndexError(f"track {index} out of range")
        self.backend.unload()
        self.track_prog = 0.0
        self.pause_stamp = 0.0
        self.pb_time = 0.0
        self.backend.load(self._path(self.track_names[index]))
        self.track_playing = index

    def play_current(self) -> None:
        """Toggle between playing and paused."""
        if self.paused:
            self.backend.play()
            self.paused = False
        else:
            self.backend.pause()
            self.pause_stamp = self.pb_time
            self.paused = True

    def skip_rewind(self) -> None:
        """Restart the track, or go to the previous one near its start."""
        if self.pb_time > REWIND_THRESHOLD:
            self.pb_time = 0.0
            self.backend.seek(0.0)
            return
        self._start((self.track_playing - 1) % self.track_count)

    def skip_next(self) -> None:
        """Go to the next track, wrapping to the first."""
        self._start((self.track_playing + 1) % self.track_count)

    def _start(self, index: int) -> None:
        self.load_track(index)
        self.paused = False
        self.backend.play()

    def seek(self, fraction: float) -> None:
        """Jump to ``fraction`` of the current track, clamped to [0, 1]."""
        fraction = min(max(fraction, 0.0), 1.0)
        target = fraction * self.current_length
        self.backend.seek(target)
        self.pause_stamp = target
        self.pb_time = target
        self.track_prog = fraction