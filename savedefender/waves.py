"""Enemy wave descriptions read from the map directory and a custom file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

WAVE_CHUNK = 50
_LEVEL_FILES = ("wave1.txt", "wave2.txt", "wave3.txt", "wave4.txt")

# Spawn point used for custom wave files.
_FILE_SPAWN_X = 150
_FILE_SPAWN_Y = 0
_FILE_SPAWN_ANGLE = 3
_FILE_SPAWN_MAP = 3


class _Spawn(NamedTuple):
    kind: int
    x: int
    y: int
    angle: int
    map_index: int


def line_length(text: str) -> int:
    """Length of the first line of ``text`` (the whole text if it has no newline)."""
    index = text.find("\n")
    return len(text) if index < 0 else index


def read_chunk(path: str | os.PathLike[str], size: int) -> str:
    """Read at most ``size`` bytes of a file as text."""
    with open(path, "rb") as handle:
        return handle.read(size).decode("latin-1")


def _read_or_empty(path: Path) -> str:
    try:
        return read_chunk(path, WAVE_CHUNK)
    except OSError:
        return ""


@dataclass
class WaveSet:
    """The four built-in level waves and an optional custom wave file."""

    levels: tuple[str, ...] = ("", "", "", "")
    file_text: str | None = None
    ctr: int = 0

    @property
    def level_lengths(self) -> tuple[int, ...]:
        return tuple(line_length(level) for level in self.levels)

    @property
    def from_file(self) -> bool:
        return self.file_text is not None

    @property
    def file_length(self) -> int:
        return 0 if self.file_text is None else line_length(self.file_text)

    def next_file_enemy(self) -> _Spawn | None:
        """Advance through the custom wave; None once it is absent or exhausted.

        A returned kind of 0 means no enemy appears on this step.
        """
        if self.file_text is None or self.ctr >= self.file_length:
            return None
        kind = ord(self.file_text[self.ctr]) - ord("0")
        self.ctr += 1
        return _Spawn(kind, _FILE_SPAWN_X, _FILE_SPAWN_Y,
                      _FILE_SPAWN_ANGLE, _FILE_SPAWN_MAP)


def load_waves(path: str | os.PathLike[str],
               base_dir: str | os.PathLike[str] = ".") -> WaveSet:
    """Load the level waves under ``base_dir/maps`` and the custom file ``path``."""
    try:
        file_text: str | None = read_chunk(path, WAVE_CHUNK)
    except OSError:
        file_text = None
    maps_dir = Path(base_dir) / "maps"
    levels = tuple(_read_or_empty(maps_dir / name) for name in _LEVEL_FILES)
    return WaveSet(levels=levels, file_text=file_text)