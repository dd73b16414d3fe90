"""Best-score files shown on the scoreboard screen."""

from __future__ import annotations

import os
from pathlib import Path

from savedefender.waves import read_chunk

SCORE_CHUNK = 70
_BOARD = (
    ("TUTORIEL :", "tuto.txt"),
    ("LEVEL 1  :", "level1.txt"),
    ("LEVEL 2  :", "level2.txt"),
    ("BOSS FINAL :", "boss.txt"),
)


def read_score(path: str | os.PathLike[str]) -> str:
    """Text of a score file, limited to its first bytes; empty if unreadable."""
    try:
        return read_chunk(path, SCORE_CHUNK)
    except OSError:
        return ""


def read_scoreboard(directory: str | os.PathLike[str] = "score") -> list[tuple[str, str]]:
    """Pairs of (level title, score text) in display order."""
    base = Path(directory)
    return [(title, read_score(base / name)) for title, name in _BOARD]