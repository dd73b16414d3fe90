"""Command-line entry point and the help texts."""

from __future__ import annotations

import os
import sys

from savedefender.state import create_defender

NO_FILE = "no file"
EXIT_ERROR = 84


class UsageError(Exception):
    """Raised when the command line cannot be used."""


def usage_text() -> str:
    return ("USAGE :\n\t./my_defender\n\nDESCRIPTION\n"
            "\tMyDefender is a tower defense game\n")


def how_to_play_lines() -> list[str]:
    """Title and lines of the how-to-play screen."""
    return [
        "How To Play",
        "You need to defend your base",
        "How ?\t Buy towers from marketplace",
        "And place it on the map !",
        "You can discover some features",
        "like personalized keys",
    ]


def _check_readable(path: str) -> None:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise UsageError("Your entry file doesn't exist !") from exc
    os.close(fd)


def main(argv: list[str] | None = None) -> int:
    """Run with optional custom wave file; ``-h`` prints usage."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) > 1:
            raise UsageError("This programm need 1 or 2 args")
        if not args:
            wave_path = NO_FILE
        elif args[0] == "-h":
            sys.stdout.write(usage_text())
            return 0
        else:
            wave_path = args[0]
            _check_readable(wave_path)
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n")
        return EXIT_ERROR
    create_defender(wave_path, ".")
    return 0