"""Choice of the music track and its volume for the current screen."""

from __future__ import annotations

from typing import NamedTuple

from savedefender.state import Defender

MENU_TRACK = "sounds/menu.ogg"
GAME_TRACK = "sounds/world-ambience-5.ogg"
_GAME_SCREENS = (2, 8)


class _AudioCommand(NamedTuple):
    action: str
    track: str
    volume: float | None = None


def update_music(defend: Defender) -> list[_AudioCommand]:
    """Switch between menu and in-game music; returns the commands to play out.

    The menu branch always runs first, so on game screens the in-game track
    is paused and restarted by the second branch.
    """
    sound = defend.sound
    commands = []
    if sound.in_game:
        commands.append(_AudioCommand("pause", GAME_TRACK))
        commands.append(_AudioCommand("play", MENU_TRACK))
        sound.in_game = False
    commands.append(_AudioCommand("volume", MENU_TRACK, sound.music_volume))
    if defend.screen in _GAME_SCREENS:
        if not sound.in_game:
            commands.append(_AudioCommand("pause", MENU_TRACK))
            commands.append(_AudioCommand("play", GAME_TRACK))
            sound.in_game = True
        commands.append(_AudioCommand("volume", GAME_TRACK, sound.music_volume))
    return commands