"""Settings screen choices: frame rate, window resolution and volume sliders."""

from __future__ import annotations

from savedefender.state import Defender

_FRAMERATES = {
    "\t\t30": 30,
    "\t\t60": 60,
    "\t   144": 144,
}

_RESOLUTIONS = {
    "\t  16/9": (169, (1920, 1080)),
    "\t  16/10": (1610, (2560, 1600)),
    "\t   4/3": (43, (1280, 1024)),
}

MUSIC_SLIDER_Y = 686
SOUND_SLIDER_Y = 885
_KNOB_OFFSET = 34
_SLIDER_MIN = 170 + _KNOB_OFFSET
_SLIDER_MAX = 676 + _KNOB_OFFSET
_MUTE_THRESHOLD = 2


def choose_framerate(defend: Defender, label: str) -> int | None:
    """Apply the frame rate of a clicked button; None for an unknown label."""
    rate = _FRAMERATES.get(label)
    if rate is not None:
        defend.framerate = rate
    return rate


def choose_resolution(defend: Defender, label: str) -> tuple[int, int] | None:
    """Apply the resolution of a clicked button and return the window size."""
    choice = _RESOLUTIONS.get(label)
    if choice is None:
        return None
    defend.window_size, size = choice
    return size


def slider_volume(defend: Defender, slider_y: float, mouse_x: float) -> float | None:
    """Drag a volume slider to ``mouse_x`` while the mouse is held.

    Returns the new volume, or None when nothing moved.
    """
    if defend.mouse != 1 or not _SLIDER_MIN < mouse_x < _SLIDER_MAX:
        return None
    knob_x = mouse_x - _KNOB_OFFSET
    volume = knob_x / 5 - 34.3
    if volume <= _MUTE_THRESHOLD:
        volume = 0.0
    if slider_y == MUSIC_SLIDER_Y:
        defend.music_slider = (knob_x, defend.music_slider[1])
        defend.sound.music_volume = volume
    elif slider_y == SOUND_SLIDER_Y:
        defend.sound_slider = (knob_x, defend.sound_slider[1])
        defend.sound.sound_volume = volume
    else:
        return None
    return volume