"""What each screen of the game draws, described as an ordered list of layers."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from savedefender.cli import how_to_play_lines
from savedefender.scores import read_scoreboard
from savedefender.state import Defender
from savedefender.strutil import format_number
from savedefender.towers import can_upgrade

BACKGROUND = "images/background.png"
PLACEHOLDER = "images/tower_pl.png"
REACTOR = "images/reactor.png"
REACTOR_REMNANT = "images/reactor_remanant.png"
TICK = "images/tick1.png"
SLIDER = "images/slider.png"
TITLE = "Save Ukraine"
RETURN_LABEL = "    RETURN"
WIN_TEXT = " YOU WIIIIIN !\n PEACE WON !!!"
LOSE_TEXT = " YOU LOOOOOOOSE !\n PUTIN IS BETTER !!!"
_TICK_OFFSET = 40


class Screen(IntEnum):
    """Screens the game can show."""

    MENU = 0
    CHOICE = 1
    PLAY = 2
    SCOREBOARD = 3
    SETTINGS = 4
    PAUSE = 5
    HOW_TO_PLAY = 7
    ANIMATION = 8
    LOST = 9
    WON = 10


class _Layer(NamedTuple):
    kind: str
    content: str
    position: tuple[float, float]


_BACKGROUNDS = {
    0: "maps/tuto.png",
    1: "maps/map1.png",
    2: "maps/map2.png",
    3: "maps/boss.png",
}

_PLACEHOLDERS: dict[int, tuple[tuple[int, int], ...]] = {
    0: ((300, 200), (650, 490), (1100, 200), (1440, 620)),
    1: ((470, 690), (250, 390), (540, 425), (750, 210), (990, 420), (1400, 620)),
    2: ((260, 240), (470, 630), (700, 770), (910, 520),
        (975, 300), (1240, 50), (1370, 250), (1570, 710)),
    3: ((60, 310), (270, 660), (820, 880), (1060, 750),
        (855, 535), (680, 310), (1250, 290), (1500, 470)),
}

_REACTORS = {
    0: ((1770, 750), (1790, 770)),
    1: ((1750, 680), (1770, 700)),
    2: ((1770, 600), (1790, 600)),
    3: ((1770, 570), (1790, 570)),
}

_PAUSE_BACKGROUNDS = {
    0: "images/pause_tuto.png",
    1: "images/pause_map1.png",
    2: "images/pause_map2.png",
    3: "images/pause_boss.png",
}


def map_background(map_index: int) -> str | None:
    """Background image of a map; None for an unknown map."""
    return _BACKGROUNDS.get(map_index)


def placeholder_positions(map_index: int) -> tuple[tuple[int, int], ...]:
    """Where the empty tower slots of a map are drawn, in slot order."""
    return _PLACEHOLDERS.get(map_index, ())


def reactor_sprite(map_index: int, lost: bool) -> tuple[str, tuple[int, int]] | None:
    """Reactor image and position, intact or destroyed; None for an unknown map."""
    positions = _REACTORS.get(map_index)
    if positions is None:
        return None
    intact, remnant = positions
    return (REACTOR_REMNANT, remnant) if lost else (REACTOR, intact)


def pause_background(map_index: int) -> str | None:
    """Background of the pause screen for a map; None for an unknown map."""
    return _PAUSE_BACKGROUNDS.get(map_index)


def final_score(defend: Defender) -> str:
    """Score shown after a win: points plus remaining money."""
    return format_number(defend.score + defend.money)


def is_lost(defend: Defender) -> bool:
    """Whether the reactor has been destroyed."""
    return defend.hp < 0


def _sprite(path: str, x: float, y: float) -> _Layer:
    return _Layer("sprite", path, (float(x), float(y)))


def _text(content: str, x: float, y: float) -> _Layer:
    return _Layer("text", content, (float(x), float(y)))


def _button(label: str, x: float, y: float) -> _Layer:
    return _Layer("button", label, (float(x), float(y)))


def _map_layers(defend: Defender) -> list[_Layer]:
    background = map_background(defend.map_index)
    if background is None:
        return []
    layers = [_sprite(background, 0, 0)]
    for slot, (x, y) in enumerate(placeholder_positions(defend.map_index)):
        tower = defend.towers[slot] if slot < len(defend.towers) else None
        if defend.free_slots[slot] or tower is None:
            layers.append(_sprite(PLACEHOLDER, x, y))
            continue
        layers.append(_Layer("tower", tower.texture, tower.pos))
        if can_upgrade(tower, defend.money):
            tx, ty = tower.pos
            layers.append(_sprite(TICK, tx - _TICK_OFFSET, ty - _TICK_OFFSET))
    reactor = reactor_sprite(defend.map_index, is_lost(defend))
    if reactor is not None:
        path, (x, y) = reactor
        layers.append(_sprite(path, x, y))
    return layers


def _menu_layers() -> list[_Layer]:
    return [
        _sprite(BACKGROUND, 0, 0),
        _button(" best score", 800, 450),
        _button("      Play", 800, 300),
        _button("      Quit", 800, 750),
        _button("   Settings", 800, 600),
        _text(TITLE, 650, 100),
        _button(" h", 75, 900),
    ]


def _choice_layers(defend: Defender) -> list[_Layer]:
    layers = [
        _sprite(BACKGROUND, 0, 0),
        _sprite("images/mini4.png", 100, 400),
        _sprite("images/mini1.png", 525, 400),
        _sprite("images/mini2.png", 950, 400),
        _sprite("images/mini3.png", 1375, 400),
        _button("   Level  1", 600, 200),
        _button("   Level  2", 1000, 200),
        _button(" boss  final", 1400, 200),
        _button("   tutoriel", 200, 200),
        _button(RETURN_LABEL, 50, 50),
        _button("\t  PLAY", 800, 800),
    ]
    defend.reset_game()
    return layers


def _settings_layers(defend: Defender) -> list[_Layer]:
    return [
        _sprite(BACKGROUND, 0, 0),
        _button(RETURN_LABEL, 50, 50),
        _text("Choose your resolution :", 115, 160),
        _text("Set up your sounds :", 100, 500),
        _text("Set up your keys :", 1000, 160),
        _button("\t  16/10", 100, 300),
        _button("\t  16/9", 320, 300),
        _button("\t   4/3", 540, 300),
        _text("Market key :", 1000, 300),
        _text("Inventary key :", 1000, 450),
        _button(defend.keys.buy_letter, 1500, 300),
        _button(defend.keys.inventory_letter, 1500, 450),
        _text("Set up your FrameRate :", 1000, 650),
        _button("\t   144", 1000, 800),
        _button("\t\t60", 1220, 800),
        _button("\t\t30", 1440, 800),
        _sprite(SLIDER, 150, 670),
        _sprite(SLIDER, 150, 870),
        _button(" ", *defend.music_slider),
        _button(" ", *defend.sound_slider),
        _text("Volume of musics :", 150, 600),
        _text("Volume of sounds :", 150, 800),
    ]


_SCORE_COLUMNS = (150, 580, 990, 1380)


def _scoreboard_layers() -> list[_Layer]:
    layers = [_sprite(BACKGROUND, 0, 0), _button(RETURN_LABEL, 50, 50)]
    board = read_scoreboard("score")
    layers.extend(_text(title, x, 200) for x, (title, _) in zip(_SCORE_COLUMNS, board))
    layers.append(_text("ScoreBoard / Levels :", 600, 50))
    layers.extend(_text(score, x, 300) for x, (_, score) in zip(_SCORE_COLUMNS, board))
    return layers


def _pause_layers(defend: Defender) -> list[_Layer]:
    layers = []
    background = pause_background(defend.map_index)
    if background is not None:
        layers.append(_sprite(background, 0, 0))
    layers += [
        _text("      Pause", 650, 100),
        _button("  Continue", 600, 130),
        _button(" main menu", 1150, 130),
    ]
    return layers


_HTP_POSITIONS = ((500, 100), (200, 340), (200, 500), (200, 650), (200, 800), (200, 930))


def _how_to_play_layers() -> list[_Layer]:
    layers = [_sprite(BACKGROUND, 0, 0), _button(RETURN_LABEL, 50, 50)]
    layers.extend(_text(line, x, y)
                  for (x, y), line in zip(_HTP_POSITIONS, how_to_play_lines()))
    return layers


def _lost_layers(defend: Defender) -> list[_Layer]:
    defend.money = 0
    layers = _map_layers(defend)
    layers += [_text(LOSE_TEXT, 500, 400), _button(RETURN_LABEL, 50, 50)]
    return layers


def _won_layers(defend: Defender) -> list[_Layer]:
    return [
        _sprite(BACKGROUND, 0, 0),
        _text("Score :", 600, 180),
        _text(final_score(defend), 1000, 180),
        _text(WIN_TEXT, 500, 400),
        _button(RETURN_LABEL, 50, 50),
    ]


def screen_layers(defend: Defender) -> list[_Layer]:
    """Layers drawn this frame for the current screen, back to front.

    Like the frame it describes, this has the screen's side effects: the map
    choice screen resets the round and the defeat screen empties the purse.
    Screens drawn by the in-game HUD produce no layers here.
    """
    screen = defend.screen
    if screen == Screen.MENU:
        return _menu_layers()
    if screen == Screen.CHOICE:
        return _choice_layers(defend)
    if screen == Screen.SETTINGS:
        return _settings_layers(defend)
    if screen == Screen.SCOREBOARD:
        return _scoreboard_layers()
    if screen == Screen.PAUSE:
        return _pause_layers(defend)
    if screen == Screen.HOW_TO_PLAY:
        return _how_to_play_layers()
    if screen == Screen.LOST:
        return _lost_layers(defend)
    if screen == Screen.WON:
        return _won_layers(defend)
    return []