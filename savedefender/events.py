"""Keyboard and mouse handling: panels, pause, key rebinding and tower dragging."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from savedefender.state import Defender

KEY_A = 0
KEY_Z = 25
KEY_ESCAPE = 36
KEY_LSHIFT = 38

PLAY_SCREEN = 2
PAUSE_SCREEN = 5
SETTINGS_SCREEN = 4
MENU_SCREEN = 0
HOW_TO_PLAY_SCREEN = 7

BUY_PANEL = 10
INVENTORY_PANEL = 11
BOTH_PANELS = 21
CHEAT_MONEY = 10000

MARKET_LABEL = "Market key :"
INVENTORY_LABEL = "Inventary key :"

# Inventory icons that can be dragged: (x range, y range, sprite offset, sprite).
_DRAG_SOURCES = {
    1: ((557, 639), (900, 1004), 30, "images/inv_tower1.png"),
    2: ((700, 770), (900, 984), 30, "images/inv_tower2.png"),
    3: ((1120, 1179), (910, 987), 15, "images/inv_tower3.png"),
    4: ((1270, 1318), (920, 986), 15, "images/inv_tower4.png"),
}


class EventKind(Enum):
    """Kinds of window events the game reacts to."""

    CLOSED = auto()
    KEY_PRESSED = auto()
    MOUSE_PRESSED = auto()
    MOUSE_RELEASED = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Event:
    """A window event; ``key`` is the key code for key presses."""

    kind: EventKind
    key: int = -1


def key_letter(code: int, fallback: str) -> str:
    """Upper-case letter of a letter key, or ``fallback`` for any other key."""
    if KEY_A <= code <= KEY_Z:
        return chr(ord("A") + code - KEY_A)
    return fallback


def escape(defend: Defender) -> int:
    """Toggle pause during play, or go back to the menu; returns the new screen."""
    if defend.screen == PLAY_SCREEN:
        defend.screen = PAUSE_SCREEN
    elif defend.screen == PAUSE_SCREEN:
        defend.screen = PLAY_SCREEN
    if defend.screen in (1, 3, 4, HOW_TO_PLAY_SCREEN):
        defend.screen = MENU_SCREEN
    return defend.screen


def key_press(defend: Defender, event: Event) -> None:
    """React to a pressed key: escape, panel toggles and the money cheat."""
    if event.key == KEY_ESCAPE:
        escape(defend)
    playing = defend.screen == PLAY_SCREEN
    if event.key == defend.keys.buy_key and playing:
        if defend.hud in (BUY_PANEL, BOTH_PANELS):
            defend.hud -= BUY_PANEL
        else:
            defend.hud += BUY_PANEL
    if event.key == defend.keys.inventory_key and playing:
        if defend.hud in (INVENTORY_PANEL, BOTH_PANELS):
            defend.hud -= INVENTORY_PANEL
        else:
            defend.hud += INVENTORY_PANEL
    if event.key == KEY_LSHIFT and playing:
        defend.money += CHEAT_MONEY


def bind(defend: Defender, event: Event) -> None:
    """Assign the pressed key to the binding being chosen, if any.

    A key already used by the other binding is refused.
    """
    keys = defend.keys
    defend.mouse = 2
    if keys.waiting == 1:
        letter = key_letter(event.key, keys.buy_letter)
        if letter != keys.buy_letter:
            keys.inventory_letter = letter
            keys.inventory_key = event.key
        defend.mouse = 0
        keys.waiting = 0
    if keys.waiting == 2:
        letter = key_letter(event.key, keys.buy_letter)
        if letter != keys.inventory_letter:
            keys.buy_letter = letter
            keys.buy_key = event.key
        defend.mouse = 0
        keys.waiting = 0


def select_binding(defend: Defender, label: str) -> int:
    """Start choosing a key for the button labelled ``label``; returns the wait state."""
    if label == MARKET_LABEL:
        defend.keys.waiting = 1
    elif label == INVENTORY_LABEL:
        defend.keys.waiting = 2
    return defend.keys.waiting


def mouse_hold_allowed(defend: Defender, point: tuple[float, float]) -> bool:
    """Whether a held mouse button stays held at ``point`` on the current screen."""
    x, y = point
    if defend.screen == SETTINGS_SCREEN and 160 < x < 700 and y > 650:
        return True
    return defend.screen == PLAY_SCREEN


def analyse_event(defend: Defender, event: Event,
                  point: tuple[float, float]) -> bool:
    """Update the state from one event; False means the window must close."""
    if event.kind is EventKind.MOUSE_RELEASED or not mouse_hold_allowed(defend, point):
        defend.mouse = 0
    if event.kind is EventKind.CLOSED:
        return False
    if event.kind is EventKind.KEY_PRESSED:
        key_press(defend, event)
        bind(defend, event)
    if event.kind is EventKind.MOUSE_PRESSED:
        defend.mouse = 1
    return True


def drag_pick(defend: Defender,
              point: tuple[float, float]) -> list[tuple[str, tuple[int, int]]]:
    """Pick up or move an inventory tower under the held mouse.

    Returns the sprites to draw under the cursor as (path, position) pairs.
    """
    x, y = point
    sprites = []
    for kind, ((xmin, xmax), (ymin, ymax), offset, path) in _DRAG_SOURCES.items():
        if xmin < x < xmax and ymin < y < ymax:
            defend.dragged = kind
        if defend.dragged == kind and defend.inventory.quantities[kind - 1] > 0:
            sprites.append((path, (int(x - offset), int(y - offset))))
            defend.drop = (x, y)
    return sprites