"""Per-map tower positions, target detection and the firing pass."""

from __future__ import annotations

from savedefender.combat import shoot_focus
from savedefender.state import Defender
from savedefender.targeting import acquire_target, tower_range

_CENTRES: dict[int, tuple[tuple[float, float], ...]] = {
    0: ((325, 200), (680, 540), (1120, 260), (1480, 700)),
    1: ((490, 740), (260, 430), (570, 475), (780, 250),
        (1020, 460), (1440, 660)),
    2: ((310, 300), (490, 680), (740, 840), (940, 570),
        (1010, 360), (1280, 120), (1400, 310), (1600, 750)),
    3: ((100, 360), (300, 720), (850, 930), (1100, 810),
        (900, 580), (730, 370), (1300, 340), (1520, 520)),
}

# On the eight-slot maps the last two slots hand their targets to slots 4 and 5.
_FOCUS_SLOT = {6: 4, 7: 5}


def tower_centres(map_index: int) -> tuple[tuple[float, float], ...]:
    """Range centres of the tower slots of a map, in slot order; empty if unknown."""
    return tuple((float(x), float(y)) for x, y in _CENTRES.get(map_index, ()))


def _focus_slot(slot: int) -> int:
    return _FOCUS_SLOT.get(slot, slot)


def detect(defend: Defender) -> dict[int, int]:
    """Clear and recompute the focus of every placed tower on the current map.

    Returns the focus of each placed tower by slot, after detection.
    """
    handled: list[int] = []
    for slot, centre in enumerate(tower_centres(defend.map_index)):
        if slot >= len(defend.towers) or defend.free_slots[slot]:
            continue
        tower = defend.towers[slot]
        if tower is None:
            continue
        tower.focus = 0
        handled.append(slot)
        radius = tower_range(tower.kind)
        if radius is not None:
            acquire_target(defend, centre, radius, _focus_slot(slot))
    return {slot: defend.towers[slot].focus for slot in handled}


def touchable(defend: Defender) -> list[tuple[tuple[float, float], float]]:
    """Detect targets, then let every tower of the map shoot its focus.

    Returns the laser placements of the shots actually fired.
    """
    slots = len(tower_centres(defend.map_index))
    if not slots:
        return []
    detect(defend)
    lasers = []
    for tower in defend.towers[:slots]:
        if tower is None:
            continue
        laser = shoot_focus(defend, tower)
        if laser is not None:
            lasers.append(laser)
    return lasers