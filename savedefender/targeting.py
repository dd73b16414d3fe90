"""Choosing which enemy a tower focuses on, from the enemies within its range."""

from __future__ import annotations

from savedefender.state import Defender, Enemy

# Only the first enemies of a wave can be targeted.
MAX_TARGETS = 15

_RANGES = {1: 300, 2: 350, 3: 400, 4: 450}


def tower_range(kind: int) -> int | None:
    """Firing radius of a tower of ``kind``; None for an unknown kind."""
    return _RANGES.get(kind)


def in_range(enemy: Enemy, centre: tuple[float, float], radius: float) -> bool:
    """Whether ``enemy`` lies inside or on the circle around ``centre``."""
    dx = enemy.pos[0] - centre[0]
    dy = enemy.pos[1] - centre[1]
    return dx * dx + dy * dy <= radius * radius


def acquire_target(defend: Defender, centre: tuple[float, float],
                   radius: float, slot: int) -> int | None:
    """Focus the tower in ``slot`` on the first enemy within ``radius``.

    Enemies are numbered from 1 in wave order and the lowest number in range
    wins. Returns that number, or None when no enemy is in range; the tower's
    current focus is then left as it was.
    """
    candidates = defend.enemies[:MAX_TARGETS]
    target = next(
        (number for number, enemy in enumerate(candidates, start=1)
         if in_range(enemy, centre, radius)),
        None,
    )
    if target is None:
        return None
    if 0 <= slot < len(defend.towers):
        tower = defend.towers[slot]
        if tower is not None:
            tower.focus = target
    return target