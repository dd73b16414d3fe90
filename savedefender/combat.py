"""Tower aiming and firing at the enemy each tower is focused on."""

from __future__ import annotations

from savedefender.state import Defender, Enemy, Tower
from savedefender.towers import sprite_row

KILL_REWARD = 100
GRAVEYARD = (-40000.0, 100000.0)
ENEMY_SIZE = 63
MAX_FOCUS = 15

# Frames a tower must wait between two shots.
RELOAD = {1: 19, 2: 30, 3: 40, 4: 10}

_LASER_OFFSETS = {
    0: (20, 0, -90.0),
    1: (70, 0, -45.0),
    2: (70, 30, 0.0),
    3: (115, 70, 45.0),
    4: (90, 70, 90.0),
    5: (0, 70, 135.0),
    6: (0, 70, 180.0),
    7: (0, 30, -135.0),
}


def _turn(tower: Tower, angle: int) -> int:
    tower.angle = angle
    tower.rect_top = sprite_row(tower)
    return angle


def find_angle(enemy: Enemy, tower: Tower) -> int:
    """Point ``tower`` at ``enemy`` and return its new direction (0 to 7)."""
    ex, ey = enemy.pos
    tx, ty = tower.pos
    if ex + ENEMY_SIZE < tx:
        if ey + ENEMY_SIZE < ty and ey + 2 * ENEMY_SIZE < ty:
            return _turn(tower, 7)
        if ey < ty:
            return _turn(tower, 6)
        if ey > ty:
            return _turn(tower, 5)
        return tower.angle
    if ex > tx:
        if ey + ENEMY_SIZE < ty and ey < ty:
            return _turn(tower, 1)
        if ey < ty:
            return _turn(tower, 2)
        if ey > ty:
            return _turn(tower, 3)
        return tower.angle
    if ey > ty:
        return _turn(tower, 4)
    angle = 0 if tower.angle in (7, 1) else tower.angle
    return _turn(tower, angle)


def laser_placement(pos: tuple[float, float],
                    angle: int) -> tuple[tuple[float, float], float]:
    """Position and rotation of the laser sprite for a tower facing ``angle``."""
    dx, dy, rotation = _LASER_OFFSETS.get(angle, (0, 0, 0.0))
    return (pos[0] + dx, pos[1] + dy), rotation


def kill_if_dead(defend: Defender, enemy: Enemy) -> bool:
    """Remove an enemy with no health left and reward the player."""
    if enemy.hp > 0:
        return False
    enemy.pos = GRAVEYARD
    enemy.dead = True
    enemy.hp = 0.0
    defend.score += KILL_REWARD
    defend.money += KILL_REWARD
    return True


def fire(defend: Defender, enemy: Enemy,
         tower: Tower) -> tuple[tuple[float, float], float] | None:
    """Aim at ``enemy`` and shoot once reloaded; returns the laser placement."""
    reload = RELOAD.get(tower.kind)
    if reload is None:
        return None
    find_angle(enemy, tower)
    if tower.shoot < reload:
        return None
    enemy.hp -= tower.damage
    tower.shoot = 0
    laser = laser_placement(tower.pos, tower.angle)
    kill_if_dead(defend, enemy)
    return laser


def shoot_focus(defend: Defender,
                tower: Tower) -> tuple[tuple[float, float], float] | None:
    """Fire at the enemy the tower is focused on (1-based); None if none."""
    if not 1 <= tower.focus <= MAX_FOCUS or tower.focus > len(defend.enemies):
        return None
    return fire(defend, defend.enemies[tower.focus - 1], tower)