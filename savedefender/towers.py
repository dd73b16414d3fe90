"""Tower creation, upgrade rules and sprite-sheet row selection."""

from __future__ import annotations

from savedefender.state import Defender, Tower

MAX_LEVEL = 4
UPGRADE_FACTOR = 1.5
PLACED_MARKER = 5
UPGRADE_AREA = 200

_BASE_DAMAGE = {1: 40.0, 2: 60.0, 3: 150.0, 4: 180.0}
_UPGRADE_COSTS = {
    1: (200, 400, 600),
    2: (400, 600, 800),
    3: (600, 800, 1000),
    4: (800, 1000, 1200),
}
# Sprite sheets of the laser towers store their directions in this row order.
_LASER_ROWS = {0: 0, 1: 4, 2: 1, 3: 5, 4: 2, 5: 6, 6: 3, 7: 7}


def new_tower(kind: int, pos: tuple[float, float], defend: Defender) -> Tower:
    """Build a level-one tower of ``kind`` at ``pos`` with skill-tree damage."""
    width, height = 110, 127
    if kind in (3, 4):
        width, height = 82, 79
    if kind == 4:
        height = 72
    damage = _BASE_DAMAGE.get(kind, 0.0) * defend.tree.dmg_mod
    return Tower(kind=kind, pos=(float(pos[0]), float(pos[1])),
                 rect_width=width, rect_height=height, damage=damage)


def upgrade_cost(kind: int, level: int) -> int | None:
    """Price of going from ``level`` to the next one; None when impossible."""
    costs = _UPGRADE_COSTS.get(kind)
    if costs is None or not 1 <= level < MAX_LEVEL:
        return None
    return costs[level - 1]


def can_upgrade(tower: Tower, money: int) -> bool:
    """Whether the upgrade tick is shown for ``tower`` given ``money``."""
    cost = upgrade_cost(tower.kind, tower.level)
    return cost is not None and money >= cost


def hit_upgrade_area(tower: Tower, point: tuple[float, float]) -> bool:
    """Whether a click at ``point`` falls on the tower's upgrade area."""
    x, y = tower.pos
    px, py = point
    return (x - 1 < px < x + UPGRADE_AREA + 1
            and y - 1 < py < y + UPGRADE_AREA + 1)


def _texture_path(kind: int, level: int) -> str:
    return f"images/tower/tower{kind}_{level}.png"


def try_upgrade(defend: Defender, tower: Tower) -> bool:
    """Raise ``tower`` by one level if affordable and nothing is being dragged."""
    cost = upgrade_cost(tower.kind, tower.level)
    if cost is None or defend.money < cost or defend.dragged != PLACED_MARKER:
        return False
    defend.money -= cost
    tower.level += 1
    tower.damage *= UPGRADE_FACTOR
    tower.texture = _texture_path(tower.kind, tower.level)
    return True


def sprite_row(tower: Tower) -> int:
    """Top pixel of the sprite-sheet row matching the tower's direction."""
    if tower.kind in (1, 2):
        return tower.angle * tower.rect_height
    if tower.kind in (3, 4) and tower.angle in _LASER_ROWS:
        return _LASER_ROWS[tower.angle] * tower.rect_height
    return tower.rect_top