import pytest

from savedefender.combat import (
    fire,
    find_angle,
    kill_if_dead,
    laser_placement,
    shoot_focus,
)
from savedefender.state import Defender, Enemy, Tower
from savedefender.towers import new_tower


def _tower(kind=1, angle=0):
    tower = new_tower(kind, (500, 500), Defender())
    tower.angle = angle
    return tower


@pytest.mark.parametrize("enemy_pos,expected", [
    ((100, 100), 7),
    ((100, 480), 6),
    ((100, 600), 5),
    ((600, 100), 1),
    ((600, 480), 2),
    ((600, 600), 3),
    ((480, 600), 4),
])
def test_find_angle_directions(enemy_pos, expected):
    tower = _tower()
    assert find_angle(Enemy(kind=1, pos=enemy_pos), tower) == expected
    assert tower.angle == expected
    assert tower.rect_top == expected * tower.rect_height


def test_find_angle_straight_up_resets_diagonal():
    tower = _tower(angle=7)
    assert find_angle(Enemy(kind=1, pos=(500, 400)), tower) == 0


def test_find_angle_same_row_left_keeps_angle():
    tower = _tower(angle=2)
    assert find_angle(Enemy(kind=1, pos=(100, 500)), tower) == 2


def test_laser_placement_values():
    assert laser_placement((0, 0), 0) == ((20, 0), -90.0)
    assert laser_placement((10, 10), 3) == ((125, 80), 45.0)
    assert laser_placement((5, 5), 9) == ((5, 5), 0.0)


def test_kill_if_dead_rewards():
    defend = Defender()
    enemy = Enemy(kind=1, pos=(1, 1), hp=-5)
    assert kill_if_dead(defend, enemy) is True
    assert enemy.pos == (-40000.0, 100000.0)
    assert enemy.dead is True
    assert enemy.hp == 0
    assert (defend.score, defend.money) == (100, 100)


def test_kill_if_dead_alive_enemy_untouched():
    defend = Defender()
    enemy = Enemy(kind=1, pos=(1, 1), hp=10)
    assert kill_if_dead(defend, enemy) is False
    assert defend.score == 0


def test_fire_waits_for_reload():
    defend = Defender()
    tower = _tower(kind=2)
    tower.shoot = 29
    enemy = Enemy(kind=1, pos=(600, 600), hp=1000)
    assert fire(defend, enemy, tower) is None
    assert enemy.hp == 1000
    assert tower.shoot == 29


def test_fire_hits_and_resets_reload():
    defend = Defender()
    tower = _tower(kind=4)
    tower.shoot = 10
    enemy = Enemy(kind=1, pos=(600, 600), hp=1000)
    laser = fire(defend, enemy, tower)
    assert laser == laser_placement(tower.pos, tower.angle)
    assert enemy.hp == pytest.approx(1000 - tower.damage)
    assert tower.shoot == 0


def test_fire_kills_weak_enemy():
    defend = Defender()
    tower = _tower(kind=1)
    tower.shoot = 19
    enemy = Enemy(kind=1, pos=(600, 600), hp=tower.damage)
    fire(defend, enemy, tower)
    assert enemy.dead is True
    assert defend.money == 100


def test_shoot_focus_without_target():
    defend = Defender()
    defend.enemies.append(Enemy(kind=1, pos=(0, 0), hp=50))
    tower = _tower()
    tower.shoot = 100
    assert shoot_focus(defend, tower) is None
    assert defend.enemies[0].hp == 50


def test_shoot_focus_targets_indexed_enemy():
    defend = Defender()
    first = Enemy(kind=1, pos=(0, 0), hp=500)
    second = Enemy(kind=1, pos=(600, 600), hp=500)
    defend.enemies.extend([first, second])
    tower = _tower()
    tower.focus = 2
    tower.shoot = 19
    assert shoot_focus(defend, tower) is not None
    assert first.hp == 500
    assert second.hp == pytest.approx(500 - tower.damage)


def test_shoot_focus_beyond_enemies_is_ignored():
    defend = Defender()
    tower = Tower(kind=1, pos=(0, 0), focus=3, shoot=100)
    assert shoot_focus(defend, tower) is None
    assert tower.shoot == 100