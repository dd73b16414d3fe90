import pytest

from savedefender.detection import detect, touchable, tower_centres
from savedefender.state import Defender, Enemy
from savedefender.towers import new_tower


def _place(defend, slot, kind):
    centre = tower_centres(defend.map_index)[slot]
    tower = new_tower(kind, centre, defend)
    defend.towers[slot] = tower
    defend.free_slots[slot] = False
    return tower


def test_centres_per_map():
    assert len(tower_centres(0)) == 4
    assert len(tower_centres(1)) == 6
    assert len(tower_centres(2)) == 8
    assert len(tower_centres(3)) == 8
    assert tower_centres(0)[0] == (325.0, 200.0)
    assert tower_centres(9) == ()


def test_enemy_in_range_is_focused():
    defend = Defender(map_index=0)
    tower = _place(defend, 0, 1)
    defend.enemies.append(Enemy(kind=1, pos=tower_centres(0)[0], hp=50.0))
    result = detect(defend)
    assert result == {0: 1}
    assert tower.focus == 1


def test_far_enemy_clears_focus():
    defend = Defender(map_index=0)
    tower = _place(defend, 0, 1)
    tower.focus = 3
    defend.enemies.append(Enemy(kind=1, pos=(-40000.0, 100000.0), hp=50.0))
    detect(defend)
    assert tower.focus == 0


def test_lowest_enemy_number_wins():
    defend = Defender(map_index=1)
    tower = _place(defend, 2, 2)
    centre = tower_centres(1)[2]
    defend.enemies.append(Enemy(kind=1, pos=(-40000.0, 100000.0)))
    defend.enemies.append(Enemy(kind=1, pos=centre))
    defend.enemies.append(Enemy(kind=1, pos=centre))
    detect(defend)
    assert tower.focus == 2


def test_free_slots_are_ignored():
    defend = Defender(map_index=0)
    tower = _place(defend, 1, 1)
    defend.free_slots[1] = True
    tower.focus = 4
    assert detect(defend) == {}
    assert tower.focus == 4


@pytest.mark.parametrize("map_index", [2, 3])
def test_last_slots_pass_target_to_earlier_slot(map_index):
    defend = Defender(map_index=map_index)
    fifth = _place(defend, 4, 1)
    seventh = _place(defend, 6, 1)
    far = (-40000.0, 100000.0)
    defend.enemies.append(Enemy(kind=1, pos=far))
    defend.enemies.append(Enemy(kind=1, pos=tower_centres(map_index)[6]))
    detect(defend)
    assert seventh.focus == 0
    assert fifth.focus == 2


def test_touchable_kills_enemy():
    defend = Defender(map_index=0, money=0, score=0)
    tower = _place(defend, 0, 1)
    tower.shoot = 19
    enemy = Enemy(kind=1, pos=tower_centres(0)[0], hp=10.0)
    defend.enemies.append(enemy)
    lasers = touchable(defend)
    assert len(lasers) == 1
    assert enemy.dead is True
    assert defend.money == 100
    assert defend.score == 100
    assert tower.shoot == 0


def test_touchable_waits_for_reload():
    defend = Defender(map_index=0)
    tower = _place(defend, 0, 1)
    tower.shoot = 0
    enemy = Enemy(kind=1, pos=tower_centres(0)[0], hp=10.0)
    defend.enemies.append(enemy)
    assert touchable(defend) == []
    assert enemy.hp == 10.0
    assert tower.focus == 1


def test_touchable_unknown_map_does_nothing():
    defend = Defender(map_index=7)
    assert touchable(defend) == []