"""Game state: towers, enemies, inventory, settings and the round reset."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from savedefender.waves import WaveSet, load_waves

TOWER_SLOTS = 8
START_HP = 1000.0
START_MONEY = 100
START_HUD = 21


@dataclass
class Tower:
    """A tower placed on one of the map's slots."""

    kind: int
    pos: tuple[float, float]
    level: int = 1
    angle: int = 0
    status: int = 0
    rect_top: int = 0
    rect_width: int = 110
    rect_height: int = 127
    damage: float = 0.0
    focus: int = 0
    shoot: int = 0
    texture: str = ""


@dataclass
class Enemy:
    """An enemy walking towards the reactor."""

    kind: int
    pos: tuple[float, float]
    hp: float = 0.0
    angle: int = 0
    speed: float = 0.0
    turn: int = 0
    damage: float = 0.0
    dead: bool = False
    moving: int = 0
    attack: int = 0


@dataclass
class SkillTree:
    """Skill-tree purchases and the modifiers they grant."""

    purchases: list[int] = field(default_factory=lambda: [0] * 6)
    buy_mod: float = 1.0
    dmg_mod: float = 1.0
    up_mod: float = 1.0
    life_mod: float = 1.0
    speed_mod: float = 1.0
    outdmg_mod: float = 1.0


@dataclass
class Inventory:
    """Bought towers of each of the four kinds, not yet placed."""

    quantities: list[int] = field(default_factory=lambda: [0] * 4)


@dataclass
class KeyBindings:
    """Keys that toggle the market and inventory panels.

    ``waiting`` is 1 or 2 while a new key is being chosen, else 0.
    Key codes count letters from 0 for A.
    """

    waiting: int = 0
    buy_letter: str = "B"
    inventory_letter: str = "I"
    buy_key: int = 1
    inventory_key: int = 8


@dataclass
class SoundSettings:
    """Volumes and which music track is running."""

    music_volume: float = 100.0
    sound_volume: float = 100.0
    in_game: bool = False


@dataclass
class Defender:
    """The whole state of a running game."""

    wave: WaveSet = field(default_factory=WaveSet)
    angle: int = 0
    map_index: int = 0
    screen: int = 0
    framerate: int = 60
    keys: KeyBindings = field(default_factory=KeyBindings)
    inventory: Inventory = field(default_factory=Inventory)
    sound: SoundSettings = field(default_factory=SoundSettings)
    tree: SkillTree = field(default_factory=SkillTree)
    towers: list[Tower | None] = field(default_factory=lambda: [None] * TOWER_SLOTS)
    free_slots: list[bool] = field(default_factory=lambda: [True] * TOWER_SLOTS)
    enemies: list[Enemy] = field(default_factory=list)
    mouse: int = 0
    window_size: int = 169
    music_slider: tuple[float, float] = (675.0, 686.0)
    sound_slider: tuple[float, float] = (675.0, 885.0)
    hud: int = 0
    money: int = 0
    dragged: int = 0
    drop: tuple[float, float] = (0.0, 0.0)
    ctr: int = 0
    score: int = 0
    shots: list[int] = field(default_factory=lambda: [0] * 4)
    anim: int = 0
    hp: float = START_HP

    def reset_game(self) -> None:
        """Prepare a fresh round on the selected map.

        Skill-tree modifiers and already built tower objects are kept;
        only their targets are cleared.
        """
        self.enemies.clear()
        self.hud = START_HUD
        self.inventory.quantities = [0] * 4
        self.tree.purchases = [0] * 6
        self.money = START_MONEY
        self.wave.ctr = 0
        self.ctr = 0
        self.free_slots = [True] * TOWER_SLOTS
        for tower in self.towers:
            if tower is not None:
                tower.focus = 0
        self.hp = START_HP

    def spawn_from_file(self) -> Enemy | None:
        """Take the next step of the custom wave file, adding its enemy if any."""
        spawn = self.wave.next_file_enemy()
        if spawn is None:
            return None
        self.map_index = spawn.map_index
        self.angle = spawn.angle
        if spawn.kind == 0:
            return None
        enemy = Enemy(kind=spawn.kind, pos=(float(spawn.x), float(spawn.y)),
                      angle=spawn.angle)
        self.enemies.append(enemy)
        return enemy


def create_defender(wave_path: str | os.PathLike[str] = "no file",
                    base_dir: str | os.PathLike[str] = ".") -> Defender:
    """Build the starting state, loading waves from ``base_dir`` and ``wave_path``."""
    return Defender(wave=load_waves(wave_path, base_dir))