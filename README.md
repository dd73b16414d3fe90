# savedefender

The rules and state of a tower defense game. Enemies walk in waves toward your reactor. You buy towers, place them on the map's tower slots and upgrade them up to level 4. Each tower focuses on an enemy within its range, turns to face it and fires once it has reloaded. Every kill earns score and money.

## What this package does not do

The package has no window, rendering, audio playback or game loop. Screens are described as ordered lists of layers, and music changes are returned as commands. A front end has to draw and play these itself. The command line validates its arguments, builds the starting state and exits. It does not run a game.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
savedefender            # build the starting state without a custom wave file
savedefender WAVEFILE   # build it with the custom wave file WAVEFILE
savedefender -h         # print usage
```

Error cases:

- More than one argument prints `This programm need 1 or 2 args` on stderr and exits with status 84.
- A wave file that cannot be opened prints `Your entry file doesn't exist !` on stderr and exits with status 84.

## Wave files

The four built-in waves are read from `maps/wave1.txt` to `maps/wave4.txt` under the base directory. A missing file gives an empty wave.

A custom wave file is read the same way. Only its first 50 bytes count, and of those, only the characters before the first newline. Each character is one step:

- `0` is a gap.
- `1` to `9` spawn an enemy of that kind.

`Defender.spawn_from_file()` takes the next step. For the custom file, it also switches the map to index 3 and sets the starting direction to 3. It returns the new `Enemy`, or `None` for a gap or once the file is exhausted.

## Modules

- `savedefender.state`
  - Dataclasses: `Defender`, `Tower`, `Enemy`, `SkillTree`, `Inventory`, `KeyBindings` and `SoundSettings`.
  - `create_defender(wave_path, base_dir)` builds the starting state.
  - `Defender.reset_game()` starts a round:
    - money is 100 and HP is 1000;
    - the inventory and skill-tree purchases are empty;
    - every tower slot is free and every tower's focus is cleared.
- `savedefender.waves`
  - `load_waves`, `read_chunk` and `line_length`.
  - `WaveSet` and `WaveSet.next_file_enemy()`.
- `savedefender.towers`
  - `new_tower(kind, pos, defend)`. Base damage is 40, 60, 150 or 180, multiplied by the skill-tree damage modifier.
  - `upgrade_cost`, `can_upgrade` and `hit_upgrade_area`.
  - `try_upgrade` multiplies damage by 1.5 per level. It only works while no inventory tower is being dragged.
  - `sprite_row`.
- `savedefender.targeting`
  - `tower_range` gives ranges of 300, 350, 400 or 450.
  - `in_range`.
  - `acquire_target` focuses on the lowest-numbered enemy in range among the first 15.
- `savedefender.combat`
  - `find_angle`, `laser_placement`, `kill_if_dead`, `fire` and `shoot_focus`.
  - Reload times are 19, 30, 40 and 10 frames.
  - A kill gives 100 score and 100 money.
- `savedefender.detection`
  - `tower_centres(map_index)`.
  - `detect(defend)`.
  - `touchable(defend)` runs detection, lets every tower shoot, and returns the laser placements that were fired.
- `savedefender.events`
  - `EventKind` and `Event`.
  - `analyse_event`, `key_press`, `escape`, `bind`, `select_binding`, `key_letter`, `mouse_hold_allowed` and `drag_pick`.
  - These cover pausing, panel toggles, key rebinding and dragging towers out of the inventory.
- `savedefender.settings`
  - `choose_framerate`, `choose_resolution` and `slider_volume`.
- `savedefender.audio`
  - `update_music(defend)` returns the pause, play and volume commands for the current screen.
- `savedefender.screens`
  - `Screen`, `screen_layers(defend)`, `map_background`, `placeholder_positions`, `reactor_sprite`, `pause_background`, `final_score` and `is_lost`.
- `savedefender.scores`
  - `read_score` and `read_scoreboard`, which read `tuto.txt`, `level1.txt`, `level2.txt` and `boss.txt`.
- `savedefender.strutil`
  - `format_number`, `atoi`, `getnbr` and `prefix_equal`.
- `savedefender.cli`
  - `main`, `usage_text`, `how_to_play_lines` and `UsageError`.

## Example

```python
from savedefender.state import create_defender
from savedefender.towers import new_tower, try_upgrade

game = create_defender("no file", ".")
game.reset_game()
tower = new_tower(1, (470.0, 690.0), game)
print(tower.damage)        # 40.0

game.money = 500
game.dragged = 5           # nothing held by the cursor
print(try_upgrade(game, tower), tower.level, game.money)  # True 2 300
```