import pytest

from savedefender.waves import WAVE_CHUNK, WaveSet, line_length, load_waves, read_chunk


@pytest.fixture
def maps_dir(tmp_path):
    maps = tmp_path / "maps"
    maps.mkdir()
    contents = ["1111\n", "12121\n", "333\n", "4\n"]
    for index, text in enumerate(contents, start=1):
        (maps / f"wave{index}.txt").write_text(text)
    return tmp_path, contents


def test_line_length_stops_at_newline():
    assert line_length("abc\ndef") == 3


def test_line_length_without_newline_is_whole_text():
    assert line_length("abcd") == len("abcd")


def test_read_chunk_truncates(tmp_path):
    path = tmp_path / "long.txt"
    path.write_text("9" * (WAVE_CHUNK * 2))
    assert len(read_chunk(path, WAVE_CHUNK)) == WAVE_CHUNK


def test_read_chunk_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_chunk(tmp_path / "absent.txt", WAVE_CHUNK)


def test_load_waves_reads_levels(maps_dir):
    base, contents = maps_dir
    waves = load_waves(base / "no file", base)
    assert waves.levels == tuple(contents)
    assert waves.level_lengths == tuple(line_length(t) for t in contents)
    assert waves.from_file is False


def test_load_waves_missing_maps_gives_empty_levels(tmp_path):
    waves = load_waves(tmp_path / "no file", tmp_path)
    assert waves.levels == ("", "", "", "")


def test_no_file_yields_no_spawns(maps_dir):
    base, _ = maps_dir
    waves = load_waves(base / "no file", base)
    assert waves.next_file_enemy() is None
    assert waves.ctr == 0


def test_custom_file_spawns_in_order(maps_dir):
    base, _ = maps_dir
    custom = base / "custom.txt"
    custom.write_text("1203\nignored")
    waves = load_waves(custom, base)
    assert waves.from_file is True
    spawns = []
    while (spawn := waves.next_file_enemy()) is not None:
        spawns.append(spawn)
    assert [s.kind for s in spawns] == [1, 2, 0, 3]
    assert waves.ctr == waves.file_length


def test_custom_file_spawn_position():
    waves = WaveSet(file_text="2\n")
    spawn = waves.next_file_enemy()
    assert (spawn.x, spawn.y) == (150, 0)
    assert spawn.angle == 3
    assert spawn.map_index == 3