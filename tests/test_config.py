import pytest

from savplayer.config import (
    Block,
    Config,
    UiColor,
    hex_to_rgb,
    load_config,
    parse_color,
    parse_config,
)

SAMPLE = """# player options
[window]
res: 1366x768
fps: 100
[colors]
"#000000"
"#ff7a80"
"#ffccaa"
"#83769c"
"""


def test_hex_to_rgb_splits_channels():
    assert hex_to_rgb(0xFFCCAA) == (0xFF, 0xCC, 0xAA, 255)


def test_hex_to_rgb_ignores_high_byte():
    assert hex_to_rgb(0x12FFCCAA) == hex_to_rgb(0xFFCCAA)


def test_parse_color_matches_hex_value():
    assert parse_color('"#83769c"\n') == hex_to_rgb(0x83769C)


def test_parse_color_missing_closing_quote_is_blank():
    assert parse_color('"#83769c\n') == (0, 0, 0, 0)


def test_parse_color_empty_quotes_is_blank():
    assert parse_color('""\n') == (0, 0, 0, 0)


def test_parse_color_short_value():
    assert parse_color('"#ff7a8"') == hex_to_rgb(0xFF7A8)


def test_parse_config_sample():
    conf = parse_config(SAMPLE.splitlines(keepends=True))
    assert (conf.width, conf.height, conf.fps) == (1366, 768, 100)
    assert conf.colors[UiColor.BG] == hex_to_rgb(0x000000)
    assert conf.colors[UiColor.FG] == hex_to_rgb(0xFF7A80)
    assert conf.colors[UiColor.HL] == hex_to_rgb(0xFFCCAA)
    assert conf.colors[UiColor.BGA] == hex_to_rgb(0x83769C)
    assert conf.block is Block.COLORS


def test_comments_are_skipped():
    conf = parse_config(["#res: 10x20\n", "res: 30x40\n"])
    assert (conf.width, conf.height) == (30, 40)


def test_window_is_the_initial_block():
    conf = parse_config(["fps: 60\n"])
    assert conf.fps == 60


def test_window_keys_ignored_inside_colors_block():
    conf = parse_config(["[colors]\n", "res: 800x600\n", "fps: 30\n"])
    assert (conf.width, conf.height, conf.fps) == (0, 0, 0)


def test_colors_ignored_inside_window_block():
    conf = parse_config(['"#ffffff"\n'])
    assert conf.colors == Config().colors


def test_extra_colors_are_dropped():
    lines = ["[colors]\n"] + [f'"#0000{i:02x}"\n' for i in range(6)]
    conf = parse_config(lines)
    assert len(conf.colors) == 4
    assert conf.colors[3] == hex_to_rgb(0x000003)


def test_partial_resolution_sets_width_only():
    conf = parse_config(["res: 1024\n"])
    assert (conf.width, conf.height) == (1024, 0)


def test_change_block_switches_and_ignores_unknown():
    conf = Config()
    conf.change_block("[colors]\n")
    assert conf.block is Block.COLORS
    conf.change_block("[unknown]\n")
    assert conf.block is Block.COLORS
    conf.change_block("[window\n")
    assert conf.block is Block.COLORS
    conf.change_block("[window]\n")
    assert conf.block is Block.WINDOW


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "options.conf"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE.splitlines(keepends=True))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.conf")