import pytest

from savplayer.app import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.config == "options.conf"
    assert args.resources == "resources"
    assert args.tracks == "tracks"
    assert args.font == "maple-mono.ttf"
    assert args.glyphs == "glyphs.ttf"


def test_parser_overrides():
    args = build_parser().parse_args(
        ["--config", "other.conf", "--tracks", "music", "--resources", "assets"]
    )
    assert (args.config, args.tracks, args.resources) == ("other.conf", "music", "assets")


def test_parser_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["--volume", "3"])
    assert info.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--tracks" in capsys.readouterr().out