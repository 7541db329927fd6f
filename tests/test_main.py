import pytest

from lifegrid.main import main, parse_args


def test_defaults():
    params = parse_args([])
    assert params.threads == 8
    assert params.image_width == 256
    assert params.image_height == 256
    assert params.turns == 10000


def test_all_flags():
    params = parse_args(["-t", "4", "-w", "16", "-h", "64", "-turns", "100"])
    assert (params.threads, params.image_width, params.image_height, params.turns) == (4, 16, 64, 100)


def test_double_dash_turns():
    assert parse_args(["--turns", "7"]).turns == 7


def test_h_means_height_not_help():
    params = parse_args(["-h", "512"])
    assert params.image_height == 512
    assert params.image_width == 256


def test_bad_integer_exits():
    with pytest.raises(SystemExit) as info:
        parse_args(["-w", "wide"])
    assert info.value.code == 2


def test_main_rejects_unknown_flag():
    with pytest.raises(SystemExit) as info:
        main(["-x"])
    assert info.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--help"])
    assert info.value.code == 0
    assert "-turns" in capsys.readouterr().out