import pytest

from celltris.__main__ import config_from_args, main, parse_args


def test_ascii_frame_prints_one_line_per_row(capsys):
    main(["--width", "4", "--height", "3", "--seed", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 4 for line in lines)
    # A freshly spawned piece is drawn in upper case
    assert any(ch.isupper() for ch in lines[0])


def test_two_player_frames_are_printed_side_by_side(capsys):
    main(["--players", "2", "--width", "4", "--height", "5", "--frames", "30", "--seed", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(len(line) == 4 + 3 + 4 for line in lines)


def test_config_from_args_validates():
    args = parse_args(["--players", "3"])
    with pytest.raises(ValueError):
        config_from_args(args)


def test_config_from_args_maps_options():
    config = config_from_args(parse_args(["--shapes", "monomino", "--ticks", "4", "--seed", "9"]))
    assert config.shape_set == "monomino"
    assert config.ticks_per_update == 4
    assert config.seed == 9
