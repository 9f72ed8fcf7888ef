"""Tests for command-line parsing and config loading."""

import json

import pytest

from animal_list.cli import build_parser, load_config, parse_args


def test_unknown_arguments_pass_through():
    args, rest = parse_args(["--log-level", "DEBUG", "-platform", "offscreen"])

    assert args.log_level == "DEBUG"
    assert rest == ["-platform", "offscreen"]


def test_defaults_without_config():
    config = load_config(build_parser().parse_args([]))

    assert config.catalog.placeholder_name == "Owl"
    assert config.images.asset_dir is None


def test_config_file_and_asset_dir(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"catalog": {"seeds": [["Yak", "Grunts"]]}}))

    args = build_parser().parse_args(["--config", str(path), "--asset-dir", str(tmp_path)])
    config = load_config(args)

    assert config.catalog.seed_pairs() == [("Yak", "Grunts")]
    assert config.images.asset_dir == str(tmp_path)


def test_bad_config_exits(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{broken")

    with pytest.raises(SystemExit) as excinfo:
        load_config(build_parser().parse_args(["--config", str(path)]))
    assert excinfo.value.code == 2


def test_missing_config_exits(tmp_path):
    with pytest.raises(SystemExit):
        load_config(build_parser().parse_args(["--config", str(tmp_path / "nope.json")]))


@pytest.mark.parametrize(
    "data",
    [
        {"catalog": {"seeds": [["Yak"]]}},
        {"images": {"thumb_size": "big"}},
    ],
)
def test_config_with_bad_values_exits(tmp_path, capsys, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))

    with pytest.raises(SystemExit) as excinfo:
        load_config(build_parser().parse_args(["--config", str(path)]))
    assert excinfo.value.code == 2
    assert "Invalid config" in capsys.readouterr().err
