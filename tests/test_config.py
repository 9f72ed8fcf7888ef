"""Tests for configuration defaults, merging and JSON parsing."""

import json

import pytest

from animal_list.core.config import AppConfig, parse_config, serialize_config


def test_default_seeds_and_placeholder():
    config = AppConfig()

    assert config.catalog.seed_pairs() == [
        ("Eagle", "Flys"),
        ("Owl", "Hoots"),
        ("Parrot", "Talks"),
        ("Penguin", "Waddles"),
        ("Zebra", "Runs"),
    ]
    assert config.catalog.placeholder_name == "Owl"
    assert config.catalog.placeholder_description == "Test!"
    assert config.images.corner_radius == 10


def test_update_from_mapping_ignores_unknown_keys():
    config = AppConfig()

    config.update_from_mapping(
        {
            "catalog": {"placeholder_name": "Owl2", "colour": "blue"},
            "images": {"thumb_size": 64},
            "network": {"port": 80},
            "stray": 1,
        }
    )

    assert config.catalog.placeholder_name == "Owl2"
    assert config.images.thumb_size == 64
    assert not hasattr(config.catalog, "colour")
    assert not hasattr(config, "network")


def test_defaults_are_not_shared_between_instances():
    first = AppConfig()
    second = AppConfig()

    first.catalog.seeds.append(["Yak", "Grunts"])

    assert len(second.catalog.seeds) == 5


def test_parse_config_round_trip():
    config = AppConfig()
    config.images.asset_dir = "/tmp/art"

    parsed, error = parse_config(serialize_config(config))

    assert error is None
    assert parsed.to_dict() == config.to_dict()


def test_parse_config_empty_gives_defaults():
    parsed, error = parse_config("")

    assert error is None
    assert parsed.to_dict() == AppConfig().to_dict()


def test_parse_config_reports_bad_json():
    parsed, error = parse_config("{not json")

    assert parsed is None
    assert error.startswith("Config JSON parse error")


def test_parse_config_requires_object():
    parsed, error = parse_config(json.dumps([1, 2, 3]))

    assert parsed is None
    assert "object" in error


def test_iter_sections():
    assert [name for name, _ in AppConfig().iter_sections()] == ["catalog", "images"]


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"catalog": {"seeds": [["Yak"]]}}, "catalog.seeds[0]"),
        ({"catalog": {"seeds": [["Yak", 3]]}}, "catalog.seeds[0]"),
        ({"catalog": {"seeds": "Yak"}}, "catalog.seeds"),
        ({"catalog": {"placeholder_name": 7}}, "catalog.placeholder_name"),
        ({"images": {"thumb_size": "big"}}, "images.thumb_size"),
        ({"images": {"detail_size": 0}}, "images.detail_size"),
        ({"images": {"corner_radius": True}}, "images.corner_radius"),
        ({"images": {"asset_dir": 5}}, "images.asset_dir"),
    ],
)
def test_parse_config_rejects_bad_values(data, fragment):
    parsed, error = parse_config(json.dumps(data))

    assert parsed is None
    assert error.startswith("Invalid config")
    assert fragment in error


def test_parse_config_coerces_numeric_strings():
    parsed, error = parse_config(json.dumps({"images": {"thumb_size": "64", "corner_radius": 0}}))

    assert error is None
    assert parsed.images.thumb_size == 64
    assert parsed.images.corner_radius == 0
