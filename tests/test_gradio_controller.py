"""Tests for the per-session controller used by the web UI."""

import pytest

from animal_list.core.config import AppConfig
from animal_list.gradio_controller import GradioAnimalController


def names(controller):
    return [animal.name for animal in controller.animals()]


def test_from_config_seeds_repository():
    controller = GradioAnimalController.from_config()

    assert names(controller) == ["Eagle", "Owl", "Parrot", "Penguin", "Zebra"]
    assert controller.revision == 0


def test_sessions_do_not_share_animals():
    first = GradioAnimalController.from_config()
    second = GradioAnimalController.from_config()

    first.add_placeholder()

    assert len(first.animals()) == 6
    assert len(second.animals()) == 5


def test_add_and_delete_bump_revision_once_each():
    controller = GradioAnimalController.from_config()

    controller.add_placeholder()
    removed = controller.delete_rows([0, 2])

    assert [animal.name for animal in removed] == ["Eagle", "Parrot"]
    assert names(controller) == ["Owl", "Penguin", "Zebra", "Owl"]
    assert controller.revision == 3


def test_delete_invalid_rows_changes_nothing():
    controller = GradioAnimalController.from_config()

    with pytest.raises(IndexError):
        controller.delete_rows([4, 5])

    assert len(controller.animals()) == 5
    assert controller.revision == 0


def test_animal_at_out_of_range_is_none():
    controller = GradioAnimalController.from_config()

    assert controller.animal_at(0).name == "Eagle"
    assert controller.animal_at(5) is None
    assert controller.animal_at(-1) is None


def test_configured_seeds():
    config = AppConfig()
    config.catalog.seeds = [["Yak", "Grunts"]]

    controller = GradioAnimalController.from_config(config)

    assert names(controller) == ["Yak"]
