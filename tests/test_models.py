"""Tests for the Animal record and the Identifiable protocol."""

import dataclasses
import uuid

import pytest

from animal_list.core.models import Animal, Identifiable


def test_derived_image_names():
    owl = Animal(name="Owl", description="Hoots")

    assert owl.image_name == "Owl"
    assert owl.thumb_name == "OwlThumb"


def test_derived_names_follow_name():
    assert Animal(name="Zebra", description="Runs").thumb_name == "ZebraThumb"
    assert Animal(name="", description="").thumb_name == "Thumb"


def test_ids_are_unique_per_instance():
    first = Animal(name="Owl", description="Test!")
    second = Animal(name="Owl", description="Test!")

    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id
    assert first != second


def test_animal_is_immutable():
    owl = Animal(name="Owl", description="Hoots")

    with pytest.raises(dataclasses.FrozenInstanceError):
        owl.name = "Eagle"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        owl.id = uuid.uuid4()  # type: ignore[misc]


def test_animal_satisfies_identifiable():
    assert isinstance(Animal(name="Owl", description="Hoots"), Identifiable)
