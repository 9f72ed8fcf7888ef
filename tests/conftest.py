"""
Global pytest configuration and fixtures for the animal_list test suite.
Includes CI-friendly setup for Qt widget tests and common fixtures.
"""

import os

# Widget tests must not need a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from animal_list.core.config import AppConfig
from animal_list.core.images import ImageLibrary
from animal_list.core.repository import AnimalRepository



def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if is_ci:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture
def app_config():
    """Default configuration with the five seed animals."""
    return AppConfig()


@pytest.fixture
def repository(app_config):
    """Repository seeded with Eagle, Owl, Parrot, Penguin and Zebra."""
    return AnimalRepository.with_seeds(app_config.catalog.seed_pairs())


@pytest.fixture
def images():
    """Image library without an asset directory, so every image is generated."""
    return ImageLibrary(thumb_size=32, detail_size=64)


@pytest.fixture
def notifications(repository):
    """List that grows by one entry per repository notification."""
    received = []
    repository.subscribe(lambda: received.append(len(repository)))
    return received
