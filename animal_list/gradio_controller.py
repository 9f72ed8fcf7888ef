from __future__ import annotations

import logging
import threading
from typing import List, Optional, Sequence

from animal_list.core.config import DEFAULT_CONFIG, AppConfig
from animal_list.core.models import Animal
from animal_list.core.repository import AnimalRepository, check_rows

logger = logging.getLogger(__name__)


class GradioAnimalController:
    """UI-agnostic controller tailored for Gradio callbacks, one per browser session."""

    def __init__(
        self,
        repository: AnimalRepository,
        config: Optional[AppConfig] = None,
    ) -> None:
        self._repository = repository
        self._config = config or DEFAULT_CONFIG
        self._lock = threading.Lock()
        self._revision = 0
        self._repository.subscribe(self._on_changed)

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "GradioAnimalController":
        config = config or DEFAULT_CONFIG
        return cls(AnimalRepository.with_seeds(config.catalog.seed_pairs()), config)

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def revision(self) -> int:
        """Number of change notifications seen so far."""
        return self._revision

    def animals(self) -> List[Animal]:
        with self._lock:
            return list(self._repository.items)

    def animal_at(self, row: int) -> Optional[Animal]:
        with self._lock:
            if 0 <= row < len(self._repository):
                return self._repository[row]
            return None

    def add_placeholder(self) -> Animal:
        catalog = self._config.catalog
        animal = Animal(name=catalog.placeholder_name, description=catalog.placeholder_description)
        with self._lock:
            self._repository.append(animal)
        logger.info("Added %s", animal.name)
        return animal

    def delete_rows(self, rows: Sequence[int]) -> List[Animal]:
        with self._lock:
            ordered = check_rows(rows, len(self._repository))
            removed = [self._repository.remove_at(row) for row in ordered]
        removed.reverse()
        if removed:
            logger.info("Deleted %s", ", ".join(animal.name for animal in removed))
        return removed

    def _on_changed(self) -> None:
        self._revision += 1
