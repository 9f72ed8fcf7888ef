from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from .config import AppConfig, DEFAULT_CONFIG
from .models import Animal
from .repository import AnimalRepository, check_rows

logger = logging.getLogger(__name__)


class AnimalListController(QObject):
    """Bridges repository notifications onto Qt signals for the list screen."""

    animals_changed = Signal()
    log_emitted = Signal(str)

    def __init__(
        self,
        repository: AnimalRepository,
        config: Optional[AppConfig] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or DEFAULT_CONFIG
        self._repository = repository
        self._unsubscribe = repository.subscribe(self.animals_changed.emit)

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def repository(self) -> AnimalRepository:
        return self._repository

    def animals(self) -> Tuple[Animal, ...]:
        return self._repository.items

    def animal_at(self, row: int) -> Animal:
        if not 0 <= row < len(self._repository):
            raise IndexError(f"Row {row} out of range")
        return self._repository[row]

    def add_placeholder(self) -> Animal:
        catalog = self._config.catalog
        animal = Animal(name=catalog.placeholder_name, description=catalog.placeholder_description)
        self._repository.append(animal)
        logger.info("Added %s", animal.name)
        self.log_emitted.emit(f"Added {animal.name}")
        return animal

    def delete_rows(self, rows: Sequence[int]) -> list[Animal]:
        ordered = check_rows(rows, len(self._repository))
        removed = [self._repository.remove_at(row) for row in ordered]
        names = ", ".join(animal.name for animal in reversed(removed))
        if removed:
            logger.info("Deleted %s", names)
            self.log_emitted.emit(f"Deleted {names}")
        return removed

    def detach(self) -> None:
        self._unsubscribe()
