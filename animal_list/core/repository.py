from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .models import Animal

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class AnimalRepository:
    """
    In-memory, ordered collection of animals.

    Listeners registered with :meth:`subscribe` are called synchronously,
    once per committed mutation, with no payload. They re-read the
    collection themselves. A listener that raises is logged and the
    remaining listeners still run.
    """

    def __init__(self, animals: Optional[Iterable[Animal]] = None) -> None:
        self._animals: List[Animal] = list(animals or [])
        self._listeners: List[Listener] = []

    @classmethod
    def with_seeds(cls, seeds: Iterable[Tuple[str, str]]) -> "AnimalRepository":
        return cls(Animal(name=name, description=description) for name, description in seeds)

    @property
    def items(self) -> Tuple[Animal, ...]:
        return tuple(self._animals)

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        return iter(tuple(self._animals))

    def __getitem__(self, index: int) -> Animal:
        return self._animals[index]

    def index_of(self, animal_id: uuid.UUID) -> Optional[int]:
        for index, animal in enumerate(self._animals):
            if animal.id == animal_id:
                return index
        return None

    def append(self, animal: Animal) -> None:
        self._animals.append(animal)
        logger.debug("Appended %s at %d", animal.name, len(self._animals) - 1)
        self._notify()

    def remove_at(self, index: int) -> Animal:
        # Negative indices are rejected rather than counted from the end.
        if not 0 <= index < len(self._animals):
            raise IndexError(f"Animal index {index} out of range (0..{len(self._animals) - 1})")
        removed = self._animals.pop(index)
        logger.debug("Removed %s from %d", removed.name, index)
        self._notify()
        return removed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in tuple(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Listener %r failed", listener)


def check_rows(rows: Sequence[int], size: int) -> List[int]:
    """Return unique rows sorted from last to first, or raise IndexError."""
    unique = sorted(set(rows), reverse=True)
    invalid = [row for row in unique if not 0 <= row < size]
    if invalid:
        raise IndexError(f"Row(s) {sorted(invalid)} out of range for {size} animals")
    return unique
