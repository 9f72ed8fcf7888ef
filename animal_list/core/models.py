from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Anything rendered as a list row needs a stable, unique key."""

    @property
    def id(self) -> uuid.UUID:
        ...


@dataclass(frozen=True)
class Animal:
    name: str
    description: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def image_name(self) -> str:
        return self.name

    @property
    def thumb_name(self) -> str:
        return self.name + "Thumb"
