from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _default_seeds() -> List[List[str]]:
    return [
        ["Eagle", "Flys"],
        ["Owl", "Hoots"],
        ["Parrot", "Talks"],
        ["Penguin", "Waddles"],
        ["Zebra", "Runs"],
    ]


@dataclass
class CatalogConfig:
    seeds: List[List[str]] = field(default_factory=_default_seeds)
    placeholder_name: str = "Owl"
    placeholder_description: str = "Test!"

    def seed_pairs(self) -> List[Tuple[str, str]]:
        return [(str(name), str(description)) for name, description in self.seeds]

    def validate(self) -> None:
        if not isinstance(self.seeds, list):
            raise ValueError("catalog.seeds must be a list of [name, description] pairs")
        for index, seed in enumerate(self.seeds):
            if (
                not isinstance(seed, (list, tuple))
                or len(seed) != 2
                or not all(isinstance(part, str) for part in seed)
            ):
                raise ValueError(f"catalog.seeds[{index}] must be a [name, description] pair of strings, got {seed!r}")
        self.seeds = [list(seed) for seed in self.seeds]
        for key in ("placeholder_name", "placeholder_description"):
            if not isinstance(getattr(self, key), str):
                raise ValueError(f"catalog.{key} must be a string")


@dataclass
class ImageConfig:
    asset_dir: Optional[str] = None
    thumb_size: int = 48
    detail_size: int = 320
    corner_radius: int = 10

    def validate(self) -> None:
        if self.asset_dir is not None and not isinstance(self.asset_dir, str):
            raise ValueError("images.asset_dir must be a string or null")
        for key, minimum in (("thumb_size", 1), ("detail_size", 1), ("corner_radius", 0)):
            value = getattr(self, key)
            # bool is an int subclass; true/false are not sizes.
            if isinstance(value, bool):
                raise ValueError(f"images.{key} must be an integer, got {value!r}")
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise ValueError(f"images.{key} must be an integer, got {value!r}") from None
            if value < minimum:
                raise ValueError(f"images.{key} must be at least {minimum}, got {value}")
            setattr(self, key, value)


@dataclass
class AppConfig:
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    images: ImageConfig = field(default_factory=ImageConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def validate(self) -> None:
        """Check and coerce section values; raises ValueError on the first bad one."""
        for _, section in self.iter_sections():
            section.validate()

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "catalog", self.catalog
        yield "images", self.images


DEFAULT_CONFIG = AppConfig()


def serialize_config(config: AppConfig) -> str:
    return json.dumps(config.to_dict(), indent=2)


def parse_config(raw: str) -> Tuple[Optional[AppConfig], Optional[str]]:
    if not raw:
        return AppConfig(), None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        return None, f"Config JSON parse error: {exc}"
    if not isinstance(data, dict):
        return None, "Config JSON must be an object at the top level."
    config = AppConfig()
    config.update_from_mapping(data)
    try:
        config.validate()
    except ValueError as exc:
        return None, f"Invalid config: {exc}"
    return config, None
