# SPDX-License-Identifier: MIT
"""
Domain model, observable repository, artwork lookup and configuration.
"""

from .config import (
    AppConfig,
    CatalogConfig,
    DEFAULT_CONFIG,
    ImageConfig,
    parse_config,
)  # noqa: F401
from .controller import AnimalListController  # noqa: F401
from .images import ContentMode, ImageLibrary, ZoomState  # noqa: F401
from .models import Animal, Identifiable  # noqa: F401
from .repository import AnimalRepository  # noqa: F401
