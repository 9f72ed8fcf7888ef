# SPDX-License-Identifier: MIT
"""
Qt user interface components for the animal list application.
"""

from .animal_detail import AnimalDetailView  # noqa: F401
from .animal_list import AnimalListView  # noqa: F401
from .main_window import MainWindow  # noqa: F401
