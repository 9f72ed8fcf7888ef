from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget, QWidget

from animal_list.core.controller import AnimalListController
from animal_list.core.images import ImageLibrary
from animal_list.core.models import Animal
from animal_list.ui.animal_detail import AnimalDetailView
from animal_list.ui.animal_list import AnimalListView

logger = logging.getLogger(__name__)

APP_TITLE = "Animals"


class MainWindow(QMainWindow):
    """Navigation stack: the animal list, with a detail page pushed on top."""

    def __init__(
        self,
        controller: AnimalListController,
        images: ImageLibrary,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.images = images
        self.detail_view: Optional[AnimalDetailView] = None
        self.setWindowTitle(APP_TITLE)
        self.resize(420, 720)

        self._build_menu()
        self._build_ui()
        self._connect_signals()
        self._refresh_list()

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

        edit_menu = self.menuBar().addMenu("&Edit")
        self._add_action = edit_menu.addAction("&Add Animal")
        self._add_action.setShortcut("Ctrl+N")
        self._add_action.triggered.connect(self.add_animal)

    def _build_ui(self) -> None:
        self.stack = QStackedWidget(self)
        self.list_view = AnimalListView(self.images)
        self.stack.addWidget(self.list_view)
        self.setCentralWidget(self.stack)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        self.list_view.add_requested.connect(self.add_animal)
        self.list_view.delete_requested.connect(self.delete_rows)
        self.list_view.animal_activated.connect(self.show_detail)
        self.controller.animals_changed.connect(self._refresh_list)
        self.controller.log_emitted.connect(self._show_message)

    def add_animal(self) -> None:
        self.controller.add_placeholder()

    def delete_rows(self, rows: List[int]) -> None:
        try:
            self.controller.delete_rows(rows)
        except IndexError as exc:
            logger.warning("Delete rejected: %s", exc)
            QMessageBox.warning(self, "Cannot delete", str(exc))

    def show_detail(self, animal: Animal) -> None:
        self.close_detail()
        self.detail_view = AnimalDetailView(animal, self.images)
        self.detail_view.back_requested.connect(self.close_detail)
        self.stack.addWidget(self.detail_view)
        self.stack.setCurrentWidget(self.detail_view)
        self.setWindowTitle(self.detail_view.title())
        self._add_action.setEnabled(False)

    def close_detail(self) -> None:
        if self.detail_view is None:
            return
        self.stack.removeWidget(self.detail_view)
        self.detail_view.deleteLater()
        self.detail_view = None
        self.stack.setCurrentWidget(self.list_view)
        self.setWindowTitle(APP_TITLE)
        self._add_action.setEnabled(True)

    def _refresh_list(self) -> None:
        self.list_view.set_animals(self.controller.animals())

    def _show_message(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.controller.detach()
        super().closeEvent(event)
