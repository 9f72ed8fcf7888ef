from __future__ import annotations

from typing import List, Sequence

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QAction, QIcon, QKeySequence
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from animal_list.core.images import ImageLibrary
from animal_list.core.models import Animal, Identifiable
from animal_list.ui.pixmaps import pil_to_pixmap

ANIMAL_ID_ROLE = Qt.ItemDataRole.UserRole


def row_key(item: Identifiable) -> str:
    """Key stored under ANIMAL_ID_ROLE; selection survives refreshes by this key."""
    return str(item.id)


class AnimalListView(QWidget):
    """Rows of thumbnail, name and description with add and delete affordances."""

    add_requested = Signal()
    delete_requested = Signal(list)
    animal_activated = Signal(object)

    def __init__(self, images: ImageLibrary, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._images = images
        self._animals: List[Animal] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.title_label = QLabel("Animals")
        font = self.title_label.font()
        font.setPointSize(font.pointSize() + 8)
        font.setBold(True)
        self.title_label.setFont(font)
        header.addWidget(self.title_label, stretch=1)
        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Add animal")
        self.add_button.setFixedWidth(36)
        header.addWidget(self.add_button)
        layout.addLayout(header)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        size = self._images.thumb_size
        self.list_widget.setIconSize(QSize(size, size))
        self.list_widget.setContextMenuPolicy(Qt.ContextMenuPolicy.ActionsContextMenu)
        layout.addWidget(self.list_widget, stretch=1)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setEnabled(False)
        button_row = QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.delete_button)
        layout.addLayout(button_row)

        self.delete_action = QAction("Delete", self.list_widget)
        self.delete_action.setShortcut(QKeySequence(QKeySequence.StandardKey.Delete))
        self.delete_action.setShortcutContext(Qt.ShortcutContext.WidgetShortcut)
        self.list_widget.addAction(self.delete_action)

        self.add_button.clicked.connect(self.add_requested)
        self.delete_button.clicked.connect(self._request_delete)
        self.delete_action.triggered.connect(self._request_delete)
        self.list_widget.itemActivated.connect(self._on_item_activated)
        self.list_widget.itemSelectionChanged.connect(self._on_selection_changed)

    def animals(self) -> List[Animal]:
        return list(self._animals)

    def set_animals(self, animals: Sequence[Animal]) -> None:
        selected = {item.data(ANIMAL_ID_ROLE) for item in self.list_widget.selectedItems()}
        self._animals = list(animals)
        self.list_widget.clear()
        for animal in self._animals:
            key = row_key(animal)
            item = QListWidgetItem(QIcon(pil_to_pixmap(self._images.thumbnail(animal))), f"{animal.name}\n{animal.description}")
            item.setData(ANIMAL_ID_ROLE, key)
            self.list_widget.addItem(item)
            if key in selected:
                item.setSelected(True)
        self._on_selection_changed()

    def selected_rows(self) -> List[int]:
        return sorted(self.list_widget.row(item) for item in self.list_widget.selectedItems())

    def _request_delete(self) -> None:
        rows = self.selected_rows()
        if rows:
            self.delete_requested.emit(rows)

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        row = self.list_widget.row(item)
        if 0 <= row < len(self._animals):
            self.animal_activated.emit(self._animals[row])

    def _on_selection_changed(self) -> None:
        self.delete_button.setEnabled(bool(self.list_widget.selectedItems()))
