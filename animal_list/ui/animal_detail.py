from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from animal_list.core.images import ContentMode, ImageLibrary, ZoomState
from animal_list.core.models import Animal
from animal_list.ui.pixmaps import pil_to_pixmap


class ClickableImageLabel(QLabel):
    clicked = Signal()

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)


class AnimalDetailView(QWidget):
    """
    Image, name and description of one animal.

    The view keeps its own copy of the animal and does not listen to the
    repository. Clicking the image toggles between fit and fill.
    """

    back_requested = Signal()

    def __init__(self, animal: Animal, images: ImageLibrary, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._animal = animal
        self._images = images
        self._zoom = ZoomState()
        self._build_ui()
        self._render_image()

    @property
    def animal(self) -> Animal:
        return self._animal

    @property
    def is_zoomed(self) -> bool:
        return self._zoom.zoomed

    def content_mode(self) -> ContentMode:
        return self._zoom.content_mode

    def title(self) -> str:
        return f"{self._animal.name} Details"

    def toggle_zoom(self) -> None:
        self._zoom.toggle()
        self._render_image()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.back_button = QPushButton("< Animals")
        self.back_button.setFlat(True)
        self.back_button.clicked.connect(self.back_requested)
        layout.addWidget(self.back_button, alignment=Qt.AlignmentFlag.AlignLeft)

        self.image_label = ClickableImageLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.image_label.setCursor(Qt.CursorShape.PointingHandCursor)
        self.image_label.clicked.connect(self.toggle_zoom)
        layout.addWidget(self.image_label, stretch=1)

        self.name_label = QLabel(self._animal.name)
        self.name_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.name_label)

        self.description_label = QLabel(self._animal.description)
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description_label.setStyleSheet("color: gray;")
        layout.addWidget(self.description_label)

    def _render_image(self) -> None:
        img = self._images.detail(self._animal, self._zoom.content_mode)
        self.image_label.setPixmap(pil_to_pixmap(img))
