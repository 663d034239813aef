"""Chapter View - Scrolling column of page images that load as they come near."""

from typing import Dict, List, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QLabel, QScrollArea, QSizePolicy, QVBoxLayout, QWidget

from cbz_reader.core import ImageDecodeError, PageSlot
from cbz_reader.services import ProximityWatcher, ReaderSettings


def decode_page_image(data: bytes) -> QPixmap:
    """Decode page bytes into a pixmap.

    Raises:
        ImageDecodeError: if the bytes are not a supported image.
    """
    image = QImage.fromData(data)
    if image.isNull():
        raise ImageDecodeError("Malformed or unsupported image data")
    return QPixmap.fromImage(image)


class PageLabel(QLabel):
    """Placeholder that becomes a page image (or an error marker) once resolved."""

    def __init__(self, slot: PageSlot, placeholder_height: int, parent=None):
        super().__init__(parent)
        self.slot_index = slot.index
        self.setObjectName("manhwa-page")
        self.setAlignment(Qt.AlignCenter)
        self.setFixedHeight(placeholder_height)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setToolTip(slot.alt_text)
        self.setAccessibleName(slot.alt_text)

    @property
    def marker(self) -> str:
        return self.property("class") or ""

    def show_image(self, pixmap: QPixmap, max_width: int):
        if max_width > 0 and pixmap.width() > max_width:
            pixmap = pixmap.scaledToWidth(max_width, Qt.SmoothTransformation)
        self.setFixedHeight(pixmap.height())
        self.setPixmap(pixmap)

    def show_error(self, marker: str, text: str):
        self.setProperty("class", marker)
        self.setFixedHeight(80)
        self.setText(text)
        self.setToolTip(text)
        self.setAccessibleName(text)
        self.setStyleSheet("""
            QLabel {
                color: #e57373;
                border: 1px dashed #e57373;
                background-color: #2a1a1a;
            }
        """)

    def release(self):
        self.clear()


class ChapterView(QScrollArea):
    """Vertical reader for one chapter.

    Emits ``slot_near_viewport`` once per page when the page enters the
    viewport or the look-ahead area below it.
    """

    slot_near_viewport = Signal(int)

    def __init__(self, watcher: ProximityWatcher, settings: Optional[ReaderSettings] = None):
        super().__init__()
        self.watcher = watcher
        self.settings = settings or ReaderSettings()

        self.setWidgetResizable(True)
        self.setAlignment(Qt.AlignHCenter)
        self.setStyleSheet("QScrollArea { background-color: #111; border: none; }")

        self._content = QWidget()
        self._layout = QVBoxLayout(self._content)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self._layout.setAlignment(Qt.AlignTop)
        self.setWidget(self._content)

        self.message_label = QLabel()
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet("QLabel { color: #ddd; font-size: 16px; padding: 24px; }")
        self._layout.addWidget(self.message_label)
        self.message_label.hide()

        self.page_labels: List[PageLabel] = []

        self.verticalScrollBar().valueChanged.connect(self._check_proximity)

    @property
    def message(self) -> str:
        return self.message_label.text()

    def show_message(self, text: str):
        """Replace the view with a status message."""
        self._remove_pages()
        self.message_label.setText(text)
        self.message_label.show()

    def clear(self):
        """Remove every page and message from the view."""
        self._remove_pages()
        self.message_label.clear()
        self.message_label.hide()

    def add_slots(self, slots: List[PageSlot]):
        """Append one placeholder per slot, in order."""
        self.message_label.hide()
        for slot in slots:
            label = PageLabel(slot, self.settings.placeholder_height, self._content)
            self._layout.addWidget(label)
            self.page_labels.append(label)
        # Callers register the new slots with the watcher after this returns
        self._schedule_proximity_check()

    def show_slot_image(self, index: int, pixmap: QPixmap):
        label = self._label(index)
        if label is not None:
            label.show_image(pixmap, self.viewport().width())
            self._schedule_proximity_check()

    def show_slot_error(self, index: int, marker: str, text: str):
        label = self._label(index)
        if label is not None:
            label.show_error(marker, text)
            self._schedule_proximity_check()

    def scroll_to_top(self):
        self.verticalScrollBar().setValue(0)
        self.horizontalScrollBar().setValue(0)

    def slot_geometries(self) -> Dict[int, tuple]:
        """Returns slot index -> (top, height) in content coordinates.

        Pages are stacked without spacing and every label has a fixed height,
        so positions are known before the layout pass runs.
        """
        geometries = {}
        top = 0
        for label in self.page_labels:
            height = label.minimumHeight()
            geometries[label.slot_index] = (top, height)
            top += height
        return geometries

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._check_proximity()

    def _schedule_proximity_check(self):
        # A resolved page changes height and shifts every page below it
        QTimer.singleShot(0, self._check_proximity)

    def _check_proximity(self, *_):
        if not self.page_labels:
            return
        triggered = self.watcher.check(
            self.verticalScrollBar().value(),
            self.viewport().height(),
            self.slot_geometries(),
        )
        for index in triggered:
            self.slot_near_viewport.emit(index)

    def _label(self, index: int) -> Optional[PageLabel]:
        if 0 <= index < len(self.page_labels):
            return self.page_labels[index]
        return None

    def _remove_pages(self):
        for label in self.page_labels:
            label.release()
            self._layout.removeWidget(label)
            label.deleteLater()
        self.page_labels = []
