"""Main Window - Application shell with toolbar and chapter navigation."""

from pathlib import Path
from typing import List, override

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QToolBar,
    QVBoxLayout,
    QWidget,
)


class MainWindow(QMainWindow):
    """Provides the application shell, chapter picker, and keyboard shortcut handling."""

    # Signal emitted with the archive files the user picked (empty list clears)
    files_selected = Signal(list)
    # Signal emitted when the user picks a chapter in the selector
    chapter_chosen = Signal(int)
    # Signals for chapter navigation
    next_chapter = Signal()
    previous_chapter = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("CBZ Reader")
        self.setGeometry(100, 100, 1000, 900)

        self._setup_ui()
        self._create_toolbar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        # Chapter navigation (hidden until chapters are loaded)
        self.navigation = QWidget()
        nav_layout = QHBoxLayout(self.navigation)
        nav_layout.setContentsMargins(8, 4, 8, 4)

        self.prev_button = QPushButton("Previous")
        self.prev_button.clicked.connect(self.previous_chapter.emit)
        self.chapter_select = QComboBox()
        self.chapter_select.setMinimumWidth(240)
        self.chapter_select.currentIndexChanged.connect(self._on_chapter_select_changed)
        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.next_chapter.emit)

        nav_layout.addStretch()
        nav_layout.addWidget(self.prev_button)
        nav_layout.addWidget(self.chapter_select)
        nav_layout.addWidget(self.next_button)
        nav_layout.addStretch()

        self.main_layout.addWidget(self.navigation)
        self.navigation.setVisible(False)

    def _create_toolbar(self):
        """Create the file actions toolbar."""
        toolbar = QToolBar("Files", self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        open_action = QAction("&Open Chapters...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_files)
        toolbar.addAction(open_action)

        close_action = QAction("&Close Chapters", self)
        close_action.setShortcut("Ctrl+W")
        close_action.triggered.connect(lambda: self.files_selected.emit([]))
        toolbar.addAction(close_action)

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        self.addAction(exit_action)

    def _on_open_files(self):
        """Handle the Open Chapters action."""
        file_names, _ = QFileDialog.getOpenFileNames(
            self,
            "Select CBZ Files",
            str(Path.home()),
            "Comic Archives (*.cbz *.zip);;All files (*)",
        )

        # Cancelling the dialog keeps the current chapters
        if file_names:
            self.files_selected.emit([Path(name) for name in file_names])

    def _on_chapter_select_changed(self, index: int):
        if index >= 0:
            self.chapter_chosen.emit(index)

    def set_chapter_view(self, chapter_view):
        """Set the chapter view widget in the main layout."""
        self.main_layout.addWidget(chapter_view, 1)
        chapter_view.installEventFilter(self)

    def populate_chapters(self, names: List[str]):
        """Fill the chapter selector with one entry per chapter."""
        self.chapter_select.blockSignals(True)
        try:
            self.chapter_select.clear()
            self.chapter_select.addItems(names)
        finally:
            self.chapter_select.blockSignals(False)

    def set_navigation_visible(self, visible: bool):
        self.navigation.setVisible(visible)

    @property
    def navigation_visible(self) -> bool:
        return not self.navigation.isHidden()

    def set_current_chapter(self, index: int, can_go_previous: bool, can_go_next: bool):
        """Sync selector value and button state with the current chapter."""
        self.chapter_select.blockSignals(True)
        try:
            self.chapter_select.setCurrentIndex(index)
        finally:
            self.chapter_select.blockSignals(False)
        self.prev_button.setEnabled(can_go_previous)
        self.next_button.setEnabled(can_go_next)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    @override
    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        # The chapter view scrolls on arrow keys; chapter navigation wins
        if event.type() == QEvent.Type.KeyPress and self._navigate_by_key(event.key()):
            return True
        return super().eventFilter(watched, event)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard events for chapter navigation.

        - Left arrow: Previous chapter
        - Right arrow: Next chapter
        """
        if not self._navigate_by_key(event.key()):
            # Pass other keys to parent
            super().keyPressEvent(event)

    def _navigate_by_key(self, key) -> bool:
        if key == Qt.Key.Key_Left and self.prev_button.isEnabled():
            self.previous_chapter.emit()
            return True
        if key == Qt.Key.Key_Right and self.next_button.isEnabled():
            self.next_chapter.emit()
            return True
        return False
