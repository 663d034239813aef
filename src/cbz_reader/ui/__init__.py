"""UI layer - PySide6 presentation components."""

from .chapter_view import ChapterView, PageLabel, decode_page_image
from .main_window import MainWindow

__all__ = ["MainWindow", "ChapterView", "PageLabel", "decode_page_image"]
