"""
CBZ Reader - A chapter-by-chapter viewer for comic book archives.

This package provides a desktop application for reading CBZ files with:
- Natural ordering of chapters and pages
- Lazy page rendering as pages scroll into view
- Chapter navigation across many archives
"""

__version__ = "0.1.0"

# Make key components available at package level
from cbz_reader.core import ChapterSet, ChapterSource, PageSlot
from cbz_reader.io import CbzArchive, ChapterSourceLoader

__all__ = [
    "ChapterSet",
    "ChapterSource",
    "PageSlot",
    "CbzArchive",
    "ChapterSourceLoader",
]
