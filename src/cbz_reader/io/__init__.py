"""I/O layer - Archive decoding and file access."""

from .cbz_archive import CbzArchive
from .chapter_source_loader import ChapterSourceLoader

__all__ = ["CbzArchive", "ChapterSourceLoader"]
