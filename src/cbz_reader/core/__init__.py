"""Domain layer - Pure entities representing chapters and their pages."""

from .archive_entry import ArchiveEntry
from .chapter_set import NO_SELECTION, ChapterSet
from .chapter_source import ChapterSource
from .errors import ArchiveDecodeError, CbzReaderError, EntryReadError, ImageDecodeError
from .natural_order import natural_key, natural_sorted
from .page_slot import PageSlot, SlotState

__all__ = [
    "ArchiveEntry",
    "ChapterSet",
    "ChapterSource",
    "NO_SELECTION",
    "PageSlot",
    "SlotState",
    "CbzReaderError",
    "ArchiveDecodeError",
    "EntryReadError",
    "ImageDecodeError",
    "natural_key",
    "natural_sorted",
]
