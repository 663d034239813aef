"""Chapter extractor - turns one chapter archive into ordered page data."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from cbz_reader.core import ChapterSource, EntryReadError
from cbz_reader.io import CbzArchive

from .entry_filter import select_image_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageData:
    """Decompressed bytes for one page, or the reason they are missing."""

    entry_name: str
    data: Optional[bytes] = field(default=None, repr=False)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


@dataclass(frozen=True)
class ChapterContents:
    """All pages of one chapter in reading order."""

    chapter_name: str
    pages: List[PageData] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.pages


def extract_chapter(
    source: ChapterSource,
    open_archive: Callable[[bytes], CbzArchive] = CbzArchive.open,
) -> ChapterContents:
    """
    Open a chapter archive and decompress its page images in order.

    A page that fails to decompress is recorded with its error; the rest of
    the chapter is still extracted.

    Args:
        source: The chapter to extract
        open_archive: Archive decoder factory

    Returns:
        ChapterContents (with no pages if the archive holds no images)

    Raises:
        ArchiveDecodeError: if the archive itself cannot be opened
    """
    with open_archive(source.data) as archive:
        entries = select_image_entries(archive.entries())
        pages = []
        for entry in entries:
            try:
                pages.append(PageData(entry_name=entry.name, data=archive.read_entry(entry)))
            except EntryReadError as e:
                pages.append(PageData(entry_name=entry.name, error=str(e)))

    logger.info("Extracted %d page(s) from %s", len(pages), source.name)
    return ChapterContents(chapter_name=source.name, pages=pages)
