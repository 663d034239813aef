"""Entry filter - picks the page images out of an archive and orders them."""

from typing import Iterable, List

from cbz_reader.core import ArchiveEntry, natural_sorted

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp"})


def is_image_entry(entry: ArchiveEntry) -> bool:
    """Returns True for non-directory entries with a recognised image extension."""
    return not entry.is_dir and entry.extension in IMAGE_EXTENSIONS


def select_image_entries(entries: Iterable[ArchiveEntry]) -> List[ArchiveEntry]:
    """
    Filter an archive listing down to its page images in reading order.

    Pages are ordered by natural comparison of the base file name (directory
    and extension removed). Equal names keep archive enumeration order.

    Args:
        entries: Archive members in enumeration order

    Returns:
        Image entries in reading order; empty when the archive has no pages
    """
    ordered = sorted((entry for entry in entries if is_image_entry(entry)), key=lambda entry: entry.order)
    return natural_sorted(ordered, key=lambda entry: entry.base_name)
