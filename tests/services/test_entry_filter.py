"""Tests for image entry filtering and ordering."""

from cbz_reader.core import ArchiveEntry
from cbz_reader.services import IMAGE_EXTENSIONS, is_image_entry, select_image_entries


def entries(*names):
    return [ArchiveEntry(name=name, is_dir=name.endswith("/"), order=i) for i, name in enumerate(names)]


def names(selected):
    return [entry.name for entry in selected]


def test_recognised_extensions():
    assert IMAGE_EXTENSIONS == {"jpg", "jpeg", "png", "gif", "webp"}


def test_orders_pages_naturally():
    selected = select_image_entries(entries("page10.png", "page2.png", "page1.png"))
    assert names(selected) == ["page1.png", "page2.png", "page10.png"]


def test_non_images_never_selected():
    selected = select_image_entries(entries("notes.txt", "p1.png", "ComicInfo.xml", "p2.jpg"))
    assert names(selected) == ["p1.png", "p2.jpg"]


def test_directories_skipped():
    assert not is_image_entry(ArchiveEntry(name="folder.png/", is_dir=True))


def test_extension_case_insensitive():
    selected = select_image_entries(entries("A.JPG", "b.Jpeg", "c.WebP", "d.GIF"))
    assert len(selected) == 4


def test_directory_prefix_ignored_when_ordering():
    selected = select_image_entries(entries("z/3.png", "a/10.png", "m/1.png"))
    assert names(selected) == ["m/1.png", "z/3.png", "a/10.png"]


def test_ties_keep_enumeration_order():
    selected = select_image_entries(entries("b/01.png", "a/1.jpg", "c/1.webp"))
    assert names(selected) == ["b/01.png", "a/1.jpg", "c/1.webp"]


def test_no_images_yields_empty_list():
    assert select_image_entries(entries("info.txt", "dir/")) == []
