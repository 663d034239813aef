"""Tests for ChapterSourceLoader."""

import pytest

from cbz_reader.io import ChapterSourceLoader


def test_reads_files_into_sources(tmp_path):
    first = tmp_path / "2.cbz"
    second = tmp_path / "10.cbz"
    first.write_bytes(b"two")
    second.write_bytes(b"ten")

    sources = ChapterSourceLoader().load_sources([first, second])

    assert [source.name for source in sources] == ["2.cbz", "10.cbz"]
    assert [source.data for source in sources] == [b"two", b"ten"]


def test_accepts_string_paths(tmp_path):
    path = tmp_path / "one.cbz"
    path.write_bytes(b"1")

    sources = ChapterSourceLoader().load_sources([str(path)])

    assert sources[0].name == "one.cbz"


def test_empty_selection():
    assert ChapterSourceLoader().load_sources([]) == []


def test_missing_file_fails_fast(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to read"):
        ChapterSourceLoader().load_sources([tmp_path / "missing.cbz"])
