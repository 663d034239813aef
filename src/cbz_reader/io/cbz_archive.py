"""CBZ Archive - zip decoding for chapter archives held in memory."""

import io
import logging
import zipfile
from typing import List, Optional

from cbz_reader.core import ArchiveDecodeError, ArchiveEntry, EntryReadError

logger = logging.getLogger(__name__)


class CbzArchive:
    """Wraps a zip container opened from raw bytes.

    Use as a context manager so the underlying ``ZipFile`` is closed:

        with CbzArchive.open(data) as archive:
            for entry in archive.entries():
                payload = archive.read_entry(entry)
    """

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip: Optional[zipfile.ZipFile] = zip_file

    @classmethod
    def open(cls, data: bytes) -> "CbzArchive":
        """
        Open an archive from its raw bytes.

        Args:
            data: Complete contents of a zip-compatible file

        Returns:
            An open CbzArchive

        Raises:
            ArchiveDecodeError: if the bytes are not a readable zip container
        """
        try:
            zip_file = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as e:
            raise ArchiveDecodeError(str(e) or "Not a zip archive") from e
        return cls(zip_file)

    def entries(self) -> List[ArchiveEntry]:
        """Enumerate every member in archive order, directories included."""
        zip_file = self._require_open()
        return [
            ArchiveEntry(name=info.filename, is_dir=info.is_dir(), order=order, info=info)
            for order, info in enumerate(zip_file.infolist())
        ]

    def read_entry(self, entry: ArchiveEntry) -> bytes:
        """
        Decompress a single member.

        Raises:
            EntryReadError: if the member is corrupt or uses an unsupported
                compression method. Other members stay readable.
        """
        zip_file = self._require_open()
        target = entry.info if entry.info is not None else entry.name
        try:
            return zip_file.read(target)
        except (zipfile.BadZipFile, NotImplementedError, RuntimeError, KeyError, OSError, EOFError) as e:
            logger.error("Failed to decompress %s: %s", entry.name, e)
            raise EntryReadError(f"{entry.name}: {e}") from e

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    def _require_open(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise ArchiveDecodeError("Archive is closed")
        return self._zip

    def __enter__(self) -> "CbzArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
