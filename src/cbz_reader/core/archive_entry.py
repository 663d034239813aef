"""ArchiveEntry entity - a single member of a chapter archive."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ArchiveEntry:
    """Describes one archive member and the handle needed to decompress it.

    Attributes:
        name: Full member name inside the archive (``/`` separated).
        is_dir: True for directory markers.
        order: Position in the archive's own enumeration order.
        info: Backend handle used to read the member (a ``ZipInfo``).
    """

    name: str
    is_dir: bool = False
    order: int = 0
    info: Any = field(default=None, repr=False, compare=False)

    @property
    def file_name(self) -> str:
        """Returns the name with any directory prefix stripped."""
        return self.name.rsplit("/", 1)[-1]

    @property
    def extension(self) -> str:
        """Returns the lowercase extension without the dot, or an empty string."""
        file_name = self.file_name
        if "." not in file_name:
            return ""
        return file_name.rsplit(".", 1)[-1].lower()

    @property
    def base_name(self) -> str:
        """Returns the file name with its final extension removed."""
        file_name = self.file_name
        if "." not in file_name:
            return file_name
        return file_name.rsplit(".", 1)[0]
