"""Chapter Source Loader - reads user-selected archive files into memory."""

from pathlib import Path
from typing import Iterable, List

from cbz_reader.core import ChapterSource


class ChapterSourceLoader:
    """Turns file paths picked by the user into ChapterSource entities.

    Fail-fast: any unreadable file aborts the whole selection.
    """

    def load_sources(self, paths: Iterable[Path]) -> List[ChapterSource]:
        """
        Read every file into a ChapterSource named after the file.

        Args:
            paths: Archive files chosen by the user (any order)

        Returns:
            One ChapterSource per path, in the given order

        Raises:
            RuntimeError: if a file cannot be read
        """
        sources = []
        for path in paths:
            path = Path(path)
            try:
                data = path.read_bytes()
            except OSError as e:
                raise RuntimeError(f"Failed to read {path}: {e}") from e
            sources.append(ChapterSource(name=path.name, data=data))
        return sources
