"""ChapterSet - the ordered chapter list and the currently selected chapter."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .chapter_source import ChapterSource
from .natural_order import natural_sorted

NO_SELECTION = -1


@dataclass
class ChapterSet:
    """Owns the loaded chapters and the single current index.

    The list is sorted once on load and never reordered afterwards;
    loading again replaces it wholesale.
    """

    chapters: List[ChapterSource] = field(default_factory=list)
    current_index: int = NO_SELECTION

    @property
    def count(self) -> int:
        return len(self.chapters)

    @property
    def is_empty(self) -> bool:
        return not self.chapters

    @property
    def names(self) -> List[str]:
        return [chapter.name for chapter in self.chapters]

    @property
    def current(self) -> Optional[ChapterSource]:
        """Returns the selected chapter, or None when nothing is selected."""
        if self.current_index == NO_SELECTION:
            return None
        return self.chapters[self.current_index]

    @property
    def can_go_previous(self) -> bool:
        return self.current_index > 0

    @property
    def can_go_next(self) -> bool:
        return NO_SELECTION < self.current_index < self.count - 1

    def load(self, sources: Iterable[ChapterSource]) -> None:
        """Replace the chapter list with ``sources`` in natural name order."""
        self.chapters = natural_sorted(sources, key=lambda chapter: chapter.name)
        self.current_index = NO_SELECTION

    def select(self, index: int) -> bool:
        """Make ``index`` current.

        Returns:
            True if the selection changed and the chapter must be displayed,
            False if ``index`` was already current.

        Raises:
            ValueError: if index is out of range.
        """
        if not 0 <= index < self.count:
            raise ValueError(f"Chapter index {index} out of bounds for {self.count} chapters")
        if index == self.current_index:
            return False
        self.current_index = index
        return True

    def next(self) -> bool:
        """Advance one chapter; no-op on the last chapter."""
        if not self.can_go_next:
            return False
        return self.select(self.current_index + 1)

    def previous(self) -> bool:
        """Go back one chapter; no-op on the first chapter."""
        if not self.can_go_previous:
            return False
        return self.select(self.current_index - 1)
