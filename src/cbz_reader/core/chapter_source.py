"""ChapterSource entity - one loaded archive treated as a chapter."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChapterSource:
    """Raw archive bytes paired with the name shown in the chapter picker."""

    name: str
    data: bytes = field(repr=False)
