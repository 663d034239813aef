"""Proximity watcher - decides which page slots are close enough to load.

Pure geometry so it can be driven by any scrolling widget. Coordinates are
in the scrolled content's pixel space.
"""

from typing import Iterable, List, Mapping, Set, Tuple

# (top, height) of a slot inside the scrolled content
SlotGeometry = Tuple[int, int]


class ProximityWatcher:
    """One-shot watcher: each slot is reported at most once.

    A slot triggers when its overlap with the viewport, extended downward by
    ``lookahead_margin`` pixels, covers at least ``threshold`` of its height.
    """

    def __init__(self, lookahead_margin: int = 300, threshold: float = 0.01):
        if lookahead_margin < 0:
            raise ValueError("lookahead_margin must not be negative")
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        self.lookahead_margin = lookahead_margin
        self.threshold = threshold
        self._watched: Set[int] = set()

    @property
    def watched(self) -> Set[int]:
        return set(self._watched)

    def watch(self, indexes: Iterable[int]) -> None:
        self._watched.update(indexes)

    def unwatch(self, index: int) -> None:
        self._watched.discard(index)

    def disconnect(self) -> None:
        """Stop watching everything."""
        self._watched.clear()

    def check(
        self,
        viewport_top: int,
        viewport_height: int,
        geometries: Mapping[int, SlotGeometry],
    ) -> List[int]:
        """
        Report the watched slots that are now near the viewport.

        Reported slots are no longer watched.

        Args:
            viewport_top: Scroll offset of the visible area
            viewport_height: Height of the visible area
            geometries: Slot index -> (top, height)

        Returns:
            Triggered slot indexes in ascending order
        """
        area_top = viewport_top
        area_bottom = viewport_top + viewport_height + self.lookahead_margin

        triggered = []
        for index in sorted(self._watched):
            geometry = geometries.get(index)
            if geometry is None:
                continue
            if self._is_near(geometry, area_top, area_bottom):
                triggered.append(index)

        for index in triggered:
            self._watched.discard(index)
        return triggered

    def _is_near(self, geometry: SlotGeometry, area_top: int, area_bottom: int) -> bool:
        top, height = geometry
        bottom = top + max(height, 0)
        overlap = min(bottom, area_bottom) - max(top, area_top)
        if height <= 0:
            return area_top <= top <= area_bottom
        if overlap <= 0:
            return False
        return overlap / height >= self.threshold
