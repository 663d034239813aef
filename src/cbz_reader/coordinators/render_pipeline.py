"""Lazy Render Pipeline - builds page slots for a chapter and resolves them on demand."""

import logging
from typing import Callable, List, Optional

from cbz_reader.core import ChapterSource, ImageDecodeError, PageSlot
from cbz_reader.services import ChapterContents, ProximityWatcher, ResourceRegistry

logger = logging.getLogger(__name__)

ERROR_MARKER = "img-error"


class LazyRenderPipeline:
    """
    Owns the page slots of the chapter on screen.

    Every chapter load gets a generation number from ``begin``; results that
    arrive for an older generation are dropped so a slow archive never writes
    into the view of the chapter that replaced it.

    The view is expected to expose:
    - clear()
    - show_message(str)
    - add_slots(list[PageSlot])
    - show_slot_image(int, object)
    - show_slot_error(int, str, str)
    - scroll_to_top()
    """

    def __init__(
        self,
        view,
        registry: ResourceRegistry,
        watcher: ProximityWatcher,
        image_decoder: Callable[[bytes], object],
    ):
        if view is None:
            raise ValueError("View must not be None")
        if registry is None:
            raise ValueError("ResourceRegistry must not be None")
        if watcher is None:
            raise ValueError("ProximityWatcher must not be None")
        if image_decoder is None:
            raise ValueError("Image decoder must not be None")

        self.view = view
        self.registry = registry
        self.watcher = watcher
        self.image_decoder = image_decoder

        self.generation: int = 0
        self.chapter: Optional[ChapterSource] = None
        self.slots: List[PageSlot] = []

    def begin(self, chapter: ChapterSource) -> int:
        """
        Tear down the current chapter and show the processing placeholder.

        Args:
            chapter: The chapter about to be extracted

        Returns:
            The generation token the extraction result must carry
        """
        self.teardown()
        self.generation += 1
        self.chapter = chapter
        self.view.show_message(f"Processing chapter: {chapter.name}...")
        return self.generation

    def populate(self, generation: int, contents: ChapterContents) -> bool:
        """
        Build one pending slot per page of an extracted chapter.

        Returns:
            False if the result was stale and discarded, True otherwise
        """
        if not self._is_current(generation):
            logger.debug("Discarding stale chapter result for %s", contents.chapter_name)
            return False

        if contents.is_empty:
            self.view.show_message(f"No images found in {contents.chapter_name}.")
            return True

        self.slots = [
            PageSlot(index=index, entry_name=page.entry_name, data=page.data)
            for index, page in enumerate(contents.pages)
        ]

        self.view.clear()
        self.view.add_slots(self.slots)

        # Pages that failed to decompress never reach the watcher
        for slot, page in zip(self.slots, contents.pages):
            if not page.ok:
                self._fail_slot(slot, page.error or "No data")

        self.watcher.watch(slot.index for slot in self.slots if slot.is_pending)
        self.view.scroll_to_top()
        return True

    def fail(self, generation: int, detail: str) -> bool:
        """
        Show the chapter-level error state for a failed archive.

        Returns:
            False if the failure was stale and discarded, True otherwise
        """
        if not self._is_current(generation):
            return False

        name = self.chapter.name if self.chapter else "chapter"
        logger.error("Failed to process %s: %s", name, detail)
        self.slots = []
        self.view.clear()
        self.view.show_message(f"Error reading {name}. Details: {detail}")
        return True

    def resolve_slot(self, index: int) -> None:
        """
        Handle a slot coming near the viewport.

        A slot is resolved at most once; repeats and unknown indexes are ignored.
        """
        if not 0 <= index < len(self.slots):
            return
        slot = self.slots[index]
        if not slot.is_pending:
            return
        self.watcher.unwatch(index)

        handle = self.registry.acquire(slot.take_data())
        try:
            image = self.image_decoder(handle.data)
        except ImageDecodeError as e:
            self.registry.release(handle)
            logger.error("Error loading image %s: %s", slot.entry_name, e)
            self._fail_slot(slot, str(e))
            return

        slot.mark_loaded(handle)
        self.view.show_slot_image(index, image)

    def teardown(self) -> None:
        """Release every resource of the chapter on screen and empty the view."""
        self.watcher.disconnect()
        released = self.registry.release_all()
        if released:
            logger.debug("Released %d page resource(s)", released)
        self.slots = []
        self.chapter = None
        self.view.clear()

    def show_message(self, text: str) -> None:
        """Replace the view contents with a status message."""
        self.view.show_message(text)

    def _fail_slot(self, slot: PageSlot, detail: str) -> None:
        self.watcher.unwatch(slot.index)
        slot.mark_errored(detail)
        self.view.show_slot_error(slot.index, ERROR_MARKER, slot.alt_text)

    def _is_current(self, generation: int) -> bool:
        return self.chapter is not None and generation == self.generation
