"""Navigation Controller - Central coordinator for the reading session."""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QObject, QThreadPool, Slot

from cbz_reader.core import ChapterSet
from cbz_reader.io import ChapterSourceLoader
from cbz_reader.services import ChapterContents, ChapterLoadWorker

from .render_pipeline import LazyRenderPipeline

logger = logging.getLogger(__name__)

EMPTY_PROMPT = "Please select one or more CBZ files."


class NavigationController(QObject):
    """
    Translates navigation intents from the window into chapter switches.

    Owns the session's ChapterSet; nothing else mutates the current index.
    The main window is expected to expose:
    - populate_chapters(list[str])
    - set_navigation_visible(bool)
    - set_current_chapter(int, bool, bool)
    - show_error(str, str)
    """

    def __init__(
        self,
        main_window,
        pipeline: LazyRenderPipeline,
        loader: ChapterSourceLoader,
        chapter_set: Optional[ChapterSet] = None,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if pipeline is None:
            raise ValueError("LazyRenderPipeline must not be None")
        if loader is None:
            raise ValueError("ChapterSourceLoader must not be None")

        self.main_window = main_window
        self.pipeline = pipeline
        self.loader = loader
        self.chapter_set = chapter_set if chapter_set is not None else ChapterSet()
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

    @Slot(list)
    def handle_files_selected(self, paths: List[Path]):
        """
        Handle a new set of archive files picked by the user.

        Args:
            paths: Archive files in any order; empty clears the session
        """
        try:
            sources = self.loader.load_sources(paths)
        except RuntimeError as e:
            self.main_window.show_error("Chapter Load Error", str(e))
            return

        self.chapter_set.load(sources)
        self.main_window.populate_chapters(self.chapter_set.names)

        if self.chapter_set.is_empty:
            self.pipeline.teardown()
            self.main_window.set_navigation_visible(False)
            self.pipeline.show_message(EMPTY_PROMPT)
            return

        logger.info("Loaded %d chapter(s)", self.chapter_set.count)
        self.main_window.set_navigation_visible(True)
        self.chapter_set.select(0)
        self._display_current_chapter()

    @Slot(int)
    def handle_chapter_chosen(self, index: int):
        """Switch to the chapter picked in the selector, if it differs."""
        if index == self.chapter_set.current_index:
            return
        try:
            changed = self.chapter_set.select(index)
        except ValueError as e:
            logger.warning("Ignoring chapter selection: %s", e)
            return
        if changed:
            self._display_current_chapter()

    @Slot()
    def next_chapter(self):
        """Navigate to the next chapter."""
        if self.chapter_set.next():
            self._display_current_chapter()

    @Slot()
    def previous_chapter(self):
        """Navigate to the previous chapter."""
        if self.chapter_set.previous():
            self._display_current_chapter()

    @Slot(int, object)
    def handle_chapter_loaded(self, generation: int, contents: ChapterContents):
        """Receive an extracted chapter from a worker."""
        self.pipeline.populate(generation, contents)

    @Slot(int, str)
    def handle_chapter_failed(self, generation: int, detail: str):
        """Receive an extraction failure from a worker."""
        self.pipeline.fail(generation, detail)

    @Slot(int)
    def handle_slot_near_viewport(self, index: int):
        self.pipeline.resolve_slot(index)

    def _display_current_chapter(self):
        """Start rendering the current chapter and sync the navigation widgets."""
        chapter = self.chapter_set.current
        if chapter is None:
            return

        generation = self.pipeline.begin(chapter)
        self._update_navigation()

        worker = ChapterLoadWorker(chapter, generation)
        worker.signals.chapter_loaded.connect(self.handle_chapter_loaded)
        worker.signals.error.connect(self.handle_chapter_failed)
        self.thread_pool.start(worker)

    def _update_navigation(self):
        self.main_window.set_current_chapter(
            self.chapter_set.current_index,
            self.chapter_set.can_go_previous,
            self.chapter_set.can_go_next,
        )
