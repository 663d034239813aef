"""Async workers for non-blocking chapter extraction using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from cbz_reader.core import ChapterSource, CbzReaderError

from .chapter_extractor import extract_chapter


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. Every signal carries the generation
    the load was started with.
    """
    finished = Signal(int)
    error = Signal(int, str)
    chapter_loaded = Signal(int, object)  # ChapterContents


class ChapterLoadWorker(QRunnable):
    """
    Worker that extracts a chapter archive in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when extraction completes or fails.
    """

    def __init__(self, source: ChapterSource, generation: int, extractor=extract_chapter):
        super().__init__()
        self.source = source
        self.generation = generation
        self.extractor = extractor
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the extraction in background thread."""
        try:
            contents = self.extractor(self.source)
            self.signals.chapter_loaded.emit(self.generation, contents)
        except CbzReaderError as e:
            self.signals.error.emit(self.generation, str(e))
        except Exception as e:
            # Catch any unexpected exceptions not handled by the extractor
            self.signals.error.emit(self.generation, f"Unexpected error: {e}")
        finally:
            self.signals.finished.emit(self.generation)
