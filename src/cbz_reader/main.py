"""Main entry point for the CBZ reader application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from cbz_reader.coordinators import LazyRenderPipeline, NavigationController
from cbz_reader.coordinators.navigation_controller import EMPTY_PROMPT
from cbz_reader.io import ChapterSourceLoader
from cbz_reader.services import ProximityWatcher, ResourceRegistry, SettingsManager
from cbz_reader.ui import ChapterView, MainWindow, decode_page_image


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("CBZ Reader")
    app.setOrganizationName("CBZReader")

    # 2. Initialize Infrastructure
    settings = SettingsManager().get_settings()
    loader = ChapterSourceLoader()
    registry = ResourceRegistry()
    watcher = ProximityWatcher(
        lookahead_margin=settings.lookahead_margin,
        threshold=settings.visibility_threshold,
    )

    # 3. Construct UI
    chapter_view = ChapterView(watcher, settings)
    main_window = MainWindow()
    main_window.set_chapter_view(chapter_view)

    # 4. Instantiate Coordinators (Dependency Injection)
    pipeline = LazyRenderPipeline(
        view=chapter_view,
        registry=registry,
        watcher=watcher,
        image_decoder=decode_page_image,
    )
    controller = NavigationController(
        main_window=main_window,
        pipeline=pipeline,
        loader=loader,
    )

    # 5. Signal Wiring (Connect UI signals to Controller slots)
    main_window.files_selected.connect(controller.handle_files_selected)
    main_window.chapter_chosen.connect(controller.handle_chapter_chosen)
    main_window.next_chapter.connect(controller.next_chapter)
    main_window.previous_chapter.connect(controller.previous_chapter)
    chapter_view.slot_near_viewport.connect(controller.handle_slot_near_viewport)

    # 6. Show UI and start event loop
    chapter_view.show_message(EMPTY_PROMPT)
    main_window.show()
    logging.getLogger(__name__).info("CBZ reader initialized")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
