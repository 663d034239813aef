"""Tests for MainWindow chapter navigation widgets."""

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from cbz_reader.services import ProximityWatcher
from cbz_reader.ui import ChapterView, MainWindow


@pytest.fixture
def window(qt_app):
    main_window = MainWindow()
    yield main_window
    main_window.close()
    main_window.deleteLater()


@pytest.fixture
def recorded(window):
    events = {"chosen": [], "next": 0, "previous": 0, "files": []}
    window.chapter_chosen.connect(events["chosen"].append)
    window.files_selected.connect(events["files"].append)

    def on_next():
        events["next"] += 1

    def on_previous():
        events["previous"] += 1

    window.next_chapter.connect(on_next)
    window.previous_chapter.connect(on_previous)
    return events


def test_navigation_hidden_until_chapters_loaded(window):
    assert not window.navigation_visible
    window.set_navigation_visible(True)
    assert window.navigation_visible


def test_populate_does_not_emit_choice(window, recorded):
    window.populate_chapters(["1.cbz", "2.cbz", "10.cbz"])

    assert window.chapter_select.count() == 3
    assert window.chapter_select.itemText(2) == "10.cbz"
    assert recorded["chosen"] == []


def test_set_current_chapter_syncs_widgets(window, recorded):
    window.populate_chapters(["1.cbz", "2.cbz", "10.cbz"])

    window.set_current_chapter(2, True, False)

    assert window.chapter_select.currentIndex() == 2
    assert window.prev_button.isEnabled()
    assert not window.next_button.isEnabled()
    assert recorded["chosen"] == []


def test_user_choice_emits_index(window, recorded):
    window.populate_chapters(["1.cbz", "2.cbz"])

    window.chapter_select.setCurrentIndex(1)

    assert recorded["chosen"] == [1]


def test_buttons_emit_navigation(window, recorded):
    window.populate_chapters(["1.cbz", "2.cbz"])
    window.set_current_chapter(0, True, True)

    window.next_button.click()
    window.prev_button.click()

    assert recorded["next"] == 1
    assert recorded["previous"] == 1


def test_disabled_button_does_not_emit(window, recorded):
    window.set_current_chapter(0, False, True)

    window.prev_button.click()

    assert recorded["previous"] == 0


def test_arrow_keys_navigate(window, recorded):
    window.show()
    window.set_current_chapter(0, False, True)

    QTest.keyClick(window, Qt.Key_Right)
    QTest.keyClick(window, Qt.Key_Left)

    assert recorded["next"] == 1
    assert recorded["previous"] == 0


def test_arrow_keys_navigate_while_chapter_view_has_focus(qt_app, window, recorded):
    chapter_view = ChapterView(ProximityWatcher())
    window.set_chapter_view(chapter_view)
    window.show()
    window.set_current_chapter(1, True, True)
    chapter_view.setFocus()

    QTest.keyClick(chapter_view, Qt.Key_Right)
    QTest.keyClick(chapter_view, Qt.Key_Left)

    assert recorded["next"] == 1
    assert recorded["previous"] == 1


def test_arrow_keys_on_chapter_view_ignored_at_bounds(qt_app, window, recorded):
    chapter_view = ChapterView(ProximityWatcher())
    window.set_chapter_view(chapter_view)
    window.show()
    window.set_current_chapter(0, False, False)

    QTest.keyClick(chapter_view, Qt.Key_Right)
    QTest.keyClick(chapter_view, Qt.Key_Left)

    assert recorded["next"] == 0
    assert recorded["previous"] == 0
