"""Shared fixtures for the CBZ reader test suite."""

import io
import os
import zipfile

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QBuffer, QByteArray, QIODevice
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication


def build_cbz(entries) -> bytes:
    """Build an in-memory zip from (name, bytes) pairs; names ending in / are directories."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            if name.endswith("/"):
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return buffer.getvalue()


class SyncThreadPool:
    """Runs workers immediately on the calling thread."""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        worker.run()


class DeferredThreadPool:
    """Collects workers so a test decides when (and in which order) they finish."""

    def __init__(self):
        self.pending = []

    def start(self, worker):
        self.pending.append(worker)

    def run_all(self):
        workers, self.pending = self.pending, []
        for worker in workers:
            worker.run()


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication for widget and pixmap tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def png_bytes(qt_app):
    """A small valid PNG image."""
    image = QImage(8, 12, QImage.Format_RGB32)
    image.fill(QColor("white"))
    data = QByteArray()
    buffer = QBuffer(data)
    buffer.open(QIODevice.WriteOnly)
    image.save(buffer, "PNG")
    buffer.close()
    return bytes(data)


@pytest.fixture
def cbz_factory():
    return build_cbz


@pytest.fixture
def sync_pool():
    return SyncThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()
