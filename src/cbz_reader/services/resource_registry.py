"""Resource registry - revocable handles for decoded page bytes.

Handles live for one chapter view. The render pipeline releases every
handle explicitly on teardown instead of waiting for garbage collection.
"""

import itertools
from typing import Dict

from cbz_reader.core import CbzReaderError


class ImageResourceHandle:
    """A revocable reference to the bytes of one page image."""

    def __init__(self, handle_id: int, data: bytes):
        self.handle_id = handle_id
        self._data: bytes | None = data

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def data(self) -> bytes:
        """Returns the bytes behind the handle.

        Raises:
            CbzReaderError: if the handle has been released.
        """
        if self._data is None:
            raise CbzReaderError(f"Resource handle {self.handle_id} has been released")
        return self._data

    def _revoke(self) -> None:
        self._data = None

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return f"ImageResourceHandle(id={self.handle_id}, {state})"


class ResourceRegistry:
    """Hands out and tracks live ImageResourceHandles."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._live: Dict[int, ImageResourceHandle] = {}

    @property
    def live_count(self) -> int:
        """Returns how many handles are acquired and not yet released."""
        return len(self._live)

    def acquire(self, data: bytes) -> ImageResourceHandle:
        handle = ImageResourceHandle(next(self._ids), data)
        self._live[handle.handle_id] = handle
        return handle

    def release(self, handle: ImageResourceHandle) -> None:
        """Release a single handle. Releasing twice is harmless."""
        self._live.pop(handle.handle_id, None)
        handle._revoke()

    def release_all(self) -> int:
        """Release every live handle and return how many were released."""
        handles = list(self._live.values())
        for handle in handles:
            self.release(handle)
        return len(handles)
