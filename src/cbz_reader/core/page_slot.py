"""PageSlot entity - the render unit bound to one page image of a chapter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import CbzReaderError


class SlotState(Enum):
    PENDING = "pending"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass
class PageSlot:
    """Tracks a single page through pending -> loaded / errored.

    A pending slot holds the decompressed bytes. Resolution moves them into a
    revocable resource handle; a slot is resolved at most once.
    """

    index: int
    entry_name: str
    data: Optional[bytes] = field(default=None, repr=False)
    state: SlotState = SlotState.PENDING
    handle: Optional[object] = field(default=None, repr=False)
    error: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.state is SlotState.PENDING

    @property
    def alt_text(self) -> str:
        """Returns the descriptive text shown for this page."""
        if self.state is SlotState.ERRORED:
            return f"Error loading {self.entry_name}"
        return f"Page from {self.entry_name}"

    def take_data(self) -> bytes:
        """Hand over the pending bytes; the slot keeps no copy afterwards.

        Raises:
            CbzReaderError: if the slot is not pending or holds no data.
        """
        if not self.is_pending or self.data is None:
            raise CbzReaderError(f"Slot {self.index} has no pending data")
        data, self.data = self.data, None
        return data

    def mark_loaded(self, handle: object) -> None:
        if not self.is_pending:
            raise CbzReaderError(f"Slot {self.index} already resolved as {self.state.value}")
        self.handle = handle
        self.state = SlotState.LOADED

    def mark_errored(self, message: str) -> None:
        if not self.is_pending:
            raise CbzReaderError(f"Slot {self.index} already resolved as {self.state.value}")
        self.data = None
        self.handle = None
        self.error = message
        self.state = SlotState.ERRORED
