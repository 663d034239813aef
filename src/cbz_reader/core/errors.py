"""Exception hierarchy shared by the reader layers."""


class CbzReaderError(Exception):
    """Base class for all reader failures."""


class ArchiveDecodeError(CbzReaderError):
    """The archive bytes could not be opened as a zip container."""


class EntryReadError(CbzReaderError):
    """A single archive entry failed to decompress."""


class ImageDecodeError(CbzReaderError):
    """Decompressed bytes are not a displayable image."""
