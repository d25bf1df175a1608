from __future__ import annotations


class DecodeError(ValueError):
    """Base class for everything that can go wrong while decoding a file."""


class MissingFile(DecodeError):
    """The target path does not exist."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class OpenFailure(DecodeError):
    """The target path exists but cannot be opened for reading."""

    def __init__(self, path: str, reason: str = ""):
        msg = f"Could not open file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.path = path


class TruncatedStream(DecodeError):
    """
    A read inside a record body could not obtain the requested bytes.

    Attributes:
        offset:    stream position at which the read started
        requested: number of bytes the read asked for
        available: number of bytes actually returned
    """

    def __init__(self, offset: int, requested: int, available: int, what: str = ""):
        where = f" while reading {what}" if what else ""
        super().__init__(
            f"Stream truncated at byte {offset}{where}: needed {requested} bytes, got {available}."
        )
        self.offset = offset
        self.requested = requested
        self.available = available


class UnknownDimension(DecodeError, LookupError):
    """A decoder asked for a dimension before reading it (grammar ordering bug)."""

    def __init__(self, name: str):
        super().__init__(f"Dimension '{name}' used before it was read.")
        self.name = name


__all__ = ["DecodeError", "MissingFile", "OpenFailure", "TruncatedStream", "UnknownDimension"]
