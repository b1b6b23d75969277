"""
ElfHead Exceptions
===================

Exception hierarchy for header decoding and the file-reading collaborator.
Every subclass of :class:`ElfHeadError` is fatal for the invocation: no
report lines are produced once one is raised.
"""

from __future__ import annotations


class ElfHeadError(Exception):
    """Base class for all ElfHead failures."""


class InvalidMagicError(ElfHeadError):
    """The leading bytes are not the ELF signature."""

    def __init__(self, magic: bytes) -> None:
        self.magic = bytes(magic)
        super().__init__("Not an ELF file")


class HeaderReadError(ElfHeadError):
    """The input file could not be opened or read."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Can't read file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TruncatedHeaderError(HeaderReadError):
    """The file ends before the type or entry-point field."""

    def __init__(self, path: str, size: int, required: int) -> None:
        self.size = size
        self.required = required
        super().__init__(
            path, f"header truncated ({size} of {required} bytes)"
        )
