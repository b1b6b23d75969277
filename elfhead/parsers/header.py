"""
ELF Header Field Decoder
=========================

Decodes the two multi-byte header fields ElfHead reports: ``e_type`` and
``e_entry``.  Both are first read as little-endian host integers and then
normalised according to ``EI_DATA``.

The big-endian corrections are deliberately narrow:

* ``e_type`` is shifted right by 8 bits rather than byte-swapped.  The
  known type codes (0-4) live in a single byte, so the shift recovers them;
  it is not a general 16-bit swap.
* ``e_entry`` gets a 32-bit byte reversal of its low word whatever the
  class.  64-bit big-endian entry points are therefore reported wrongly;
  this is a known limitation kept for output compatibility.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - Linux man page: elf(5).
"""

from __future__ import annotations

import struct

from elfhead.core.models import (
    EntryPoint,
    FieldLabel,
    HeaderReport,
    IdentificationBlock,
)
from elfhead.parsers.ident import (
    ELFCLASS32,
    ELFDATA2MSB,
    decode_ident,
)


# ---------------------------------------------------------------------------
# Header layout
# ---------------------------------------------------------------------------

E_TYPE_OFFSET: int = 16
E_ENTRY_OFFSET: int = 24

# ELF type
ET_NONE: int = 0
ET_REL: int = 1   # Relocatable
ET_EXEC: int = 2  # Executable
ET_DYN: int = 3   # Shared object / PIE
ET_CORE: int = 4  # Core dump

_ET_NAMES: dict[int, str] = {
    ET_NONE: "NONE (None)",
    ET_REL: "REL (Relocatable file)",
    ET_EXEC: "EXEC (Executable file)",
    ET_DYN: "DYN (Shared object file)",
    ET_CORE: "CORE (Core file)",
}

_MASK32: int = 0xFFFFFFFF


def entry_width(elf_class: int) -> int:
    """Size in bytes of ``e_entry`` for *elf_class*."""
    return 4 if elf_class == ELFCLASS32 else 8


def required_size(elf_class: int) -> int:
    """Bytes needed to reach the end of ``e_entry``."""
    return E_ENTRY_OFFSET + entry_width(elf_class)


# ---------------------------------------------------------------------------
# Field decoders
# ---------------------------------------------------------------------------

def decode_type(raw: int, data_encoding: int) -> FieldLabel:
    """Decode ``e_type``.

    Args:
        raw: The 16-bit field read in little-endian order.
        data_encoding: ``EI_DATA`` code.

    Returns:
        The type label; unknown codes report *raw* before any shift.
    """
    code = raw >> 8 if data_encoding == ELFDATA2MSB else raw
    name = _ET_NAMES.get(code)
    if name is None:
        return FieldLabel.unknown(raw)
    return FieldLabel(code=code, label=name)


def swap32(value: int) -> int:
    """Reverse the byte order of the low 32 bits of *value*."""
    value &= _MASK32
    value = ((value << 8) & 0xFF00FF00) | ((value >> 8) & 0x00FF00FF)
    return ((value << 16) | (value >> 16)) & _MASK32


def decode_entry(raw: int, data_encoding: int, elf_class: int) -> EntryPoint:
    """Normalise ``e_entry`` for byte order and width.

    Args:
        raw: The field read in little-endian order (4 or 8 bytes).
        data_encoding: ``EI_DATA`` code.
        elf_class: ``EI_CLASS`` code.
    """
    value = swap32(raw) if data_encoding == ELFDATA2MSB else raw
    bits = 32 if elf_class == ELFCLASS32 else 64
    if bits == 32:
        value &= _MASK32
    return EntryPoint(raw=raw, value=value, bits=bits)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class ELFHeaderParser:
    """Decode the identification block, type and entry point of an ELF file.

    The buffer must already hold :func:`required_size` bytes for the
    file's class once the magic is known to be valid; reading and length
    checks are the caller's job.

    Usage::

        report = ELFHeaderParser(raw_bytes).parse()
        print(report.object_type.label)
    """

    def __init__(
        self,
        data: bytes,
        *,
        path: str = "<memory>",
        strict: bool = False,
    ) -> None:
        self._data: bytes = bytes(data)
        self._path = path
        self._strict = strict

    def parse_ident(self) -> IdentificationBlock:
        """Validate the magic and decode ``e_ident``.

        Raises:
            InvalidMagicError: If the signature check fails.
        """
        return decode_ident(self._data, strict=self._strict)

    def parse(self) -> HeaderReport:
        """Decode the full report.

        Raises:
            InvalidMagicError: If the signature check fails.
        """
        ident = self.parse_ident()
        elf_class = ident.elf_class.code
        encoding = ident.data_encoding.code

        (raw_type,) = struct.unpack_from("<H", self._data, E_TYPE_OFFSET)
        fmt = "<I" if entry_width(elf_class) == 4 else "<Q"
        (raw_entry,) = struct.unpack_from(fmt, self._data, E_ENTRY_OFFSET)

        return HeaderReport(
            path=self._path,
            identification=ident,
            object_type=decode_type(raw_type, encoding),
            entry_point=decode_entry(raw_entry, encoding, elf_class),
        )
