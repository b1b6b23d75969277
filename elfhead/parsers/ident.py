"""
ELF Identification Decoder
===========================

Validates the ELF magic signature and maps each byte of the ``e_ident``
array to a :class:`~elfhead.core.models.FieldLabel`.

Every decoder is a total function of one byte: codes missing from the
lookup tables come back as ``<unknown: 0xNN>`` instead of raising.

Magic validation checks *membership*: each of the first four bytes must be
one of ``0x7f``, ``'E'``, ``'L'``, ``'F'``, in any position.  A permuted
signature such as ``b"FLE\\x7f"`` is therefore accepted.  Pass
``strict=True`` to require the exact sequence ``b"\\x7fELF"``.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2, Figure 1-4.
    - System V Application Binary Interface, e_ident[] Identification Indexes.
"""

from __future__ import annotations

from elfhead.core.errors import InvalidMagicError
from elfhead.core.models import FieldLabel, IdentificationBlock, VersionInfo


# ---------------------------------------------------------------------------
# e_ident layout
# ---------------------------------------------------------------------------

ELF_MAGIC: bytes = b"\x7fELF"
_MAGIC_BYTES: frozenset[int] = frozenset(ELF_MAGIC)

EI_CLASS: int = 4
EI_DATA: int = 5
EI_VERSION: int = 6
EI_OSABI: int = 7
EI_ABIVERSION: int = 8
EI_NIDENT: int = 16

# ELF Class (32-bit vs 64-bit)
ELFCLASSNONE: int = 0
ELFCLASS32: int = 1
ELFCLASS64: int = 2

_CLASS_NAMES: dict[int, str] = {
    ELFCLASSNONE: "none",
    ELFCLASS32: "ELF32",
    ELFCLASS64: "ELF64",
}

# Data encoding (endianness)
ELFDATANONE: int = 0
ELFDATA2LSB: int = 1  # Little-endian
ELFDATA2MSB: int = 2  # Big-endian

_DATA_NAMES: dict[int, str] = {
    ELFDATANONE: "none",
    ELFDATA2LSB: "2's complement, little endian",
    ELFDATA2MSB: "2's complement, big endian",
}

EV_CURRENT: int = 1

# OS/ABI
ELFOSABI_NONE: int = 0  # UNIX System V
ELFOSABI_HPUX: int = 1
ELFOSABI_NETBSD: int = 2
ELFOSABI_LINUX: int = 3
ELFOSABI_SOLARIS: int = 6
ELFOSABI_IRIX: int = 8
ELFOSABI_FREEBSD: int = 9
ELFOSABI_TRU64: int = 10
ELFOSABI_ARM: int = 97
ELFOSABI_STANDALONE: int = 255

_OSABI_NAMES: dict[int, str] = {
    ELFOSABI_NONE: "UNIX - System V",
    ELFOSABI_HPUX: "UNIX - HP-UX",
    ELFOSABI_NETBSD: "UNIX - NetBSD",
    ELFOSABI_LINUX: "UNIX - Linux",
    ELFOSABI_SOLARIS: "UNIX - Solaris",
    ELFOSABI_IRIX: "UNIX - IRIX",
    ELFOSABI_FREEBSD: "UNIX - FreeBSD",
    ELFOSABI_TRU64: "UNIX - TRU64",
    ELFOSABI_ARM: "ARM",
    ELFOSABI_STANDALONE: "Standalone App",
}


# ---------------------------------------------------------------------------
# Magic validation
# ---------------------------------------------------------------------------

def validate_magic(data: bytes, *, strict: bool = False) -> None:
    """Check the first four bytes of *data* against the ELF signature.

    Args:
        data: Header buffer; only ``data[:4]`` is examined.
        strict: Require positional equality with ``b"\\x7fELF"`` instead
            of set membership.

    Raises:
        InvalidMagicError: On the first byte that fails the check, or if
            *data* holds fewer than four bytes.
    """
    magic = bytes(data[:4])
    if len(magic) < len(ELF_MAGIC):
        raise InvalidMagicError(magic)

    if strict:
        if magic != ELF_MAGIC:
            raise InvalidMagicError(magic)
        return

    for byte in magic:
        if byte not in _MAGIC_BYTES:
            raise InvalidMagicError(magic)


def is_elf(data: bytes, *, strict: bool = False) -> bool:
    """Return ``True`` if :func:`validate_magic` accepts *data*."""
    try:
        validate_magic(data, strict=strict)
    except InvalidMagicError:
        return False
    return True


# ---------------------------------------------------------------------------
# Field decoders
# ---------------------------------------------------------------------------

def _lookup(table: dict[int, str], code: int) -> FieldLabel:
    name = table.get(code)
    if name is None:
        return FieldLabel.unknown(code)
    return FieldLabel(code=code, label=name)


def decode_class(byte: int) -> FieldLabel:
    """Decode ``EI_CLASS``."""
    return _lookup(_CLASS_NAMES, byte)


def decode_data_encoding(byte: int) -> FieldLabel:
    """Decode ``EI_DATA``."""
    return _lookup(_DATA_NAMES, byte)


def decode_version(byte: int) -> VersionInfo:
    """Decode ``EI_VERSION``; only ``EV_CURRENT`` (1) is flagged current."""
    return VersionInfo(value=byte, is_current=byte == EV_CURRENT)


def decode_osabi(byte: int) -> FieldLabel:
    """Decode ``EI_OSABI``."""
    return _lookup(_OSABI_NAMES, byte)


def decode_abi_version(byte: int) -> int:
    return byte


def decode_ident(data: bytes, *, strict: bool = False) -> IdentificationBlock:
    """Validate the magic and decode the whole identification block.

    Args:
        data: Buffer holding at least ``EI_NIDENT`` bytes.
        strict: Forwarded to :func:`validate_magic`.

    Returns:
        The decoded :class:`IdentificationBlock`.

    Raises:
        InvalidMagicError: If the signature check fails.
    """
    validate_magic(data, strict=strict)

    ident = bytes(data[:EI_NIDENT])
    return IdentificationBlock(
        ident=tuple(ident),
        elf_class=decode_class(ident[EI_CLASS]),
        data_encoding=decode_data_encoding(ident[EI_DATA]),
        version=decode_version(ident[EI_VERSION]),
        os_abi=decode_osabi(ident[EI_OSABI]),
        abi_version=decode_abi_version(ident[EI_ABIVERSION]),
    )
