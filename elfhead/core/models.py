"""
ElfHead Data Models
====================

Pydantic models for the decoded ELF identification block and the two
header fields ElfHead reports on (object type and entry point).

Every enumerated field is a :class:`FieldLabel`: the raw numeric code, the
text printed for it, and whether the code was recognised.  Unrecognised
codes are never errors; they carry ``known=False`` and render as
``<unknown: 0xNN>``.

References:
    - TIS Committee. (1995). Executable and Linkable Format (ELF) Specification.
    - Linux man page: elf(5).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def unknown_label(code: int) -> str:
    """Render an unrecognised code as ``<unknown: 0xNN>``."""
    return f"<unknown: {code:#x}>"


class FieldLabel(BaseModel):
    """A decoded enumerated value.

    Attributes:
        code: The raw value read from the header.
        label: Human-readable text for the value.
        known: ``False`` when *code* is not in the lookup table.
    """
    model_config = ConfigDict(frozen=True)

    code: int
    label: str
    known: bool = True

    @classmethod
    def unknown(cls, code: int) -> FieldLabel:
        return cls(code=code, label=unknown_label(code), known=False)

    def __str__(self) -> str:
        return self.label


class VersionInfo(BaseModel):
    """The ``EI_VERSION`` byte and whether it is ``EV_CURRENT``."""
    model_config = ConfigDict(frozen=True)

    value: int
    is_current: bool

    @property
    def label(self) -> str:
        if self.is_current:
            return f"{self.value} (current)"
        return str(self.value)

    def __str__(self) -> str:
        return self.label


class EntryPoint(BaseModel):
    """Normalised entry-point address.

    Attributes:
        raw: Value as read from the file in host (little-endian) order.
        value: Address after byte-order normalisation and width truncation.
        bits: Storage width implied by the ELF class (32 or 64).
    """
    model_config = ConfigDict(frozen=True)

    raw: int
    value: int
    bits: int = 64

    @property
    def label(self) -> str:
        return f"0x{self.value:x}"

    def __str__(self) -> str:
        return self.label


class IdentificationBlock(BaseModel):
    """Decoded ``e_ident`` array.

    Attributes:
        ident: The 16 identification bytes; the first four are the magic.
        elf_class: ``EI_CLASS`` (none / ELF32 / ELF64).
        data_encoding: ``EI_DATA`` (none / little endian / big endian).
        version: ``EI_VERSION``.
        os_abi: ``EI_OSABI``.
        abi_version: ``EI_ABIVERSION``, reported as-is.
    """
    model_config = ConfigDict(frozen=True)

    ident: tuple[int, ...] = Field(min_length=4)
    elf_class: FieldLabel
    data_encoding: FieldLabel
    version: VersionInfo
    os_abi: FieldLabel
    abi_version: int

    @property
    def magic(self) -> bytes:
        return bytes(self.ident[:4])

    @property
    def magic_hex(self) -> str:
        """Identification bytes as space-separated two-digit hex."""
        return " ".join(f"{b:02x}" for b in self.ident)


class HeaderReport(BaseModel):
    """Everything ElfHead prints for one file."""
    model_config = ConfigDict(frozen=True)

    path: str = "<memory>"
    identification: IdentificationBlock
    object_type: FieldLabel
    entry_point: EntryPoint
