import pytest

from elfhead.core.errors import InvalidMagicError
from elfhead.parsers.header import (
    ELFHeaderParser,
    decode_entry,
    decode_type,
    required_size,
    swap32,
)
from elfhead.parsers.ident import (
    ELFCLASS32,
    ELFCLASS64,
    ELFDATA2LSB,
    ELFDATA2MSB,
)


@pytest.mark.parametrize(
    "code,label",
    [
        (0, "NONE (None)"),
        (1, "REL (Relocatable file)"),
        (2, "EXEC (Executable file)"),
        (3, "DYN (Shared object file)"),
        (4, "CORE (Core file)"),
    ],
)
def test_type_table_little_endian(code, label):
    assert decode_type(code, ELFDATA2LSB).label == label


def test_type_big_endian_uses_high_byte():
    # e_type == 2 stored as 00 02 reads back as 0x0200 on a little-endian host.
    assert decode_type(0x0200, ELFDATA2MSB).label == "EXEC (Executable file)"
    assert decode_type(0x0300, ELFDATA2MSB).label == "DYN (Shared object file)"


def test_type_big_endian_shift_ignores_low_byte():
    assert decode_type(0x02FF, ELFDATA2MSB).label == "EXEC (Executable file)"


def test_unknown_type_reports_raw_value():
    assert decode_type(0x1234, ELFDATA2LSB).label == "<unknown: 0x1234>"
    assert decode_type(0x0500, ELFDATA2MSB).label == "<unknown: 0x500>"
    assert not decode_type(0xFE00, ELFDATA2LSB).known


def test_swap32():
    assert swap32(0x12345678) == 0x78563412
    assert swap32(0xAABBCCDD_12345678) == 0x78563412


def test_entry_elf32_little_endian():
    entry = decode_entry(0x08000040, ELFDATA2LSB, ELFCLASS32)
    assert entry.label == "0x8000040"
    assert entry.bits == 32


def test_entry_elf64_little_endian():
    entry = decode_entry(0x0000000000400078, ELFDATA2LSB, ELFCLASS64)
    assert entry.label == "0x400078"
    assert entry.bits == 64


def test_entry_elf32_big_endian_is_swapped():
    raw = int.from_bytes(b"\x08\x00\x00\x40", "little")
    assert decode_entry(raw, ELFDATA2MSB, ELFCLASS32).label == "0x8000040"


def test_entry_elf64_big_endian_only_swaps_low_word():
    raw = int.from_bytes(b"\x00\x00\x00\x00\x00\x40\x00\x78", "little")
    entry = decode_entry(raw, ELFDATA2MSB, ELFCLASS64)
    assert entry.value == swap32(raw)
    assert entry.label == "0x0"


def test_entry_zero_keeps_prefix():
    assert decode_entry(0, ELFDATA2LSB, ELFCLASS64).label == "0x0"


def test_required_size_by_class():
    assert required_size(ELFCLASS32) == 28
    assert required_size(ELFCLASS64) == 32
    assert required_size(0) == 32


def test_parser_elf64_little_endian(header_builder):
    report = ELFHeaderParser(header_builder(), path="a.out").parse()
    assert report.path == "a.out"
    assert report.identification.elf_class.label == "ELF64"
    assert report.object_type.label == "EXEC (Executable file)"
    assert report.entry_point.label == "0x400078"


def test_parser_elf32_big_endian(header_builder):
    data = header_builder(elf_class=1, data=2, e_type=3, entry=0x10000)
    report = ELFHeaderParser(data).parse()
    assert report.identification.data_encoding.label == "2's complement, big endian"
    assert report.object_type.label == "DYN (Shared object file)"
    assert report.entry_point.label == "0x10000"


def test_parser_elf32_ignores_bytes_after_entry(header_builder):
    data = bytearray(header_builder(elf_class=1, entry=0x8048000))
    data[28:32] = b"\xff\xff\xff\xff"
    assert ELFHeaderParser(bytes(data)).parse().entry_point.label == "0x8048000"


def test_parser_strict_mode(header_builder):
    data = header_builder(magic=b"FLE\x7f")
    assert ELFHeaderParser(data).parse().identification.magic == b"FLE\x7f"
    with pytest.raises(InvalidMagicError):
        ELFHeaderParser(data, strict=True).parse()
