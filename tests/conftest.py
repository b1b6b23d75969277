import struct

import pytest

ELF_MAGIC = b"\x7fELF"


def make_header(
    elf_class=2,
    data=1,
    version=1,
    osabi=0,
    abiversion=0,
    e_type=2,
    entry=0x400078,
    magic=ELF_MAGIC,
    machine=0x3E,
    size=64,
):
    """Build an ELF header prefix with fields encoded in *data*'s byte order."""
    ident = magic + bytes([elf_class, data, version, osabi, abiversion]) + b"\x00" * 7
    order = ">" if data == 2 else "<"
    entry_fmt = "I" if elf_class == 1 else "Q"
    body = struct.pack(order + "HHI" + entry_fmt, e_type, machine, 1, entry)
    raw = ident + body
    return raw + b"\x00" * max(0, size - len(raw))


@pytest.fixture
def header_builder():
    return make_header


@pytest.fixture
def elf_file(tmp_path):
    def _write(name="a.out", **fields):
        path = tmp_path / name
        path.write_bytes(make_header(**fields))
        return path

    return _write
