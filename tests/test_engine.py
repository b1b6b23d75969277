import pytest

from shared.config import ToolkitConfig
from shared.logger import ToolkitLogger

from elfhead.core.engine import HeaderEngine
from elfhead.core.errors import (
    ElfHeadError,
    HeaderReadError,
    InvalidMagicError,
    TruncatedHeaderError,
)


@pytest.fixture
def engine():
    return HeaderEngine(logger=ToolkitLogger("test", console_output=False))


def test_inspect_file(engine, elf_file):
    path = elf_file(elf_class=1, osabi=9, e_type=2, entry=0x8048400)
    report = engine.inspect(path)

    assert report.path == str(path)
    assert report.identification.os_abi.label == "UNIX - FreeBSD"
    assert report.entry_point.label == "0x8048400"


def test_read_header_limits_to_read_size(engine, tmp_path, header_builder):
    path = tmp_path / "big"
    path.write_bytes(header_builder(size=4096))
    assert len(engine.read_header(path)) == 64


def test_missing_file_raises_read_error(engine, tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(HeaderReadError) as excinfo:
        engine.inspect(missing)
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value, ElfHeadError)


def test_directory_raises_read_error(engine, tmp_path):
    with pytest.raises(HeaderReadError):
        engine.read_header(tmp_path)


def test_invalid_magic(engine):
    with pytest.raises(InvalidMagicError):
        engine.decode(b"\x00\x00\x00\x00" + b"\x00" * 60)


def test_empty_file_is_not_elf(engine, tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    with pytest.raises(InvalidMagicError):
        engine.inspect(path)


def test_truncated_header(engine, header_builder):
    data = header_builder()[:30]
    with pytest.raises(TruncatedHeaderError) as excinfo:
        engine.decode(data, "short")
    assert excinfo.value.size == 30
    assert excinfo.value.required == 32


def test_truncated_elf32_is_enough_at_28_bytes(engine, header_builder):
    data = header_builder(elf_class=1, entry=0x1000)[:28]
    assert engine.decode(data).entry_point.label == "0x1000"


def test_strict_magic_from_config(header_builder):
    config = ToolkitConfig()
    config.elfhead.strict_magic = True
    strict = HeaderEngine(
        config=config, logger=ToolkitLogger("test", console_output=False)
    )
    with pytest.raises(InvalidMagicError):
        strict.decode(header_builder(magic=b"ELF\x7f"))
