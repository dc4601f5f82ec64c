"""Tests for the ConfigParser accessor API and file I/O."""

import math
import os
import pytest
from unittest.mock import Mock
from iniforge.lib.configparser import ConfigParser
from iniforge.lib.errors import (
    DuplicateSectionError,
    InterpolationCycleError,
    MissingSectionHeaderError,
    NoSectionError,
    ParseError,
)
from iniforge.models.dataModel import InvalidLine, Transform


def test_sections_in_order(config):
    assert config.sections() == ["db", "DEFAULT"]
    assert "db" in config
    assert len(config) == 2


def test_add_section(config):
    config.add_section("new")
    assert config.has_section("new")
    assert config.keys("new") == []
    with pytest.raises(DuplicateSectionError):
        config.add_section("db")


def test_keys(config):
    assert config.keys("db") == ["host", "port", "pool"]
    with pytest.raises(NoSectionError):
        config.keys("missing")


def test_has_key(config):
    assert config.has_key("db", "host")
    assert not config.has_key("db", "nope")
    assert not config.has_key("missing", "host")


def test_get_raw_and_interpolated(config):
    assert config.get("db", "port", raw=True) == "%(host)s:5432"
    assert config.get("db", "port") == "localhost:5432"


def test_get_absent(config):
    assert config.get("missing", "host") is None
    assert config.get("db", "missing") is None
    assert config.get("db", "missing", raw=True) is None


def test_get_observes_later_mutation(config):
    config.set("db", "host", "db.internal")
    assert config.get("db", "port") == "db.internal:5432"


def test_get_raw_bypasses_interpolation_errors():
    config = ConfigParser()
    config.read_string("[s]\na=%(b)s\nb=%(a)s\npct=50%\n")
    assert config.get("s", "a", raw=True) == "%(b)s"
    assert config.get("s", "pct", raw=True) == "50%"
    with pytest.raises(InterpolationCycleError):
        config.get("s", "a")


def test_get_int():
    config = ConfigParser()
    config.read_string("[n]\ni=42\nhex=ff\nneg= -7 \nbad=abc\nref=%(i)s\n")
    assert config.get_int("n", "i") == 42
    assert config.get_int("n", "hex", 16) == 255
    assert config.get_int("n", "neg") == -7
    assert config.get_int("n", "ref") == 42
    assert math.isnan(config.get_int("n", "bad"))
    assert math.isnan(config.get_int("n", "missing"))
    assert config.get_int("missing", "i") is None


def test_get_float():
    config = ConfigParser()
    config.read_string("[n]\nf=2.5\nbad=x\n")
    assert config.get_float("n", "f") == 2.5
    assert math.isnan(config.get_float("n", "bad"))
    assert math.isnan(config.get_float("n", "missing"))
    assert config.get_float("missing", "f") is None


@pytest.mark.parametrize(
    "value",
    ["50%", "%(nope)s", "%(v)s", "%(w)s\nw=%(v)s", "%(v"],
)
def test_numbers_are_nan_when_expansion_fails(value):
    config = ConfigParser()
    config.read_string(f"[n]\nv={value}\n")
    assert math.isnan(config.get_int("n", "v"))
    assert math.isnan(config.get_float("n", "v"))


def test_items_is_raw_copy(config):
    pairs = config.items("db")
    assert pairs == {"host": "localhost", "port": "%(host)s:5432", "pool": "10"}
    pairs["host"] = "changed"
    assert config.get("db", "host") == "localhost"
    assert config.items("missing") is None


def test_set(config):
    assert config.set("db", "pool", 20)
    assert config.get("db", "pool") == "20"
    assert config.set("db", "new", "v")
    assert config.keys("db")[-1] == "new"
    assert not config.set("missing", "k", "v")
    assert not config.has_section("missing")


def test_remove_key(config):
    assert config.remove_key("db", "pool")
    assert not config.has_key("db", "pool")
    assert not config.remove_key("db", "pool")
    assert not config.remove_key("missing", "pool")


def test_remove_section(config):
    assert config.remove_section("db")
    assert config.sections() == ["DEFAULT"]
    assert not config.remove_section("db")


def test_transform_option():
    config = ConfigParser(transform="lower")
    assert config.transform is Transform.LOWER
    config.read_string("[DB]\nHost=LocalHost\n")
    assert config.sections() == ["db"]
    assert config.get("db", "host") == "LocalHost"


def test_parse_errors_carry_source():
    config = ConfigParser()
    with pytest.raises(MissingSectionHeaderError) as info:
        config.read_string("k=v\n", source="inline")
    assert info.value.file == "inline"
    with pytest.raises(ParseError):
        config.read_string("[s]\nbogus\n")


def test_on_invalid_line_callback():
    handler = Mock()
    config = ConfigParser(on_invalid_line=handler)
    config.read_string("[s]\nbogus\nk=v\n", source="inline")
    handler.assert_called_once_with(InvalidLine(file="inline", lineNumber=1, line="bogus"))
    assert config.get("s", "k") == "v"


def test_instances_do_not_share_state():
    first, second = ConfigParser(), ConfigParser()
    first.read_string("[a]\nk=1\n")
    assert second.sections() == []


def test_to_string(config):
    assert config.to_string() == (
        "[db]\nhost=localhost\nport=%(host)s:5432\npool=10\n\n"
        "[DEFAULT]\nroot=/srv\n\n"
    )


def test_read_file(ini_file):
    config = ConfigParser()
    config.read(ini_file)
    assert config.get("db", "port") == "localhost:5432"


def test_read_file_records_path_in_errors(tmp_path):
    path = tmp_path / "broken.ini"
    path.write_text("orphan=1\n", encoding="utf-8")
    with pytest.raises(MissingSectionHeaderError) as info:
        ConfigParser().read(path)
    assert info.value.file == str(path)


def test_read_keeps_crlf_as_one_boundary(tmp_path):
    path = tmp_path / "dos.ini"
    path.write_bytes(b"[s]\r\nk=v \r\n")
    config = ConfigParser()
    config.read(path)
    assert config.get("s", "k") == "v "


def test_read_descriptor(ini_file):
    fd = os.open(ini_file, os.O_RDONLY)
    try:
        config = ConfigParser()
        config.read(fd)
    finally:
        os.close(fd)
    assert config.has_key("db", "pool")


def test_write_and_read_back(config, tmp_path):
    path = tmp_path / "out.ini"
    config.write(path)
    again = ConfigParser()
    again.read(path)
    for section in config.sections():
        assert again.items(section) == config.items(section)


@pytest.mark.asyncio
async def test_read_async(ini_file):
    config = ConfigParser()
    await config.read_async(ini_file)
    assert config.get("db", "port") == "localhost:5432"


@pytest.mark.asyncio
async def test_write_async(config, tmp_path):
    path = tmp_path / "async.ini"
    await config.write_async(path)
    assert path.read_text(encoding="utf-8") == config.to_string()


@pytest.mark.asyncio
async def test_read_async_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        await ConfigParser().read_async(tmp_path / "absent.ini")
