"""
ConfigParser: the public face of iniforge.

Owns one `Store`, fills it through the parsing state machine on every read,
and expands placeholders on every non-raw `get`. File I/O is a thin wrapper
around pure parse/serialize functions over in-memory text; the asynchronous
variants only move the blocking file call to a worker thread.

Example:
    config = ConfigParser(transform=Transform.LOWER)
    config.read("settings.ini")
    config.get("db", "port")             # "localhost:5432"
    config.get("db", "port", raw=True)   # "%(host)s:5432"
"""

import asyncio
import math
import os
from typing import Iterator, Optional, Self, Union
from iniforge.config.settings import appsettings
from iniforge.lib.errors import DuplicateSectionError, InterpolationError, NoSectionError
from iniforge.lib.log import LOG
from iniforge.lib.parser import interpolate
from iniforge.lib.reader import text_parse
from iniforge.lib.store import Section, Store, store_serialize
from iniforge.models.dataModel import OnInvalidLine, Transform

FileLike = Union[str, bytes, os.PathLike, int]


class ConfigParser:
    """INI reader/writer with on-demand `%(name)s` interpolation.

    Attributes:
        transform: Case transform applied to names at parse time
        on_invalid_line: Callback diverting invalid lines instead of raising
        default_section: Fallback section for interpolation
        max_depth: Longest chain of nested placeholders
    """

    def __init__(
        self: Self,
        transform: Optional[Union[Transform, str]] = None,
        on_invalid_line: OnInvalidLine = None,
        default_section: Optional[str] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        self.transform: Transform = Transform(transform or appsettings.transform)
        self.on_invalid_line: OnInvalidLine = on_invalid_line
        self.default_section: str = default_section or appsettings.defaultSection
        self.max_depth: int = max_depth or appsettings.interpolationDepth
        self._sections: Store = Store()

    def __contains__(self: Self, section: object) -> bool:
        return section in self._sections

    def __iter__(self: Self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self: Self) -> int:
        return len(self._sections)

    def sections(self: Self) -> list[str]:
        """Section names in insertion order."""
        return list(self._sections)

    def add_section(self: Self, section: str) -> None:
        """Add an empty section.

        Raises:
            DuplicateSectionError: If the section already exists
        """
        if section in self._sections:
            raise DuplicateSectionError(section)
        self._sections[section] = Section(section)

    def has_section(self: Self, section: str) -> bool:
        return section in self._sections

    def keys(self: Self, section: str) -> list[str]:
        """Key names of `section` in insertion order.

        Raises:
            NoSectionError: If the section does not exist
        """
        if section not in self._sections:
            raise NoSectionError(section)
        return list(self._sections[section])

    def has_key(self: Self, section: str, key: str) -> bool:
        return section in self._sections and key in self._sections[section]

    def get(self: Self, section: str, key: str, raw: bool = False) -> Optional[str]:
        """Value of `key` in `section`.

        Args:
            section: Section name
            key: Key name
            raw: Return the stored string without expanding placeholders

        Returns:
            The value, or None when the section or key is absent

        Raises:
            InterpolationError: If expansion fails (never when `raw`)
        """
        if section not in self._sections:
            return None
        if raw:
            return self._sections[section].get(key)
        return interpolate(
            self._sections,
            section,
            key,
            transform=self.transform,
            default_section=self.default_section,
            max_depth=self.max_depth,
        )

    def get_int(
        self: Self, section: str, key: str, radix: int = 10
    ) -> Optional[Union[int, float]]:
        """Value coerced to an integer of base `radix`.

        Returns None if the section does not exist. Any other failure gives
        `nan`, including a placeholder that cannot be expanded.
        """
        if section not in self._sections:
            return None
        try:
            value: Optional[str] = self.get(section, key)
            return int(value.strip(), radix)
        except (AttributeError, TypeError, ValueError, InterpolationError):
            return math.nan

    def get_float(self: Self, section: str, key: str) -> Optional[float]:
        """Value coerced to a float; None without the section, `nan` on failure."""
        if section not in self._sections:
            return None
        try:
            value: Optional[str] = self.get(section, key)
            return float(value)
        except (TypeError, ValueError, InterpolationError):
            return math.nan

    def items(self: Self, section: str) -> Optional[dict[str, str]]:
        """Raw key/value pairs of `section`, or None if it does not exist."""
        if section not in self._sections:
            return None
        return self._sections[section].to_dict()

    def set(self: Self, section: str, key: str, value: object) -> bool:
        """Store `str(value)` under `key`; a no-op if the section is missing.

        Returns:
            bool: True if the value was stored
        """
        if section not in self._sections:
            LOG(f"Ignoring set of {key!r}: no section [{section}]")
            return False
        self._sections[section][key] = str(value)
        return True

    def remove_key(self: Self, section: str, key: str) -> bool:
        """Remove `key` from `section`; True if it existed."""
        if self.has_key(section, key):
            del self._sections[section][key]
            return True
        return False

    def remove_section(self: Self, section: str) -> bool:
        """Remove `section` and all its keys; True if it existed."""
        if section in self._sections:
            del self._sections[section]
            return True
        return False

    def read_string(self: Self, text: str, source: str = "<string>") -> None:
        """Parse in-memory text into this configuration.

        Raises:
            MissingSectionHeaderError: Data before the first section header
            ParseError: Invalid line and no `on_invalid_line` callback
        """
        text_parse(
            text,
            self._sections,
            transform=self.transform,
            on_invalid_line=self.on_invalid_line,
            file=source,
        )

    def read(self: Self, file: FileLike) -> None:
        """Read a file name or descriptor as UTF-8 and parse it."""
        LOG(f"Reading {file!r}")
        self.read_string(_file_read(file), _file_name(file))

    async def read_async(self: Self, file: FileLike) -> None:
        """Like `read`, with the file read in a worker thread."""
        LOG(f"Reading {file!r} asynchronously")
        text: str = await asyncio.to_thread(_file_read, file)
        self.read_string(text, _file_name(file))

    def to_string(self: Self) -> str:
        """Serialized configuration. Comments are not preserved."""
        return store_serialize(self._sections)

    def write(self: Self, file: FileLike) -> None:
        """Write the serialized configuration to a file name or descriptor."""
        LOG(f"Writing {len(self._sections)} sections to {file!r}")
        _file_write(file, self.to_string())

    async def write_async(self: Self, file: FileLike) -> None:
        """Like `write`, with the file written in a worker thread."""
        LOG(f"Writing {len(self._sections)} sections to {file!r} asynchronously")
        await asyncio.to_thread(_file_write, file, self.to_string())


def _file_name(file: FileLike) -> str:
    if isinstance(file, int):
        return f"<fd {file}>"
    return os.fsdecode(file)


def _file_read(file: FileLike) -> str:
    with open(
        file,
        "r",
        encoding=appsettings.encoding,
        newline="",
        closefd=not isinstance(file, int),
    ) as fp:
        return fp.read()


def _file_write(file: FileLike, text: str) -> None:
    with open(
        file,
        "w",
        encoding=appsettings.encoding,
        newline="",
        closefd=not isinstance(file, int),
    ) as fp:
        fp.write(text)
