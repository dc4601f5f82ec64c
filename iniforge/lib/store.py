"""
Ordered section store.

A `Store` maps section names to `Section`s; a `Section` maps key names to raw,
non-interpolated string values. Both keep insertion order so that
serialization is deterministic.
"""

from collections.abc import MutableMapping
from typing import Iterator, Mapping, Optional


class Section(MutableMapping[str, str]):
    """... is a dict, just maintaining raw key/value pairs of one section."""

    def __init__(self, name: str, pairs: Optional[Mapping[str, str]] = None) -> None:
        self.name: str = name
        self.__raw: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __str__(self) -> str:
        return f"[{self.name}]"

    def __repr__(self) -> str:
        return "[%s] { .cnt = %d }" % (self.name, len(self.__raw))

    def to_dict(self) -> dict[str, str]:
        """A detached copy of the raw pairs."""
        return dict(self.__raw)


class Store(MutableMapping[str, Section]):
    """... is simply a group of sections, representing a whole INI document.

    Assigning a plain mapping wraps it in a fresh `Section`, so the store
    never shares a dict with its caller.
    """

    def __init__(self) -> None:
        self.__raw: dict[str, Section] = {}

    def __getitem__(self, key: str) -> Section:
        return self.__raw[key]

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        if isinstance(value, Section) and value.name == key:
            self.__raw[key] = value
        else:
            self.__raw[key] = Section(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return f"Store({list(self.__raw)!r})"

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Nested plain-dict copy, handy for comparisons."""
        return {name: section.to_dict() for name, section in self.__raw.items()}


def store_serialize(store: Store) -> str:
    """Render `store` in the flat `[section]` / `key=value` layout.

    Each section is followed by one blank line. Comments are not preserved.
    """
    out: list[str] = []
    for name, section in store.items():
        out.append(f"[{name}]\n")
        for key, value in section.items():
            out.append(f"{key}={value}\n")
        out.append("\n")
    return "".join(out)
