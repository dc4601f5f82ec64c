"""
Exception hierarchy for iniforge.

Structural errors come from the parser and abort a whole load; interpolation
errors come from the resolver and abort a single `get`.
"""

from typing import Optional, Sequence


class Error(Exception):
    """Base class for all iniforge errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message: str = message


class NoSectionError(Error):
    """Raised when a section that does not exist is enumerated."""

    def __init__(self, section: str) -> None:
        super().__init__(f"No section: {section!r}")
        self.section: str = section


class DuplicateSectionError(Error):
    """Raised by `add_section` when the section already exists."""

    def __init__(self, section: str) -> None:
        super().__init__(f"Section {section!r} already exists")
        self.section: str = section


class ParseError(Error):
    """A line inside a section matches no known line shape."""

    def __init__(self, file: Optional[str], lineNumber: int, line: str) -> None:
        super().__init__(
            f"Source contains parsing errors: {file or '<string>'!s}\n"
            f"\tline {lineNumber}: {line!r}"
        )
        self.file: Optional[str] = file
        self.lineNumber: int = lineNumber
        self.line: str = line


class MissingSectionHeaderError(ParseError):
    """Data appears before any section header."""

    def __init__(self, file: Optional[str], lineNumber: int, line: str) -> None:
        super().__init__(file, lineNumber, line)
        self.message = (
            f"File contains no section headers.\n"
            f"file: {file or '<string>'!s}, line: {lineNumber}\n{line!r}"
        )
        self.args = (self.message,)


class InterpolationError(Error):
    """Base class for failures while expanding placeholders."""

    def __init__(self, section: str, key: str, message: str) -> None:
        super().__init__(message)
        self.section: str = section
        self.key: str = key


class InterpolationMissingKeyError(InterpolationError):
    """A placeholder names a key found in neither the section nor the default."""

    def __init__(self, section: str, key: str, reference: str) -> None:
        super().__init__(
            section,
            key,
            f"Bad value substitution: section [{section}], key {key!r}: "
            f"no key {reference!r} to interpolate",
        )
        self.reference: str = reference


class InterpolationCycleError(InterpolationError):
    """A key transitively references itself."""

    def __init__(self, section: str, key: str, chain: Sequence[str]) -> None:
        super().__init__(
            section,
            key,
            f"Circular reference in section [{section}], key {key!r}: "
            + " -> ".join(chain),
        )
        self.chain: list[str] = list(chain)


class InterpolationDepthError(InterpolationError):
    """The expansion chain grew past the configured depth."""

    def __init__(self, section: str, key: str, max_depth: int) -> None:
        super().__init__(
            section,
            key,
            f"Interpolation depth exceeded ({max_depth}) in section [{section}], "
            f"key {key!r}",
        )
        self.max_depth: int = max_depth


class InterpolationSyntaxError(InterpolationError):
    """A `%` that is neither `%%` nor a complete `%(name)s` placeholder."""
