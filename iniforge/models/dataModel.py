"""
dataModel.py

This module defines the data models and schemas used throughout iniforge.
The models leverage Pydantic for validation and type safety.

Features:
- Enum classes for case transforms and line classification.
- Line records produced by the lexer and the tagged tokens it classifies them into.
- The invalid line payload handed to `on_invalid_line` callbacks.
- The CLI context shared between click commands.

Usage:
Import these models to validate and structure data used in the application.
"""

from pydantic import BaseModel, Field
from typing import Callable, Optional, TYPE_CHECKING
from enum import Enum
from dataclasses import dataclass
from pathlib import Path

if TYPE_CHECKING:
    from iniforge.lib.configparser import ConfigParser


class Transform(str, Enum):
    """
    Case transform applied to section and key names at parse time.
    """

    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"

    def apply(self, name: str) -> str:
        """Fold `name` according to this transform."""
        if self is Transform.LOWER:
            return name.lower()
        if self is Transform.UPPER:
            return name.upper()
        return name


class LineKind(Enum):
    """
    Classification of a single configuration line.
    """

    BLANK = 1
    COMMENT = 2
    SECTION = 3
    KEY_VALUE = 4
    INVALID = 5


class LineRecord(BaseModel):
    """A raw line together with its position in the source.

    Attributes:
        lineNumber: Zero-based index of the line in the source text
        text: The line content without its terminator
    """

    lineNumber: int
    text: str


class LineToken(LineRecord):
    """A classified line.

    Attributes:
        kind: What the line is
        line: The line with leading whitespace removed
        name: Header body for SECTION lines
        key: Key name for KEY_VALUE lines
        value: Raw, untrimmed value for KEY_VALUE lines
    """

    kind: LineKind
    line: str
    name: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None


class InvalidLine(BaseModel):
    """
    Context describing a line the parser could not accept.

    Attributes:
        file (Optional[str]): Identifier of the source being parsed.
        lineNumber (int): Zero-based index of the offending line.
        line (str): The offending line, leading whitespace removed.
    """

    file: Optional[str] = Field(
        default=None, description="Path or identifier of the parsed source."
    )
    lineNumber: int = Field(..., description="Zero-based index of the line.")
    line: str = Field(..., description="Offending line text.")


@dataclass
class CommandContext:
    """Context object handed to every click command.

    Attributes:
        parser: The loaded configuration
        path: File the configuration was read from and is written back to
        dirty: Set by mutating commands so the file gets saved
    """

    parser: "ConfigParser"
    path: Path
    dirty: bool = False


OnInvalidLine = Optional[Callable[[InvalidLine], None]]
