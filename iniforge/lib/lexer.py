"""
Line lexer for INI text.

Splits text on Unicode line boundaries and classifies every line on its own,
without any parser state:

    BLANK      empty once leading whitespace is removed
    COMMENT    first character is ';' or '#'
    SECTION    '[' name ']' with optional trailing whitespace
    KEY_VALUE  key, then the first '=' or ':', then the raw value
    INVALID    anything else

Example:
    >>> [t.kind for t in map(line_classify, lines_split("[a]\\nk=1"))]
    [<LineKind.SECTION: 3>, <LineKind.KEY_VALUE: 4>]
"""

import re
from typing import Final
from iniforge.models.dataModel import LineKind, LineRecord, LineToken

# RL1.6 Line Boundaries: CRLF, LF, CR, NEL, LS and PS
LINE_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"\r\n|[\n\r\u0085\u2028\u2029]")

SECTION: Final[re.Pattern[str]] = re.compile(r"\[(?P<name>[^\]]+)\]\s*")
KEY_VALUE: Final[re.Pattern[str]] = re.compile(r"(?P<key>[^=:]*?)\s*[=:](?P<value>.*)")
COMMENT_PREFIXES: Final[tuple[str, ...]] = (";", "#")


def lines_split(text: str) -> list[LineRecord]:
    """Split `text` into numbered line records.

    Args:
        text: Decoded configuration text

    Returns:
        One record per line; a trailing terminator yields a final empty line.
    """
    return [
        LineRecord(lineNumber=number, text=line)
        for number, line in enumerate(LINE_BOUNDARY.split(text))
    ]


def line_classify(record: LineRecord) -> LineToken:
    """Classify a single line.

    Leading whitespace is removed before classification; trailing whitespace
    stays part of a value.

    Args:
        record: The line to classify

    Returns:
        LineToken tagged with its kind and the extracted fields
    """
    line: str = record.text.lstrip()
    fields: dict = {"lineNumber": record.lineNumber, "text": record.text, "line": line}

    if not line:
        return LineToken(kind=LineKind.BLANK, **fields)
    if line.startswith(COMMENT_PREFIXES):
        return LineToken(kind=LineKind.COMMENT, **fields)

    match = SECTION.fullmatch(line)
    if match:
        return LineToken(kind=LineKind.SECTION, name=match["name"], **fields)

    match = KEY_VALUE.match(line)
    if match and match["key"] and not line.startswith("="):
        return LineToken(
            kind=LineKind.KEY_VALUE, key=match["key"], value=match["value"], **fields
        )

    return LineToken(kind=LineKind.INVALID, **fields)
