"""
INI parsing state machine.

Consumes classified lines in a single forward pass and fills a `Store` with
raw values. The only state is the current section:

- blank and comment lines are skipped;
- a header replaces (or creates) the named section and makes it current;
- anything else before the first header is a MissingSectionHeaderError;
- a key/value line is stored in the current section;
- an invalid line goes to `on_invalid_line` if given, else raises ParseError.

Placeholders are never expanded here.
"""

from typing import Iterable, Optional
from iniforge.lib.errors import MissingSectionHeaderError, ParseError
from iniforge.lib.lexer import line_classify, lines_split
from iniforge.lib.log import LOG
from iniforge.lib.store import Section, Store
from iniforge.models.dataModel import (
    InvalidLine,
    LineKind,
    LineRecord,
    LineToken,
    OnInvalidLine,
    Transform,
)


def lines_parse(
    lines: Iterable[LineRecord],
    store: Store,
    transform: Transform = Transform.NONE,
    on_invalid_line: OnInvalidLine = None,
    file: Optional[str] = None,
) -> Store:
    """Parse line records into `store`.

    Args:
        lines: Line records in source order
        store: Store to populate; existing sections not redeclared are kept
        transform: Case transform for section and key names
        on_invalid_line: Callback absorbing invalid lines inside a section
        file: Source identifier carried by errors and callbacks

    Returns:
        The same store, for chaining

    Raises:
        MissingSectionHeaderError: Data before the first section header
        ParseError: Invalid line inside a section and no callback given
    """
    current: Optional[Section] = None

    for record in lines:
        token: LineToken = line_classify(record)

        if token.kind in (LineKind.BLANK, LineKind.COMMENT):
            continue

        if token.kind is LineKind.SECTION:
            name: str = transform.apply(token.name)
            if name in store:
                LOG(f"Section [{name}] redeclared at line {token.lineNumber}, replacing")
            current = Section(name)
            store[name] = current
            continue

        if current is None:
            raise MissingSectionHeaderError(file, token.lineNumber, token.line)

        if token.kind is LineKind.KEY_VALUE:
            current[transform.apply(token.key)] = token.value
            continue

        if on_invalid_line is None:
            raise ParseError(file, token.lineNumber, token.line)
        LOG(f"Invalid line {token.lineNumber} diverted to handler: {token.line!r}")
        on_invalid_line(
            InvalidLine(file=file, lineNumber=token.lineNumber, line=token.line)
        )

    return store


def text_parse(
    text: str,
    store: Store,
    transform: Transform = Transform.NONE,
    on_invalid_line: OnInvalidLine = None,
    file: Optional[str] = None,
) -> Store:
    """Split `text` on Unicode line boundaries and parse it into `store`."""
    return lines_parse(
        lines_split(text),
        store,
        transform=transform,
        on_invalid_line=on_invalid_line,
        file=file,
    )
