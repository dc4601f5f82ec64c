r"""
Base parser implementation for placeholder substitution.

Provides a generic scanning engine that expands placeholder tokens using a
configurable resolver. The placeholder syntax is fixed:

- `%(name)s` is replaced by whatever the resolver returns for `name`
- `%%` is a literal `%`
- any other `%` is an InterpolationSyntaxError

Example:
    parser = BaseTokenParser(resolver=KeyResolver(store, "db"))
    result = parser.parse("%(host)s:5432")
"""

import re
from typing import Protocol, runtime_checkable, Self
from iniforge.lib.errors import InterpolationSyntaxError


@runtime_checkable
class TokenResolver(Protocol):
    """Protocol defining the resolver interface for placeholder substitution.

    Resolvers return the fully expanded text for a placeholder name, or raise
    an InterpolationError subclass.
    """

    def resolve(self: Self, token_value: str) -> str:
        """Resolve a placeholder name to its substitution.

        Args:
            token_value: Name inside `%(...)s`

        Returns:
            Text to substitute in place of the placeholder
        """
        ...


class BaseTokenParser:
    """Generic placeholder parser using resolver strategy.

    Attributes:
        token: The placeholder prefix character
        resolver: Strategy for resolving placeholder names
    """

    def __init__(self: Self, resolver: TokenResolver, token: str = "%") -> None:
        """Initialize parser with token configuration.

        Raises:
            ValueError: If token is empty
        """
        if not token:
            raise ValueError("Token cannot be empty")

        self.token: str = token
        self.resolver: TokenResolver = resolver
        self.placeholder: re.Pattern[str] = re.compile(
            re.escape(token) + r"\((?P<name>[^()]+)\)s"
        )

    def parse(self: Self, input_text: str, section: str = "", key: str = "") -> str:
        """Expand every placeholder in `input_text`.

        Args:
            input_text: Raw value possibly containing placeholders
            section: Section of the value, for error context
            key: Key of the value, for error context

        Returns:
            The expanded text; text without tokens comes back unchanged

        Raises:
            InterpolationSyntaxError: On a malformed placeholder
        """
        if not input_text or self.token not in input_text:
            return input_text

        return self._process_tokens(input_text, section, key)

    def _process_tokens(self: Self, text: str, section: str, key: str) -> str:
        """Walk the text once, copying literals and substituting placeholders."""
        result: list[str] = []
        pos: int = 0

        while (index := text.find(self.token, pos)) >= 0:
            result.append(text[pos:index])
            follower: str = text[index + 1 : index + 2]

            if follower == self.token:
                result.append(self.token)
                pos = index + 2
            elif follower == "(":
                match = self.placeholder.match(text, index)
                if not match:
                    raise InterpolationSyntaxError(
                        section,
                        key,
                        f"Bad placeholder in section [{section}], key {key!r}: "
                        f"{text[index:]!r}",
                    )
                result.append(self.resolver.resolve(match["name"]))
                pos = match.end()
            else:
                raise InterpolationSyntaxError(
                    section,
                    key,
                    f"'{self.token}' must be followed by '{self.token}' or '(' in "
                    f"section [{section}], key {key!r}, found: {text[index:]!r}",
                )

        result.append(text[pos:])
        return "".join(result)
