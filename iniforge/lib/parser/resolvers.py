"""
Placeholder resolvers for iniforge.

`KeyResolver` looks placeholder names up in the section a value was requested
from, falling back to the default section, and expands the referenced value
recursively. The chain of keys currently being expanded is tracked so that a
key referencing itself, directly or through others, fails instead of looping.
"""

from typing import Optional, Self
from iniforge.lib.errors import (
    InterpolationCycleError,
    InterpolationDepthError,
    InterpolationMissingKeyError,
)
from iniforge.lib.log import LOG
from iniforge.lib.parser.base import BaseTokenParser
from iniforge.lib.store import Store
from iniforge.models.dataModel import Transform


class KeyResolver:
    """Resolver for `%(name)s` placeholders against a store.

    Attributes:
        store: Store holding the raw values
        section: Originating section, searched first for every name
        default_section: Fallback section searched second
        max_depth: Longest chain of nested expansions allowed
        chain: (section, key) pairs currently being expanded
    """

    def __init__(
        self: Self,
        store: Store,
        section: str,
        transform: Transform = Transform.NONE,
        default_section: str = "DEFAULT",
        max_depth: int = 10,
    ) -> None:
        self.store: Store = store
        self.section: str = section
        self.transform: Transform = transform
        self.default_section: str = default_section
        self.max_depth: int = max_depth
        self.chain: list[tuple[str, str]] = []
        self.parser: BaseTokenParser = BaseTokenParser(resolver=self)

    def scope_find(self: Self, key: str) -> Optional[str]:
        """Name of the section that defines `key`, or None."""
        for scope in (self.section, self.default_section):
            if scope in self.store and key in self.store[scope]:
                return scope
        return None

    def resolve(self: Self, token_value: str) -> str:
        """Resolve a placeholder name to its fully expanded value.

        Args:
            token_value: Name inside the placeholder

        Returns:
            Expanded value of the referenced key
        """
        key: str = self.transform.apply(token_value)
        scope: Optional[str] = self.scope_find(key)
        if scope is None:
            referrer: str = self.chain[-1][1] if self.chain else key
            LOG(f"No key {token_value!r} for [{self.section}] {referrer!r}")
            raise InterpolationMissingKeyError(self.section, referrer, token_value)
        return self.expand(scope, key)

    def expand(self: Self, section: str, key: str) -> str:
        """Expand the raw value at `store[section][key]`.

        Raises:
            InterpolationCycleError: If the key is already on the chain
            InterpolationDepthError: If the chain is already `max_depth` long
        """
        if (section, key) in self.chain:
            names: list[str] = [name for _, name in self.chain] + [key]
            LOG(f"Circular reference: {' -> '.join(names)}")
            raise InterpolationCycleError(self.section, key, names)
        if len(self.chain) >= self.max_depth:
            LOG(f"Max depth {self.max_depth} exceeded at {key!r}")
            raise InterpolationDepthError(self.section, key, self.max_depth)

        try:
            self.chain.append((section, key))
            return self.parser.parse(self.store[section][key], self.section, key)
        finally:
            self.chain.pop()


def interpolate(
    store: Store,
    section: str,
    key: str,
    transform: Transform = Transform.NONE,
    default_section: str = "DEFAULT",
    max_depth: int = 10,
) -> Optional[str]:
    """Return the interpolated value of `store[section][key]`.

    Returns None when the section or the key is absent. Nothing is cached, so a
    later change to a referenced key shows up on the next call.
    """
    if section not in store or key not in store[section]:
        return None
    resolver: KeyResolver = KeyResolver(
        store,
        section,
        transform=transform,
        default_section=default_section,
        max_depth=max_depth,
    )
    return resolver.expand(section, key)
