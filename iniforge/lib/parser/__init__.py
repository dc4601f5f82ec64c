"""
Parser package for iniforge placeholder interpolation.

Provides a token scanner for `%(name)s` placeholders and the resolver that
looks names up in a section store.
"""

from .base import BaseTokenParser, TokenResolver
from .resolvers import KeyResolver, interpolate

__all__ = ["BaseTokenParser", "TokenResolver", "KeyResolver", "interpolate"]
