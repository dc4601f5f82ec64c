"""
iniforge: INI configuration reader/writer with `%(name)s` interpolation.
"""

from iniforge.lib.configparser import ConfigParser
from iniforge.lib.errors import (
    Error,
    NoSectionError,
    DuplicateSectionError,
    ParseError,
    MissingSectionHeaderError,
    InterpolationError,
    InterpolationMissingKeyError,
    InterpolationCycleError,
    InterpolationDepthError,
    InterpolationSyntaxError,
)
from iniforge.models.dataModel import InvalidLine, Transform

__all__ = [
    "ConfigParser",
    "Error",
    "NoSectionError",
    "DuplicateSectionError",
    "ParseError",
    "MissingSectionHeaderError",
    "InterpolationError",
    "InterpolationMissingKeyError",
    "InterpolationCycleError",
    "InterpolationDepthError",
    "InterpolationSyntaxError",
    "InvalidLine",
    "Transform",
]
