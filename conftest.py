"""Shared fixtures for the iniforge test suite."""

import pytest
from iniforge.lib.configparser import ConfigParser

SAMPLE_INI: str = (
    "; database settings\n"
    "[db]\n"
    "host=localhost\n"
    "port=%(host)s:5432\n"
    "# pool\n"
    "pool:10\n"
    "\n"
    "[DEFAULT]\n"
    "root=/srv\n"
)


@pytest.fixture
def sample_text() -> str:
    """A small document with a comment, both delimiters and a placeholder."""
    return SAMPLE_INI


@pytest.fixture
def config(sample_text: str) -> ConfigParser:
    """ConfigParser loaded with the sample document."""
    parser = ConfigParser()
    parser.read_string(sample_text)
    return parser


@pytest.fixture
def ini_file(tmp_path, sample_text: str):
    """The sample document written to a temporary file."""
    path = tmp_path / "sample.ini"
    path.write_text(sample_text, encoding="utf-8")
    return path
