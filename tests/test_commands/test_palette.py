"""
Tests for the section and key command palette.
"""

from pathlib import Path
import pytest
import click
from click.testing import CliRunner
from iniforge.commands import section, key
from iniforge.commands.app import cli
from iniforge.lib.configparser import ConfigParser
from iniforge.models.dataModel import CommandContext


@pytest.fixture
def runner() -> CliRunner:
    """Provides a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def context(config: ConfigParser, tmp_path: Path) -> CommandContext:
    """Palette context around the sample configuration."""
    return CommandContext(parser=config, path=tmp_path / "sample.ini")


def test_command_groups(runner: CliRunner) -> None:
    """Test the palette structure."""
    assert isinstance(cli, click.Group)
    assert set(section.section.commands) == {"list", "add", "remove"}
    assert set(key.key.commands) == {
        "list", "items", "get", "int", "float", "set", "remove"
    }
    for name in ["section", "key", "dump"]:
        assert name in cli.commands

    result = runner.invoke(cli, ["key", "--help"])
    assert result.exit_code == 0
    assert "Key Management" in result.output


def test_no_context_is_usage_error(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["section", "list"])
    assert result.exit_code == 2
    assert "No configuration loaded" in result.output


def test_section_list(runner, context) -> None:
    result = runner.invoke(cli, ["section", "list"], obj=context)
    assert result.exit_code == 0
    assert result.output.splitlines() == ["db", "DEFAULT"]
    assert not context.dirty


def test_section_add(runner, context) -> None:
    result = runner.invoke(cli, ["section", "add", "cache"], obj=context)
    assert result.exit_code == 0
    assert "Section 'cache' added" in result.output
    assert context.parser.has_section("cache")
    assert context.dirty


def test_section_add_duplicate(runner, context) -> None:
    result = runner.invoke(cli, ["section", "add", "db"], obj=context)
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert not context.dirty


def test_section_remove(runner, context) -> None:
    result = runner.invoke(cli, ["section", "remove", "db"], obj=context)
    assert result.exit_code == 0
    assert context.parser.sections() == ["DEFAULT"]

    result = runner.invoke(cli, ["section", "remove", "db"], obj=context)
    assert result.exit_code == 1
    assert "not found" in result.output


def test_key_list_and_items(runner, context) -> None:
    result = runner.invoke(cli, ["key", "list", "db"], obj=context)
    assert result.output.splitlines() == ["host", "port", "pool"]

    result = runner.invoke(cli, ["key", "items", "db"], obj=context)
    assert "port=%(host)s:5432" in result.output.splitlines()

    result = runner.invoke(cli, ["key", "list", "missing"], obj=context)
    assert result.exit_code == 1
    assert "No section" in result.output


@pytest.mark.parametrize(
    "args,expected",
    [
        (["key", "get", "db", "port"], "localhost:5432"),
        (["key", "get", "db", "port", "--raw"], "%(host)s:5432"),
        (["key", "int", "db", "pool"], "10"),
        (["key", "int", "db", "pool", "--radix", "16"], "16"),
        (["key", "float", "db", "pool"], "10.0"),
    ],
)
def test_key_reads(runner, context, args, expected) -> None:
    result = runner.invoke(cli, args, obj=context)
    assert result.exit_code == 0
    assert result.output.strip() == expected


@pytest.mark.parametrize(
    "args,message",
    [
        (["key", "get", "db", "nope"], "not found"),
        (["key", "int", "db", "host"], "not a number"),
        (["key", "float", "missing", "x"], "not found"),
        (["key", "int", "db", "pool", "--radix", "1"], "Invalid value"),
    ],
)
def test_key_read_failures(runner, context, args, message) -> None:
    result = runner.invoke(cli, args, obj=context)
    assert result.exit_code != 0
    assert message in result.output


def test_key_set_and_remove(runner, context) -> None:
    result = runner.invoke(cli, ["key", "set", "db", "host", "db.lan"], obj=context)
    assert result.exit_code == 0
    assert context.parser.get("db", "port") == "db.lan:5432"
    assert context.dirty

    result = runner.invoke(cli, ["key", "remove", "db", "pool"], obj=context)
    assert result.exit_code == 0
    assert not context.parser.has_key("db", "pool")

    result = runner.invoke(cli, ["key", "set", "missing", "k", "v"], obj=context)
    assert result.exit_code == 1


def test_dump(runner, context) -> None:
    result = runner.invoke(cli, ["dump"], obj=context)
    assert result.exit_code == 0
    assert result.output == context.parser.to_string()


def test_key_int_on_unexpandable_value(runner, context) -> None:
    runner.invoke(cli, ["key", "set", "db", "pct", "50%"], obj=context)
    result = runner.invoke(cli, ["key", "int", "db", "pct"], obj=context)
    assert result.exit_code == 1
    assert "not a number" in result.output
