"""Unit tests for the argument parser module in includetree CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from includetree.cli.argparser import create_exclusion_action, create_parser, validate_args
from includetree.exclusion_rules.pattern_rules import PatternExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock exclusion rules object."""
    mock_rules = MagicMock(spec=PatternExclusionRules)
    mock_rules.load_rules = MagicMock()
    mock_rules.add_rule = MagicMock()
    return mock_rules


def test_create_exclusion_action():
    """Test creation of ExclusionRulesAction class."""
    ExclusionAction = create_exclusion_action(MagicMock())

    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["-e", "--exclude"]
    assert action.dest == "exclude"
    assert action.help == "test help"


def test_exclusion_action_exclude_file(mock_exclusion_rules):
    ExclusionAction = create_exclusion_action(mock_exclusion_rules)
    action = ExclusionAction(option_strings=["-e", "--exclude"], dest="exclude")

    namespace = argparse.Namespace()
    rules_file = Path("/path/to/include-deny.txt")
    action(None, namespace, rules_file, "-e")

    mock_exclusion_rules.load_rules.assert_called_once_with(rules_file)
    assert namespace.exclude == [rules_file]


def test_exclusion_action_ignore_pattern(mock_exclusion_rules):
    ExclusionAction = create_exclusion_action(mock_exclusion_rules)
    action = ExclusionAction(option_strings=["-i", "--ignore"], dest="ignore")

    namespace = argparse.Namespace()
    action(None, namespace, "author.credentials", "--ignore")

    mock_exclusion_rules.add_rule.assert_called_once_with("author.credentials")
    assert namespace.ignore == ["author.credentials"]


def test_parser_applies_rules_in_command_line_order(tmp_path):
    """Patterns and rule files are applied in the order they appear."""
    rules_file = tmp_path / "deny.txt"
    rules_file.write_text("author.credentials\n")

    rules = PatternExclusionRules()
    parser = create_parser(rules)
    args = parser.parse_args(["-i", "*.credentials", "-i", "!author.credentials", "-e", str(rules_file), "x"])

    assert args.ignore == ["*.credentials", "!author.credentials"]
    assert args.exclude == [rules_file]
    # The file comes last, so it re-excludes author.credentials
    assert rules.exclude("author.credentials")
    assert rules.exclude("post.credentials")


def test_parser_defaults():
    parser = create_parser(PatternExclusionRules())
    args = parser.parse_args([])

    assert args.include is None
    assert args.format == "text"
    assert args.output is None
    assert args.max_depth is None
    assert args.indent is None
    assert args.strict is False
    assert args.verbose is False
    assert args.exclude is None
    assert args.ignore is None


def test_parser_all_options(tmp_path):
    parser = create_parser(PatternExclusionRules())
    output = tmp_path / "out.json"
    args = parser.parse_args(["-f", "json", "-o", str(output), "-d", "3", "-S", "-v", "foo.bar"])

    assert args.include == "foo.bar"
    assert args.format == "json"
    assert args.output == output
    assert args.max_depth == 3
    assert args.strict is True
    assert args.verbose is True


def test_parser_rejects_unknown_format():
    parser = create_parser(PatternExclusionRules())
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["-f", "xml", "foo"])
    assert exc_info.value.code == 2


def test_parser_version(capsys):
    parser = create_parser(PatternExclusionRules())
    with pytest.raises(SystemExit) as exc_info:
        parser.parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("includetree ")


def test_validate_args_accepts_positive_depth():
    validate_args(argparse.Namespace(max_depth=1, indent=0))
    validate_args(argparse.Namespace(max_depth=None, indent=None))


@pytest.mark.parametrize("max_depth", [0, -2])
def test_validate_args_rejects_non_positive_depth(max_depth):
    with pytest.raises(ValueError, match="--max-depth must be a positive integer"):
        validate_args(argparse.Namespace(max_depth=max_depth, indent=None))


def test_validate_args_rejects_negative_indent():
    with pytest.raises(ValueError, match="--indent must not be negative"):
        validate_args(argparse.Namespace(max_depth=None, indent=-1))


def test_parser_indent():
    args = create_parser(PatternExclusionRules()).parse_args(["-f", "json", "--indent", "2", "foo"])
    assert args.indent == 2
