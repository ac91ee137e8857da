"""Command-line argument parsing for includetree.

This module defines the command-line interface for includetree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from includetree import __version__
from includetree.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates the provided exclusion rules object as arguments are
    processed, so rules from files and individual patterns apply in the exact order
    they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with includetree's options.
    """
    description = """
    includetree: parse an include parameter into a nested eager-loading tree.

    The include parameter is a comma-separated list of dotted resource paths, as used
    by the JSON:API "include" query parameter. Paths sharing a prefix are merged under
    one node, and sibling order follows the order in which names first appear.

    Paths are rejected whole when a segment is empty, when a segment contains a
    wildcard (* or ?), when they are deeper than --max-depth, or when an exclusion
    rule matches them.
    """

    epilog = """
    Examples:
      # Print the tree for an include parameter
      includetree "comments.author,author"

      # Emit JSON (accepted paths, nested includes, rejected paths)
      includetree -f json "comments.author,comments.*"

      # Read the parameter from stdin
      echo "comments.author" | includetree -

      # Reject sensitive relations with dotted gitignore-style patterns
      includetree -i credentials -i "!admin.credentials" "author.credentials,admin.credentials"
      includetree -e include-deny.txt "author.credentials"

      # Limit nesting and fail on any rejected path
      includetree -d 2 -S "comments.author.avatar"
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"includetree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "include",
        nargs="?",
        default=None,
        help="The include parameter to parse. Use '-' to read it from stdin. Omit it for an absent parameter.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a file of exclusion patterns, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual exclusion pattern in gitignore syntax, with dots separating segments "
            "(e.g. 'credentials', 'author.credentials', '!admin.credentials'). Can be specified "
            "multiple times, and patterns are processed in the order they appear, mixed with "
            "-e/--exclude options."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        metavar="N",
        help="Reject paths with more than N segments.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Indent JSON output by N spaces (default: compact single-line JSON).",
    )
    parser.add_argument(
        "-S",
        "--strict",
        action="store_true",
        help="Fail with exit code 1 if any path is rejected.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every rejected path to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth is not None and args.max_depth < 1:
        raise ValueError("--max-depth must be a positive integer")
    if args.indent is not None and args.indent < 0:
        raise ValueError("--indent must not be negative")
