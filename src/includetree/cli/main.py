"""Command-line interface for includetree.

This module provides the command-line interface for includetree, allowing users to
inspect how an include parameter is parsed, filtered, and merged.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution, including rejected paths with --strict
    2: Command-line syntax error
    141: Broken pipe on Unix-like systems

Example:
    # Print the inclusion tree
    $ includetree "comments.author,author"

    # Emit JSON and fail on wildcard paths
    $ includetree -f json -S "comments.*"
"""

import logging
import sys
from typing import Optional

from includetree.cli.argparser import create_parser, validate_args
from includetree.exceptions import InvalidIncludeError
from includetree.exclusion_rules.pattern_rules import PatternExclusionRules
from includetree.include_tree.included_resource_params import IncludedResourceParams
from includetree.output_strategies.base_strategy import OutputStrategy
from includetree.output_strategies.json_strategy import JSONOutputStrategy
from includetree.output_strategies.text_strategy import TextOutputStrategy

logger = logging.getLogger(__name__)


def create_output_strategy(output_format: str, indent: Optional[int] = None) -> OutputStrategy:
    """Create the output strategy for a --format choice.

    The indent only applies to JSON output.

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format == "json":
        return JSONOutputStrategy(indent=indent)
    if output_format == "text":
        return TextOutputStrategy()
    raise ValueError(f"Unsupported output format: {output_format}")


def read_include_param(value: Optional[str]) -> Optional[str]:
    """Resolve the positional include argument, reading stdin for '-'."""
    if value != "-":
        return value
    return sys.stdin.read().rstrip("\r\n")


def main() -> None:
    """Main entry point for the includetree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        141: Broken pipe on Unix-like systems
    """
    try:
        # Populated by the parser as -e/-i options are processed
        exclusion_rules = PatternExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        try:
            validate_args(args)
        except ValueError as e:
            parser.error(str(e))

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s", stream=sys.stderr)

        params = IncludedResourceParams(
            read_include_param(args.include),
            exclusion_rules=exclusion_rules,
            max_depth=args.max_depth,
        )

        if args.strict:
            params.validate()

        output = create_output_strategy(args.format, args.indent).format_includes(params) + "\n"

        if args.output:
            logger.debug("Writing %s output to %s", args.format, args.output)
            args.output.write_text(output, encoding="utf-8")
        else:
            try:
                sys.stdout.write(output)
                sys.stdout.flush()
            except BrokenPipeError:
                sys.exit(141)

        if not params.has_included_resources():
            print("Warning: No resources are included.", file=sys.stderr)

    except (InvalidIncludeError, OSError, ValueError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
