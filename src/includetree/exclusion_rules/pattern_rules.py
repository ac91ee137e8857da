"""Exclusion rules for resource paths using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from includetree.include_tree.path_splitter import SEGMENT_SEPARATOR
from includetree.types import PathType

from .base_rules import BaseExclusionRules


def to_spec_path(dotted: str) -> str:
    """Map a dotted resource path or pattern onto the slash form pathspec matches.

    Example:
        >>> to_spec_path("author.credentials")
        'author/credentials'
        >>> to_spec_path("!author.public")
        '!author/public'
    """
    return dotted.replace(SEGMENT_SEPARATOR, "/")


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules written as .gitignore patterns over dotted resource paths.

    Patterns use dots where .gitignore uses slashes, and the pathspec library does the
    matching after both the pattern and the path are mapped back to slashes. This
    gives the familiar semantics:

    - A bare name (``credentials``) matches that segment at any depth, and every path
      below it.
    - A dotted pattern (``author.credentials``) is anchored at the top level.
    - Globs (``*``, ``?``, ``[abc]``) match within one segment, ``**`` across segments.
    - Negation (``!author.credentials.public``) re-admits paths excluded earlier.
    - Blank lines and lines starting with ``#`` are ignored in rules files.

    Rules are applied in the order they were added, whether from files or directly.

    Attributes:
        rules (list[str]): Every pattern added so far, in dotted form and in order.
        spec (GitIgnoreSpec): Pattern matcher compiled from the rules by the pathspec library.

    Example:
        >>> rules = PatternExclusionRules()
        >>> rules.add_rule("credentials")
        >>> rules.exclude("author.credentials")
        True
        >>> rules.exclude("author.credentials.token")
        True
        >>> rules.exclude("author")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize PatternExclusionRules with patterns from the specified files.

        Args:
            rules_files: Path(s) to file(s) holding one pattern per line.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.rules: List[str] = []
        self.spec = GitIgnoreSpec.from_lines([])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a dotted resource path against the loaded patterns.

        Example:
            >>> rules = PatternExclusionRules()
            >>> rules.add_rule("author.credentials")
            >>> rules.exclude("author.credentials")
            True
            >>> rules.exclude("post.author.credentials")
            False
        """
        return bool(self.spec.match_file(to_spec_path(path)))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Read patterns from one or more files and append them to the existing rules.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(lines)

    def add_rule(self, rule: str) -> None:
        """Add a single dotted pattern after the existing rules.

        Example:
            >>> rules = PatternExclusionRules()
            >>> rules.add_rule("*.credentials")
            >>> rules.add_rule("!admin.credentials")
            >>> rules.exclude("author.credentials")
            True
            >>> rules.exclude("admin.credentials")
            False
        """
        self._extend([rule])

    def _extend(self, rules: Sequence[str]) -> None:
        # The matcher is compiled when a GitIgnoreSpec is built, so rebuild it from every rule
        self.rules.extend(rules)
        self.spec = GitIgnoreSpec.from_lines(to_spec_path(rule) for rule in self.rules)
