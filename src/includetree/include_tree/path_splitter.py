"""Splitting of include parameters into resource paths."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from includetree.types import RejectionReason

RESOURCE_SEPARATOR = ","
SEGMENT_SEPARATOR = "."
WILDCARD_CHARACTERS = frozenset("*?")


def is_wildcard_segment(segment: str) -> bool:
    """Check whether a path segment contains a wildcard character.

    Example:
        >>> is_wildcard_segment("comments")
        False
        >>> is_wildcard_segment("comm?nts")
        True
    """
    return any(char in WILDCARD_CHARACTERS for char in segment)


@dataclass(frozen=True)
class ResourcePath:
    """One comma-delimited entry of an include parameter.

    Attributes:
        raw (str): The entry exactly as supplied, e.g. ``"comments.author"``.
        segments (tuple[str, ...]): The entry split on ``.``, e.g. ``("comments", "author")``.

    Example:
        >>> path = ResourcePath.from_entry("comments.author")
        >>> path.segments
        ('comments', 'author')
        >>> path.depth
        2
        >>> path.is_wildcard
        False
    """

    raw: str
    segments: Tuple[str, ...]

    @classmethod
    def from_entry(cls, entry: str) -> "ResourcePath":
        """Build a ResourcePath from one comma-delimited entry, without trimming."""
        return cls(entry, tuple(entry.split(SEGMENT_SEPARATOR)))

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_wildcard(self) -> bool:
        return any(is_wildcard_segment(segment) for segment in self.segments)

    @property
    def is_malformed(self) -> bool:
        return any(segment == "" for segment in self.segments)

    def rejection_reason(self, max_depth: Optional[int] = None) -> Optional[RejectionReason]:
        """Classify this path without consulting any exclusion rules.

        Args:
            max_depth: Maximum number of segments allowed, or None for no limit.

        Returns:
            The first RejectionReason that applies, or None for a concrete path.

        Example:
            >>> ResourcePath.from_entry("foo..bar").rejection_reason()
            <RejectionReason.MALFORMED: 'malformed'>
            >>> ResourcePath.from_entry("foo.*").rejection_reason()
            <RejectionReason.WILDCARD: 'wildcard'>
            >>> ResourcePath.from_entry("a.b.c").rejection_reason(max_depth=2)
            <RejectionReason.TOO_DEEP: 'too_deep'>
            >>> ResourcePath.from_entry("a.b.c").rejection_reason() is None
            True
        """
        if self.is_malformed:
            return RejectionReason.MALFORMED
        if self.is_wildcard:
            return RejectionReason.WILDCARD
        if max_depth is not None and self.depth > max_depth:
            return RejectionReason.TOO_DEEP
        return None


def split_include_param(include_param: Optional[str]) -> List[ResourcePath]:
    """Split a raw include parameter into its resource paths.

    Entries and segments are taken verbatim: no whitespace is trimmed and empty
    entries are kept so that they can be reported as malformed.

    Args:
        include_param: The raw parameter, or None when no inclusion was requested.

    Returns:
        The resource paths in the order they appear.

    Example:
        >>> [path.raw for path in split_include_param("foo,foo.bar,baz.*")]
        ['foo', 'foo.bar', 'baz.*']
        >>> split_include_param(None)
        []
        >>> split_include_param("")
        [ResourcePath(raw='', segments=('',))]
    """
    if include_param is None:
        return []
    return [ResourcePath.from_entry(entry) for entry in include_param.split(RESOURCE_SEPARATOR)]
