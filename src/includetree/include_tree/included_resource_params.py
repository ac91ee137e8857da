"""Parsed include parameter with eager-loading queries.

This module provides the IncludedResourceParams class, the public entry point for
turning a JSON:API style ``include`` parameter into the structures an
eager-loading facility consumes.
"""

import logging
from typing import Iterator, List, Optional

from anytree import ContStyle

from includetree.exceptions import InvalidIncludeError
from includetree.exclusion_rules.base_rules import BaseExclusionRules
from includetree.include_tree.include_node import to_anytree
from includetree.include_tree.path_splitter import ResourcePath, split_include_param
from includetree.include_tree.tree_builder import InclusionTree, build_inclusion_tree
from includetree.types import ModelInclude, Rejection, RejectionReason

logger = logging.getLogger(__name__)


class IncludedResourceParams:
    """A comma-separated list of dotted resource paths to include with a request.

    The parameter is parsed on every query; the instance holds nothing but its
    configuration, so queries are idempotent and safe to call from several threads.

    Paths are accepted or rejected whole. A path is rejected when it has an empty
    segment, when any segment contains ``*`` or ``?``, when it is deeper than
    ``max_depth``, or when the exclusion rules match it. The query methods never
    raise for rejected paths; call validate() to refuse them explicitly.

    Attributes:
        include_param (Optional[str]): The raw parameter, or None when absent.
        exclusion_rules (Optional[BaseExclusionRules]): Rules rejecting further paths.
        max_depth (Optional[int]): Maximum number of segments per path, or None.

    Example:
        >>> params = IncludedResourceParams("foo.bar.baz,foo,foo.bar.bat,bar,baz.*")
        >>> params.has_included_resources()
        True
        >>> params.included_resources()
        ['foo.bar.baz', 'foo', 'foo.bar.bat', 'bar']
        >>> params.model_includes()
        [{'foo': [{'bar': ['baz', 'bat']}]}, 'bar']
        >>> IncludedResourceParams(None).model_includes()
        []
    """

    def __init__(
        self,
        include_param: Optional[str] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        """Initialize IncludedResourceParams.

        Args:
            include_param: The raw include parameter. None means no inclusions were requested.
            exclusion_rules: Rules for rejecting well-formed paths. Defaults to None.
            max_depth: Maximum number of segments a path may have. Defaults to None (unlimited).

        Raises:
            ValueError: If max_depth is less than 1.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {max_depth}")
        self.include_param = include_param
        self.exclusion_rules = exclusion_rules
        self.max_depth = max_depth

    def _classify(self, path: ResourcePath) -> Optional[RejectionReason]:
        reason = path.rejection_reason(self.max_depth)
        if reason is None and self.exclusion_rules is not None and self.exclusion_rules.exclude(path.raw):
            reason = RejectionReason.EXCLUDED
        if reason is not None:
            logger.debug("Rejected include path %r: %s", path.raw, reason.value)
        return reason

    def _accepted_paths(self) -> Iterator[ResourcePath]:
        for path in split_include_param(self.include_param):
            if self._classify(path) is None:
                yield path

    def has_included_resources(self) -> bool:
        """Check whether at least one path survives filtering.

        Returns:
            False for an absent parameter or when every path is rejected.

        Example:
            >>> IncludedResourceParams("foo.**").has_included_resources()
            False
            >>> IncludedResourceParams("foo,bar.**").has_included_resources()
            True
        """
        return next(self._accepted_paths(), None) is not None

    def included_resources(self) -> List[str]:
        """Get the accepted paths exactly as they were supplied.

        Example:
            >>> IncludedResourceParams("foo,foo.bar,baz.*,bat.**").included_resources()
            ['foo', 'foo.bar']
        """
        return [path.raw for path in self._accepted_paths()]

    def inclusion_tree(self) -> InclusionTree:
        """Get the accepted paths merged into a tree of Leaf and Branch nodes.

        Example:
            >>> IncludedResourceParams("foo.bar,foo.bat").inclusion_tree()
            (Branch(name='foo', children=(Leaf(name='bar'), Leaf(name='bat'))),)
        """
        return build_inclusion_tree(path.segments for path in self._accepted_paths())

    def model_includes(self) -> List[ModelInclude]:
        """Get the inclusion tree as nested lists and single-key dicts.

        A relation without nested relations is its bare name; one with nested
        relations is a dict mapping its name to the list of its children. Sibling
        order is the order in which names first appear in the parameter.

        Example:
            >>> IncludedResourceParams("foo.bar,baz.bat").model_includes()
            [{'foo': ['bar']}, {'baz': ['bat']}]
            >>> IncludedResourceParams("foo").model_includes()
            ['foo']
        """
        return [node.to_model_include() for node in self.inclusion_tree()]

    def rejected_resources(self) -> List[Rejection]:
        """Get every rejected entry with the reason it was rejected.

        Example:
            >>> IncludedResourceParams("foo,bar.*").rejected_resources()
            [('bar.*', <RejectionReason.WILDCARD: 'wildcard'>)]
        """
        rejected = []
        for path in split_include_param(self.include_param):
            reason = self._classify(path)
            if reason is not None:
                rejected.append((path.raw, reason))
        return rejected

    def validate(self) -> None:
        """Refuse the parameter if any of its paths is rejected.

        Raises:
            InvalidIncludeError: If at least one path is rejected.

        Example:
            >>> IncludedResourceParams("foo.bar").validate()
            >>> IncludedResourceParams("foo.*").validate()
            Traceback (most recent call last):
              ...
            includetree.exceptions.InvalidIncludeError: Unsupported include path(s): 'foo.*' (wildcard)
        """
        rejected = self.rejected_resources()
        if rejected:
            raise InvalidIncludeError(rejected)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate an indented representation of the inclusion tree one line at a time.

        Example:
            >>> for line in IncludedResourceParams("foo.bar,baz").stream_tree_representation():
            ...     print(line)
            include
            ├── foo
            │   └── bar
            └── baz
        """
        style = ContStyle()
        root = to_anytree(self.inclusion_tree())
        yield root.name

        # Walked with an explicit stack, as client paths may be arbitrarily deep
        pending = [(child, "", index == len(root.children) - 1) for index, child in enumerate(root.children)]
        pending.reverse()
        while pending:
            node, indent, is_last = pending.pop()
            yield f"{indent}{style.end if is_last else style.cont}{node.name}"
            child_indent = indent + (style.empty if is_last else style.vertical)
            children = node.children
            for index in reversed(range(len(children))):
                pending.append((children[index], child_indent, index == len(children) - 1))

    def get_tree_representation(self) -> str:
        """Get the complete indented representation of the inclusion tree."""
        return "\n".join(self.stream_tree_representation())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.include_param!r})"
