"""Merging of resource paths into an inclusion tree.

Paths are folded one at a time into an immutable tuple of sibling nodes. A path
whose first segment names an existing sibling is merged into that sibling, which
keeps its position; otherwise a new node chain is appended. A Leaf receiving
deeper segments is upgraded to a Branch in place, and a bare name never demotes
an existing Branch.

Paths come from clients and may be arbitrarily deep, so nothing here recurses.
"""

from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from includetree.include_tree.include_node import Branch, IncludeNode, Leaf

InclusionTree = Tuple[IncludeNode, ...]


def build_node(segments: Sequence[str]) -> IncludeNode:
    """Build the node chain for a path that shares no prefix with existing nodes.

    Every segment is materialized; there is no depth cap.

    Example:
        >>> build_node(["foo"])
        Leaf(name='foo')
        >>> build_node(["foo", "bar"])
        Branch(name='foo', children=(Leaf(name='bar'),))
    """
    node: IncludeNode = Leaf(segments[-1])
    for name in reversed(segments[:-1]):
        node = Branch(name, (node,))
    return node


def find_sibling(nodes: InclusionTree, name: str) -> Optional[int]:
    """Get the position of the sibling called name, or None."""
    return next((index for index, node in enumerate(nodes) if node.name == name), None)


def merge_path(nodes: InclusionTree, segments: Sequence[str]) -> InclusionTree:
    """Merge one path into a sequence of sibling nodes.

    Args:
        nodes: The current siblings.
        segments: The non-empty path to merge, as segment names.

    Returns:
        A new tuple of siblings, or nodes itself when the path adds nothing. The
        input tuple is never modified.

    Example:
        >>> tree = merge_path((), ["foo", "bar"])
        >>> merge_path(tree, ["foo", "baz"])
        (Branch(name='foo', children=(Leaf(name='bar'), Leaf(name='baz'))),)
    """
    # Siblings and matched position at each level walked down
    trail: List[Tuple[InclusionTree, int]] = []
    siblings = nodes
    for depth, name in enumerate(segments):
        index = find_sibling(siblings, name)
        if index is None:
            merged = siblings + (build_node(segments[depth:]),)
            break
        if depth == len(segments) - 1:
            return nodes
        trail.append((siblings, index))
        match = siblings[index]
        siblings = match.children if isinstance(match, Branch) else ()

    for siblings, index in reversed(trail):
        upgraded = Branch(siblings[index].name, merged)
        merged = siblings[:index] + (upgraded,) + siblings[index + 1 :]  # noqa: E203
    return merged


def build_inclusion_tree(paths: Iterable[Sequence[str]]) -> InclusionTree:
    """Fold paths, in order, into a single inclusion tree.

    Example:
        >>> tree = build_inclusion_tree([["foo", "bar", "baz"], ["foo"], ["foo", "bar", "bat"], ["bar"]])
        >>> [node.to_model_include() for node in tree]
        [{'foo': [{'bar': ['baz', 'bat']}]}, 'bar']
    """
    empty: InclusionTree = ()
    return reduce(merge_path, paths, empty)
