"""Node types making up an inclusion tree."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from anytree import Node

from includetree.types import ModelInclude


@dataclass(frozen=True)
class Leaf:
    """A relation to include with no further nesting.

    Example:
        >>> Leaf("author").to_model_include()
        'author'
    """

    name: str

    def to_model_include(self) -> ModelInclude:
        return self.name


@dataclass(frozen=True)
class Branch:
    """A relation to include together with nested relations of its own.

    Attributes:
        name (str): The relation name.
        children (tuple[IncludeNode, ...]): Nested nodes in first-seen order. Names are
            unique among siblings.

    Example:
        >>> branch = Branch("comments", (Leaf("author"), Branch("replies", (Leaf("author"),))))
        >>> branch.to_model_include()
        {'comments': ['author', {'replies': ['author']}]}
    """

    name: str
    children: Tuple["IncludeNode", ...] = ()

    def to_model_include(self) -> ModelInclude:
        nested: List[ModelInclude] = []
        result = {self.name: nested}
        pending = [(self.children, nested)]
        while pending:
            children, target = pending.pop()
            for child in children:
                if isinstance(child, Branch):
                    grandchildren: List[ModelInclude] = []
                    target.append({child.name: grandchildren})
                    pending.append((child.children, grandchildren))
                else:
                    target.append(child.name)
        return result


IncludeNode = Union[Leaf, Branch]


def to_anytree(nodes: Sequence[IncludeNode], root_name: str = "include") -> Node:
    """Mirror an inclusion tree as anytree nodes under a synthetic root.

    Args:
        nodes: Top-level nodes of the inclusion tree.
        root_name: Name given to the synthetic root node.

    Returns:
        The root anytree node.

    Example:
        >>> root = to_anytree((Branch("foo", (Leaf("bar"),)), Leaf("baz")))
        >>> [node.name for node in root.descendants]
        ['foo', 'bar', 'baz']
    """
    # Pre-order listing of (node, position of its parent in the listing, -1 at the top)
    listing: List[Tuple[IncludeNode, int]] = []
    pending = [(node, -1) for node in reversed(nodes)]
    while pending:
        node, parent_position = pending.pop()
        listing.append((node, parent_position))
        if isinstance(node, Branch):
            position = len(listing) - 1
            pending.extend((child, position) for child in reversed(node.children))

    # Built bottom-up, so attaching children never walks a long chain of ancestors
    mirrored_children: List[List[Node]] = [[] for _ in listing]
    top: List[Node] = []
    for position in reversed(range(len(listing))):
        node, parent_position = listing[position]
        mirrored = Node(node.name, children=mirrored_children[position][::-1])
        (mirrored_children[parent_position] if parent_position >= 0 else top).append(mirrored)
    return Node(root_name, children=top[::-1])
