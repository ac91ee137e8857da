"""Unit tests for the Leaf and Branch node types."""

import dataclasses

import pytest

from includetree.include_tree.include_node import Branch, Leaf, to_anytree


def test_leaf_model_include():
    assert Leaf("foo").to_model_include() == "foo"


def test_branch_model_include_nested():
    branch = Branch("foo", (Branch("bar", (Leaf("baz"), Leaf("bat"))), Leaf("qux")))
    assert branch.to_model_include() == {"foo": [{"bar": ["baz", "bat"]}, "qux"]}


def test_branch_defaults_to_no_children():
    assert Branch("foo").children == ()
    assert Branch("foo").to_model_include() == {"foo": []}


def test_nodes_are_immutable():
    leaf = Leaf("foo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        leaf.name = "bar"


def test_nodes_compare_structurally():
    assert Branch("foo", (Leaf("bar"),)) == Branch("foo", (Leaf("bar"),))
    assert Leaf("foo") != Branch("foo")


def test_to_anytree_mirrors_structure():
    """The anytree mirror keeps names, nesting and order under a synthetic root."""
    root = to_anytree((Branch("foo", (Leaf("bar"), Leaf("baz"))), Leaf("qux")), root_name="root")
    assert root.name == "root"
    assert [child.name for child in root.children] == ["foo", "qux"]
    foo = root.children[0]
    assert [child.name for child in foo.children] == ["bar", "baz"]
    assert root.children[1].is_leaf


def test_to_anytree_empty():
    root = to_anytree(())
    assert root.name == "include"
    assert root.children == ()


def test_deep_chain_converts_without_recursion():
    depth = 5000
    node = Leaf("a")
    for _ in range(depth - 1):
        node = Branch("a", (node,))

    model = node.to_model_include()
    levels = 1
    while isinstance(model, dict):
        (model,) = model["a"]
        levels += 1
    assert model == "a"
    assert levels == depth

    mirrored = to_anytree([node])
    levels = 0
    while mirrored.children:
        (mirrored,) = mirrored.children
        levels += 1
    assert levels == depth
