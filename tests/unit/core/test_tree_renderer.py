from __future__ import annotations

"""
Unit tests for the Namespace Tree Renderer.
"""

from schematree.core.tree_renderer import render_tree, tree_to_dict
from schematree.domain.namespace import Root


def test_render_empty_tree(root: Root) -> None:
    assert render_tree(root) == []
    assert tree_to_dict(root) == {}


def test_render_tree_connectors(root: Root) -> None:
    for p in ["client.as.number", "client.address", "agent.name"]:
        root.branch(p)

    assert render_tree(root) == [
        "├── agent",
        "│   └── name",
        "└── client",
        "    ├── address",
        "    └── as",
        "        └── number",
    ]


def test_tree_to_dict_nested_and_ordered(root: Root) -> None:
    root.branch("z.b")
    root.branch("z.a")
    root.branch("m")

    result = tree_to_dict(root)

    assert result == {"m": {}, "z": {"a": {}, "b": {}}}
    assert list(result) == ["m", "z"]
    assert list(result["z"]) == ["a", "b"]
