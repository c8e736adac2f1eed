from __future__ import annotations

"""
Namespace Tree Renderer.

Converts a Root into visual ASCII lines or a nested mapping suitable for JSON
serialization. Sibling order always follows the tree's own lexicographic
enumeration.
"""

from typing import Any, Dict, Iterator, List

from schematree.domain.namespace import Node, Root

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Root) -> List[str]:
    """
    Transform the tree into a list of ASCII lines.

    Uses standard connectors (├──, └──) and indents nested levels with
    vertical guides.

    Args:
        root: Tree to render.

    Returns:
        List[str]: One line per node, in depth-first order.
    """
    lines: List[str] = []
    _render_level(root.list_children(), lines, prefix="")
    return lines


def tree_to_dict(root: Root) -> Dict[str, Any]:
    """
    Convert the tree into nested dictionaries keyed by node name.

    Leaves map to an empty dictionary.
    """
    return {node.name: _node_to_dict(node) for node in root.list_children()}

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(nodes: Iterator[Node], lines: List[str], prefix: str) -> None:
    """Recursively append one level of siblings to the accumulator."""
    entries = list(nodes)
    total = len(entries)

    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{node.name}")

        new_prefix = prefix + ("    " if is_last else "│   ")
        _render_level(node.list_children(), lines, prefix=new_prefix)


def _node_to_dict(node: Node) -> Dict[str, Any]:
    return {child.name: _node_to_dict(child) for child in node.list_children()}
