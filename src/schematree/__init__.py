from __future__ import annotations

"""
schematree: hierarchical namespace tree built from dotted schema paths.
"""

from schematree.core.tree_builder import build_tree, generate_namespace_tree, read_paths
from schematree.core.tree_renderer import render_tree, tree_to_dict
from schematree.domain.errors import InvalidPathError, SchemaTreeError
from schematree.domain.namespace import Node, Root, new_root

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Root",
    "new_root",
    "build_tree",
    "read_paths",
    "generate_namespace_tree",
    "render_tree",
    "tree_to_dict",
    "InvalidPathError",
    "SchemaTreeError",
]
