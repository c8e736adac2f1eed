from __future__ import annotations

"""
Namespace Tree Data Models.

Defines the Root and Node structures that back the schema tree. Dotted paths
such as ``client.as.organization.name`` are resolved into a chain of nodes,
creating every missing level on the way, while Root keeps a flat index of every
node keyed by its absolute path.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from schematree.domain.errors import InvalidPathError

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Node:
    """
    A single namespace entry within the tree.

    Nodes compare by identity: resolving the same path twice yields the very
    same object.

    Attributes:
        name: Last segment of the path, unique among siblings.
        path: Absolute dotted path from the tree root to this node.
        root: Owning Root, used only to register newly created children.
        children: Direct children keyed by name.
    """
    name: str
    path: str
    root: "Root" = field(repr=False)
    children: Dict[str, "Node"] = field(default_factory=dict, repr=False)

    @property
    def depth(self) -> int:
        """Number of segments in the absolute path."""
        return self.path.count(PATH_SEPARATOR) + 1

    def child(self, name: str) -> Node:
        """
        Resolve a direct child by name, creating it on first access.

        Args:
            name: A single path segment (never a dotted path).

        Returns:
            Node: The existing or newly registered child.

        Raises:
            InvalidPathError: If the segment is empty or contains a separator.
        """
        existing = self.children.get(name)
        if existing is not None:
            return existing

        _check_segment(name, self.path)

        node = Node(name=name, path=f"{self.path}{PATH_SEPARATOR}{name}", root=self.root)
        self.root._register(node)
        self.children[name] = node
        return node

    def list_children(self) -> Iterator[Node]:
        """
        Iterate the direct children in ascending name order.

        The child set is captured when this method is called; children added
        afterwards do not appear in the returned iterator.
        """
        return _sorted_snapshot(self.children)

    def walk(self) -> Iterator[Node]:
        """Depth-first pre-order traversal of every descendant."""
        for node in self.list_children():
            yield node
            yield from node.walk()


@dataclass
class Root:
    """
    Top level namespace of a schema tree.

    Attributes:
        top_level: Depth-1 nodes keyed by name.
        index: Every node in the tree keyed by absolute path.
    """
    top_level: Dict[str, Node] = field(default_factory=dict)
    index: Dict[str, Node] = field(default_factory=dict)

    def branch(self, path: str) -> Node:
        """
        Resolve a dotted path into a Node, creating all unknown levels.

        Passing ``client.as.organization.name`` performs the lookups
        ``branch("client").child("as").child("organization").child("name")``.

        Args:
            path: Non-empty dotted path.

        Returns:
            Node: The node addressed by the full path.

        Raises:
            InvalidPathError: If the path is empty or holds an empty segment.
        """
        if not path:
            raise InvalidPathError("cannot have an empty branch path", path)

        if PATH_SEPARATOR not in path:
            node = self.top_level.get(path)
            if node is not None:
                return node

            node = Node(name=path, path=path, root=self)
            self._register(node)
            self.top_level[path] = node
            return node

        segments = path.split(PATH_SEPARATOR)
        if not all(segments):
            raise InvalidPathError(f"empty segment in branch path '{path}'", path)

        node = self.branch(segments[0])
        for segment in segments[1:]:
            node = node.child(segment)
        return node

    def list_children(self) -> Iterator[Node]:
        """Iterate the top-level nodes in ascending name order."""
        return _sorted_snapshot(self.top_level)

    def walk(self) -> Iterator[Node]:
        """Depth-first pre-order traversal of the whole tree."""
        for node in self.list_children():
            yield node
            yield from node.walk()

    def get(self, path: str) -> Optional[Node]:
        """Look up a node by absolute path without creating anything."""
        return self.index.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self.index

    def __len__(self) -> int:
        return len(self.index)

    def _register(self, node: Node) -> None:
        self.index[node.path] = node
        logger.debug(f"Registered namespace node: {node.path}")


def new_root() -> Root:
    """Create an empty Root."""
    return Root()

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _check_segment(name: str, parent_path: str) -> None:
    """Reject segments that cannot name a single child."""
    if not name:
        raise InvalidPathError(f"empty child name under '{parent_path}'", name)
    if PATH_SEPARATOR in name:
        raise InvalidPathError(
            f"child name '{name}' under '{parent_path}' must not contain '{PATH_SEPARATOR}'",
            name,
        )


def _sorted_snapshot(nodes: Dict[str, Node]) -> Iterator[Node]:
    """Freeze the current entries in lexicographic key order."""
    ordered: List[Node] = [nodes[key] for key in sorted(nodes)]
    return iter(ordered)
