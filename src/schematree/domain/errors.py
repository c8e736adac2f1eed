from __future__ import annotations

"""
Namespace Tree Error Taxonomy.

The tree has a single failure mode: a caller handing it a path that can never
name a node. That is a programmer error, so it is raised and never absorbed by
the tree itself.
"""


class SchemaTreeError(Exception):
    """Base class for every error raised by schematree."""


class InvalidPathError(SchemaTreeError):
    """
    Fatal precondition violation on a dotted path or path segment.

    Raised before any node or index entry is created, so the tree is left
    exactly as it was.

    Attributes:
        path: The offending path (or segment) as received.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
