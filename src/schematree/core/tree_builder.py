from __future__ import annotations

"""
Namespace Tree Builder.

Constructs a Root from collections of dotted paths (typically one per line in a
schema listing) and orchestrates rendering, optional log preview and
persistence of the result.
"""

import logging
import os
from typing import Iterable, List

from schematree.core.tree_renderer import render_tree
from schematree.domain.namespace import Root, new_root

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(paths: Iterable[str], *, skip_blank: bool = True) -> Root:
    """
    Resolve every dotted path into a fresh Root.

    Surrounding whitespace is stripped from each entry. With ``skip_blank``
    enabled, empty lines and ``#`` comments are ignored; otherwise they reach
    ``Root.branch`` untouched and an empty entry raises InvalidPathError.

    Args:
        paths: Iterable of dotted paths.
        skip_blank: Drop blank lines and comments before resolution.

    Returns:
        Root: The populated tree.
    """
    root = new_root()
    resolved = 0

    for raw in paths:
        path = raw.strip()
        if skip_blank and (not path or path.startswith(COMMENT_PREFIX)):
            continue
        root.branch(path)
        resolved += 1

    logger.debug(f"Resolved {resolved} paths into {len(root)} nodes.")
    return root


def read_paths(file_path: str) -> List[str]:
    """
    Read newline-separated dotted paths from a UTF-8 text file.

    Args:
        file_path: Source file.

    Returns:
        List[str]: Raw lines without trailing newlines.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def generate_namespace_tree(
        paths: Iterable[str],
        print_to_log: bool = False,
        save_path: str = "",
        *,
        skip_blank: bool = True,
) -> List[str]:
    """
    Build a tree from dotted paths and render it as text.

    Args:
        paths: Iterable of dotted paths.
        print_to_log: Whether to log the output to INFO.
        save_path: Optional file path to persist the rendering.
        skip_blank: Drop blank lines and comments before resolution.

    Returns:
        List[str]: Visual lines of the generated tree.
    """
    root = build_tree(paths, skip_blank=skip_blank)
    logger.info(f"Namespace tree built: {len(root.top_level)} top-level, {len(root)} total nodes")

    lines = render_tree(root)

    if print_to_log:
        logger.info("Tree Preview:\n" + "\n".join(lines))

    if save_path:
        save_tree_to_disk(save_path, lines)

    return lines


def save_tree_to_disk(save_path: str, lines: List[str]) -> bool:
    """
    Persist rendered lines to the filesystem.

    Returns:
        bool: True on success, False if the write failed (the failure is logged).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info(f"Tree saved to file: {save_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
        return False
