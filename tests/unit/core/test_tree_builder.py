from __future__ import annotations

"""
Unit tests for the Namespace Tree Builder.

Verifies bulk construction from path listings, blank/comment handling,
file reading and persistence of rendered trees.
"""

from pathlib import Path

import pytest

from schematree.core.tree_builder import (
    build_tree,
    generate_namespace_tree,
    read_paths,
    save_tree_to_disk,
)
from schematree.domain.errors import InvalidPathError


def test_build_tree_resolves_every_path(ecs_paths) -> None:
    root = build_tree(ecs_paths)

    assert sorted(root.top_level) == ["@timestamp", "agent", "client"]
    assert "client.as.organization.name" in root
    assert len(root) == 10


def test_build_tree_strips_and_skips_blank_and_comments() -> None:
    root = build_tree(["  host.name  ", "", "   ", "# a comment", "host.ip\n"])

    assert sorted(root.index) == ["host", "host.ip", "host.name"]


def test_build_tree_keep_blank_raises_on_empty_entry() -> None:
    with pytest.raises(InvalidPathError):
        build_tree(["host.name", ""], skip_blank=False)


def test_build_tree_propagates_invalid_segments() -> None:
    with pytest.raises(InvalidPathError):
        build_tree(["host..name"])


def test_read_paths(tmp_path: Path) -> None:
    listing = tmp_path / "fields.txt"
    listing.write_text("a.b\n\nc\n", encoding="utf-8")

    assert read_paths(str(listing)) == ["a.b", "", "c"]


def test_generate_namespace_tree_output_format() -> None:
    lines = generate_namespace_tree(["a.b.c", "a.b.d", "z"])

    assert lines == [
        "├── a",
        "│   └── b",
        "│       ├── c",
        "│       └── d",
        "└── z",
    ]


def test_generate_namespace_tree_save_file(tmp_path: Path) -> None:
    save_file = tmp_path / "out" / "tree.txt"

    lines = generate_namespace_tree(["host.name"], save_path=str(save_file))

    assert save_file.exists()
    assert save_file.read_text(encoding="utf-8") == "\n".join(lines) + "\n"


def test_generate_namespace_tree_print_to_log(caplog) -> None:
    with caplog.at_level("INFO", logger="schematree.core.tree_builder"):
        generate_namespace_tree(["host.name"], print_to_log=True)

    assert "Tree Preview" in caplog.text
    assert "└── name" in caplog.text


def test_save_tree_to_disk_failure_is_logged(tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir", encoding="utf-8")

    ok = save_tree_to_disk(str(blocker / "tree.txt"), ["x"])

    assert ok is False
    assert "Failed to save tree" in caplog.text


def test_generate_namespace_tree_skip_blank_is_keyword_only(caplog) -> None:
    with caplog.at_level("INFO", logger="schematree.core.tree_builder"):
        lines = generate_namespace_tree(["a", ""], True)

    assert lines == ["└── a"]
    assert "Tree Preview" in caplog.text

    with pytest.raises(TypeError):
        generate_namespace_tree(["a"], False, "", False)
