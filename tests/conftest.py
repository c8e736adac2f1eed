from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Sets up the testing environment:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for trees and path listings used across tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from schematree.domain.namespace import Root, new_root  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def root() -> Root:
    """Return an empty tree."""
    return new_root()


@pytest.fixture
def ecs_paths() -> List[str]:
    """
    Return a small ECS-like field listing.

    Includes a repeated path and shared prefixes on purpose.
    """
    return [
        "client.as.organization.name",
        "client.as.number",
        "client.address",
        "agent.name",
        "@timestamp",
        "client.as.organization.name",
        "agent.version",
    ]
