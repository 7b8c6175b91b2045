from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared page tree fixtures used across unit and integration tests.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from docnav.domain.models import PageNode  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_tree() -> List[PageNode]:
    """
    Return the canonical example tree.

    Structure:
    /a
    /b
      /b/c
    /d
    """
    return [
        PageNode(route="/a", title="A"),
        PageNode(route="/b", title="B", children=(PageNode(route="/b/c", title="C"),)),
        PageNode(route="/d", title="D"),
    ]


@pytest.fixture
def docs_tree_data() -> List[Dict[str, Any]]:
    """
    Return a raw (JSON-like) documentation tree with a section node,
    a hidden draft and an untitled page.
    """
    return [
        {"route": "/", "title": "Home"},
        {
            "title": "Getting Started",
            "children": [
                {"route": "/getting-started", "title": "Overview", "description": "Start here"},
                {"route": "/getting-started/install", "title": "Install"},
                {"route": "/getting-started/draft", "title": "Draft", "hidden": True},
            ],
        },
        {
            "route": "/guides",
            "frontMatter": {"title": "Guides", "description": "How-to guides"},
            "children": [
                {"route": "/guides/untitled"},
                {"route": "/guides/deploy", "name": "deploy"},
            ],
        },
    ]


@pytest.fixture
def docs_tree_file(tmp_path: Path, docs_tree_data: List[Dict[str, Any]]) -> Path:
    """Write docs_tree_data to a JSON file and return its path."""
    path = tmp_path / "pages.json"
    path.write_text(json.dumps({"pages": docs_tree_data}), encoding="utf-8")
    return path
