from __future__ import annotations

"""
docnav: flat directory navigation for documentation sites.

Flattens a hierarchical page tree into reading order and resolves the
previous/next neighbours of the page being viewed.
"""

from docnav.core.flattener import DuplicateRoutePolicy, FlatDirectoryCache, flatten
from docnav.core.navigator import Navigator, resolve, should_show_navigation
from docnav.core.presenter import build_continue_learning_items, build_page_navigation
from docnav.domain.models import (
    FlatDirectories,
    FlatEntry,
    NavigationCardLink,
    NavigationResult,
    PageNavigation,
    PageNode,
)
from docnav.infra.page_tree import PageTreeError, coerce_page_node, load_page_tree, snapshot_tree

__version__ = "1.0.0"

__all__ = [
    "DuplicateRoutePolicy",
    "FlatDirectories",
    "FlatDirectoryCache",
    "FlatEntry",
    "NavigationCardLink",
    "NavigationResult",
    "Navigator",
    "PageNavigation",
    "PageNode",
    "PageTreeError",
    "build_continue_learning_items",
    "build_page_navigation",
    "coerce_page_node",
    "flatten",
    "load_page_tree",
    "resolve",
    "should_show_navigation",
    "snapshot_tree",
]
