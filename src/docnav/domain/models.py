from __future__ import annotations

"""
Navigation Domain Data Models.

Provides the immutable structures shared by the flattener, the navigator
and the presentation view-model. A page tree snapshot is described by
PageNode instances; everything else is derived from it.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

# -----------------------------------------------------------------------------
# SOURCE TREE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PageNode:
    """
    Represents one page or section in the authored documentation hierarchy.

    A node without a route is a section container: it is never navigable
    itself, but its children are.

    Attributes:
        route: Unique path identifying the page (empty for sections).
        title: Display title, if the author provided one.
        description: Optional short summary of the page.
        children: Ordered child nodes.
        hidden: Excludes the node and its subtree from pagination.
    """
    route: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    children: Tuple["PageNode", ...] = ()
    hidden: bool = False

    @property
    def is_routed(self) -> bool:
        return bool(self.route)


# -----------------------------------------------------------------------------
# FLATTENED SEQUENCE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlatEntry:
    """
    One navigable page in reading order.

    Attributes:
        route: Page route.
        title: Source title (no fallback applied).
        description: Source description.
        index: 0-based position in the flattened sequence.
    """
    route: str
    title: Optional[str]
    description: Optional[str]
    index: int


# Ordered entries and the route lookup derived from them
FlatDirectoryList = Tuple[FlatEntry, ...]
RouteIndex = Mapping[str, FlatEntry]


class FlatDirectories(NamedTuple):
    """Result of flattening one tree snapshot: (entries, by_route)."""
    entries: FlatDirectoryList
    by_route: RouteIndex

    def get(self, route: str) -> Optional[FlatEntry]:
        return self.by_route.get(route)


EMPTY_FLAT_DIRECTORIES = FlatDirectories(entries=(), by_route=MappingProxyType({}))


# -----------------------------------------------------------------------------
# NAVIGATION RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavigationResult:
    """
    Immediate neighbours of the current page.

    Attributes:
        previous: Preceding entry, or None on the first page.
        next: Following entry, or None on the last page.
    """
    previous: Optional[FlatEntry] = None
    next: Optional[FlatEntry] = None

    @property
    def is_empty(self) -> bool:
        return self.previous is None and self.next is None


EMPTY_NAVIGATION = NavigationResult()


@dataclass(frozen=True)
class NavigationCardLink:
    """
    Plain-data description of one pagination card.

    Attributes:
        top_title: Small caption above the title ("Previous" / "Next").
        title: Page title, with the generic fallback already applied.
        description: Page description, if any.
        href: Target route.
    """
    top_title: str
    title: str
    description: Optional[str]
    href: str


@dataclass(frozen=True)
class PageNavigation:
    """
    Everything the presentation layer needs to draw prev/next controls.

    Attributes:
        route: The route the controls were computed for.
        show_navigation: False for main navigation routes.
        result: Raw neighbour lookup, computed even when hidden.
        previous_link: Top "back" link, when a previous page exists and is shown.
        section_title: Heading of the bottom section.
        section_description: Sub-heading of the bottom section.
        continue_learning: Cards for the bottom section (may be empty).
    """
    route: str
    show_navigation: bool
    result: NavigationResult
    previous_link: Optional[NavigationCardLink] = None
    section_title: str = ""
    section_description: str = ""
    continue_learning: Tuple[NavigationCardLink, ...] = ()

    @property
    def has_continue_learning(self) -> bool:
        return self.show_navigation and bool(self.continue_learning)
