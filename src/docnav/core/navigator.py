from __future__ import annotations

"""
Prev/Next Navigator.

Resolves the immediate neighbours of the current route in a flattened
page sequence and decides whether pagination controls should be shown
at all. Both operations are pure lookups over already-flattened data.
"""

import logging
from typing import Any, FrozenSet, Iterable, Optional

from docnav.core.flattener import DuplicateRoutePolicy, FlatDirectoryCache
from docnav.domain.constants import DEFAULT_MAIN_NAV_ROUTES
from docnav.domain.models import (
    EMPTY_NAVIGATION,
    FlatDirectories,
    FlatDirectoryList,
    NavigationResult,
    RouteIndex,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API (FUNCTIONAL)
# -----------------------------------------------------------------------------

def resolve(
        current_route: Optional[str],
        flat: FlatDirectoryList,
        index: RouteIndex,
) -> NavigationResult:
    """
    Find the pages before and after the current route.

    A route that is not part of the index is a normal state (e.g. a page
    outside the tracked tree) and yields an empty result.

    Args:
        current_route: Route of the page being viewed.
        flat: Entries in reading order.
        index: Route lookup derived from the same snapshot.

    Returns:
        NavigationResult: Neighbours, without wraparound.
    """
    if not current_route:
        return EMPTY_NAVIGATION

    current = index.get(current_route)
    if current is None:
        logger.debug(f"Route '{current_route}' is not in the page tree")
        return EMPTY_NAVIGATION

    i = current.index
    return NavigationResult(
        previous=flat[i - 1] if i > 0 else None,
        next=flat[i + 1] if i + 1 < len(flat) else None,
    )


def should_show_navigation(route: Optional[str], main_nav_routes: Iterable[str]) -> bool:
    """
    Return False for main navigation (hub/landing) routes.

    Args:
        route: Current route.
        main_nav_routes: Routes that never get prev/next controls. A single
            route string counts as one route.
    """
    return route not in _route_set(main_nav_routes)


# -----------------------------------------------------------------------------
# CONFIGURED NAVIGATOR
# -----------------------------------------------------------------------------

class Navigator:
    """
    Navigator bound to one set of main navigation routes.

    Holds a FlatDirectoryCache so repeated lookups against the same tree
    snapshot flatten it only once.
    """

    def __init__(
            self,
            main_nav_routes: Optional[Iterable[str]] = None,
            policy: Any = DuplicateRoutePolicy.FIRST_WINS,
    ):
        if main_nav_routes is None:
            main_nav_routes = DEFAULT_MAIN_NAV_ROUTES
        self.main_nav_routes: FrozenSet[str] = _route_set(main_nav_routes)
        self.cache = FlatDirectoryCache(policy)

    def should_show_navigation(self, route: Optional[str]) -> bool:
        return route not in self.main_nav_routes

    def directories(self, tree: Any, version: Any = None) -> FlatDirectories:
        """Flattened form of the tree, memoized per snapshot."""
        return self.cache.get(tree, version)

    def resolve(self, route: Optional[str], flat: FlatDirectories) -> NavigationResult:
        return resolve(route, flat.entries, flat.by_route)

    def resolve_in_tree(self, route: Optional[str], tree: Any, version: Any = None) -> NavigationResult:
        """Flatten (or reuse the cached flattening of) tree and resolve route in it."""
        return self.resolve(route, self.directories(tree, version))

    @classmethod
    def from_config(cls, config: dict) -> "Navigator":
        """Build a navigator from a validated configuration dictionary."""
        return cls(
            main_nav_routes=config.get("main_nav_routes", DEFAULT_MAIN_NAV_ROUTES),
            policy=config.get("duplicate_policy", DuplicateRoutePolicy.FIRST_WINS),
        )


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _route_set(routes: Iterable[str]) -> FrozenSet[str]:
    """Normalize main navigation routes; a bare string is one route, not characters."""
    if isinstance(routes, str):
        return frozenset([routes])
    return frozenset(routes)
