from __future__ import annotations

"""
Navigation View-Model Builder.

Translates a NavigationResult into the plain data drawn around a page:
a "back" link above the content and a "Continue Learning" section below
it. Generic titles are substituted here, never stored in FlatEntry.
"""

from typing import Dict, List, Optional

from docnav.core.navigator import Navigator
from docnav.domain.constants import DEFAULT_LABELS
from docnav.domain.models import (
    FlatDirectories,
    FlatEntry,
    NavigationCardLink,
    NavigationResult,
    PageNavigation,
)


def build_page_navigation(
        route: Optional[str],
        flat: FlatDirectories,
        navigator: Navigator,
        labels: Optional[Dict[str, str]] = None,
) -> PageNavigation:
    """
    Compute everything the presentation layer needs for one route.

    The neighbour lookup always runs; main navigation routes only get
    their controls suppressed.

    Args:
        route: Current route.
        flat: Flattened tree snapshot.
        navigator: Navigator holding the main navigation routes.
        labels: Label overrides (see DEFAULT_LABELS for the keys).

    Returns:
        PageNavigation: Plain data for rendering.
    """
    labels = {**DEFAULT_LABELS, **(labels or {})}
    result = navigator.resolve(route, flat)
    show = navigator.should_show_navigation(route)

    if not show:
        return PageNavigation(route=route or "", show_navigation=False, result=result)

    previous_link = None
    if result.previous is not None:
        previous_link = _card(result.previous, labels["previous"], labels["previous_fallback"])

    return PageNavigation(
        route=route or "",
        show_navigation=True,
        result=result,
        previous_link=previous_link,
        section_title=labels["section_title"],
        section_description=labels["section_description"],
        continue_learning=tuple(build_continue_learning_items(result, labels)),
    )


def build_continue_learning_items(
        result: NavigationResult,
        labels: Optional[Dict[str, str]] = None,
) -> List[NavigationCardLink]:
    """Cards for the bottom section: previous first, then next."""
    labels = {**DEFAULT_LABELS, **(labels or {})}
    items: List[NavigationCardLink] = []
    if result.previous is not None:
        items.append(_card(result.previous, labels["previous"], labels["previous_fallback"]))
    if result.next is not None:
        items.append(_card(result.next, labels["next"], labels["next_fallback"]))
    return items


def display_title(entry: FlatEntry, fallback: str) -> str:
    return entry.title or fallback


def _card(entry: FlatEntry, top_title: str, fallback: str) -> NavigationCardLink:
    return NavigationCardLink(
        top_title=top_title,
        title=display_title(entry, fallback),
        description=entry.description,
        href=entry.route,
    )
