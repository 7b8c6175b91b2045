from __future__ import annotations

"""
Unit tests for the Navigation View-Model Builder.

Verifies:
1. Title fallbacks are applied to cards, never to stored entries.
2. Main navigation routes suppress every control.
3. Label overrides (localization) flow into the cards.
"""

from docnav.core.flattener import flatten
from docnav.core.navigator import Navigator
from docnav.core.presenter import build_continue_learning_items, build_page_navigation
from docnav.domain.models import FlatEntry, NavigationResult


def test_middle_page_gets_back_link_and_two_cards(docs_tree_data):
    flat = flatten(docs_tree_data)
    page_nav = build_page_navigation("/getting-started/install", flat, Navigator())

    assert page_nav.show_navigation is True
    assert page_nav.previous_link.title == "Overview"
    assert page_nav.previous_link.href == "/getting-started"
    assert page_nav.section_title == "Continue Learning"

    prev_card, next_card = page_nav.continue_learning
    assert (prev_card.top_title, prev_card.title, prev_card.description) == ("Previous", "Overview", "Start here")
    assert (next_card.top_title, next_card.title, next_card.href) == ("Next", "Guides", "/guides")


def test_untitled_neighbours_use_generic_labels(docs_tree_data):
    flat = flatten(docs_tree_data)

    before = build_page_navigation("/guides/deploy", flat, Navigator())
    after = build_page_navigation("/guides", flat, Navigator())

    assert before.previous_link.title == "Previous Page"
    assert after.continue_learning[-1].title == "Next Page"
    assert flat.get("/guides/untitled").title is None


def test_main_navigation_route_is_suppressed(docs_tree_data):
    flat = flatten(docs_tree_data)
    page_nav = build_page_navigation("/", flat, Navigator(main_nav_routes=["/"]))

    assert page_nav.show_navigation is False
    assert page_nav.result.next.route == "/getting-started"
    assert page_nav.previous_link is None
    assert page_nav.continue_learning == ()
    assert page_nav.has_continue_learning is False


def test_unknown_route_has_no_controls(docs_tree_data):
    flat = flatten(docs_tree_data)
    page_nav = build_page_navigation("/nowhere", flat, Navigator())

    assert page_nav.show_navigation is True
    assert page_nav.result.is_empty
    assert page_nav.previous_link is None
    assert page_nav.has_continue_learning is False


def test_label_overrides():
    entry = FlatEntry(route="/x", title=None, description=None, index=0)
    labels = {"next": "Siguiente", "next_fallback": "Página siguiente"}

    (card,) = build_continue_learning_items(NavigationResult(next=entry), labels)

    assert card.top_title == "Siguiente"
    assert card.title == "Página siguiente"
