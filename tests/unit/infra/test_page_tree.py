from __future__ import annotations

"""
Unit tests for the Page Tree Source Adapter (in-memory inputs).

Verifies duck-typed coercion, Nextra-style aliases and type errors.
"""

import pytest

from docnav.domain.models import PageNode
from docnav.infra.page_tree import PageTreeError, coerce_page_node, snapshot_tree


def test_coerce_mapping_with_front_matter():
    node = coerce_page_node({
        "route": "/guides",
        "name": "guides",
        "frontMatter": {"title": "Guides", "description": "How-to"},
        "children": [{"route": "/guides/a", "name": "a"}],
    })

    assert node == PageNode(
        route="/guides",
        title="Guides",
        description="How-to",
        children=(PageNode(route="/guides/a", title="a"),),
    )


def test_explicit_title_beats_aliases():
    node = coerce_page_node({"route": "/x", "title": "X", "name": "x", "frontMatter": {"title": "FM"}})
    assert node.title == "X"


def test_blank_strings_become_none():
    node = coerce_page_node({"route": "/x", "title": "  ", "description": ""})
    assert node.title is None
    assert node.description is None


def test_snapshot_copies_mutable_children():
    children = [PageNode(route="/b/c")]
    original = PageNode(route="/b", children=children)  # type: ignore[arg-type]

    snap = snapshot_tree([original])
    children.append(PageNode(route="/b/late"))

    assert snap[0].children == (PageNode(route="/b/c"),)


def test_invalid_field_type_raises():
    with pytest.raises(PageTreeError):
        coerce_page_node({"route": 42})
    with pytest.raises(PageTreeError):
        coerce_page_node({"route": "/x", "children": "nope"})


def test_snapshot_rejects_single_mapping():
    with pytest.raises(PageTreeError):
        snapshot_tree({"route": "/x"})


def test_hidden_flag_must_be_bool():
    assert coerce_page_node({"route": "/x", "hidden": True}).hidden is True
    assert coerce_page_node({"route": "/x"}).hidden is False
    with pytest.raises(PageTreeError, match="'hidden'"):
        coerce_page_node({"route": "/x", "hidden": "false"})


def test_lenient_snapshot_replaces_bad_values():
    (node,) = snapshot_tree(
        [{"route": "/x", "title": 3, "hidden": "yes", "children": "nope"}],
        strict=False,
    )
    assert node == PageNode(route="/x")


def test_lenient_snapshot_of_single_mapping_is_empty():
    assert snapshot_tree({"route": "/x"}, strict=False) == ()


def test_deep_tree_coercion():
    depth = 3000
    data = {"route": "/0"}
    for level in range(1, depth):
        data = {"route": f"/{level}", "children": [data]}

    node = coerce_page_node(data)

    levels = 1
    while node.children:
        (node,) = node.children
        levels += 1
    assert levels == depth
    assert node.route == "/0"
