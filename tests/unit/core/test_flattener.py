from __future__ import annotations

"""
Unit tests for the Page Tree Flattener.

Verifies:
1. Depth-first, order-preserving traversal with contiguous indices.
2. Consistency between the entry list and the route index.
3. Section, hidden and duplicate route handling.
4. Memoization and invalidation of the flattened snapshot.
"""

import logging

import pytest

from docnav.core.flattener import DuplicateRoutePolicy, FlatDirectoryCache, flatten
from docnav.domain.models import PageNode


def _routes(flat):
    return [e.route for e in flat.entries]


def test_flatten_depth_first_order(simple_tree):
    flat = flatten(simple_tree)
    assert _routes(flat) == ["/a", "/b", "/b/c", "/d"]


def test_indices_match_positions(simple_tree):
    flat = flatten(simple_tree)
    assert [e.index for e in flat.entries] == list(range(4))


def test_route_index_consistent_with_list(simple_tree):
    entries, by_route = flatten(simple_tree)
    assert set(by_route) == {e.route for e in entries}
    for entry in entries:
        assert by_route[entry.route] is entry


def test_flatten_keeps_source_titles_and_descriptions():
    tree = [PageNode(route="/x", description="About x")]
    entry = flatten(tree).entries[0]
    assert entry.title is None
    assert entry.description == "About x"


def test_sibling_order_preserved_across_depths():
    tree = [
        PageNode(route="/z", children=(
            PageNode(route="/z/2", children=(PageNode(route="/z/2/a"),)),
            PageNode(route="/z/1"),
        )),
        PageNode(route="/a"),
    ]
    assert _routes(flatten(tree)) == ["/z", "/z/2", "/z/2/a", "/z/1", "/a"]


def test_empty_tree_yields_empty_result():
    entries, by_route = flatten([])
    assert entries == ()
    assert len(by_route) == 0
    assert flatten(None).entries == ()


def test_section_nodes_contribute_only_children(docs_tree_data):
    flat = flatten(docs_tree_data)
    assert _routes(flat) == [
        "/",
        "/getting-started",
        "/getting-started/install",
        "/guides",
        "/guides/untitled",
        "/guides/deploy",
    ]


def test_hidden_subtree_is_skipped():
    tree = [
        PageNode(route="/a"),
        PageNode(route="/secret", hidden=True, children=(PageNode(route="/secret/child"),)),
        PageNode(route="/b"),
    ]
    assert _routes(flatten(tree)) == ["/a", "/b"]


def test_flatten_accepts_mappings_and_objects():
    class Page:
        def __init__(self, route, children=()):
            self.route = route
            self.title = route.upper()
            self.children = children

    tree = [{"route": "/m", "children": [Page("/m/o")]}, Page("/p")]
    flat = flatten(tree)
    assert _routes(flat) == ["/m", "/m/o", "/p"]
    assert flat.get("/p").title == "/P"


def test_flatten_is_deterministic(simple_tree):
    assert flatten(simple_tree) == flatten(simple_tree)


def test_flatten_works_on_a_snapshot():
    children = [{"route": "/b/c"}]
    tree = [{"route": "/a"}, {"route": "/b", "children": children}]
    flat = flatten(tree)

    children.append({"route": "/b/late"})
    tree.append({"route": "/late"})

    assert _routes(flat) == ["/a", "/b", "/b/c"]


# -----------------------------------------------------------------------------
# Duplicate routes
# -----------------------------------------------------------------------------

@pytest.fixture
def duplicate_tree():
    return [
        PageNode(route="/a", title="first a"),
        PageNode(route="/b"),
        PageNode(route="/a", title="second a", children=(PageNode(route="/a/child"),)),
        PageNode(route="/c"),
    ]


def test_duplicate_first_wins_by_default(duplicate_tree, caplog):
    with caplog.at_level(logging.WARNING, logger="docnav.core.flattener"):
        flat = flatten(duplicate_tree)

    assert _routes(flat) == ["/a", "/b", "/a/child", "/c"]
    assert flat.get("/a").title == "first a"
    assert [e.index for e in flat.entries] == [0, 1, 2, 3]
    assert "Duplicate route '/a'" in caplog.text


def test_duplicate_last_wins(duplicate_tree, caplog):
    with caplog.at_level(logging.WARNING, logger="docnav.core.flattener"):
        flat = flatten(duplicate_tree, DuplicateRoutePolicy.LAST_WINS)

    assert _routes(flat) == ["/b", "/a", "/a/child", "/c"]
    assert flat.get("/a").title == "second a"
    assert flat.get("/a").index == 1
    assert "Duplicate route '/a'" in caplog.text


def test_policy_parse():
    assert DuplicateRoutePolicy.parse("LAST") is DuplicateRoutePolicy.LAST_WINS
    assert DuplicateRoutePolicy.parse(DuplicateRoutePolicy.FIRST_WINS) is DuplicateRoutePolicy.FIRST_WINS
    with pytest.raises(ValueError):
        DuplicateRoutePolicy.parse("random")


# -----------------------------------------------------------------------------
# Memoization
# -----------------------------------------------------------------------------

def test_cache_reuses_result_for_same_tree(simple_tree):
    cache = FlatDirectoryCache()
    first = cache.get(simple_tree)
    second = cache.get(simple_tree)

    assert first is second
    assert (cache.hits, cache.misses) == (1, 1)


def test_cache_recomputes_on_new_tree_or_version(simple_tree):
    cache = FlatDirectoryCache()
    first = cache.get(simple_tree, version=1)

    bumped = cache.get(simple_tree, version=2)
    other = cache.get(list(simple_tree), version=2)

    assert cache.misses == 3
    assert bumped is not first
    assert bumped == first == other


def test_cache_invalidate_forces_regeneration(simple_tree):
    cache = FlatDirectoryCache()
    cache.get(simple_tree)
    cache.invalidate()
    cache.get(simple_tree)
    assert cache.misses == 2
    assert cache.hits == 0


# -----------------------------------------------------------------------------
# Malformed and deep input
# -----------------------------------------------------------------------------

def test_malformed_fields_degrade_without_raising(caplog):
    tree = [
        {"route": "/a", "title": 42, "description": ["x"]},
        {"route": "/b", "children": {"route": "/b/lost"}},
        {"route": 7, "children": [{"route": "/orphan"}]},
        {"route": "/c"},
    ]
    with caplog.at_level(logging.WARNING, logger="docnav.infra.page_tree"):
        flat = flatten(tree)

    assert _routes(flat) == ["/a", "/b", "/orphan", "/c"]
    assert flat.get("/a").title is None
    assert flat.get("/a").description is None
    assert "Invalid field 'title'" in caplog.text
    assert "Invalid 'children'" in caplog.text


def test_non_bool_hidden_flag_does_not_hide_page(caplog):
    tree = [{"route": "/a", "hidden": "false"}, {"route": "/b", "hidden": 1}, {"route": "/c"}]
    with caplog.at_level(logging.WARNING, logger="docnav.infra.page_tree"):
        flat = flatten(tree)

    assert _routes(flat) == ["/a", "/b", "/c"]
    assert "Invalid field 'hidden'" in caplog.text


def test_single_mapping_instead_of_list_yields_empty_result():
    assert flatten({"route": "/a"}).entries == ()


def test_deep_page_node_chain():
    depth = 2500
    node = PageNode(route=f"/level/{depth - 1}")
    for level in range(depth - 2, -1, -1):
        node = PageNode(route=f"/level/{level}", children=(node,))

    flat = flatten([node, PageNode(route="/after")])

    assert len(flat.entries) == depth + 1
    assert flat.entries[0].route == "/level/0"
    assert flat.entries[depth - 1].route == f"/level/{depth - 1}"
    assert flat.entries[-1].route == "/after"
    assert flat.get("/after").index == depth


def test_deep_mapping_chain_keeps_sibling_order():
    depth = 2500
    root = {"route": "/d/0", "children": []}
    current = root
    for level in range(1, depth):
        child = {"route": f"/d/{level}", "children": []}
        current["children"].append(child)
        current = child
    root["children"].append({"route": "/d/sibling"})

    routes = _routes(flatten([root]))

    assert len(routes) == depth + 1
    assert routes[1] == "/d/1"
    assert routes[-1] == "/d/sibling"
