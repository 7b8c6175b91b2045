from __future__ import annotations

"""
Page Tree Flattener.

Walks a page hierarchy depth-first, in authored order, and produces the
ordered sequence of navigable pages plus a route lookup built in the
same pass. Section nodes (no route) contribute only their children;
hidden nodes are skipped together with their subtree.
"""

import enum
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from docnav.domain.constants import DUPLICATE_POLICY_FIRST, DUPLICATE_POLICY_LAST
from docnav.domain.models import (
    EMPTY_FLAT_DIRECTORIES,
    FlatDirectories,
    FlatEntry,
    PageNode,
)
from docnav.infra.page_tree import snapshot_tree

logger = logging.getLogger(__name__)


class DuplicateRoutePolicy(enum.Enum):
    """
    Resolution applied when the same route appears more than once.

    FIRST_WINS keeps the earliest occurrence in reading order.
    LAST_WINS keeps only the latest occurrence, at its own position.
    """
    FIRST_WINS = DUPLICATE_POLICY_FIRST
    LAST_WINS = DUPLICATE_POLICY_LAST

    @classmethod
    def parse(cls, value: Any) -> "DuplicateRoutePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown duplicate route policy '{value}' (expected one of: {allowed}).") from None


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten(
        tree: Optional[Iterable[Any]],
        policy: DuplicateRoutePolicy = DuplicateRoutePolicy.FIRST_WINS,
) -> FlatDirectories:
    """
    Flatten a page tree into reading order.

    The input is snapshotted first, so later mutations of the caller's
    structure cannot leak into the result. Malformed nodes never raise:
    each defect is logged and replaced by a neutral value.

    Args:
        tree: Top-level page descriptors (PageNode, mappings or objects).
        policy: Duplicate route resolution.

    Returns:
        FlatDirectories: (entries, by_route); entries[i].index == i and
        by_route[e.route] is e for every entry.
    """
    policy = DuplicateRoutePolicy.parse(policy)
    snapshot = snapshot_tree(tree, strict=False)
    if not snapshot:
        return EMPTY_FLAT_DIRECTORIES

    routed = list(_walk(snapshot))
    if policy is DuplicateRoutePolicy.LAST_WINS:
        routed = _keep_last(routed)

    entries: List[FlatEntry] = []
    by_route: Dict[str, FlatEntry] = {}
    for node in routed:
        if node.route in by_route:
            _report_duplicate(node.route, by_route[node.route].index)
            continue
        entry = FlatEntry(
            route=node.route,
            title=node.title,
            description=node.description,
            index=len(entries),
        )
        entries.append(entry)
        by_route[entry.route] = entry

    logger.debug(f"Flattened page tree into {len(entries)} entries")
    return FlatDirectories(entries=tuple(entries), by_route=MappingProxyType(by_route))


class FlatDirectoryCache:
    """
    Single-slot memo of the last flattened tree snapshot.

    The key is the identity of the tree object plus an optional version
    stamp supplied by the caller. A strong reference to the tree is kept
    so its id cannot be recycled while cached.
    """

    def __init__(self, policy: DuplicateRoutePolicy = DuplicateRoutePolicy.FIRST_WINS):
        self.policy = DuplicateRoutePolicy.parse(policy)
        self._tree: Any = None
        self._version: Any = None
        self._value: Optional[FlatDirectories] = None
        self.hits = 0
        self.misses = 0

    def get(self, tree: Optional[Iterable[Any]], version: Any = None) -> FlatDirectories:
        """
        Return the flattened form of the tree, recomputing only on key change.

        Args:
            tree: The current tree snapshot.
            version: Optional snapshot version; a new value forces recomputation
                even when the same tree object is passed.
        """
        if self._value is not None and tree is self._tree and version == self._version:
            self.hits += 1
            return self._value

        self.misses += 1
        logger.debug("Page tree changed, regenerating flat directories")
        value = flatten(tree, self.policy)
        self._tree, self._version, self._value = tree, version, value
        return value

    def invalidate(self) -> None:
        """Drop the cached snapshot."""
        self._tree = None
        self._version = None
        self._value = None


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk(nodes: Tuple[PageNode, ...]) -> Iterator[PageNode]:
    """Yield visible routed nodes depth-first, parents before children."""
    stack: List[Iterator[PageNode]] = [iter(nodes)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        if node.hidden:
            logger.debug(f"Skipping hidden page subtree: {node.route or node.title or '<section>'}")
            continue
        if node.is_routed:
            yield node
        if node.children:
            stack.append(iter(node.children))


def _keep_last(routed: List[PageNode]) -> List[PageNode]:
    """Drop every occurrence of a route except the last one."""
    last_position = {node.route: pos for pos, node in enumerate(routed)}
    kept: List[PageNode] = []
    for pos, node in enumerate(routed):
        if last_position[node.route] != pos:
            _report_duplicate(node.route, None)
            continue
        kept.append(node)
    return kept


def _report_duplicate(route: str, kept_index: Optional[int]) -> None:
    if kept_index is None:
        logger.warning(f"Duplicate route '{route}' in page tree; a later occurrence wins.")
    else:
        logger.warning(f"Duplicate route '{route}' in page tree; keeping entry #{kept_index}.")
