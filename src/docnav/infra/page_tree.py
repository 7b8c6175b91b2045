from __future__ import annotations

"""
Page Tree Source Adapter.

Turns whatever the documentation system hands over (JSON documents,
plain mappings or page-metadata objects) into an immutable snapshot of
PageNode instances. Only the minimal shape {route, title?, description?,
children?} is required; Nextra-style 'name' and 'frontMatter' keys are
understood as fallbacks.
"""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from docnav.domain.models import PageNode

logger = logging.getLogger(__name__)


class PageTreeError(ValueError):
    """Raised when a page tree document cannot be read or has the wrong shape."""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_page_tree(path: str) -> Tuple[PageNode, ...]:
    """
    Read a page tree from a JSON file.

    The document is either a list of nodes or an object with a 'pages' list.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Tuple[PageNode, ...]: Top-level nodes in authored order.

    Raises:
        PageTreeError: If the file is missing, unreadable or malformed.
    """
    if not os.path.isfile(path):
        raise PageTreeError(f"Page tree file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise PageTreeError(f"Cannot read page tree '{path}': {e}") from e

    if isinstance(data, dict):
        data = data.get("pages")
    if not isinstance(data, list):
        raise PageTreeError(
            f"Page tree '{path}' must be a list of pages or an object with a 'pages' list."
        )

    tree = snapshot_tree(data)
    logger.info(f"Loaded page tree from {path} ({len(tree)} top-level nodes)")
    return tree


def snapshot_tree(nodes: Optional[Iterable[Any]], *, strict: bool = True) -> Tuple[PageNode, ...]:
    """
    Build an immutable copy of a (possibly mutable) page hierarchy.

    In strict mode malformed input raises PageTreeError. Otherwise each
    defect is logged at WARNING and replaced by a neutral value: bad text
    fields become None, bad 'hidden' flags become False and bad 'children'
    become empty.

    Args:
        nodes: Top-level nodes; PageNode, mappings or attribute objects.
        strict: Raise instead of degrading.

    Returns:
        Tuple[PageNode, ...]: Frozen snapshot safe to flatten.
    """
    if nodes is None:
        return ()
    if isinstance(nodes, (str, bytes, Mapping)):
        _reject(f"Expected a sequence of pages, received {type(nodes).__name__}.", strict)
        return ()
    return _build_nodes(nodes, strict)


def coerce_page_node(obj: Any, *, strict: bool = True) -> PageNode:
    """
    Convert a duck-typed page descriptor into a PageNode.

    Args:
        obj: A PageNode, a mapping, or an object exposing route/title/
            description/children/hidden attributes.
        strict: Raise instead of degrading (see snapshot_tree).

    Returns:
        PageNode: Frozen node with all descendants converted.

    Raises:
        PageTreeError: In strict mode, if a field has the wrong type.
    """
    return _build_nodes([obj], strict)[0]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

_DONE = object()


def _build_nodes(raw_nodes: Iterable[Any], strict: bool) -> Tuple[PageNode, ...]:
    """
    Convert a forest of descriptors with an explicit stack.

    Each frame holds the fields of the node being built, an iterator over
    its raw children and the children converted so far; a node is
    created once all its children are done, so authored order is kept
    at any depth.
    """
    top: List[PageNode] = []
    stack: List[Tuple[Optional[Dict[str, Any]], Iterator[Any], List[PageNode]]] = [
        (None, iter(list(raw_nodes)), top)
    ]

    while stack:
        fields, pending, built = stack[-1]
        raw = next(pending, _DONE)
        if raw is _DONE:
            stack.pop()
            if fields is not None:
                stack[-1][2].append(PageNode(children=tuple(built), **fields))
            continue

        node_fields = _read_fields(raw, strict)
        stack.append((node_fields, iter(_read_children(raw, node_fields["route"], strict)), []))

    return tuple(top)


def _read_fields(obj: Any, strict: bool) -> Dict[str, Any]:
    front = _field(obj, "frontMatter")
    if not isinstance(front, Mapping):
        front = {}

    route = _optional_str(_field(obj, "route"), "route", strict) or ""
    title = _optional_str(_field(obj, "title"), "title", strict)
    if title is None:
        title = _optional_str(front.get("title"), "frontMatter.title", strict)
    if title is None:
        title = _optional_str(_field(obj, "name"), "name", strict)

    description = _optional_str(_field(obj, "description"), "description", strict)
    if description is None:
        description = _optional_str(front.get("description"), "frontMatter.description", strict)

    return {
        "route": route,
        "title": title,
        "description": description,
        "hidden": _optional_bool(_field(obj, "hidden"), route, strict),
    }


def _read_children(obj: Any, route: str, strict: bool) -> List[Any]:
    raw_children = _field(obj, "children")
    if raw_children is None:
        return []
    if isinstance(raw_children, (str, bytes, Mapping)):
        _reject(f"Invalid 'children' for route '{route}': expected a list.", strict)
        return []
    return list(raw_children)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _optional_str(value: Any, field: str, strict: bool) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", strict)
        return None
    value = value.strip()
    return value or None


def _optional_bool(value: Any, route: str, strict: bool) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    _reject(
        f"Invalid field 'hidden' for route '{route}': expected bool, received {type(value).__name__}.",
        strict,
    )
    return False


def _reject(msg: str, strict: bool) -> None:
    if strict:
        raise PageTreeError(msg)
    logger.warning(f"{msg} Ignoring the value.")
