from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (from disk or CLI) into strictly typed
values, filling missing keys with domain defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from docnav.domain.config import get_default_config
from docnav.domain.constants import DUPLICATE_POLICIES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the navigation configuration.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
        a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("page_tree_path", "locale"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["main_nav_routes"] = _as_route_list(
        merged.get("main_nav_routes"), defaults["main_nav_routes"], warnings, strict
    )
    merged["duplicate_policy"] = _as_policy(
        merged.get("duplicate_policy"), defaults["duplicate_policy"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_route_list(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """
    Ensure main navigation routes are a list of distinct route strings.

    An explicit empty list is honoured: every route then gets pagination.
    """
    if value is None:
        return list(fallback)

    # CSV string support for CLI compatibility
    if isinstance(value, str) and not strict:
        warnings.append("Field 'main_nav_routes' converted from CSV string to list.")
        value = value.split(",")

    if not isinstance(value, list):
        msg = f"Invalid field 'main_nav_routes': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    out: List[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            msg = f"Invalid item in 'main_nav_routes[{i}]': expected str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
            continue
        route = item.strip()
        if route and route not in out:
            out.append(route)
    return out


def _as_policy(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    policy = str(value).strip().lower()
    if policy in DUPLICATE_POLICIES:
        return policy

    msg = f"Invalid field 'duplicate_policy': '{value}' is not one of {DUPLICATE_POLICIES}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
