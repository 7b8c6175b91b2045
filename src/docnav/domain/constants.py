from __future__ import annotations

"""
Domain Constants.

Centralizes configuration versioning, the default set of main navigation
routes and the locale keys used for presentation labels.
"""

from typing import Dict, List

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_LOCALE = "en"

# Hub/landing routes that never receive prev/next controls
DEFAULT_MAIN_NAV_ROUTES: List[str] = ["/"]

DUPLICATE_POLICY_FIRST = "first"
DUPLICATE_POLICY_LAST = "last"
DUPLICATE_POLICIES: List[str] = [DUPLICATE_POLICY_FIRST, DUPLICATE_POLICY_LAST]

# -----------------------------------------------------------------------------
# PRESENTATION LABELS
# -----------------------------------------------------------------------------
LABEL_KEYS: Dict[str, str] = {
    "previous": "navigation.previous",
    "next": "navigation.next",
    "previous_fallback": "navigation.previous_fallback",
    "next_fallback": "navigation.next_fallback",
    "section_title": "navigation.section_title",
    "section_description": "navigation.section_description",
}

DEFAULT_LABELS: Dict[str, str] = {
    "previous": "Previous",
    "next": "Next",
    "previous_fallback": "Previous Page",
    "next_fallback": "Next Page",
    "section_title": "Continue Learning",
    "section_description": "Continue with the next part or go back to the previous page",
}
