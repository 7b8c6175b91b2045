from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from docnav.domain.constants import DUPLICATE_POLICIES
from docnav.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docnav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docnav",
        description=i18n.t("app.description"),
    )

    # --- Inputs ---
    p.add_argument(
        "-t", "--tree",
        dest="page_tree_path",
        default=None,
        help=i18n.t("cli.args.tree"),
    )
    p.add_argument(
        "-r", "--route",
        dest="route",
        default=None,
        help=i18n.t("cli.args.route"),
    )

    # --- Navigation Policy ---
    p.add_argument(
        "--exclude-routes",
        dest="main_nav_routes",
        default=None,
        help=i18n.t("cli.args.exclude"),
    )
    p.add_argument(
        "--duplicates",
        dest="duplicate_policy",
        choices=DUPLICATE_POLICIES,
        default=None,
        help=i18n.t("cli.args.duplicates"),
    )
    p.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help=i18n.t("cli.args.locale"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None means unset).
    """
    overrides: Dict[str, Any] = {
        "page_tree_path": args.page_tree_path,
        "duplicate_policy": args.duplicate_policy,
        "locale": args.locale,
    }
    if args.main_nav_routes is not None:
        overrides["main_nav_routes"] = _split_csv(args.main_nav_routes)
    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
