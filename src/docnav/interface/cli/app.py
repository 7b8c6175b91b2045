from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, persisted state, CLI overrides), page tree loading, and
rendering of either the flattened reading order or the prev/next
navigation of one route.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from docnav.core.navigator import Navigator
from docnav.core.presenter import build_page_navigation
from docnav.core.validator import validate_config
from docnav.domain.config import get_default_app_state, get_default_config, load_app_state
from docnav.domain.models import FlatDirectories, PageNavigation
from docnav.infra.logging import LoggingConfig, configure_logging, get_logger
from docnav.infra.page_tree import PageTreeError, load_page_tree
from docnav.interface.cli import args as cli_args
from docnav.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 unexpected failure, 2 bad input).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    state = get_default_app_state() if args.use_defaults else load_app_state()
    settings = state["app_settings"]

    configure_logging(LoggingConfig.from_settings(settings, debug=args.debug))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config()
    base_conf.update(state["last_session"])
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if clean_conf["locale"] != i18n.locale:
        i18n.load_locale(clean_conf["locale"])

    tree_path = clean_conf["page_tree_path"]
    if not tree_path:
        msg = i18n.t("cli.errors.no_tree")
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    try:
        tree = load_page_tree(tree_path)
        navigator = Navigator.from_config(clean_conf)
        flat = navigator.directories(tree)

        if args.route is None:
            _print_listing(flat, args.json_output)
            return 0

        page_nav = build_page_navigation(args.route, flat, navigator, i18n.navigation_labels())
    except PageTreeError as e:
        msg = i18n.t("cli.errors.tree_invalid", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(asdict(page_nav), ensure_ascii=False, indent=2))
    else:
        _print_navigation(page_nav, flat)
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, non-None override values into the base configuration."""
    out = dict(base)
    for k in ("page_tree_path", "main_nav_routes", "duplicate_policy", "locale"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_listing(flat: FlatDirectories, as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(e) for e in flat.entries], ensure_ascii=False, indent=2))
        return

    print(i18n.t("cli.status.pages", count=len(flat.entries)))
    for entry in flat.entries:
        title = f"  {entry.title}" if entry.title else ""
        print(f"{entry.index:>4}  {entry.route}{title}")


def _print_navigation(page_nav: PageNavigation, flat: FlatDirectories) -> None:
    if flat.get(page_nav.route) is None:
        print(i18n.t("cli.status.not_in_tree", route=page_nav.route))
        return

    if not page_nav.show_navigation:
        print(i18n.t("cli.status.hidden", route=page_nav.route))
        return

    if page_nav.previous_link:
        print(f"<- {page_nav.previous_link.title} ({page_nav.previous_link.href})")

    if page_nav.has_continue_learning:
        print("")
        print(page_nav.section_title)
        print(page_nav.section_description)
        for card in page_nav.continue_learning:
            print(f"  [{card.top_title}] {card.title} -> {card.href}")
            if card.description:
                print(f"      {card.description}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
