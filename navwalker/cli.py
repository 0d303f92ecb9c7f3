"""Command line entrypoint rendering a menu JSON file to stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import NavwalkerConfig
from .logging_config import configure_logging
from .menu import mark_current, render_nav_menu
from .models import load_menu
from .tracing import log_event
from .walker import BootstrapNavWalker

_LOGGER = logging.getLogger("navwalker.cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a navigation menu as Bootstrap 3 markup")
    parser.add_argument("menu", type=Path, help="Path to a menu JSON file.")
    parser.add_argument("--config", type=Path, help="Path to a navwalker JSON config file.")
    parser.add_argument("--log-level", help="Python logging level (default: from config, INFO)")
    parser.add_argument("--admin-url", help="Base URL of the administration screens.")
    parser.add_argument(
        "--can-manage",
        action="store_true",
        default=None,
        help="Render as a viewer allowed to manage options (suppresses the fallback).",
    )
    parser.add_argument("--current-url", help="Mark the item linking to this URL as active.")
    parser.add_argument("--container", help="Container tag wrapping the list (div, nav or '').")
    parser.add_argument("--container-class", help="Class of the container tag.")
    parser.add_argument("--menu-id", help="Id of the menu list.")
    parser.add_argument("--menu-class", help="Class of the menu list.")
    parser.add_argument(
        "--depth",
        type=int,
        help="Maximum depth to render (0 = unlimited, -1 = flat).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    config = NavwalkerConfig.load(args.config)
    if args.admin_url:
        config.admin_url = args.admin_url
    if args.can_manage is not None:
        config.can_manage_options = args.can_manage
    configure_logging(level=args.log_level or config.log_level)

    try:
        menu = load_menu(args.menu)
    except (OSError, ValueError) as exc:
        log_event(_LOGGER, logging.ERROR, "cli.load_menu.failed", path=str(args.menu), error=str(exc))
        return 1

    if args.current_url:
        menu.items = mark_current(menu.items, args.current_url)

    options = config.render_options(
        container=args.container,
        container_class=args.container_class,
        menu_id=args.menu_id,
        menu_class=args.menu_class,
        depth=args.depth,
    )
    walker = BootstrapNavWalker(hooks=config.hooks())
    markup = render_nav_menu(menu, options, walker=walker, stream=sys.stdout)
    if markup:
        sys.stdout.write(markup)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
