"""Bootstrap 3 navigation menu rendering."""

from .config import NavwalkerConfig, load_navwalker_config
from .escaping import esc_attr, esc_url
from .hooks import HookRegistry
from .logging_config import configure_logging
from .menu import mark_current, render_nav_menu
from .models import MenuItem, NavMenu, RenderOptions, load_menu
from .walker import BootstrapNavWalker, Walker

__all__ = [
    "BootstrapNavWalker",
    "HookRegistry",
    "MenuItem",
    "NavMenu",
    "NavwalkerConfig",
    "RenderOptions",
    "Walker",
    "configure_logging",
    "esc_attr",
    "esc_url",
    "load_menu",
    "load_navwalker_config",
    "mark_current",
    "render_nav_menu",
]
