"""Jinja2 integration exposing ``nav_menu(slug, **options)`` to templates."""

from __future__ import annotations

import io
from typing import Any, Callable, Iterable, Mapping, Optional

from jinja2 import Environment
from markupsafe import Markup

from .hooks import HookRegistry
from .menu import render_nav_menu
from .models import NavMenu, RenderOptions
from .walker import BootstrapNavWalker


def make_nav_menu(
    menus: Mapping[str, NavMenu] | Iterable[NavMenu],
    hooks: Optional[HookRegistry] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> Callable[..., Markup]:
    """Return a template callable rendering one of ``menus`` by slug."""

    if isinstance(menus, Mapping):
        registry = dict(menus)
    else:
        registry = {menu.slug: menu for menu in menus}
    base = dict(defaults or {})

    def nav_menu(slug: str, **options: Any) -> Markup:
        values = dict(base)
        values.update(options)
        render_options = RenderOptions(**values)

        # The fallback writes to a stream; capture it so templates get markup back.
        buffer = io.StringIO()
        markup = render_nav_menu(
            registry.get(slug),
            render_options,
            walker=BootstrapNavWalker(hooks=hooks),
            stream=buffer,
        )
        return Markup(markup or buffer.getvalue())

    return nav_menu


def register_nav_menus(
    env: Environment,
    menus: Mapping[str, NavMenu] | Iterable[NavMenu],
    hooks: Optional[HookRegistry] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> Environment:
    """Install ``nav_menu`` as a global of ``env`` and return ``env``."""

    env.globals["nav_menu"] = make_nav_menu(menus, hooks=hooks, defaults=defaults)
    return env


__all__ = ["make_nav_menu", "register_nav_menus"]
