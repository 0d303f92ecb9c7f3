"""Render whole menus: container, list wrapper, walked items or fallback."""

from __future__ import annotations

import copy
import dataclasses
import logging
from typing import List, Optional, Sequence, TextIO

from .escaping import esc_attr
from .hooks import HookRegistry
from .models import MenuItem, NavMenu, RenderOptions
from .tracing import trace
from .walker import BootstrapNavWalker, Walker

_LOGGER = logging.getLogger(__name__)

ALLOWED_CONTAINERS = ("div", "nav")


def _normalise_url(url: str) -> str:
    text = (url or "").strip()
    if len(text) > 1:
        text = text.rstrip("/")
    return text


def mark_current(items: Sequence[MenuItem], current_url: str) -> List[MenuItem]:
    """Return copies of ``items`` with the current page and its ancestors flagged.

    The item whose URL equals ``current_url`` receives ``current-menu-item``,
    its parent ``current-menu-parent`` and every ancestor
    ``current-menu-ancestor``. Trailing slashes are not significant.
    """

    target = _normalise_url(current_url)

    def _visit(item: MenuItem) -> tuple[MenuItem, bool, bool]:
        children: List[MenuItem] = []
        child_is_current = False
        descendant_is_current = False
        for child in item.children:
            clone, is_current, contains_current = _visit(child)
            children.append(clone)
            child_is_current = child_is_current or is_current
            descendant_is_current = descendant_is_current or is_current or contains_current

        classes = list(item.classes)
        is_current = bool(target) and _normalise_url(item.url) == target
        if is_current:
            classes.append("current-menu-item")
        if child_is_current:
            classes.append("current-menu-parent")
        if descendant_is_current:
            classes.append("current-menu-ancestor")

        clone = dataclasses.replace(item, classes=classes, children=children)
        return clone, is_current, descendant_is_current

    return [_visit(item)[0] for item in items]


def render_nav_menu(
    menu: Optional[NavMenu],
    options: Optional[RenderOptions] = None,
    hooks: Optional[HookRegistry] = None,
    walker: Optional[Walker] = None,
    stream: Optional[TextIO] = None,
) -> str:
    """Return the markup of ``menu``.

    A missing or empty menu hands over to the walker's ``fallback``, which
    writes to ``stream`` itself; the return value is then an empty string.
    When both ``walker`` and ``hooks`` are given, a shallow copy of the walker
    is bound to ``hooks``; the caller's walker is left untouched.
    """

    options = options or RenderOptions()
    if walker is None:
        walker = BootstrapNavWalker(hooks=hooks)
    elif hooks is not None:
        walker = copy.copy(walker)
        walker.hooks = hooks

    if menu is None or not menu.items:
        fallback = getattr(walker, "fallback", None)
        if fallback is not None:
            fallback(options, stream=stream)
        return ""

    with trace("menu.render", logger=_LOGGER, menu=menu.slug, depth=options.depth) as span:
        items = walker.walk(menu.items, options.depth, options)

        menu_id = options.menu_id or f"menu-{menu.slug}"
        markup = (
            options.items_wrap.replace("{menu_id}", esc_attr(menu_id))
            .replace("{menu_class}", esc_attr(options.menu_class))
            .replace("{items}", items)
        )

        container = options.container if options.container in ALLOWED_CONTAINERS else ""
        if container:
            container_class = options.container_class or f"menu-{menu.slug}-container"
            container_id = f' id="{esc_attr(options.container_id)}"' if options.container_id else ""
            markup = f'<{container}{container_id} class="{esc_attr(container_class)}">{markup}</{container}>'

        span["size"] = len(markup)
    return markup


__all__ = ["ALLOWED_CONTAINERS", "mark_current", "render_nav_menu"]
