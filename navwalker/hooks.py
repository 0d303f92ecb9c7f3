"""Extension points the walker consults while rendering."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import urljoin

from .tracing import log_event

_LOGGER = logging.getLogger(__name__)

NAV_MENU_CSS_CLASS = "nav_menu_css_class"
NAV_MENU_ITEM_ID = "nav_menu_item_id"
NAV_MENU_LINK_ATTRIBUTES = "nav_menu_link_attributes"
THE_TITLE = "the_title"
WALKER_NAV_MENU_START_EL = "walker_nav_menu_start_el"

FILTER_NAMES = (
    NAV_MENU_CSS_CLASS,
    NAV_MENU_ITEM_ID,
    NAV_MENU_LINK_ATTRIBUTES,
    THE_TITLE,
    WALKER_NAV_MENU_START_EL,
)

Filter = Callable[..., Any]


class HookRegistry:
    """Named filter chains plus the host's capability check and URL builder.

    Every filter receives the current value followed by the context
    arguments of its extension point and returns the replacement value:

    ``nav_menu_css_class(classes, item, options)``
        list of class tokens for the ``<li>``.
    ``nav_menu_item_id(element_id, item, options)``
        id attribute of the ``<li>``.
    ``nav_menu_link_attributes(attributes, item, options)``
        ordered mapping of ``<a>`` attributes.
    ``the_title(title, item_id)``
        link text.
    ``walker_nav_menu_start_el(item_output, item, depth, options)``
        the assembled markup of one item.
    """

    def __init__(
        self,
        *,
        can_manage_options: Optional[Callable[[], bool]] = None,
        admin_url: Optional[Callable[[str], str]] = None,
        admin_base_url: str = "/wp-admin/",
    ) -> None:
        self._filters: Dict[str, List[Tuple[int, int, Filter]]] = {name: [] for name in FILTER_NAMES}
        self._sequence = 0
        self._can_manage_options = can_manage_options or (lambda: False)
        self._admin_base_url = admin_base_url
        self._admin_url = admin_url

    def _chain(self, name: str) -> List[Tuple[int, int, Filter]]:
        try:
            return self._filters[name]
        except KeyError:
            raise ValueError(
                f"Unsupported hook '{name}'. Expected one of: {', '.join(FILTER_NAMES)}."
            ) from None

    def add_filter(self, name: str, callback: Filter, priority: int = 10) -> None:
        """Register ``callback`` on the ``name`` chain."""

        chain = self._chain(name)
        chain.append((priority, self._sequence, callback))
        chain.sort(key=lambda entry: (entry[0], entry[1]))
        self._sequence += 1
        log_event(_LOGGER, logging.DEBUG, "hooks.add_filter", hook=name, priority=priority)

    def remove_filter(self, name: str, callback: Filter) -> bool:
        """Remove ``callback`` from ``name``; return whether it was registered."""

        chain = self._chain(name)
        for index, entry in enumerate(chain):
            if entry[2] == callback:
                del chain[index]
                return True
        return False

    def has_filter(self, name: str) -> bool:
        return bool(self._chain(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run ``value`` through every callback registered on ``name``."""

        for _, _, callback in list(self._chain(name)):
            value = callback(value, *args)
        return value

    def can_manage_options(self) -> bool:
        """Return whether the current viewer may manage site configuration."""

        return bool(self._can_manage_options())

    def admin_url(self, path: str = "") -> str:
        """Return the URL of the administrative screen at ``path``."""

        if self._admin_url is not None:
            return self._admin_url(path)
        base = self._admin_base_url
        if not base.endswith("/"):
            base += "/"
        return urljoin(base, path.lstrip("/"))


__all__ = [
    "FILTER_NAMES",
    "HookRegistry",
    "NAV_MENU_CSS_CLASS",
    "NAV_MENU_ITEM_ID",
    "NAV_MENU_LINK_ATTRIBUTES",
    "THE_TITLE",
    "WALKER_NAV_MENU_START_EL",
]
