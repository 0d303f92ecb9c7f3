"""Tree walkers turning :class:`MenuItem` trees into Bootstrap 3 markup."""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from .escaping import esc_attr, esc_url
from .hooks import (
    NAV_MENU_CSS_CLASS,
    NAV_MENU_ITEM_ID,
    NAV_MENU_LINK_ATTRIBUTES,
    THE_TITLE,
    WALKER_NAV_MENU_START_EL,
    HookRegistry,
)
from .models import MenuItem, RenderOptions
from .tracing import log_event

_LOGGER = logging.getLogger(__name__)

_ACTIVE_CLASSES = ("current-menu-item", "current-category-ancestor")


def _is_empty(value: Any) -> bool:
    return not value or value == "0"


def _attribute(name: str, value: str) -> str:
    return f' {name}="{esc_attr(value)}"' if value else ""


class Walker:
    """Pre-order traversal emitting open/close fragments around every node.

    Subclasses override :meth:`start_lvl`, :meth:`end_lvl`, :meth:`start_el`
    and :meth:`end_el`; each of them only appends to ``output``.
    """

    def __init__(self, hooks: Optional[HookRegistry] = None, logger: Optional[logging.Logger] = None) -> None:
        self.hooks = hooks or HookRegistry()
        self._logger = logger or _LOGGER

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def start_lvl(self, output: List[str], depth: int = 0, options: Optional[RenderOptions] = None) -> None:
        indent = "\t" * depth
        output.append(f'\n{indent}<ul class="sub-menu">\n')

    def end_lvl(self, output: List[str], depth: int = 0, options: Optional[RenderOptions] = None) -> None:
        indent = "\t" * depth
        output.append(f"{indent}</ul>\n")

    def start_el(
        self,
        output: List[str],
        item: MenuItem,
        depth: int = 0,
        options: Optional[RenderOptions] = None,
        item_id: int = 0,
    ) -> None:
        raise NotImplementedError

    def end_el(
        self,
        output: List[str],
        item: MenuItem,
        depth: int = 0,
        options: Optional[RenderOptions] = None,
    ) -> None:
        output.append("</li>\n")

    def walk(
        self,
        items: Sequence[MenuItem],
        max_depth: int = 0,
        options: Optional[RenderOptions] = None,
    ) -> str:
        """Render ``items`` and their descendants.

        ``max_depth`` of ``0`` renders the whole tree, ``-1`` renders every
        node flat at depth 0 and a positive value stops descending once that
        many levels have been emitted.
        """

        if not items:
            return ""
        options = options or RenderOptions()
        output: List[str] = []

        if max_depth == -1:
            for item in self._flatten(items):
                self.display_element(item, output, max_depth, 0, options, children=())
        else:
            for item in items:
                self.display_element(item, output, max_depth, 0, options)

        log_event(
            self.logger,
            logging.DEBUG,
            "walker.walk.finish",
            walker=type(self).__name__,
            items=len(items),
            max_depth=max_depth,
            size=sum(len(chunk) for chunk in output),
        )
        return "".join(output)

    def display_element(
        self,
        item: MenuItem,
        output: List[str],
        max_depth: int,
        depth: int,
        options: RenderOptions,
        children: Optional[Sequence[MenuItem]] = None,
    ) -> None:
        """Emit ``item`` and, depth permitting, its children."""

        if children is None:
            children = item.children or ()
        descend = bool(children) and (max_depth == 0 or max_depth > depth + 1)

        node_options = options.model_copy(update={"has_children": descend})
        self.start_el(output, item, depth, node_options, item.id)

        if descend:
            self.start_lvl(output, depth, node_options)
            for child in children:
                self.display_element(child, output, max_depth, depth + 1, options)
            self.end_lvl(output, depth, node_options)

        self.end_el(output, item, depth, node_options)

    @staticmethod
    def _flatten(items: Sequence[MenuItem]) -> List[MenuItem]:
        flat: List[MenuItem] = []
        for item in items:
            flat.append(item)
            flat.extend(Walker._flatten(item.children))
        return flat


class BootstrapNavWalker(Walker):
    """Render menus with the Bootstrap 3 navbar and dropdown conventions."""

    def start_lvl(self, output: List[str], depth: int = 0, options: Optional[RenderOptions] = None) -> None:
        indent = "\t" * depth
        output.append(f'\n{indent}<ul role="menu" class="dropdown-menu">\n')

    def start_el(
        self,
        output: List[str],
        item: MenuItem,
        depth: int = 0,
        options: Optional[RenderOptions] = None,
        item_id: int = 0,
    ) -> None:
        options = options or RenderOptions()
        indent = "\t" * depth if depth else ""
        title = item.title or ""
        role = (item.attr_title or "").lower()

        # Dividers and headers only exist inside a dropdown, i.e. at depth 1.
        if depth == 1 and (role == "divider" or title.lower() == "divider"):
            output.append(f'{indent}<li role="presentation" class="divider">')
            return
        if depth == 1 and role == "dropdown-header":
            output.append(f'{indent}<li role="presentation" class="dropdown-header">{esc_attr(title)}')
            return
        if role == "disabled":
            output.append(f'{indent}<li role="presentation" class="disabled"><a href="#">{esc_attr(title)}</a>')
            return

        output.append(indent + self._open_item(item, options))
        output.append(self._item_output(item, depth, options))

    def _open_item(self, item: MenuItem, options: RenderOptions) -> str:
        classes = [name for name in (item.classes or []) if name]
        classes.append(f"menu-item-{item.id}")

        filtered = self.hooks.apply_filters(NAV_MENU_CSS_CLASS, list(classes), item, options)
        if isinstance(filtered, str):
            filtered = filtered.split()
        class_names = [name for name in filtered or () if name]
        if options.has_children:
            class_names.append("dropdown")
        if any(name in classes for name in _ACTIVE_CLASSES):
            class_names.append("active")

        element_id = self.hooks.apply_filters(NAV_MENU_ITEM_ID, f"menu-item-{item.id}", item, options)

        return f"<li{_attribute('id', element_id)}{_attribute('class', ' '.join(class_names))}>"

    def _link_attributes(self, item: MenuItem, depth: int, options: RenderOptions) -> Dict[str, Any]:
        attributes: Dict[str, Any] = {
            "title": item.title or "",
            "target": item.target or "",
            "rel": item.xfn or "",
        }
        if options.has_children and depth == 0:
            attributes["href"] = "#"
            attributes["data-toggle"] = "dropdown"
            attributes["class"] = "dropdown-toggle"
            attributes["aria-haspopup"] = "true"
        else:
            attributes["href"] = item.url or ""

        return self.hooks.apply_filters(NAV_MENU_LINK_ATTRIBUTES, attributes, item, options)

    def _item_output(self, item: MenuItem, depth: int, options: RenderOptions) -> str:
        serialised = []
        for name, value in self._link_attributes(item, depth, options).items():
            if _is_empty(value):
                continue
            escaped = esc_url(value) if name == "href" else esc_attr(value)
            serialised.append(f' {name}="{escaped}"')
        attributes = "".join(serialised)

        parts = [options.before]
        if item.attr_title:
            parts.append(f'<a{attributes}><span class="glyphicon {esc_attr(item.attr_title)}"></span>&nbsp;')
        else:
            parts.append(f"<a{attributes}>")

        link_text = self.hooks.apply_filters(THE_TITLE, item.title or "", item.id)
        parts.append(f"{options.link_before}{link_text}{options.link_after}")

        if options.has_children and depth == 0:
            parts.append(' <span class="caret"></span></a>')
        else:
            parts.append("</a>")
        parts.append(options.after)

        return self.hooks.apply_filters(WALKER_NAV_MENU_START_EL, "".join(parts), item, depth, options)

    def fallback(
        self,
        options: Optional[RenderOptions] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Write an "Add a menu" link for a location without a menu.

        Viewers allowed to manage the site get nothing here; the
        administrative screens offer them the menu manager already.
        """

        if self.hooks.can_manage_options():
            log_event(self.logger, logging.DEBUG, "walker.fallback.skipped", reason="can_manage_options")
            return

        options = options or RenderOptions()
        container = options.container
        parts: List[str] = []

        if container:
            parts.append(
                f"<{container}{_attribute('id', options.container_id)}"
                f"{_attribute('class', options.container_class)}>"
            )

        parts.append(f"<ul{_attribute('id', options.menu_id)}{_attribute('class', options.menu_class)}>")
        nav_menus_url = esc_url(self.hooks.admin_url("nav-menus.php"))
        parts.append(f'<li><a href="{nav_menus_url}">Add a menu</a></li>')
        parts.append("</ul>")

        if container:
            parts.append(f"</{container}>")

        stream = stream if stream is not None else sys.stdout
        stream.write("".join(parts))
        log_event(self.logger, logging.DEBUG, "walker.fallback.written", container=container or None)


__all__ = ["BootstrapNavWalker", "Walker"]
