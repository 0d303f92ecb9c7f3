"""Tests for :mod:`navwalker.menu`."""

from __future__ import annotations

import io
import logging

import pytest
from bs4 import BeautifulSoup

from navwalker.hooks import HookRegistry
from navwalker.menu import mark_current, render_nav_menu
from navwalker.models import MenuItem, NavMenu, RenderOptions
from navwalker.walker import BootstrapNavWalker


def test_render_nav_menu_wraps_items_in_container(sample_menu: NavMenu, hooks: HookRegistry) -> None:
    """Given a menu When rendered with defaults Then a div container and ul wrapper surround the items."""

    markup = render_nav_menu(sample_menu, hooks=hooks)

    assert markup.startswith('<div class="menu-primary-container"><ul id="menu-primary" class="menu"><li id="menu-item-1"')
    assert markup.endswith("</li>\n</ul></div>")


def test_render_nav_menu_bootstrap_navbar_options(sample_menu: NavMenu) -> None:
    options = RenderOptions(
        container="nav",
        container_id="main-nav",
        container_class="collapse navbar-collapse",
        menu_id="primary",
        menu_class="nav navbar-nav",
        depth=2,
    )

    soup = BeautifulSoup(render_nav_menu(sample_menu, options), "html.parser")

    container = soup.find("nav")
    assert container["id"] == "main-nav"
    assert container["class"] == ["collapse", "navbar-collapse"]
    menu = container.find("ul", id="primary")
    assert menu["class"] == ["nav", "navbar-nav"]
    assert len(menu.find_all("li", recursive=False)) == 3
    assert menu.select_one("li.dropdown > ul.dropdown-menu") is not None


@pytest.mark.parametrize("container", ["", "section"])
def test_render_nav_menu_without_supported_container(sample_menu: NavMenu, container: str) -> None:
    markup = render_nav_menu(sample_menu, RenderOptions(container=container))

    assert markup.startswith('<ul id="menu-primary" class="menu">')
    assert markup.endswith("</ul>")


def test_render_nav_menu_custom_items_wrap(sample_menu: NavMenu) -> None:
    options = RenderOptions(container="", items_wrap='<ol class="{menu_class}">{items}</ol>')

    markup = render_nav_menu(sample_menu, options)

    assert markup.startswith('<ol class="menu"><li')


@pytest.mark.parametrize("menu", [None, NavMenu(slug="empty")])
def test_render_nav_menu_falls_back_without_items(menu, hooks: HookRegistry) -> None:
    """Given no menu items When rendered Then the fallback is written to the stream."""

    stream = io.StringIO()

    markup = render_nav_menu(menu, RenderOptions(container="", menu_class=""), hooks=hooks, stream=stream)

    assert markup == ""
    assert stream.getvalue() == '<ul><li><a href="https://example.com/wp-admin/nav-menus.php">Add a menu</a></li></ul>'


def test_render_nav_menu_traces_render(sample_menu: NavMenu, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="navwalker.menu"):
        render_nav_menu(sample_menu)

    messages = [record.getMessage() for record in caplog.records]
    assert any("trace.start" in message and "menu.render" in message for message in messages)
    assert any("trace.end" in message and '"size"' in message for message in messages)


def test_mark_current_flags_item_parent_and_ancestors() -> None:
    """Given a nested tree When the deepest URL is current Then parent and ancestor classes follow."""

    items = [
        MenuItem(id=1, title="Home", url="/"),
        MenuItem(
            id=2,
            title="Services",
            url="/services/",
            children=[
                MenuItem(
                    id=3,
                    title="Consulting",
                    url="/services/consulting/",
                    children=[MenuItem(id=4, title="Audits", url="/services/consulting/audits/")],
                )
            ],
        ),
    ]

    marked = mark_current(items, "/services/consulting/audits")

    assert marked[0].classes == []
    assert marked[1].classes == ["current-menu-ancestor"]
    assert marked[1].children[0].classes == ["current-menu-parent", "current-menu-ancestor"]
    assert marked[1].children[0].children[0].classes == ["current-menu-item"]
    assert items[1].children[0].children[0].classes == []


def test_mark_current_drives_active_class(walker: BootstrapNavWalker) -> None:
    items = mark_current([MenuItem(id=1, title="Home", url="/"), MenuItem(id=2, title="Blog", url="/blog/")], "/blog/")

    markup = walker.walk(items)

    assert '<li id="menu-item-2" class="current-menu-item menu-item-2 active">' in markup
    assert 'class="menu-item-1"' in markup


def test_mark_current_with_empty_url_marks_nothing() -> None:
    items = mark_current([MenuItem(id=1, title="Nowhere", url="")], "")

    assert items[0].classes == []


def test_render_nav_menu_items_wrap_with_literal_braces(sample_menu: NavMenu) -> None:
    """Given a wrapper containing literal braces When rendered Then only the placeholders are substituted."""

    options = RenderOptions(
        container="",
        items_wrap='<ul style="a{color:red}" data-x="{}" id="{menu_id}">{items}</ul>',
    )

    markup = render_nav_menu(sample_menu, options)

    assert markup.startswith('<ul style="a{color:red}" data-x="{}" id="menu-primary"><li id="menu-item-1"')
    assert markup.endswith("</li>\n</ul>")


def test_render_nav_menu_leaves_callers_walker_untouched(sample_menu: NavMenu) -> None:
    original_hooks = HookRegistry()
    walker = BootstrapNavWalker(hooks=original_hooks)
    hooks = HookRegistry()
    hooks.add_filter("the_title", lambda title, item_id: title.upper())

    markup = render_nav_menu(sample_menu, walker=walker, hooks=hooks)

    assert ">HOME</a>" in markup
    assert walker.hooks is original_hooks
