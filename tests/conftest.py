"""Shared pytest fixtures for the navwalker test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navwalker.hooks import HookRegistry
from navwalker.models import MenuItem, NavMenu, RenderOptions
from navwalker.walker import BootstrapNavWalker


@pytest.fixture
def hooks() -> HookRegistry:
    """Return a registry for a viewer without admin capability."""

    return HookRegistry(admin_base_url="https://example.com/wp-admin/")


@pytest.fixture
def walker(hooks: HookRegistry) -> BootstrapNavWalker:
    """Return a Bootstrap walker bound to the ``hooks`` fixture."""

    return BootstrapNavWalker(hooks=hooks)


@pytest.fixture
def options() -> RenderOptions:
    """Return default render options."""

    return RenderOptions()


@pytest.fixture
def services_item() -> MenuItem:
    """Return a top-level item with a dropdown of three children."""

    return MenuItem(
        id=2,
        title="Services",
        url="/services/",
        children=[
            MenuItem(id=3, title="Consulting", url="/services/consulting/"),
            MenuItem(id=4, title="Divider"),
            MenuItem(id=5, title="Training", url="/services/training/", target="_blank"),
        ],
    )


@pytest.fixture
def sample_menu(services_item: MenuItem) -> NavMenu:
    """Return the primary menu used across rendering tests."""

    return NavMenu(
        slug="primary",
        name="Primary",
        items=[
            MenuItem(id=1, title="Home", url="/"),
            services_item,
            MenuItem(id=7, title="Contact", url="/contact/", attr_title="glyphicon-envelope"),
        ],
    )
