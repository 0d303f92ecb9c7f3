"""Configuration helpers for menu rendering."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .hooks import HookRegistry
from .models import RenderOptions

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "navwalker.json"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(slots=True)
class NavwalkerConfig:
    """Site-level settings: where the admin lives, who may manage menus, defaults."""

    admin_url: str = "/wp-admin/"
    can_manage_options: bool = False
    log_level: str = "INFO"
    render: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | None = None) -> "NavwalkerConfig":
        """Load configuration from disk and environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode navwalker config at %s: %s", config_path, exc)
                data = {}
            if not isinstance(data, dict):
                _LOGGER.warning("Ignoring navwalker config at %s: expected a JSON object", config_path)
                data = {}

        env_admin_url = os.environ.get("NAVWALKER_ADMIN_URL")
        if env_admin_url is not None:
            data["admin_url"] = env_admin_url
        env_can_manage = os.environ.get("NAVWALKER_CAN_MANAGE_OPTIONS")
        if env_can_manage is not None:
            data["can_manage_options"] = env_can_manage
        env_log_level = os.environ.get("NAVWALKER_LOG_LEVEL")
        if env_log_level is not None:
            data["log_level"] = env_log_level

        render = data.get("render") or {}
        return cls(
            admin_url=str(data.get("admin_url") or "/wp-admin/"),
            can_manage_options=_as_bool(data.get("can_manage_options", False)),
            log_level=str(data.get("log_level") or "INFO").strip().upper(),
            render=dict(render) if isinstance(render, dict) else {},
        )

    def render_options(self, **overrides: Any) -> RenderOptions:
        """Return :class:`RenderOptions` built from the defaults plus ``overrides``."""

        values = dict(self.render)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RenderOptions(**values)

    def hooks(self) -> HookRegistry:
        """Return a :class:`HookRegistry` wired to this configuration."""

        can_manage = self.can_manage_options
        return HookRegistry(can_manage_options=lambda: can_manage, admin_base_url=self.admin_url)


def load_navwalker_config(path: Path | None = None) -> NavwalkerConfig:
    """Helper to load the navwalker configuration."""

    return NavwalkerConfig.load(path)


__all__ = ["NavwalkerConfig", "load_navwalker_config"]
