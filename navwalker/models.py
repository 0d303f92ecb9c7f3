"""Data models shared by the walker, the menu renderer and the CLI."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ITEMS_WRAP = '<ul id="{menu_id}" class="{menu_class}">{items}</ul>'


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _mappings(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [entry for entry in value if isinstance(entry, Mapping)]


class RenderOptions(BaseModel):
    """Per-invocation options understood by the walker and the fallback."""

    model_config = ConfigDict(extra="ignore")

    before: str = Field(default="", description="Markup emitted before each link")
    after: str = Field(default="", description="Markup emitted after each link")
    link_before: str = Field(default="", description="Markup emitted inside the link, before the text")
    link_after: str = Field(default="", description="Markup emitted inside the link, after the text")
    has_children: bool = Field(
        default=False,
        description="Whether the node being rendered has rendered children",
    )
    container: str = Field(default="div", description="Tag wrapping the menu list")
    container_id: str = Field(default="", description="Id of the container tag")
    container_class: str = Field(default="", description="Class of the container tag")
    menu_id: str = Field(default="", description="Id of the menu list")
    menu_class: str = Field(default="menu", description="Class of the menu list")
    items_wrap: str = Field(
        default=DEFAULT_ITEMS_WRAP,
        description="Wrapper with {menu_id}, {menu_class} and {items} placeholders",
    )
    depth: int = Field(default=0, description="Maximum depth, 0 for unlimited and -1 for flat")

    @field_validator(
        "before",
        "after",
        "link_before",
        "link_after",
        "container_id",
        "container_class",
        "menu_id",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("container", mode="before")
    @classmethod
    def _normalise_container(cls, value: str | None) -> str:
        if value is None or value is False:
            return ""
        return str(value).strip().lower()

    @field_validator("menu_class", mode="before")
    @classmethod
    def _default_menu_class(cls, value: str | None) -> str:
        return "menu" if value is None else value

    @field_validator("items_wrap", mode="before")
    @classmethod
    def _default_items_wrap(cls, value: str | None) -> str:
        return value or DEFAULT_ITEMS_WRAP

    @field_validator("depth", mode="before")
    @classmethod
    def _default_depth(cls, value: int | None) -> int:
        return 0 if value is None else value


@dataclass(slots=True)
class Serializable:
    """Base dataclass providing JSON serialisation helpers."""

    def to_dict(self) -> Dict:
        """Convert the dataclass to a serialisable dictionary."""

        def _convert(value):
            if dataclasses.is_dataclass(value):
                return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
            if isinstance(value, list):
                return [_convert(item) for item in value]
            return value

        return _convert(self)

    def to_json(self, path: Path) -> None:
        """Write the dataclass as JSON to the provided ``path``."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


@dataclass(slots=True)
class MenuItem(Serializable):
    """A single navigational entry.

    ``attr_title`` doubles as the role marker: ``divider``, ``dropdown-header``
    and ``disabled`` switch the rendering mode, any other value is used as a
    glyphicon class.
    """

    id: int = 0
    title: str = ""
    url: str = ""
    attr_title: str = ""
    target: str = ""
    xfn: str = ""
    classes: List[str] = field(default_factory=list)
    children: List["MenuItem"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MenuItem":
        """Build an item (and its children) from a loosely shaped mapping."""

        raw_id = data.get("id", data.get("ID", 0))
        try:
            item_id = int(raw_id or 0)
        except (TypeError, ValueError):
            item_id = 0

        raw_classes = data.get("classes") or []
        if isinstance(raw_classes, str):
            raw_classes = raw_classes.split()
        elif not isinstance(raw_classes, (list, tuple)):
            raw_classes = []

        return cls(
            id=item_id,
            title=_text(data.get("title")),
            url=_text(data.get("url")),
            attr_title=_text(data.get("attr_title")),
            target=_text(data.get("target")),
            xfn=_text(data.get("xfn", data.get("rel"))),
            classes=[_text(name) for name in raw_classes],
            children=[cls.from_dict(child) for child in _mappings(data.get("children"))],
        )


@dataclass(slots=True)
class NavMenu(Serializable):
    slug: str
    name: str = ""
    items: List[MenuItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NavMenu":
        slug = _text(data.get("slug")).strip()
        name = _text(data.get("name")).strip()
        if not slug:
            slug = "-".join(name.lower().split()) or "menu"
        return cls(
            slug=slug,
            name=name or slug,
            items=[MenuItem.from_dict(item) for item in _mappings(data.get("items"))],
        )


def load_menu(path: Path) -> NavMenu:
    """Read a :class:`NavMenu` from a JSON file at ``path``."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Menu file {path} is not valid JSON: {exc}") from exc

    if isinstance(payload, list):
        payload = {"slug": path.stem, "items": payload}
    if not isinstance(payload, dict):
        raise ValueError(f"Menu file {path} must contain an object or a list of items")
    return NavMenu.from_dict(payload)


__all__ = [
    "DEFAULT_ITEMS_WRAP",
    "MenuItem",
    "NavMenu",
    "RenderOptions",
    "Serializable",
    "load_menu",
]
