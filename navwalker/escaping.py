"""Escaping helpers for attribute values and URLs in generated markup."""

from __future__ import annotations

import html
import re
from typing import Any

_ENTITY_RE = re.compile(r"&(#\d+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_INVALID_URL_CHARS = re.compile(r"[^a-zA-Z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\uffff]")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_PHP_FILE_RE = re.compile(r"^[a-z0-9-]+?\.php", re.IGNORECASE)

ALLOWED_PROTOCOLS = frozenset(
    {
        "http",
        "https",
        "ftp",
        "ftps",
        "mailto",
        "news",
        "irc",
        "gopher",
        "nntp",
        "feed",
        "telnet",
        "mms",
        "rtsp",
        "sms",
        "svn",
        "tel",
        "fax",
        "xmpp",
        "webcal",
        "urn",
    }
)


def _escape(text: str) -> str:
    return html.escape(text, quote=True).replace("&#x27;", "&#039;")


def esc_attr(text: Any) -> str:
    """Escape ``text`` for use inside a double-quoted HTML attribute.

    Entities already present in ``text`` are kept as they are, so escaping
    twice yields the same result as escaping once.
    """

    if text is None:
        return ""
    value = str(text)
    if not value:
        return ""

    parts = []
    position = 0
    for match in _ENTITY_RE.finditer(value):
        parts.append(_escape(value[position:match.start()]))
        parts.append(match.group(0))
        position = match.end()
    parts.append(_escape(value[position:]))
    return "".join(parts)


def esc_url(url: Any) -> str:
    """Sanitise ``url`` for an ``href`` attribute.

    Returns an empty string when the URL uses a scheme outside
    :data:`ALLOWED_PROTOCOLS`.
    """

    if url is None:
        return ""
    value = str(url).strip()
    if not value:
        return ""

    value = value.replace(" ", "%20")
    value = _INVALID_URL_CHARS.sub("", value)
    if not value:
        return ""

    if ":" not in value and value[0] not in "/#?" and not _PHP_FILE_RE.match(value):
        value = "http://" + value

    scheme = _SCHEME_RE.match(value)
    if scheme and scheme.group(1).lower() not in ALLOWED_PROTOCOLS:
        return ""

    value = re.sub(r"&(?!#?\w+;)", "&#038;", value)
    value = value.replace("&amp;", "&#038;")
    return value.replace("'", "&#039;")


__all__ = ["ALLOWED_PROTOCOLS", "esc_attr", "esc_url"]
