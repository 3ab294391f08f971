"""HTML parsing glue around BeautifulSoup."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup


def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML leniently; malformed markup yields a best-effort tree."""
    return BeautifulSoup(html or "", "html.parser")


def attr_text(tag: Any, name: str) -> str:
    """Read an attribute as a plain string.

    Missing attributes become "", multi-valued ones (class) are space-joined.
    """
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
