"""
BeautifulSoup-backed, read-only query facade over a fetched page.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Optional

from bs4 import BeautifulSoup, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
JSON_LD_SELECTOR = 'script[type="application/ld+json"]'

# Text under these tags is never rendered.
_HIDDEN_TAGS = frozenset({"script", "style", "noscript", "template"})
_NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def _type_values(node: Any) -> list[str]:
    """`@type` of a JSON-LD node as a list of strings (scalar or list valued). Empty values are dropped."""
    if not isinstance(node, dict):
        return []
    value = node.get("@type")
    values = value if isinstance(value, list) else [value]
    return [str(item) for item in values if item not in (None, "")]


@dataclass(frozen=True)
class JsonLdBlock:
    """One successfully parsed `application/ld+json` script."""

    data: Any

    @property
    def types(self) -> frozenset[str]:
        """Every `@type` declared at the top level of the block, flattened."""
        nodes = self.data if isinstance(self.data, list) else [self.data]
        return frozenset(t for node in nodes for t in _type_values(node))

    @property
    def label(self) -> str:
        """Human-readable type label, e.g. "Organization" or "WebSite, BreadcrumbList"."""
        if isinstance(self.data, dict) and _type_values(self.data):
            return ", ".join(_type_values(self.data))
        if isinstance(self.data, list):
            return ", ".join(", ".join(_type_values(node)) or "Unknown" for node in self.data)
        return "Unknown"


class ParsedDocument:
    """
    Structural queries over parsed markup.

    The underlying tree is never modified after construction, so one
    instance can be shared by every check of a scan.
    """

    def __init__(self, markup: str):
        self._soup = BeautifulSoup(markup or "", "html.parser")

    def select_all(self, *tag_names: str) -> list[Tag]:
        """Elements with any of the given tag names, in document order."""
        return self._soup.find_all(list(tag_names))

    def select(self, selector: str) -> list[Tag]:
        return self._soup.select(selector)

    def get_attribute(self, selector: str, name: str) -> Optional[str]:
        """Attribute of the first element matching a CSS selector."""
        element = self._soup.select_one(selector)
        if element is None:
            return None
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def get_text(self, *tag_names: str) -> str:
        """Visible text of every element with the given tag names, joined by spaces."""
        return " ".join(self._visible_text(element) for element in self.select_all(*tag_names))

    def visible_text(self) -> str:
        """Visible text of the page body (the whole document when there is no <body>)."""
        return self._body_text

    @cached_property
    def _body_text(self) -> str:
        root = self._soup.body or self._soup
        return self._visible_text(root)

    def json_ld_blocks(self) -> list[JsonLdBlock]:
        """Parsed JSON-LD objects and arrays; anything that fails to decode is skipped."""
        return list(self._json_ld_blocks)

    @cached_property
    def _json_ld_blocks(self) -> tuple[JsonLdBlock, ...]:
        blocks = []
        for script in self.select(JSON_LD_SELECTOR):
            try:
                data = json.loads(script.get_text())
            except (ValueError, RecursionError):
                continue
            # null and bare scalars carry no structured data
            if not isinstance(data, (dict, list)):
                continue
            blocks.append(JsonLdBlock(data=data))
        return tuple(blocks)

    @staticmethod
    def _visible_text(root: Tag) -> str:
        """Single pre-order walk with an explicit stack; hidden subtrees are never entered."""
        parts = []
        stack = [root]
        while stack:
            node = stack.pop()
            if isinstance(node, Tag):
                if node.name in _HIDDEN_TAGS:
                    continue
                stack.extend(reversed(node.contents))
            elif isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS):
                parts.append(str(node))
        return " ".join(parts)
