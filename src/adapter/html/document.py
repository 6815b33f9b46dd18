"""HTML document adapter.

Wraps a BeautifulSoup tree behind a small query surface so the
extraction rules never touch bs4 objects directly. Selectors are
soupsieve patterns compiled once at import time; an invalid selector
fails loudly there instead of on the first page.
"""

from __future__ import annotations

import logging

import soupsieve as sv
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from domain.model.errors import ParseError

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


class Selector:
    """A validated, precompiled CSS selector."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._compiled = sv.compile(pattern)

    def __repr__(self) -> str:
        return f"Selector({self.pattern!r})"


class Node:
    """One element of a parsed document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def select_all(self, selector: Selector) -> list[Node]:
        """All descendants matching selector, in document order."""
        return [Node(tag) for tag in selector._compiled.select(self._tag)]

    def select_first(self, selector: Selector) -> Node | None:
        """First descendant matching selector, or None."""
        tag = selector._compiled.select_one(self._tag)
        return Node(tag) if tag is not None else None

    def next_element_sibling(self) -> Node | None:
        """Next sibling that is an element (text nodes skipped)."""
        sibling = self._tag.find_next_sibling()
        return Node(sibling) if sibling is not None else None

    def text(self) -> str:
        """Concatenated text of the node and all its descendants."""
        return self._tag.get_text()

    @property
    def name(self) -> str:
        return self._tag.name


class Document(Node):
    """Root of a parsed page."""


def parse_document(markup: str | bytes | None) -> Document:
    """Parse raw markup into a queryable Document.

    Malformed fragments are repaired by the parser and simply yield fewer
    matches. Only input the builder cannot read at all raises.

    Raises:
        ParseError: If no tree can be produced.
    """
    if markup is None:
        raise ParseError("No markup to parse")
    try:
        soup = BeautifulSoup(markup, HTML_PARSER)
    except (ParserRejectedMarkup, TypeError) as e:
        logger.warning("Markup rejected by parser", extra={"error": str(e)})
        raise ParseError(f"Markup could not be parsed: {e}") from e
    return Document(soup)
