"""Parse well-formed HTML fragments into an owned node tree."""

from __future__ import annotations

import logging
import re

from fragedit.exceptions import ParseError
from fragedit.nodes import RAW_TEXT_ELEMENTS, VOID_ELEMENTS, Node, NodeKind, Tree

logger = logging.getLogger(__name__)

_TAG_NAME = r"[A-Za-z][A-Za-z0-9:._-]*"
_ATTRIBUTES = r"""(?:\s+[^\s"'>/=]+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?)*\s*"""
_START_TAG_RE = re.compile(rf"<({_TAG_NAME})({_ATTRIBUTES})(/?)>")
_END_TAG_RE = re.compile(rf"</({_TAG_NAME})\s*>")
# A "<" followed by one of these starts markup; anything else is literal text.
_MARKUP_START_RE = re.compile(r"<(?:[A-Za-z]|/[A-Za-z]|!)")


def parse(html: str) -> Tree:
    """Build a node tree from a well-formed HTML fragment.

    No recovery is attempted: every non-void element must be closed by a
    matching end tag before the end of input.

    Args:
        html: The fragment markup.

    Returns:
        A tree whose root's children are the fragment's top-level nodes.

    Raises:
        ParseError: If the markup cannot be decomposed into balanced tags.
    """
    tree = _FragmentBuilder(html).build()
    logger.debug("Parsed fragment of %d chars into %d top-level nodes", len(html), len(tree.top_level))
    return tree


class _FragmentBuilder:
    def __init__(self, html: str) -> None:
        self.html = html
        self.tree = Tree()
        self.unfinished: list[Node] = [self.tree.root]
        self.opened_at: list[int] = [0]
        self.pending_text: list[str] = []

    def build(self) -> Tree:
        html = self.html
        pos = 0
        while pos < len(html):
            if _MARKUP_START_RE.match(html, pos):
                self.flush_text()
                pos = self.add_markup(pos)
                continue
            next_lt = html.find("<", pos + 1)
            end = len(html) if next_lt == -1 else next_lt
            self.pending_text.append(html[pos:end])
            pos = end
        self.flush_text()
        return self.finish()

    def add_markup(self, pos: int) -> int:
        html = self.html
        if html.startswith("<!--", pos):
            close = html.find("-->", pos + 4)
            if close == -1:
                raise self.error("unterminated comment", pos)
            self.current.append_child(Node(NodeKind.COMMENT, text=html[pos + 4 : close]))
            return close + 3
        if html.startswith("<!", pos):
            close = html.find(">", pos + 2)
            if close == -1:
                raise self.error("unterminated declaration", pos)
            self.current.append_child(Node(NodeKind.DOCTYPE, text=html[pos + 2 : close]))
            return close + 1
        if html.startswith("</", pos):
            match = _END_TAG_RE.match(html, pos)
            if not match:
                raise self.error("malformed end tag", pos)
            self.close_element(match.group(1), match.group(0), pos)
            return match.end()

        match = _START_TAG_RE.match(html, pos)
        if not match:
            raise self.error("malformed start tag", pos)
        tag, attrs_source, slash = match.groups()
        node = Node(
            NodeKind.ELEMENT,
            tag=tag,
            attrs_source=attrs_source,
            self_closing=bool(slash),
        )
        self.current.append_child(node)
        name = tag.lower()
        if node.self_closing or name in VOID_ELEMENTS:
            return match.end()
        if name in RAW_TEXT_ELEMENTS:
            return self.add_raw_text(node, match.end(), pos)
        self.unfinished.append(node)
        self.opened_at.append(pos)
        return match.end()

    def add_raw_text(self, node: Node, start: int, opened_at: int) -> int:
        end_re = re.compile(rf"</{re.escape(node.tag)}\s*>", re.IGNORECASE)
        match = end_re.search(self.html, start)
        if not match:
            raise self.error(f"unclosed <{node.tag}>", opened_at)
        if match.start() > start:
            node.append_child(Node(NodeKind.TEXT, text=self.html[start : match.start()]))
        node.end_tag = match.group(0)
        return match.end()

    def close_element(self, tag: str, end_tag: str, pos: int) -> None:
        name = tag.lower()
        if name in VOID_ELEMENTS:
            raise self.error(f"end tag for void element </{tag}>", pos)
        if len(self.unfinished) == 1:
            raise self.error(f"unexpected end tag </{tag}>", pos)
        node = self.current
        if node.tag.lower() != name:
            raise self.error(f"mismatched end tag </{tag}>, expected </{node.tag}>", pos)
        node.end_tag = end_tag
        self.unfinished.pop()
        self.opened_at.pop()

    def flush_text(self) -> None:
        if self.pending_text:
            self.current.append_child(Node(NodeKind.TEXT, text="".join(self.pending_text)))
            self.pending_text = []

    def finish(self) -> Tree:
        if len(self.unfinished) > 1:
            node = self.unfinished[-1]
            raise self.error(f"unclosed <{node.tag}>", self.opened_at[-1])
        return self.tree

    @property
    def current(self) -> Node:
        return self.unfinished[-1]

    def error(self, message: str, pos: int) -> ParseError:
        line = self.html.count("\n", 0, pos) + 1
        column = pos - (self.html.rfind("\n", 0, pos) + 1) + 1
        return ParseError(message, position=pos, line=line, column=column)
