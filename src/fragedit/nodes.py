"""Owned tree model for parsed HTML fragments."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum

from fragedit.exceptions import InvalidOperationError

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
# Content of these elements is kept as a single text child up to the matching end tag.
RAW_TEXT_ELEMENTS = frozenset({"script", "style", "textarea", "title"})


class NodeKind(str, Enum):
    """Kinds of node a fragment tree can hold."""

    FRAGMENT = "fragment"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"


@dataclass(eq=False)
class Node:
    """One element, text span, comment or doctype in a fragment tree.

    Children are owned through ``children``. The parent link is a weak
    reference used for lookup only and never keeps the parent alive.

    Attributes:
        kind: What this node represents.
        tag: Element name as written in the source, empty for non-elements.
        text: Raw source text for text, comment and doctype nodes.
        attrs_source: Verbatim attribute text of the start tag.
        self_closing: Whether the start tag was written as ``<tag/>``.
        end_tag: Verbatim end tag, ``None`` for void and self-closing elements.
        children: Owned child nodes in document order.
    """

    kind: NodeKind
    tag: str = ""
    text: str | None = None
    attrs_source: str = ""
    self_closing: bool = False
    end_tag: str | None = None
    children: list[Node] = field(default_factory=list)
    _parent_ref: weakref.ref[Node] | None = field(default=None, repr=False)

    @property
    def parent(self) -> Node | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def is_void(self) -> bool:
        return self.is_element and self.tag.lower() in VOID_ELEMENTS

    @property
    def is_raw_text(self) -> bool:
        return self.is_element and self.tag.lower() in RAW_TEXT_ELEMENTS

    @property
    def next_sibling(self) -> Node | None:
        return self._sibling(1)

    @property
    def prev_sibling(self) -> Node | None:
        return self._sibling(-1)

    @property
    def next_element_sibling(self) -> Node | None:
        node = self.next_sibling
        while node is not None and not node.is_element:
            node = node.next_sibling
        return node

    @property
    def prev_element_sibling(self) -> Node | None:
        node = self.prev_sibling
        while node is not None and not node.is_element:
            node = node.prev_sibling
        return node

    def index_in_parent(self) -> int | None:
        """Position of this node among its parent's children, or None if detached."""
        parent = self.parent
        if parent is None:
            return None
        for index, child in enumerate(parent.children):
            if child is self:
                return index
        return None

    def matches_tag(self, tag: str) -> bool:
        """Return True for an element whose name case-insensitively equals ``tag``."""
        return self.is_element and self.tag.casefold() == tag.casefold()

    def append_child(self, child: Node) -> None:
        """Take ownership of ``child`` as the last child of this node."""
        self.insert_child(len(self.children), child)

    def insert_child(self, index: int, child: Node) -> None:
        """Take ownership of ``child`` at position ``index`` among the children."""
        if self.kind in (NodeKind.TEXT, NodeKind.COMMENT, NodeKind.DOCTYPE):
            raise InvalidOperationError(f"{self.kind.value} nodes cannot have children")
        if self.is_void:
            raise InvalidOperationError(f"void element <{self.tag}> cannot have children")
        if child.kind is NodeKind.FRAGMENT:
            raise InvalidOperationError("a fragment root cannot be nested")
        if child.parent is not None:
            raise InvalidOperationError("node already has a parent")
        self.children.insert(index, child)
        child._parent_ref = weakref.ref(self)
        # <tag/> cannot hold content, so the element now needs an end tag
        self.self_closing = False

    def _sibling(self, offset: int) -> Node | None:
        index = self.index_in_parent()
        if index is None:
            return None
        siblings = self.parent.children
        target = index + offset
        if 0 <= target < len(siblings):
            return siblings[target]
        return None

    def __repr__(self) -> str:
        if self.is_element:
            return f"<{self.tag}>"
        if self.kind is NodeKind.FRAGMENT:
            return "#fragment"
        return f"#{self.kind.value} {self.text!r}"


@dataclass
class Tree:
    """A parsed fragment: a synthetic root whose children are the top-level nodes."""

    root: Node = field(default_factory=lambda: Node(NodeKind.FRAGMENT))

    def __post_init__(self) -> None:
        if self.root.kind is not NodeKind.FRAGMENT:
            raise InvalidOperationError("tree root must be a fragment node")

    @property
    def top_level(self) -> list[Node]:
        return self.root.children
