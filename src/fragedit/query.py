"""Tag-name lookup over fragment trees."""

from __future__ import annotations

from typing import Callable, Iterator

from fragedit.exceptions import InvalidOperationError
from fragedit.manipulation import append_html, remove, replace_with_html, set_html
from fragedit.nodes import Node, Tree


class TagQuery:
    """Lazy, restartable sequence of elements with a given tag name.

    Every iteration walks the tree again in document order, so the results
    always reflect the tree as it is when iteration starts. Removing a
    yielded node while iterating is allowed; its subtree is then skipped.
    """

    def __init__(self, tree: Tree, tag: str) -> None:
        if not tag or not tag.strip():
            raise InvalidOperationError("tag name must not be empty")
        self.tree = tree
        self.tag = tag.strip()

    def __iter__(self) -> Iterator[Node]:
        for node in iter_descendants(self.tree.root):
            if node.matches_tag(self.tag):
                yield node

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"TagQuery({self.tag!r})"

    def first(self) -> Node | None:
        return next(iter(self), None)

    def exists(self) -> bool:
        return self.first() is not None

    def remove(self) -> int:
        """Remove every current match from the tree and return how many were removed."""
        removed = 0
        for node in self:
            remove(node)
            removed += 1
        return removed

    def append_html(self, html: str) -> int:
        """Append a fresh parse of ``html`` to every match; return the number of matches."""
        return self._apply(append_html, html)

    def set_html(self, html: str) -> int:
        """Replace the children of every match with a fresh parse of ``html``."""
        return self._apply(set_html, html)

    def replace_with_html(self, html: str) -> int:
        """Replace every match with a fresh parse of ``html``."""
        return self._apply(replace_with_html, html)

    def _apply(self, edit: Callable[[Node, str], list[Node]], html: str) -> int:
        # Matches are collected first so inserted markup is never matched again;
        # matches inside an already replaced subtree are skipped.
        applied = 0
        for node in list(self):
            if not _is_in_tree(node, self.tree):
                continue
            edit(node, html)
            applied += 1
        return applied


def find_by_tag(tree: Tree, tag: str) -> TagQuery:
    """Return the elements of ``tree`` whose tag case-insensitively equals ``tag``.

    Raises:
        InvalidOperationError: If ``tag`` is empty.
    """
    return TagQuery(tree, tag)


def iter_descendants(root: Node) -> Iterator[Node]:
    """Yield every node below ``root`` in pre-order.

    Child lists are snapshotted per level, and a node that loses its parent
    before its children are visited is not descended into.
    """
    stack = [iter(list(root.children))]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        if node.parent is None:
            continue
        yield node
        if node.parent is not None and node.children:
            stack.append(iter(list(node.children)))


def _is_in_tree(node: Node, tree: Tree) -> bool:
    current = node.parent
    while current is not None:
        if current is tree.root:
            return True
        current = current.parent
    return False
