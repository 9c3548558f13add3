"""Render fragment trees back to HTML."""

from __future__ import annotations

import html as html_lib

from fragedit.nodes import Node, NodeKind, Tree
from fragedit.query import iter_descendants


def serialize(tree: Tree) -> str:
    """Render ``tree`` to HTML exactly as its nodes were written.

    Tag casing, attribute text, whitespace and child order are emitted as
    parsed; nothing is re-indented or normalized.
    """
    return inner_html(tree.root)


def outer_html(node: Node) -> str:
    """Render ``node`` including its own start and end tags."""
    return _render([node])


def inner_html(node: Node) -> str:
    """Render the children of ``node`` without the node's own tags."""
    return _render(node.children)


def text_content(node: Node) -> str:
    """Concatenate the text below ``node``, skipping comments.

    Entities are decoded except inside raw-text elements such as
    ``<script>`` and ``<style>``, whose content is taken literally.
    """
    nodes = [node] if node.kind is NodeKind.TEXT else iter_descendants(node)
    return "".join(_decoded_text(item) for item in nodes if item.kind is NodeKind.TEXT)


def _decoded_text(node: Node) -> str:
    parent = node.parent
    if parent is not None and parent.is_raw_text:
        return node.text or ""
    return html_lib.unescape(node.text or "")


def _render(nodes: list[Node]) -> str:
    parts: list[str] = []
    # Pending work in reverse order: nodes still to open, or end tags to emit.
    stack: list[Node | str] = list(reversed(nodes))
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        if item.kind is NodeKind.TEXT:
            parts.append(item.text or "")
            continue
        if item.kind is NodeKind.COMMENT:
            parts.append(f"<!--{item.text or ''}-->")
            continue
        if item.kind is NodeKind.DOCTYPE:
            parts.append(f"<!{item.text or ''}>")
            continue
        if item.is_element:
            parts.append(f"<{item.tag}{item.attrs_source}{'/' if item.self_closing else ''}>")
            end_tag = _end_tag(item)
            if end_tag:
                stack.append(end_tag)
        stack.extend(reversed(item.children))
    return "".join(parts)


def _end_tag(node: Node) -> str | None:
    if node.end_tag is not None:
        return node.end_tag
    if node.self_closing or node.is_void:
        return None
    return f"</{node.tag}>"
