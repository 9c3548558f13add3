"""In-place structural edits on fragment trees."""

from __future__ import annotations

import logging

from fragedit.exceptions import InvalidOperationError
from fragedit.html_parser import parse
from fragedit.nodes import Node, NodeKind

logger = logging.getLogger(__name__)


def remove(node: Node) -> None:
    """Detach ``node`` and its subtree from its parent.

    The remaining siblings keep their order. The detached subtree stays
    intact and can be serialized on its own.

    Raises:
        InvalidOperationError: If ``node`` is the tree root or has no parent.
    """
    if node.kind is NodeKind.FRAGMENT:
        raise InvalidOperationError("cannot remove the root node")
    parent = node.parent
    if parent is None:
        raise InvalidOperationError(f"cannot remove {node!r}: node is not attached to a tree")
    index = node.index_in_parent()
    if index is None:
        raise InvalidOperationError(f"{node!r} is not among its parent's children")
    del parent.children[index]
    node._parent_ref = None
    logger.debug("Removed %r from %r", node, parent)


def append_html(node: Node, html: str) -> list[Node]:
    """Parse ``html`` and append the resulting nodes as the last children of ``node``.

    Args:
        node: An element or fragment root that can hold children.
        html: Fragment markup for the new children.

    Returns:
        The newly attached top-level nodes, in order.

    Raises:
        ParseError: If ``html`` is malformed. ``node`` is left unchanged.
        InvalidOperationError: If ``node`` cannot have children.
    """
    _check_container(node)
    new_nodes = _parsed_nodes(html)
    for child in new_nodes:
        node.append_child(child)
    return new_nodes


def set_html(node: Node, html: str) -> list[Node]:
    """Replace all children of ``node`` with the nodes parsed from ``html``.

    Raises:
        ParseError: If ``html`` is malformed. ``node`` is left unchanged.
        InvalidOperationError: If ``node`` cannot have children.
    """
    _check_container(node)
    new_nodes = _parsed_nodes(html)
    for child in list(node.children):
        remove(child)
    for child in new_nodes:
        node.append_child(child)
    return new_nodes


def replace_with_html(node: Node, html: str) -> list[Node]:
    """Put the nodes parsed from ``html`` where ``node`` is, then remove ``node``.

    Returns:
        The nodes inserted in place of ``node``.

    Raises:
        ParseError: If ``html`` is malformed. The tree is left unchanged.
        InvalidOperationError: If ``node`` is the root or is not attached.
    """
    if node.kind is NodeKind.FRAGMENT:
        raise InvalidOperationError("cannot replace the root node")
    parent = node.parent
    index = node.index_in_parent()
    if parent is None or index is None:
        raise InvalidOperationError(f"cannot replace {node!r}: node is not attached to a tree")
    new_nodes = _parsed_nodes(html)
    for offset, child in enumerate(new_nodes):
        parent.insert_child(index + offset, child)
    remove(node)
    return new_nodes


def _check_container(node: Node) -> None:
    if node.kind in (NodeKind.TEXT, NodeKind.COMMENT, NodeKind.DOCTYPE) or node.is_void:
        raise InvalidOperationError(f"{node!r} cannot have children")


def _parsed_nodes(html: str) -> list[Node]:
    """Parse ``html`` and detach its top-level nodes from their temporary root."""
    tree = parse(html)
    nodes = list(tree.top_level)
    for child in nodes:
        remove(child)
    return nodes
