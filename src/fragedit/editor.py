"""Fragment edit pipeline: parse, remove by tag, serialize."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fragedit.html_parser import parse
from fragedit.manipulation import remove
from fragedit.nodes import Node, Tree
from fragedit.query import TagQuery, find_by_tag
from fragedit.schemas import EditResult
from fragedit.serializer import serialize

logger = logging.getLogger(__name__)

DEMO_FRAGMENT = '<div><h1 class="foo">Hello, <i>world!</i></h1></div>'


class FragmentEditor:
    """The parse, lookup, remove and serialize operations as one unit."""

    @staticmethod
    def parse(html: str) -> Tree:
        return parse(html)

    @staticmethod
    def find_by_tag(tree: Tree, tag: str) -> TagQuery:
        return find_by_tag(tree, tag)

    @staticmethod
    def remove(node: Node) -> None:
        remove(node)

    @staticmethod
    def serialize(tree: Tree) -> str:
        return serialize(tree)


@dataclass
class EditOptions:
    """Options for a fragment edit.

    Attributes:
        remove_tags: Tag names whose elements are removed, applied in order.
    """

    remove_tags: list[str] = field(default_factory=list)


def edit_fragment(html: str, options: EditOptions | None = None) -> EditResult:
    """Parse ``html``, remove the requested tags, and serialize the result.

    Args:
        html: The fragment markup.
        options: Edit options. Uses defaults (no removals) if None.

    Returns:
        The serialized fragment with removal counts.

    Raises:
        ParseError: If ``html`` is not well formed. Nothing is removed.
        InvalidOperationError: If a requested tag name is empty.
    """
    opts = options or EditOptions()
    tree = parse(html)

    removed_by_tag: dict[str, int] = {}
    for tag in opts.remove_tags:
        count = find_by_tag(tree, tag).remove()
        removed_by_tag[tag] = removed_by_tag.get(tag, 0) + count
        logger.debug("Removed %d <%s> element(s)", count, tag)

    return EditResult(
        html=serialize(tree),
        removed=sum(removed_by_tag.values()),
        removed_by_tag=removed_by_tag,
    )
