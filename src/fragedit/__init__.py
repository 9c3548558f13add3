"""fragedit: parse HTML fragments, remove elements by tag, serialize back."""

from fragedit.editor import EditOptions, FragmentEditor, edit_fragment
from fragedit.exceptions import (
    FetchError,
    FragmentEditorError,
    InputReadError,
    InvalidOperationError,
    ParseError,
)
from fragedit.html_parser import parse
from fragedit.manipulation import append_html, remove, replace_with_html, set_html
from fragedit.nodes import Node, NodeKind, Tree
from fragedit.query import TagQuery, find_by_tag
from fragedit.schemas import EditResult
from fragedit.serializer import inner_html, outer_html, serialize, text_content

__all__ = [
    "EditOptions",
    "EditResult",
    "FetchError",
    "FragmentEditor",
    "FragmentEditorError",
    "InputReadError",
    "InvalidOperationError",
    "Node",
    "NodeKind",
    "ParseError",
    "TagQuery",
    "Tree",
    "append_html",
    "edit_fragment",
    "find_by_tag",
    "inner_html",
    "outer_html",
    "parse",
    "remove",
    "replace_with_html",
    "serialize",
    "set_html",
    "text_content",
]
