"""Custom exceptions for fragedit."""

from __future__ import annotations


class FragmentEditorError(Exception):
    """Base exception for fragedit operations."""


class ParseError(FragmentEditorError):
    """Input markup is not a well-formed fragment.

    Attributes:
        position: Zero-based offset of the problem in the input.
        line: One-based line number of ``position``.
        column: One-based column number of ``position``.
    """

    def __init__(self, message: str, *, position: int, line: int, column: int) -> None:
        super().__init__(f"{message} at line {line}, column {column}")
        self.position = position
        self.line = line
        self.column = column


class InvalidOperationError(FragmentEditorError):
    """Structural misuse of the tree, such as removing the root."""


class FetchError(FragmentEditorError):
    """Error while loading markup over the network."""


class InputReadError(FragmentEditorError):
    """A local input file exists but cannot be read as UTF-8 text."""
