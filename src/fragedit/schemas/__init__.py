"""Shared schemas for fragedit."""

from fragedit.schemas.result import EditResult

__all__ = ["EditResult"]
