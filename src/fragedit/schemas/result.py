"""Edit pipeline output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EditResult(BaseModel):
    """Final edit output.

    Attributes:
        html: The serialized fragment after all removals.
        removed: Total number of elements removed.
        removed_by_tag: Elements removed per requested tag, in request order.
    """

    html: str
    removed: int = Field(default=0, ge=0)
    removed_by_tag: dict[str, int] = Field(default_factory=dict)
