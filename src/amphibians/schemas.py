"""
Domain models for the amphibians app.

The API client validates raw JSON into these models; everything downstream
(repository, view model, renderers) works with them only.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Amphibian(BaseModel):
    """A single amphibian record as served by the ``amphibians`` endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str
    type: str
    description: str
    img_src: str = Field(..., alias="imgSrc", description="Image URL (may be empty)")

    @property
    def title(self) -> str:
        """Card heading, e.g. ``Frog (Toad)``."""
        return f"{self.name} ({self.type})"
