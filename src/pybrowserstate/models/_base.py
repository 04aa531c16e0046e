"""Base model for pybrowserstate value types.

Every state, action and tip type inherits from :class:`FrozenModel`,
which makes instances immutable (assignment raises) and rejects
unknown fields.  Frozen pydantic models compare by value, so equality
of two roots implies equality of every nested field.
"""

from __future__ import annotations

from typing import NewType

from pydantic import BaseModel, ConfigDict

ContentRef = NewType("ContentRef", str)
"""Opaque reference to renderable content (icon, string resource).

The core carries these values but never interprets them; resolving a
reference to pixels or text belongs to the presentation layer.
"""


class FrozenModel(BaseModel):
    """Immutable, value-comparable base model."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
