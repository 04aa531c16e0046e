"""Advisory tip value types."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from pydantic import Field, model_validator

from pybrowserstate.models._base import ContentRef, FrozenModel


def noop_action() -> None:
    """Default effect handle: does nothing."""
    return None


class TipPriority(StrEnum):
    HIGH = "high"  # not dismissable, colored background
    MEDIUM = "medium"
    LOW = "low"


class TipType(StrEnum):
    BUTTON = "button"
    SWITCH = "switch"  # must carry a setting key


class TipContent(FrozenModel):
    """Renderable content of a tip, as opaque references."""

    icon: ContentRef
    title: ContentRef
    description: ContentRef
    button: ContentRef


class Tip(FrozenModel):
    """A candidate advisory prompt.

    ``action`` is an effect handle owned by the presentation layer.  It
    is invoked when the user acts on the tip; this library only carries it.
    """

    id: str
    content: TipContent
    priority: TipPriority
    type: TipType = TipType.BUTTON
    setting_key: str | None = None
    color_icon: bool = True
    action: Callable[[], None] = Field(default=noop_action, exclude=True)

    @model_validator(mode="after")
    def _require_setting_key_for_switch(self) -> Tip:
        if self.type is TipType.SWITCH and not self.setting_key:
            raise ValueError(f"switch tip {self.id!r} requires a setting_key")
        return self
