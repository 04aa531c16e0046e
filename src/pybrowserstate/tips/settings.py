"""Settings collaborator consumed by the tip pool builder and selector."""

from __future__ import annotations

from typing import Protocol

from pybrowserstate.models._base import FrozenModel


class TipSettings(Protocol):
    """Read-only view of the user settings that drive tip availability."""

    def is_default_browser(self) -> bool: ...

    def should_display_tips(self) -> bool: ...

    def should_highlight_recent_update(self) -> bool: ...


class TipAvailability(FrozenModel):
    """Availability facts used to build a tip pool."""

    is_default_browser: bool = False
    should_highlight_recent_update: bool = False

    @classmethod
    def from_settings(cls, settings: TipSettings) -> TipAvailability:
        return cls(
            is_default_browser=settings.is_default_browser(),
            should_highlight_recent_update=settings.should_highlight_recent_update(),
        )
