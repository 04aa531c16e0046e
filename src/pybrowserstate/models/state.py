"""Browser screen state tree."""

from __future__ import annotations

from pybrowserstate.models._base import FrozenModel


class QuickActionSheetState(FrozenModel):
    """Flags describing the reading-affordance panel for the displayed content."""

    readable: bool = False
    """Whether the current session can display a reader view."""

    bookmarked: bool = False
    """Whether the current session is already bookmarked."""

    reader_active: bool = False
    """Whether the current session is in reader mode."""

    bounce_needed: bool = False
    """Whether the quick action sheet should bounce to draw attention."""

    is_app_link: bool = False
    """Whether the current page can be opened in an installed app."""


class BrowserState(FrozenModel):
    """Root of the browser screen state.

    Other features may add sibling substates next to
    ``quick_action_sheet_state``.
    """

    quick_action_sheet_state: QuickActionSheetState = QuickActionSheetState()

    @classmethod
    def initial(cls) -> BrowserState:
        """Return the root with every flag cleared."""
        return cls(quick_action_sheet_state=QuickActionSheetState())
