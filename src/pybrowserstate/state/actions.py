"""Actions accepted by the browser store.

Actions are pure data.  Each variant carries a ``type`` tag so that a
plain dict can be validated back into the right variant with
:func:`parse_action`.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from pybrowserstate.models._base import FrozenModel


class BookmarkedStateChange(FrozenModel):
    type: Literal["bookmarked_state_change"] = "bookmarked_state_change"
    bookmarked: bool


class ReadableStateChange(FrozenModel):
    type: Literal["readable_state_change"] = "readable_state_change"
    readable: bool


class ReaderActiveStateChange(FrozenModel):
    type: Literal["reader_active_state_change"] = "reader_active_state_change"
    active: bool


class AppLinkStateChange(FrozenModel):
    type: Literal["app_link_state_change"] = "app_link_state_change"
    is_app_link: bool


class BounceNeededChange(FrozenModel):
    """Request the quick action sheet to bounce.

    One-directional: no action clears the flag again.
    """

    type: Literal["bounce_needed_change"] = "bounce_needed_change"


QuickActionSheetAction = (
    BookmarkedStateChange | ReadableStateChange | ReaderActiveStateChange | AppLinkStateChange | BounceNeededChange
)
"""Actions that modify :class:`~pybrowserstate.models.QuickActionSheetState`."""

# Union of every action family handled by ``browser_state_reducer``.
BrowserAction = QuickActionSheetAction

_BROWSER_ACTION_ADAPTER: TypeAdapter[BrowserAction] = TypeAdapter(
    Annotated[BrowserAction, Field(discriminator="type")]
)


def parse_action(data: dict[str, Any]) -> BrowserAction:
    """Validate *data* into the action variant named by its ``type`` key.

    Raises ``pydantic.ValidationError`` for unknown tags or bad payloads.
    """
    return _BROWSER_ACTION_ADAPTER.validate_python(data)
