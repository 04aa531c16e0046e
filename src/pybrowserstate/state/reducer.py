"""Pure reducers for the browser store.

The top-level reducer dispatches on the action family and delegates to
a child reducer.  Every branch returns a newly built root; nothing is
mutated in place.  Each dispatch ends in ``assert_never`` so a type
checker reports any variant added to a union but not handled here.
"""

from __future__ import annotations

from typing import assert_never

from pybrowserstate.models.state import BrowserState, QuickActionSheetState
from pybrowserstate.state.actions import (
    AppLinkStateChange,
    BookmarkedStateChange,
    BounceNeededChange,
    BrowserAction,
    QuickActionSheetAction,
    ReadableStateChange,
    ReaderActiveStateChange,
)

_QUICK_ACTION_SHEET_ACTIONS = (
    BookmarkedStateChange,
    ReadableStateChange,
    ReaderActiveStateChange,
    AppLinkStateChange,
    BounceNeededChange,
)


def _with_sheet(state: BrowserState, sheet: QuickActionSheetState) -> BrowserState:
    return state.model_copy(update={"quick_action_sheet_state": sheet})


def reduce_quick_action_sheet(state: BrowserState, action: QuickActionSheetAction) -> BrowserState:
    """Apply a quick action sheet action to *state*."""
    sheet = state.quick_action_sheet_state
    if isinstance(action, BookmarkedStateChange):
        return _with_sheet(state, sheet.model_copy(update={"bookmarked": action.bookmarked}))
    if isinstance(action, ReadableStateChange):
        return _with_sheet(state, sheet.model_copy(update={"readable": action.readable}))
    if isinstance(action, ReaderActiveStateChange):
        return _with_sheet(state, sheet.model_copy(update={"reader_active": action.active}))
    if isinstance(action, AppLinkStateChange):
        return _with_sheet(state, sheet.model_copy(update={"is_app_link": action.is_app_link}))
    if isinstance(action, BounceNeededChange):
        return _with_sheet(state, sheet.model_copy(update={"bounce_needed": True}))
    assert_never(action)


def browser_state_reducer(state: BrowserState, action: BrowserAction) -> BrowserState:
    """Top-level reducer: route *action* to the reducer of its family."""
    if isinstance(action, _QUICK_ACTION_SHEET_ACTIONS):
        return reduce_quick_action_sheet(state, action)
    assert_never(action)
