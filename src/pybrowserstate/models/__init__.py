"""Immutable value types for browser state and tips."""

from pybrowserstate.models._base import ContentRef, FrozenModel
from pybrowserstate.models.state import BrowserState, QuickActionSheetState
from pybrowserstate.models.tip import Tip, TipContent, TipPriority, TipType

__all__ = [
    "BrowserState",
    "ContentRef",
    "FrozenModel",
    "QuickActionSheetState",
    "Tip",
    "TipContent",
    "TipPriority",
    "TipType",
]
