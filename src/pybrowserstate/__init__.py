"""pybrowserstate - Browser screen state store and advisory tip selection."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybrowserstate")
except PackageNotFoundError:
    __version__ = "0+local"
from pybrowserstate.config import BrowserStateConfig
from pybrowserstate.exceptions import BrowserStateConfigError, BrowserStateError
from pybrowserstate.models import (
    BrowserState,
    ContentRef,
    QuickActionSheetState,
    Tip,
    TipContent,
    TipPriority,
    TipType,
)
from pybrowserstate.state.actions import (
    AppLinkStateChange,
    BookmarkedStateChange,
    BounceNeededChange,
    BrowserAction,
    QuickActionSheetAction,
    ReadableStateChange,
    ReaderActiveStateChange,
    parse_action,
)
from pybrowserstate.state.reducer import browser_state_reducer
from pybrowserstate.state.store import BrowserStore, Store, Subscription
from pybrowserstate.tips.catalog import TipCatalog, TipEffects, build_forced_tip_pool, build_tip_pool
from pybrowserstate.tips.selector import TipSelector
from pybrowserstate.tips.settings import TipAvailability, TipSettings

__all__ = [
    "__version__",
    "AppLinkStateChange",
    "BookmarkedStateChange",
    "BounceNeededChange",
    "BrowserAction",
    "BrowserState",
    "BrowserStateConfig",
    "BrowserStateConfigError",
    "BrowserStateError",
    "BrowserStore",
    "ContentRef",
    "QuickActionSheetAction",
    "QuickActionSheetState",
    "ReadableStateChange",
    "ReaderActiveStateChange",
    "Store",
    "Subscription",
    "Tip",
    "TipAvailability",
    "TipCatalog",
    "TipContent",
    "TipEffects",
    "TipPriority",
    "TipSelector",
    "TipSettings",
    "TipType",
    "browser_state_reducer",
    "build_forced_tip_pool",
    "build_tip_pool",
    "parse_action",
]
