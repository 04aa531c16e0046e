"""Known tips and the pool builders.

Tips are constructed once per :class:`TipCatalog`.  Pools are immutable
tuples; building one never touches a selector.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable

from pybrowserstate.models._base import ContentRef
from pybrowserstate.models.tip import Tip, TipContent, TipPriority, TipType, noop_action
from pybrowserstate.tips.settings import TipAvailability

_logger = logging.getLogger(__name__)

TipPool = tuple[Tip, ...]

#: Setting keys toggled by the switch tips.
OPEN_LINKS_IN_PRIVATE_TAB_KEY = "open_links_in_a_private_tab"
DISPLAY_TIPS_KEY = "display_tips"


@dataclasses.dataclass(frozen=True)
class TipEffects:
    """Effect handles supplied by the presentation layer.

    Each handle is attached to the matching tip as ``Tip.action``.
    The switch tips have no effect of their own: toggling the setting
    is the action.
    """

    open_default_browser_settings: Callable[[], None] = noop_action
    open_whats_new: Callable[[], None] = noop_action
    open_moving_notice: Callable[[], None] = noop_action


def _content(name: str, *, icon: str, button: str) -> TipContent:
    return TipContent(
        icon=ContentRef(icon),
        title=ContentRef(f"tip_{name}_header"),
        description=ContentRef(f"tip_{name}_description"),
        button=ContentRef(button),
    )


class TipCatalog:
    """The fixed set of tips this library knows about."""

    def __init__(self, effects: TipEffects | None = None) -> None:
        effects = effects or TipEffects()

        self.default_browser = Tip(
            id="default_browser",
            content=_content("default_browser", icon="ic_browser", button="tip_default_browser_button"),
            priority=TipPriority.LOW,
            color_icon=False,
            action=effects.open_default_browser_settings,
        )
        self.whats_new = Tip(
            id="whats_new",
            content=_content("whats_new", icon="ic_whats_new", button="tip_whats_new_button"),
            priority=TipPriority.MEDIUM,
            action=effects.open_whats_new,
        )
        self.private_browsing = Tip(
            id="private_browsing",
            content=_content(
                "always_private_tab",
                icon="ic_private_browsing",
                button="preferences_open_links_in_a_private_tab",
            ),
            priority=TipPriority.LOW,
            type=TipType.SWITCH,
            setting_key=OPEN_LINKS_IN_PRIVATE_TAB_KEY,
        )
        self.hide_tips = Tip(
            id="hide_tips",
            content=_content("hide_tips", icon="ic_info", button="preference_display_tips"),
            priority=TipPriority.LOW,
            type=TipType.SWITCH,
            setting_key=DISPLAY_TIPS_KEY,
        )
        # Only surfaced by the forced pool.
        self.moving_notice = Tip(
            id="moving_notice",
            content=_content("moving", icon="ic_warning", button="tip_moving_button"),
            priority=TipPriority.HIGH,
            action=effects.open_moving_notice,
        )


def build_tip_pool(availability: TipAvailability, catalog: TipCatalog) -> TipPool:
    """Build the candidate pool for a session.

    Order is fixed: the default browser tip (unless already default), the
    what's-new tip (when a recent update should be highlighted), then the
    private browsing and hide tips switches.
    """
    pool: list[Tip] = []
    if not availability.is_default_browser:
        pool.append(catalog.default_browser)
    if availability.should_highlight_recent_update:
        pool.append(catalog.whats_new)
    pool.extend((catalog.private_browsing, catalog.hide_tips))
    _logger.debug("Built tip pool ids=%s", [tip.id for tip in pool])
    return tuple(pool)


def build_forced_tip_pool(catalog: TipCatalog) -> TipPool:
    """Every known tip, regardless of availability. For demos and manual testing."""
    return (
        catalog.default_browser,
        catalog.whats_new,
        catalog.private_browsing,
        catalog.hide_tips,
        catalog.moving_notice,
    )
