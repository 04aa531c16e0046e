from __future__ import annotations

from pybrowserstate.models.tip import TipPriority, TipType
from pybrowserstate.tips.catalog import (
    DISPLAY_TIPS_KEY,
    OPEN_LINKS_IN_PRIVATE_TAB_KEY,
    TipCatalog,
    TipEffects,
    build_forced_tip_pool,
    build_tip_pool,
)
from pybrowserstate.tips.settings import TipAvailability


class _Settings:
    def is_default_browser(self) -> bool:
        return True

    def should_display_tips(self) -> bool:
        return False

    def should_highlight_recent_update(self) -> bool:
        return True


def test_catalog_priorities_and_kinds() -> None:
    catalog = TipCatalog()

    assert catalog.default_browser.priority is TipPriority.LOW
    assert catalog.default_browser.color_icon is False
    assert catalog.whats_new.priority is TipPriority.MEDIUM
    assert catalog.moving_notice.priority is TipPriority.HIGH
    assert catalog.private_browsing.type is TipType.SWITCH
    assert catalog.private_browsing.setting_key == OPEN_LINKS_IN_PRIVATE_TAB_KEY
    assert catalog.hide_tips.type is TipType.SWITCH
    assert catalog.hide_tips.setting_key == DISPLAY_TIPS_KEY


def test_effects_are_carried_not_invoked() -> None:
    calls: list[str] = []
    effects = TipEffects(
        open_default_browser_settings=lambda: calls.append("default"),
        open_whats_new=lambda: calls.append("whats_new"),
        open_moving_notice=lambda: calls.append("moving"),
    )

    catalog = TipCatalog(effects)
    build_forced_tip_pool(catalog)
    assert calls == []

    catalog.whats_new.action()
    catalog.default_browser.action()
    catalog.moving_notice.action()
    catalog.hide_tips.action()
    assert calls == ["whats_new", "default", "moving"]


def test_pool_order_for_every_availability() -> None:
    catalog = TipCatalog()
    switches = [catalog.private_browsing, catalog.hide_tips]

    assert list(build_tip_pool(TipAvailability(), catalog)) == [catalog.default_browser, *switches]
    assert list(build_tip_pool(TipAvailability(is_default_browser=True), catalog)) == switches
    assert list(build_tip_pool(TipAvailability(should_highlight_recent_update=True), catalog)) == [
        catalog.default_browser,
        catalog.whats_new,
        *switches,
    ]
    assert list(
        build_tip_pool(TipAvailability(is_default_browser=True, should_highlight_recent_update=True), catalog)
    ) == [catalog.whats_new, *switches]


def test_normal_pool_never_contains_moving_notice() -> None:
    catalog = TipCatalog()
    pool = build_tip_pool(TipAvailability(should_highlight_recent_update=True), catalog)

    assert catalog.moving_notice not in pool
    assert catalog.moving_notice in build_forced_tip_pool(catalog)


def test_availability_from_settings() -> None:
    availability = TipAvailability.from_settings(_Settings())

    assert availability == TipAvailability(is_default_browser=True, should_highlight_recent_update=True)
