"""Tests for the immutable tip value types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pybrowserstate.models import ContentRef, Tip, TipContent, TipPriority, TipType


def _content() -> TipContent:
    return TipContent(
        icon=ContentRef("ic_info"),
        title=ContentRef("title"),
        description=ContentRef("description"),
        button=ContentRef("button"),
    )


class TestTip:
    def test_defaults(self) -> None:
        tip = Tip(id="t", content=_content(), priority=TipPriority.LOW)

        assert tip.type is TipType.BUTTON
        assert tip.setting_key is None
        assert tip.color_icon is True
        assert tip.action() is None

    def test_switch_requires_setting_key(self) -> None:
        with pytest.raises(ValidationError):
            Tip(id="switch", content=_content(), priority=TipPriority.LOW, type=TipType.SWITCH)

    def test_switch_with_setting_key(self) -> None:
        tip = Tip(
            id="switch",
            content=_content(),
            priority=TipPriority.LOW,
            type=TipType.SWITCH,
            setting_key="display_tips",
        )
        assert tip.setting_key == "display_tips"

    def test_is_frozen(self) -> None:
        tip = Tip(id="t", content=_content(), priority=TipPriority.HIGH)

        with pytest.raises(ValidationError):
            tip.priority = TipPriority.LOW  # type: ignore[misc]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tip(id="t", content=_content(), priority=TipPriority.LOW, colour="red")  # type: ignore[call-arg]

    def test_dump_excludes_action(self) -> None:
        tip = Tip(id="t", content=_content(), priority=TipPriority.MEDIUM)

        dumped = tip.model_dump(mode="json")

        assert "action" not in dumped
        assert dumped["priority"] == "medium"
        assert dumped["content"]["icon"] == "ic_info"

    def test_priority_parsed_from_string(self) -> None:
        tip = Tip.model_validate({"id": "t", "content": _content(), "priority": "high"})

        assert tip.priority is TipPriority.HIGH
