from __future__ import annotations

import pytest

from pybrowserstate.config import BrowserStateConfig
from pybrowserstate.exceptions import BrowserStateConfigError, BrowserStateError

_VARS = (
    "BROWSERSTATE_REPLAY_ON_SUBSCRIBE",
    "BROWSERSTATE_TRACE_ACTIONS",
    "BROWSERSTATE_FORCE_ALL_TIPS",
    "BROWSERSTATE_TIP_SEED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env() -> None:
    assert BrowserStateConfig.from_env() == BrowserStateConfig()


def test_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSERSTATE_REPLAY_ON_SUBSCRIBE", "yes")
    monkeypatch.setenv("BROWSERSTATE_TRACE_ACTIONS", "1")
    monkeypatch.setenv("BROWSERSTATE_FORCE_ALL_TIPS", "on")
    monkeypatch.setenv("BROWSERSTATE_TIP_SEED", " 42 ")

    config = BrowserStateConfig.from_env()

    assert config == BrowserStateConfig(
        replay_on_subscribe=True,
        trace_actions=True,
        force_all_tips=True,
        tip_random_seed=42,
    )


def test_unrecognised_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSERSTATE_TRACE_ACTIONS", "maybe")

    assert BrowserStateConfig.from_env().trace_actions is False


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSERSTATE_FORCE_ALL_TIPS", "true")
    monkeypatch.setenv("BROWSERSTATE_TIP_SEED", "not-a-number")

    config = BrowserStateConfig.from_env(force_all_tips=False, tip_random_seed=3)

    assert config.force_all_tips is False
    assert config.tip_random_seed == 3


def test_bad_seed_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSERSTATE_TIP_SEED", "abc")

    with pytest.raises(BrowserStateConfigError) as excinfo:
        BrowserStateConfig.from_env()

    assert excinfo.value.variable == "BROWSERSTATE_TIP_SEED"
    assert isinstance(excinfo.value, BrowserStateError)


def test_env_kept_for_fields_not_overridden(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BROWSERSTATE_FORCE_ALL_TIPS", "true")
    monkeypatch.setenv("BROWSERSTATE_TIP_SEED", "9")

    assert BrowserStateConfig.from_env(tip_random_seed=3).force_all_tips is True
    assert BrowserStateConfig.from_env(force_all_tips=False).tip_random_seed == 9
