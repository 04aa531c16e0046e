"""Runtime configuration for pybrowserstate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybrowserstate.exceptions import BrowserStateConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise BrowserStateConfigError(f"{name} must be an integer, got {value!r}", variable=name) from exc


@dataclasses.dataclass(frozen=True)
class BrowserStateConfig:
    """Store and tip selector configuration.

    Parameters
    ----------
    replay_on_subscribe : bool
        Call a new subscriber once, immediately, with the current state.
        When ``False`` (the default) subscribers only see states produced
        after they subscribed.
    trace_actions : bool
        Log every reduced action and the resulting state at DEBUG level.
    force_all_tips : bool
        Populate the tip pool with every known tip, ignoring availability.
        Intended for demos and manual testing.
    tip_random_seed : int or None
        Seed for the selector's random fallback.  ``None`` seeds from the
        operating system.
    """

    replay_on_subscribe: bool = False
    trace_actions: bool = False
    force_all_tips: bool = False
    tip_random_seed: int | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> BrowserStateConfig:
        """Create configuration from ``BROWSERSTATE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        BrowserStateConfigError
            If ``BROWSERSTATE_TIP_SEED`` is set to a non-integer value.
        """
        env = os.environ

        _ENV_BOOL_MAP = {
            "BROWSERSTATE_REPLAY_ON_SUBSCRIBE": "replay_on_subscribe",
            "BROWSERSTATE_TRACE_ACTIONS": "trace_actions",
            "BROWSERSTATE_FORCE_ALL_TIPS": "force_all_tips",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_BOOL_MAP.items():
            if field_name in overrides:
                continue
            config_kwargs[field_name] = _env_bool(env.get(env_key), False)

        if "tip_random_seed" not in overrides:
            config_kwargs["tip_random_seed"] = _env_int("BROWSERSTATE_TIP_SEED", env.get("BROWSERSTATE_TIP_SEED"))

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
