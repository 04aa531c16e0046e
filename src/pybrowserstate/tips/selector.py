"""Priority-ranked tip selection."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

from pybrowserstate.config import BrowserStateConfig
from pybrowserstate.models.tip import Tip, TipPriority
from pybrowserstate.tips.catalog import TipCatalog, TipPool, build_forced_tip_pool, build_tip_pool
from pybrowserstate.tips.settings import TipAvailability, TipSettings

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with ``random.Random.choice`` semantics."""

    def choice(self, seq: Sequence[T]) -> T: ...


def _first_with_priority(pool: TipPool, priority: TipPriority) -> Tip | None:
    for tip in pool:
        if tip.priority is priority:
            return tip
    return None


class TipSelector:
    """Picks the tip (if any) to surface from a candidate pool.

    The selector holds one immutable pool.  Selection reads it and never
    changes it.  Whether tips are shown at all is read from *settings*
    on every call, so a user turning tips off takes effect immediately.
    """

    def __init__(
        self,
        settings: TipSettings,
        *,
        pool: Sequence[Tip] = (),
        catalog: TipCatalog | None = None,
        rng: RandomSource | None = None,
        config: BrowserStateConfig | None = None,
    ) -> None:
        self._config = config or BrowserStateConfig()
        self._settings = settings
        self._catalog = catalog or TipCatalog()
        self._rng: RandomSource = rng if rng is not None else random.Random(self._config.tip_random_seed)
        self._pool: TipPool = tuple(pool)

    @property
    def pool(self) -> TipPool:
        return self._pool

    def populate(self, *, force_all: bool | None = None) -> TipPool:
        """Build the pool from the current settings and hold it.

        Replaces any previously held pool, so calling this twice never
        duplicates tips.  ``force_all`` (defaulting to the config's
        ``force_all_tips``) uses every known tip instead.
        """
        if force_all is None:
            force_all = self._config.force_all_tips
        if force_all:
            self._pool = build_forced_tip_pool(self._catalog)
        else:
            self._pool = build_tip_pool(TipAvailability.from_settings(self._settings), self._catalog)
        _logger.debug("Tip pool populated size=%d forced=%s", len(self._pool), force_all)
        return self._pool

    def reset(self) -> None:
        """Drop the held pool."""
        self._pool = ()

    def select(self) -> Tip | None:
        """Return a tip or critical message, or ``None`` when there is nothing to show.

        HIGH beats MEDIUM, both picked as the first match in pool order.
        Otherwise a tip is drawn at random from the *whole* pool.
        """
        pool = self._pool
        if not pool or not self._settings.should_display_tips():
            return None

        for priority in (TipPriority.HIGH, TipPriority.MEDIUM):
            tip = _first_with_priority(pool, priority)
            if tip is not None:
                return tip

        if _first_with_priority(pool, TipPriority.LOW) is None:
            return None
        # Drawn from the full pool, not only the LOW tips.
        return self._rng.choice(pool)

    def select_all(self) -> TipPool:
        """The whole pool in order, or nothing when tips are disabled."""
        if not self._settings.should_display_tips():
            return ()
        return self._pool
