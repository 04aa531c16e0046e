"""Unidirectional in-memory state store.

This is the only component allowed to replace the current state.  It
is designed to be deterministic: given the same initial state and the
same sequence of actions, subscribers observe the same snapshots in the
same order.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pybrowserstate.config import BrowserStateConfig
from pybrowserstate.models.state import BrowserState
from pybrowserstate.state.actions import BrowserAction
from pybrowserstate.state.reducer import browser_state_reducer

_logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


def _callback_name(callback: Callable[..., object]) -> str:
    return getattr(callback, "__qualname__", repr(callback))


class Subscription(Generic[S]):
    """Handle returned by :meth:`Store.subscribe`.

    Calling :meth:`unsubscribe` (or the handle itself) removes the
    callback for good.  Further calls are no-ops.
    """

    def __init__(self, store: Store[S, Any], callback: Callable[[S], None]) -> None:
        self._store = store
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        """Whether the callback still receives notifications."""
        return self._active

    def unsubscribe(self) -> None:
        self._store._remove(self)  # noqa: SLF001

    def __call__(self) -> None:
        self.unsubscribe()

    def _deliver(self, state: S) -> None:
        if not self._active:
            return
        try:
            self._callback(state)
        except Exception:
            _logger.warning("Subscriber %s failed", _callback_name(self._callback), exc_info=True)


class Store(Generic[S, A]):
    """Holds one immutable state snapshot and publishes every new one.

    ``dispatch`` runs ``reducer(current, action)``, stores the result and
    notifies subscribers in subscription order before returning.  A
    dispatch issued from inside a subscriber callback is queued and
    handled once the current notification cycle completes, in the order
    the actions were issued.

    All public operations share one re-entrant lock, so dispatch,
    subscribe and unsubscribe are linearizable across threads.
    """

    def __init__(
        self,
        initial_state: S,
        reducer: Callable[[S, A], S],
        *,
        replay_on_subscribe: bool = False,
        trace_actions: bool = False,
    ) -> None:
        self._state = initial_state
        self._reducer = reducer
        self._replay_on_subscribe = replay_on_subscribe
        self._trace_actions = trace_actions
        self._lock = threading.RLock()
        self._subscriptions: list[Subscription[S]] = []
        self._pending: deque[A] = deque()
        self._dispatching = False

    @property
    def state(self) -> S:
        """Latest snapshot."""
        return self._state

    def current_state(self) -> S:
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def dispatch(self, action: A) -> None:
        """Reduce *action* into a new state and notify subscribers."""
        with self._lock:
            self._pending.append(action)
            if self._dispatching:
                _logger.debug("Queued nested dispatch action=%s pending=%d", action, len(self._pending))
                return

            self._dispatching = True
            try:
                while self._pending:
                    self._process(self._pending.popleft())
            finally:
                # Non-empty only if the reducer raised.
                self._pending.clear()
                self._dispatching = False

    def _process(self, action: A) -> None:
        new_state = self._reducer(self._state, action)
        if self._trace_actions:
            _logger.debug("Reduced action=%r state=%r", action, new_state)
        self._state = new_state

        # Snapshot: subscribers added during this cycle start with the next state.
        for subscription in list(self._subscriptions):
            subscription._deliver(new_state)  # noqa: SLF001

    def subscribe(self, callback: Callable[[S], None]) -> Subscription[S]:
        """Register *callback* for every state produced from now on.

        With ``replay_on_subscribe`` the callback is also called once,
        immediately, with the current state.
        """
        with self._lock:
            subscription: Subscription[S] = Subscription(self, callback)
            self._subscriptions.append(subscription)
            _logger.debug(
                "Subscriber added %s total=%d",
                _callback_name(callback),
                len(self._subscriptions),
            )
            if self._replay_on_subscribe:
                subscription._deliver(self._state)  # noqa: SLF001
            return subscription

    def _remove(self, subscription: Subscription[S]) -> None:
        with self._lock:
            if not subscription._active:  # noqa: SLF001
                return
            subscription._active = False  # noqa: SLF001
            self._subscriptions.remove(subscription)
            _logger.debug("Subscriber removed total=%d", len(self._subscriptions))


class BrowserStore(Store[BrowserState, BrowserAction]):
    """Store for the browser screen.

    Usage::

        store = BrowserStore()
        unsubscribe = store.subscribe(render)
        store.dispatch(BookmarkedStateChange(bookmarked=True))
    """

    def __init__(
        self,
        initial_state: BrowserState | None = None,
        *,
        config: BrowserStateConfig | None = None,
    ) -> None:
        config = config or BrowserStateConfig()
        super().__init__(
            initial_state if initial_state is not None else BrowserState.initial(),
            browser_state_reducer,
            replay_on_subscribe=config.replay_on_subscribe,
            trace_actions=config.trace_actions,
        )
