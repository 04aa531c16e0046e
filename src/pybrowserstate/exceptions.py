"""Custom exception hierarchy for pybrowserstate."""

from __future__ import annotations


class BrowserStateError(Exception):
    """Base exception for all pybrowserstate errors."""


class BrowserStateConfigError(BrowserStateError):
    """Invalid configuration value.

    Raised by :meth:`pybrowserstate.config.BrowserStateConfig.from_env`
    when an environment variable holds a value that cannot be parsed
    into the field's type.
    """

    def __init__(self, message: str, *, variable: str = "") -> None:
        self.variable = variable
        super().__init__(message)
