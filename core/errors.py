"""Exception types shared across the core, infrastructure and app layers."""

from __future__ import annotations


class ExtensionSweeperError(Exception):
    """Base class for all errors raised by this application."""


class ValidationError(ExtensionSweeperError):
    """Operator input (usually the root path) was rejected."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason


class SoftDeleteError(ExtensionSweeperError):
    """Moving a single path to the trash failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(ExtensionSweeperError):
    """Invalid configuration or caller misuse, e.g. a non-positive page size."""
