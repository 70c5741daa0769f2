"""Core service interfaces and shared data structures.

This module defines the capabilities the core consumes (operator input,
display output and the soft-delete primitive) and the aggregated result of
a bulk delete used across the infrastructure and app layers.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from core.models import DeleteOutcome, Page

SoftDeleteFn = Callable[[str], None]
"""Moves one path to the trash; raises `SoftDeleteError` on failure."""


@dataclass
class DeleteResult:
    """Outcome of a bulk delete operation.

    Attributes:
        outcomes: One outcome per requested path, in request order.
        log_path: Optional path to the CSV audit log for this run.
    """

    outcomes: list[DeleteOutcome]
    log_path: str | None = None

    @property
    def success_paths(self) -> list[str]:
        """Paths moved to the trash."""
        return [o.path for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[tuple[str, str]]:
        """Tuples of (path, reason) for failures."""
        return [(o.path, o.reason) for o in self.outcomes if not o.ok]

    @property
    def all_succeeded(self) -> bool:
        return all(o.ok for o in self.outcomes)


class Prompter(Protocol):
    """Blocking operator input, one line at a time."""

    def ask(self, prompt: str) -> str:
        """Show `prompt` and return the operator's reply without the newline."""
        ...


class Display(Protocol):
    """Output-only rendering boundary."""

    def show_message(self, text: str) -> None:
        """Show a free-form line of text."""
        ...

    def show_summary(self, counts: Mapping[str, int]) -> None:
        """Show file counts keyed by extension."""
        ...

    def show_extensions(self, keys: Sequence[str]) -> None:
        """Show the known extension keys."""
        ...

    def show_page(self, page: Page) -> None:
        """Show one page of paths."""
        ...

    def show_delete_result(self, extension: str, result: DeleteResult) -> None:
        """Show the per-path outcome of a bulk delete."""
        ...
