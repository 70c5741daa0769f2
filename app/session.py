"""Interactive session controller.

Owns the current root and extension index and dispatches operator commands.
The index is replaced by value on refresh, never mutated, so every command
works against one consistent snapshot.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import os
from pathlib import Path
from typing import Protocol

from loguru import logger

from app.menu import (
    CHANGE_ROOT_PROMPT,
    ROOT_PROMPT,
    confirm,
    read_command,
    read_extension,
)
from core.errors import ConfigurationError, ValidationError
from core.models import Command, ScanResult
from core.services.extension_index import ExtensionIndex, display_key
from core.services.interfaces import DeleteResult, Display, Prompter
from core.services.paginator import browse, paginate
from infrastructure.scanner import scan, validate_root

MAX_WARNINGS_SHOWN = 5


class SessionState(Enum):
    AWAITING_ROOT = "awaiting_root"
    READY = "ready"
    SUMMARIZING = "summarizing"
    BROWSING = "browsing"
    DELETING = "deleting"
    LISTING_EXTENSIONS = "listing_extensions"
    REFRESHING = "refreshing"
    TERMINATED = "terminated"


_COMMAND_STATES: dict[Command, SessionState] = {
    Command.VIEW_COUNTS: SessionState.SUMMARIZING,
    Command.BROWSE: SessionState.BROWSING,
    Command.DELETE: SessionState.DELETING,
    Command.LIST_EXTENSIONS: SessionState.LISTING_EXTENSIONS,
    Command.REFRESH: SessionState.REFRESHING,
    Command.CHANGE_ROOT: SessionState.AWAITING_ROOT,
    Command.EXIT: SessionState.TERMINATED,
}


class Deleter(Protocol):
    """Anything that can trash a batch of paths for one extension."""

    def execute_delete(self, extension: str, paths: list[str]) -> DeleteResult:
        """Trash `paths` and return one outcome per path."""
        ...


class SessionController:
    """State machine driving one interactive session."""

    def __init__(
        self,
        prompter: Prompter,
        display: Display,
        deleter: Deleter,
        page_size: int = 20,
        confirm_delete: bool = True,
        scanner: Callable[[str], ScanResult] = scan,
    ) -> None:
        """Create a SessionController.

        Args:
            prompter: Source of operator input.
            display: Output boundary.
            deleter: Service performing bulk soft deletes.
            page_size: Paths per page while browsing.
            confirm_delete: Ask before moving files to trash.
            scanner: Traversal function, `scan` by default.
        """
        self._prompter = prompter
        self._display = display
        self._deleter = deleter
        self._page_size = page_size
        self._confirm_delete = confirm_delete
        self._scanner = scanner
        self.state = SessionState.AWAITING_ROOT
        self.root: Path | None = None
        self.index = ExtensionIndex()

    def run(self) -> None:
        """Process commands until the operator exits."""
        while self.state is not SessionState.TERMINATED:
            self.step()
        logger.info("Session terminated")

    def step(self) -> None:
        """Advance the state machine by one prompt or one command."""
        if self.state is SessionState.AWAITING_ROOT:
            self._await_root()
        elif self.state is SessionState.READY:
            command = read_command(self._prompter, self._display)
            logger.debug("Command: {}", command.value)
            self.state = _COMMAND_STATES[command]
            if self.state not in (SessionState.AWAITING_ROOT, SessionState.TERMINATED):
                self._dispatch()
        else:
            self._dispatch()

    def _dispatch(self) -> None:
        handlers = {
            SessionState.SUMMARIZING: self._show_counts,
            SessionState.BROWSING: self._browse,
            SessionState.DELETING: self._delete,
            SessionState.LISTING_EXTENSIONS: self._list_extensions,
            SessionState.REFRESHING: self.refresh,
        }
        try:
            handlers[self.state]()
        finally:
            self.state = SessionState.READY

    def _await_root(self) -> None:
        if self.root is None:
            answer = self._prompter.ask(ROOT_PROMPT)
        else:
            answer = self._prompter.ask(CHANGE_ROOT_PROMPT)
            if not answer.strip():
                self._display.show_message(f"Keeping {self.root}")
                self.state = SessionState.READY
                return
        try:
            root = validate_root(answer)
        except ValidationError as ex:
            logger.warning("Rejected root: {}", ex)
            self._display.show_message(f"{ex.reason}: {ex.value}")
            return
        self.index = self._build_index(root)
        self.root = root
        self.state = SessionState.READY

    def refresh(self) -> None:
        """Rebuild the index from the current root and swap it in."""
        if self.root is None:
            self._display.show_message("No root directory selected.")
            return
        self.index = self._build_index(self.root)

    def _build_index(self, root: Path) -> ExtensionIndex:
        result = self._scanner(os.fspath(root))
        index = ExtensionIndex.build(result.entries)
        logger.info("Indexed {}: {!r}", root, index)
        self._display.show_message(
            f"Indexed {index.total_files} file(s) in {len(index)} extension(s) under {root}"
        )
        if result.warnings:
            self._display.show_message(
                f"Skipped {len(result.warnings)} unreadable entr"
                f"{'y' if len(result.warnings) == 1 else 'ies'}:"
            )
            for warning in result.warnings[:MAX_WARNINGS_SHOWN]:
                self._display.show_message(f"  {warning.path} ({warning.reason})")
            if len(result.warnings) > MAX_WARNINGS_SHOWN:
                self._display.show_message(
                    f"  ... and {len(result.warnings) - MAX_WARNINGS_SHOWN} more (see log)"
                )
        return index

    def _show_counts(self) -> None:
        self._display.show_summary(self.index.summary())

    def _list_extensions(self) -> None:
        self._display.show_extensions(self.index.sorted_keys())

    def _browse(self) -> None:
        index = self.index
        key = read_extension(self._prompter)
        paths = index.paths(key)
        if not paths:
            self._display.show_message(f"No files found with extension {display_key(key)}")
            return
        try:
            pages = paginate(paths, self._page_size)
        except ConfigurationError as ex:
            logger.error("Cannot browse: {}", ex)
            self._display.show_message(f"Configuration error: {ex}")
            return
        browse(pages, self._prompter, self._display)

    def _delete(self) -> None:
        index = self.index
        key = read_extension(self._prompter)
        paths = list(index.paths(key))
        label = display_key(key)
        if not paths:
            self._display.show_message(f"No files found with extension {label}")
            return
        if self._confirm_delete and not confirm(
            self._prompter, self._display, f"Move {len(paths)} {label} file(s) to trash?"
        ):
            self._display.show_message("Delete cancelled.")
            return
        result = self._deleter.execute_delete(key, paths)
        self._display.show_delete_result(key, result)
        self._display.show_message("Run 'Refresh index' to update the file counts.")
