"""Core domain models for scanned files, pages and delete outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class FileEntry:
    """A regular file found under the scanned root."""

    path: str
    name: str


@dataclass(frozen=True)
class ScanWarning:
    """An entry skipped during traversal, with the reason it was skipped."""

    path: str
    reason: str


@dataclass
class ScanResult:
    """Everything one traversal of a root produced."""

    root: str
    entries: list[FileEntry] = field(default_factory=list)
    warnings: list[ScanWarning] = field(default_factory=list)


@dataclass(frozen=True)
class Page:
    """One bounded slice of an ordered sequence.

    Attributes:
        number: 1-based page number.
        items: Items on this page, in source order.
        start: 0-based offset of the first item in the source sequence.
        total: Length of the source sequence.
        has_more: Whether a further page exists.
    """

    number: int
    items: tuple[str, ...]
    start: int
    total: int
    has_more: bool

    @property
    def end(self) -> int:
        """Offset one past the last item of this page."""
        return self.start + len(self.items)


class DeleteStatus(Enum):
    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True)
class DeleteOutcome:
    """Result of soft-deleting one path."""

    path: str
    status: DeleteStatus
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is DeleteStatus.DELETED


class Command(Enum):
    """Operator commands available from the main menu."""

    VIEW_COUNTS = "view_counts"
    BROWSE = "browse"
    DELETE = "delete"
    LIST_EXTENSIONS = "list_extensions"
    REFRESH = "refresh"
    CHANGE_ROOT = "change_root"
    EXIT = "exit"
