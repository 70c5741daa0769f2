"""Extension index: files under a root grouped by normalized extension.

The index is an immutable snapshot. It never observes the filesystem after
`ExtensionIndex.build` returns; callers rebuild it to pick up changes.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Mapping
import os

from core.models import FileEntry

NO_EXTENSION_LABEL = "(no extension)"


def extension_key(path: str) -> str:
    """Return the lower-case suffix of the final path component, without the dot.

    `Makefile`, `.gitignore` and `name.` all map to the empty key.
    """
    _stem, ext = os.path.splitext(os.path.basename(path))
    return ext[1:].lower()


def normalize_extension(text: str) -> str:
    """Turn operator input such as ``".TXT"`` or ``" md "`` into an index key."""
    return text.strip().lstrip(".").lower()


def display_key(key: str) -> str:
    """Human-readable label for `key`."""
    return key if key else NO_EXTENSION_LABEL


class ExtensionIndex:
    """Maps extension keys to the sorted paths having that extension."""

    def __init__(self, buckets: Mapping[str, Iterable[str]] | None = None) -> None:
        self._buckets: dict[str, tuple[str, ...]] = {
            key: tuple(sorted(paths)) for key, paths in (buckets or {}).items()
        }

    @classmethod
    def build(cls, entries: Iterable[FileEntry | str]) -> ExtensionIndex:
        """Group `entries` by extension key and sort each bucket by path."""
        grouped: dict[str, list[str]] = defaultdict(list)
        for entry in entries:
            path = entry.path if isinstance(entry, FileEntry) else os.fspath(entry)
            grouped[extension_key(path)].append(path)
        return cls(grouped)

    def keys(self) -> frozenset[str]:
        return frozenset(self._buckets)

    def sorted_keys(self) -> list[str]:
        return sorted(self._buckets)

    def count(self, key: str) -> int:
        """Number of files with extension `key` (0 if absent)."""
        return len(self._buckets.get(normalize_extension(key), ()))

    def paths(self, key: str) -> tuple[str, ...]:
        """Sorted paths with extension `key` (empty if absent)."""
        return self._buckets.get(normalize_extension(key), ())

    def summary(self) -> dict[str, int]:
        """Counts per key, ordered by key."""
        return {key: len(self._buckets[key]) for key in self.sorted_keys()}

    @property
    def total_files(self) -> int:
        return sum(len(paths) for paths in self._buckets.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_extension(key) in self._buckets

    def __iter__(self) -> Iterator[str]:
        return iter(self.sorted_keys())

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"ExtensionIndex(extensions={len(self)}, files={self.total_files})"
