"""Console implementations of the prompter and display boundaries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import sys
from typing import TextIO

from core.models import Page
from core.services.extension_index import display_key
from core.services.interfaces import DeleteResult


class ConsolePrompter:
    """Reads operator input from stdin via `input()`."""

    def ask(self, prompt: str) -> str:
        return input(prompt)


class ConsoleDisplay:
    """Renders core results as plain text lines."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, text: str = "") -> None:
        print(text, file=self._stream or sys.stdout)

    def show_message(self, text: str) -> None:
        self._write(text)

    def show_summary(self, counts: Mapping[str, int]) -> None:
        if not counts:
            self._write("\nNo files found.")
            return
        self._write("\nFile counts by extension:")
        width = max(len(display_key(key)) for key in counts)
        for key, count in counts.items():
            self._write(f"  {display_key(key):<{width}}  {count} file(s)")
        self._write(f"Total: {sum(counts.values())} file(s) in {len(counts)} extension(s)")

    def show_extensions(self, keys: Sequence[str]) -> None:
        if not keys:
            self._write("\nNo extensions indexed.")
            return
        self._write("\nExtensions:")
        self._write("  " + ", ".join(display_key(key) for key in keys))

    def show_page(self, page: Page) -> None:
        self._write(
            f"\n-- Page {page.number}: files {page.start + 1}-{page.end} of {page.total} --"
        )
        for path in page.items:
            self._write(f"  {path}")

    def show_delete_result(self, extension: str, result: DeleteResult) -> None:
        label = display_key(extension)
        for path, reason in result.failed:
            self._write(f"  Failed: {path} ({reason})")
        self._write(
            f"{len(result.success_paths)} {label} file(s) moved to trash, "
            f"{len(result.failed)} failed."
        )
        if result.log_path:
            self._write(f"Delete log: {result.log_path}")
