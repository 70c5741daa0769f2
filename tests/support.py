"""Scripted stand-ins for the console boundaries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from core.errors import SoftDeleteError
from core.models import Page
from core.services.bulk_delete import delete_all
from core.services.interfaces import DeleteResult


class ScriptedPrompter:
    """Replays canned answers; raises EOFError once they run out."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError("script exhausted")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class RecordingDisplay:
    def __init__(self) -> None:
        self.messages: list[str] = []
        self.summaries: list[dict[str, int]] = []
        self.extension_lists: list[list[str]] = []
        self.pages: list[Page] = []
        self.delete_results: list[tuple[str, DeleteResult]] = []

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def show_summary(self, counts: Mapping[str, int]) -> None:
        self.summaries.append(dict(counts))

    def show_extensions(self, keys: Sequence[str]) -> None:
        self.extension_lists.append(list(keys))

    def show_page(self, page: Page) -> None:
        self.pages.append(page)

    def show_delete_result(self, extension: str, result: DeleteResult) -> None:
        self.delete_results.append((extension, result))

    def text(self) -> str:
        return "\n".join(self.messages)


class FakeDeleter:
    """Records calls and fails for any path in `failing`."""

    def __init__(self, failing: Iterable[str] = ()) -> None:
        self.failing = set(failing)
        self.calls: list[tuple[str, list[str]]] = []
        self.trashed: list[str] = []

    def soft_delete(self, path: str) -> None:
        if path in self.failing:
            raise SoftDeleteError(path, "Permission denied")
        self.trashed.append(path)

    def execute_delete(self, extension: str, paths: list[str]) -> DeleteResult:
        self.calls.append((extension, list(paths)))
        return delete_all(paths, self.soft_delete)
