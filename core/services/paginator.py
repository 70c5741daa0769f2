"""Pagination of ordered sequences and the interactive browsing protocol.

`paginate` is a pure utility; `browse` drives it against a prompter and a
display so it can be exercised with scripted input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from loguru import logger

from core.errors import ConfigurationError
from core.models import Page
from core.services.interfaces import Display, Prompter

CONTINUE_TOKENS = frozenset({"", "n", "next", "y", "yes"})
CANCEL_TOKENS = frozenset({"q", "quit", "b", "back"})
MORE_PROMPT = "Press Enter or type 'next' for more, 'quit' to return: "


@dataclass(frozen=True)
class BrowseResult:
    pages_shown: int
    cancelled: bool


def validate_page_size(page_size: object) -> int:
    """Return `page_size` if it is a positive int, else raise `ConfigurationError`."""
    # bool is an int subclass but never a meaningful size
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise ConfigurationError(f"page size must be an integer, got {page_size!r}")
    if page_size <= 0:
        raise ConfigurationError(f"page size must be positive, got {page_size}")
    return page_size


def paginate(sequence: Sequence[str], page_size: int) -> Iterator[Page]:
    """Expose `sequence` as consecutive pages of `page_size` items.

    The size is validated before the first page is requested. The last page
    may be shorter; an empty sequence produces no pages. Call again to
    restart from the first page.
    """
    size = validate_page_size(page_size)
    return _iter_pages(tuple(sequence), size)


def _iter_pages(items: tuple[str, ...], size: int) -> Iterator[Page]:
    total = len(items)
    for number, start in enumerate(range(0, total, size), start=1):
        chunk = items[start : start + size]
        yield Page(
            number=number,
            items=chunk,
            start=start,
            total=total,
            has_more=start + size < total,
        )


def browse(pages: Iterable[Page], prompter: Prompter, display: Display) -> BrowseResult:
    """Show pages one at a time until the last page or an explicit cancel."""
    shown = 0
    for page in pages:
        display.show_page(page)
        shown += 1
        if not page.has_more:
            return BrowseResult(pages_shown=shown, cancelled=False)
        if not _ask_for_more(prompter, display):
            logger.info("Browsing cancelled after page {}", page.number)
            return BrowseResult(pages_shown=shown, cancelled=True)
    return BrowseResult(pages_shown=shown, cancelled=False)


def _ask_for_more(prompter: Prompter, display: Display) -> bool:
    while True:
        answer = prompter.ask(MORE_PROMPT).strip().lower()
        if answer in CONTINUE_TOKENS:
            return True
        if answer in CANCEL_TOKENS:
            return False
        display.show_message(f"Unrecognized answer {answer!r}, type 'next' or 'quit'.")
