"""Main menu definition and the prompts built on top of a `Prompter`."""

from __future__ import annotations

from core.models import Command
from core.services.extension_index import normalize_extension
from core.services.interfaces import Display, Prompter

# (key, label, command) in display order
MENU_OPTIONS: list[tuple[str, str, Command]] = [
    ("1", "View file counts by extension", Command.VIEW_COUNTS),
    ("2", "Browse files by extension", Command.BROWSE),
    ("3", "Delete files by extension", Command.DELETE),
    ("4", "List extensions", Command.LIST_EXTENSIONS),
    ("5", "Refresh index", Command.REFRESH),
    ("6", "Change root directory", Command.CHANGE_ROOT),
    ("7", "Exit", Command.EXIT),
]

ROOT_PROMPT = "Enter the path to scan: "
CHANGE_ROOT_PROMPT = "Enter the new path to scan (blank to keep the current one): "
EXTENSION_PROMPT = "Enter a file extension (without the dot, blank for files without one): "
_YES = frozenset({"y", "yes"})
_NO = frozenset({"", "n", "no"})


def menu_lines() -> list[str]:
    return ["", *(f"{key}. {label}" for key, label, _ in MENU_OPTIONS)]


def read_command(prompter: Prompter, display: Display) -> Command:
    """Show the menu and block until a listed option is chosen."""
    by_key = {key: command for key, _, command in MENU_OPTIONS}
    while True:
        for line in menu_lines():
            display.show_message(line)
        choice = prompter.ask("Choose an option: ").strip()
        command = by_key.get(choice)
        if command is not None:
            return command
        display.show_message(f"Invalid option {choice!r}, please try again.")


def read_extension(prompter: Prompter) -> str:
    """Ask for an extension and return it as an index key."""
    return normalize_extension(prompter.ask(EXTENSION_PROMPT))


def confirm(prompter: Prompter, display: Display, question: str) -> bool:
    """Ask a yes/no question; blank means no, anything unrecognized asks again."""
    while True:
        answer = prompter.ask(f"{question} [y/N]: ").strip().lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        display.show_message(f"Please answer 'y' or 'n', not {answer!r}.")
