"""User-facing prompt surfaces."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol


class PromptSurface(Protocol):
    """Presents choices to the user and shows short acknowledgments."""

    def choose(self, message: str, choices: Sequence[str]) -> str | None:
        """Return the selected label, or ``None`` when nothing was selected."""
        ...

    def inform(self, message: str) -> None: ...


class ConsolePromptSurface:
    """Numbered-menu prompt on a terminal.

    Input can be either the choice number or its label (case-insensitive).
    An empty answer, an unrecognized answer or end of input counts as no
    selection.
    """

    def __init__(
        self,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    def choose(self, message: str, choices: Sequence[str]) -> str | None:
        self._write(message)
        for index, label in enumerate(choices, start=1):
            self._write(f"  {index}) {label}")
        try:
            answer = self._read("> ").strip()
        except EOFError:
            return None
        return match_choice(answer, choices)

    def inform(self, message: str) -> None:
        self._write(message)


class AutoPromptSurface:
    """Non-interactive surface that always picks the same answer."""

    def __init__(self, answer: str | None, *, write: Callable[[str], None] = print) -> None:
        self._answer = answer
        self._write = write

    def choose(self, message: str, choices: Sequence[str]) -> str | None:
        return self._answer if self._answer in choices else None

    def inform(self, message: str) -> None:
        self._write(message)


def match_choice(answer: str, choices: Sequence[str]) -> str | None:
    """Resolve a typed answer to one of ``choices``."""
    if not answer:
        return None
    if answer.isdigit():
        index = int(answer) - 1
        return choices[index] if 0 <= index < len(choices) else None
    lowered = answer.lower()
    for label in choices:
        if label.lower() == lowered:
            return label
    return None
