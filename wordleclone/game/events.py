"""Logical key events fed to the game reducers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

DELETE_CHARS = {"<", "\b", "\x7f", "⌫"}
SUBMIT_CHARS = {"\n", "\r", "↵"}


class KeyKind(str, Enum):
    LETTER = "letter"
    SUBMIT = "submit"
    DELETE = "delete"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    letter: Optional[str] = None

    @classmethod
    def letter_key(cls, ch: str) -> "KeyEvent":
        ch = ch.upper()
        if len(ch) != 1 or not "A" <= ch <= "Z":
            raise ValueError(f"not an A-Z key: {ch!r}")
        return cls(KeyKind.LETTER, ch)


SUBMIT = KeyEvent(KeyKind.SUBMIT)
DELETE = KeyEvent(KeyKind.DELETE)


def parse_keys(text: str, submit: bool = True) -> List[KeyEvent]:
    """
    Turn a typed line into key events.

    Letters become LETTER events, '<' (or backspace) becomes DELETE, a
    newline becomes SUBMIT. Other characters are ignored. With `submit`, a
    SUBMIT is appended at the end of the line unless one is already there.
    """
    events: List[KeyEvent] = []
    for ch in text:
        if ch in DELETE_CHARS:
            events.append(DELETE)
        elif ch in SUBMIT_CHARS:
            events.append(SUBMIT)
        elif ch.isascii() and ch.isalpha():
            events.append(KeyEvent.letter_key(ch))
    if submit and (not events or events[-1] != SUBMIT):
        events.append(SUBMIT)
    return events
